"""
Structured query-string encoder.

Encodes nested field-selection, population and filter trees into the
bracket notation understood by the content API::

    encode_query({"filters": {"slug": {"$eq": "intro"}}, "fields": ["title"]})
    # 'filters[slug][$eq]=intro&fields[0]=title'

Keys are left readable; only values are percent-encoded.
"""

from typing import Any, Dict, List, Mapping, Tuple
from urllib.parse import quote


def _format_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return quote(str(value), safe="")


def _flatten(prefix: str, value: Any) -> List[Tuple[str, str]]:
    if value is None:
        return []

    if isinstance(value, Mapping):
        pairs: List[Tuple[str, str]] = []
        for key, child in value.items():
            pairs.extend(_flatten(f"{prefix}[{key}]", child))
        return pairs

    if isinstance(value, (list, tuple)):
        pairs = []
        for index, child in enumerate(value):
            pairs.extend(_flatten(f"{prefix}[{index}]", child))
        return pairs

    return [(prefix, _format_value(value))]


def encode_query(params: Dict[str, Any]) -> str:
    """
    Encode a nested parameter tree into a query string.

    Args:
        params: Mapping of top-level keys to scalars, lists or nested mappings

    Returns:
        Query string without the leading "?" (empty when nothing to encode)
    """
    pairs: List[Tuple[str, str]] = []
    for key, value in params.items():
        pairs.extend(_flatten(str(key), value))
    return "&".join(f"{key}={value}" for key, value in pairs)
