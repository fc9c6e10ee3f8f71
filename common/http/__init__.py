"""
HTTP module - Content API transport and query encoding.
"""

from common.http.client import ContentAPIClient
from common.http.query import encode_query

__all__ = ["ContentAPIClient", "encode_query"]
