"""
Common library for reusable infrastructure components.

This package provides generic modules that can be used across projects:

- http: Async content API client and structured query encoding
- utils: Exceptions and logging setup
- config: Base settings class
"""

from common.http import ContentAPIClient, encode_query
from common.utils import (
    APIException,
    NotFoundException,
    CourseNotFoundException,
    configure_logging,
)
from common.config import BaseAppSettings

__all__ = [
    # HTTP
    "ContentAPIClient",
    "encode_query",
    # Utils
    "APIException",
    "NotFoundException",
    "CourseNotFoundException",
    "configure_logging",
    # Config
    "BaseAppSettings",
]
