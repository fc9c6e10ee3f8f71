"""
Utilities module - Common exceptions and logging setup.
"""

from common.utils.exceptions import (
    APIException,
    NotFoundException,
    CourseNotFoundException,
)
from common.utils.log_config import configure_logging

__all__ = [
    "APIException",
    "NotFoundException",
    "CourseNotFoundException",
    "configure_logging",
]
