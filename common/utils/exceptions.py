"""
Client-side exceptions with error codes.

Only errors detected by this layer are raised from here. Failures reported
by the content API (4xx/5xx) or by the network surface as the original
httpx exceptions and are never wrapped.

Example:
    from common.utils import CourseNotFoundException

    courses = body["data"]
    if not courses:
        raise CourseNotFoundException(slug)
"""

from typing import Optional, Any, Dict


class APIException(Exception):
    """
    Base client exception with error code support.

    Mirrors the error body shape used by the content API so callers can
    render local and remote errors the same way.
    """

    def __init__(
        self,
        status_code: int,
        message: str,
        code: Optional[str] = None,
        details: Optional[Any] = None,
    ):
        """
        Create a client exception.

        Args:
            status_code: Equivalent HTTP status code
            message: Human-readable error message
            code: Machine-readable error code
            details: Additional error details
        """
        super().__init__(message)
        self.status_code = status_code
        self.message = message
        self.code = code
        self.details = details

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to the standard error body."""
        detail: Dict[str, Any] = {"message": self.message}

        if self.code:
            detail["code"] = self.code

        if self.details is not None:
            detail["details"] = self.details

        return detail


class NotFoundException(APIException):
    """404 Not Found - Resource doesn't exist."""

    def __init__(
        self,
        message: str = "Not found",
        code: str = "NOT_FOUND",
        details: Optional[Any] = None,
    ):
        super().__init__(404, message, code, details)


class CourseNotFoundException(NotFoundException):
    """No course matches the requested slug."""

    def __init__(self, slug: str):
        super().__init__(
            message=f"Course with slug '{slug}' not found.",
            code="COURSE_NOT_FOUND",
            details={"slug": slug},
        )
        self.slug = slug
