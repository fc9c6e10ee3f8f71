"""Content API services."""

from app.services.catalog_service import CatalogService
from app.services.user_service import UserService
from app.services.course_status_service import CourseStatusService

__all__ = [
    "CatalogService",
    "UserService",
    "CourseStatusService",
]
