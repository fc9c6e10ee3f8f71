"""
Service wiring.

Builds the content API client and services once and hands out the shared
instances.
"""

from typing import Optional

from common.http import ContentAPIClient
from common.utils import configure_logging

from app.config import settings
from app.services import CatalogService, UserService, CourseStatusService


_client: Optional[ContentAPIClient] = None
_catalog_service: Optional[CatalogService] = None
_user_service: Optional[UserService] = None
_course_status_service: Optional[CourseStatusService] = None


def init_services(client: Optional[ContentAPIClient] = None) -> None:
    """
    Initialize services.

    Called once at application startup.

    Args:
        client: Pre-built client; built from settings when omitted
    """
    global _client, _catalog_service, _user_service, _course_status_service

    configure_logging(settings.LOG_LEVEL)

    if client is None:
        settings.validate_required()
        client = ContentAPIClient.from_settings(settings)

    _client = client
    _catalog_service = CatalogService(
        client,
        categories_path=settings.CATEGORIES_PATH,
        courses_path=settings.COURSES_PATH,
    )
    _user_service = UserService(client, current_user_path=settings.CURRENT_USER_PATH)
    _course_status_service = CourseStatusService(
        client,
        _user_service,
        course_statuses_path=settings.COURSE_STATUSES_PATH,
    )


def get_catalog_service() -> CatalogService:
    """Get catalog service instance."""
    if _catalog_service is None:
        raise RuntimeError("Services not initialized.")
    return _catalog_service


def get_user_service() -> UserService:
    """Get user service instance."""
    if _user_service is None:
        raise RuntimeError("Services not initialized.")
    return _user_service


def get_course_status_service() -> CourseStatusService:
    """Get course status service instance."""
    if _course_status_service is None:
        raise RuntimeError("Services not initialized.")
    return _course_status_service
