"""
Application settings.

Extends the base settings with course-catalog specific configuration.
"""

from common.config import BaseAppSettings


class Settings(BaseAppSettings):
    """Course catalog client settings."""

    # ==========================================================================
    # Endpoints (relative to CONTENT_API_URL)
    # ==========================================================================
    CATEGORIES_PATH: str = "/categories"
    COURSES_PATH: str = "/courses"
    CURRENT_USER_PATH: str = "/users/me"
    COURSE_STATUSES_PATH: str = "/course-statuses"


settings = Settings()
