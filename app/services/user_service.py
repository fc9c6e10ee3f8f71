"""
User service.

Reads the authenticated user and their course statuses.
"""

import logging
from typing import Optional, Tuple, Dict, Any

from common.http import ContentAPIClient

from app.schemas.course_status import CourseStatus
from app.schemas.user import User
from app.services.course_status_merger import find_course_status

logger = logging.getLogger(__name__)


COURSE_STATUS_POPULATE: Dict[str, Any] = {
    "course": {
        "fields": ["documentId"],
    },
    "sections": {
        "populate": {
            "section": {
                "fields": ["documentId"],
            },
            "modules": {
                "populate": {
                    "module": {
                        "fields": ["documentId"],
                    },
                },
            },
        },
    },
}

COURSE_STATUS_FIELDS = ["documentId", "progress", "isFavourite"]


class UserService:
    """
    Access to the authenticated user's profile and progress records.
    """

    def __init__(self, client: ContentAPIClient, current_user_path: str = "/users/me"):
        self._client = client
        self._current_user_path = current_user_path

    async def fetch_authenticated_user(self) -> User:
        """
        Get the authenticated user's profile without relations.

        Returns:
            The current user
        """
        body = await self._client.get(self._current_user_path)
        return User.model_validate(body)

    async def fetch_user_data(self) -> User:
        """
        Get the authenticated user with all course statuses populated.

        Returns:
            The current user with courseStatuses -> sections -> modules
        """
        query = {
            "populate": {
                "courseStatuses": {
                    "fields": COURSE_STATUS_FIELDS,
                    "populate": COURSE_STATUS_POPULATE,
                },
            },
        }
        body = await self._client.get(self._current_user_path, query=query)
        return User.model_validate(body)

    async def fetch_user_course_status(
        self,
        course_id: str
    ) -> Tuple[User, Optional[CourseStatus]]:
        """
        Get the authenticated user and their status for one course.

        Only statuses for the given course are populated, so a single
        request returns both the user id and the record to merge into.

        Args:
            course_id: Course documentId

        Returns:
            Tuple of (user, course status or None)
        """
        query = {
            "populate": {
                "courseStatuses": {
                    "filters": {"course": {"documentId": {"$eq": course_id}}},
                    "fields": COURSE_STATUS_FIELDS,
                    "populate": COURSE_STATUS_POPULATE,
                },
            },
        }
        body = await self._client.get(self._current_user_path, query=query)
        user = User.model_validate(body)

        status = find_course_status(user.courseStatuses, course_id)
        logger.debug(
            f"User {user.id} has {'a' if status else 'no'} status for course {course_id}"
        )
        return user, status
