"""
Course status service.

Creates or updates the authenticated user's progress record for a course.
"""

import logging

from common.http import ContentAPIClient

from app.schemas.course_status import CourseStatus, CourseStatusInput
from app.services.course_status_merger import build_create_payload, build_update_payload
from app.services.user_service import UserService

logger = logging.getLogger(__name__)


class CourseStatusService:
    """
    Upserts course statuses.

    Each upsert is one read followed by one write. There is no locking:
    two concurrent upserts for the same course race and the last write wins.
    """

    def __init__(
        self,
        client: ContentAPIClient,
        user_service: UserService,
        course_statuses_path: str = "/course-statuses"
    ):
        """
        Initialize CourseStatusService.

        Args:
            client: Content API client
            user_service: For loading the current status
            course_statuses_path: Course statuses collection endpoint
        """
        self._client = client
        self._user_service = user_service
        self._path = course_statuses_path.rstrip("/")

    async def upsert(self, data: CourseStatusInput) -> CourseStatus:
        """
        Create or update the user's status for data.course.

        An existing record is merged with the update by section and module
        id and written back as a full replacement. Without one, a new
        record is created from the input and defaults.

        Args:
            data: Partial course status update

        Returns:
            The written course status as returned by the API

        Raises:
            httpx.HTTPStatusError: If the API rejects the read or the write
            httpx.RequestError: On network failures
        """
        user, existing = await self._user_service.fetch_user_course_status(data.course)

        if existing:
            payload = build_update_payload(data, user.id, existing)
            body = await self._client.put(
                f"{self._path}/{existing.documentId}",
                json={"data": payload}
            )
            logger.info(
                f"Course status {existing.documentId} updated for user {user.id}, "
                f"course {data.course}: {payload['progress']}%"
            )
        else:
            payload = build_create_payload(data, user.id)
            body = await self._client.post(self._path, json={"data": payload})
            logger.info(
                f"Course status created for user {user.id}, "
                f"course {data.course}: {payload['progress']}%"
            )

        return CourseStatus.model_validate(body["data"])
