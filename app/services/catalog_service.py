"""
Catalog service.

Reads categories and courses from the content API.
"""

import logging
from typing import List, Dict, Any

from common.http import ContentAPIClient
from common.utils.exceptions import CourseNotFoundException

from app.schemas.course import Category, Course

logger = logging.getLogger(__name__)


CATEGORY_FIELDS = ["documentId", "title", "description"]

COURSE_LIST_QUERY: Dict[str, Any] = {
    "fields": ["slug", "title", "description", "synopsis"],
    "populate": {
        "thumbnail": {"populate": "*"},
        "categories": {"populate": "*"},
        "sections": {
            "populate": {
                "modules": {"populate": "*"},
            },
        },
    },
}

COURSE_DETAIL_POPULATE: Dict[str, Any] = {
    "thumbnail": {
        "fields": ["url", "alternativeText", "caption", "width", "height"],
    },
    "categories": {
        "fields": ["id", "title", "description"],
    },
    "sections": {
        "fields": ["documentId", "name"],
        "populate": {
            "modules": {
                "fields": ["documentId", "title", "description"],
                "populate": {
                    "media": {
                        "fields": [
                            "id",
                            "title",
                            "playback_id",
                            "asset_id",
                            "duration",
                            "isReady",
                        ],
                    },
                },
            },
        },
    },
}


class CatalogService:
    """
    Read-only access to the course catalog.
    """

    def __init__(
        self,
        client: ContentAPIClient,
        categories_path: str = "/categories",
        courses_path: str = "/courses"
    ):
        """
        Initialize CatalogService.

        Args:
            client: Content API client
            categories_path: Categories collection endpoint
            courses_path: Courses collection endpoint
        """
        self._client = client
        self._categories_path = categories_path
        self._courses_path = courses_path

    async def fetch_home_page_data(self) -> Dict[str, Any]:
        """
        Get the unfiltered course listing used by the home page.

        Returns:
            Raw response body, envelope included
        """
        return await self._client.get(self._courses_path)

    async def fetch_categories(self) -> List[Category]:
        """
        Get all categories.

        Returns:
            List of categories with documentId, title and description
        """
        body = await self._client.get(
            self._categories_path,
            query={"fields": CATEGORY_FIELDS}
        )
        return [Category.model_validate(item) for item in body["data"]]

    async def fetch_courses(self) -> List[Course]:
        """
        Get all courses with thumbnail, categories, sections and modules.

        Returns:
            List of courses
        """
        body = await self._client.get(self._courses_path, query=COURSE_LIST_QUERY)
        return [Course.model_validate(item) for item in body["data"]]

    async def fetch_course_by_slug(self, slug: str) -> Course:
        """
        Get a single course by slug, populated down to module media.

        Args:
            slug: Course slug

        Returns:
            The first matching course

        Raises:
            CourseNotFoundException: If no course has this slug
        """
        query = {
            "filters": {"slug": {"$eq": slug}},
            "fields": ["title", "description", "slug", "documentId"],
            "populate": COURSE_DETAIL_POPULATE,
        }
        body = await self._client.get(self._courses_path, query=query)

        courses = body["data"]
        if not courses:
            logger.warning(f"Course lookup returned no results for slug '{slug}'")
            raise CourseNotFoundException(slug)

        return Course.model_validate(courses[0])
