"""Shared test fixtures for the content API client tests."""

import pytest
from unittest.mock import AsyncMock, MagicMock

import httpx

import mock_api
from common.http import ContentAPIClient

from app.schemas import CourseStatus


@pytest.fixture
def mock_client():
    client = MagicMock()
    client.get = AsyncMock()
    client.post = AsyncMock()
    client.put = AsyncMock()
    return client


@pytest.fixture
def sample_course_status_doc():
    """A populated course status as returned by GET /users/me."""
    return {
        "id": 12,
        "documentId": "cs_existing",
        "progress": 45,
        "isFavourite": True,
        "course": {"documentId": "crs_intro"},
        "sections": [
            {
                "id": 1,
                "section": {"documentId": "S1"},
                "modules": [
                    {"id": 1, "module": {"documentId": "M1"}, "progress": 50},
                    {"id": 2, "module": {"documentId": "M3"}, "progress": 100},
                ],
            },
            {
                "id": 2,
                "section": {"documentId": "S2"},
                "modules": [
                    {"id": 3, "module": {"documentId": "M9"}, "progress": 20},
                ],
            },
        ],
    }


@pytest.fixture
def existing_status(sample_course_status_doc):
    return CourseStatus.model_validate(sample_course_status_doc)


@pytest.fixture
def api_store():
    """Fresh in-memory store of the mock content API."""
    mock_api.reset_store()
    yield mock_api
    mock_api.reset_store()


@pytest.fixture
def asgi_client(api_store):
    """Client wired to the mock content API through ASGI."""
    return ContentAPIClient(
        base_url="http://testserver/api",
        token=mock_api.MOCK_TOKEN,
        transport=httpx.ASGITransport(app=mock_api.app),
    )
