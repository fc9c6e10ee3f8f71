"""
Content API Mock Server

A FastAPI mock server that simulates the content API endpoints consumed by
the client (categories, courses, current user, course statuses) for local
development and end-to-end tests, without a running CMS.

Run with: uvicorn mock_api:app --port 1337 --reload
"""

import copy
import secrets
from datetime import datetime, timezone
from typing import Optional

from fastapi import FastAPI, Header, HTTPException, Request
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel


# =============================================================================
# APP SETUP
# =============================================================================

app = FastAPI(
    title="Content Mock API",
    description="Mock content API server for client development",
    version="1.0.0",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["http://localhost:3000", "http://localhost:3001"],
    allow_credentials=True,
    allow_methods=["GET", "POST", "PUT", "OPTIONS"],
    allow_headers=["Content-Type", "Authorization", "Accept", "Origin", "X-Requested-With"],
)


# =============================================================================
# SEED DATA
# =============================================================================

MOCK_TOKEN = "mock_token_learner"

MOCK_USER = {
    "id": 1,
    "documentId": "usr_learner01",
    "username": "learner",
    "email": "learner@example.com",
    "confirmed": True,
    "blocked": False,
}

SEED_CATEGORIES = [
    {"id": 1, "documentId": "cat_leadership", "title": "Leadership", "description": "Lead teams with confidence"},
    {"id": 2, "documentId": "cat_wellbeing", "title": "Wellbeing", "description": "Sustainable performance"},
]

SEED_COURSES = [
    {
        "id": 1,
        "documentId": "crs_intro",
        "slug": "intro-to-leadership",
        "title": "Intro to Leadership",
        "description": "The fundamentals of leading a team.",
        "synopsis": "Five short modules on leadership basics.",
        "thumbnail": {
            "id": 10,
            "url": "/uploads/intro.png",
            "alternativeText": "Intro thumbnail",
            "caption": None,
            "width": 640,
            "height": 360,
        },
        "categories": [SEED_CATEGORIES[0]],
        "sections": [
            {
                "id": 100,
                "documentId": "sec_basics",
                "name": "Basics",
                "modules": [
                    {
                        "id": 1000,
                        "documentId": "mod_welcome",
                        "title": "Welcome",
                        "description": "Course overview",
                        "media": {
                            "id": 5000,
                            "title": "Welcome video",
                            "playback_id": "pb_welcome",
                            "asset_id": "as_welcome",
                            "duration": 95.5,
                            "isReady": True,
                        },
                    },
                    {
                        "id": 1001,
                        "documentId": "mod_roles",
                        "title": "Roles",
                        "description": "What a leader does",
                        "media": None,
                    },
                ],
            },
            {
                "id": 101,
                "documentId": "sec_practice",
                "name": "Practice",
                "modules": [
                    {
                        "id": 1002,
                        "documentId": "mod_feedback",
                        "title": "Giving feedback",
                        "description": "Practical feedback models",
                        "media": None,
                    },
                ],
            },
        ],
    },
    {
        "id": 2,
        "documentId": "crs_breathing",
        "slug": "breathing-basics",
        "title": "Breathing Basics",
        "description": "Breathing exercises for focus.",
        "synopsis": "Short daily exercises.",
        "thumbnail": None,
        "categories": [SEED_CATEGORIES[1]],
        "sections": [],
    },
]


# =============================================================================
# IN-MEMORY STORE
# =============================================================================

mock_tokens: dict[str, dict] = {}
course_statuses: list[dict] = []


def reset_store() -> None:
    """Restore seed data and drop all course statuses."""
    mock_tokens.clear()
    mock_tokens[MOCK_TOKEN] = copy.deepcopy(MOCK_USER)
    course_statuses.clear()


reset_store()


def generate_document_id() -> str:
    return f"cs_{secrets.token_hex(8)}"


def get_user_from_token(authorization: Optional[str]) -> Optional[dict]:
    if not authorization:
        return None
    token = authorization.replace("Bearer ", "")
    return mock_tokens.get(token)


def require_auth(authorization: Optional[str]) -> dict:
    user = get_user_from_token(authorization)
    if not user:
        raise HTTPException(
            status_code=401,
            detail={"status": 401, "name": "UnauthorizedError", "message": "Missing or invalid credentials"},
        )
    return user


def query_value(request: Request, key: str) -> Optional[str]:
    """Read one bracket-notation query key, e.g. "filters[slug][$eq]"."""
    return request.query_params.get(key)


def has_query_prefix(request: Request, prefix: str) -> bool:
    return any(key.startswith(prefix) for key in request.query_params.keys())


# =============================================================================
# REQUEST MODELS
# =============================================================================


class ModuleStatusPayload(BaseModel):
    module: str
    progress: float = 0


class SectionStatusPayload(BaseModel):
    section: str
    modules: list[ModuleStatusPayload] = []


class CourseStatusPayload(BaseModel):
    course: str
    user: int
    progress: float = 0
    isFavourite: bool = False
    sections: list[SectionStatusPayload] = []


class CourseStatusRequest(BaseModel):
    data: CourseStatusPayload


def to_stored_status(payload: CourseStatusPayload, document_id: str, status_id: int) -> dict:
    """Convert a write payload into the populated shape the API returns."""
    return {
        "id": status_id,
        "documentId": document_id,
        "userId": payload.user,
        "progress": payload.progress,
        "isFavourite": payload.isFavourite,
        "course": {"documentId": payload.course},
        "sections": [
            {
                "section": {"documentId": section.section},
                "modules": [
                    {"module": {"documentId": module.module}, "progress": module.progress}
                    for module in section.modules
                ],
            }
            for section in payload.sections
        ],
        "updatedAt": datetime.now(timezone.utc).isoformat(),
    }


def public_status(status: dict, populate: bool) -> dict:
    data = {key: value for key, value in status.items() if key != "userId"}
    if not populate:
        data.pop("course")
        data.pop("sections")
    return copy.deepcopy(data)


# =============================================================================
# HEALTH CHECK
# =============================================================================


@app.get("/health")
async def health_check():
    return {
        "status": "ok",
        "service": "content-mock-api",
        "timestamp": datetime.now(timezone.utc).isoformat(),
    }


# =============================================================================
# CATALOG ENDPOINTS
# =============================================================================


@app.get("/api/categories")
async def list_categories():
    return {"data": copy.deepcopy(SEED_CATEGORIES), "meta": {}}


@app.get("/api/courses")
async def list_courses(request: Request):
    courses = SEED_COURSES
    slug = query_value(request, "filters[slug][$eq]")
    if slug is not None:
        courses = [course for course in courses if course["slug"] == slug]

    return {
        "data": copy.deepcopy(courses),
        "meta": {"pagination": {"page": 1, "pageSize": 25, "pageCount": 1, "total": len(courses)}},
    }


# =============================================================================
# USER ENDPOINTS
# =============================================================================


@app.get("/api/users/me")
async def current_user(request: Request, authorization: Optional[str] = Header(None)):
    user = require_auth(authorization)
    body = copy.deepcopy(user)

    if has_query_prefix(request, "populate[courseStatuses]"):
        course_filter = query_value(
            request, "populate[courseStatuses][filters][course][documentId][$eq]"
        )
        body["courseStatuses"] = [
            public_status(status, populate=True)
            for status in course_statuses
            if status["userId"] == user["id"]
            and (course_filter is None or status["course"]["documentId"] == course_filter)
        ]

    return body


# =============================================================================
# COURSE STATUS ENDPOINTS
# =============================================================================


@app.post("/api/course-statuses")
async def create_course_status(
    request: CourseStatusRequest,
    authorization: Optional[str] = Header(None),
):
    require_auth(authorization)
    status = to_stored_status(request.data, generate_document_id(), len(course_statuses) + 1)
    course_statuses.append(status)
    return {"data": public_status(status, populate=False), "meta": {}}


@app.put("/api/course-statuses/{document_id}")
async def update_course_status(
    document_id: str,
    request: CourseStatusRequest,
    authorization: Optional[str] = Header(None),
):
    require_auth(authorization)
    for index, status in enumerate(course_statuses):
        if status["documentId"] == document_id:
            updated = to_stored_status(request.data, document_id, status["id"])
            course_statuses[index] = updated
            return {"data": public_status(updated, populate=False), "meta": {}}

    raise HTTPException(
        status_code=404,
        detail={"status": 404, "name": "NotFoundError", "message": "Not Found"},
    )


# =============================================================================
# MAIN
# =============================================================================

if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=1337)
