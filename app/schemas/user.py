"""
Pydantic model for the authenticated user.
"""

from typing import Optional, List
from pydantic import BaseModel, ConfigDict

from app.schemas.course_status import CourseStatus


class User(BaseModel):
    """Authenticated user, optionally with populated course statuses."""
    model_config = ConfigDict(extra="ignore")

    id: int
    documentId: Optional[str] = None
    username: Optional[str] = None
    email: Optional[str] = None
    confirmed: Optional[bool] = None
    blocked: Optional[bool] = None
    courseStatuses: Optional[List[CourseStatus]] = None
