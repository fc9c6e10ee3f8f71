"""Request/response schemas."""

from app.schemas.course import (
    Category,
    Media,
    Thumbnail,
    Module,
    Section,
    Course,
)
from app.schemas.course_status import (
    DocumentRef,
    ModuleStatus,
    SectionStatus,
    CourseStatus,
    ModuleProgressInput,
    SectionProgressInput,
    CourseStatusInput,
)
from app.schemas.user import User

__all__ = [
    "Category",
    "Media",
    "Thumbnail",
    "Module",
    "Section",
    "Course",
    "DocumentRef",
    "ModuleStatus",
    "SectionStatus",
    "CourseStatus",
    "ModuleProgressInput",
    "SectionProgressInput",
    "CourseStatusInput",
    "User",
]
