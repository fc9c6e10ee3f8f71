"""
Pydantic models for per-user course progress ("course status").

A CourseStatus holds the overall progress and favourite flag of one user
for one course, plus progress per module grouped by section. Sections are
unique by section documentId within a status, modules unique by module
documentId within a section.

Models are frozen: merging builds new instances instead of mutating the
record that was read from the API.
"""

from typing import Optional, List, Union
from pydantic import BaseModel, ConfigDict, Field, field_validator


class StatusModel(BaseModel):
    model_config = ConfigDict(extra="ignore", frozen=True)

    @field_validator("progress", "isFavourite", mode="before", check_fields=False)
    @classmethod
    def _null_to_default(cls, value, info):
        # Unset number and boolean fields come back as null
        if value is None:
            return cls.model_fields[info.field_name].default
        return value


class DocumentRef(StatusModel):
    """Reference to another document by its documentId."""
    documentId: str


class ModuleStatus(StatusModel):
    """Progress of a single module."""
    id: Optional[int] = None
    module: Optional[DocumentRef] = None
    progress: Union[int, float] = 0

    @property
    def module_id(self) -> Optional[str]:
        return self.module.documentId if self.module else None


class SectionStatus(StatusModel):
    """Module progress within one section."""
    id: Optional[int] = None
    section: Optional[DocumentRef] = None
    modules: List[ModuleStatus] = Field(default_factory=list)

    @property
    def section_id(self) -> Optional[str]:
        return self.section.documentId if self.section else None


class CourseStatus(StatusModel):
    """A user's progress record for one course."""
    id: Optional[int] = None
    documentId: Optional[str] = None
    course: Optional[DocumentRef] = None
    progress: Union[int, float] = 0  # Percentage (0-100), not range checked
    isFavourite: bool = False
    sections: List[SectionStatus] = Field(default_factory=list)

    @property
    def course_id(self) -> Optional[str]:
        return self.course.documentId if self.course else None


# =============================================================================
# Request Schemas
# =============================================================================

class ModuleProgressInput(BaseModel):
    """New progress value for one module."""
    moduleId: str
    progress: Union[int, float]


class SectionProgressInput(BaseModel):
    """Module progress deltas for one section."""
    sectionId: str
    modules: List[ModuleProgressInput] = Field(default_factory=list)


class CourseStatusInput(BaseModel):
    """
    Partial update for a course status.

    Omitted fields keep their stored value when a record exists and fall
    back to defaults when a record is created.
    """
    course: str  # Course documentId
    progress: Optional[Union[int, float]] = None
    isFavourite: Optional[bool] = None
    sections: Optional[List[SectionProgressInput]] = None
