"""
Pydantic models for catalog content returned by the content API.

Field names mirror the API's camelCase; unknown fields are ignored so
that extra attributes added in the CMS do not break parsing.
"""

from typing import Optional, List
from pydantic import BaseModel, ConfigDict, Field


class CatalogModel(BaseModel):
    """Base for all models parsed from API responses."""
    model_config = ConfigDict(extra="ignore")


class Category(CatalogModel):
    """Course category."""
    id: Optional[int] = None
    documentId: Optional[str] = None
    title: Optional[str] = None
    description: Optional[str] = None


class Media(CatalogModel):
    """Video asset attached to a module."""
    id: Optional[int] = None
    title: Optional[str] = None
    playback_id: Optional[str] = None
    asset_id: Optional[str] = None
    duration: Optional[float] = None  # Seconds
    isReady: Optional[bool] = None


class Thumbnail(CatalogModel):
    """Course thumbnail image."""
    id: Optional[int] = None
    url: Optional[str] = None
    alternativeText: Optional[str] = None
    caption: Optional[str] = None
    width: Optional[int] = None
    height: Optional[int] = None


class Module(CatalogModel):
    """Smallest content unit of a course."""
    id: Optional[int] = None
    documentId: str
    title: Optional[str] = None
    description: Optional[str] = None
    media: Optional[Media] = None


class Section(CatalogModel):
    """Ordered group of modules."""
    id: Optional[int] = None
    documentId: str
    name: Optional[str] = None
    modules: List[Module] = Field(default_factory=list)


class Course(CatalogModel):
    """Course with optional populated relations."""
    id: Optional[int] = None
    documentId: Optional[str] = None
    slug: Optional[str] = None
    title: Optional[str] = None
    description: Optional[str] = None
    synopsis: Optional[str] = None
    thumbnail: Optional[Thumbnail] = None
    categories: List[Category] = Field(default_factory=list)
    sections: List[Section] = Field(default_factory=list)
