"""
Course catalog client application code.

This package contains the content-API specific implementations:
- schemas: Pydantic models for catalog content and course statuses
- services: Catalog, user and course status services
- config: Application settings

Uses generic infrastructure from the common/ package.
"""

from app.config import settings

__all__ = ["settings"]
