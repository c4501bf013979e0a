"""Value types held by the store: documents, their authors, and search requests"""

from __future__ import annotations

from datetime import datetime, timezone

from pydantic import BaseModel, Field, field_validator


def _as_utc(value: datetime | None) -> datetime | None:
    """Treat naive datetimes as UTC so every stored instant is comparable."""
    if value is None:
        return None
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


class Author(BaseModel):
    id: str | None = None
    name: str | None = None


class Document(BaseModel):
    """A stored record. id and created are filled in by the store on first save."""
    model_config = {"validate_assignment": True}

    id: str | None = None
    title: str | None = None
    content: str | None = None
    author: Author | None = None
    created: datetime | None = None

    @field_validator("created")
    @classmethod
    def _normalize_created(cls, v: datetime | None) -> datetime | None:
        return _as_utc(v)


class SearchRequest(BaseModel):
    """Conjunction of optional filters. None skips a dimension entirely."""
    title_prefixes: list[str] | None = Field(default=None, description="Title starts with any of these")
    contains_contents: list[str] | None = Field(default=None, description="Content contains any of these")
    author_ids: list[str] | None = Field(default=None, description="Author id is one of these")
    created_from: datetime | None = Field(default=None, description="Inclusive lower bound on created")
    created_to: datetime | None = Field(default=None, description="Inclusive upper bound on created")

    @field_validator("created_from", "created_to")
    @classmethod
    def _normalize_bounds(cls, v: datetime | None) -> datetime | None:
        return _as_utc(v)
