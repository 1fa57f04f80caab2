"""Note domain model."""

from pydantic import BaseModel, Field
from typing import Optional
from datetime import datetime, timezone
from uuid import uuid4


class Note(BaseModel):
    """A user-authored note with an optional AI-generated summary."""
    id: str = Field(default_factory=lambda: str(uuid4()))
    title: str
    content: str = ""
    summary: Optional[str] = None
    tags: list[str] = Field(default_factory=list)
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
