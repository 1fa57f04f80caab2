"""Domain models for the note editor."""

from pydantic import BaseModel
from typing import Optional


class EditorDraft(BaseModel):
    """Local draft state of the note being edited."""
    title: str = ""
    content: str = ""
    tags_text: str = ""


class EditorDraftUpdate(BaseModel):
    """Partial update of the draft; unset fields are left alone."""
    title: Optional[str] = None
    content: Optional[str] = None
    tags_text: Optional[str] = None


class EditorState(BaseModel):
    """Draft plus the flags that gate the editor's actions."""
    note_id: Optional[str] = None
    draft: EditorDraft
    is_generating: bool = False
    is_polishing: bool = False
    can_save: bool = False
    can_polish: bool = False
