"""Domain models for the view state machine."""

from pydantic import BaseModel, ConfigDict
from typing import Optional

from mindscape.models.enums import NavigationTarget, ViewName
from mindscape.models.domain.chat import ChatMessage
from mindscape.models.domain.editor import EditorState
from mindscape.models.domain.note import Note


class ViewState(BaseModel):
    """Current view and selection. Replaced as a whole on every transition."""
    model_config = ConfigDict(frozen=True)

    view: ViewName = ViewName.LIST
    selected_note_id: Optional[str] = None
    search_query: str = ""


class NavigateRequest(BaseModel):
    target: NavigationTarget


class EditRequest(BaseModel):
    note_id: Optional[str] = None


class SearchRequest(BaseModel):
    query: str = ""


class ViewSnapshot(BaseModel):
    """The single rendered view; only the field for the active view is set."""
    state: ViewState
    note_count: int
    notes: Optional[list[Note]] = None
    note: Optional[Note] = None
    editor: Optional[EditorState] = None
    messages: Optional[list[ChatMessage]] = None
