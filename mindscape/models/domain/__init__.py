"""Domain models - notes, the editor draft, the brainstorm chat and the view state."""

from mindscape.models.domain.note import Note
from mindscape.models.domain.chat import (
    ChatMessage,
    ChatSession,
    BrainstormSendRequest,
    BrainstormTranscript,
)
from mindscape.models.domain.editor import EditorDraft, EditorDraftUpdate, EditorState
from mindscape.models.domain.view import (
    ViewState,
    NavigateRequest,
    EditRequest,
    SearchRequest,
    ViewSnapshot,
)

__all__ = [
    "Note",
    "ChatMessage", "ChatSession", "BrainstormSendRequest", "BrainstormTranscript",
    "EditorDraft", "EditorDraftUpdate", "EditorState",
    "ViewState", "NavigateRequest", "EditRequest", "SearchRequest", "ViewSnapshot",
]
