"""
MindScape models.

Usage:
    from mindscape.models import Note, ChatMessage, ViewState
    from mindscape.models import ViewName, MessageRole, DegradedReason
    from mindscape.models import AiTextResult, ChatResponse
"""

# --- Enums ---
from mindscape.models.enums import (
    ViewName,
    NavigationTarget,
    MessageRole,
    DegradedReason,
)

# --- Domain models ---
from mindscape.models.domain import (
    Note,
    ChatMessage, ChatSession, BrainstormSendRequest, BrainstormTranscript,
    EditorDraft, EditorDraftUpdate, EditorState,
    ViewState, NavigateRequest, EditRequest, SearchRequest, ViewSnapshot,
)

# --- Result models ---
from mindscape.models.results import (
    BackboardResult,
    AssistantCreated, ThreadCreated, ThreadDeleted, ChatResponse,
    AiTextResult,
)

__all__ = [
    # Enums
    "ViewName", "NavigationTarget", "MessageRole", "DegradedReason",
    # Domain
    "Note",
    "ChatMessage", "ChatSession", "BrainstormSendRequest", "BrainstormTranscript",
    "EditorDraft", "EditorDraftUpdate", "EditorState",
    "ViewState", "NavigateRequest", "EditRequest", "SearchRequest", "ViewSnapshot",
    # Results
    "BackboardResult",
    "AssistantCreated", "ThreadCreated", "ThreadDeleted", "ChatResponse",
    "AiTextResult",
]
