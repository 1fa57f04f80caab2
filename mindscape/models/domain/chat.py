"""Domain models for the brainstorm chat."""

from pydantic import BaseModel, Field
from typing import Optional
from uuid import uuid4

from mindscape.models.enums import MessageRole


class ChatMessage(BaseModel):
    """A single brainstorm transcript entry."""
    id: str = Field(default_factory=lambda: str(uuid4()))
    role: MessageRole
    text: str = ""
    is_loading: bool = False


class ChatSession(BaseModel):
    """Handle to a multi-turn conversation held by the AI service."""
    id: str = Field(default_factory=lambda: str(uuid4()))
    thread_id: Optional[str] = None


class BrainstormSendRequest(BaseModel):
    """Request payload for sending a brainstorm message."""
    text: str = Field(max_length=12000)


class BrainstormTranscript(BaseModel):
    """Response payload carrying the current transcript."""
    messages: list[ChatMessage]
    is_loading: bool = False
    accepted: Optional[bool] = None
