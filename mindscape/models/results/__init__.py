"""Result models for service operations."""

from mindscape.models.results.backboard import (
    BackboardResult, AssistantCreated, ThreadCreated, ThreadDeleted, ChatResponse,
)
from mindscape.models.results.ai import AiTextResult

__all__ = [
    "BackboardResult", "AssistantCreated", "ThreadCreated", "ThreadDeleted",
    "ChatResponse", "AiTextResult",
]
