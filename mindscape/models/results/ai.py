"""Result models for the writing-aid operations."""

from typing import Optional

from mindscape.models.enums import DegradedReason
from mindscape.models.results.backboard import BackboardResult


class AiTextResult(BackboardResult):
    """Text produced by the AI service, or the reason none was produced.

    ``success`` implies ``text`` is set; otherwise ``reason`` says why the
    call degraded and callers pick their own fallback text.
    """

    text: Optional[str] = None
    reason: Optional[DegradedReason] = None
    error: Optional[str] = None

    @classmethod
    def ok(cls, text: str) -> "AiTextResult":
        return cls(success=True, text=text)

    @classmethod
    def degraded(cls, reason: DegradedReason, error: Optional[str] = None) -> "AiTextResult":
        return cls(success=False, reason=reason, error=error)
