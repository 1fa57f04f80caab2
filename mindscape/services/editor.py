"""Note editor: draft state, AI polish and note assembly on save."""

from datetime import datetime, timezone
from uuid import uuid4

from mindscape.config import Settings, settings as default_settings
from mindscape.errors import ActionInFlightError
from mindscape.logging import get_logger
from mindscape.models import (
    AiTextResult,
    DegradedReason,
    EditorDraft,
    EditorDraftUpdate,
    EditorState,
    Note,
)
from mindscape.services.writing_assistant import WritingAssistant

logger = get_logger('services.editor')

SUMMARY_MISSING_CREDENTIAL = "API Key missing."
SUMMARY_ERROR = "Error generating summary."
SUMMARY_EMPTY = "Could not generate summary."


def parse_tags(tags_text: str) -> list[str]:
    """Split a comma-separated tag string. Order and duplicates are kept."""
    return [t.strip() for t in tags_text.split(",") if t.strip()]


def summary_text(result: AiTextResult) -> str:
    if result.success and result.text:
        return result.text
    if result.reason == DegradedReason.MISSING_CREDENTIAL:
        return SUMMARY_MISSING_CREDENTIAL
    if result.reason == DegradedReason.EMPTY_RESPONSE:
        return SUMMARY_EMPTY
    return SUMMARY_ERROR


def polished_text(result: AiTextResult, original: str) -> str:
    if result.success and result.text:
        return result.text
    return original


class Editor:
    """Draft of one note, new or existing."""

    def __init__(
        self,
        assistant: WritingAssistant,
        note: Note | None = None,
        settings: Settings | None = None,
    ):
        self.assistant = assistant
        self.note = note
        self.settings = settings or default_settings
        self.draft = EditorDraft(
            title=note.title if note else "",
            content=note.content if note else "",
            tags_text=", ".join(note.tags) if note else "",
        )
        self.is_generating = False
        self.is_polishing = False

    @property
    def can_save(self) -> bool:
        return bool(self.draft.title.strip()) and not self.is_generating

    @property
    def can_polish(self) -> bool:
        return bool(self.draft.content) and not self.is_polishing

    def update(self, data: EditorDraftUpdate) -> EditorDraft:
        changes = data.model_dump(exclude_none=True)
        self.draft = self.draft.model_copy(update=changes)
        return self.draft

    def state(self) -> EditorState:
        return EditorState(
            note_id=self.note.id if self.note else None,
            draft=self.draft,
            is_generating=self.is_generating,
            is_polishing=self.is_polishing,
            can_save=self.can_save,
            can_polish=self.can_polish,
        )

    def _default_summary(self, content: str) -> str:
        return content[: self.settings.SUMMARY_EXCERPT_CHARS] + "..."

    async def build_note(self) -> Note:
        """
        Assemble the note to save from the current draft.

        A note without a prior summary gets the content excerpt as its
        summary, replaced by a generated one when the content is long enough.

        :return: The finished note, ready for NoteStore.save
        :rtype: Note
        :raises ActionInFlightError: A save is already awaiting its summary
        :raises ValueError: The draft has no title
        """
        if self.is_generating:
            raise ActionInFlightError("Save already in progress")
        if not self.draft.title.strip():
            raise ValueError("A title is required to save")

        now = datetime.now(timezone.utc)
        existing_summary = self.note.summary if self.note else None
        content = self.draft.content
        note = Note(
            id=self.note.id if self.note else str(uuid4()),
            title=self.draft.title,
            content=content,
            summary=existing_summary or self._default_summary(content),
            tags=parse_tags(self.draft.tags_text),
            created_at=self.note.created_at if self.note else now,
            updated_at=now,
        )

        if not existing_summary and len(content) > self.settings.SUMMARY_MIN_CONTENT_CHARS:
            self.is_generating = True
            try:
                result = await self.assistant.summarize(content)
            finally:
                self.is_generating = False
            note.summary = summary_text(result)
            logger.info(f"Generated summary for note {note.id[:8]} (success={result.success})")

        return note

    async def polish(self) -> EditorDraft:
        """Replace the draft content with a polished rewrite. Title and tags are untouched."""
        if self.is_polishing:
            raise ActionInFlightError("Polish already in progress")
        if not self.draft.content:
            return self.draft

        original = self.draft.content
        self.is_polishing = True
        try:
            result = await self.assistant.polish(original)
        finally:
            self.is_polishing = False
        self.draft = self.draft.model_copy(update={"content": polished_text(result, original)})
        return self.draft
