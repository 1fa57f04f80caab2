"""Tests for the note editor."""

import asyncio
from unittest.mock import AsyncMock

import pytest

from mindscape.errors import ActionInFlightError
from mindscape.models import AiTextResult, DegradedReason, EditorDraftUpdate, Note
from mindscape.services.editor import (
    SUMMARY_ERROR,
    SUMMARY_MISSING_CREDENTIAL,
    Editor,
    parse_tags,
)

LONG_CONTENT = "Resting is a skill. " * 5  # 100 characters


def _mock_assistant(summary: str = "Generated summary.", polished: str = "Polished."):
    assistant = AsyncMock()
    assistant.summarize.return_value = AiTextResult.ok(summary)
    assistant.polish.return_value = AiTextResult.ok(polished)
    return assistant


def test_parse_tags_keeps_order_and_duplicates():
    assert parse_tags("a, a, b") == ["a", "a", "b"]
    assert parse_tags(" x ,, ,y,") == ["x", "y"]
    assert parse_tags("") == []


def test_draft_seeded_from_note():
    note = Note(title="T", content="C", tags=["one", "two"])
    editor = Editor(_mock_assistant(), note=note)

    assert editor.draft.title == "T"
    assert editor.draft.content == "C"
    assert editor.draft.tags_text == "one, two"


@pytest.mark.asyncio
async def test_new_note_gets_generated_summary_once():
    assistant = _mock_assistant()
    editor = Editor(assistant)
    editor.update(EditorDraftUpdate(title="Rest", content=LONG_CONTENT, tags_text="a, a, b"))

    note = await editor.build_note()

    assistant.summarize.assert_awaited_once_with(LONG_CONTENT)
    assert note.summary == "Generated summary."
    assert note.tags == ["a", "a", "b"]
    assert note.updated_at >= note.created_at
    assert not editor.is_generating


@pytest.mark.asyncio
async def test_short_content_keeps_excerpt_summary():
    assistant = _mock_assistant()
    editor = Editor(assistant)
    editor.update(EditorDraftUpdate(title="Short", content="A quick thought."))

    note = await editor.build_note()

    assistant.summarize.assert_not_awaited()
    assert note.summary == "A quick thought...."


@pytest.mark.asyncio
async def test_excerpt_is_truncated():
    editor = Editor(_mock_assistant())
    editor.settings = editor.settings.model_copy(update={"SUMMARY_MIN_CONTENT_CHARS": 10_000})
    editor.update(EditorDraftUpdate(title="Long", content="x" * 400))

    note = await editor.build_note()

    assert note.summary == "x" * 150 + "..."


@pytest.mark.asyncio
async def test_existing_summary_is_not_regenerated():
    assistant = _mock_assistant()
    original = Note(title="Old", content=LONG_CONTENT, summary="Kept summary.")
    editor = Editor(assistant, note=original)
    editor.update(EditorDraftUpdate(content=LONG_CONTENT + " More."))

    note = await editor.build_note()

    assistant.summarize.assert_not_awaited()
    assert note.summary == "Kept summary."


@pytest.mark.asyncio
async def test_repeated_edits_keep_identity():
    original = Note(title="Old", content="body", summary="s")
    first = await Editor(_mock_assistant(), note=original).build_note()
    second = await Editor(_mock_assistant(), note=first).build_note()

    assert first.id == second.id == original.id
    assert first.created_at == second.created_at == original.created_at
    assert second.updated_at >= first.updated_at >= original.created_at


@pytest.mark.asyncio
@pytest.mark.parametrize(
    ("reason", "expected"),
    [
        (DegradedReason.MISSING_CREDENTIAL, SUMMARY_MISSING_CREDENTIAL),
        (DegradedReason.REMOTE_ERROR, SUMMARY_ERROR),
    ],
)
async def test_degraded_summary_uses_sentinel(reason, expected):
    assistant = _mock_assistant()
    assistant.summarize.return_value = AiTextResult.degraded(reason)
    editor = Editor(assistant)
    editor.update(EditorDraftUpdate(title="T", content=LONG_CONTENT))

    note = await editor.build_note()

    assert note.summary == expected


@pytest.mark.asyncio
async def test_offline_summary_and_polish(offline_assistant):
    editor = Editor(offline_assistant)
    editor.update(EditorDraftUpdate(title="T", content="hello"))

    await editor.polish()
    assert editor.draft.content == "hello"

    result = await offline_assistant.summarize("hello")
    assert result.reason == DegradedReason.MISSING_CREDENTIAL


@pytest.mark.asyncio
async def test_blank_title_cannot_be_saved():
    editor = Editor(_mock_assistant())
    editor.update(EditorDraftUpdate(title="   ", content="body"))

    assert not editor.can_save
    with pytest.raises(ValueError):
        await editor.build_note()


@pytest.mark.asyncio
async def test_save_is_blocked_while_summary_pending():
    gate = asyncio.Event()
    assistant = _mock_assistant()

    async def slow_summary(text):
        await gate.wait()
        return AiTextResult.ok("Late summary.")

    assistant.summarize.side_effect = slow_summary
    editor = Editor(assistant)
    editor.update(EditorDraftUpdate(title="T", content=LONG_CONTENT))

    pending = asyncio.create_task(editor.build_note())
    await asyncio.sleep(0)
    assert editor.is_generating
    assert not editor.can_save
    with pytest.raises(ActionInFlightError):
        await editor.build_note()

    gate.set()
    note = await pending
    assert note.summary == "Late summary."
    assert editor.can_save


@pytest.mark.asyncio
async def test_polish_replaces_content_only():
    assistant = _mock_assistant(polished="A polished body.")
    editor = Editor(assistant)
    editor.update(EditorDraftUpdate(title="Title", content="a body", tags_text="x, y"))

    draft = await editor.polish()

    assistant.polish.assert_awaited_once_with("a body")
    assert draft.content == "A polished body."
    assert draft.title == "Title"
    assert draft.tags_text == "x, y"


@pytest.mark.asyncio
async def test_polish_failure_keeps_draft():
    assistant = _mock_assistant()
    assistant.polish.return_value = AiTextResult.degraded(DegradedReason.REMOTE_ERROR)
    editor = Editor(assistant)
    editor.update(EditorDraftUpdate(title="T", content="my words"))

    await editor.polish()

    assert editor.draft.content == "my words"


@pytest.mark.asyncio
async def test_polish_on_empty_content_is_noop():
    assistant = _mock_assistant()
    editor = Editor(assistant)

    assert not editor.can_polish
    await editor.polish()

    assistant.polish.assert_not_awaited()


@pytest.mark.asyncio
@pytest.mark.parametrize(("length", "calls"), [(50, 0), (51, 1)])
async def test_summary_threshold_boundary(length, calls):
    assistant = _mock_assistant()
    editor = Editor(assistant)
    editor.update(EditorDraftUpdate(title="Edge", content="y" * length))

    note = await editor.build_note()

    assert assistant.summarize.await_count == calls
    expected = "Generated summary." if calls else "y" * length + "..."
    assert note.summary == expected
