"""Tests for the note store."""

import json
import logging
from unittest.mock import AsyncMock, patch

import pytest

from mindscape.database.db import kv_get, kv_set
from mindscape.models import Note
from mindscape.services.note_store import NoteStore, WELCOME_NOTE_ID


def _note(title: str, tags: list[str] | None = None, note_id: str | None = None) -> Note:
    data = {"title": title, "content": f"{title} body", "tags": tags or []}
    if note_id:
        data["id"] = note_id
    return Note(**data)


@pytest.mark.asyncio
async def test_load_seeds_welcome_note_when_storage_empty(db_path):
    store = NoteStore(db_path=db_path, storage_key="mindscape_posts")
    notes = await store.load()

    assert len(notes) == 1
    welcome = notes[0]
    assert welcome.id == WELCOME_NOTE_ID
    assert welcome.title == "Welcome to MindScape"
    assert welcome.tags == ["Welcome", "Guide"]
    assert welcome.summary
    assert welcome.created_at == welcome.updated_at

    stored = json.loads(await kv_get("mindscape_posts", db_path=db_path))
    assert [n["id"] for n in stored] == [WELCOME_NOTE_ID]


@pytest.mark.asyncio
@pytest.mark.parametrize("raw", ["{not json", '{"id": "x"}', '[{"title": 3}]'])
async def test_load_reseeds_on_malformed_data(db_path, raw, caplog):
    await kv_set("mindscape_posts", raw, db_path=db_path)
    store = NoteStore(db_path=db_path, storage_key="mindscape_posts")

    with caplog.at_level(logging.ERROR, logger="mindscape.services.note_store"):
        notes = await store.load()

    assert [n.title for n in notes] == ["Welcome to MindScape"]
    assert "Failed to parse stored notes" in caplog.text


@pytest.mark.asyncio
async def test_load_restores_saved_collection(store, db_path):
    await store.save(_note("Second"))

    reloaded = NoteStore(db_path=db_path, storage_key="mindscape_posts")
    notes = await reloaded.load()

    assert [n.title for n in notes] == ["Second", "Welcome to MindScape"]
    assert notes[0].created_at == store.all()[0].created_at


@pytest.mark.asyncio
async def test_save_new_note_is_prepended(store):
    note = _note("Draft")
    await store.save(note)

    assert len(store) == 2
    assert store.all()[0].id == note.id


@pytest.mark.asyncio
async def test_save_existing_note_replaces_in_place(store):
    first = _note("First")
    second = _note("Second")
    await store.save(first)
    await store.save(second)
    ids_before = [n.id for n in store.all()]

    edited = first.model_copy(update={"title": "First, edited"})
    await store.save(edited)

    assert len(store) == 3
    assert [n.id for n in store.all()] == ids_before
    assert store.get(first.id).title == "First, edited"


@pytest.mark.asyncio
async def test_delete_is_idempotent(store, db_path):
    note = _note("Doomed")
    await store.save(note)

    assert await store.delete(note.id) is True
    after_once = [n.id for n in store.all()]
    assert await store.delete(note.id) is False
    assert [n.id for n in store.all()] == after_once
    assert len(store) == 1

    stored = json.loads(await kv_get("mindscape_posts", db_path=db_path))
    assert note.id not in [n["id"] for n in stored]


@pytest.mark.asyncio
async def test_search(store):
    await store.save(_note("Rust ownership", tags=["Programming"]))
    await store.save(_note("Morning pages", tags=["journal", "Habits"]))

    everything = store.search("")
    assert [n.id for n in everything] == [n.id for n in store.all()]

    assert [n.title for n in store.search("RUST")] == ["Rust ownership"]
    assert [n.title for n in store.search("habit")] == ["Morning pages"]
    # "guide" only appears as a tag on the welcome note
    assert [n.title for n in store.search("guide")] == ["Welcome to MindScape"]
    # content is not searched
    assert store.search("body") == []


@pytest.mark.asyncio
async def test_search_preserves_collection_order(store):
    await store.save(_note("alpha notes", tags=["x"]))
    await store.save(_note("beta", tags=["notes"]))

    assert [n.title for n in store.search("notes")] == ["beta", "alpha notes"]


@pytest.mark.asyncio
async def test_failed_write_leaves_collection_unchanged(store):
    note = _note("Unsaved")
    before = [n.id for n in store.all()]

    with patch("mindscape.services.note_store.kv_set", new=AsyncMock(side_effect=OSError("disk full"))):
        with pytest.raises(OSError):
            await store.save(note)
        with pytest.raises(OSError):
            await store.delete(WELCOME_NOTE_ID)

    assert [n.id for n in store.all()] == before
    assert store.get(note.id) is None
