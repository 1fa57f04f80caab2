"""
Note collection persisted to local key-value storage.

The whole collection is serialized under one key and rewritten in full on
every mutation.
"""

import json
from datetime import datetime, timezone
from pathlib import Path

from pydantic import TypeAdapter, ValidationError

from mindscape.database.db import kv_get, kv_set
from mindscape.logging import get_logger
from mindscape.models import Note

logger = get_logger('services.note_store')

_NOTES_ADAPTER = TypeAdapter(list[Note])

WELCOME_NOTE_ID = "1"
WELCOME_NOTE_TITLE = "Welcome to MindScape"
WELCOME_NOTE_CONTENT = (
    'This is your personal space to think, write, and learn. Click the "Edit" button '
    'or "Write" in the sidebar to start documenting your journey.'
)
WELCOME_NOTE_SUMMARY = "A brief welcome note introducing the purpose of this application."
WELCOME_NOTE_TAGS = ["Welcome", "Guide"]


def _welcome_note() -> Note:
    now = datetime.now(timezone.utc)
    return Note(
        id=WELCOME_NOTE_ID,
        title=WELCOME_NOTE_TITLE,
        content=WELCOME_NOTE_CONTENT,
        summary=WELCOME_NOTE_SUMMARY,
        tags=list(WELCOME_NOTE_TAGS),
        created_at=now,
        updated_at=now,
    )


class NoteStore:
    """Ordered note collection, newest creations first."""

    def __init__(self, db_path: str | Path, storage_key: str):
        self.db_path = db_path
        self.storage_key = storage_key
        self._notes: list[Note] = []

    def __len__(self) -> int:
        return len(self._notes)

    async def _persist(self, notes: list[Note]) -> None:
        payload = json.dumps(_NOTES_ADAPTER.dump_python(notes, mode="json"))
        await kv_set(self.storage_key, payload, db_path=self.db_path)

    async def load(self) -> list[Note]:
        """
        Restore the collection from storage, seeding it when nothing usable is stored.

        :return: The loaded collection
        :rtype: list[Note]
        """
        raw = await kv_get(self.storage_key, db_path=self.db_path)
        notes: list[Note] | None = None
        if raw is not None:
            try:
                notes = _NOTES_ADAPTER.validate_json(raw)
            except ValidationError as e:
                logger.error(f"Failed to parse stored notes, reseeding: {e}")

        if notes is None:
            seeded = [_welcome_note()]
            await self._persist(seeded)
            self._notes = seeded
            logger.info("Seeded note collection with welcome note")
        else:
            self._notes = notes
            logger.info(f"Loaded {len(notes)} notes")
        return self.all()

    def all(self) -> list[Note]:
        return list(self._notes)

    def get(self, note_id: str) -> Note | None:
        return next((n for n in self._notes if n.id == note_id), None)

    async def save(self, note: Note) -> Note:
        """Insert or replace ``note`` by id. Replacements keep their position."""
        updated = list(self._notes)
        for index, existing in enumerate(updated):
            if existing.id == note.id:
                updated[index] = note
                break
        else:
            updated.insert(0, note)
        await self._persist(updated)
        self._notes = updated
        logger.info(f"Saved note {note.id[:8]} ({len(updated)} notes)")
        return note

    async def delete(self, note_id: str) -> bool:
        """Remove the note with ``note_id``. Deleting an absent id is a no-op."""
        remaining = [n for n in self._notes if n.id != note_id]
        deleted = len(remaining) != len(self._notes)
        await self._persist(remaining)
        self._notes = remaining
        if deleted:
            logger.info(f"Deleted note {note_id[:8]}")
        return deleted

    def search(self, query: str) -> list[Note]:
        """Case-insensitive substring match on titles and tags, in collection order."""
        if not query:
            return self.all()
        needle = query.lower()
        return [
            n for n in self._notes
            if needle in n.title.lower() or any(needle in t.lower() for t in n.tags)
        ]
