"""Shared test fixtures for MindScape."""

import asyncio
from types import SimpleNamespace
from unittest.mock import AsyncMock, patch

import pytest
import pytest_asyncio

from mindscape.database.db import init_db
from mindscape.realtime import sio
from mindscape.services.backboard import BackboardService
from mindscape.services.note_store import NoteStore
from mindscape.services.writing_assistant import WritingAssistant


class FakeBackboardClient:
    """In-memory stand-in for backboard.BackboardClient.

    Replies with ``reply`` (or ``reply_for(prompt)``), raises when ``fail`` is
    set, and blocks on ``gate`` when one is installed.
    """

    def __init__(self, reply: str = "AI reply"):
        self.reply = reply
        self.reply_for = None
        self.fail = False
        self.gate: asyncio.Event | None = None
        self.assistants: list[dict] = []
        self.threads: list[str] = []
        self.deleted_threads: list[str] = []
        self.messages: list[dict] = []

    async def create_assistant(self, name, description=None, **kwargs):
        assistant_id = f"asst-{len(self.assistants) + 1}"
        self.assistants.append({"id": assistant_id, "name": name, "description": description})
        return SimpleNamespace(assistant_id=assistant_id)

    async def create_thread(self, assistant_id):
        thread_id = f"thread-{len(self.threads) + 1}"
        self.threads.append(thread_id)
        return SimpleNamespace(thread_id=thread_id)

    async def delete_thread(self, thread_id):
        self.deleted_threads.append(thread_id)

    async def add_message(self, thread_id, content, **kwargs):
        self.messages.append({"thread_id": thread_id, "content": content, **kwargs})
        if self.gate is not None:
            await self.gate.wait()
        if self.fail:
            raise ConnectionError("503 service unavailable")
        text = self.reply_for(content) if self.reply_for else self.reply
        return SimpleNamespace(
            content=text,
            model_provider="google",
            model_name="gemini-2.5-flash",
            input_tokens=10,
            output_tokens=20,
            total_tokens=30,
        )


@pytest.fixture(autouse=True)
def silence_socketio():
    """Capture Socket.IO emits instead of sending them."""
    with patch.object(sio, "emit", new=AsyncMock()) as emit:
        yield emit


@pytest.fixture
def fake_client():
    return FakeBackboardClient()


@pytest.fixture
def backboard(fake_client):
    service = BackboardService(api_key="test-key")
    service.client = fake_client
    service._initialized = True
    return service


@pytest.fixture
def offline_backboard():
    """Backboard transport with no credential configured."""
    return BackboardService(api_key="")


@pytest.fixture
def assistant(backboard):
    return WritingAssistant(backboard)


@pytest.fixture
def offline_assistant(offline_backboard):
    return WritingAssistant(offline_backboard)


@pytest_asyncio.fixture
async def db_path(tmp_path):
    path = tmp_path / "mindscape.db"
    await init_db(path)
    return path


@pytest_asyncio.fixture
async def store(db_path):
    note_store = NoteStore(db_path=db_path, storage_key="mindscape_posts")
    await note_store.load()
    return note_store
