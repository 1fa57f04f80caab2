"""Socket.IO server pushing note and transcript changes to connected clients."""

import socketio

from mindscape.logging import get_logger
from mindscape.models import ChatMessage

logger = get_logger('realtime')

sio = socketio.AsyncServer(
    async_mode='asgi',
    cors_allowed_origins='*'
)


@sio.event
async def connect(sid, environ):
    logger.debug(f"Client {sid[:8]}... connected")


@sio.event
async def disconnect(sid):
    logger.debug(f"Client {sid[:8]}... disconnected")


async def emit_notes_changed(note_count: int, note_id: str | None = None) -> None:
    await sio.emit("notes_changed", {"note_count": note_count, "note_id": note_id})


async def emit_transcript(messages: list[ChatMessage]) -> None:
    await sio.emit(
        "transcript_updated",
        {"messages": [m.model_dump(mode="json") for m in messages]},
    )
