"""
MindScape - FastAPI Backend
"""

from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
import socketio

from mindscape import __version__
from mindscape.config import settings
from mindscape.database.db import init_db
from mindscape.logging import setup_logging, get_logger
from mindscape.realtime import emit_transcript, sio
from mindscape.routers import brainstorm, editor, notes, view
from mindscape.services.backboard import BackboardService
from mindscape.services.note_store import NoteStore
from mindscape.services.view_controller import ViewController
from mindscape.services.writing_assistant import WritingAssistant

logger = get_logger('main')


async def init_state(
    app: FastAPI,
    backboard: BackboardService,
    db_path: str | Path | None = None,
) -> None:
    """
    Create the database, load the notes and attach the services to ``app.state``.

    :param app: Application to populate
    :type app: FastAPI
    :param backboard: Initialized Backboard transport
    :type backboard: BackboardService
    :param db_path: Database file, defaults to the configured path
    :type db_path: str | Path | None
    :return: None
    :rtype: None
    """
    db_path = db_path or settings.DATABASE_PATH
    await init_db(db_path)
    logger.info("Database initialized")

    app.state.backboard = backboard
    app.state.writing_assistant = WritingAssistant(backboard)
    app.state.note_store = NoteStore(
        db_path=db_path,
        storage_key=settings.NOTES_STORAGE_KEY,
    )
    await app.state.note_store.load()
    app.state.view_controller = ViewController(
        store=app.state.note_store,
        assistant=app.state.writing_assistant,
        settings=settings,
        on_transcript_change=emit_transcript,
    )
    logger.info("Services initialized")


@asynccontextmanager
async def lifespan(app: FastAPI):
    setup_logging(settings.DEBUG)
    logger.info("Starting MindScape API")

    backboard = BackboardService()
    await backboard.initialize()
    await init_state(app, backboard)

    yield

    logger.info("Shutting down application")


def create_app() -> FastAPI:
    app = FastAPI(
        title="MindScape API",
        description="Personal notes with AI summaries, polish and brainstorming",
        version=__version__,
        lifespan=lifespan
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(notes.router, prefix="/api/notes", tags=["Notes"])
    app.include_router(view.router, prefix="/api/view", tags=["View"])
    app.include_router(editor.router, prefix="/api/editor", tags=["Editor"])
    app.include_router(brainstorm.router, prefix="/api/brainstorm", tags=["Brainstorm"])

    @app.get("/health")
    async def health_check():
        return {
            "status": "healthy",
            "service": "mindscape",
            "backboard_available": app.state.backboard.is_available if hasattr(app.state, 'backboard') else False,
        }

    @app.get("/")
    async def root():
        return {
            "name": "MindScape API",
            "version": __version__,
            "docs": "/docs",
            "health": "/health"
        }

    return app


app = create_app()
asgi_app = socketio.ASGIApp(sio, other_asgi_app=app)
