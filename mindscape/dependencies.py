"""
Dependency injection for FastAPI routes.

Provides typed service dependencies that enable IDE navigation (Ctrl+Click).
"""

from typing import Annotated
from fastapi import Request, Depends

from mindscape.services.note_store import NoteStore
from mindscape.services.view_controller import ViewController


def get_note_store(request: Request) -> NoteStore:
    return request.app.state.note_store


def get_view_controller(request: Request) -> ViewController:
    return request.app.state.view_controller


NoteStoreDep = Annotated[NoteStore, Depends(get_note_store)]
ViewControllerDep = Annotated[ViewController, Depends(get_view_controller)]
