"""Editor endpoints: draft edits, AI polish, save and cancel."""

from fastapi import APIRouter, HTTPException

from mindscape.dependencies import ViewControllerDep
from mindscape.errors import ActionInFlightError, InvalidViewError
from mindscape.models import EditorDraftUpdate, EditorState, Note, ViewState
from mindscape.realtime import emit_notes_changed

router = APIRouter()


@router.get("/", response_model=EditorState)
async def get_editor(controller: ViewControllerDep):
    try:
        return controller.require_editor().state()
    except InvalidViewError as exc:
        raise HTTPException(409, str(exc)) from exc


@router.put("/", response_model=EditorState)
async def update_draft(body: EditorDraftUpdate, controller: ViewControllerDep):
    try:
        editor = controller.require_editor()
    except InvalidViewError as exc:
        raise HTTPException(409, str(exc)) from exc
    editor.update(body)
    return editor.state()


@router.post("/polish", response_model=EditorState)
async def polish_draft(controller: ViewControllerDep):
    try:
        editor = controller.require_editor()
        await editor.polish()
    except (InvalidViewError, ActionInFlightError) as exc:
        raise HTTPException(409, str(exc)) from exc
    return editor.state()


@router.post("/save", response_model=Note)
async def save_note(controller: ViewControllerDep):
    try:
        note = await controller.save()
    except (InvalidViewError, ActionInFlightError) as exc:
        raise HTTPException(409, str(exc)) from exc
    except ValueError as exc:
        raise HTTPException(400, str(exc)) from exc
    await emit_notes_changed(len(controller.store), note.id)
    return note


@router.post("/cancel", response_model=ViewState)
async def cancel_edit(controller: ViewControllerDep):
    try:
        return controller.cancel_edit()
    except InvalidViewError as exc:
        raise HTTPException(409, str(exc)) from exc
