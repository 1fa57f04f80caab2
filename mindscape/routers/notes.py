"""Note routes."""

from fastapi import APIRouter, HTTPException, Query

from mindscape.dependencies import NoteStoreDep, ViewControllerDep
from mindscape.models import Note
from mindscape.realtime import emit_notes_changed

router = APIRouter()


@router.get("/", response_model=list[Note])
async def list_notes(
    store: NoteStoreDep,
    search: str = Query("", description="Match against titles and tags"),
):
    return store.search(search)


@router.get("/{note_id}", response_model=Note)
async def get_note(note_id: str, store: NoteStoreDep):
    note = store.get(note_id)
    if not note:
        raise HTTPException(404, "Note not found")
    return note


@router.delete("/{note_id}")
async def delete_note(
    note_id: str,
    controller: ViewControllerDep,
    confirm: bool = Query(False, description="Confirm the deletion"),
):
    deleted = await controller.request_delete(note_id, confirmed=confirm)
    if deleted:
        await emit_notes_changed(len(controller.store), note_id)
    return {
        "status": "deleted" if deleted else ("not_found" if confirm else "unconfirmed"),
        "id": note_id,
        "view": controller.state,
    }
