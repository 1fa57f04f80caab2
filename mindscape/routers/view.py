"""View navigation endpoints."""

from fastapi import APIRouter, HTTPException

from mindscape.dependencies import ViewControllerDep
from mindscape.models import EditRequest, NavigateRequest, SearchRequest, ViewSnapshot

router = APIRouter()


@router.get("/", response_model=ViewSnapshot)
async def get_view(controller: ViewControllerDep):
    return controller.snapshot()


@router.post("/navigate", response_model=ViewSnapshot)
async def navigate(body: NavigateRequest, controller: ViewControllerDep):
    await controller.navigate(body.target)
    return controller.snapshot()


@router.post("/read/{note_id}", response_model=ViewSnapshot)
async def read_note(note_id: str, controller: ViewControllerDep):
    try:
        controller.select_for_read(note_id)
    except LookupError as exc:
        raise HTTPException(404, str(exc)) from exc
    return controller.snapshot()


@router.post("/edit", response_model=ViewSnapshot)
async def edit_note(body: EditRequest, controller: ViewControllerDep):
    try:
        controller.select_for_edit(body.note_id)
    except LookupError as exc:
        raise HTTPException(404, str(exc)) from exc
    return controller.snapshot()


@router.post("/search", response_model=ViewSnapshot)
async def search_notes(body: SearchRequest, controller: ViewControllerDep):
    controller.set_search(body.query)
    return controller.snapshot()
