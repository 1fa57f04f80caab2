"""Brainstorm chat endpoints."""

from fastapi import APIRouter, HTTPException

from mindscape.dependencies import ViewControllerDep
from mindscape.errors import InvalidViewError
from mindscape.models import BrainstormSendRequest, BrainstormTranscript

router = APIRouter()


@router.get("/messages", response_model=BrainstormTranscript)
async def get_messages(controller: ViewControllerDep):
    try:
        surface = controller.require_brainstorm()
    except InvalidViewError as exc:
        raise HTTPException(409, str(exc)) from exc
    return BrainstormTranscript(
        messages=surface.transcript.messages(),
        is_loading=surface.is_loading,
    )


@router.post("/messages", response_model=BrainstormTranscript)
async def send_message(body: BrainstormSendRequest, controller: ViewControllerDep):
    try:
        surface = controller.require_brainstorm()
    except InvalidViewError as exc:
        raise HTTPException(409, str(exc)) from exc
    reply = await surface.send(body.text)
    return BrainstormTranscript(
        messages=surface.transcript.messages(),
        is_loading=surface.is_loading,
        accepted=reply is not None,
    )
