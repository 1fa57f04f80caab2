"""
View state machine.

Exactly one of list, read, edit or brainstorm is active. Every transition
replaces the ViewState value as a whole, so the view and the selected note
always change together.
"""

from mindscape.config import Settings, settings as default_settings
from mindscape.errors import InvalidViewError
from mindscape.logging import get_logger
from mindscape.models import (
    NavigationTarget,
    Note,
    ViewName,
    ViewSnapshot,
    ViewState,
)
from mindscape.services.brainstorm import BrainstormSurface, TranscriptListener
from mindscape.services.editor import Editor
from mindscape.services.note_store import NoteStore
from mindscape.services.writing_assistant import WritingAssistant

logger = get_logger('services.view_controller')


class ViewController:
    """Mediates every user action against the note store."""

    def __init__(
        self,
        store: NoteStore,
        assistant: WritingAssistant,
        settings: Settings | None = None,
        on_transcript_change: TranscriptListener | None = None,
    ):
        self.store = store
        self.assistant = assistant
        self.settings = settings or default_settings
        self.on_transcript_change = on_transcript_change
        self.state = ViewState()
        self.editor: Editor | None = None
        self.brainstorm: BrainstormSurface | None = None

    def _transition(self, view: ViewName, selected_note_id: str | None = None) -> ViewState:
        if view != ViewName.EDIT:
            self.editor = None
        if view != ViewName.BRAINSTORM:
            self.brainstorm = None
        self.state = self.state.model_copy(
            update={"view": view, "selected_note_id": selected_note_id}
        )
        logger.debug(f"View -> {view.value} (selected={selected_note_id})")
        return self.state

    def _require_note(self, note_id: str) -> Note:
        note = self.store.get(note_id)
        if note is None:
            raise LookupError(f"Note {note_id} not found")
        return note

    def require_editor(self) -> Editor:
        if self.state.view != ViewName.EDIT or self.editor is None:
            raise InvalidViewError("The editor is not open")
        return self.editor

    def require_brainstorm(self) -> BrainstormSurface:
        if self.state.view != ViewName.BRAINSTORM or self.brainstorm is None:
            raise InvalidViewError("Brainstorm is not open")
        return self.brainstorm

    @property
    def selected_note(self) -> Note | None:
        if self.state.selected_note_id is None:
            return None
        return self.store.get(self.state.selected_note_id)

    # ── Transitions ──

    def select_for_read(self, note_id: str) -> ViewState:
        self._require_note(note_id)
        return self._transition(ViewName.READ, note_id)

    def select_for_edit(self, note_id: str | None = None) -> ViewState:
        note = self._require_note(note_id) if note_id is not None else None
        self.editor = Editor(self.assistant, note=note, settings=self.settings)
        return self._transition(ViewName.EDIT, note_id)

    async def request_delete(self, note_id: str, confirmed: bool) -> bool:
        """Delete a note once the user has confirmed. Unconfirmed requests do nothing."""
        if not confirmed:
            return False
        deleted = await self.store.delete(note_id)
        if self.state.selected_note_id == note_id:
            self._transition(ViewName.LIST)
        return deleted

    async def save(self) -> Note:
        editor = self.require_editor()
        note = await editor.build_note()
        await self.store.save(note)
        self._transition(ViewName.LIST)
        return note

    def cancel_edit(self) -> ViewState:
        self.require_editor()
        return self._transition(ViewName.LIST)

    def set_search(self, query: str) -> ViewState:
        self.state = self.state.model_copy(update={"search_query": query})
        return self._transition(ViewName.LIST)

    async def navigate(self, target: NavigationTarget) -> ViewState:
        if target == NavigationTarget.EDIT:
            return self.select_for_edit(None)
        if target == NavigationTarget.BRAINSTORM:
            if self.state.view == ViewName.BRAINSTORM and self.brainstorm is not None:
                return self.state
            surface = BrainstormSurface(self.assistant, on_change=self.on_transcript_change)
            self._transition(ViewName.BRAINSTORM)
            self.brainstorm = surface
            await surface.activate()
            return self.state
        return self._transition(ViewName.LIST)

    # ── Rendering ──

    def visible_notes(self) -> list[Note]:
        return self.store.search(self.state.search_query)

    def snapshot(self) -> ViewSnapshot:
        snapshot = ViewSnapshot(state=self.state, note_count=len(self.store))
        view = self.state.view
        if view == ViewName.LIST:
            snapshot.notes = self.visible_notes()
        elif view == ViewName.READ:
            snapshot.note = self.selected_note
        elif view == ViewName.EDIT and self.editor is not None:
            snapshot.editor = self.editor.state()
        elif view == ViewName.BRAINSTORM and self.brainstorm is not None:
            snapshot.messages = self.brainstorm.transcript.messages()
        return snapshot
