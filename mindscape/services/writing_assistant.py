"""
AI writing aids: summary, polish and the brainstorm chat.

Every call is best-effort. Nothing here raises on a missing credential or a
failed remote call; the outcome is an AiTextResult and callers choose the
text to show for a degraded result.
"""

from mindscape.logging import get_logger
from mindscape.models import AiTextResult, ChatResponse, ChatSession, DegradedReason
from mindscape.services.backboard import BackboardService
from mindscape.services.prompts import (
    BRAINSTORM_ASSISTANT_NAME,
    WRITER_ASSISTANT_NAME,
    build_brainstorm_system_prompt,
    build_polish_prompt,
    build_summary_prompt,
    build_writer_assistant_prompt,
)

logger = get_logger('services.writing_assistant')


class WritingAssistant:
    """Gateway from the editor and brainstorm surfaces to the AI service."""

    def __init__(self, backboard: BackboardService):
        self.backboard = backboard
        self._assistant_ids: dict[str, str] = {}

    def _unavailable(self) -> AiTextResult | None:
        if not self.backboard.api_key:
            return AiTextResult.degraded(DegradedReason.MISSING_CREDENTIAL)
        if not self.backboard.is_available:
            return AiTextResult.degraded(
                DegradedReason.REMOTE_ERROR, error="Backboard service unavailable"
            )
        return None

    async def _get_assistant_id(self, name: str, system_prompt: str) -> str | None:
        cached = self._assistant_ids.get(name)
        if cached:
            return cached

        result = await self.backboard.create_assistant(name, system_prompt)
        if not result.success or not result.id:
            return None
        self._assistant_ids[name] = result.id
        return result.id

    def _to_result(self, operation: str, chat: ChatResponse) -> AiTextResult:
        if not chat.success:
            logger.error(f"Error in {operation}: {chat.error}")
            return AiTextResult.degraded(DegradedReason.REMOTE_ERROR, error=chat.error)

        text = chat.response or ""
        if not text.strip():
            logger.warning(f"{operation} returned an empty response")
            return AiTextResult.degraded(DegradedReason.EMPTY_RESPONSE)
        return AiTextResult.ok(text)

    async def _generate(self, operation: str, prompt: str) -> AiTextResult:
        unavailable = self._unavailable()
        if unavailable:
            return unavailable

        assistant_id = await self._get_assistant_id(
            WRITER_ASSISTANT_NAME, build_writer_assistant_prompt()
        )
        if not assistant_id:
            return AiTextResult.degraded(
                DegradedReason.REMOTE_ERROR, error="Writer assistant unavailable"
            )

        thread = await self.backboard.create_thread(assistant_id)
        if not thread.success or not thread.id:
            return AiTextResult.degraded(
                DegradedReason.REMOTE_ERROR, error=f"Failed to create {operation} thread"
            )

        try:
            chat = await self.backboard.chat(thread_id=thread.id, prompt=prompt)
        finally:
            await self.backboard.delete_thread(thread.id)
        return self._to_result(operation, chat)

    async def summarize(self, text: str) -> AiTextResult:
        """Request a two-sentence summary capturing the main insight of ``text``."""
        return await self._generate("summary", build_summary_prompt(text))

    async def polish(self, text: str) -> AiTextResult:
        """Request a clearer, more professional rewrite of ``text``."""
        return await self._generate("polish", build_polish_prompt(text))

    # ── Brainstorm ──

    async def _open_brainstorm_thread(self) -> str | None:
        assistant_id = await self._get_assistant_id(
            BRAINSTORM_ASSISTANT_NAME, build_brainstorm_system_prompt()
        )
        if not assistant_id:
            return None
        thread = await self.backboard.create_thread(assistant_id)
        return thread.id if thread.success else None

    async def start_brainstorm_session(self) -> ChatSession:
        """
        Open a conversation primed with the brainstorm system instruction.

        The session is returned even when the AI service is unreachable; its
        thread is then opened on the first message instead.

        :return: Session handle for send_message
        :rtype: ChatSession
        """
        session = ChatSession()
        if self._unavailable() is None:
            session.thread_id = await self._open_brainstorm_thread()
        logger.info(f"Brainstorm session {session.id[:8]} started (thread={session.thread_id})")
        return session

    async def send_message(self, session: ChatSession, text: str) -> AiTextResult:
        """Send one user turn into ``session`` and return the assistant's reply."""
        unavailable = self._unavailable()
        if unavailable:
            return unavailable

        if not session.thread_id:
            session.thread_id = await self._open_brainstorm_thread()
            if not session.thread_id:
                logger.error(f"Error in chat: no thread for session {session.id[:8]}")
                return AiTextResult.degraded(
                    DegradedReason.REMOTE_ERROR, error="Failed to open brainstorm thread"
                )

        chat = await self.backboard.chat(thread_id=session.thread_id, prompt=text, memory=True)
        return self._to_result("chat", chat)
