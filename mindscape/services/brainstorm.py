"""Brainstorm chat surface: one session, a transcript and a loading placeholder."""

from collections.abc import Awaitable, Callable

from mindscape.logging import get_logger
from mindscape.models import AiTextResult, ChatMessage, ChatSession, DegradedReason, MessageRole
from mindscape.services.writing_assistant import WritingAssistant

logger = get_logger('services.brainstorm')

GREETING = (
    "Hello! I'm your creative assistant. What specific topics or confusing "
    "concepts are you trying to untangle today?"
)
CHAT_MISSING_CREDENTIAL = "API Key missing."
CHAT_ERROR = "Sorry, I encountered an error connecting to the AI."

TranscriptListener = Callable[[list[ChatMessage]], Awaitable[None]]


def reply_text(result: AiTextResult) -> str:
    if result.success and result.text:
        return result.text
    if result.reason == DegradedReason.MISSING_CREDENTIAL:
        return CHAT_MISSING_CREDENTIAL
    if result.reason == DegradedReason.EMPTY_RESPONSE:
        return ""
    return CHAT_ERROR


class Transcript:
    """Ordered message log keyed by message id."""

    def __init__(self, messages: list[ChatMessage] | None = None):
        self._messages: list[ChatMessage] = list(messages or [])

    def __len__(self) -> int:
        return len(self._messages)

    def messages(self) -> list[ChatMessage]:
        return list(self._messages)

    def placeholders(self) -> list[ChatMessage]:
        return [m for m in self._messages if m.is_loading]

    def append(self, message: ChatMessage) -> ChatMessage:
        if any(m.id == message.id for m in self._messages):
            raise ValueError(f"Duplicate message id {message.id}")
        if message.is_loading and self.placeholders():
            raise ValueError("A response placeholder is already pending")
        self._messages.append(message)
        return message

    def remove(self, message_id: str) -> bool:
        remaining = [m for m in self._messages if m.id != message_id]
        removed = len(remaining) != len(self._messages)
        self._messages = remaining
        return removed

    def replace(self, message_id: str, message: ChatMessage) -> ChatMessage:
        """Drop ``message_id`` and append ``message`` at the end of the log."""
        if not self.remove(message_id):
            raise LookupError(f"Message {message_id} not found")
        return self.append(message)


class BrainstormSurface:
    """Chat transcript bound to a single brainstorm session for its lifetime."""

    def __init__(
        self,
        assistant: WritingAssistant,
        on_change: TranscriptListener | None = None,
    ):
        self.assistant = assistant
        self.on_change = on_change
        self.session: ChatSession | None = None
        self.transcript = Transcript(
            [ChatMessage(role=MessageRole.ASSISTANT, text=GREETING)]
        )
        self.is_loading = False

    async def activate(self) -> ChatSession:
        if self.session is None:
            self.session = await self.assistant.start_brainstorm_session()
        return self.session

    async def _notify(self) -> None:
        if self.on_change is not None:
            await self.on_change(self.transcript.messages())

    async def send(self, text: str) -> ChatMessage | None:
        """
        Send one user message and wait for the assistant's reply.

        Blank input, or a send while another is pending, does nothing.

        :param text: The user's message
        :type text: str
        :return: The assistant message appended, or None when nothing was sent
        :rtype: ChatMessage | None
        """
        if not text.strip() or self.is_loading:
            return None

        self.is_loading = True
        try:
            session = await self.activate()
            self.transcript.append(ChatMessage(role=MessageRole.USER, text=text))
            placeholder = self.transcript.append(
                ChatMessage(role=MessageRole.ASSISTANT, is_loading=True)
            )
            await self._notify()

            result = await self.assistant.send_message(session, text)

            reply = self.transcript.replace(
                placeholder.id,
                ChatMessage(role=MessageRole.ASSISTANT, text=reply_text(result)),
            )
            await self._notify()
            return reply
        finally:
            self.is_loading = False
