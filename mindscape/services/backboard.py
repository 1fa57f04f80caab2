"""
Backboard.io integration service.

Handles assistant management, thread lifecycle and chat. Prompting and
fallback policy live in WritingAssistant; this is the transport layer.
"""

from typing import Any

from backboard import BackboardClient

from mindscape.config import settings
from mindscape.logging import get_logger
from mindscape.models import (
    AssistantCreated, ThreadCreated, ThreadDeleted, ChatResponse,
)

logger = get_logger('services.backboard')


class BackboardService:
    """Service for interacting with Backboard.io."""

    def __init__(self, api_key: str | None = None):
        self.api_key = settings.BACKBOARD_API_KEY if api_key is None else api_key
        self.client = None
        self._initialized = False

    async def initialize(self):
        if not self.api_key:
            logger.warning("BACKBOARD_API_KEY not set - AI features will be disabled")
            return

        try:
            self.client = BackboardClient(api_key=self.api_key)
            self._initialized = True
            logger.info("Backboard client initialized")
        except Exception as e:
            logger.error(f"Failed to initialize Backboard: {e}")

    @property
    def is_available(self) -> bool:
        return self._initialized and self.client is not None

    # ── Assistants ──

    async def create_assistant(self, name: str, system_prompt: str) -> AssistantCreated:
        if not self.is_available:
            return AssistantCreated(success=False)

        try:
            assistant = await self.client.create_assistant(
                name=name,
                description=system_prompt,
            )
            logger.info(f"Created assistant '{name}': {assistant.assistant_id}")
            return AssistantCreated(success=True, id=str(assistant.assistant_id))
        except Exception as e:
            logger.error(f"Failed to create assistant '{name}': {e}")
            return AssistantCreated(success=False)

    # ── Threads ──

    async def create_thread(self, assistant_id: str) -> ThreadCreated:
        if not self.is_available:
            return ThreadCreated(success=False)

        try:
            thread = await self.client.create_thread(assistant_id=assistant_id)
            return ThreadCreated(success=True, id=str(thread.thread_id))
        except Exception as e:
            logger.error(f"Failed to create thread for assistant {assistant_id}: {e}")
            return ThreadCreated(success=False)

    async def delete_thread(self, thread_id: str) -> ThreadDeleted:
        if not self.is_available:
            return ThreadDeleted(success=False)

        try:
            await self.client.delete_thread(thread_id=thread_id)
            return ThreadDeleted(success=True)
        except Exception as e:
            logger.error(f"Failed to delete thread: {e}")
            return ThreadDeleted(success=False)

    # ── Chat ──

    def _memory_mode(self, memory: bool) -> str:
        return "Auto" if memory else "off"

    async def chat(self, thread_id: str, prompt: str, memory: bool = False) -> ChatResponse:
        if not self.is_available:
            return ChatResponse(success=False, error="Backboard service unavailable")

        llm_provider = str(settings.LLM_PROVIDER or "").strip()
        model_name = str(settings.MODEL_NAME or "").strip()
        memory_mode = self._memory_mode(memory)
        add_message_kwargs: dict[str, Any] = {
            "thread_id": thread_id,
            "content": prompt,
            "memory": memory_mode,
        }
        if llm_provider:
            add_message_kwargs["llm_provider"] = llm_provider
        if model_name:
            add_message_kwargs["model_name"] = model_name

        try:
            response = await self.client.add_message(**add_message_kwargs)
        except Exception as e:
            logger.error(f"Chat failed for thread {thread_id}: {e}")
            return ChatResponse(success=False, error=str(e))

        response_model_provider = str(getattr(response, "model_provider", "") or "").strip() or None
        response_model_name = str(getattr(response, "model_name", "") or "").strip() or None
        input_tokens = getattr(response, "input_tokens", None)
        output_tokens = getattr(response, "output_tokens", None)
        total_tokens = getattr(response, "total_tokens", None)

        if model_name and response_model_name and response_model_name.lower() != model_name.lower():
            logger.warning(
                "Backboard model mismatch thread=%s requested=%s actual=%s",
                thread_id,
                model_name,
                response_model_name,
            )

        logger.info(
            "Backboard usage thread=%s provider=%s model=%s memory=%s tokens=%s/%s/%s",
            thread_id,
            response_model_provider or "(unknown)",
            response_model_name or "(unknown)",
            memory_mode,
            input_tokens if input_tokens is not None else "?",
            output_tokens if output_tokens is not None else "?",
            total_tokens if total_tokens is not None else "?",
        )

        return ChatResponse(
            success=True,
            response=getattr(response, "content", None),
            model_provider=response_model_provider,
            model_name=response_model_name,
            input_tokens=input_tokens,
            output_tokens=output_tokens,
            total_tokens=total_tokens,
        )
