"""Base class for LLM backends."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional, Sequence

from reqbot.logger_config import get_logger
from reqbot.models.conversation_models import ConversationMessage

from ..models import ProviderConfigurationError, ResponseMode

logger = get_logger("llm.provider")


class BaseLLMProvider(ABC):
    """Common behaviour for LLM backends.

    Subclasses implement a single network attempt in ``_invoke_impl``; this
    class guarantees the credential check happens first so a missing key never
    costs a round trip.
    """

    name: str
    display_name: str

    def __init__(self, api_key: Optional[str], model: str, timeout: float) -> None:
        self.api_key = api_key
        self.model = model
        self.timeout = timeout

    @property
    def is_configured(self) -> bool:
        return bool(self.api_key)

    def invoke(
        self,
        system_prompt: str,
        messages: Sequence[ConversationMessage],
        response_mode: ResponseMode = "freeform",
    ) -> str:
        """Run one attempt against the backend and return its raw text."""
        if not self.is_configured:
            raise ProviderConfigurationError(
                self.name, f"{self.display_name} API key is not configured"
            )
        logger.debug(
            "Calling %s (%s) with %d message(s) in %s mode",
            self.name,
            self.model,
            len(messages),
            response_mode,
        )
        return self._invoke_impl(system_prompt, messages, response_mode)

    @abstractmethod
    def _invoke_impl(
        self,
        system_prompt: str,
        messages: Sequence[ConversationMessage],
        response_mode: ResponseMode,
    ) -> str:
        """Return the backend's text for the conversation."""
        raise NotImplementedError
