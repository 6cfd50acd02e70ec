"""OpenAI chat completions backend."""

from __future__ import annotations

from typing import Any, Dict, List, Optional, Sequence, cast

from openai import APIStatusError, APITimeoutError, OpenAI, OpenAIError

from configs import Settings
from reqbot.models.conversation_models import ConversationMessage

from ..models import ProviderResponseError, ResponseMode
from .base import BaseLLMProvider

FREEFORM_TEMPERATURE = 0.7
JSON_TEMPERATURE = 0.3


class ChatGPTProvider(BaseLLMProvider):
    """Wrapper around the OpenAI client with retries disabled.

    The gateway owns the fallback policy, so the SDK's own retry loop is turned
    off to keep exactly one attempt per backend.
    """

    name = "openai"
    display_name = "ChatGPT"

    def __init__(self, api_key: Optional[str], model: str, timeout: float) -> None:
        super().__init__(api_key, model, timeout)
        self._client: Optional[OpenAI] = None

    @classmethod
    def from_settings(cls, config: Settings) -> "ChatGPTProvider":
        return cls(
            api_key=config.OPENAI_API_KEY,
            model=config.OPENAI_MODEL,
            timeout=config.LLM_TIMEOUT_SECONDS,
        )

    @property
    def client(self) -> OpenAI:
        if self._client is None:
            self._client = OpenAI(
                api_key=self.api_key, timeout=self.timeout, max_retries=0
            )
        return self._client

    def _invoke_impl(
        self,
        system_prompt: str,
        messages: Sequence[ConversationMessage],
        response_mode: ResponseMode,
    ) -> str:
        chat_messages: List[Dict[str, str]] = []
        if system_prompt:
            chat_messages.append({"role": "system", "content": system_prompt})
        chat_messages.extend(
            {
                "role": "assistant" if message.role == "model" else "user",
                "content": message.text,
            }
            for message in messages
        )

        extra: Dict[str, Any] = {}
        if response_mode == "json":
            extra["response_format"] = {"type": "json_object"}

        try:
            response = self.client.chat.completions.create(
                model=self.model,
                messages=cast(Any, chat_messages),
                temperature=(
                    JSON_TEMPERATURE if response_mode == "json" else FREEFORM_TEMPERATURE
                ),
                **extra,
            )
        except APITimeoutError as timeout_err:
            raise ProviderResponseError(
                self.name, f"ChatGPT API timeout after {self.timeout}s"
            ) from timeout_err
        except APIStatusError as status_err:
            raise ProviderResponseError(
                self.name,
                status_err.message or f"ChatGPT API error: {status_err.status_code}",
            ) from status_err
        except OpenAIError as api_err:
            raise ProviderResponseError(
                self.name, f"ChatGPT API error: {api_err}"
            ) from api_err

        if not response.choices:
            raise ProviderResponseError(self.name, "ChatGPT response has no choices")
        return (response.choices[0].message.content or "").strip()
