"""Google Gemini backend over the ``generateContent`` REST endpoint."""

from __future__ import annotations

from typing import Any, Dict, List, Sequence

import requests

from configs import Settings
from reqbot.models.conversation_models import ConversationMessage

from ..models import ProviderResponseError, ResponseMode
from .base import BaseLLMProvider


class GeminiProvider(BaseLLMProvider):
    """Call Gemini with the system instruction and the full conversation."""

    name = "gemini"
    display_name = "Gemini"

    def __init__(
        self, api_key: str | None, model: str, timeout: float, base_url: str
    ) -> None:
        super().__init__(api_key, model, timeout)
        self.base_url = base_url.rstrip("/")

    @classmethod
    def from_settings(cls, config: Settings) -> "GeminiProvider":
        return cls(
            api_key=config.GEMINI_API_KEY,
            model=config.GEMINI_MODEL,
            timeout=config.LLM_TIMEOUT_SECONDS,
            base_url=config.GEMINI_API_URL,
        )

    def _invoke_impl(
        self,
        system_prompt: str,
        messages: Sequence[ConversationMessage],
        response_mode: ResponseMode,
    ) -> str:
        url = f"{self.base_url}/{self.model}:generateContent"
        payload = self._build_payload(system_prompt, messages, response_mode)

        try:
            response = requests.post(
                url,
                params={"key": self.api_key},
                headers={"Content-Type": "application/json"},
                json=payload,
                timeout=self.timeout,
            )
        except requests.exceptions.Timeout as timeout_err:
            raise ProviderResponseError(
                self.name, f"Gemini API timeout after {self.timeout}s: {timeout_err}"
            ) from timeout_err
        except requests.exceptions.RequestException as req_err:
            raise ProviderResponseError(
                self.name, f"Gemini API request error: {req_err}"
            ) from req_err

        if not response.ok:
            raise ProviderResponseError(self.name, self._error_message(response))

        try:
            data = response.json()
        except ValueError as exc:
            raise ProviderResponseError(
                self.name, "Gemini API returned a non-JSON body"
            ) from exc

        return self._extract_text(data)

    def _build_payload(
        self,
        system_prompt: str,
        messages: Sequence[ConversationMessage],
        response_mode: ResponseMode,
    ) -> Dict[str, Any]:
        contents: List[Dict[str, Any]] = [
            {"role": message.role, "parts": [{"text": message.text}]}
            for message in messages
            if message.text
        ]
        payload: Dict[str, Any] = {"contents": contents}
        if system_prompt:
            payload["systemInstruction"] = {
                "role": "user",
                "parts": [{"text": system_prompt}],
            }
        if response_mode == "json":
            payload["generationConfig"] = {"responseMimeType": "application/json"}
        return payload

    def _extract_text(self, data: Any) -> str:
        candidates = data.get("candidates") if isinstance(data, dict) else None
        if not isinstance(candidates, list) or not candidates:
            block_reason = (
                (data.get("promptFeedback") or {}).get("blockReason")
                if isinstance(data, dict)
                else None
            )
            if block_reason:
                raise ProviderResponseError(
                    self.name, f"Gemini blocked the prompt: {block_reason}"
                )
            raise ProviderResponseError(self.name, "Gemini response has no candidates")

        content = candidates[0].get("content") or {}
        parts = content.get("parts") or []
        fragments = [
            part["text"]
            for part in parts
            if isinstance(part, dict) and isinstance(part.get("text"), str) and part["text"]
        ]
        return "\n".join(fragments).strip()

    @staticmethod
    def _error_message(response: requests.Response) -> str:
        try:
            error = response.json().get("error") or {}
            message = error.get("message") if isinstance(error, dict) else None
        except ValueError:
            message = None
        return message or f"Gemini API error: {response.status_code} {response.reason}"
