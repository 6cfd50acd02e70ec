"""Test the Gemini REST backend."""

from unittest.mock import MagicMock, patch

import pytest
import requests

from reqbot.models.conversation_models import ConversationMessage, MessagePart
from reqbot.services.llm_gateway import ProviderConfigurationError, ProviderResponseError
from reqbot.services.llm_gateway.providers.gemini import GeminiProvider

POST_PATH = "reqbot.services.llm_gateway.providers.gemini.requests.post"


def _response(status_code: int = 200, payload=None, reason: str = "OK") -> MagicMock:
    response = MagicMock()
    response.ok = 200 <= status_code < 300
    response.status_code = status_code
    response.reason = reason
    if isinstance(payload, Exception):
        response.json.side_effect = payload
    else:
        response.json.return_value = payload
    return response


class TestGeminiProvider:
    """Test cases for GeminiProvider."""

    def setup_method(self) -> None:
        self.provider = GeminiProvider(
            api_key="g-key",
            model="gemini-2.0-flash",
            timeout=12.0,
            base_url="https://example.test/v1beta/models/",
        )
        self.messages = [
            ConversationMessage.from_text("user", "I want a booking app"),
            ConversationMessage.from_text("model", "Who will use it?"),
            ConversationMessage(role="user", parts=[MessagePart(text="")]),
        ]

    @patch(POST_PATH)
    def test_posts_conversation_and_joins_parts(self, mock_post: MagicMock) -> None:
        mock_post.return_value = _response(
            payload={
                "candidates": [
                    {"content": {"parts": [{"text": "Clinics "}, {"text": ""}, {"text": "and patients"}]}}
                ]
            }
        )

        result = self.provider.invoke("Be helpful", self.messages)

        assert result == "Clinics \nand patients"
        args, kwargs = mock_post.call_args
        assert args[0] == "https://example.test/v1beta/models/gemini-2.0-flash:generateContent"
        assert kwargs["params"] == {"key": "g-key"}
        assert kwargs["timeout"] == 12.0
        payload = kwargs["json"]
        assert payload["contents"] == [
            {"role": "user", "parts": [{"text": "I want a booking app"}]},
            {"role": "model", "parts": [{"text": "Who will use it?"}]},
        ]
        assert payload["systemInstruction"]["parts"] == [{"text": "Be helpful"}]
        assert "generationConfig" not in payload

    @patch(POST_PATH)
    def test_json_mode_requests_json_mime_type(self, mock_post: MagicMock) -> None:
        mock_post.return_value = _response(
            payload={"candidates": [{"content": {"parts": [{"text": "{}"}]}}]}
        )

        self.provider.invoke("system", self.messages, response_mode="json")

        payload = mock_post.call_args.kwargs["json"]
        assert payload["generationConfig"] == {"responseMimeType": "application/json"}

    @patch(POST_PATH)
    def test_error_status_uses_api_message(self, mock_post: MagicMock) -> None:
        mock_post.return_value = _response(
            status_code=429,
            reason="Too Many Requests",
            payload={"error": {"message": "Resource has been exhausted"}},
        )

        with pytest.raises(ProviderResponseError, match="Resource has been exhausted"):
            self.provider.invoke("system", self.messages)

    @patch(POST_PATH)
    def test_error_status_without_body_uses_status_line(self, mock_post: MagicMock) -> None:
        mock_post.return_value = _response(
            status_code=503, reason="Service Unavailable", payload=ValueError("no json")
        )

        with pytest.raises(ProviderResponseError) as exc_info:
            self.provider.invoke("system", self.messages)

        assert exc_info.value.message == "Gemini API error: 503 Service Unavailable"
        assert exc_info.value.provider == "gemini"

    @patch(POST_PATH)
    def test_timeout_is_a_provider_failure(self, mock_post: MagicMock) -> None:
        mock_post.side_effect = requests.exceptions.Timeout("read timed out")

        with pytest.raises(ProviderResponseError, match="timeout"):
            self.provider.invoke("system", self.messages)

    @patch(POST_PATH)
    def test_connection_error_is_a_provider_failure(self, mock_post: MagicMock) -> None:
        mock_post.side_effect = requests.exceptions.ConnectionError("refused")

        with pytest.raises(ProviderResponseError, match="request error"):
            self.provider.invoke("system", self.messages)

    @patch(POST_PATH)
    def test_blocked_prompt_is_reported(self, mock_post: MagicMock) -> None:
        mock_post.return_value = _response(payload={"promptFeedback": {"blockReason": "SAFETY"}})

        with pytest.raises(ProviderResponseError, match="SAFETY"):
            self.provider.invoke("system", self.messages)

    @patch(POST_PATH)
    def test_missing_candidates_is_malformed(self, mock_post: MagicMock) -> None:
        mock_post.return_value = _response(payload={"candidates": []})

        with pytest.raises(ProviderResponseError, match="no candidates"):
            self.provider.invoke("system", self.messages)

    @patch(POST_PATH)
    def test_missing_key_never_calls_the_api(self, mock_post: MagicMock) -> None:
        provider = GeminiProvider(api_key=None, model="m", timeout=1.0, base_url="https://x")

        with pytest.raises(ProviderConfigurationError, match="Gemini API key is not configured"):
            provider.invoke("system", self.messages)

        mock_post.assert_not_called()
