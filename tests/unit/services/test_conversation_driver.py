"""Test the interviewer's next-turn logic."""

import pytest

from reqbot.models.conversation_models import ConversationMessage
from reqbot.services.conversation_driver import ConversationDriver
from reqbot.services.llm_gateway import (
    AllProvidersFailedError,
    ProviderGateway,
    ProviderResponseError,
)

FALLBACK = "Could you share more details about your project goals and target users?"


class TestConversationDriver:
    """Test cases for ConversationDriver."""

    def setup_method(self) -> None:
        self.transcript = [
            ConversationMessage.from_text("user", "I need an online store"),
            ConversationMessage.from_text("model", "What will you sell?"),
        ]

    def test_sends_transcript_then_latest_user_text(self, make_provider) -> None:
        provider = make_provider("gemini", reply="  Who are your customers?  ")
        driver = ConversationDriver(ProviderGateway([provider]))

        result = driver.next_turn(self.transcript, "Online Store", "Handmade jewelry")

        assert result == "Who are your customers?"
        call = provider.calls[0]
        assert call["response_mode"] == "freeform"
        assert [message.text for message in call["messages"]] == [
            "I need an online store",
            "What will you sell?",
            "Handmade jewelry",
        ]
        assert call["messages"][-1].role == "user"
        assert '"Online Store"' in call["system_prompt"]

    def test_empty_latest_text_is_not_appended(self, make_provider) -> None:
        provider = make_provider("gemini", reply="Next question")
        driver = ConversationDriver(ProviderGateway([provider]))

        driver.next_turn(self.transcript, "Online Store", "")

        assert len(provider.calls[0]["messages"]) == 2

    def test_missing_project_name_uses_default(self, make_provider) -> None:
        provider = make_provider("gemini", reply="Hi")
        driver = ConversationDriver(ProviderGateway([provider]))

        driver.next_turn([], "", "Hello")

        assert '"the project"' in provider.calls[0]["system_prompt"]

    def test_blank_model_reply_returns_fallback_question(self, make_provider) -> None:
        driver = ConversationDriver(ProviderGateway([make_provider("gemini", reply=" \n ")]))

        assert driver.next_turn(self.transcript, "Online Store", "ok") == FALLBACK

    def test_secondary_answers_when_primary_fails(self, make_provider) -> None:
        primary = make_provider("gemini", error=ProviderResponseError("gemini", "HTTP 500"))
        secondary = make_provider("openai", reply="What is your budget?")
        driver = ConversationDriver(ProviderGateway([primary, secondary]))

        assert driver.next_turn(self.transcript, "Online Store", "ok") == "What is your budget?"

    def test_gateway_failure_propagates(self, make_provider) -> None:
        driver = ConversationDriver(
            ProviderGateway(
                [
                    make_provider("gemini", api_key=None),
                    make_provider("openai", error=ProviderResponseError("openai", "HTTP 500")),
                ]
            )
        )

        with pytest.raises(AllProvidersFailedError, match="Both providers failed."):
            driver.next_turn(self.transcript, "Online Store", "ok")
