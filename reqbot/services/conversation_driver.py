"""Produce the interviewer's next turn for a requirements conversation."""

from __future__ import annotations

from typing import List, Sequence

from fastapi import Depends

from reqbot.logger_config import get_logger
from reqbot.models.conversation_models import ConversationMessage
from reqbot.services.llm_gateway import ProviderGateway, get_provider_gateway
from reqbot.services.prompt_loader import PromptLoader, prompt_loader

logger = get_logger("conversation")

DEFAULT_PROJECT_NAME = "the project"


class ConversationDriver:
    """Stateless interviewer: transcript + latest user text in, bot text out.

    Persisting the user turn and the returned bot turn is the caller's job;
    nothing is stored here. Gateway failures propagate unchanged.
    """

    def __init__(self, gateway: ProviderGateway, prompts: PromptLoader = prompt_loader) -> None:
        self.gateway = gateway
        self.prompts = prompts

    def system_prompt(self, project_name: str) -> str:
        return self.prompts.get(
            "interview", "system", project_name=project_name or DEFAULT_PROJECT_NAME
        )

    @property
    def fallback_question(self) -> str:
        return self.prompts.get("interview", "fallback_question")

    def next_turn(
        self,
        transcript: Sequence[ConversationMessage],
        project_name: str,
        latest_user_text: str,
    ) -> str:
        """
        Ask the LLM for the next interview question.

        Args:
            transcript: Every earlier message of the interview, oldest first.
            project_name: Name interpolated into the system instruction.
            latest_user_text: The user's newest message, sent last.

        Returns:
            str: The trimmed model text, or the fallback question when the model returned nothing.

        Raises:
            AllProvidersFailedError: When every backend failed.
        """
        messages: List[ConversationMessage] = list(transcript)
        if latest_user_text:
            messages.append(ConversationMessage.from_text("user", latest_user_text))

        text = self.gateway.invoke(
            self.system_prompt(project_name), messages, response_mode="freeform"
        ).strip()
        if not text:
            logger.info("Model returned an empty turn, using the fallback question")
            return self.fallback_question
        return text


def get_conversation_driver(
    gateway: ProviderGateway = Depends(get_provider_gateway),
) -> ConversationDriver:
    """FastAPI dependency wiring the driver to the configured gateway."""
    return ConversationDriver(gateway)
