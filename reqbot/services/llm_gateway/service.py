"""Gateway that runs a conversation against an ordered list of LLM backends."""

from __future__ import annotations

from typing import Callable, Dict, List, Sequence

from configs import Settings, settings
from reqbot.logger_config import get_logger
from reqbot.models.conversation_models import ConversationMessage

from .models import (
    AllProvidersFailedError,
    ProviderError,
    ProviderFailure,
    ResponseMode,
    attempt_label,
)
from .providers.base import BaseLLMProvider
from .providers.chatgpt import ChatGPTProvider
from .providers.gemini import GeminiProvider

logger = get_logger("llm.gateway")

PROVIDER_REGISTRY: Dict[str, Callable[[Settings], BaseLLMProvider]] = {
    GeminiProvider.name: GeminiProvider.from_settings,
    ChatGPTProvider.name: ChatGPTProvider.from_settings,
}


class ProviderGateway:
    """Try each backend once, in order, until one answers.

    The gateway keeps no state between calls. Attempts are strictly
    sequential: the next backend starts only after the previous one failed.
    """

    def __init__(self, providers: Sequence[BaseLLMProvider]) -> None:
        if not providers:
            raise ValueError("ProviderGateway needs at least one provider.")
        self.providers: Sequence[BaseLLMProvider] = providers

    def invoke(
        self,
        system_prompt: str,
        messages: Sequence[ConversationMessage],
        response_mode: ResponseMode = "freeform",
    ) -> str:
        """Return the raw text of the first backend that succeeds.

        Raises:
            AllProvidersFailedError: every backend failed; the error lists each
                backend's failure message in attempt order.
        """
        failures: List[ProviderFailure] = []
        for index, provider in enumerate(self.providers):
            label = attempt_label(index)
            try:
                text = provider.invoke(system_prompt, messages, response_mode)
            except ProviderError as exc:
                message = exc.message
            except Exception as exc:
                logger.exception("Unexpected error from %s provider %s", label, provider.name)
                message = str(exc) or exc.__class__.__name__
            else:
                if failures:
                    logger.info(
                        "%s provider %s answered after %d failed attempt(s)",
                        label,
                        provider.name,
                        len(failures),
                    )
                return text

            failures.append(ProviderFailure(provider=provider.name, label=label, message=message))
            if index + 1 < len(self.providers):
                logger.warning(
                    "%s provider %s failed, falling back to %s: %s",
                    label,
                    provider.name,
                    self.providers[index + 1].name,
                    message,
                )

        error = AllProvidersFailedError(failures)
        logger.error("LLM call failed on every provider: %s", error)
        raise error


def build_providers(config: Settings = settings) -> List[BaseLLMProvider]:
    """Instantiate the backends named in ``LLM_PROVIDER_ORDER``, in that order."""
    providers: List[BaseLLMProvider] = []
    for name in config.LLM_PROVIDER_ORDER:
        factory = PROVIDER_REGISTRY.get(name.strip().lower())
        if factory is None:
            raise ValueError(
                f"Unknown LLM provider '{name}'. Known providers: {', '.join(PROVIDER_REGISTRY)}"
            )
        providers.append(factory(config))
    return providers


# Dependency for FastAPI
def get_provider_gateway() -> ProviderGateway:
    """Build a gateway from the application settings."""
    return ProviderGateway(build_providers(settings))
