"""Domain models and errors for the LLM provider gateway."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Literal, Sequence

ResponseMode = Literal["freeform", "json"]

ATTEMPT_LABELS = ("Primary", "Secondary")


def attempt_label(index: int) -> str:
    """Return the label of the n-th backend in the fallback order."""
    if index < len(ATTEMPT_LABELS):
        return ATTEMPT_LABELS[index]
    return f"Provider {index + 1}"


class ProviderError(RuntimeError):
    """Raised when a backend cannot complete a single attempt."""

    def __init__(self, provider: str, message: str) -> None:
        super().__init__(message)
        self.provider = provider
        self.message = message


class ProviderConfigurationError(ProviderError):
    """The backend credential is missing; raised before any network call."""


class ProviderResponseError(ProviderError):
    """Non-success status, transport failure, timeout or malformed payload."""


@dataclass(slots=True)
class ProviderFailure:
    """Outcome of one failed attempt inside a gateway call."""

    provider: str
    label: str
    message: str


class AllProvidersFailedError(RuntimeError):
    """Raised when every backend in the fallback order failed."""

    def __init__(self, failures: Sequence[ProviderFailure]) -> None:
        self.failures: List[ProviderFailure] = list(failures)
        super().__init__(self._format(self.failures))

    @staticmethod
    def _format(failures: Sequence[ProviderFailure]) -> str:
        prefix = "Both providers failed." if len(failures) == 2 else "All providers failed."
        details = ", ".join(f"{failure.label}: {failure.message}" for failure in failures)
        return f"{prefix} {details}"
