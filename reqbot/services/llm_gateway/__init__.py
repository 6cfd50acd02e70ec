"""LLM provider gateway: ordered backends with sequential fallback."""

from .models import (
    AllProvidersFailedError,
    ProviderConfigurationError,
    ProviderError,
    ProviderFailure,
    ProviderResponseError,
    ResponseMode,
)
from .service import ProviderGateway, build_providers, get_provider_gateway

__all__ = [
    "AllProvidersFailedError",
    "ProviderConfigurationError",
    "ProviderError",
    "ProviderFailure",
    "ProviderGateway",
    "ProviderResponseError",
    "ResponseMode",
    "build_providers",
    "get_provider_gateway",
]
