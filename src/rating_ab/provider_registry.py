"""Provider registry mapping provider names to factories."""

from collections.abc import Callable
from typing import Any

from rating_ab.providers.base import RatingProvider
from rating_ab.providers.mock import MockProvider
from rating_ab.providers.ollama import OllamaProvider

ProviderFactory = Callable[..., RatingProvider]


class ProviderRegistry:
    """Registry of rating providers available to experiments.

    Registries are plain objects handed to whatever needs them; there is
    no module-level instance.
    """

    def __init__(self) -> None:
        self._factories: dict[str, ProviderFactory] = {}

    def register(self, name: str, factory: ProviderFactory) -> None:
        """Register a provider factory under a name, replacing any existing."""
        self._factories[name] = factory

    def create(self, name: str, **config: Any) -> RatingProvider:
        """Instantiate a provider by name.

        Args:
            name: Registered provider name
            **config: Provider-specific keyword arguments

        Returns:
            New provider instance

        Raises:
            ValueError: If no provider is registered under ``name`` or the
                options are not accepted by its factory
        """
        factory = self._factories.get(name)
        if factory is None:
            available = ", ".join(self.list_providers())
            raise ValueError(f"Unknown provider: {name}. Available: {available}")
        try:
            return factory(**config)
        except TypeError as e:
            raise ValueError(f"Invalid options for provider {name}: {e}") from e

    def list_providers(self) -> list[str]:
        """List registered provider names in registration order."""
        return list(self._factories)

    def provider_exists(self, name: str) -> bool:
        """Check if a provider exists in the registry."""
        return name in self._factories


def create_default_registry() -> ProviderRegistry:
    """Build a registry with the built-in mock and ollama providers."""
    registry = ProviderRegistry()
    registry.register("mock", MockProvider)
    registry.register("ollama", OllamaProvider)
    return registry
