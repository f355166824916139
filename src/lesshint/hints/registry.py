"""Hint provider registration."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from lesshint.config.settings import RegistryConfig
    from lesshint.hints.engine import VariableHintEngine


@dataclass
class Registration:
    """One provider registered for a set of document languages."""

    provider: VariableHintEngine
    languages: list[str] = field(default_factory=list)
    priority: int = 0

    def serves(self, language: str) -> bool:
        return language.lower() in (lang.lower() for lang in self.languages)


class HintProviderRegistry:
    """Registry of hint providers keyed by document language."""

    def __init__(self):
        self.registrations: list[Registration] = []

    def register(
        self,
        provider: VariableHintEngine,
        languages: list[str],
        priority: int = 0,
    ) -> Registration:
        """Register a provider for *languages*."""
        if not languages:
            raise ValueError("A hint provider needs at least one language")
        registration = Registration(provider, list(languages), priority)
        self.registrations.append(registration)
        return registration

    def register_from_config(
        self,
        provider: VariableHintEngine,
        config: RegistryConfig,
    ) -> Registration:
        """Register a provider with the languages and priority from config."""
        return self.register(provider, config.languages, config.priority)

    def unregister(self, provider: VariableHintEngine) -> None:
        """Remove every registration of *provider*."""
        self.registrations = [
            r for r in self.registrations if r.provider is not provider
        ]

    def providers_for(self, language: str) -> list[VariableHintEngine]:
        """Get providers serving *language*, highest priority first."""
        matching = [r for r in self.registrations if r.serves(language)]
        # sorted() is stable, so equal priorities keep registration order
        matching = sorted(matching, key=lambda r: r.priority, reverse=True)
        return [r.provider for r in matching]
