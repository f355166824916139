"""Tests for hint provider registration."""

import pytest

from lesshint.config.settings import RegistryConfig
from lesshint.hints.engine import VariableHintEngine
from lesshint.hints.registry import HintProviderRegistry
from lesshint.host.buffer import TextBufferHost


def _engine():
    return VariableHintEngine(TextBufferHost(""))


def test_providers_for_language():
    """Test lookup by language, case-insensitively."""
    registry = HintProviderRegistry()
    less = _engine()
    registry.register(less, ["less"])

    assert registry.providers_for("less") == [less]
    assert registry.providers_for("LESS") == [less]
    assert registry.providers_for("css") == []


def test_priority_order():
    """Test that higher priority comes first and ties keep registration order."""
    registry = HintProviderRegistry()
    low, first, second = _engine(), _engine(), _engine()
    registry.register(low, ["less"], priority=-1)
    registry.register(first, ["less"], priority=5)
    registry.register(second, ["less", "scss"], priority=5)

    assert registry.providers_for("less") == [first, second, low]
    assert registry.providers_for("scss") == [second]


def test_register_requires_language():
    """Test that an empty language list is rejected."""
    with pytest.raises(ValueError):
        HintProviderRegistry().register(_engine(), [])


def test_register_from_config():
    """Test registration using config values."""
    registry = HintProviderRegistry()
    engine = _engine()
    registration = registry.register_from_config(
        engine, RegistryConfig(languages=["less", "css"], priority=2)
    )

    assert registration.priority == 2
    assert registry.providers_for("css") == [engine]


def test_unregister():
    """Test removing a provider."""
    registry = HintProviderRegistry()
    engine = _engine()
    registry.register(engine, ["less"])
    registry.register(engine, ["scss"])

    registry.unregister(engine)

    assert registry.providers_for("less") == []
    assert registry.providers_for("scss") == []
