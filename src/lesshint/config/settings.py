"""Configuration settings and lesshint.yaml loader."""

from __future__ import annotations

from pathlib import Path

import yaml
from pydantic import BaseModel, Field, field_validator


class HintsConfig(BaseModel):
    """Variable hint engine configuration."""

    sigil: str = "@"
    identifier_chars: str = r"\w\-"  # Regex class body for variable names
    strip_sigil: bool = True  # Drop a leading sigil from the query before filtering
    display_template: str = "{name} [dim]{value}[/dim]"

    @field_validator("sigil")
    @classmethod
    def _single_char(cls, value: str) -> str:
        if len(value) != 1:
            raise ValueError(f"sigil must be a single character, got {value!r}")
        return value


class RegistryConfig(BaseModel):
    """Host registration: which documents the engine serves and how eagerly."""

    languages: list[str] = Field(default_factory=lambda: ["less"], min_length=1)
    priority: int = 0


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = "WARNING"


class LessHintConfig(BaseModel):
    """Root configuration model for lesshint.yaml."""

    hints: HintsConfig = Field(default_factory=HintsConfig)
    registry: RegistryConfig = Field(default_factory=RegistryConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    @classmethod
    def load(cls, path: Path) -> LessHintConfig:
        """Load configuration from YAML file."""
        if not path.exists():
            return cls()

        with open(path) as f:
            data = yaml.safe_load(f) or {}

        return cls.model_validate(data)

    def save(self, path: Path) -> None:
        """Save configuration to YAML file."""
        with open(path, "w") as f:
            yaml.dump(self.model_dump(), f, default_flow_style=False, sort_keys=False)


CONFIG_FILENAME = "lesshint.yaml"


def find_config_path(start_dir: Path | None = None) -> Path | None:
    """Find lesshint.yaml by walking up directory tree."""
    current = start_dir or Path.cwd()

    while current != current.parent:
        config_path = current / CONFIG_FILENAME
        if config_path.exists():
            return config_path
        current = current.parent

    return None
