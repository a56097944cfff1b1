"""Configuration module for quicklog.

This module provides configuration loading and profile management.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Protocol


@dataclass
class ParserConfig:
    """Time parser behaviour."""

    infer_default_duration: bool = False
    default_duration_minutes: int = 60


@dataclass
class LoggingConfig:
    """Logging configuration."""

    level: str = "INFO"


@dataclass
class QuicklogConfig:
    """Main quicklog configuration."""

    parser: ParserConfig = field(default_factory=ParserConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


class ConfigLoader(Protocol):
    """Protocol for configuration loading."""

    def load(self, path: Path) -> QuicklogConfig:
        """Load configuration from file path."""
        ...

    def load_profile(self, profile: str) -> QuicklogConfig:
        """Load configuration by profile name (dev, prod, test)."""
        ...

    def get_config_dir(self) -> Path:
        """Get the configuration directory path."""
        ...


# Public API
__all__ = [
    "ConfigLoader",
    "LoggingConfig",
    "ParserConfig",
    "QuicklogConfig",
]
