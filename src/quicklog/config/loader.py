"""YAML configuration loader.

A profile file may name a parent with ``extends: base.yaml``; its sections
are layered over the parent's before conversion to QuicklogConfig.
"""

from pathlib import Path
from typing import Any

import yaml

from . import ConfigLoader, LoggingConfig, ParserConfig, QuicklogConfig


def deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Return base updated with override, merging nested mappings key by key."""
    merged = dict(base)
    for key, value in override.items():
        current = merged.get(key)
        if isinstance(current, dict) and isinstance(value, dict):
            value = deep_merge(current, value)
        merged[key] = value
    return merged


def load_yaml_with_inheritance(path: Path) -> dict[str, Any]:
    """Read a config file, layered over the file named by its ``extends`` key."""
    if not path.is_file():
        raise FileNotFoundError(f"Config file not found: {path}")

    data = yaml.safe_load(path.read_text()) or {}
    parent = data.pop("extends", None)
    if parent is None:
        return data
    return deep_merge(load_yaml_with_inheritance(path.parent / parent), data)


def dict_to_config(data: dict[str, Any]) -> QuicklogConfig:
    """Convert raw dict to typed QuicklogConfig dataclass."""
    section = data.get("quicklog", {}) or {}

    # YAML gives None for empty sections
    def safe_get(key: str) -> dict[str, Any]:
        value = section.get(key, {})
        return value if value is not None else {}

    return QuicklogConfig(
        parser=ParserConfig(**safe_get("parser")),
        logging=LoggingConfig(**safe_get("logging")),
    )


class YAMLConfigLoader:
    """YAML configuration loader implementation."""

    def __init__(self, config_dir: Path | None = None) -> None:
        """Initialize loader with optional config directory.

        Args:
            config_dir: Directory containing config files.
                        Defaults to 'config' relative to project root.
        """
        if config_dir is None:
            config_dir = Path(__file__).parent.parent.parent.parent / "config"
        self._config_dir = config_dir

    def load(self, path: Path) -> QuicklogConfig:
        """Load configuration from file path.

        Args:
            path: Path to YAML config file

        Returns:
            Parsed QuicklogConfig
        """
        return dict_to_config(load_yaml_with_inheritance(path))

    def load_profile(self, profile: str) -> QuicklogConfig:
        """Load configuration by profile name.

        Args:
            profile: Profile name (e.g., 'dev', 'prod')

        Returns:
            Parsed QuicklogConfig for the profile
        """
        return self.load(self._config_dir / f"{profile}.yaml")

    def get_config_dir(self) -> Path:
        """Get the configuration directory path."""
        return self._config_dir


def load_config(
    path: str | Path | None = None,
    profile: str | None = None,
    config_dir: Path | None = None,
) -> QuicklogConfig:
    """Load quicklog configuration.

    Args:
        path: Direct path to config file (takes precedence)
        profile: Profile name ('dev', 'prod', 'test') if path not given
        config_dir: Directory holding profile files

    Returns:
        Parsed QuicklogConfig

    Examples:
        >>> config = load_config(profile="dev")
        >>> config = load_config(path="/path/to/config.yaml")
    """
    loader: ConfigLoader = YAMLConfigLoader(config_dir)

    if path is not None:
        return loader.load(Path(path))
    elif profile is not None:
        return loader.load_profile(profile)
    else:
        return loader.load_profile("dev")


__all__ = [
    "YAMLConfigLoader",
    "deep_merge",
    "dict_to_config",
    "load_config",
    "load_yaml_with_inheritance",
]
