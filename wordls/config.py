"""
Server configuration.

Settings are read once at startup from an optional YAML file:

    # .wordls.yml
    extra_keywords: [self, cls]
    keyword_weight: 11
    evict_on_close: false
    trigger_characters: [".", ":"]

Every key is optional.
"""

from __future__ import annotations

from dataclasses import dataclass, field, fields
from pathlib import Path

import yaml

from wordls.workspace.keywords import DEFAULT_KEYWORD_WEIGHT

CONFIG_FILE_NAME = ".wordls.yml"


class ConfigError(ValueError):
    """Raised when a configuration file cannot be used."""


@dataclass
class ServerConfig:
    """Runtime settings for the word completion server."""

    extra_keywords: list[str] = field(default_factory=list)
    keyword_weight: int = DEFAULT_KEYWORD_WEIGHT
    evict_on_close: bool = False
    trigger_characters: list[str] = field(default_factory=lambda: [".", ":"])

    @classmethod
    def from_dict(cls, data: dict) -> ServerConfig:
        """Build a config from parsed YAML, rejecting unknown or mistyped keys."""
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ConfigError(f"Unknown config key(s): {', '.join(unknown)}")

        config = cls(**data)

        for key in ("extra_keywords", "trigger_characters"):
            value = getattr(config, key)
            if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
                raise ConfigError(f"{key} must be a list of strings")

        if isinstance(config.keyword_weight, bool) or not isinstance(config.keyword_weight, int):
            raise ConfigError("keyword_weight must be an integer")

        if not isinstance(config.evict_on_close, bool):
            raise ConfigError("evict_on_close must be true or false")

        return config

    @classmethod
    def load(cls, path: Path) -> ServerConfig:
        """Load a config file. An empty file gives the defaults."""
        try:
            with open(path, "r", encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except OSError as e:
            raise ConfigError(f"Cannot read config file {path}: {e}") from e
        except yaml.YAMLError as e:
            raise ConfigError(f"Invalid YAML in {path}: {e}") from e

        if data is None:
            return cls()
        if not isinstance(data, dict):
            raise ConfigError(f"{path} must contain a mapping")

        return cls.from_dict(data)


def find_config(path: Path | None = None, search_dir: Path | None = None) -> ServerConfig:
    """
    Resolve the configuration to use.

    An explicit path wins; otherwise ``.wordls.yml`` in search_dir (default:
    the current directory) is used when present.
    """
    if path is not None:
        return ServerConfig.load(path)

    candidate = (search_dir or Path.cwd()) / CONFIG_FILE_NAME
    if candidate.is_file():
        return ServerConfig.load(candidate)

    return ServerConfig()
