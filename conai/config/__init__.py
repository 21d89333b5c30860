"""API Key Configuration Package"""

import json
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

CONFIG_FILENAME = "config.json"
CONFIG_ENV_VAR = "CONAI_CONFIG"

# Stored beside the installed package, like a config file next to an executable
DEFAULT_CONFIG_PATH = Path(__file__).resolve().parent.parent / CONFIG_FILENAME


class ConfigError(Exception):
    """Raised when no usable API key can be read from the config file."""
    pass


@dataclass
class Config:
    """Persisted configuration. Only the API key for now."""
    api_key: str

    def to_dict(self) -> dict:
        return {"apiKey": self.api_key}

    @classmethod
    def from_dict(cls, data: dict) -> 'Config':
        if not isinstance(data, dict):
            raise ConfigError("Config file must contain a JSON object")
        api_key = data.get("apiKey")
        if not isinstance(api_key, str) or not api_key:
            raise ConfigError("Config file has no apiKey")
        return cls(api_key=api_key)


def default_config_path() -> Path:
    """Resolve the config path. CONAI_CONFIG overrides the packaged location."""
    override = os.environ.get(CONFIG_ENV_VAR)
    return Path(override) if override else DEFAULT_CONFIG_PATH


class ConfigStore:
    """Reads and writes the API key file."""

    def __init__(self, path: Optional[Path] = None):
        self._path = Path(path) if path is not None else default_config_path()

    @property
    def path(self) -> Path:
        return self._path

    def set_key(self, key: str) -> Path:
        # Write errors are fatal and left to propagate
        with open(self._path, 'w', encoding='utf-8') as f:
            json.dump(Config(api_key=key).to_dict(), f, indent=2)
        return self._path

    def load_key(self) -> str:
        try:
            with open(self._path, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except (json.JSONDecodeError, UnicodeDecodeError, OSError) as e:
            raise ConfigError(f"Could not load {self._path}: {e}") from e
        return Config.from_dict(data).api_key


__all__ = [
    "Config",
    "ConfigError",
    "ConfigStore",
    "CONFIG_ENV_VAR",
    "DEFAULT_CONFIG_PATH",
    "default_config_path",
]
