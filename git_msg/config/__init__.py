"""Configuration Management Package

Each setting is resolved in this order:

1. .git-msg.json config file (current dir, ~/.config/git-msg.json, ~/.git-msg.json)
2. GIT_MSG_<FIELD> environment variable
3. Built-in default

Credentials left empty after that fall back to OPENAI_API_KEY / HUGGINGFACE_TOKEN.
"""

import json
import os
import sys
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Optional

from git_msg.errors import ValidationError

VALID_PROVIDERS = {"openai", "huggingface", "local"}
VALID_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}

ENV_PREFIX = "GIT_MSG_"

# Well-known variables read when a credential is not configured anywhere else
CREDENTIAL_ENV_FALLBACKS = {
    "openai_api_key": "OPENAI_API_KEY",
    "huggingface_token": "HUGGINGFACE_TOKEN",
}


@dataclass
class Config:
    """User configuration with sensible defaults."""
    provider: str = "huggingface"
    openai_api_key: str = ""
    openai_model: str = "gpt-4o"
    openai_endpoint: str = "https://api.openai.com/v1/chat/completions"
    huggingface_token: str = ""
    huggingface_model: str = "mistralai/Mistral-7B-Instruct-v0.2"
    huggingface_endpoint: str = "https://api-inference.huggingface.co/models/"
    local_endpoint: str = "http://localhost:8000/generate"
    log_level: str = "WARNING"

    def validate(self) -> list[str]:
        """Validate config values and return list of warnings.

        Invalid values are replaced with defaults after warning.
        """
        warnings = []
        defaults = Config()

        if self.provider not in VALID_PROVIDERS:
            warnings.append(f"Invalid provider '{self.provider}', using '{defaults.provider}'")
            self.provider = defaults.provider

        level = self.log_level.upper()
        if level not in VALID_LOG_LEVELS:
            warnings.append(f"Invalid log_level '{self.log_level}', using '{defaults.log_level}'")
            level = defaults.log_level
        self.log_level = level

        return warnings

    @classmethod
    def field_names(cls) -> list[str]:
        return [f.name for f in fields(cls)]

    @classmethod
    def resolve(cls, file_data: dict, environ=None) -> 'Config':
        """Merge file values, environment and defaults into a validated Config."""
        environ = os.environ if environ is None else environ
        values = {}
        for name in cls.field_names():
            if name in file_data:
                value = file_data[name]
                if not isinstance(value, str):
                    raise ValidationError(
                        f"Config value '{name}' must be a string, got {type(value).__name__}"
                    )
                values[name] = value
            elif f"{ENV_PREFIX}{name.upper()}" in environ:
                values[name] = environ[f"{ENV_PREFIX}{name.upper()}"]

        for name, env_var in CREDENTIAL_ENV_FALLBACKS.items():
            if not values.get(name) and environ.get(env_var):
                values[name] = environ[env_var]

        config = cls(**values)
        for warning in config.validate():
            print(f"Config warning: {warning}", file=sys.stderr)
        return config


class ConfigManager:
    """Finds and loads the configuration file."""

    CONFIG_FILENAME = ".git-msg.json"
    XDG_FILENAME = "git-msg.json"

    def __init__(self, path: Optional[Path] = None):
        self._explicit_path = Path(path) if path else None
        self._config_path: Optional[Path] = None

    def candidate_paths(self) -> list[Path]:
        if self._explicit_path:
            return [self._explicit_path]
        home = Path.home()
        return [
            Path.cwd() / self.CONFIG_FILENAME,
            home / ".config" / self.XDG_FILENAME,
            home / self.CONFIG_FILENAME,
        ]

    def load(self, environ=None) -> Config:
        file_data = {}
        for path in self.candidate_paths():
            if path.exists():
                file_data = self._read_file(path)
                self._config_path = path
                break
        else:
            if self._explicit_path:
                raise ValidationError(f"Config file not found: {self._explicit_path}")

        return Config.resolve(file_data, environ)

    def _read_file(self, path: Path) -> dict:
        try:
            with open(path, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            raise ValidationError(f"Malformed config file {path}: {e}")
        except OSError as e:
            raise ValidationError(f"Could not read config file {path}: {e}")

        if not isinstance(data, dict):
            raise ValidationError(f"Malformed config file {path}: expected a JSON object")
        return data

    def get_config_path(self) -> Optional[Path]:
        return self._config_path


def load_config(path: Optional[Path] = None) -> Config:
    return ConfigManager(path).load()


__all__ = [
    "Config",
    "ConfigManager",
    "load_config",
    "VALID_PROVIDERS",
    "CREDENTIAL_ENV_FALLBACKS",
]
