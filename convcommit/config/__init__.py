"""Configuration Management Package"""

import json
import os
import sys
from dataclasses import dataclass, asdict
from pathlib import Path
from typing import Optional

CONFIG_FILENAME = ".convcommit_config"
CONFIG_ENV_VAR = "CONVCOMMIT_CONFIG"

# Commit count at which the feedback prompt is shown
FEEDBACK_THRESHOLD = 5


@dataclass
class Config:
    """Persisted per-user state."""
    commit_count: int = 0
    user_email: str = ""

    def to_dict(self) -> dict:
        return asdict(self)

    def validate(self) -> list[str]:
        """Validate config values and return list of warnings.

        Invalid values are replaced with defaults after warning.
        """
        warnings = []
        defaults = Config()

        if not isinstance(self.commit_count, int) or isinstance(self.commit_count, bool) or self.commit_count < 0:
            warnings.append(f"Invalid commit_count '{self.commit_count}', using {defaults.commit_count}")
            self.commit_count = defaults.commit_count

        if not isinstance(self.user_email, str):
            warnings.append(f"Invalid user_email '{self.user_email}', using empty")
            self.user_email = defaults.user_email

        return warnings

    @property
    def feedback_due(self) -> bool:
        return self.commit_count == FEEDBACK_THRESHOLD

    @classmethod
    def from_dict(cls, data: dict) -> 'Config':
        valid_keys = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in data.items() if k in valid_keys}
        config = cls(**filtered)
        for warning in config.validate():
            print(f"Config warning: {warning}", file=sys.stderr)
        return config


def default_config_path() -> Path:
    override = os.environ.get(CONFIG_ENV_VAR)
    if override:
        return Path(override).expanduser()
    return Path.home() / CONFIG_FILENAME


class ConfigManager:
    """Loads and saves the state file at a single path."""

    def __init__(self, path: Optional[Path] = None):
        self.path = Path(path) if path else default_config_path()

    def load(self) -> Config:
        """Read the state file. A missing file yields defaults."""
        if not self.path.exists():
            return Config()
        try:
            with open(self.path, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except (ValueError, OSError) as e:
            # ValueError covers bad JSON and undecodable bytes
            print(f"Warning: Could not load {self.path}: {e}", file=sys.stderr)
            return Config()
        if not isinstance(data, dict):
            print(f"Warning: Could not load {self.path}: expected a JSON object", file=sys.stderr)
            return Config()
        return Config.from_dict(data)

    def save(self, config: Config) -> Path:
        with open(self.path, 'w', encoding='utf-8') as f:
            json.dump(config.to_dict(), f, indent=2)
        return self.path

    def increment_commit_count(self) -> Config:
        """Read-modify-write the counter. No locking: concurrent runs may race.

        Raises:
            OSError: if the file cannot be written
        """
        config = self.load()
        config.commit_count += 1
        self.save(config)
        return config


def load_config() -> Config:
    return ConfigManager().load()


def save_config(config: Config) -> Path:
    return ConfigManager().save(config)


__all__ = [
    "Config",
    "ConfigManager",
    "load_config",
    "save_config",
    "default_config_path",
    "CONFIG_FILENAME",
    "CONFIG_ENV_VAR",
    "FEEDBACK_THRESHOLD",
]
