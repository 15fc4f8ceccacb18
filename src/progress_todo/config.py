"""Configuration management for progress-todo."""

import json
from pathlib import Path
from typing import Any, Literal, Optional

from platformdirs import user_config_dir, user_data_dir
from pydantic import BaseModel, Field, ValidationError

from progress_todo.services.persistent_store import DEFAULT_STORAGE_KEY

APP_NAME = "progress_todo"


class StorageConfig(BaseModel):
    """Storage configuration."""

    backend: Literal["sqlite", "memory"] = Field(default="sqlite")
    path: Optional[str] = Field(default=None)
    key: str = Field(default=DEFAULT_STORAGE_KEY)
    quota_bytes: Optional[int] = Field(default=None, gt=0)


class OutputConfig(BaseModel):
    """Output configuration."""

    format: Literal["pretty", "json"] = Field(default="pretty")
    color: bool = Field(default=True)


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = Field(default="INFO")


class Config(BaseModel):
    """Main configuration."""

    storage: StorageConfig = Field(default_factory=StorageConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


class ConfigManager:
    """Manages progress-todo configuration for one profile.

    Each profile has its own config file and, by default, its own database,
    so profiles keep separate task lists.
    """

    def __init__(
        self,
        profile: str = "default",
        config_dir: Path | None = None,
        data_dir: Path | None = None,
    ):
        self.profile = profile
        self.config_dir = config_dir or Path(user_config_dir(APP_NAME))
        self.data_dir = data_dir or Path(user_data_dir(APP_NAME))
        self.config_file = self.config_dir / f"{profile}.json"

        # Ensure directories exist
        self.config_dir.mkdir(parents=True, exist_ok=True)
        self.data_dir.mkdir(parents=True, exist_ok=True)

        self._config: Optional[Config] = None

    @property
    def config(self) -> Config:
        """Get the current configuration."""
        if self._config is None:
            self._config = self.load_config()
        return self._config

    @property
    def db_path(self) -> Path:
        """Database file used by the sqlite backend."""
        if self.config.storage.path:
            return Path(self.config.storage.path).expanduser()
        return self.data_dir / f"{self.profile}.db"

    def load_config(self) -> Config:
        """Load configuration from file."""
        if self.config_file.exists():
            try:
                with open(self.config_file, encoding="utf-8") as f:
                    data = json.load(f)
                return Config(**data)
            except (OSError, ValueError, TypeError, ValidationError):
                # If config is corrupted, return default
                return Config()
        return Config()

    def save_config(self, config: Optional[Config] = None) -> None:
        """Save configuration to file."""
        if config is None:
            config = self.config

        with open(self.config_file, "w", encoding="utf-8") as f:
            json.dump(config.model_dump(), f, indent=2)

    def get(self, key: str) -> Any:
        """Get a configuration value by dot-separated key."""
        return self.get_from_config(self.config, key)

    def set(self, key: str, value: Any) -> None:
        """Set a configuration value by dot-separated key.

        Raises:
            KeyError: If the key does not name a configuration field
            pydantic.ValidationError: If the value is not valid for the field
        """
        config_dict = self.config.model_dump()
        parent, field = _resolve_key(config_dict, key)
        parent[field] = value

        # Reload config from the modified dictionary
        self._config = Config(**config_dict)
        self.save_config()

    def reset(self, key: Optional[str] = None) -> None:
        """Reset configuration to defaults."""
        if key is None:
            self._config = Config()
        else:
            _resolve_key(Config().model_dump(), key)
            self.set(key, self.get_from_config(Config(), key))
        self.save_config()

    def get_from_config(self, config: Config, key: str) -> Any:
        """Get value from a config object using dot notation."""
        keys = key.split(".")
        value: Any = config
        for k in keys:
            if isinstance(value, BaseModel):
                value = getattr(value, k, None)
            else:
                return None
        return value

    def list_profiles(self) -> list[str]:
        """List all available profiles."""
        profiles = []
        for config_file in self.config_dir.glob("*.json"):
            if not config_file.name.startswith("."):
                profiles.append(config_file.stem)
        return sorted(profiles)


def _resolve_key(config_dict: dict[str, Any], key: str) -> tuple[dict[str, Any], str]:
    """Find the dict holding a dot-separated key and the key's last segment.

    Raises:
        KeyError: If any segment does not name a configuration field
    """
    keys = key.split(".")
    current = config_dict
    for k in keys[:-1]:
        if not isinstance(current.get(k), dict):
            raise KeyError(key)
        current = current[k]
    if keys[-1] not in current:
        raise KeyError(key)
    return current, keys[-1]


# Global config manager instance
_config_manager: Optional[ConfigManager] = None


def get_config_manager(profile: str = "default") -> ConfigManager:
    """Get or create the global config manager."""
    global _config_manager
    if _config_manager is None or _config_manager.profile != profile:
        _config_manager = ConfigManager(profile)
    return _config_manager


def reset_config_manager() -> None:
    """Forget the cached config manager."""
    global _config_manager
    _config_manager = None
