"""Configuration management for the Todoist bridge."""

import json
import os
from pathlib import Path
from typing import Any, Optional

from platformdirs import user_config_dir, user_data_dir
from pydantic import BaseModel, Field

from todoist_bridge.api.client import DEFAULT_BASE_URL
from todoist_bridge.api.errors import InvalidRequestError
from todoist_bridge.api.rate_limiter import RateLimitConfig

TOKEN_ENV_VAR = "TODOIST_API_TOKEN"


class APIConfig(BaseModel):
    """API configuration."""

    base_url: str = Field(default=DEFAULT_BASE_URL)
    timeout: Optional[float] = Field(default=None, gt=0)


class Config(BaseModel):
    """Main configuration."""

    api: APIConfig = Field(default_factory=APIConfig)
    rate_limit: RateLimitConfig = Field(default_factory=RateLimitConfig)


class ConfigManager:
    """Manages bridge configuration and stored credentials."""

    def __init__(self, profile: str = "default"):
        self.profile = profile
        self.config_dir = Path(user_config_dir("todoist-bridge"))
        self.data_dir = Path(user_data_dir("todoist-bridge"))
        self.config_file = self.config_dir / f"{profile}.json"
        self.credentials_file = self.data_dir / f"{profile}.credentials.json"

        self._config: Optional[Config] = None

    @property
    def config(self) -> Config:
        """Get the current configuration."""
        if self._config is None:
            self._config = self.load_config()
        return self._config

    def load_config(self) -> Config:
        """Load configuration from file; a corrupt file yields defaults."""
        if self.config_file.exists():
            try:
                with open(self.config_file, "r") as f:
                    data = json.load(f)
                return Config(**data)
            except (OSError, ValueError):
                return Config()
        return Config()

    def save_config(self, config: Optional[Config] = None) -> None:
        """Save configuration to file."""
        if config is None:
            config = self.config

        self.config_dir.mkdir(parents=True, exist_ok=True)
        with open(self.config_file, "w") as f:
            json.dump(config.model_dump(), f, indent=2)

    def get(self, key: str) -> Any:
        """Get a configuration value by dot-separated key."""
        return self.get_from_config(self.config, key)

    def set(self, key: str, value: Any) -> None:
        """Set a configuration value by dot-separated key."""
        keys = key.split(".")
        config_dict = self.config.model_dump()

        current = config_dict
        for k in keys[:-1]:
            if k not in current:
                current[k] = {}
            current = current[k]

        current[keys[-1]] = value

        # Revalidate so bad values never reach disk
        self._config = Config(**config_dict)
        self.save_config()

    def reset(self, key: Optional[str] = None) -> None:
        """Reset configuration, or a single key, to defaults."""
        if key is None:
            self._config = Config()
        else:
            default: Any = Config().model_dump()
            for k in key.split("."):
                if not isinstance(default, dict) or k not in default:
                    raise KeyError(key)
                default = default[k]
            self.set(key, default)
            return
        self.save_config()

    def get_from_config(self, config: Config, key: str) -> Any:
        """Get value from a config object using dot notation."""
        value: Any = config
        for k in key.split("."):
            if isinstance(value, BaseModel):
                value = getattr(value, k, None)
            else:
                return None
        return value

    def save_credentials(self, token: str) -> None:
        """Store an API token, readable only by the owner."""
        self.data_dir.mkdir(parents=True, exist_ok=True)
        with open(self.credentials_file, "w") as f:
            json.dump({"token": token}, f, indent=2)

        self.credentials_file.chmod(0o600)

    def load_credentials(self) -> Optional[dict[str, str]]:
        """Load stored credentials, or None if absent or unreadable."""
        if self.credentials_file.exists():
            try:
                with open(self.credentials_file, "r") as f:
                    return json.load(f)
            except (OSError, ValueError):
                return None
        return None

    def clear_credentials(self) -> None:
        """Remove stored credentials."""
        if self.credentials_file.exists():
            self.credentials_file.unlink()

    def get_api_token(self) -> str:
        """Resolve the API token: environment first, then stored credentials."""
        token = os.getenv(TOKEN_ENV_VAR)
        if token:
            return token

        credentials = self.load_credentials()
        if credentials and credentials.get("token"):
            return credentials["token"]

        raise InvalidRequestError(
            f"{TOKEN_ENV_VAR} environment variable is required. "
            "Copy your token from https://todoist.com/prefs/integrations"
        )


# Global config manager instance
_config_manager: Optional[ConfigManager] = None


def get_config_manager(profile: str = "default") -> ConfigManager:
    """Get or create the global config manager."""
    global _config_manager
    if _config_manager is None or _config_manager.profile != profile:
        _config_manager = ConfigManager(profile)
    return _config_manager
