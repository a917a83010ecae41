import json
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional

from .exceptions import ConfigError

ENV_PREFIX = "ONESKY_"

class Config:
    def __init__(self, config_path: Optional[Path] = None):
        self._config: Dict[str, Any] = {}
        self._load_defaults()
        self._load_environment_variables()
        if config_path:
            self.load(config_path)
        self.validate(self._config)

    def _load_defaults(self) -> None:
        """Load default configuration values"""
        self._config = {
            "api": {
                "address": "https://platform.api.onesky.io",
                "version": "1",
                "timeout": None,
                "user_agent": "onesky-python/1.0"
            },
            "credentials": {
                "secret": "",
                "api_key": "",
                "project_id": 0
            },
            "logging": {
                "level": "INFO",
                "file": None,
                "console_output": False,
                "max_size": 1024 * 1024,
                "backup_count": 3
            }
        }

    def load(self, path: Path) -> None:
        """Load configuration from JSON file"""
        try:
            with open(path, 'r') as f:
                file_config = json.load(f)
        except (OSError, ValueError) as e:
            raise ConfigError(f"Failed to load config from {path}: {str(e)}")
        if not isinstance(file_config, dict):
            raise ConfigError(f"Config file {path} must contain a JSON object")
        self.update(file_config)

    def save(self, path: Path) -> None:
        """Save configuration to JSON file"""
        with open(path, 'w') as f:
            json.dump(self._config, f, indent=2)

    def _load_environment_variables(self) -> None:
        """Load configuration from environment variables"""
        for key, value in os.environ.items():
            if key.startswith(ENV_PREFIX):
                # ONESKY_CREDENTIALS_API_KEY -> credentials.api_key
                parts = key[len(ENV_PREFIX):].lower().split('_')

                if len(parts) > 2:
                    config_key = f"{parts[0]}.{'_'.join(parts[1:])}"
                else:
                    config_key = '.'.join(parts)

                # string settings (secrets, keys) are taken verbatim
                if isinstance(self.get(config_key), str):
                    self.set(config_key, value)
                else:
                    self.set(config_key, self._convert_value(value))

    def get(self, key: str, default: Any = None) -> Any:
        """Get configuration value by dot notation key"""
        try:
            value = self._config
            for k in key.split('.'):
                value = value[k]
            return value
        except (KeyError, TypeError):
            return default

    def set(self, key: str, value: Any) -> None:
        """Set configuration value by dot notation key"""
        keys = key.split('.')
        d = self._config
        for k in keys[:-1]:
            if k not in d:
                d[k] = {}
            d = d[k]
        d[keys[-1]] = value

    def update(self, config_dict: Dict[str, Any]) -> None:
        """Update configuration with dictionary"""
        def update_recursive(d1, d2):
            for k, v in d2.items():
                if isinstance(v, dict):
                    if k not in d1:
                        d1[k] = {}
                    update_recursive(d1[k], v)
                else:
                    d1[k] = v
            return d1

        update_recursive(self._config, config_dict)

    def validate(self, config: Dict[str, Any]) -> None:
        """Validate configuration values"""
        if "api" in config:
            api_config = config["api"]
            address = api_config.get("address")
            if address is not None and not str(address).startswith(("http://", "https://")):
                raise ConfigError("api.address must be an http(s) URL")
            timeout = api_config.get("timeout")
            if timeout is not None:
                if isinstance(timeout, bool) or not isinstance(timeout, (int, float)) or timeout <= 0:
                    raise ConfigError("api.timeout must be positive")
        if "credentials" in config:
            project_id = config["credentials"].get("project_id")
            if project_id is not None:
                if isinstance(project_id, bool) or not isinstance(project_id, int) or project_id < 0:
                    raise ConfigError("credentials.project_id must be a non-negative integer")

    @staticmethod
    def _convert_value(value: str) -> Any:
        """Convert string value to appropriate type"""
        if value.lower() == "true":
            return True
        if value.lower() == "false":
            return False

        try:
            if '.' in value:
                return float(value)
            return int(value)
        except ValueError:
            return value

@dataclass(frozen=True)
class Credentials:
    """Shared secret, API key and project scoping every request"""
    secret: str
    api_key: str
    project_id: int

    @classmethod
    def from_config(cls, config: Config) -> "Credentials":
        project_id = config.get("credentials.project_id", 0)
        if isinstance(project_id, bool) or not isinstance(project_id, int):
            raise ConfigError("credentials.project_id must be an integer")
        return cls(
            secret=str(config.get("credentials.secret", "")),
            api_key=str(config.get("credentials.api_key", "")),
            project_id=project_id
        )

    def __repr__(self) -> str:
        return f"Credentials(api_key={self.api_key!r}, project_id={self.project_id})"
