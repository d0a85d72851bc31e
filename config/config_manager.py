"""
Configuration management for the preconditions toolkit.

Settings come from YAML/JSON files, ``PRECONDITIONS_*`` environment variables
or plain dicts, and are checked against ``SettingsSchema``. They control
logging only; validation outcomes and default messages never depend on them.
"""
import os
import json
import yaml
from pathlib import Path
from typing import Any, Dict, Optional
from copy import deepcopy
from utils.logging_config import get_logger, LoggerFactory
from utils.exceptions import ConfigurationError, SchemaValidationError
from validation.schema import Schema, SettingsSchema

logger = get_logger(__name__)


class Config:
    """Configuration container with dot notation access."""

    def __init__(self, data: Optional[Dict[str, Any]] = None):
        self._data = data or {}

    def __getattr__(self, key: str) -> Any:
        """Get config value using dot notation."""
        if key.startswith('_'):
            return object.__getattribute__(self, key)

        if key not in self._data:
            raise AttributeError(f"Config has no attribute '{key}'")

        value = self._data[key]
        if isinstance(value, dict):
            return Config(value)
        return value

    def __getitem__(self, key: str) -> Any:
        """Get config value using bracket notation."""
        return self._data[key]

    def __setitem__(self, key: str, value: Any):
        """Set config value using bracket notation."""
        self._data[key] = value

    def get(self, key: str, default: Any = None) -> Any:
        """Get config value with default."""
        try:
            keys = key.split('.')
            value = self._data
            for k in keys:
                value = value[k]
            return value
        except (KeyError, TypeError):
            return default

    def set(self, key: str, value: Any):
        """Set config value using dot notation."""
        keys = key.split('.')
        data = self._data
        for k in keys[:-1]:
            if k not in data:
                data[k] = {}
            data = data[k]
        data[keys[-1]] = value

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return deepcopy(self._data)

    def update(self, other: Dict[str, Any]):
        """Update configuration with another dict."""
        self._deep_update(self._data, other)

    @staticmethod
    def _deep_update(base: Dict, update: Dict):
        """Recursively update nested dictionaries."""
        for key, value in update.items():
            if key in base and isinstance(base[key], dict) and isinstance(value, dict):
                Config._deep_update(base[key], value)
            else:
                base[key] = value


class ConfigManager:
    """
    Centralized configuration management with multiple sources.
    """

    ENV_PREFIX = "PRECONDITIONS_"

    def __init__(self, schema: Optional[Schema] = None):
        self.schema = schema or SettingsSchema()
        self._config = Config(self.schema.validate({}))
        self.logger = get_logger(self.__class__.__name__)

    def _validated(self, data: Dict[str, Any], source: str) -> Dict[str, Any]:
        merged = self._config.to_dict()
        Config._deep_update(merged, data)
        try:
            return self.schema.validate(merged)
        except SchemaValidationError as e:
            raise ConfigurationError(
                f"Invalid configuration from {source}",
                details={'source': source, 'errors': e.details.get('errors', [])}
            )

    def load_from_file(self, filepath: str):
        """
        Load configuration from file (JSON or YAML).

        Args:
            filepath: Path to configuration file
        """
        path = Path(filepath)

        if not path.exists():
            raise ConfigurationError(
                f"Configuration file not found: {filepath}",
                details={'filepath': str(path)}
            )

        if path.suffix not in ['.yaml', '.yml', '.json']:
            raise ConfigurationError(
                f"Unsupported file format: {path.suffix}",
                details={'filepath': str(path)}
            )

        try:
            with open(path, 'r') as f:
                if path.suffix == '.json':
                    data = json.load(f)
                else:
                    data = yaml.safe_load(f)
        except (OSError, json.JSONDecodeError, yaml.YAMLError) as e:
            raise ConfigurationError(
                f"Failed to load configuration from {filepath}: {e}",
                details={'filepath': str(path), 'error': str(e)}
            )

        self._config = Config(self._validated(data or {}, str(path)))
        self.logger.info(f"Loaded configuration from {filepath}")

    def load_from_env(self, prefix: Optional[str] = None):
        """
        Load configuration from environment variables.

        ``PRECONDITIONS_VALIDATION__LOG_FAILURES=true`` sets
        ``validation.log_failures``: a double underscore separates sections.
        Values are parsed as JSON when possible, else kept as strings.

        Args:
            prefix: Prefix for environment variables
        """
        prefix = prefix or self.ENV_PREFIX
        env_config: Dict[str, Any] = {}

        for key, value in os.environ.items():
            if not key.startswith(prefix):
                continue
            parts = key[len(prefix):].lower().split('__')

            try:
                parsed_value = json.loads(value)
            except json.JSONDecodeError:
                parsed_value = value

            node = env_config
            for part in parts[:-1]:
                node = node.setdefault(part, {})
            node[parts[-1]] = parsed_value

        self._config = Config(self._validated(env_config, 'environment'))
        self.logger.info(f"Loaded {len(env_config)} configuration section(s) from environment")

    def load_from_dict(self, data: Dict[str, Any]):
        """
        Load configuration from dictionary.

        Args:
            data: Configuration dictionary
        """
        self._config = Config(self._validated(data, 'dict'))
        self.logger.info("Loaded configuration from dictionary")

    def save_to_file(self, filepath: str, format: str = 'yaml'):
        """
        Save configuration to file.

        Args:
            filepath: Path to save configuration
            format: File format ('yaml' or 'json')
        """
        if format not in ('yaml', 'json'):
            raise ConfigurationError(f"Unsupported format: {format}", details={'format': format})

        path = Path(filepath)
        path.parent.mkdir(parents=True, exist_ok=True)

        try:
            with open(path, 'w') as f:
                if format == 'yaml':
                    yaml.safe_dump(self._config.to_dict(), f, default_flow_style=False)
                else:
                    json.dump(self._config.to_dict(), f, indent=2)
        except OSError as e:
            raise ConfigurationError(
                f"Failed to save configuration to {filepath}: {e}",
                details={'filepath': str(path), 'error': str(e)}
            )

        self.logger.info(f"Saved configuration to {filepath}")

    def get(self, key: str, default: Any = None) -> Any:
        """Get configuration value."""
        return self._config.get(key, default)

    def set(self, key: str, value: Any):
        """Set configuration value."""
        data = self._config.to_dict()
        Config(data).set(key, value)
        self._config = Config(self._validated(data, f"set({key})"))
        self.logger.debug(f"Set config: {key} = {value}")

    def get_config(self) -> Config:
        """Get the full configuration object."""
        return self._config

    def clear(self):
        """Reset configuration to the schema defaults."""
        self._config = Config(self.schema.validate({}))
        self.logger.info("Cleared all configuration")


# Global configuration manager instance
_global_config_manager: Optional[ConfigManager] = None


def get_config_manager() -> ConfigManager:
    """Get the global configuration manager instance."""
    global _global_config_manager
    if _global_config_manager is None:
        _global_config_manager = ConfigManager()
    return _global_config_manager


def load_config(filepath: str):
    """Load configuration from file into global manager."""
    manager = get_config_manager()
    manager.load_from_file(filepath)


def get_config(key: str, default: Any = None) -> Any:
    """Get configuration value from global manager."""
    manager = get_config_manager()
    return manager.get(key, default)


def set_config(key: str, value: Any):
    """Set configuration value in global manager."""
    manager = get_config_manager()
    manager.set(key, value)


def apply_logging_config(manager: Optional[ConfigManager] = None):
    """Configure the toolkit's handlers from the ``logging`` settings."""
    manager = manager or get_config_manager()
    settings = manager.get('logging') or {}
    LoggerFactory.reset()
    LoggerFactory.configure(**settings)
