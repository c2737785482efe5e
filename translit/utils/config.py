"""
Configuration loader and manager.
Handles loading YAML configs and providing access to settings.
"""

import yaml
import os
from pathlib import Path
from typing import Dict, Any, Optional

from ..exceptions import ConfigurationError


DEFAULT_CONFIG_DIR = Path(__file__).resolve().parent.parent / "configs"
CONFIG_DIR_ENV = "TRANSLIT_CONFIG_DIR"


class Config:
    """Configuration manager for the transliteration library."""

    RULES_FILE = "transliteration_rules.yaml"
    STORAGE_FILE = "storage_config.yaml"

    def __init__(self, config_dir: Optional[str] = None):
        """
        Initialize configuration manager.

        Args:
            config_dir: Directory containing configuration files. Falls back to
                ``$TRANSLIT_CONFIG_DIR`` and then to the bundled ``configs``.
        """
        if config_dir is None:
            config_dir = os.environ.get(CONFIG_DIR_ENV) or DEFAULT_CONFIG_DIR
        self.config_dir = Path(config_dir)
        self._rules_config = None
        self._storage_config = None

    @property
    def rules(self) -> Dict[str, Any]:
        """Load and return transliteration rules configuration."""
        if self._rules_config is None:
            self._rules_config = self._load(self.RULES_FILE)
        return self._rules_config

    @property
    def storage(self) -> Dict[str, Any]:
        """Load and return record storage, export and logging configuration."""
        if self._storage_config is None:
            self._storage_config = self._load(self.STORAGE_FILE)
        return self._storage_config

    def _load(self, filename: str) -> Dict[str, Any]:
        config_path = self.config_dir / filename
        try:
            with open(config_path, 'r', encoding='utf-8') as f:
                data = yaml.safe_load(f)
        except OSError as e:
            raise ConfigurationError(
                f"Cannot read configuration file {config_path}: {e}", code="config_io"
            ) from e
        except yaml.YAMLError as e:
            raise ConfigurationError(
                f"Malformed YAML in {config_path}: {e}", code="config_yaml"
            ) from e

        if data is None:
            return {}
        if not isinstance(data, dict):
            raise ConfigurationError(
                f"Top level of {config_path} must be a mapping", code="config_shape"
            )
        return data

    def get(self, key_path: str, default: Any = None) -> Any:
        """
        Get configuration value using dot notation.

        Args:
            key_path: Path to config value (e.g., 'storage.max_items')
            default: Default value if key not found

        Returns:
            Configuration value

        Example:
            >>> config = Config()
            >>> max_items = config.get('storage.max_items')
        """
        keys = key_path.split('.')

        # Determine which config to use
        if keys[0] == 'rules':
            config_dict = self.rules
            keys = keys[1:]
        elif keys[0] == 'storage':
            config_dict = self.storage
            keys = keys[1:]
        else:
            # Try both
            value = self._get_nested(self.storage, keys, None)
            if value is not None:
                return value
            return self._get_nested(self.rules, keys, default)

        return self._get_nested(config_dict, keys, default)

    @staticmethod
    def _get_nested(config: Dict, keys: list, default: Any = None) -> Any:
        """Helper to get nested dictionary values."""
        current = config
        for key in keys:
            if isinstance(current, dict) and key in current:
                current = current[key]
            else:
                return default
        return current


# Global config instance
_global_config = None


def get_config() -> Config:
    """Get global configuration instance."""
    global _global_config
    if _global_config is None:
        _global_config = Config()
    return _global_config


def set_config(config: Optional[Config]) -> None:
    """Replace the global configuration instance (``None`` resets to defaults)."""
    global _global_config
    _global_config = config
