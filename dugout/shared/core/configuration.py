"""
Configuration Management for Dugout

Settings are resolved with a 3-tier precedence hierarchy:
environment → user YAML → system defaults YAML (bundled with the package).
"""

import logging
import os
from enum import Enum
from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError

logger = logging.getLogger(__name__)

DEFAULTS_PATH = Path(__file__).resolve().parent.parent / "config" / "settings" / "defaults.yaml"


class ValidationLevel(Enum):
    """Configuration validation strictness levels"""
    STRICT = "strict"      # Raise on validation errors
    LENIENT = "lenient"    # Log a warning, use defaults


class SearchScope(str, Enum):
    """Which list a name search filters."""
    CATALOG = "catalog"
    FAVORITES = "favorites"


class UIConfig(BaseModel):
    """Flet runtime settings"""
    model_config = ConfigDict(extra='forbid')

    flet_web_mode: bool = Field(default=False, description="Serve the app over HTTP instead of a native window")
    flet_port: int = Field(default=8550, ge=1024, le=65535, description="Web server port")
    theme_mode: str = Field(default="dark", description="UI theme mode")
    assets_dir: str = Field(default="assets", description="Directory holding team images")
    window_width: int = Field(default=420, ge=320, le=1600)
    window_height: int = Field(default=860, ge=480, le=2000)


class BannerConfig(BaseModel):
    """Confirmation banner shown after a favorite is added or removed"""
    model_config = ConfigDict(extra='forbid')

    dismiss_seconds: float = Field(default=3.0, gt=0.0, le=60.0, description="Auto-dismiss delay")
    added_message: str = Field(default="Se agregó a favoritos")
    removed_message: str = Field(default="Se eliminó de favoritos")


class SearchConfig(BaseModel):
    """Name filter behaviour"""
    model_config = ConfigDict(extra='forbid')

    scope: SearchScope = Field(default=SearchScope.CATALOG, description="List the filter runs over")


class SystemConfig(BaseModel):
    """Complete application configuration"""
    model_config = ConfigDict(extra='forbid')

    ui: UIConfig = Field(default_factory=UIConfig)
    banner: BannerConfig = Field(default_factory=BannerConfig)
    search: SearchConfig = Field(default_factory=SearchConfig)

    schema_version: int = Field(default=1, description="Configuration schema version")


# env var -> (section, key, converter)
ENV_MAP = {
    'FLET_WEB_MODE': ('ui', 'flet_web_mode', lambda v: v.lower() in ('true', '1', 'yes', 'on')),
    'FLET_PORT': ('ui', 'flet_port', int),
    'BANNER_DISMISS_SECONDS': ('banner', 'dismiss_seconds', float),
    'SEARCH_SCOPE': ('search', 'scope', str.lower),
}


class ConfigManager:
    """Resolves SystemConfig from defaults, the user's YAML file and the environment"""

    def __init__(self, config_dir: Optional[Path] = None, defaults_path: Path = DEFAULTS_PATH):
        self.config_dir = Path(config_dir) if config_dir else Path.cwd() / "config"
        self.defaults_path = defaults_path
        self._system_defaults: Optional[Dict[str, Any]] = None
        self._user_config: Optional[Dict[str, Any]] = None

    def _load_yaml_file(self, file_path: Path) -> Dict[str, Any]:
        """Load a YAML mapping; a missing or unreadable file counts as empty"""
        if not file_path.exists():
            return {}

        try:
            with open(file_path, 'r', encoding='utf-8') as f:
                data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            logger.warning(f"Failed to load {file_path}: {e}")
            return {}

        if not isinstance(data, dict):
            logger.warning(f"Ignoring {file_path}: top level is not a mapping")
            return {}
        return data

    def _load_system_defaults(self) -> Dict[str, Any]:
        if self._system_defaults is None:
            self._system_defaults = self._load_yaml_file(self.defaults_path)
        return self._system_defaults

    def _load_user_config(self) -> Dict[str, Any]:
        if self._user_config is None:
            self._user_config = self._load_yaml_file(self.config_dir / "user.yaml")
        return self._user_config

    def _deep_merge(self, base: Dict[str, Any], updates: Dict[str, Any]) -> None:
        for key, value in updates.items():
            if key in base and isinstance(base[key], dict) and isinstance(value, dict):
                self._deep_merge(base[key], value)
            else:
                base[key] = value

    def _get_env_overrides(self) -> Dict[str, Any]:
        """Extract configuration overrides from environment variables"""
        overrides: Dict[str, Any] = {}
        for env_key, (section, config_key, convert) in ENV_MAP.items():
            value = os.getenv(env_key)
            if value is None:
                continue
            try:
                converted = convert(value)
            except ValueError:
                logger.warning(f"Ignoring {env_key}={value!r}: cannot convert")
                continue
            overrides.setdefault(section, {})[config_key] = converted
        return overrides

    def _merge_configs(self) -> Dict[str, Any]:
        """Merge configurations with precedence: env → user → system"""
        merged = SystemConfig().model_dump(mode="json")
        self._deep_merge(merged, self._load_system_defaults())
        self._deep_merge(merged, self._load_user_config())
        self._deep_merge(merged, self._get_env_overrides())
        return merged

    def get_config(self, validation_level: ValidationLevel = ValidationLevel.STRICT) -> SystemConfig:
        """Get merged configuration with validation"""
        merged_config = self._merge_configs()

        try:
            return SystemConfig(**merged_config)
        except ValidationError as e:
            if validation_level == ValidationLevel.STRICT:
                raise ValueError(f"Configuration validation failed: {e}") from e
            logger.warning(f"Configuration validation failed, using defaults: {e}")
            return SystemConfig()


_config_manager: Optional[ConfigManager] = None


def get_config_manager(config_dir: Optional[Path] = None) -> ConfigManager:
    """Get global configuration manager instance"""
    global _config_manager
    if _config_manager is None or config_dir is not None:
        _config_manager = ConfigManager(config_dir)
    return _config_manager


def get_config(validation_level: ValidationLevel = ValidationLevel.STRICT) -> SystemConfig:
    """Get current system configuration"""
    return get_config_manager().get_config(validation_level)
