"""
Application settings for medai_prompt.
Handles loading, saving, and accessing settings from a JSON file and environment variables.
"""
import json
import logging
import os
from dataclasses import dataclass, asdict, fields
from pathlib import Path
from typing import Any, Optional

from .constants import (
    CUSTOM_PRESETS_FILE,
    DEFAULT_PRESET,
    DEFAULT_SHARE_BASE_URL,
    SETTINGS_FILE,
    STATE_FILE,
)


logger = logging.getLogger(__name__)


ENV_BASE_URL = "MEDAI_PROMPT_BASE_URL"
ENV_STATE_FILE = "MEDAI_PROMPT_STATE_FILE"


@dataclass
class AppSettings:
    """Terminal front-end settings."""
    share_base_url: str = DEFAULT_SHARE_BASE_URL
    default_preset: str = DEFAULT_PRESET
    state_file: str = str(STATE_FILE)
    custom_presets_file: str = str(CUSTOM_PRESETS_FILE)
    copy_after_render: bool = False

    @property
    def state_path(self) -> Path:
        return Path(self.state_file).expanduser()

    @property
    def custom_presets_path(self) -> Path:
        return Path(self.custom_presets_file).expanduser()


class SettingsManager:
    """
    Manages application settings with support for a JSON file and environment variables.

    Environment variables take precedence over file values and are never
    written back to the file.
    """

    _instance: Optional['SettingsManager'] = None

    settings_file: Path = SETTINGS_FILE

    def __new__(cls) -> 'SettingsManager':
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance._initialized = False
        return cls._instance

    def __init__(self) -> None:
        if self._initialized:
            return
        self._initialized = True
        self._settings = AppSettings()
        self._env_overrides: dict[str, Any] = {}
        self._load_settings()
        self._load_env_vars()

    def _load_settings(self) -> None:
        """Load settings from the JSON file, creating it when missing."""
        if not self.settings_file.exists():
            self._save_settings()
            return

        try:
            with open(self.settings_file, 'r', encoding='utf-8') as f:
                data = json.load(f)
            known = {f.name for f in fields(AppSettings)}
            self._settings = AppSettings(**{k: v for k, v in data.items() if k in known})
        except (json.JSONDecodeError, TypeError, AttributeError) as e:
            logger.warning(f"Failed to load settings file {self.settings_file}: {e}")
            self._settings = AppSettings()

    def _load_env_vars(self) -> None:
        """Apply environment variable overrides."""
        self._env_overrides = {}
        env_map = {
            ENV_BASE_URL: 'share_base_url',
            ENV_STATE_FILE: 'state_file',
        }
        for env_name, attr in env_map.items():
            value = os.environ.get(env_name)
            if value:
                self._env_overrides[attr] = getattr(self._settings, attr)
                setattr(self._settings, attr, value)
                logger.debug(f"Setting '{attr}' overridden by {env_name}")

    def _save_settings(self) -> None:
        """Save current settings to the JSON file."""
        data = asdict(self._settings)
        # Environment overrides are written back as the file value they replaced
        data.update(self._env_overrides)

        self.settings_file.parent.mkdir(parents=True, exist_ok=True)
        with open(self.settings_file, 'w', encoding='utf-8') as f:
            json.dump(data, f, indent=2)

    @property
    def settings(self) -> AppSettings:
        """Get the current settings."""
        return self._settings

    def update(self, **kwargs: Any) -> None:
        """Update settings and persist them.

        Raises:
            AttributeError: If a keyword is not a settings field.
        """
        for key, value in kwargs.items():
            if not hasattr(self._settings, key):
                raise AttributeError(f"Unknown setting: '{key}'")
            setattr(self._settings, key, value)
            self._env_overrides.pop(key, None)
        self._save_settings()

    def save(self) -> None:
        """Explicitly save settings."""
        self._save_settings()

    def reload(self) -> None:
        """Reload settings from file."""
        self._settings = AppSettings()
        self._load_settings()
        self._load_env_vars()

    def reset(self) -> None:
        """Reset settings to defaults."""
        self._settings = AppSettings()
        self._env_overrides = {}
        self._save_settings()


def get_settings() -> SettingsManager:
    """Get the global settings manager instance."""
    return SettingsManager()
