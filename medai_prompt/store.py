"""
Working configuration store for the terminal front-end.

Owns the current PromptConfig, replaces it on every edit and persists it to
the state file as JSON.
"""
import logging
from datetime import date
from pathlib import Path
from typing import Any, Callable, Optional

from .prompts.config import PromptConfig, parse_json, to_json
from .prompts.presets import PresetManager, create_default_config


logger = logging.getLogger(__name__)


class ConfigStore:
    """
    Holds the current configuration snapshot.

    Edits go through ``apply``, which passes the snapshot to a pure editing
    function and keeps the result. Snapshots handed out earlier are never
    modified.

    Example:
        store = ConfigStore(presets, state_path)
        store.apply(editing.toggle_keyword_chip, "SaMD")
        prompt = engine.render(store.config)
    """

    def __init__(
        self,
        presets: PresetManager,
        state_path: Optional[Path] = None,
        default_preset: Optional[str] = None,
        today: Optional[date] = None,
    ) -> None:
        """
        Initialize the store, loading the saved configuration if there is one.

        Args:
            presets: Preset registry used for the default configuration.
            state_path: JSON file the configuration is saved to. None keeps
                the configuration in memory only.
            default_preset: Preset id used when nothing is saved.
            today: Date for a freshly created configuration.
        """
        self._presets = presets
        self._state_path = state_path
        self._default_preset = default_preset or presets.default_preset
        self._today = today
        self._config = self._load()

    @property
    def config(self) -> PromptConfig:
        """The current configuration snapshot."""
        return self._config

    @property
    def state_path(self) -> Optional[Path]:
        return self._state_path

    def default_config(self) -> PromptConfig:
        """A fresh configuration for the default preset."""
        preset = self._presets.get(self._default_preset)
        return create_default_config(preset, today=self._today)

    def apply(self, fn: Callable[..., PromptConfig], *args: Any) -> bool:
        """
        Replace the configuration with ``fn(config, *args)`` and save it.

        Args:
            fn: Pure editing function taking the configuration first.
            *args: Further arguments for fn.

        Returns:
            True if the configuration changed, False if fn returned the
            same snapshot.
        """
        new_config = fn(self._config, *args)
        if new_config is self._config:
            return False
        self.replace(new_config)
        return True

    def replace(self, config: PromptConfig) -> None:
        """Install a whole new configuration (import, reset) and save it."""
        self._config = config
        self.save()

    def reset(self) -> PromptConfig:
        """Return to the default configuration of the default preset."""
        self.replace(self.default_config())
        return self._config

    def save(self) -> None:
        """Write the configuration to the state file, if one is set."""
        if self._state_path is None:
            return
        self._state_path.parent.mkdir(parents=True, exist_ok=True)
        self._state_path.write_text(to_json(self._config), encoding="utf-8")
        logger.debug(f"Saved configuration to {self._state_path}")

    def _load(self) -> PromptConfig:
        if self._state_path is None or not self._state_path.exists():
            return self.default_config()

        try:
            text = self._state_path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            logger.warning(f"Could not read saved configuration {self._state_path}: {e}")
            return self.default_config()

        config = parse_json(text)
        if config is None:
            logger.warning(f"Ignoring invalid saved configuration in {self._state_path}")
            return self.default_config()

        logger.debug(f"Loaded configuration from {self._state_path}")
        return config
