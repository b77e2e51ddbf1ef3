"""
Preset manager for the purpose tabs.

Provides the PresetManager class for registering, retrieving, and listing
tab presets, and the factory for a preset's starting configuration.
"""

import json
import logging
from datetime import date
from pathlib import Path
from typing import Optional

from ...constants import DEFAULT_PRESET
from ..config import Category, KeywordChip, PromptConfig
from .builtin import DEFAULT_AUDIENCE_OPTIONS, DEFAULT_PRIORITY_DOMAINS, DEFAULT_SCOPE_OPTIONS
from .schema import PresetValidationError, TabPreset, validate_preset_config


logger = logging.getLogger(__name__)


class PresetManager:
    """Manages the purpose-tab presets.

    Holds built-in presets and custom presets loaded from a JSON file.
    Lookups of an unknown id fall back to the default preset, so a stale
    ``activeTab`` in an imported configuration still resolves.

    Attributes:
        DEFAULT_PRESET: Preset id used when a requested preset is not found.

    Example:
        manager = PresetManager()
        preset = manager.get("research-ethics")
        for preset in manager.list_presets():
            print(preset.id, preset.name)
    """

    DEFAULT_PRESET = DEFAULT_PRESET

    def __init__(self, load_builtin: bool = True) -> None:
        """Initialize the PresetManager.

        Args:
            load_builtin: If True, automatically load the built-in presets.
        """
        self._presets: dict[str, TabPreset] = {}
        self._default_preset = self.DEFAULT_PRESET

        if load_builtin:
            self._load_builtin_presets()

    def _load_builtin_presets(self) -> None:
        from .builtin import get_builtin_presets

        for preset in get_builtin_presets():
            self._presets[preset.id] = preset
            logger.debug(f"Loaded built-in preset: {preset.id}")

    def register(self, preset: TabPreset) -> None:
        """Register a preset, replacing any preset with the same id.

        Args:
            preset: The TabPreset to register.

        Raises:
            ValueError: If the preset definition is invalid.
        """
        is_valid, errors = validate_preset_config(preset.to_dict())
        if not is_valid:
            raise ValueError(f"Invalid preset configuration: {'; '.join(errors)}")

        self._presets[preset.id] = preset
        logger.debug(f"Registered preset: {preset.id}")

    def unregister(self, preset_id: str) -> bool:
        """Unregister a preset by id.

        Returns:
            True if the preset was unregistered, False if it wasn't found.
        """
        if preset_id in self._presets:
            del self._presets[preset_id]
            logger.debug(f"Unregistered preset: {preset_id}")
            return True
        return False

    def get(self, preset_id: str) -> TabPreset:
        """Get a preset by id, falling back to the default preset.

        Args:
            preset_id: The id of the preset to retrieve.

        Returns:
            The requested preset, or the default preset if it is not found.

        Raises:
            KeyError: If neither the requested nor the default preset is
                registered.
        """
        if preset_id in self._presets:
            return self._presets[preset_id]

        logger.warning(f"Preset '{preset_id}' not found, falling back to '{self._default_preset}'")

        if self._default_preset in self._presets:
            return self._presets[self._default_preset]

        raise KeyError(
            f"Preset '{preset_id}' not found and default preset "
            f"'{self._default_preset}' is not registered."
        )

    def has_preset(self, preset_id: str) -> bool:
        return preset_id in self._presets

    def list_presets(self) -> list[TabPreset]:
        """List registered presets in tab order (registration order)."""
        return list(self._presets.values())

    def load_custom_presets(self, path: Path) -> int:
        """Load custom presets from a JSON file.

        The file holds either a single preset object or an array of them.
        Invalid entries are skipped with a warning.

        Args:
            path: Path to the JSON file.

        Returns:
            The number of presets successfully loaded.

        Raises:
            FileNotFoundError: If the file doesn't exist.
            json.JSONDecodeError: If the file contains invalid JSON.
            PresetValidationError: If the top-level value is neither an
                object nor an array.
        """
        if not path.exists():
            raise FileNotFoundError(f"Preset file not found: {path}")

        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)

        if isinstance(data, dict):
            presets_data = [data]
        elif isinstance(data, list):
            presets_data = data
        else:
            raise PresetValidationError(
                f"Invalid preset file format: expected object or array, got {type(data).__name__}"
            )

        loaded_count = 0
        errors: list[str] = []

        for i, preset_data in enumerate(presets_data):
            is_valid, validation_errors = validate_preset_config(preset_data)
            if not is_valid:
                errors.append(f"Preset {i}: {'; '.join(validation_errors)}")
                continue

            self.register(TabPreset.from_dict(preset_data))
            loaded_count += 1

        if errors:
            logger.warning(f"Some presets failed to load from {path}: {errors}")

        logger.info(f"Loaded {loaded_count} custom presets from {path}")
        return loaded_count

    def set_default_preset(self, preset_id: str) -> None:
        self._default_preset = preset_id

    @property
    def default_preset(self) -> str:
        """Get the current default preset id."""
        return self._default_preset


def create_default_config(preset: TabPreset, today: Optional[date] = None) -> PromptConfig:
    """Build the starting configuration for a preset.

    Args:
        preset: The tab preset whose categories and chips are used.
        today: Date to stamp into the configuration; defaults to today.

    Returns:
        A PromptConfig with every category and chip of the preset enabled,
        the first scope and audience options selected, and all default
        priority domains.
    """
    today = today or date.today()
    return PromptConfig(
        date_today=today.isoformat(),
        query="",
        scope=DEFAULT_SCOPE_OPTIONS[:1],
        audiences=DEFAULT_AUDIENCE_OPTIONS[:2],
        priority_domains=list(DEFAULT_PRIORITY_DOMAINS),
        keyword_chips=[KeywordChip(name) for name in preset.keyword_chips],
        custom_keywords=[],
        exclude_keywords=[],
        categories=[Category(name) for name in preset.categories],
        active_tab=preset.id,
        egov_cross_reference=True,
        proof_mode=False,
        official_domain_priority=True,
        site_operator=False,
    )
