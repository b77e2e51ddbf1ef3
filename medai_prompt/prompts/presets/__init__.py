"""
Purpose-tab presets.

Exports the TabPreset schema, the built-in presets and default option lists,
and the PresetManager registry.
"""

from .builtin import (
    DEFAULT_AUDIENCE_OPTIONS,
    DEFAULT_PRIORITY_DOMAINS,
    DEFAULT_SCOPE_OPTIONS,
    DISCLAIMER_LINES,
    TEMPLATE_BASE_DATE,
    get_builtin_presets,
)
from .manager import PresetManager, create_default_config
from .schema import PresetValidationError, TabPreset, validate_preset_config


__all__ = [
    "TabPreset",
    "PresetValidationError",
    "validate_preset_config",
    "PresetManager",
    "create_default_config",
    "get_builtin_presets",
    "DEFAULT_PRIORITY_DOMAINS",
    "DEFAULT_SCOPE_OPTIONS",
    "DEFAULT_AUDIENCE_OPTIONS",
    "DISCLAIMER_LINES",
    "TEMPLATE_BASE_DATE",
]
