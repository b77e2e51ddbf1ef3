"""
Preset configuration schema and validation.

Provides the TabPreset dataclass and validation for preset definitions.
"""

import re
from dataclasses import dataclass, field, asdict
from typing import Any, Optional


PRESET_ID_PATTERN = re.compile(r"^[a-z][a-z0-9-]*$")


@dataclass(frozen=True)
class TabPreset:
    """A purpose tab: the categories and keyword chips it starts with.

    Attributes:
        id: Unique identifier (lowercase, alphanumeric with hyphens).
        name: Display name of the tab.
        description: One-line purpose shown next to the name.
        categories: Output categories, in display order.
        keyword_chips: Optional search keywords offered as chips.

    Example:
        preset = TabPreset(
            id="medical-device",
            name="医療機器・SaMD",
            categories=["SaMD・プログラム医療機器"],
            keyword_chips=["SaMD", "PMDA"],
        )
    """
    id: str
    name: str
    description: str = ""
    categories: list[str] = field(default_factory=list)
    keyword_chips: list[str] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        """Convert the preset to a dictionary."""
        data = asdict(self)
        data["keywordChips"] = data.pop("keyword_chips")
        return data

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "TabPreset":
        """Create a TabPreset from a dictionary.

        Args:
            data: Dictionary using the browser tool's keys (``keywordChips``).

        Returns:
            A new TabPreset instance.

        Raises:
            KeyError: If ``id`` or ``name`` is missing.
        """
        return cls(
            id=data["id"],
            name=data["name"],
            description=data.get("description", ""),
            categories=list(data.get("categories", [])),
            keyword_chips=list(data.get("keywordChips", [])),
        )


class PresetValidationError(Exception):
    """Raised when preset configuration validation fails."""

    def __init__(self, message: str, errors: Optional[list[str]] = None):
        super().__init__(message)
        self.errors = errors or []


def validate_preset_config(data: dict[str, Any]) -> tuple[bool, list[str]]:
    """Validate a preset definition dictionary.

    Args:
        data: Dictionary containing the preset definition.

    Returns:
        A tuple of (is_valid, errors).

    Example:
        is_valid, errors = validate_preset_config({
            "id": "generative-ai",
            "name": "生成AI",
        })
    """
    errors: list[str] = []

    if not isinstance(data, dict):
        return False, ["Preset must be an object"]

    for field_name in ("id", "name"):
        if field_name not in data:
            errors.append(f"Missing required field: '{field_name}'")

    if errors:
        return False, errors

    preset_id = data["id"]
    if not isinstance(preset_id, str):
        errors.append("Field 'id' must be a string")
    elif len(preset_id) > 50:
        errors.append("Field 'id' must be at most 50 characters")
    elif not PRESET_ID_PATTERN.match(preset_id):
        errors.append(
            "Field 'id' must start with a lowercase letter and contain "
            "only lowercase letters, numbers, and hyphens"
        )

    name = data["name"]
    if not isinstance(name, str):
        errors.append("Field 'name' must be a string")
    elif not name.strip():
        errors.append("Field 'name' must not be empty")

    if "description" in data and not isinstance(data["description"], str):
        errors.append("Field 'description' must be a string")

    for list_field in ("categories", "keywordChips"):
        if list_field not in data:
            continue
        value = data[list_field]
        if not isinstance(value, list):
            errors.append(f"Field '{list_field}' must be an array")
            continue
        for i, item in enumerate(value):
            if not isinstance(item, str) or not item.strip():
                errors.append(f"Field '{list_field}[{i}]' must be a non-empty string")

    known_fields = {"id", "name", "description", "categories", "keywordChips"}
    unknown_fields = set(data.keys()) - known_fields
    if unknown_fields:
        errors.append(f"Unknown fields: {', '.join(sorted(unknown_fields))}")

    return len(errors) == 0, errors
