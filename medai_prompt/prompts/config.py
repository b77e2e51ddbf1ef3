"""
Prompt configuration module.

Provides the PromptConfig dataclass that drives prompt rendering and query
derivation, plus JSON serialization/deserialization. The JSON layout uses the
camelCase keys of the browser tool so exported files stay interchangeable.
"""

import json
import logging
from dataclasses import dataclass, field, fields
from typing import Any, Optional


logger = logging.getLogger(__name__)


class ConfigError(Exception):
    """Raised when configuration parsing or validation fails."""

    def __init__(
        self,
        message: str,
        line: Optional[int] = None,
        column: Optional[int] = None,
    ):
        self.line = line
        self.column = column

        if line is not None and column is not None:
            full_message = f"{message} (line {line}, column {column})"
        elif line is not None:
            full_message = f"{message} (line {line})"
        else:
            full_message = message

        super().__init__(full_message)


# Discriminator key every configuration document must carry
DISCRIMINATOR_KEY = "activeTab"

# Python attribute name -> JSON key
FIELD_KEYS: dict[str, str] = {
    "date_today": "dateToday",
    "query": "query",
    "scope": "scope",
    "audiences": "audiences",
    "priority_domains": "priorityDomains",
    "keyword_chips": "keywordChips",
    "custom_keywords": "customKeywords",
    "exclude_keywords": "excludeKeywords",
    "categories": "categories",
    "active_tab": "activeTab",
    "egov_cross_reference": "eGovCrossReference",
    "proof_mode": "proofMode",
    "official_domain_priority": "officialDomainPriority",
    "site_operator": "siteOperator",
}

STRING_FIELDS = ("date_today", "query", "active_tab")
STRING_LIST_FIELDS = (
    "scope",
    "audiences",
    "priority_domains",
    "custom_keywords",
    "exclude_keywords",
)
TOGGLE_LIST_FIELDS = ("keyword_chips", "categories")
BOOLEAN_FIELDS = (
    "egov_cross_reference",
    "proof_mode",
    "official_domain_priority",
    "site_operator",
)


@dataclass(frozen=True)
class KeywordChip:
    """A predefined optional search keyword that can be switched on or off."""
    name: str
    enabled: bool = True

    def to_dict(self) -> dict[str, Any]:
        return {"name": self.name, "enabled": self.enabled}


@dataclass(frozen=True)
class Category:
    """An output category; list order is the display order."""
    name: str
    enabled: bool = True

    def to_dict(self) -> dict[str, Any]:
        return {"name": self.name, "enabled": self.enabled}


@dataclass(frozen=True)
class PromptConfig:
    """Configuration for prompt generation.

    A frozen snapshot of everything the user has chosen. Edits never mutate
    an instance; they build a new one (see ``editing``).

    Attributes:
        date_today: Calendar date string, used verbatim.
        query: Free-text search theme; may be empty.
        scope: Scope labels, joined for display in order.
        audiences: Audience labels.
        priority_domains: Official domains to prefer, duplicates kept.
        keyword_chips: Predefined optional keywords with on/off state.
        custom_keywords: Free-text keywords; blank entries are ignored at use.
        exclude_keywords: Free-text exclusions; blank entries are ignored at use.
        categories: Output categories with on/off state, order significant.
        active_tab: Identifier of the selected preset.
        egov_cross_reference: Include the e-Gov law cross-reference block.
        proof_mode: Include the self-verification block.
        official_domain_priority: Prefer official domains when searching.
        site_operator: Emit ``site:`` scoped queries for priority domains.
        extras: Unknown keys read from JSON, written back unchanged.

    Example:
        config = PromptConfig(
            date_today="2026-02-04",
            query="画像診断AI",
            keyword_chips=[KeywordChip("SaMD")],
            active_tab="medical-device",
        )
    """
    date_today: str = ""
    query: str = ""
    scope: list[str] = field(default_factory=list)
    audiences: list[str] = field(default_factory=list)
    priority_domains: list[str] = field(default_factory=list)
    keyword_chips: list[KeywordChip] = field(default_factory=list)
    custom_keywords: list[str] = field(default_factory=list)
    exclude_keywords: list[str] = field(default_factory=list)
    categories: list[Category] = field(default_factory=list)
    active_tab: str = ""
    egov_cross_reference: bool = False
    proof_mode: bool = False
    official_domain_priority: bool = False
    site_operator: bool = False
    extras: dict[str, Any] = field(default_factory=dict)

    @property
    def enabled_chip_names(self) -> list[str]:
        """Names of enabled keyword chips, in chip order."""
        return [chip.name for chip in self.keyword_chips if chip.enabled]

    @property
    def enabled_category_names(self) -> list[str]:
        """Names of enabled categories, in configured order."""
        return [category.name for category in self.categories if category.enabled]

    @property
    def optional_keywords(self) -> list[str]:
        """Enabled chip names followed by the non-blank custom keywords."""
        return self.enabled_chip_names + _non_blank(self.custom_keywords)

    @property
    def active_exclude_keywords(self) -> list[str]:
        """Exclude keywords with blank entries dropped."""
        return _non_blank(self.exclude_keywords)

    def to_dict(self) -> dict[str, Any]:
        """Convert the config to a JSON-ready dictionary.

        Returns:
            A dictionary keyed by the camelCase wire names, including any
            extra keys carried over from an import.
        """
        data: dict[str, Any] = dict(self.extras)
        for name, key in FIELD_KEYS.items():
            value = getattr(self, name)
            if name in TOGGLE_LIST_FIELDS:
                data[key] = [item.to_dict() for item in value]
            elif name in STRING_LIST_FIELDS:
                data[key] = list(value)
            else:
                data[key] = value
        return data

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "PromptConfig":
        """Create a PromptConfig from a dictionary.

        Missing fields take their defaults. Fields whose value cannot be
        used (wrong type) also fall back to the default; consumers of
        imported configurations must tolerate partially shaped input.

        Args:
            data: Dictionary keyed by the camelCase wire names.

        Returns:
            A new PromptConfig instance.
        """
        kwargs: dict[str, Any] = {}
        for name, key in FIELD_KEYS.items():
            if key not in data:
                continue
            value = data[key]
            if name in STRING_FIELDS:
                parsed = value if isinstance(value, str) else None
            elif name in BOOLEAN_FIELDS:
                parsed = value if isinstance(value, bool) else None
            elif name in STRING_LIST_FIELDS:
                parsed = _string_list(value)
            elif name == "keyword_chips":
                parsed = _toggle_list(value, KeywordChip)
            else:
                parsed = _toggle_list(value, Category)

            if parsed is None:
                logger.debug(f"Ignoring unusable value for '{key}': {value!r}")
                continue
            kwargs[name] = parsed

        known_keys = set(FIELD_KEYS.values())
        kwargs["extras"] = {k: v for k, v in data.items() if k not in known_keys}
        return cls(**kwargs)


def _non_blank(items: list[str]) -> list[str]:
    return [item for item in items if item.strip()]


def _string_list(value: Any) -> Optional[list[str]]:
    if not isinstance(value, list):
        return None
    return [item for item in value if isinstance(item, str)]


def _toggle_list(value: Any, item_type: type) -> Optional[list]:
    if not isinstance(value, list):
        return None
    items = []
    for entry in value:
        if not isinstance(entry, dict) or not isinstance(entry.get("name"), str):
            continue
        enabled = entry.get("enabled", True)
        items.append(item_type(name=entry["name"], enabled=bool(enabled)))
    return items


def config_field_names() -> list[str]:
    """Attribute names of PromptConfig that map to JSON keys."""
    return [f.name for f in fields(PromptConfig) if f.name in FIELD_KEYS]


def validate_config(data: Any) -> tuple[bool, list[str]]:
    """Validate a configuration dictionary before a strict import.

    Checks that the discriminator is present and that every field that is
    present has the expected type. Missing optional fields are not errors.

    Args:
        data: Parsed JSON value to validate.

    Returns:
        A tuple of (is_valid, errors) where is_valid is True if validation
        passed and errors is a list of error messages (empty if valid).

    Example:
        is_valid, errors = validate_config({"activeTab": "medical-device"})
    """
    errors: list[str] = []

    if not isinstance(data, dict):
        return False, ["Configuration must be an object"]

    if DISCRIMINATOR_KEY not in data:
        errors.append(f"Missing required field: '{DISCRIMINATOR_KEY}'")

    for name in STRING_FIELDS:
        key = FIELD_KEYS[name]
        if key in data and not isinstance(data[key], str):
            errors.append(f"Field '{key}' must be a string")

    for name in BOOLEAN_FIELDS:
        key = FIELD_KEYS[name]
        if key in data and not isinstance(data[key], bool):
            errors.append(f"Field '{key}' must be a boolean")

    for name in STRING_LIST_FIELDS:
        key = FIELD_KEYS[name]
        if key not in data:
            continue
        value = data[key]
        if not isinstance(value, list):
            errors.append(f"Field '{key}' must be an array")
        elif not all(isinstance(item, str) for item in value):
            errors.append(f"Field '{key}' must contain only strings")

    for name in TOGGLE_LIST_FIELDS:
        key = FIELD_KEYS[name]
        if key not in data:
            continue
        value = data[key]
        if not isinstance(value, list):
            errors.append(f"Field '{key}' must be an array")
            continue
        for i, entry in enumerate(value):
            if not isinstance(entry, dict):
                errors.append(f"Field '{key}[{i}]' must be an object")
                continue
            if not isinstance(entry.get("name"), str):
                errors.append(f"Field '{key}[{i}].name' must be a string")
            if "enabled" in entry and not isinstance(entry["enabled"], bool):
                errors.append(f"Field '{key}[{i}].enabled' must be a boolean")

    return len(errors) == 0, errors


def to_json(config: PromptConfig) -> str:
    """Serialize a PromptConfig to a JSON string.

    Args:
        config: The PromptConfig to serialize.

    Returns:
        Indented JSON text; non-ASCII characters are kept as-is.
    """
    return json.dumps(config.to_dict(), ensure_ascii=False, indent=2)


def parse_json(text: str) -> Optional[PromptConfig]:
    """Parse JSON text into a PromptConfig without raising.

    Args:
        text: JSON text, e.g. from an exported file or a share link.

    Returns:
        The configuration, or None if the text is not valid JSON (including
        nesting too deep to decode), is not an object, or lacks the
        ``activeTab`` discriminator.
    """
    try:
        data = json.loads(text)
    except (TypeError, ValueError, RecursionError) as e:
        logger.debug(f"Rejecting configuration JSON: {e}")
        return None

    if not isinstance(data, dict) or DISCRIMINATOR_KEY not in data:
        logger.debug("Rejecting configuration JSON: not an object with activeTab")
        return None

    return PromptConfig.from_dict(data)


def export_config(config: PromptConfig) -> str:
    """Serialize a PromptConfig for an export file.

    Example:
        json_str = export_config(PromptConfig(active_tab="medical-device"))
    """
    return to_json(config)


def import_config(json_str: str) -> PromptConfig:
    """Deserialize a PromptConfig from JSON, reporting every problem.

    Args:
        json_str: JSON string containing configuration.

    Returns:
        A PromptConfig instance.

    Raises:
        ConfigError: If the JSON is malformed or validation fails.
    """
    try:
        data = json.loads(json_str)
    except json.JSONDecodeError as e:
        raise ConfigError(
            f"Invalid JSON: {e.msg}",
            line=e.lineno,
            column=e.colno,
        )
    except RecursionError:
        raise ConfigError("Invalid JSON: nesting too deep")

    is_valid, errors = validate_config(data)
    if not is_valid:
        raise ConfigError(f"Configuration validation failed: {'; '.join(errors)}")

    return PromptConfig.from_dict(data)
