"""
Configuration editing operations.

Every operation takes a PromptConfig and returns a new one; the input is
never modified. Operations that would not change anything (toggling an
unknown name, adding a duplicate domain) return the input unchanged, so
callers can detect a no-op with ``is``.
"""

import re
from dataclasses import dataclass, field, replace
from datetime import date
from typing import Any, Sequence

from .config import Category, KeywordChip, PromptConfig, config_field_names
from .presets.schema import TabPreset


DATE_PATTERN = re.compile(r"^\d{4}-\d{2}-\d{2}$")


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of validate().

    Attributes:
        errors: Problems that make the generated prompt unusable.
        warnings: Problems worth showing that still allow generation.
    """
    errors: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return not self.errors


def update_field(config: PromptConfig, name: str, value: Any) -> PromptConfig:
    """Return a copy of config with one attribute replaced.

    Raises:
        ValueError: If name is not a configuration field.
    """
    if name not in config_field_names():
        raise ValueError(f"Unknown configuration field: '{name}'")
    return replace(config, **{name: value})


def switch_tab(config: PromptConfig, preset: TabPreset) -> PromptConfig:
    """Select a tab: its categories and keyword chips replace the current ones.

    All of the preset's categories and chips start enabled. Other fields
    (theme, scope, audiences, domains, switches) are kept.
    """
    return replace(
        config,
        active_tab=preset.id,
        categories=[Category(name) for name in preset.categories],
        keyword_chips=[KeywordChip(name) for name in preset.keyword_chips],
    )


def toggle_category(config: PromptConfig, name: str) -> PromptConfig:
    if not any(c.name == name for c in config.categories):
        return config
    categories = [
        replace(c, enabled=not c.enabled) if c.name == name else c
        for c in config.categories
    ]
    return replace(config, categories=categories)


def move_category(config: PromptConfig, name: str, new_index: int) -> PromptConfig:
    """Move a category to a new position in the display order.

    Args:
        config: The configuration.
        name: Name of the category to move.
        new_index: Target position, clamped to the list bounds.

    Returns:
        The reordered configuration, or config itself if the category is
        unknown or already at that position.
    """
    names = [c.name for c in config.categories]
    if name not in names:
        return config

    old_index = names.index(name)
    new_index = max(0, min(new_index, len(names) - 1))
    if old_index == new_index:
        return config

    categories = list(config.categories)
    categories.insert(new_index, categories.pop(old_index))
    return replace(config, categories=categories)


def toggle_keyword_chip(config: PromptConfig, name: str) -> PromptConfig:
    if not any(k.name == name for k in config.keyword_chips):
        return config
    chips = [
        replace(k, enabled=not k.enabled) if k.name == name else k
        for k in config.keyword_chips
    ]
    return replace(config, keyword_chips=chips)


def _toggle_label(labels: list[str], label: str) -> list[str]:
    if label in labels:
        return [item for item in labels if item != label]
    return labels + [label]


def toggle_scope(config: PromptConfig, scope: str) -> PromptConfig:
    """Select or deselect a scope label; new labels are appended."""
    return replace(config, scope=_toggle_label(config.scope, scope))


def add_custom_scope(config: PromptConfig, scope: str) -> PromptConfig:
    """Add a free-text scope label (trimmed); blanks and duplicates are ignored."""
    scope = scope.strip()
    if not scope or scope in config.scope:
        return config
    return replace(config, scope=config.scope + [scope])


def toggle_audience(config: PromptConfig, audience: str) -> PromptConfig:
    return replace(config, audiences=_toggle_label(config.audiences, audience))


def add_priority_domain(config: PromptConfig, domain: str) -> PromptConfig:
    """Add a priority domain, trimmed and lower-cased.

    Blank input and domains already in the list leave config unchanged.
    """
    domain = domain.strip().lower()
    if not domain or domain in config.priority_domains:
        return config
    return replace(config, priority_domains=config.priority_domains + [domain])


def remove_priority_domain(config: PromptConfig, domain: str) -> PromptConfig:
    if domain not in config.priority_domains:
        return config
    domains = [d for d in config.priority_domains if d != domain]
    return replace(config, priority_domains=domains)


def set_custom_keywords(config: PromptConfig, keywords: Sequence[str]) -> PromptConfig:
    return replace(config, custom_keywords=list(keywords))


def set_exclude_keywords(config: PromptConfig, keywords: Sequence[str]) -> PromptConfig:
    return replace(config, exclude_keywords=list(keywords))


def validate(config: PromptConfig) -> ValidationResult:
    """Check a configuration before generating a prompt.

    Errors:
        - ``date_today`` is not a ``YYYY-MM-DD`` calendar date.
        - No category is enabled.

    Warnings:
        - The search theme is empty.
        - Site-scoped search is on but there are no priority domains.
        - No optional keyword is enabled.

    Example:
        result = validate(config)
        if not result.is_valid:
            print("\\n".join(result.errors))
    """
    errors: list[str] = []
    warnings: list[str] = []

    if not _is_iso_date(config.date_today):
        errors.append(f"Date must be YYYY-MM-DD: '{config.date_today}'")

    if not config.enabled_category_names:
        errors.append("At least one category must be enabled")

    if not config.query.strip():
        warnings.append("Search theme is empty")

    if config.official_domain_priority and config.site_operator and not config.priority_domains:
        warnings.append("Site-scoped search is on but no priority domains are set")

    if not config.optional_keywords:
        warnings.append("No optional keywords are enabled")

    return ValidationResult(errors=errors, warnings=warnings)


def _is_iso_date(value: str) -> bool:
    if not DATE_PATTERN.match(value):
        return False
    try:
        date.fromisoformat(value)
    except ValueError:
        return False
    return True
