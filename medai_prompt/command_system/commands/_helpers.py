"""Argument parsing helpers shared by the built-in commands."""
from typing import Optional


LIST_SEPARATOR = "|"

SWITCH_VALUES = {
    "on": True,
    "off": False,
    "true": True,
    "false": False,
    "yes": True,
    "no": False,
    "1": True,
    "0": False,
}


def split_list(value: str, keep_blank: bool = False) -> list[str]:
    """Split a ``|``-separated argument into trimmed items.

    An empty argument gives an empty list. Blank items are dropped unless
    keep_blank is set.
    """
    if not value.strip():
        return []
    items = [item.strip() for item in value.split(LIST_SEPARATOR)]
    return items if keep_blank else [item for item in items if item]


def parse_switch(value: str) -> Optional[bool]:
    """Parse on/off style input; None if it is not a switch value."""
    return SWITCH_VALUES.get(value.strip().lower())


def numbered(items: list[str]) -> str:
    """Render items as a numbered plain-text list."""
    return "\n".join(f"{i}. {item}" for i, item in enumerate(items, 1))


def on_off(value: bool) -> str:
    return "on" if value else "off"
