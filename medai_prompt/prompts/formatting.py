"""
List formatting for template placeholders.
"""

from typing import Iterable

from ..constants import BULLET_PREFIX, NONE_SENTINEL


def format_list(items: Iterable[str], bullet_prefix: str = BULLET_PREFIX) -> str:
    """Render items as a bullet list, one item per line.

    An empty sequence renders as a single "none" line so a list placeholder
    never collapses to an empty string.

    Args:
        items: Strings to render, in display order.
        bullet_prefix: Prefix placed before each item.

    Returns:
        The bullet list as a newline-joined string.

    Example:
        >>> format_list(["SaMD", "PMDA"])
        '・SaMD\\n・PMDA'
        >>> format_list([])
        '・(なし)'
    """
    lines = [f"{bullet_prefix}{item}" for item in items]
    if not lines:
        return f"{bullet_prefix}{NONE_SENTINEL}"
    return "\n".join(lines)
