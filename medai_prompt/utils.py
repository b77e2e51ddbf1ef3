"""
Utility functions for medai_prompt.
"""
import sys
from pathlib import Path


def expand_path(path: str) -> Path:
    """
    Expand a path with user home directory and resolve it.

    Args:
        path: Path string (may contain ~)

    Returns:
        Resolved Path object
    """
    return Path(path).expanduser().resolve()


def truncate_string(text: str, max_length: int = 100, suffix: str = "...") -> str:
    """
    Truncate a string to a maximum length.

    Args:
        text: The string to truncate
        max_length: Maximum length of the output string
        suffix: Suffix to append when truncating

    Returns:
        Truncated string
    """
    if len(text) <= max_length:
        return text
    return text[:max_length - len(suffix)] + suffix


def is_windows() -> bool:
    """Check if running on Windows."""
    return sys.platform == 'win32'


def is_macos() -> bool:
    """Check if running on macOS."""
    return sys.platform == 'darwin'


def is_linux() -> bool:
    """Check if running on Linux."""
    return sys.platform.startswith('linux')
