"""I/O handlers for medai_prompt."""
from .clipboard import ClipboardManager, get_clipboard_manager

__all__ = [
    'ClipboardManager', 'get_clipboard_manager',
]
