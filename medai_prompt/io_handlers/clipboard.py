"""
Clipboard management for medai_prompt.
Copies generated prompts, query lists and share links to the system clipboard.
"""
import logging
import shutil
import subprocess
from typing import Optional

from ..utils import is_windows, is_macos, is_linux


logger = logging.getLogger(__name__)


# Linux clipboard tools in order of preference, with their copy arguments
LINUX_COPY_COMMANDS = {
    "wl-copy": ["wl-copy"],
    "xclip": ["xclip", "-selection", "clipboard"],
    "xsel": ["xsel", "--clipboard", "--input"],
}

WINDOWS_COPY_COMMAND = [
    "powershell.exe",
    "-NoProfile",
    "-Command",
    "[Console]::InputEncoding = [Text.Encoding]::UTF8; "
    "Set-Clipboard -Value ([Console]::In.ReadToEnd())",
]


class ClipboardManager:
    """
    Cross-platform clipboard writer.

    The implementation is picked once, from the platform and the tools on
    PATH. Content is passed on stdin as UTF-8 so Japanese text survives.
    """

    def __init__(self) -> None:
        """Initialize clipboard manager."""
        self._command = self._detect_command()

    def _detect_command(self) -> Optional[list[str]]:
        """Detect the copy command for this system."""
        if is_windows():
            return WINDOWS_COPY_COMMAND
        if is_macos():
            return ["pbcopy"]
        if is_linux():
            for tool, command in LINUX_COPY_COMMANDS.items():
                if shutil.which(tool):
                    return command
        return None

    def set(self, content: str) -> bool:
        """
        Set clipboard content.

        Args:
            content: Content to copy to clipboard

        Returns:
            True if successful
        """
        if self._command is None:
            logger.debug("No clipboard tool available")
            return False

        try:
            result = subprocess.run(
                self._command,
                input=content.encode("utf-8"),
                capture_output=True,
                timeout=5,
            )
        except (OSError, subprocess.SubprocessError) as e:
            logger.warning(f"Clipboard command {self._command[0]} failed: {e}")
            return False

        if result.returncode != 0:
            logger.warning(
                f"Clipboard command {self._command[0]} exited with {result.returncode}"
            )
            return False
        return True

    @property
    def available(self) -> bool:
        """Check if clipboard is available."""
        return self._command is not None


_clipboard: Optional[ClipboardManager] = None


def get_clipboard_manager() -> ClipboardManager:
    """Get the global clipboard manager instance."""
    global _clipboard
    if _clipboard is None:
        _clipboard = ClipboardManager()
    return _clipboard
