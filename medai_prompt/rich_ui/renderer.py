"""
Rich renderer for medai_prompt.
Renders command results, messages and generated text to the terminal.
"""
from typing import Any, Optional, Sequence

from rich.console import Console
from rich.markdown import Markdown
from rich.panel import Panel
from rich.text import Text

from ..constants import APP_NAME, APP_VERSION


ICONS = {
    "error": "✗",
    "warning": "⚠",
}


class RichRenderer:
    """
    Main renderer for all Rich UI components.
    Provides methods for rendering messages, panels and command results.
    """

    def __init__(self, console: Optional[Console] = None) -> None:
        """
        Initialize the Rich renderer.

        Args:
            console: Optional Rich Console instance
        """
        self._console = console or Console(highlight=False)

    @property
    def console(self) -> Console:
        """Get the Rich console instance."""
        return self._console

    def print(self, *args: Any, **kwargs: Any) -> None:
        """Print to console."""
        self._console.print(*args, **kwargs)

    def print_banner(self, notice: Sequence[str] = ()) -> None:
        """Print the application name, the notice lines and a short hint."""
        title = Text()
        title.append(f"{APP_NAME} ", style="bold cyan")
        title.append(f"v{APP_VERSION}", style="dim")
        self._console.print(title)
        for line in notice:
            self._console.print(Text(line, style="yellow"))
        self._console.print(
            "Type a search theme, or /help for commands. /show renders the prompt.",
            style="dim",
        )
        self._console.print()

    def print_markdown(self, content: str) -> None:
        """
        Print markdown content.

        Args:
            content: Markdown string
        """
        self._console.print(Markdown(content))

    def print_output(self, text: str, title: str = "") -> None:
        """
        Print generated text verbatim inside a panel.

        Args:
            text: Text to show exactly as produced (no markup, no Markdown)
            title: Optional panel title
        """
        self._console.print(
            Panel(Text(text), title=title or None, title_align="left", border_style="cyan")
        )

    def _print_icon_message(self, icon: str, title: str, message: str, style: str) -> None:
        self._console.print(f"[bold {style}]{ICONS[icon]} {title}[/bold {style}]")
        if message:
            self._console.print(Text(message, style=style))
        self._console.print()

    def print_error(self, message: str, title: str = "Error") -> None:
        """Print an error message without bordered panel."""
        self._print_icon_message("error", title, message, "red")

    def print_warning(self, message: str, title: str = "Warning") -> None:
        """Print a warning message without bordered panel."""
        self._print_icon_message("warning", title, message, "yellow")

    def render_result(self, result: Any) -> None:
        """
        Render a CommandResult.

        Errors are printed with their message; successes print verbatim
        text in a panel, then the Markdown message, then any warnings.

        Args:
            result: The CommandResult to show
        """
        if result.is_error:
            self.print_error(result.message)
            return

        if result.text:
            self.print_output(result.text, title=result.title)

        if result.message:
            self.print_markdown(result.message)

        for warning in result.warnings:
            self.print_warning(warning)

