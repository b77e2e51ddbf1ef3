"""Prompt output commands for medai_prompt: /show, /queries, /copy."""
from typing import Any, Optional

from ...io_handlers import get_clipboard_manager
from ...prompts.editing import validate
from ...prompts.queries import derive_queries
from ...prompts.share import encode_to_link
from ..base import SlashCommand, CommandResult
from ._helpers import numbered


class ShowCommand(SlashCommand):
    """Render the prompt for the current configuration."""

    name = "show"
    description = "Render the prompt for the current configuration"
    aliases = ["render"]
    examples = ["/show"]

    def run(self, args: str = "", **kwargs: Any) -> CommandResult:
        """Execute show command."""
        store = kwargs["store"]
        engine = kwargs["engine"]
        settings = kwargs.get("settings")

        config = store.config
        prompt = engine.render(config)
        validation = validate(config)

        message = ""
        if settings is not None and settings.copy_after_render:
            clipboard = kwargs.get("clipboard") or get_clipboard_manager()
            if clipboard.set(prompt):
                message = "Prompt copied to clipboard."

        return CommandResult.output(
            prompt,
            title=f"Prompt ({config.active_tab})",
            message=message,
            warnings=validation.errors + validation.warnings,
        )


class QueriesCommand(SlashCommand):
    """List the suggested search queries."""

    name = "queries"
    description = "List suggested search queries"
    aliases = ["q"]

    def run(self, args: str = "", **kwargs: Any) -> CommandResult:
        """Execute queries command."""
        queries = derive_queries(kwargs["store"].config)
        return CommandResult.output(numbered(queries), title="Search queries")


class CopyCommand(SlashCommand):
    """Copy the prompt, the query list or the share link to the clipboard."""

    name = "copy"
    description = "Copy prompt, queries or share link to the clipboard"
    usage = "[prompt | queries | link]"
    examples = [
        "/copy            # Copy the rendered prompt",
        "/copy queries    # Copy the search queries, one per line",
        "/copy link       # Copy the share link",
    ]

    TARGETS = ("prompt", "queries", "link")

    def validate_args(self, args: str) -> Optional[str]:
        target = args.strip().lower()
        if target and target not in self.TARGETS:
            return f"Unknown copy target: {target}. Use one of: {', '.join(self.TARGETS)}"
        return None

    def run(self, args: str = "", **kwargs: Any) -> CommandResult:
        """Execute copy command."""
        target = args.strip().lower() or "prompt"
        config = kwargs["store"].config

        if target == "prompt":
            content = kwargs["engine"].render(config)
        elif target == "queries":
            content = "\n".join(derive_queries(config))
        else:
            content = encode_to_link(config, kwargs["settings"].share_base_url)
            if not content:
                return CommandResult.error("Could not build a share link for this configuration.")

        clipboard = kwargs.get("clipboard") or get_clipboard_manager()
        if not clipboard.available:
            return CommandResult.error(
                "No clipboard tool found (install wl-clipboard, xclip or xsel)."
            )
        if not clipboard.set(content):
            return CommandResult.error("Copying to the clipboard failed.")

        return CommandResult.success(f"Copied {target} to clipboard ({len(content)} characters).")
