"""General commands for medai_prompt: /status, /reset, /help, /quit."""
from typing import Any

from ...constants import SCOPE_SEPARATOR
from ...prompts.editing import validate
from ...prompts.queries import derive_queries
from ..base import SlashCommand, CommandResult
from ._helpers import on_off


class StatusCommand(SlashCommand):
    """Summarize the current configuration."""

    name = "status"
    description = "Show a configuration summary and validation result"
    aliases = ["config"]

    def run(self, args: str = "", **kwargs: Any) -> CommandResult:
        """Execute status command."""
        config = kwargs["store"].config
        validation = validate(config)

        def items(values: list[str]) -> str:
            return SCOPE_SEPARATOR.join(values) or "-"

        lines = [
            "# Configuration",
            "",
            f"- **Tab:** `{config.active_tab}`",
            f"- **Date:** {config.date_today}",
            f"- **Theme:** {config.query or '-'}",
            f"- **Scope:** {items(config.scope)}",
            f"- **Audiences:** {items(config.audiences)}",
            f"- **Priority domains:** {len(config.priority_domains)}",
            f"- **Categories:** {items(config.enabled_category_names)}",
            f"- **Optional keywords:** {items(config.optional_keywords)}",
            f"- **Exclude keywords:** {items(config.active_exclude_keywords)}",
            f"- **e-Gov cross reference:** {on_off(config.egov_cross_reference)}",
            f"- **Proof mode:** {on_off(config.proof_mode)}",
            f"- **Official domains first:** {on_off(config.official_domain_priority)}",
            f"- **site: queries:** {on_off(config.site_operator)}",
            f"- **Search queries:** {len(derive_queries(config))}",
            "",
            f"**Valid:** {'yes' if validation.is_valid else 'no'}",
        ]

        if validation.errors:
            lines.append("")
            lines.extend(f"- ✗ {error}" for error in validation.errors)

        return CommandResult.success("\n".join(lines), warnings=validation.warnings)


class ResetCommand(SlashCommand):
    """Reset to the default configuration."""

    name = "reset"
    description = "Reset the configuration to the default tab's defaults"

    def run(self, args: str = "", **kwargs: Any) -> CommandResult:
        """Execute reset command."""
        config = kwargs["store"].reset()
        return CommandResult.success(f"Configuration reset (tab `{config.active_tab}`).")


class HelpCommand(SlashCommand):
    """Display help information."""

    name = "help"
    description = "Show available slash commands"
    aliases = ["h", "?"]
    usage = "[command]"
    examples = ["/help", "/help set", "/help toggle"]

    def run(self, args: str = "", **kwargs: Any) -> CommandResult:
        """Execute help command."""
        registry = kwargs["registry"]

        if args.strip():
            command_name = args.strip().lstrip("/")
            help_text = registry.get_help(command_name)

            if help_text:
                return CommandResult.success(help_text)
            return CommandResult.error(f"Unknown command: {command_name}")

        lines = ["**Available Commands:**", ""]
        for cmd in registry.list_commands():
            lines.append(f"- `/{cmd['name']}` - {cmd['description']}")
        lines.append("")
        lines.append("Text without a leading `/` sets the search theme.")

        return CommandResult.success("\n".join(lines))


class QuitCommand(SlashCommand):
    """Exit the CLI."""

    name = "quit"
    description = "Exit the CLI"
    aliases = ["exit", "bye"]

    def run(self, args: str = "", **kwargs: Any) -> CommandResult:
        """Execute quit command."""
        return CommandResult.exit("Goodbye!")
