"""Import/export and share link commands for medai_prompt."""
from typing import Any, Optional

from ...constants import MAX_LINK_LENGTH
from ...prompts.config import ConfigError, export_config, import_config
from ...prompts.share import decode_from_link, encode_to_link, is_link_too_long
from ...utils import expand_path
from ..base import SlashCommand, CommandResult


class ExportCommand(SlashCommand):
    """Export the configuration as JSON."""

    name = "export"
    description = "Export the configuration as JSON (to a file or the screen)"
    usage = "[path]"
    examples = ["/export", "/export ~/medai-config.json"]

    def run(self, args: str = "", **kwargs: Any) -> CommandResult:
        """Execute export command."""
        text = export_config(kwargs["store"].config)
        parts = self.split_args(args)

        if not parts:
            return CommandResult.output(text, title="Configuration JSON")

        path = expand_path(parts[0])
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(text + "\n", encoding="utf-8")
        except OSError as e:
            return CommandResult.error(f"Could not write {path}: {e}")

        return CommandResult.success(f"Exported configuration to `{path}`")


class ImportCommand(SlashCommand):
    """Import a configuration from a JSON file."""

    name = "import"
    description = "Import a configuration from a JSON file"
    usage = "<path>"
    examples = ["/import ~/medai-config.json"]

    def validate_args(self, args: str) -> Optional[str]:
        if not args.strip():
            return f"Usage: /import {self.usage}"
        return None

    def run(self, args: str = "", **kwargs: Any) -> CommandResult:
        """Execute import command."""
        path = expand_path(self.split_args(args)[0])

        try:
            text = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            return CommandResult.error(f"Could not read {path}: {e}")

        try:
            config = import_config(text)
        except ConfigError as e:
            return CommandResult.error(f"Import failed: {e}")

        kwargs["store"].replace(config)
        presets = kwargs.get("presets")
        warnings = []
        if presets is not None and not presets.has_preset(config.active_tab):
            warnings.append(f"Unknown tab '{config.active_tab}' in imported configuration")
        return CommandResult.success(f"Imported configuration from `{path}`", warnings=warnings)


class LinkCommand(SlashCommand):
    """Build a share link for the configuration."""

    name = "link"
    description = "Build a share link carrying the configuration"
    aliases = ["share"]
    usage = "[base_url]"
    examples = ["/link", "/link https://example.org/medai/"]

    def run(self, args: str = "", **kwargs: Any) -> CommandResult:
        """Execute link command."""
        config = kwargs["store"].config
        base_url = args.strip() or kwargs["settings"].share_base_url

        link = encode_to_link(config, base_url)
        if not link:
            return CommandResult.error(f"Could not build a share link for base URL '{base_url}'")

        warnings = []
        if is_link_too_long(config, base_url):
            warnings.append(
                f"Link is {len(link)} characters; some browsers and chat tools cut "
                f"links longer than {MAX_LINK_LENGTH}. Use /export instead."
            )
        return CommandResult.output(link, title="Share link", warnings=warnings)


class OpenCommand(SlashCommand):
    """Load the configuration carried by a share link."""

    name = "open"
    description = "Load a configuration from a share link"
    usage = "<url>"
    examples = ["/open http://localhost:3000/?c=JTdCJTIy..."]

    def validate_args(self, args: str) -> Optional[str]:
        if not args.strip():
            return f"Usage: /open {self.usage}"
        return None

    def run(self, args: str = "", **kwargs: Any) -> CommandResult:
        """Execute open command."""
        config = decode_from_link(args.strip())
        if config is None:
            return CommandResult.error("The link does not carry a valid configuration.")

        kwargs["store"].replace(config)
        return CommandResult.success(f"Loaded configuration for tab `{config.active_tab}`")
