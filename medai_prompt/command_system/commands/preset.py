"""Preset command for medai_prompt."""
from typing import Any

from ...prompts.editing import switch_tab
from ..base import SlashCommand, CommandResult


class PresetCommand(SlashCommand):
    """Switch the purpose tab."""

    name = "preset"
    description = "Switch purpose tab (medical-device, clinical-operation, ...)"
    aliases = ["tab"]
    usage = "[preset_id | list | current]"
    examples = [
        "/preset                     # Show current tab",
        "/preset list                # List all tabs",
        "/preset research-ethics     # Switch tab (replaces categories and chips)",
    ]

    def run(self, args: str = "", **kwargs: Any) -> CommandResult:
        """Execute preset command."""
        args = args.strip().lower()
        store = kwargs["store"]
        presets = kwargs["presets"]

        if not args or args == "current":
            return self._show_current(store, presets)

        if args == "list":
            return self._list_presets(store, presets)

        return self._switch_preset(args, store, presets)

    def _show_current(self, store, presets) -> CommandResult:
        """Show the active tab."""
        config = store.config
        preset = presets.get(config.active_tab)

        lines = [
            "# Current Tab",
            "",
            f"**Tab:** {preset.name} (`{config.active_tab}`)",
            f"**Purpose:** {preset.description}",
            "",
            f"**Categories:** {len(config.enabled_category_names)}/{len(config.categories)} enabled",
            f"**Keyword chips:** {len(config.enabled_chip_names)}/{len(config.keyword_chips)} enabled",
            "",
            "Use `/preset list` to see all tabs.",
        ]
        return CommandResult.success("\n".join(lines))

    def _list_presets(self, store, presets) -> CommandResult:
        """List all tabs in order."""
        rows = []
        for index, preset in enumerate(presets.list_presets(), 1):
            marker = " (active)" if preset.id == store.config.active_tab else ""
            rows.append(f"{index}. **{preset.name}** `{preset.id}`{marker} - {preset.description}")

        rows.append("")
        rows.append("Use `/preset <id>` to switch.")
        return CommandResult.success("\n".join(rows))

    def _switch_preset(self, preset_id: str, store, presets) -> CommandResult:
        """Switch to another tab."""
        if not presets.has_preset(preset_id):
            available = [p.id for p in presets.list_presets()]
            return CommandResult.error(
                f"Unknown preset: `{preset_id}`.\n"
                f"Available presets: {', '.join(available)}"
            )

        preset = presets.get(preset_id)
        store.apply(switch_tab, preset)
        return CommandResult.success(
            f"Switched to **{preset.name}**.\n\n"
            f"Categories and keyword chips were replaced with the tab's defaults."
        )
