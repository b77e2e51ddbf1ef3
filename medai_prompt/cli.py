"""
Interactive CLI for medai_prompt.
"""
import html
import json
import logging
from pathlib import Path
from typing import Any, Optional

from .command_system import CommandParser, CommandResult, get_command_registry
from .config import AppSettings, get_settings
from .prompts.engine import PromptEngine, build_default_engine
from .prompts.presets import DISCLAIMER_LINES, PresetManager, PresetValidationError
from .rich_ui import PromptInput, RichRenderer
from .store import ConfigStore
from .utils import truncate_string


logger = logging.getLogger(__name__)


class CLI:
    """
    Main CLI class for medai_prompt.

    Owns the working configuration (through ConfigStore), the prompt engine
    composed at startup and the preset registry, and routes user input to
    the slash commands.
    """

    def __init__(
        self,
        settings: Optional[AppSettings] = None,
        state_path: Optional[Path] = None,
        renderer: Optional[RichRenderer] = None,
        engine: Optional[PromptEngine] = None,
    ) -> None:
        """Initialize the CLI.

        Args:
            settings: Front-end settings; defaults to the shared settings.
            state_path: Where the working configuration is saved; defaults
                to ``settings.state_path``.
            renderer: Output renderer.
            engine: Prompt engine; defaults to the base template engine.
        """
        self._settings = settings or get_settings().settings
        self._renderer = renderer or RichRenderer()
        self._engine = engine or build_default_engine()
        self._presets = self._create_preset_manager()
        self._store = ConfigStore(
            self._presets,
            state_path=state_path or self._settings.state_path,
            default_preset=self._settings.default_preset,
        )

        self._parser = CommandParser()
        self._commands = get_command_registry()
        self._input: Optional[PromptInput] = None
        self._running = False

    def _create_preset_manager(self) -> PresetManager:
        presets = PresetManager()
        if self._settings.default_preset != presets.default_preset:
            presets.set_default_preset(self._settings.default_preset)

        path = self._settings.custom_presets_path
        if path.exists():
            try:
                presets.load_custom_presets(path)
            except (OSError, json.JSONDecodeError, PresetValidationError) as e:
                logger.warning(f"Could not load custom presets from {path}: {e}")
        return presets

    @property
    def store(self) -> ConfigStore:
        return self._store

    @property
    def presets(self) -> PresetManager:
        return self._presets

    def _command_context(self) -> dict[str, Any]:
        return {
            "store": self._store,
            "engine": self._engine,
            "presets": self._presets,
            "settings": self._settings,
            "renderer": self._renderer,
        }

    def execute(self, user_input: str) -> Optional[CommandResult]:
        """
        Execute one line of input and return the result.

        Slash commands go to the command registry; other text sets the
        search theme. Empty input returns None.
        """
        parsed = self._parser.parse(user_input)

        if parsed.type == "command":
            return self._commands.execute(parsed.command, parsed.args, **self._command_context())
        if parsed.type == "text":
            return self._commands.execute("set", f"query {parsed.text}", **self._command_context())
        return None

    def run_once(self, user_input: str) -> int:
        """Execute one line, render the result and return an exit status."""
        result = self.execute(user_input)
        if result is None:
            return 0
        self._renderer.render_result(result)
        return 0 if result.is_success else 1

    def run(self) -> None:
        """Run the interactive loop until /quit or end of input."""
        self._running = True
        self._input = self._create_input()
        self._renderer.print_banner(DISCLAIMER_LINES)

        while self._running:
            try:
                user_input = self._input.get_input()
                if not user_input.strip():
                    continue

                result = self.execute(user_input)
                if result is None:
                    continue
                self._renderer.render_result(result)
                if result.should_exit:
                    self._running = False

            except KeyboardInterrupt:
                self._renderer.print("\n[dim]Use /quit to exit[/dim]")
            except EOFError:
                self._running = False

    def _create_input(self) -> PromptInput:
        prompt_input = PromptInput(toolbar=self._toolbar)
        prompt_input.set_commands(self._commands.list_commands())

        completer = prompt_input.completer
        completer.set_argument_provider(
            "preset", lambda: ["list", "current"] + [p.id for p in self._presets.list_presets()]
        )
        completer.set_argument_provider("toggle", self._toggle_arguments)
        completer.set_argument_provider("move", lambda: [c.name for c in self._store.config.categories])
        completer.set_argument_provider("copy", lambda: ["prompt", "queries", "link"])
        completer.set_argument_provider(
            "domain",
            lambda: ["list", "add "] + [f"remove {d}" for d in self._store.config.priority_domains],
        )
        completer.set_argument_provider("help", lambda: [c["name"] for c in self._commands.list_commands()])
        return prompt_input

    def _toggle_arguments(self) -> list[str]:
        from .prompts.presets import DEFAULT_AUDIENCE_OPTIONS, DEFAULT_SCOPE_OPTIONS

        config = self._store.config
        values = [f"chip {k.name}" for k in config.keyword_chips]
        values += [f"category {c.name}" for c in config.categories]
        values += [f"scope {s}" for s in dict.fromkeys(DEFAULT_SCOPE_OPTIONS + config.scope)]
        values += [f"audience {a}" for a in dict.fromkeys(DEFAULT_AUDIENCE_OPTIONS + config.audiences)]
        return values

    def _toolbar(self) -> str:
        config = self._store.config
        theme = html.escape(truncate_string(config.query or "-", 40))
        return (
            f"<tab>{html.escape(config.active_tab)}</tab>  "
            f"theme: <theme>{theme}</theme>  "
            f"/show /queries /link /help"
        )
