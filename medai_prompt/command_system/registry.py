"""
Slash command registry for medai_prompt.

Commands are the SlashCommand subclasses defined in the modules of the
``commands`` package; they are found once, when the registry is built.
"""
import importlib
import logging
import pkgutil
from typing import Dict, Iterator, List, Optional

from . import commands as commands_package
from .base import SlashCommand, CommandResult


logger = logging.getLogger(__name__)


def _iter_command_classes() -> Iterator[type]:
    """Yield the command classes defined in each public commands module."""
    for module_info in pkgutil.iter_modules(commands_package.__path__):
        if module_info.name.startswith('_'):
            continue

        module_name = f"{commands_package.__name__}.{module_info.name}"
        try:
            module = importlib.import_module(module_name)
        except ImportError as e:
            logger.warning(f"Failed to load command module {module_name}: {e}")
            continue

        for attr in vars(module).values():
            if (
                isinstance(attr, type)
                and issubclass(attr, SlashCommand)
                and attr.__module__ == module.__name__
                and not attr.__name__.startswith('_')
            ):
                yield attr


class CommandRegistry:
    """
    Looks up slash commands by name or alias and runs them.

    Example:
        registry = get_command_registry()
        result = registry.execute("toggle", "chip SaMD", store=store)
    """

    def __init__(self) -> None:
        self._commands: Dict[str, SlashCommand] = {}
        self._aliases: Dict[str, str] = {}

        for command_class in _iter_command_classes():
            self.register(command_class())
        logger.debug(f"Registered {len(self._commands)} commands")

    def register(self, command: SlashCommand) -> None:
        self._commands[command.name] = command
        for alias in command.aliases:
            self._aliases[alias] = command.name

    def get(self, name: str) -> Optional[SlashCommand]:
        """Get a command by name or alias (case-insensitive)."""
        name = name.lower()
        return self._commands.get(self._aliases.get(name, name))

    def has_command(self, name: str) -> bool:
        return self.get(name) is not None

    def execute(self, name: str, args: str = "", **kwargs) -> CommandResult:
        """
        Execute a command by name or alias.

        Unexpected exceptions raised by a command are logged and turned into
        an error result so the interactive loop keeps running.

        Args:
            name: Command name or alias
            args: Command arguments
            **kwargs: Front-end collaborators passed to the command

        Returns:
            CommandResult from execution
        """
        command = self.get(name)
        if command is None:
            return CommandResult.error(
                f"Unknown command: /{name}. Type /help for available commands."
            )

        validation_error = command.validate_args(args)
        if validation_error:
            return CommandResult.error(validation_error)

        try:
            return command.run(args, registry=self, **kwargs)
        except Exception as e:
            logger.exception(f"Command /{command.name} failed")
            return CommandResult.error(f"Command error: {e}")

    def list_commands(self, include_hidden: bool = False) -> List[dict]:
        """Describe the commands, sorted by name, for help and completion."""
        return [
            {
                "name": name,
                "description": command.description,
                "aliases": command.aliases,
                "usage": command.usage,
            }
            for name, command in sorted(self._commands.items())
            if include_hidden or not command.hidden
        ]

    def get_help(self, name: str) -> Optional[str]:
        command = self.get(name)
        return command.get_help() if command else None


_registry: Optional[CommandRegistry] = None


def get_command_registry() -> CommandRegistry:
    """Get the shared command registry, building it on first use."""
    global _registry
    if _registry is None:
        _registry = CommandRegistry()
    return _registry
