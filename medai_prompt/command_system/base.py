"""
Base classes for the command system in medai_prompt.
"""
import shlex
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional


class CommandStatus(Enum):
    """Status of command execution."""
    SUCCESS = "success"
    ERROR = "error"


@dataclass
class CommandResult:
    """Result of a command execution.

    ``message`` is Markdown shown to the user. ``text`` is verbatim output
    (a prompt, a link, a query list) that the front-end prints without
    Markdown rendering and may copy to the clipboard.
    """
    status: CommandStatus = CommandStatus.SUCCESS
    message: str = ""
    text: str = ""
    title: str = ""
    data: Any = None
    should_exit: bool = False
    errors: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)

    @property
    def is_success(self) -> bool:
        """Check if command succeeded."""
        return self.status == CommandStatus.SUCCESS

    @property
    def is_error(self) -> bool:
        """Check if command failed."""
        return self.status == CommandStatus.ERROR

    @classmethod
    def success(
        cls,
        message: str = "",
        data: Any = None,
        warnings: Optional[List[str]] = None,
    ) -> 'CommandResult':
        """Create a success result."""
        return cls(
            status=CommandStatus.SUCCESS,
            message=message,
            data=data,
            warnings=warnings or [],
        )

    @classmethod
    def output(
        cls,
        text: str,
        title: str = "",
        message: str = "",
        warnings: Optional[List[str]] = None,
    ) -> 'CommandResult':
        """Create a success result carrying verbatim text."""
        return cls(
            status=CommandStatus.SUCCESS,
            message=message,
            text=text,
            title=title,
            warnings=warnings or [],
        )

    @classmethod
    def error(cls, message: str, errors: Optional[List[str]] = None) -> 'CommandResult':
        """Create an error result."""
        return cls(
            status=CommandStatus.ERROR,
            message=message,
            errors=errors or [message]
        )

    @classmethod
    def exit(cls, message: str = "Goodbye!") -> 'CommandResult':
        """Create an exit result."""
        return cls(status=CommandStatus.SUCCESS, message=message, should_exit=True)


class SlashCommand(ABC):
    """
    Base class for all slash commands.

    All commands must inherit from this class and implement the run method.
    Commands are auto-discovered and registered based on their class attributes.

    The front-end passes its collaborators as keyword arguments:
    ``store`` (ConfigStore), ``engine`` (PromptEngine), ``presets``
    (PresetManager), ``settings`` (AppSettings) and ``registry``
    (CommandRegistry).
    """

    name: str = ""
    description: str = ""
    aliases: List[str] = []
    usage: str = ""
    examples: List[str] = []
    hidden: bool = False

    def __init__(self) -> None:
        """Initialize the command."""
        if not self.name:
            self.name = self.__class__.__name__.lower().replace("command", "")

    @abstractmethod
    def run(self, args: str = "", **kwargs: Any) -> CommandResult:
        """
        Execute the command.

        Args:
            args: Command arguments as a string
            **kwargs: Front-end collaborators (store, engine, presets, ...)

        Returns:
            CommandResult with execution status
        """

    def get_help(self) -> str:
        """Get detailed help text for the command."""
        parts = [
            f"**/{self.name}** - {self.description}",
        ]

        if self.usage:
            parts.append(f"\n**Usage:** `/{self.name} {self.usage}`")

        if self.aliases:
            parts.append(f"\n**Aliases:** {', '.join(self.aliases)}")

        if self.examples:
            parts.append("\n**Examples:**")
            for example in self.examples:
                parts.append(f"  `{example}`")

        return "\n".join(parts)

    def validate_args(self, args: str) -> Optional[str]:
        """
        Validate command arguments.

        Args:
            args: Arguments string

        Returns:
            Error message if invalid, None if valid
        """
        return None

    def split_args(self, args: str) -> List[str]:
        """Split arguments shell-style, so quoted values may contain spaces."""
        try:
            return shlex.split(args)
        except ValueError:
            return args.split()

    def __repr__(self) -> str:
        return f"<SlashCommand /{self.name}>"


class CommandGroup(SlashCommand):
    """
    A command that groups subcommands.

    Subclasses map subcommand names to method names in ``subcommands``; each
    method has the signature ``(self, args, **kwargs) -> CommandResult`` and
    its first docstring line is shown in the group help.
    """

    subcommands: Dict[str, str] = {}
    default_subcommand: str = ""

    def run(self, args: str = "", **kwargs: Any) -> CommandResult:
        """Route to subcommand or show help."""
        parts = args.split(maxsplit=1)
        subcommand = parts[0].lower() if parts else self.default_subcommand
        subargs = parts[1] if len(parts) > 1 else ""

        if not subcommand or subcommand == "help":
            return self._show_help()

        if subcommand in self.subcommands:
            handler = getattr(self, self.subcommands[subcommand])
            return handler(subargs.strip(), **kwargs)

        return CommandResult.error(
            f"Unknown subcommand: {subcommand}. "
            f"Available: {', '.join(self.subcommands.keys())}"
        )

    def _show_help(self) -> CommandResult:
        """Show help for this command group."""
        lines = [f"**/{self.name}** - {self.description}", "", "**Subcommands:**"]
        for name, method_name in self.subcommands.items():
            doc = getattr(self, method_name).__doc__ or "No description"
            lines.append(f"  **{name}** - {doc.strip().split(chr(10))[0]}")
        return CommandResult.success("\n".join(lines))
