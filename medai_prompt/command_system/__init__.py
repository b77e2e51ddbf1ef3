"""Command system for medai_prompt."""
from .base import SlashCommand, CommandGroup, CommandResult
from .parser import CommandParser
from .registry import CommandRegistry, get_command_registry

__all__ = [
    'SlashCommand', 'CommandGroup', 'CommandResult',
    'CommandParser',
    'CommandRegistry', 'get_command_registry'
]
