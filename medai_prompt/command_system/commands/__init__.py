"""Built-in slash commands, discovered by the command registry."""
