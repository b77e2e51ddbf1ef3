"""Configuration editing commands for medai_prompt: /set, /toggle, /move, /domain."""
from typing import Any, Optional

from ...prompts import editing
from ..base import SlashCommand, CommandGroup, CommandResult
from ._helpers import on_off, parse_switch, split_list


# Command-line field name -> (PromptConfig attribute, kind)
SETTABLE_FIELDS = {
    "query": ("query", "text"),
    "theme": ("query", "text"),
    "date": ("date_today", "text"),
    "scope": ("scope", "list"),
    "audiences": ("audiences", "list"),
    "domains": ("priority_domains", "list"),
    "custom": ("custom_keywords", "keywords"),
    "exclude": ("exclude_keywords", "keywords"),
    "egov": ("egov_cross_reference", "switch"),
    "proof": ("proof_mode", "switch"),
    "official": ("official_domain_priority", "switch"),
    "site": ("site_operator", "switch"),
}


class SetCommand(SlashCommand):
    """Set a configuration field."""

    name = "set"
    description = "Set a configuration field (lists use | as separator)"
    usage = "<field> <value>"
    examples = [
        "/set query 画像診断AI",
        "/set scope 医療AI|SaMD",
        "/set exclude 海外|FDA",
        "/set egov on",
        "/set custom          # Clear custom keywords",
    ]

    def validate_args(self, args: str) -> Optional[str]:
        parts = args.split(maxsplit=1)
        if not parts:
            return f"Usage: /set {self.usage}. Fields: {', '.join(SETTABLE_FIELDS)}"
        if parts[0].lower() not in SETTABLE_FIELDS:
            return f"Unknown field: {parts[0]}. Fields: {', '.join(SETTABLE_FIELDS)}"
        return None

    def run(self, args: str = "", **kwargs: Any) -> CommandResult:
        """Execute set command."""
        store = kwargs["store"]
        parts = args.split(maxsplit=1)
        field_name = parts[0].lower()
        raw_value = parts[1].strip() if len(parts) > 1 else ""
        attribute, kind = SETTABLE_FIELDS[field_name]

        if kind == "switch":
            value = parse_switch(raw_value)
            if value is None:
                return CommandResult.error(f"Expected on or off for {field_name}, got '{raw_value}'")
            shown = on_off(value)
        elif kind in ("list", "keywords"):
            # Blank keywords are stored as typed and skipped when rendering
            value = split_list(raw_value, keep_blank=kind == "keywords")
            shown = ", ".join(value) or "(empty)"
        else:
            value = raw_value
            shown = value or "(empty)"

        store.apply(editing.update_field, attribute, value)
        return CommandResult.success(f"**{field_name}** set to {shown}")


class ToggleCommand(CommandGroup):
    """Switch keyword chips, categories, scopes and audiences on or off."""

    name = "toggle"
    description = "Toggle a keyword chip, category, scope or audience"
    usage = "chip|category|scope|audience <name>"
    examples = [
        "/toggle chip SaMD",
        "/toggle category サイバーセキュリティ",
        "/toggle scope 生成AI",
    ]
    subcommands = {
        "chip": "_toggle_chip",
        "category": "_toggle_category",
        "scope": "_toggle_scope",
        "audience": "_toggle_audience",
    }

    def _toggle_chip(self, args: str, **kwargs: Any) -> CommandResult:
        """Switch a keyword chip on or off."""
        store = kwargs["store"]
        if not store.apply(editing.toggle_keyword_chip, args):
            return CommandResult.error(f"Unknown keyword chip: {args}")
        chip = next(k for k in store.config.keyword_chips if k.name == args)
        return CommandResult.success(f"Keyword chip **{args}** is now {on_off(chip.enabled)}")

    def _toggle_category(self, args: str, **kwargs: Any) -> CommandResult:
        """Switch an output category on or off."""
        store = kwargs["store"]
        if not store.apply(editing.toggle_category, args):
            return CommandResult.error(f"Unknown category: {args}")
        category = next(c for c in store.config.categories if c.name == args)
        return CommandResult.success(f"Category **{args}** is now {on_off(category.enabled)}")

    def _toggle_scope(self, args: str, **kwargs: Any) -> CommandResult:
        """Select or deselect a scope label."""
        if not args:
            return CommandResult.error("Usage: /toggle scope <name>")
        store = kwargs["store"]
        store.apply(editing.toggle_scope, args)
        selected = args in store.config.scope
        return CommandResult.success(f"Scope **{args}** {'selected' if selected else 'removed'}")

    def _toggle_audience(self, args: str, **kwargs: Any) -> CommandResult:
        """Select or deselect an audience."""
        if not args:
            return CommandResult.error("Usage: /toggle audience <name>")
        store = kwargs["store"]
        store.apply(editing.toggle_audience, args)
        selected = args in store.config.audiences
        return CommandResult.success(f"Audience **{args}** {'selected' if selected else 'removed'}")


class MoveCommand(SlashCommand):
    """Reorder output categories."""

    name = "move"
    description = "Move a category up, down or to a position"
    usage = "<category> up|down|<position>"
    examples = [
        "/move サイバーセキュリティ up",
        "/move 法令・制度 3",
    ]

    def run(self, args: str = "", **kwargs: Any) -> CommandResult:
        """Execute move command."""
        parts = args.strip().rsplit(maxsplit=1)
        if len(parts) != 2:
            return CommandResult.error(f"Usage: /move {self.usage}")

        name, direction = parts
        store = kwargs["store"]
        names = [c.name for c in store.config.categories]
        if name not in names:
            return CommandResult.error(f"Unknown category: {name}")

        current = names.index(name)
        direction = direction.lower()
        if direction == "up":
            target = current - 1
        elif direction == "down":
            target = current + 1
        elif direction.isdigit() and int(direction) >= 1:
            target = int(direction) - 1
        else:
            return CommandResult.error(f"Expected up, down or a position, got '{direction}'")

        if not store.apply(editing.move_category, name, target):
            return CommandResult.success(f"Category **{name}** stays at position {current + 1}")

        position = [c.name for c in store.config.categories].index(name) + 1
        return CommandResult.success(f"Category **{name}** moved to position {position}")


class DomainCommand(CommandGroup):
    """Manage the priority domains."""

    name = "domain"
    description = "Add or remove priority domains"
    usage = "[list | add <domain> | remove <domain>]"
    examples = ["/domain", "/domain add mhlw.go.jp", "/domain remove cao.go.jp"]
    subcommands = {
        "list": "_list",
        "add": "_add",
        "remove": "_remove",
    }
    default_subcommand = "list"

    def _list(self, args: str, **kwargs: Any) -> CommandResult:
        """Show the priority domains in order."""
        domains = kwargs["store"].config.priority_domains
        if not domains:
            return CommandResult.success("No priority domains set.")
        return CommandResult.success("\n".join(f"- `{d}`" for d in domains))

    def _add(self, args: str, **kwargs: Any) -> CommandResult:
        """Add a domain (trimmed and lower-cased)."""
        domain = args.strip().lower()
        if not domain:
            return CommandResult.error("Usage: /domain add <domain>")
        if not kwargs["store"].apply(editing.add_priority_domain, domain):
            return CommandResult.error(f"Domain already listed: {domain}")
        return CommandResult.success(f"Added priority domain `{domain}`")

    def _remove(self, args: str, **kwargs: Any) -> CommandResult:
        """Remove a domain."""
        domain = args.strip()
        if not kwargs["store"].apply(editing.remove_priority_domain, domain):
            return CommandResult.error(f"Domain not listed: {domain}")
        return CommandResult.success(f"Removed priority domain `{domain}`")
