"""
TemplateDocument - Parsed, immutable prompt template.

The template text is parsed once into a tree of fragments: literal text and
named optional blocks. Rendering walks the tree, so every occurrence of a
block name is switched the same way and text inside a dropped block is never
substituted or emitted.
"""

import re
from dataclasses import dataclass
from typing import Callable, Mapping, Optional, Union


# [[TOKEN]] placeholders
PLACEHOLDER_PATTERN = re.compile(r"\[\[([A-Z][A-Z0-9_]*)\]\]")

# NAME_BEGIN / NAME_END on a line of their own
MARKER_PATTERN = re.compile(r"^([A-Z][A-Z0-9_]*)_(BEGIN|END)$")

# Three or more newlines collapse to one blank line
BLANK_RUN_PATTERN = re.compile(r"\n{3,}")


class TemplateError(Exception):
    """Raised when a template's block markers are malformed."""

    def __init__(self, message: str, line: Optional[int] = None):
        self.line = line
        full_message = f"{message} (line {line})" if line is not None else message
        super().__init__(full_message)


@dataclass(frozen=True)
class TextFragment:
    """Literal template text, possibly containing placeholders."""
    text: str


@dataclass(frozen=True)
class BlockFragment:
    """A named optional block and the fragments it encloses."""
    name: str
    children: tuple["Fragment", ...]


Fragment = Union[TextFragment, BlockFragment]


def substitute(text: str, values: Mapping[str, str]) -> str:
    """Replace every ``[[TOKEN]]`` in text with its value.

    Substitution is a single pass: values are inserted verbatim and never
    rescanned. Tokens without a value are left untouched.

    Example:
        >>> substitute("Date: [[DATE_TODAY]]", {"DATE_TODAY": "2026-02-04"})
        'Date: 2026-02-04'
    """
    def replace_token(match: re.Match) -> str:
        return values.get(match.group(1), match.group(0))

    return PLACEHOLDER_PATTERN.sub(replace_token, text)


class TemplateDocument:
    """An immutable template made of literal text and named optional blocks.

    Example:
        document = TemplateDocument(
            "Theme: [[QUERY]]\\n"
            "NOTE_BEGIN\\n"
            "Optional note\\n"
            "NOTE_END\\n"
        )
        document.render({"QUERY": "SaMD"}, {"NOTE": False})
        # 'Theme: SaMD'
    """

    def __init__(self, source: str) -> None:
        """Parse the template source.

        Args:
            source: Template text.

        Raises:
            TemplateError: If an END marker has no matching BEGIN, blocks are
                closed out of order, or a BEGIN is never closed.
        """
        self._source = source
        self._fragments = _parse(source)
        self._placeholders = frozenset(PLACEHOLDER_PATTERN.findall(source))
        self._block_counts: dict[str, int] = {}
        _count_blocks(self._fragments, self._block_counts)

    @property
    def source(self) -> str:
        """The original template text."""
        return self._source

    @property
    def fragments(self) -> tuple[Fragment, ...]:
        """Top-level fragments in document order."""
        return self._fragments

    @property
    def placeholders(self) -> frozenset[str]:
        """Every placeholder token referenced anywhere in the document."""
        return self._placeholders

    @property
    def block_names(self) -> frozenset[str]:
        """Names of all optional blocks in the document."""
        return frozenset(self._block_counts)

    def block_count(self, name: str) -> int:
        """Number of locations at which the named block appears."""
        return self._block_counts.get(name, 0)

    def render(
        self,
        values: Mapping[str, str],
        switches: Mapping[str, bool],
    ) -> str:
        """Render the document.

        Args:
            values: Placeholder token -> rendered value.
            switches: Block name -> whether the block is kept. Blocks without
                an entry are kept.

        Returns:
            The substituted text with dropped blocks removed, runs of blank
            lines collapsed to one, and surrounding whitespace stripped.
        """
        parts: list[str] = []
        self._render_into(
            self._fragments,
            lambda text: substitute(text, values),
            switches,
            parts,
        )
        text = BLANK_RUN_PATTERN.sub("\n\n", "".join(parts))
        return text.strip()

    def _render_into(
        self,
        fragments: tuple[Fragment, ...],
        render_text: Callable[[str], str],
        switches: Mapping[str, bool],
        parts: list[str],
    ) -> None:
        for fragment in fragments:
            if isinstance(fragment, TextFragment):
                parts.append(render_text(fragment.text))
            elif switches.get(fragment.name, True):
                self._render_into(fragment.children, render_text, switches, parts)

    def __repr__(self) -> str:
        blocks = ", ".join(sorted(self.block_names))
        return f"<TemplateDocument placeholders={len(self._placeholders)} blocks=[{blocks}]>"


def _parse(source: str) -> tuple[Fragment, ...]:
    """Split source into fragments, pairing BEGIN/END marker lines.

    Marker lines are consumed together with their line break; every other
    line keeps its own line break so an enabled block renders exactly as the
    surrounding text without markers.
    """
    # Each frame: (block name, opening line number, collected fragments)
    stack: list[tuple[str, int, list[Fragment]]] = [("", 0, [])]
    pending: list[str] = []

    def flush() -> None:
        if pending:
            stack[-1][2].append(TextFragment("".join(pending)))
            pending.clear()

    lines = source.split("\n")
    for index, line in enumerate(lines):
        line_number = index + 1
        match = MARKER_PATTERN.match(line.strip())
        if match is None:
            is_last = index == len(lines) - 1
            pending.append(line if is_last else line + "\n")
            continue

        name, kind = match.groups()
        flush()
        if kind == "BEGIN":
            stack.append((name, line_number, []))
            continue

        if len(stack) == 1:
            raise TemplateError(f"'{name}_END' without matching '{name}_BEGIN'", line=line_number)
        open_name, open_line, children = stack.pop()
        if open_name != name:
            raise TemplateError(
                f"'{name}_END' closes '{open_name}_BEGIN' opened at line {open_line}",
                line=line_number,
            )
        stack[-1][2].append(BlockFragment(name=name, children=tuple(children)))

    flush()
    if len(stack) > 1:
        open_name, open_line, _ = stack[-1]
        raise TemplateError(f"'{open_name}_BEGIN' is never closed", line=open_line)

    return tuple(stack[0][2])


def _count_blocks(fragments: tuple[Fragment, ...], counts: dict[str, int]) -> None:
    for fragment in fragments:
        if isinstance(fragment, BlockFragment):
            counts[fragment.name] = counts.get(fragment.name, 0) + 1
            _count_blocks(fragment.children, counts)
