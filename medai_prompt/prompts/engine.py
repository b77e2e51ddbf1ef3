"""
PromptEngine - Renders the prompt template from a configuration.

Wires a TemplateDocument to the placeholder renderers and block switches that
read a PromptConfig. The engine is composed once at startup and is immutable
afterwards; every render call is independent.
"""

import logging
from dataclasses import dataclass, field
from typing import Callable, Mapping, Optional

from ..constants import (
    BULLET_PREFIX,
    MUST_KEYWORD,
    QUERY_NOT_ENTERED,
    SCOPE_NOT_SPECIFIED,
    SCOPE_SEPARATOR,
)
from . import base_template as tpl
from .config import PromptConfig
from .formatting import format_list
from .template import TemplateDocument, TemplateError


logger = logging.getLogger(__name__)


PlaceholderRenderer = Callable[[PromptConfig], str]
BlockSwitch = Callable[[PromptConfig], bool]


@dataclass(frozen=True)
class ConsistencyReport:
    """Mismatches between a document and the engine's renderers and switches.

    Attributes:
        unused_placeholders: Renderers whose token is not in the document.
        unresolved_placeholders: Document tokens with no renderer.
        unswitched_blocks: Document blocks with no switch (always kept).
        unused_switches: Switches for blocks the document does not contain.
    """
    unused_placeholders: tuple[str, ...] = field(default_factory=tuple)
    unresolved_placeholders: tuple[str, ...] = field(default_factory=tuple)
    unswitched_blocks: tuple[str, ...] = field(default_factory=tuple)
    unused_switches: tuple[str, ...] = field(default_factory=tuple)

    @property
    def is_consistent(self) -> bool:
        return not (
            self.unused_placeholders
            or self.unresolved_placeholders
            or self.unswitched_blocks
            or self.unused_switches
        )

    def describe(self) -> list[str]:
        """Human-readable problem list, empty when consistent."""
        problems = []
        if self.unused_placeholders:
            problems.append(f"renderers without token: {', '.join(self.unused_placeholders)}")
        if self.unresolved_placeholders:
            problems.append(f"tokens without renderer: {', '.join(self.unresolved_placeholders)}")
        if self.unswitched_blocks:
            problems.append(f"blocks without switch: {', '.join(self.unswitched_blocks)}")
        if self.unused_switches:
            problems.append(f"switches without block: {', '.join(self.unused_switches)}")
        return problems


def default_placeholders(bullet_prefix: str = BULLET_PREFIX) -> dict[str, PlaceholderRenderer]:
    """Placeholder renderers for the base template.

    Args:
        bullet_prefix: Bullet used by every list placeholder.

    Returns:
        Token -> function producing the rendered value from a config.
    """
    def as_list(items: list[str]) -> str:
        return format_list(items, bullet_prefix)

    return {
        tpl.DATE_TODAY: lambda c: c.date_today,
        tpl.QUERY: lambda c: c.query or QUERY_NOT_ENTERED,
        tpl.SCOPE: lambda c: SCOPE_SEPARATOR.join(c.scope) or SCOPE_NOT_SPECIFIED,
        tpl.AUDIENCES_LIST: lambda c: as_list(c.audiences),
        tpl.PRIORITY_DOMAINS_LIST: lambda c: as_list(c.priority_domains),
        tpl.MUST_KEYWORDS_LIST: lambda c: as_list([MUST_KEYWORD]),
        tpl.OPTIONAL_KEYWORDS_LIST: lambda c: as_list(c.optional_keywords),
        tpl.EXCLUDE_KEYWORDS_LIST: lambda c: as_list(c.active_exclude_keywords),
        tpl.CATEGORIES_LIST: lambda c: as_list(c.enabled_category_names),
    }


DEFAULT_BLOCK_SWITCHES: dict[str, BlockSwitch] = {
    tpl.EGOV_SECTION: lambda c: c.egov_cross_reference,
    tpl.PROOF_SECTION: lambda c: c.proof_mode,
}


class PromptEngine:
    """Renders a prompt from a TemplateDocument and a PromptConfig.

    Attributes:
        document: The parsed template.
        consistency: Result of the construction-time consistency check.

    Example:
        engine = build_default_engine()
        prompt = engine.render(config)
    """

    def __init__(
        self,
        document: TemplateDocument,
        placeholders: Optional[Mapping[str, PlaceholderRenderer]] = None,
        block_switches: Optional[Mapping[str, BlockSwitch]] = None,
        strict: bool = False,
    ) -> None:
        """Initialize the engine and check it against the document.

        Args:
            document: The parsed template.
            placeholders: Token -> renderer. Defaults to default_placeholders().
            block_switches: Block name -> switch. Defaults to
                DEFAULT_BLOCK_SWITCHES.
            strict: Raise instead of logging when the check finds mismatches.

        Raises:
            TemplateError: If strict and the document and renderers disagree.
        """
        self._document = document
        self._placeholders = dict(
            placeholders if placeholders is not None else default_placeholders()
        )
        self._block_switches = dict(
            block_switches if block_switches is not None else DEFAULT_BLOCK_SWITCHES
        )
        self._consistency = self._check_consistency()

        if not self._consistency.is_consistent:
            problems = "; ".join(self._consistency.describe())
            if strict:
                raise TemplateError(f"Template and engine disagree: {problems}")
            logger.warning(f"Template and engine disagree: {problems}")

    @property
    def document(self) -> TemplateDocument:
        return self._document

    @property
    def consistency(self) -> ConsistencyReport:
        return self._consistency

    def render(self, config: PromptConfig) -> str:
        """Render the final prompt text.

        Every token receives one value per render, so repeated tokens are
        identical. Blocks whose switch is off are dropped at every location.

        Args:
            config: The configuration snapshot.

        Returns:
            The prompt text.
        """
        values = {
            token: renderer(config)
            for token, renderer in self._placeholders.items()
        }
        switches = {
            name: bool(switch(config))
            for name, switch in self._block_switches.items()
        }
        return self._document.render(values, switches)

    def _check_consistency(self) -> ConsistencyReport:
        tokens = self._document.placeholders
        blocks = self._document.block_names
        return ConsistencyReport(
            unused_placeholders=tuple(sorted(set(self._placeholders) - tokens)),
            unresolved_placeholders=tuple(sorted(tokens - set(self._placeholders))),
            unswitched_blocks=tuple(sorted(blocks - set(self._block_switches))),
            unused_switches=tuple(sorted(set(self._block_switches) - blocks)),
        )


def build_default_engine(strict: bool = True) -> PromptEngine:
    """Compose the engine for the base template.

    Args:
        strict: Fail fast if the base template and renderers have drifted.

    Returns:
        A ready PromptEngine.
    """
    document = TemplateDocument(tpl.BASE_TEMPLATE)
    logger.debug(f"Loaded base template: {document!r}")
    return PromptEngine(document, strict=strict)
