"""
Search query derivation.

Builds the list of suggested web-search queries shown next to the prompt.
Rules are applied in a fixed priority order and the result is cut at
MAX_QUERIES; later rules are dropped, never reordered. Identical queries from
different rules are kept.
"""

from ..constants import (
    FALLBACK_QUERY_TERM,
    MAX_CHIP_QUERIES,
    MAX_QUERIES,
    MAX_SITE_QUERIES,
    MUST_KEYWORD,
)
from .config import PromptConfig


def derive_queries(config: PromptConfig) -> list[str]:
    """Derive suggested search queries from a configuration.

    Order:
        1. The mandatory keyword with the theme and a latest-version qualifier.
        2. The theme with a domestic-guideline qualifier, if a theme is set.
        3. One query per enabled keyword chip (first MAX_CHIP_QUERIES).
        4. ``site:`` queries for the first MAX_SITE_QUERIES priority domains,
           only when both official-domain priority and site operator are on.

    Args:
        config: The configuration snapshot.

    Returns:
        At most MAX_QUERIES query strings.
    """
    theme = config.query or FALLBACK_QUERY_TERM
    queries = [f"{MUST_KEYWORD} {theme} ガイドライン 最新版"]

    if config.query:
        queries.append(f"{config.query} ガイドライン 国内")

    queries.extend(config.enabled_chip_names[:MAX_CHIP_QUERIES])

    if config.official_domain_priority and config.site_operator:
        for domain in config.priority_domains[:MAX_SITE_QUERIES]:
            queries.append(f"site:{domain} {theme} ガイドライン")

    return queries[:MAX_QUERIES]
