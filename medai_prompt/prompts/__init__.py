"""
Prompt generation core for medai_prompt.

This module turns a PromptConfig into the final prompt text and search
queries, and serializes configurations to JSON and share links. Everything
here is pure: no I/O and no shared mutable state.
"""

from .config import (
    Category,
    ConfigError,
    KeywordChip,
    PromptConfig,
    export_config,
    import_config,
    parse_json,
    to_json,
)
from .engine import ConsistencyReport, PromptEngine, build_default_engine
from .formatting import format_list
from .queries import derive_queries
from .share import decode_from_link, encode_to_link, is_link_too_long
from .template import TemplateDocument, TemplateError

__all__ = [
    "PromptConfig",
    "KeywordChip",
    "Category",
    "ConfigError",
    "to_json",
    "parse_json",
    "export_config",
    "import_config",
    "TemplateDocument",
    "TemplateError",
    "PromptEngine",
    "ConsistencyReport",
    "build_default_engine",
    "format_list",
    "derive_queries",
    "encode_to_link",
    "decode_from_link",
    "is_link_too_long",
]
