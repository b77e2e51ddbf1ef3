"""
Constants and configuration defaults for medai_prompt.
"""
from pathlib import Path
from typing import Final

APP_NAME: Final[str] = "medai_prompt"
APP_VERSION: Final[str] = "1.0.0"
APP_DESCRIPTION: Final[str] = (
    "Prompt builder for retrieving domestic medical-AI guidelines from primary sources"
)

CONFIG_DIR: Final[Path] = Path.home() / ".medai_prompt"
SETTINGS_FILE: Final[Path] = CONFIG_DIR / "settings.json"
STATE_FILE: Final[Path] = CONFIG_DIR / "current.json"
CUSTOM_PRESETS_FILE: Final[Path] = CONFIG_DIR / "presets.json"

DEFAULT_SHARE_BASE_URL: Final[str] = "http://localhost:3000/"
DEFAULT_PRESET: Final[str] = "medical-device"

SLASH_PREFIX: Final[str] = "/"

# Share link
SHARE_PARAM: Final[str] = "c"
MAX_LINK_LENGTH: Final[int] = 2000

# Search query derivation
MAX_QUERIES: Final[int] = 10
MAX_CHIP_QUERIES: Final[int] = 5
MAX_SITE_QUERIES: Final[int] = 3

# Rendering
BULLET_PREFIX: Final[str] = "・"
SCOPE_SEPARATOR: Final[str] = "、"
NONE_SENTINEL: Final[str] = "(なし)"
QUERY_NOT_ENTERED: Final[str] = "(未入力)"
SCOPE_NOT_SPECIFIED: Final[str] = "(未指定)"

MUST_KEYWORD: Final[str] = "3省2ガイドライン"
FALLBACK_QUERY_TERM: Final[str] = "医療AI"
