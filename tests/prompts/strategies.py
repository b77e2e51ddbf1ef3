"""
Shared hypothesis strategies for configuration tests.
"""

from hypothesis import strategies as st

from medai_prompt.prompts.config import Category, KeywordChip, PromptConfig


# Japanese and ASCII text without marker or placeholder syntax
SAFE_ALPHABET = (
    "abcdefghijklmnopqrstuvwxyz"
    "0123456789 .-_/:"
    "医療機器生成情報研究倫理ガイドライン安全管理データ"
    "あいうえおかきくけこ"
)


def safe_text(min_size: int = 0, max_size: int = 30):
    """Generate free text that cannot be mistaken for template syntax."""
    return st.text(alphabet=SAFE_ALPHABET, min_size=min_size, max_size=max_size)


def domain_strategy():
    """Generate domain-like strings."""
    return st.from_regex(r"^[a-z]{1,12}\.(go\.jp|or\.jp|jp)$", fullmatch=True)


def date_strategy():
    """Generate ISO calendar dates as strings."""
    return st.dates().map(lambda d: d.isoformat())


@st.composite
def keyword_chips_strategy(draw, max_size: int = 8):
    names = draw(st.lists(safe_text(min_size=1, max_size=15), max_size=max_size, unique=True))
    return [KeywordChip(name=name, enabled=draw(st.booleans())) for name in names]


@st.composite
def categories_strategy(draw, max_size: int = 6):
    names = draw(st.lists(safe_text(min_size=1, max_size=15), max_size=max_size, unique=True))
    return [Category(name=name, enabled=draw(st.booleans())) for name in names]


@st.composite
def prompt_config_strategy(draw):
    """Generate PromptConfig objects with realistic free text."""
    return PromptConfig(
        date_today=draw(date_strategy()),
        query=draw(safe_text(max_size=40)),
        scope=draw(st.lists(safe_text(min_size=1, max_size=10), max_size=4)),
        audiences=draw(st.lists(safe_text(min_size=1, max_size=10), max_size=4)),
        priority_domains=draw(st.lists(domain_strategy(), max_size=6)),
        keyword_chips=draw(keyword_chips_strategy()),
        custom_keywords=draw(st.lists(safe_text(max_size=10), max_size=4)),
        exclude_keywords=draw(st.lists(safe_text(max_size=10), max_size=4)),
        categories=draw(categories_strategy()),
        active_tab=draw(st.sampled_from([
            "medical-device",
            "clinical-operation",
            "research-ethics",
            "generative-ai",
        ])),
        egov_cross_reference=draw(st.booleans()),
        proof_mode=draw(st.booleans()),
        official_domain_priority=draw(st.booleans()),
        site_operator=draw(st.booleans()),
    )


@st.composite
def any_text_config_strategy(draw):
    """Generate PromptConfig objects whose text fields use any characters.

    Quotes, newlines, ``%``, ``+``, emoji and characters outside the BMP
    all reach the JSON and share-link codecs.
    """
    text = st.text(max_size=20)
    return PromptConfig(
        date_today=draw(text),
        query=draw(text),
        scope=draw(st.lists(text, max_size=3)),
        audiences=draw(st.lists(text, max_size=3)),
        priority_domains=draw(st.lists(text, max_size=3)),
        keyword_chips=[KeywordChip(name, draw(st.booleans())) for name in draw(st.lists(text, max_size=3))],
        custom_keywords=draw(st.lists(text, max_size=3)),
        exclude_keywords=draw(st.lists(text, max_size=3)),
        categories=[Category(name, draw(st.booleans())) for name in draw(st.lists(text, max_size=3))],
        active_tab=draw(text),
        egov_cross_reference=draw(st.booleans()),
        proof_mode=draw(st.booleans()),
        official_domain_priority=draw(st.booleans()),
        site_operator=draw(st.booleans()),
    )
