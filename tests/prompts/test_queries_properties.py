"""
Property-based tests for search query derivation.
"""

import allure
from hypothesis import given, settings

from medai_prompt.prompts.config import KeywordChip, PromptConfig
from medai_prompt.prompts.queries import derive_queries

from strategies import prompt_config_strategy


@allure.feature("Search Queries")
@allure.story("Bounded list led by the mandatory keyword")
@allure.severity(allure.severity_level.CRITICAL)
@settings(max_examples=100)
@given(config=prompt_config_strategy())
def test_at_most_ten_and_first_has_mandatory_keyword(config: PromptConfig):
    queries = derive_queries(config)

    assert 1 <= len(queries) <= 10
    assert "3省2ガイドライン" in queries[0]


@allure.feature("Search Queries")
@allure.story("Empty theme falls back to the generic term")
@allure.severity(allure.severity_level.NORMAL)
def test_empty_query_uses_fallback_term():
    queries = derive_queries(PromptConfig(active_tab="medical-device"))

    assert queries == ["3省2ガイドライン 医療AI ガイドライン 最新版"]


@allure.feature("Search Queries")
@allure.story("Rule order")
@allure.severity(allure.severity_level.CRITICAL)
def test_rules_apply_in_order():
    config = PromptConfig(
        query="画像診断",
        keyword_chips=[KeywordChip("SaMD"), KeywordChip("PMDA", enabled=False), KeywordChip("薬機法")],
        priority_domains=["mhlw.go.jp", "pmda.go.jp"],
        official_domain_priority=True,
        site_operator=True,
        active_tab="medical-device",
    )

    assert derive_queries(config) == [
        "3省2ガイドライン 画像診断 ガイドライン 最新版",
        "画像診断 ガイドライン 国内",
        "SaMD",
        "薬機法",
        "site:mhlw.go.jp 画像診断 ガイドライン",
        "site:pmda.go.jp 画像診断 ガイドライン",
    ]


@allure.feature("Search Queries")
@allure.story("site: queries need both switches")
@allure.severity(allure.severity_level.NORMAL)
def test_site_queries_require_both_switches():
    base = dict(priority_domains=["mhlw.go.jp"], active_tab="medical-device")

    for official, site in [(False, False), (True, False), (False, True)]:
        config = PromptConfig(official_domain_priority=official, site_operator=site, **base)
        assert not any(q.startswith("site:") for q in derive_queries(config))


@allure.feature("Search Queries")
@allure.story("Chip and site queries are capped before the total cap")
@allure.severity(allure.severity_level.NORMAL)
def test_per_rule_caps_and_total_cap():
    config = PromptConfig(
        query="AI",
        keyword_chips=[KeywordChip(f"chip{i}") for i in range(8)],
        priority_domains=[f"d{i}.go.jp" for i in range(6)],
        official_domain_priority=True,
        site_operator=True,
        active_tab="generative-ai",
    )
    queries = derive_queries(config)

    assert len(queries) == 10
    assert queries[2:7] == [f"chip{i}" for i in range(5)]
    assert queries[7:] == [f"site:d{i}.go.jp AI ガイドライン" for i in range(3)]


@allure.feature("Search Queries")
@allure.story("Later rules are dropped at the total cap")
@allure.severity(allure.severity_level.MINOR)
def test_identical_queries_are_kept():
    config = PromptConfig(
        keyword_chips=[KeywordChip("SaMD"), KeywordChip("SaMD")],
        active_tab="medical-device",
    )

    assert derive_queries(config).count("SaMD") == 2
