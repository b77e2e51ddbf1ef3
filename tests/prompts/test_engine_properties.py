"""
Property-based tests for prompt rendering.

Renders the base template through the default engine and checks the block
switches, sentinels and whitespace rules.
"""

import re

import allure
import pytest
from hypothesis import given, settings

from medai_prompt.prompts.config import Category, KeywordChip, PromptConfig
from medai_prompt.prompts.engine import (
    DEFAULT_BLOCK_SWITCHES,
    PromptEngine,
    build_default_engine,
    default_placeholders,
)
from medai_prompt.prompts.template import TemplateDocument, TemplateError

from strategies import prompt_config_strategy


MARKER_RESIDUE = re.compile(r"[A-Z_]+_(BEGIN|END)")
EGOV_TEXT = "e-Gov法令取得"
PROOF_HEAD_TEXT = "以下、実用に耐えうるか実証せよ"
PROOF_TAIL_TEXT = "# 実証結果"


@pytest.fixture(scope="module")
def engine() -> PromptEngine:
    return build_default_engine()


def example_config(**overrides) -> PromptConfig:
    """The reference configuration: one chip, one category, all switches off."""
    values = dict(
        date_today="2026-02-04",
        query="",
        scope=[],
        audiences=[],
        priority_domains=["mhlw.go.jp"],
        keyword_chips=[KeywordChip("SaMD", True)],
        custom_keywords=[],
        exclude_keywords=[],
        categories=[Category("Cat A", True)],
        active_tab="medical-device",
        egov_cross_reference=False,
        proof_mode=False,
        official_domain_priority=False,
        site_operator=False,
    )
    values.update(overrides)
    return PromptConfig(**values)


@allure.feature("Prompt Rendering")
@allure.story("Reference configuration")
@allure.severity(allure.severity_level.CRITICAL)
def test_reference_configuration(engine: PromptEngine):
    prompt = engine.render(example_config())

    assert "Scope: (未指定)" in prompt
    assert "・範囲: (未指定)" in prompt
    assert "Query: (未入力)" in prompt
    assert "Optional_keywords:\n・SaMD\n\nExclude_keywords:" in prompt
    assert "Exclude_keywords:\n・(なし)" in prompt
    assert "Must_keywords:\n・3省2ガイドライン" in prompt
    assert EGOV_TEXT not in prompt
    assert "laws.e-gov.go.jp/api" not in prompt
    assert "EGOV_SECTION" not in prompt
    assert PROOF_HEAD_TEXT not in prompt


@allure.feature("Prompt Rendering")
@allure.story("Every placeholder is substituted")
@allure.severity(allure.severity_level.CRITICAL)
@settings(max_examples=100)
@given(config=prompt_config_strategy())
def test_no_placeholder_or_marker_residue(config: PromptConfig):
    prompt = build_default_engine().render(config)

    assert "[[" not in prompt
    assert MARKER_RESIDUE.search(prompt) is None


@allure.feature("Prompt Rendering")
@allure.story("Blank line runs collapse")
@allure.severity(allure.severity_level.CRITICAL)
@settings(max_examples=100)
@given(config=prompt_config_strategy())
def test_no_three_newline_runs(config: PromptConfig):
    prompt = build_default_engine().render(config)

    assert "\n\n\n" not in prompt
    assert prompt == prompt.strip()


@allure.feature("Prompt Rendering")
@allure.story("Block present iff its switch is on")
@allure.severity(allure.severity_level.CRITICAL)
@pytest.mark.parametrize("egov", [False, True])
@pytest.mark.parametrize("proof", [False, True])
def test_block_switch_combinations(engine: PromptEngine, egov: bool, proof: bool):
    prompt = engine.render(example_config(egov_cross_reference=egov, proof_mode=proof))

    assert (EGOV_TEXT in prompt) == egov
    assert (PROOF_HEAD_TEXT in prompt) == proof
    assert (PROOF_TAIL_TEXT in prompt) == proof
    assert MARKER_RESIDUE.search(prompt) is None


@allure.feature("Prompt Rendering")
@allure.story("Repeated tokens get identical values")
@allure.severity(allure.severity_level.NORMAL)
def test_repeated_tokens_identical(engine: PromptEngine):
    config = example_config(query="画像診断AI", scope=["医療AI", "SaMD"])
    prompt = engine.render(config)

    assert prompt.count("画像診断AI") >= 2
    assert "Scope: 医療AI、SaMD" in prompt
    assert "・範囲: 医療AI、SaMD" in prompt
    assert prompt.count("2026-02-04") >= 3


@allure.feature("Prompt Rendering")
@allure.story("Optional keywords combine chips and custom keywords")
@allure.severity(allure.severity_level.NORMAL)
def test_optional_keywords_skip_disabled_and_blank(engine: PromptEngine):
    config = example_config(
        keyword_chips=[KeywordChip("SaMD", True), KeywordChip("PMDA", False)],
        custom_keywords=["AI医療機器", "  ", ""],
        exclude_keywords=["海外", " "],
        categories=[Category("Cat A", False), Category("Cat B", True)],
    )
    prompt = engine.render(config)

    assert "Optional_keywords:\n・SaMD\n・AI医療機器\n\n" in prompt
    assert "・PMDA" not in prompt
    assert "Exclude_keywords:\n・海外\n\n" in prompt
    assert "・Cat B" in prompt
    assert "・Cat A" not in prompt


@allure.feature("Prompt Rendering")
@allure.story("Rendering is deterministic")
@allure.severity(allure.severity_level.NORMAL)
@settings(max_examples=50)
@given(config=prompt_config_strategy())
def test_render_is_deterministic(config: PromptConfig):
    engine = build_default_engine()

    assert engine.render(config) == engine.render(config)


@allure.feature("Prompt Engine")
@allure.story("Default engine is consistent with the base template")
@allure.severity(allure.severity_level.CRITICAL)
def test_default_engine_is_consistent(engine: PromptEngine):
    assert engine.consistency.is_consistent
    assert engine.consistency.describe() == []
    assert engine.document.block_count("PROOF_SECTION") == 2
    assert engine.document.block_count("EGOV_SECTION") == 1


@allure.feature("Prompt Engine")
@allure.story("Strict engine rejects drift")
@allure.severity(allure.severity_level.NORMAL)
def test_strict_engine_rejects_unresolved_token():
    document = TemplateDocument("[[QUERY]] [[MISSING]]")

    with pytest.raises(TemplateError):
        PromptEngine(
            document,
            placeholders={"QUERY": lambda c: c.query},
            block_switches={},
            strict=True,
        )


@allure.feature("Prompt Engine")
@allure.story("Lenient engine reports drift and still renders")
@allure.severity(allure.severity_level.NORMAL)
def test_lenient_engine_reports_drift():
    document = TemplateDocument("[[QUERY]] [[MISSING]]\nX_BEGIN\nx\nX_END\n")
    engine = PromptEngine(document, placeholders=default_placeholders(), strict=False)

    report = engine.consistency
    assert report.unresolved_placeholders == ("MISSING",)
    assert "DATE_TODAY" in report.unused_placeholders
    assert report.unswitched_blocks == ("X",)
    assert set(report.unused_switches) == set(DEFAULT_BLOCK_SWITCHES)
    assert not report.is_consistent

    assert engine.render(example_config(query="q")) == "q [[MISSING]]\nx"


@allure.feature("Prompt Engine")
@allure.story("Custom bullet prefix")
@allure.severity(allure.severity_level.MINOR)
def test_custom_bullet_prefix():
    document = TemplateDocument("[[CATEGORIES_LIST]]")
    placeholders = {"CATEGORIES_LIST": default_placeholders("- ")["CATEGORIES_LIST"]}
    engine = PromptEngine(document, placeholders=placeholders, block_switches={}, strict=True)

    assert engine.render(example_config()) == "- Cat A"
