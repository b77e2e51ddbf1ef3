"""
Property-based tests for prompt configuration.

Covers the lenient JSON codec used by share links and saved state, and the
strict import path used for files.
"""

import json

import allure
import pytest
from hypothesis import given, settings, strategies as st

from medai_prompt.prompts.config import (
    Category,
    ConfigError,
    KeywordChip,
    PromptConfig,
    export_config,
    import_config,
    parse_json,
    to_json,
    validate_config,
)

from strategies import any_text_config_strategy, prompt_config_strategy


@allure.feature("Prompt Configuration")
@allure.story("JSON round trip")
@allure.severity(allure.severity_level.CRITICAL)
@settings(max_examples=100)
@given(config=prompt_config_strategy())
def test_json_round_trip(config: PromptConfig):
    assert parse_json(to_json(config)) == config


@allure.feature("Prompt Configuration")
@allure.story("Strict import accepts exported files")
@allure.severity(allure.severity_level.CRITICAL)
@settings(max_examples=100)
@given(config=prompt_config_strategy())
def test_export_import_round_trip(config: PromptConfig):
    assert import_config(export_config(config)) == config


@allure.feature("Prompt Configuration")
@allure.story("Wire keys")
@allure.severity(allure.severity_level.NORMAL)
def test_to_dict_uses_camel_case_keys():
    config = PromptConfig(
        date_today="2026-02-04",
        keyword_chips=[KeywordChip("SaMD", False)],
        categories=[Category("法令", True)],
        active_tab="medical-device",
        egov_cross_reference=True,
    )
    data = json.loads(to_json(config))

    assert data["dateToday"] == "2026-02-04"
    assert data["keywordChips"] == [{"name": "SaMD", "enabled": False}]
    assert data["categories"] == [{"name": "法令", "enabled": True}]
    assert data["activeTab"] == "medical-device"
    assert data["eGovCrossReference"] is True
    assert "法令" in to_json(config)


@allure.feature("Prompt Configuration")
@allure.story("Lenient parse rejects unusable documents")
@allure.severity(allure.severity_level.CRITICAL)
@pytest.mark.parametrize(
    "text",
    [
        "",
        "not json",
        "{\"activeTab\": ",
        "[]",
        "\"medical-device\"",
        "42",
        "null",
        "{\"query\": \"AI\"}",
    ],
)
def test_parse_json_returns_none(text: str):
    assert parse_json(text) is None


@allure.feature("Prompt Configuration")
@allure.story("Lenient parse tolerates partial documents")
@allure.severity(allure.severity_level.NORMAL)
def test_parse_json_defaults_missing_and_mistyped_fields():
    text = json.dumps({
        "activeTab": "generative-ai",
        "query": 42,
        "scope": "医療AI",
        "priorityDomains": ["mhlw.go.jp", 3, "pmda.go.jp"],
        "keywordChips": [{"name": "LLM"}, {"enabled": True}, "broken"],
        "proofMode": "yes",
        "siteOperator": True,
    })

    config = parse_json(text)

    assert config is not None
    assert config.active_tab == "generative-ai"
    assert config.query == ""
    assert config.scope == []
    assert config.priority_domains == ["mhlw.go.jp", "pmda.go.jp"]
    assert config.keyword_chips == [KeywordChip("LLM", True)]
    assert config.proof_mode is False
    assert config.site_operator is True


@allure.feature("Prompt Configuration")
@allure.story("Unknown keys are carried through")
@allure.severity(allure.severity_level.NORMAL)
@settings(max_examples=50)
@given(
    extra_key=st.text(alphabet="xyz", min_size=1, max_size=8).map(lambda s: "x_" + s),
    extra_value=st.one_of(st.integers(), st.booleans(), st.text(max_size=10)),
)
def test_unknown_keys_preserved(extra_key: str, extra_value):
    text = json.dumps({"activeTab": "research-ethics", extra_key: extra_value})

    config = parse_json(text)

    assert config is not None
    assert config.extras == {extra_key: extra_value}
    assert json.loads(to_json(config))[extra_key] == extra_value


@allure.feature("Prompt Configuration")
@allure.story("Strict import reports syntax position")
@allure.severity(allure.severity_level.CRITICAL)
def test_import_reports_line_and_column():
    with pytest.raises(ConfigError) as exc_info:
        import_config("{\n  \"activeTab\": \"medical-device\",\n}")

    assert exc_info.value.line == 3
    assert exc_info.value.column is not None
    assert "line 3" in str(exc_info.value)


@allure.feature("Prompt Configuration")
@allure.story("Strict import reports every invalid field")
@allure.severity(allure.severity_level.CRITICAL)
def test_import_rejects_invalid_fields():
    text = json.dumps({
        "query": 1,
        "proofMode": "on",
        "scope": ["ok", 2],
        "categories": [{"name": "x", "enabled": "yes"}, 5],
    })

    with pytest.raises(ConfigError) as exc_info:
        import_config(text)

    message = str(exc_info.value)
    assert "activeTab" in message
    assert "'query' must be a string" in message
    assert "'proofMode' must be a boolean" in message
    assert "'scope' must contain only strings" in message
    assert "'categories[0].enabled' must be a boolean" in message
    assert "'categories[1]' must be an object" in message
    assert exc_info.value.line is None


@allure.feature("Prompt Configuration")
@allure.story("Validation of well-formed data")
@allure.severity(allure.severity_level.NORMAL)
def test_validate_config():
    assert validate_config({"activeTab": "medical-device"}) == (True, [])
    assert validate_config([]) == (False, ["Configuration must be an object"])

    is_valid, errors = validate_config({"activeTab": 3, "keywordChips": {}})
    assert not is_valid
    assert len(errors) == 2


@allure.feature("Prompt Configuration")
@allure.story("Derived keyword lists")
@allure.severity(allure.severity_level.MINOR)
def test_optional_and_exclude_keywords():
    config = PromptConfig(
        keyword_chips=[KeywordChip("a"), KeywordChip("b", False)],
        custom_keywords=["c", " ", ""],
        exclude_keywords=["", "d"],
    )

    assert config.optional_keywords == ["a", "c"]
    assert config.active_exclude_keywords == ["d"]


@allure.feature("Prompt Configuration")
@allure.story("Lenient parse never raises")
@allure.severity(allure.severity_level.CRITICAL)
@pytest.mark.parametrize(
    "text",
    [
        "[" * 200000 + "]" * 200000,
        "{\"activeTab\": " + "{\"a\": " * 200000 + "1" + "}" * 200001,
    ],
    ids=["nested-array", "nested-object"],
)
def test_deeply_nested_json(text: str):
    assert parse_json(text) is None

    with pytest.raises(ConfigError):
        import_config(text)


@allure.feature("Prompt Configuration")
@allure.story("JSON round trip with arbitrary text")
@allure.severity(allure.severity_level.NORMAL)
@settings(max_examples=100)
@given(config=any_text_config_strategy())
def test_json_round_trip_any_text(config: PromptConfig):
    assert parse_json(to_json(config)) == config
    assert import_config(export_config(config)) == config
