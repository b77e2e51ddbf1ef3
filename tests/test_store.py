"""
Tests for the working configuration store.
"""

from datetime import date

import allure
import pytest

from medai_prompt.prompts import editing
from medai_prompt.prompts.config import PromptConfig, parse_json
from medai_prompt.prompts.presets import PresetManager
from medai_prompt.store import ConfigStore


TODAY = date(2026, 2, 4)


@pytest.fixture
def presets() -> PresetManager:
    return PresetManager()


@allure.feature("Configuration Store")
@allure.story("Fresh start uses the default preset")
@allure.severity(allure.severity_level.CRITICAL)
def test_new_store_uses_default_preset(presets, tmp_path):
    store = ConfigStore(presets, tmp_path / "state.json", default_preset="research-ethics", today=TODAY)

    assert store.config.active_tab == "research-ethics"
    assert store.config.date_today == "2026-02-04"
    assert not (tmp_path / "state.json").exists()


@allure.feature("Configuration Store")
@allure.story("Edits are saved")
@allure.severity(allure.severity_level.CRITICAL)
def test_apply_saves_and_reloads(presets, tmp_path):
    path = tmp_path / "nested" / "state.json"
    store = ConfigStore(presets, path, today=TODAY)
    before = store.config

    assert store.apply(editing.update_field, "query", "画像診断AI")
    assert before.query == ""
    assert parse_json(path.read_text(encoding="utf-8")) == store.config

    reloaded = ConfigStore(presets, path, today=date(2030, 1, 1))
    assert reloaded.config == store.config


@allure.feature("Configuration Store")
@allure.story("No-op edits are reported")
@allure.severity(allure.severity_level.NORMAL)
def test_apply_no_op(presets, tmp_path):
    path = tmp_path / "state.json"
    store = ConfigStore(presets, path, today=TODAY)

    assert not store.apply(editing.toggle_category, "no such category")
    assert not path.exists()


@allure.feature("Configuration Store")
@allure.story("Corrupt state falls back to defaults")
@allure.severity(allure.severity_level.NORMAL)
@pytest.mark.parametrize("content", ["{not json", "[]", "{\"query\": \"x\"}"])
def test_invalid_state_file(presets, tmp_path, content):
    path = tmp_path / "state.json"
    path.write_text(content, encoding="utf-8")

    store = ConfigStore(presets, path, today=TODAY)

    assert store.config == store.default_config()


@allure.feature("Configuration Store")
@allure.story("Reset and replace")
@allure.severity(allure.severity_level.NORMAL)
def test_replace_and_reset(presets, tmp_path):
    path = tmp_path / "state.json"
    store = ConfigStore(presets, path, today=TODAY)

    store.replace(PromptConfig(query="x", active_tab="generative-ai"))
    assert parse_json(path.read_text(encoding="utf-8")).active_tab == "generative-ai"

    config = store.reset()
    assert config.active_tab == "medical-device"
    assert store.config is config


@allure.feature("Configuration Store")
@allure.story("In-memory store")
@allure.severity(allure.severity_level.MINOR)
def test_store_without_path(presets):
    store = ConfigStore(presets, today=TODAY)

    assert store.state_path is None
    assert store.apply(editing.update_field, "proof_mode", True)
    assert store.config.proof_mode
