"""
Property-based tests for the template document model.
"""

import allure
import pytest
from hypothesis import given, settings, strategies as st

from medai_prompt.prompts.template import (
    BlockFragment,
    TemplateDocument,
    TemplateError,
    TextFragment,
    substitute,
)

from strategies import safe_text


SAMPLE = (
    "Title [[QUERY]]\n"
    "\n"
    "NOTE_BEGIN\n"
    "Note about [[QUERY]]\n"
    "NOTE_END\n"
    "\n"
    "Body\n"
    "NOTE_BEGIN\n"
    "Second note\n"
    "NOTE_END\n"
    "End\n"
)


@allure.feature("Template Document")
@allure.story("Parsing into fragments")
@allure.severity(allure.severity_level.CRITICAL)
def test_parse_builds_fragment_tree():
    document = TemplateDocument("a\nX_BEGIN\nb\nX_END\nc")

    assert document.fragments == (
        TextFragment("a\n"),
        BlockFragment("X", (TextFragment("b\n"),)),
        TextFragment("c"),
    )
    assert document.block_names == frozenset({"X"})
    assert document.block_count("X") == 1
    assert document.block_count("Y") == 0


@allure.feature("Template Document")
@allure.story("Placeholders and blocks are discovered")
@allure.severity(allure.severity_level.NORMAL)
def test_placeholders_include_tokens_inside_blocks():
    document = TemplateDocument(SAMPLE)

    assert document.placeholders == frozenset({"QUERY"})
    assert document.block_count("NOTE") == 2


@allure.feature("Template Document")
@allure.story("Same block name switched together at every location")
@allure.severity(allure.severity_level.CRITICAL)
def test_block_switched_at_every_location():
    document = TemplateDocument(SAMPLE)

    kept = document.render({"QUERY": "AI"}, {"NOTE": True})
    dropped = document.render({"QUERY": "AI"}, {"NOTE": False})

    assert "Note about AI" in kept and "Second note" in kept
    assert "Note about" not in dropped and "Second note" not in dropped
    assert "NOTE_" not in kept and "NOTE_" not in dropped
    assert dropped == "Title AI\n\nBody\nEnd"


@allure.feature("Template Document")
@allure.story("Block without a switch is kept")
@allure.severity(allure.severity_level.NORMAL)
def test_block_without_switch_is_kept():
    document = TemplateDocument(SAMPLE)

    assert "Second note" in document.render({}, {})


@allure.feature("Template Document")
@allure.story("Enabled block renders as if the markers were absent")
@allure.severity(allure.severity_level.NORMAL)
def test_enabled_block_matches_text_without_markers():
    with_markers = TemplateDocument("a\nX_BEGIN\nb\nX_END\nc")
    without_markers = TemplateDocument("a\nb\nc")

    assert with_markers.render({}, {"X": True}) == without_markers.render({}, {})


@allure.feature("Template Document")
@allure.story("Unknown tokens are left untouched")
@allure.severity(allure.severity_level.NORMAL)
def test_unknown_token_is_no_op():
    assert substitute("[[UNKNOWN]] [[QUERY]]", {"QUERY": "x"}) == "[[UNKNOWN]] x"


@allure.feature("Template Document")
@allure.story("Substitution is single pass")
@allure.severity(allure.severity_level.CRITICAL)
def test_inserted_values_are_not_rescanned():
    document = TemplateDocument("[[A]] [[B]]")

    rendered = document.render({"A": "[[B]]", "B": "b"}, {})

    assert rendered == "[[B]] b"


@allure.feature("Template Document")
@allure.story("Marker text in values is not interpreted")
@allure.severity(allure.severity_level.NORMAL)
def test_marker_text_in_value_is_literal():
    document = TemplateDocument("X_BEGIN\n[[Q]]\nX_END\n")

    rendered = document.render({"Q": "Y_BEGIN\nY_END"}, {"X": True, "Y": False})

    assert rendered == "Y_BEGIN\nY_END"


@allure.feature("Template Document")
@allure.story("Blank line runs collapse")
@allure.severity(allure.severity_level.CRITICAL)
@settings(max_examples=100)
@given(
    keep=st.booleans(),
    value=safe_text(),
    blank_lines=st.integers(min_value=0, max_value=5),
)
def test_no_three_newline_runs(keep: bool, value: str, blank_lines: int):
    """Dropping a block between blank lines never leaves 3+ newlines."""
    gap = "\n" * blank_lines
    source = f"top [[V]]\n{gap}B_BEGIN\nKEPT LINE\nB_END\n{gap}bottom\n"
    rendered = TemplateDocument(source).render({"V": value}, {"B": keep})

    assert "\n\n\n" not in rendered
    assert rendered == rendered.strip()
    assert ("KEPT LINE" in rendered) == keep


@allure.feature("Template Document")
@allure.story("Nested blocks")
@allure.severity(allure.severity_level.NORMAL)
@settings(max_examples=50)
@given(outer=st.booleans(), inner=st.booleans())
def test_nested_blocks(outer: bool, inner: bool):
    document = TemplateDocument("O_BEGIN\nouter\nI_BEGIN\ninner\nI_END\nO_END\n")

    rendered = document.render({}, {"O": outer, "I": inner})

    assert ("outer" in rendered) == outer
    assert ("inner" in rendered) == (outer and inner)


@allure.feature("Template Document")
@allure.story("Malformed markers are rejected at construction")
@allure.severity(allure.severity_level.CRITICAL)
@pytest.mark.parametrize(
    "source, line",
    [
        ("a\nX_END\n", 2),
        ("X_BEGIN\nY_BEGIN\nX_END\nY_END\n", 3),
        ("a\nX_BEGIN\nb\n", 2),
    ],
)
def test_malformed_markers_raise(source: str, line: int):
    with pytest.raises(TemplateError) as exc_info:
        TemplateDocument(source)

    assert exc_info.value.line == line
