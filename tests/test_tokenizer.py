"""Tests for tokenization and plural stemming."""

import pytest

from fluentui_docs.engine.scoring.constants import ScoringConfig
from fluentui_docs.engine.scoring.stemmer import stem_term
from fluentui_docs.engine.scoring.tokenizer import is_insufficient, split_parts, tokenize


def test_camel_case_word_keeps_whole_form_and_parts():
    assert tokenize("ColorPicker") == ["colorpicker", "color", "picker"]


def test_acronym_boundary():
    assert split_parts("HTMLElement") == ["HTML", "Element"]
    assert tokenize("HTMLElement") == ["htmlelement", "html", "element"]


def test_hyphenated_word():
    assert tokenize("multi-select") == ["multi-select", "multi", "select"]


def test_single_part_word_is_not_repeated():
    assert tokenize("Button") == ["button"]


def test_order_and_duplicates_are_kept():
    assert tokenize("button dialog button") == ["button", "dialog", "button"]


def test_stop_words_and_short_terms_dropped_in_free_text():
    assert tokenize("the a of") == []
    assert tokenize("a checkbox in the form") == ["checkbox", "form"]


def test_stop_words_kept_for_component_names():
    assert tokenize("can", filter_stop_words=False) == ["can"]
    assert tokenize("can") == []


def test_plurals_fold_on_both_sides():
    assert tokenize("Buttons") == tokenize("button")
    assert tokenize("categories") == ["category"]


def test_punctuation_and_markup_are_separators():
    assert tokenize("`<Input />` (v9)") == ["input", "v9"]


def test_empty_text():
    assert tokenize("") == []
    assert is_insufficient("")
    assert is_insufficient("   the of   ")
    assert not is_insufficient("dialog")


def test_tokenize_is_deterministic():
    text = "SpinButton lets users increment numeric values with TabList-style keyboard support."
    assert tokenize(text) == tokenize(text)


def test_extra_stop_words_from_config():
    config = ScoringConfig.create(extra_stop_words=["fluent"])
    assert tokenize("fluent dialog", config=config) == ["dialog"]


@pytest.mark.parametrize(
    ("word", "expected"),
    [
        ("buttons", "button"),
        ("boxes", "box"),
        ("switches", "switch"),
        ("categories", "category"),
        ("classes", "class"),
        ("class", "class"),
        ("status", "status"),
        ("axis", "axis"),
        ("bus", "bus"),
        ("picker", "picker"),
    ],
)
def test_stem_term(word, expected):
    assert stem_term(word) == expected
