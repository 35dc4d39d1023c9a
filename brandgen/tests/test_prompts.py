"""Tests for prompt assembly in :mod:`brandgen.prompts`."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).resolve().parents[2]))

from brandgen.prompts import (
    BASE_PROMPT,
    STYLE_PROMPTS,
    THEME_PROMPTS,
    VARIATION_PROMPTS,
    get_brand_prompt,
)


def test_prompt_contains_branding_text() -> None:
    prompt = get_brand_prompt("The JD", "Mortgage Group", None, None, None, 0)

    assert 'The text "The JD Mortgage Group" should be prominently displayed.' in prompt


def test_prompt_segments_follow_fixed_order() -> None:
    prompt = get_brand_prompt("Jane Doe", "Team", "modern", "house", "blue roof", 2)

    assert prompt == " ".join(
        [
            BASE_PROMPT,
            'The text "Jane Doe Team" should be prominently displayed.',
            STYLE_PROMPTS["modern"],
            THEME_PROMPTS["house"],
            "Additional details: blue roof.",
            VARIATION_PROMPTS[2],
        ]
    )


def test_professional_style_sentence_included() -> None:
    prompt = get_brand_prompt("Jane Doe", "Team", "professional", None, None, 0)

    assert STYLE_PROMPTS["professional"] in prompt


@pytest.mark.parametrize("style", [None, "", "vaporwave"])
def test_unknown_or_missing_style_leaves_no_gap(style) -> None:
    prompt = get_brand_prompt("Jane Doe", "Team", style, None, None, 1)

    assert prompt == f'{BASE_PROMPT} The text "Jane Doe Team" should be prominently displayed. {VARIATION_PROMPTS[1]}'
    assert "  " not in prompt


def test_unknown_theme_is_skipped() -> None:
    prompt = get_brand_prompt("Jane Doe", "Team", "bold", "castle", None, 0)

    assert STYLE_PROMPTS["bold"] in prompt
    assert not any(sentence in prompt for sentence in THEME_PROMPTS.values())


@pytest.mark.parametrize("description", [None, "", "   "])
def test_empty_description_is_omitted(description) -> None:
    prompt = get_brand_prompt("Jane Doe", "Team", None, None, description, 0)

    assert "Additional details" not in prompt


def test_variation_hints_are_distinct() -> None:
    prompts = [get_brand_prompt("Jane Doe", "Team", "bold", "key", None, i) for i in range(4)]

    assert len(set(prompts)) == 4
    for prompt, hint in zip(prompts, VARIATION_PROMPTS):
        assert prompt.endswith(hint)


@pytest.mark.parametrize("index", [-1, 4])
def test_out_of_range_variation_index_raises(index) -> None:
    with pytest.raises(ValueError):
        get_brand_prompt("Jane Doe", "Team", None, None, None, index)


def test_vocabularies_have_six_entries() -> None:
    assert set(STYLE_PROMPTS) == {"professional", "modern", "friendly", "bold", "surprise", "eccentric"}
    assert set(THEME_PROMPTS) == {"house", "handshake", "key", "shield", "tree", "arrow"}
