"""Tests for initial and correction prompt construction."""

from __future__ import annotations

from conftest import candidate

from seo_meta_cli.core.generate.prompts import (
    build_prompt,
    description_feedback,
    title_feedback,
)
from seo_meta_cli.core.models import MetadataCandidate

URL = "https://shop.example.com/running-shoes"


def test_initial_prompt_on_first_attempt() -> None:
    prompt = build_prompt(URL, 0, None)
    assert f'URL: "{URL}"' in prompt
    assert "expert SEO specialist" in prompt
    assert "between 40 and 55 characters" in prompt
    assert "between 140 and 155 characters" in prompt
    assert '"focusKeyword"' in prompt


def test_initial_prompt_when_no_previous_candidate() -> None:
    """A later attempt without a usable answer starts over."""
    assert build_prompt(URL, 2, None) == build_prompt(URL, 0, None)


def test_first_attempt_ignores_previous() -> None:
    assert build_prompt(URL, 0, candidate()) == build_prompt(URL, 0, None)


def test_correction_prompt_flags_only_invalid_title() -> None:
    previous = candidate(title_len=200, desc_len=150, keyword="trail running shoes")
    prompt = build_prompt(URL, 1, previous)

    assert "correction assistant" in prompt
    assert f'URL: "{URL}"' in prompt
    assert 'Focus Keyword: "trail running shoes"' in prompt
    assert (
        "(Current Length: 200). THIS IS INCORRECT. "
        "Please rewrite it to be between 40-55 characters."
    ) in prompt
    assert "(Current Length: 150). This is correct. Do not change it." in prompt
    assert "Rewrite the 'title' ONLY if it was incorrect" in prompt


def test_correction_prompt_flags_short_description() -> None:
    previous = candidate(title_len=50, desc_len=90)
    prompt = build_prompt(URL, 2, previous)
    assert "(Current Length: 50). This is correct." in prompt
    assert "(Current Length: 90). THIS IS INCORRECT." in prompt
    assert "between 140-155 characters" in prompt


def test_correction_prompt_quotes_previous_values() -> None:
    previous = candidate(title_len=20, desc_len=20)
    prompt = build_prompt(URL, 1, previous)
    assert f'Title: "{previous.title}"' in prompt
    assert f'Description: "{previous.description}"' in prompt


def test_braces_in_previous_output_are_kept_verbatim() -> None:
    previous = MetadataCandidate(
        focus_keyword="{kw}", title="Use {placeholders}", description="{}"
    )
    prompt = build_prompt(URL, 1, previous)
    assert 'Title: "Use {placeholders}"' in prompt
    assert 'Focus Keyword: "{kw}"' in prompt


def test_feedback_bounds_are_inclusive() -> None:
    assert "This is correct" in title_feedback(candidate(title_len=40))
    assert "This is correct" in title_feedback(candidate(title_len=55))
    assert "INCORRECT" in title_feedback(candidate(title_len=56))
    assert "This is correct" in description_feedback(candidate(desc_len=140))
    assert "This is correct" in description_feedback(candidate(desc_len=155))
    assert "INCORRECT" in description_feedback(candidate(desc_len=139))
