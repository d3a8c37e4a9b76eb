"""Prompt templates for initial generation and length-correction passes."""

from __future__ import annotations

from seo_meta_cli.core.models import (
    MAX_DESC_LEN,
    MAX_TITLE_LEN,
    MIN_DESC_LEN,
    MIN_TITLE_LEN,
    MetadataCandidate,
)

_JSON_SHAPE = '{"focusKeyword": "...", "title": "...", "description": "..."}'

INITIAL_TEMPLATE = """\
You are an expert SEO specialist with over 10 years of experience. Your task is \
to generate SEO-optimized metadata for the given URL.

URL: "{url}"

Analyze the likely content, context, and purpose of the page at this URL. Based \
on your analysis, provide the following in a JSON format:

1. **focusKeyword**: The single most important, high-volume keyword that best \
represents the page's core content.
2. **title**: A compelling, SEO-friendly page title between {min_title} and \
{max_title} characters long. It must be enticing to users on a search engine \
results page.
3. **description**: An engaging meta description between {min_desc} and \
{max_desc} characters long. It should summarize the page content and include a \
call-to-action to encourage clicks.

Respond with exactly one JSON object of this shape and nothing else:
{shape}
"""

CORRECTION_TEMPLATE = """\
You are an SEO metadata correction assistant. Your task is to fix the provided \
title and/or description to meet strict character length requirements, without \
losing the original meaning or SEO value.

URL: "{url}"
Focus Keyword: "{keyword}" (keep this keyword unchanged)

Previous attempt had validation errors:
- Title: "{title}" {title_feedback}
- Description: "{description}" {description_feedback}

Instructions:
- Rewrite the 'title' ONLY if it was incorrect. The new title MUST be between \
{min_title} and {max_title} characters.
- Rewrite the 'description' ONLY if it was incorrect. The new description MUST \
be between {min_desc} and {max_desc} characters.
- Preserve the original meaning and maintain the focus keyword.
- Output ONLY the corrected data as one JSON object of this shape:
{shape}
"""


def _feedback(length: int, ok: bool, low: int, high: int) -> str:
    if ok:
        return f"(Current Length: {length}). This is correct. Do not change it."
    return (
        f"(Current Length: {length}). THIS IS INCORRECT. "
        f"Please rewrite it to be between {low}-{high} characters."
    )


def title_feedback(candidate: MetadataCandidate) -> str:
    """Feedback line for the previous title."""
    outcome = candidate.validate_lengths()
    return _feedback(len(candidate.title), outcome.title_ok, MIN_TITLE_LEN, MAX_TITLE_LEN)


def description_feedback(candidate: MetadataCandidate) -> str:
    """Feedback line for the previous description."""
    outcome = candidate.validate_lengths()
    return _feedback(
        len(candidate.description), outcome.description_ok, MIN_DESC_LEN, MAX_DESC_LEN
    )


def build_initial_prompt(url: str) -> str:
    return INITIAL_TEMPLATE.format(
        url=url,
        min_title=MIN_TITLE_LEN,
        max_title=MAX_TITLE_LEN,
        min_desc=MIN_DESC_LEN,
        max_desc=MAX_DESC_LEN,
        shape=_JSON_SHAPE,
    )


def build_correction_prompt(url: str, previous: MetadataCandidate) -> str:
    return CORRECTION_TEMPLATE.format(
        url=url,
        keyword=previous.focus_keyword,
        title=previous.title,
        title_feedback=title_feedback(previous),
        description=previous.description,
        description_feedback=description_feedback(previous),
        min_title=MIN_TITLE_LEN,
        max_title=MAX_TITLE_LEN,
        min_desc=MIN_DESC_LEN,
        max_desc=MAX_DESC_LEN,
        shape=_JSON_SHAPE,
    )


def build_prompt(url: str, attempt: int, previous: MetadataCandidate | None) -> str:
    """Return the prompt for *attempt*.

    The first attempt, or any attempt without a usable previous answer, gets
    the initial prompt. Later attempts get field-scoped correction feedback.
    """
    if attempt == 0 or previous is None:
        return build_initial_prompt(url)
    return build_correction_prompt(url, previous)
