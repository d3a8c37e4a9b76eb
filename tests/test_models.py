"""Tests for Pydantic data models."""

from __future__ import annotations

import json

import pytest
from conftest import candidate
from pydantic import ValidationError

from seo_meta_cli.core.models import (
    BatchGenerateResult,
    MetadataCandidate,
    MetadataResult,
)


@pytest.mark.parametrize(
    ("title_len", "desc_len", "title_ok", "desc_ok"),
    [
        (40, 140, True, True),
        (55, 155, True, True),
        (39, 150, False, True),
        (56, 150, False, True),
        (48, 139, True, False),
        (48, 156, True, False),
        (0, 0, False, False),
    ],
)
def test_validate_lengths_inclusive_bounds(title_len, desc_len, title_ok, desc_ok):
    outcome = candidate(title_len, desc_len).validate_lengths()
    assert outcome.title_ok is title_ok
    assert outcome.description_ok is desc_ok
    assert outcome.valid is (title_ok and desc_ok)


def test_candidate_accepts_camel_case_aliases():
    c = MetadataCandidate.model_validate(
        {"focusKeyword": "kw", "title": "t", "description": "d"}
    )
    assert c.focus_keyword == "kw"


def test_candidate_is_frozen():
    c = candidate()
    with pytest.raises(ValidationError):
        c.title = "changed"  # type: ignore[misc]


def test_result_from_candidate_derives_lengths():
    c = candidate(title_len=47, desc_len=151)
    result = MetadataResult.from_candidate("https://a.com", c)
    assert result.url == "https://a.com"
    assert result.title_length == len(result.title) == 47
    assert result.description_length == len(result.description) == 151
    assert result.focus_keyword == c.focus_keyword
    assert result.error is False


def test_result_from_error():
    result = MetadataResult.from_error("https://a.com", "quota exceeded")
    assert result.title == "Error processing URL"
    assert result.description == "quota exceeded"
    assert result.focus_keyword == "-"
    assert result.title_length == 0
    assert result.description_length == 0
    assert result.error is True


def test_result_json_uses_camel_case():
    result = MetadataResult.from_candidate("https://a.com", candidate())
    data = json.loads(result.model_dump_json(by_alias=True))
    assert set(data) == {
        "url",
        "title",
        "description",
        "focusKeyword",
        "titleLength",
        "descriptionLength",
        "error",
    }


def test_batch_counts():
    batch = BatchGenerateResult(
        model="m",
        results=[
            MetadataResult.from_candidate("https://a.com", candidate()),
            MetadataResult.from_error("https://b.com", "boom"),
            MetadataResult.from_candidate("https://c.com", candidate()),
        ],
    )
    assert batch.succeeded == 2
    assert batch.failed == 1
    dumped = batch.model_dump(by_alias=True)
    assert dumped["succeeded"] == 2
    assert dumped["failed"] == 1
    assert dumped["results"][1]["error"] is True
