"""Pydantic models for generated SEO metadata."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, computed_field
from pydantic.alias_generators import to_camel

# ── Length constraints ───────────────────────────────────────────────────────
# Inclusive bounds, counted in characters.

MIN_TITLE_LEN: int = 40
MAX_TITLE_LEN: int = 55
MIN_DESC_LEN: int = 140
MAX_DESC_LEN: int = 155

ERROR_TITLE = "Error processing URL"
ERROR_KEYWORD = "-"


class OutputFormat(str, Enum):
    """Output format for the generate command."""

    table = "table"
    json = "json"
    csv = "csv"


class _CamelModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, frozen=True
    )


class MetadataCandidate(_CamelModel):
    """One model answer: the three generated fields, before validation."""

    focus_keyword: str = Field(
        default="",
        description=(
            "The single most important, high-volume keyword that best "
            "represents the page's content."
        ),
    )
    title: str = Field(
        default="",
        description=(
            f"A compelling, SEO-friendly page title between {MIN_TITLE_LEN} "
            f"and {MAX_TITLE_LEN} characters long."
        ),
    )
    description: str = Field(
        default="",
        description=(
            f"An engaging meta description between {MIN_DESC_LEN} and "
            f"{MAX_DESC_LEN} characters long that encourages clicks from "
            "search results."
        ),
    )

    def validate_lengths(self) -> ValidationOutcome:
        return ValidationOutcome(
            title_ok=MIN_TITLE_LEN <= len(self.title) <= MAX_TITLE_LEN,
            description_ok=MIN_DESC_LEN <= len(self.description) <= MAX_DESC_LEN,
        )


class ValidationOutcome(BaseModel):
    """Length check result for a MetadataCandidate."""

    model_config = ConfigDict(frozen=True)

    title_ok: bool
    description_ok: bool

    @property
    def valid(self) -> bool:
        return self.title_ok and self.description_ok


class MetadataResult(_CamelModel):
    """Final per-URL record handed to the presentation layer."""

    url: str
    title: str
    description: str
    focus_keyword: str
    title_length: int = 0
    description_length: int = 0
    error: bool = False

    @classmethod
    def from_candidate(cls, url: str, candidate: MetadataCandidate) -> MetadataResult:
        return cls(
            url=url,
            title=candidate.title,
            description=candidate.description,
            focus_keyword=candidate.focus_keyword,
            title_length=len(candidate.title),
            description_length=len(candidate.description),
        )

    @classmethod
    def from_error(cls, url: str, message: str) -> MetadataResult:
        return cls(
            url=url,
            title=ERROR_TITLE,
            description=message,
            focus_keyword=ERROR_KEYWORD,
            error=True,
        )


class BatchGenerateResult(_CamelModel):
    """Ordered results for one submitted batch, one entry per input URL."""

    model: str = Field(description="Model identifier used for generation")
    results: list[MetadataResult] = Field(default_factory=list)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def succeeded(self) -> int:
        return sum(1 for r in self.results if not r.error)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def failed(self) -> int:
        return sum(1 for r in self.results if r.error)
