"""Exception hierarchy for metadata generation."""

from __future__ import annotations


class SeoMetaError(Exception):
    """Base class for all seo-meta-cli errors."""


class InputError(SeoMetaError):
    """No usable URLs were supplied; raised before any generation starts."""


class ConfigurationError(SeoMetaError):
    """The generation client cannot be built (missing model, bad config file)."""


class GenerationError(SeoMetaError):
    """A single generation attempt failed."""


class TransportError(GenerationError):
    """The model service call itself failed (network, auth, quota)."""


class ParseError(GenerationError):
    """The model answered, but not with the expected JSON object."""


class ConstraintViolation(SeoMetaError):
    """Title or description length is outside the allowed range."""

    def __init__(self, title_length: int, description_length: int) -> None:
        self.title_length = title_length
        self.description_length = description_length
        super().__init__(
            f"Last title length: {title_length}, description length: {description_length}"
        )
