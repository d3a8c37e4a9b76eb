"""Single-call wrapper around litellm that returns a MetadataCandidate."""

from __future__ import annotations

import json
import logging
import re
from collections.abc import Awaitable, Callable
from typing import Any

from seo_meta_cli.core.errors import ConfigurationError, ParseError, TransportError
from seo_meta_cli.core.models import MetadataCandidate

logger = logging.getLogger(__name__)

BASE_TEMPERATURE = 0.5
TEMPERATURE_STEP = 0.1

SYSTEM_PROMPT = (
    "You write search-engine metadata. Always answer with a single JSON object "
    "containing the string fields focusKeyword, title, and description."
)

RESPONSE_SCHEMA: dict[str, Any] = {
    "type": "object",
    "properties": {
        "focusKeyword": {
            "type": "string",
            "description": MetadataCandidate.model_fields["focus_keyword"].description,
        },
        "title": {
            "type": "string",
            "description": MetadataCandidate.model_fields["title"].description,
        },
        "description": {
            "type": "string",
            "description": MetadataCandidate.model_fields["description"].description,
        },
    },
    "required": ["focusKeyword", "title", "description"],
    "additionalProperties": False,
}

_CODE_FENCE = re.compile(r"^```(?:json)?\s*(.*?)\s*```$", re.DOTALL)

CompletionFn = Callable[..., Awaitable[Any]]


def temperature_for(attempt: int) -> float:
    """Sampling temperature for *attempt*: 0.5, 0.6, 0.7, ..."""
    return round(BASE_TEMPERATURE + TEMPERATURE_STEP * attempt, 2)


def _supports_schema(model: str) -> bool:
    import litellm

    try:
        return bool(litellm.supports_response_schema(model=model))
    except Exception as e:
        # litellm raises for models missing from its cost map
        logger.debug("Could not determine schema support for %s: %s", model, e)
        return False


def _response_text(response: Any) -> str:
    try:
        content = response.choices[0].message.content
    except (AttributeError, IndexError, TypeError) as e:
        raise ParseError(f"Unexpected response structure: {e}") from e
    if not content:
        raise ParseError("Model returned an empty response")
    return str(content)


def parse_candidate(
    text: str, previous: MetadataCandidate | None = None
) -> MetadataCandidate:
    """Parse model output into a MetadataCandidate.

    Missing title/description default to "". A missing focus keyword falls
    back to the previous candidate's keyword.
    """
    body = text.strip()
    fenced = _CODE_FENCE.match(body)
    if fenced:
        body = fenced.group(1)
    try:
        data = json.loads(body)
    except json.JSONDecodeError as e:
        raise ParseError(f"Response is not valid JSON: {e}") from e
    if not isinstance(data, dict):
        raise ParseError(f"Expected a JSON object, got {type(data).__name__}")

    fields: dict[str, str] = {}
    for key in ("focusKeyword", "title", "description"):
        value = data.get(key)
        if value is None:
            value = ""
        if not isinstance(value, str):
            raise ParseError(f"Field '{key}' must be a string, got {type(value).__name__}")
        fields[key] = value

    keyword = fields["focusKeyword"] or (previous.focus_keyword if previous else "")
    return MetadataCandidate(
        focus_keyword=keyword,
        title=fields["title"],
        description=fields["description"],
    )


class GenerationClient:
    """Sends one prompt to the configured model and parses the JSON answer.

    ``completion`` defaults to ``litellm.acompletion``; any coroutine with the
    same keyword signature can be injected. ``structured_output`` forces the
    JSON-schema response mode on or off; ``None`` asks litellm whether the
    model supports it.
    """

    def __init__(
        self,
        model: str,
        *,
        completion: CompletionFn | None = None,
        timeout: float | None = None,
        structured_output: bool | None = None,
    ) -> None:
        if not model:
            raise ConfigurationError("No model configured for metadata generation.")
        if completion is None:
            try:
                import litellm
            except ImportError as e:
                raise ConfigurationError(
                    "litellm is required for metadata generation."
                ) from e
            completion = litellm.acompletion
            litellm.suppress_debug_info = True
        self.model = model
        self.timeout = timeout
        self._completion = completion
        if structured_output is None:
            structured_output = _supports_schema(model)
        self.structured_output = structured_output

    def _response_format(self) -> dict[str, Any]:
        if self.structured_output:
            return {
                "type": "json_schema",
                "json_schema": {
                    "name": "seo_metadata",
                    "strict": True,
                    "schema": RESPONSE_SCHEMA,
                },
            }
        return {"type": "json_object"}

    async def generate(
        self,
        prompt: str,
        attempt: int,
        previous: MetadataCandidate | None = None,
    ) -> MetadataCandidate:
        """Run one generation attempt. Raises TransportError or ParseError."""
        kwargs: dict[str, Any] = {
            "model": self.model,
            "messages": [
                {"role": "system", "content": SYSTEM_PROMPT},
                {"role": "user", "content": prompt},
            ],
            "response_format": self._response_format(),
            "temperature": temperature_for(attempt),
            "num_retries": 0,
        }
        if self.timeout is not None:
            kwargs["timeout"] = self.timeout

        try:
            response = await self._completion(**kwargs)
        except Exception as e:
            raise TransportError(str(e) or type(e).__name__) from e

        return parse_candidate(_response_text(response), previous)
