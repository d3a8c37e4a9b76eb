"""Per-URL attempt loop: generate, validate lengths, correct, give up.

The workflow is a small state machine::

    Attempting(n) --call fails, attempts left-------> Attempting(n+1, same previous)
                  --lengths invalid, attempts left--> Attempting(n+1, new candidate)
                  --lengths valid-------------------> Succeeded
                  --fails or invalid on last try----> Failed

Attempts for one URL are strictly sequential because each correction prompt
depends on the previous answer.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Protocol

from seo_meta_cli.core.errors import ConstraintViolation, GenerationError
from seo_meta_cli.core.generate.prompts import build_prompt
from seo_meta_cli.core.models import MetadataCandidate, MetadataResult

logger = logging.getLogger(__name__)

MAX_RETRIES = 3


class Generator(Protocol):
    async def generate(
        self,
        prompt: str,
        attempt: int,
        previous: MetadataCandidate | None = None,
    ) -> MetadataCandidate: ...


@dataclass(frozen=True)
class Attempting:
    attempt: int
    previous: MetadataCandidate | None = None


@dataclass(frozen=True)
class Succeeded:
    url: str
    candidate: MetadataCandidate
    attempts: int

    def to_result(self) -> MetadataResult:
        return MetadataResult.from_candidate(self.url, self.candidate)


@dataclass(frozen=True)
class Failed:
    url: str
    message: str
    attempts: int
    cause: Exception | None = None

    def to_result(self) -> MetadataResult:
        return MetadataResult.from_error(self.url, self.message)


Outcome = Succeeded | Failed


async def _step(
    url: str,
    state: Attempting,
    client: Generator,
    max_retries: int,
) -> Attempting | Outcome:
    """Advance the workflow by one attempt."""
    n = state.attempt
    is_last = n == max_retries - 1
    prompt = build_prompt(url, n, state.previous)

    try:
        candidate = await client.generate(prompt, n, state.previous)
    except GenerationError as e:
        logger.info("Attempt %d failed for %s: %s", n + 1, url, e)
        if is_last:
            return Failed(
                url=url,
                message=(
                    f"Failed to generate metadata after {max_retries} attempts. "
                    f"Details: {e}"
                ),
                attempts=n + 1,
                cause=e,
            )
        return Attempting(n + 1, state.previous)

    if candidate.validate_lengths().valid:
        logger.debug("Attempt %d succeeded for %s", n + 1, url)
        return Succeeded(url=url, candidate=candidate, attempts=n + 1)

    violation = ConstraintViolation(len(candidate.title), len(candidate.description))
    logger.info("Attempt %d out of bounds for %s: %s", n + 1, url, violation)
    if is_last:
        return Failed(
            url=url,
            message=(
                "Failed to generate metadata within character limits after "
                f"{max_retries} attempts. {violation}"
            ),
            attempts=n + 1,
            cause=violation,
        )
    return Attempting(n + 1, candidate)


async def run_workflow(
    url: str,
    client: Generator,
    max_retries: int = MAX_RETRIES,
) -> Outcome:
    """Drive one URL to a terminal Succeeded/Failed state.

    Makes at most ``max_retries`` calls to ``client.generate``. Generation
    errors are contained in the returned Failed state.
    """
    if max_retries < 1:
        raise ValueError("max_retries must be at least 1")

    state: Attempting | Outcome = Attempting(0)
    while isinstance(state, Attempting):
        state = await _step(url, state, client, max_retries)
    return state
