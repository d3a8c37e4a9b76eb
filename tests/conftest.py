"""Shared fixtures: scripted generators and length-exact sample text."""

from __future__ import annotations

import asyncio
import json
from types import SimpleNamespace

import pytest

from seo_meta_cli.core.errors import TransportError
from seo_meta_cli.core.models import MetadataCandidate

_FILLER = (
    "Compare plans, features and pricing for growing teams and get started "
    "today with a free trial that includes onboarding support and templates. "
) * 4


def text_of(length: int) -> str:
    """Readable text of exactly *length* characters."""
    return _FILLER[:length]


def candidate(
    title_len: int = 48, desc_len: int = 150, keyword: str = "team pricing"
) -> MetadataCandidate:
    return MetadataCandidate(
        focus_keyword=keyword, title=text_of(title_len), description=text_of(desc_len)
    )


def completion_response(payload: dict | str) -> SimpleNamespace:
    """Mimic the litellm ModelResponse shape used by GenerationClient."""
    content = payload if isinstance(payload, str) else json.dumps(payload)
    return SimpleNamespace(choices=[SimpleNamespace(message=SimpleNamespace(content=content))])


class ScriptedGenerator:
    """Generator that replays candidates/exceptions per URL-independent script."""

    model = "test/scripted"

    def __init__(self, *steps: MetadataCandidate | Exception, delay: float = 0) -> None:
        self.steps = list(steps)
        self.delay = delay
        self.calls: list[tuple[str, int, MetadataCandidate | None]] = []

    async def generate(
        self,
        prompt: str,
        attempt: int,
        previous: MetadataCandidate | None = None,
    ) -> MetadataCandidate:
        self.calls.append((prompt, attempt, previous))
        if self.delay:
            await asyncio.sleep(self.delay)
        step = self.steps[min(len(self.calls) - 1, len(self.steps) - 1)]
        if isinstance(step, Exception):
            raise step
        return step


class PerUrlGenerator:
    """Generator whose behaviour depends on the URL in the prompt."""

    model = "test/per-url"

    def __init__(
        self,
        failing: set[str] | None = None,
        delays: dict[str, float] | None = None,
    ) -> None:
        self.failing = failing or set()
        self.delays = delays or {}
        self.calls: list[str] = []

    async def generate(
        self,
        prompt: str,
        attempt: int,
        previous: MetadataCandidate | None = None,
    ) -> MetadataCandidate:
        url = prompt.split('URL: "', 1)[1].split('"', 1)[0]
        self.calls.append(url)
        await asyncio.sleep(self.delays.get(url, 0))
        if url in self.failing:
            raise TransportError("503 Service Unavailable")
        return candidate(keyword=url.rsplit("/", 1)[-1] or "home")


@pytest.fixture
def valid_candidate() -> MetadataCandidate:
    return candidate()
