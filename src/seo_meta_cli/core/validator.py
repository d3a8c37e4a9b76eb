"""URL extraction from free-form text (manual entry or an uploaded list)."""

from __future__ import annotations

import re
from pathlib import Path
from urllib.parse import urlparse

_DELIMITERS = re.compile(r"[\n,]+")
_WHITESPACE = re.compile(r"\s")


def is_valid_url(value: str) -> bool:
    """Return True if *value* is an absolute URL with a scheme and a host."""
    if not value or _WHITESPACE.search(value):
        return False
    try:
        parsed = urlparse(value)
        # Accessing .port validates it; raises ValueError when out of range.
        parsed.port
    except ValueError:
        return False
    return bool(parsed.scheme and parsed.netloc and parsed.hostname)


def parse_urls(text: str) -> list[str]:
    """Split *text* on newlines/commas and keep the entries that are valid URLs.

    Order is preserved and duplicates are kept. Malformed entries are dropped
    silently.
    """
    if not text:
        return []
    entries = (part.strip() for part in _DELIMITERS.split(text))
    return [entry for entry in entries if entry and is_valid_url(entry)]


def partition_entries(text: str) -> tuple[list[str], list[str]]:
    """Split *text* into (accepted, rejected) non-empty entries."""
    accepted: list[str] = []
    rejected: list[str] = []
    for part in _DELIMITERS.split(text or ""):
        entry = part.strip()
        if not entry:
            continue
        (accepted if is_valid_url(entry) else rejected).append(entry)
    return accepted, rejected


def read_url_file(path: str) -> str:
    """Read a .txt or .csv URL list as text.

    Raises FileNotFoundError if the file does not exist.
    """
    return Path(path).read_text(encoding="utf-8-sig")
