"""Shared helpers for the generate and validate commands."""

from __future__ import annotations

import logging
import sys
from pathlib import Path

from rich.console import Console
from rich.logging import RichHandler

from seo_meta_cli.core.validator import read_url_file


def configure_logging(verbose: bool = False) -> None:
    """Send log records to stderr through Rich."""
    level = logging.DEBUG if verbose else logging.WARNING
    root = logging.getLogger()
    root.handlers[:] = [
        RichHandler(console=Console(stderr=True), show_path=False, rich_tracebacks=True)
    ]
    root.setLevel(level)
    for noisy in ("LiteLLM", "litellm", "httpx"):
        logging.getLogger(noisy).setLevel(logging.WARNING)


def collect_input(
    urls: list[str] | None,
    file: str | None,
    *,
    console: Console,
) -> str:
    """Gather raw URL text from arguments, a file, or piped stdin."""
    chunks: list[str] = list(urls or [])

    if file:
        try:
            chunks.append(read_url_file(file))
        except FileNotFoundError:
            console.print(f"[red]Error:[/red] File not found: {file}")
            raise SystemExit(1)
        except (OSError, UnicodeDecodeError) as e:
            console.print(f"[red]Error:[/red] Cannot read {file}: {e}")
            raise SystemExit(1)

    if not chunks and not sys.stdin.isatty():
        chunks.append(sys.stdin.read())

    return "\n".join(chunks)


def write_output(payload: str, output: str, *, console: Console) -> None:
    """Write a formatted payload to *output* and confirm on the console."""
    try:
        Path(output).write_text(payload + "\n", encoding="utf-8")
    except OSError as e:
        console.print(f"[red]Error:[/red] Cannot write {output}: {e}")
        raise SystemExit(1)
    console.print(f"[green]Saved to:[/green] {output}")
