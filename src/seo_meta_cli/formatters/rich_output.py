"""Rich table rendering for generated metadata."""

from __future__ import annotations

from rich.console import Console
from rich.table import Table
from rich.text import Text

from seo_meta_cli.core.models import (
    MAX_DESC_LEN,
    MAX_TITLE_LEN,
    MIN_DESC_LEN,
    MIN_TITLE_LEN,
    BatchGenerateResult,
    MetadataResult,
)


def length_text(length: int, low: int, high: int) -> Text:
    """Length cell, green when inside [low, high], red otherwise."""
    style = "green" if low <= length <= high else "red"
    return Text(str(length), style=style)


def _result_row(result: MetadataResult) -> list[Text]:
    if result.error:
        return [
            Text(result.url),
            Text(result.title, style="bold red"),
            Text("-", style="dim"),
            Text(result.description, style="red"),
            Text("-", style="dim"),
            Text(result.focus_keyword, style="dim"),
        ]
    return [
        Text(result.url),
        Text(result.title),
        length_text(result.title_length, MIN_TITLE_LEN, MAX_TITLE_LEN),
        Text(result.description),
        length_text(result.description_length, MIN_DESC_LEN, MAX_DESC_LEN),
        Text(result.focus_keyword, style="cyan"),
    ]


def render_batch_rich(batch: BatchGenerateResult, console: Console) -> None:
    """Print the results table followed by a one-line summary."""
    table = Table(title="Generated SEO Metadata", show_lines=True)
    table.add_column("Page URL", style="bold", overflow="fold")
    table.add_column("Page Title")
    table.add_column("Len", justify="right")
    table.add_column("Page Description")
    table.add_column("Len", justify="right")
    table.add_column("Focus Keyword")

    for result in batch.results:
        table.add_row(*_result_row(result))

    console.print(table)
    summary = f"\n[bold]Model:[/bold] {batch.model}  [green]{batch.succeeded} succeeded[/green]"
    if batch.failed:
        summary += f"  [red]{batch.failed} failed[/red]"
    console.print(summary)
