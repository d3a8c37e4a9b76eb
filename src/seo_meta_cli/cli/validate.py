"""Validate command — check URL input without calling the model."""

from __future__ import annotations

import typer
from rich.console import Console
from rich.markup import escape

from seo_meta_cli.cli._helpers import collect_input
from seo_meta_cli.core.validator import partition_entries

console = Console()


def register(app: typer.Typer) -> None:
    """Register the validate command onto the Typer app."""

    @app.command()
    def validate(
        urls: list[str] = typer.Argument(None, help="URLs or URL lists to check"),
        file: str = typer.Option(
            None, "--file", "-F", help="Path to .txt or .csv file with URLs"
        ),
    ) -> None:
        """List which entries would be accepted for generation."""
        text = collect_input(urls, file, console=console)
        accepted, rejected = partition_entries(text)

        for url in accepted:
            console.print(f"[green]OK[/green]   {escape(url)}", highlight=False)
        for entry in rejected:
            console.print(f"[red]SKIP[/red] {escape(entry)}", highlight=False)

        console.print(
            f"\n[bold]{len(accepted)}[/bold] valid, [bold]{len(rejected)}[/bold] rejected"
        )
        if not accepted:
            raise SystemExit(1)
