"""Generate command — LLM-powered titles, descriptions, and focus keywords."""

from __future__ import annotations

import asyncio

import typer
from rich.console import Console

from seo_meta_cli.cli._helpers import collect_input, configure_logging, write_output
from seo_meta_cli.core.config import detect_model, load_config
from seo_meta_cli.core.errors import ConfigurationError, InputError
from seo_meta_cli.core.generate import GenerationClient, generate_batch
from seo_meta_cli.core.models import BatchGenerateResult, MetadataResult, OutputFormat
from seo_meta_cli.core.validator import parse_urls
from seo_meta_cli.formatters.csv import format_batch_csv

console = Console()


def _render(
    batch: BatchGenerateResult, format: OutputFormat, output: str | None
) -> None:
    if format == OutputFormat.table:
        from seo_meta_cli.formatters.rich_output import render_batch_rich

        render_batch_rich(batch, console)
        if output:
            write_output(format_batch_csv(batch), output, console=console)
        return

    if format == OutputFormat.json:
        payload = batch.model_dump_json(indent=2, by_alias=True)
    else:
        payload = format_batch_csv(batch)

    if output:
        write_output(payload, output, console=console)
    else:
        typer.echo(payload)


def register(app: typer.Typer) -> None:
    """Register the generate command onto the Typer app."""

    @app.command()
    def generate(
        urls: list[str] = typer.Argument(
            None, help="URLs to generate metadata for (newline/comma separated lists allowed)"
        ),
        file: str = typer.Option(
            None, "--file", "-F", help="Path to .txt or .csv file with URLs"
        ),
        format: OutputFormat = typer.Option(
            None, "--format", "-f", help="Output format: table, json, or csv"
        ),
        output: str = typer.Option(
            None, "--output", "-o",
            help="Write results to this file (CSV for table/csv, JSON for json)",
        ),
        model: str = typer.Option(
            None, "--model", "-m", help="LLM model to use (auto-detected if not set)"
        ),
        timeout: float = typer.Option(
            None, "--timeout", "-t", help="Per-request timeout in seconds"
        ),
        strict: bool = typer.Option(
            False, "--strict", help="Exit code 1 if any URL failed"
        ),
        verbose: bool = typer.Option(
            False, "--verbose", "-v", help="Log every generation attempt"
        ),
    ) -> None:
        """Generate SEO title, meta description, and focus keyword for each URL."""
        try:
            cfg = load_config()
        except ConfigurationError as e:
            console.print(f"[red]Error:[/red] {e}")
            raise SystemExit(1)

        configure_logging(verbose or cfg.verbose)
        effective_format = format or cfg.format
        effective_model = model or cfg.model or detect_model()
        effective_timeout = timeout if timeout is not None else cfg.timeout

        text = collect_input(urls, file, console=console)
        url_list = parse_urls(text)
        if not url_list:
            console.print(
                "[red]Error:[/red] No valid URLs found. "
                "Provide absolute URLs such as https://example.com/page."
            )
            raise SystemExit(1)

        try:
            client = GenerationClient(effective_model, timeout=effective_timeout)
        except ConfigurationError as e:
            console.print(f"[red]Error:[/red] {e}")
            raise SystemExit(1)

        done = 0

        def on_progress(url: str, result: MetadataResult) -> None:
            nonlocal done
            done += 1
            status.update(f"Generating metadata... {done}/{len(url_list)} done")

        try:
            with console.status(
                f"Generating metadata for {len(url_list)} URL(s) with {effective_model}..."
            ) as status:
                batch = asyncio.run(
                    generate_batch(url_list, client, progress_callback=on_progress)
                )
        except InputError as e:
            console.print(f"[red]Error:[/red] {e}")
            raise SystemExit(1)

        _render(batch, effective_format, output)

        if strict and batch.failed:
            raise SystemExit(1)
