"""seo-meta CLI entry point."""

from __future__ import annotations

import typer

from seo_meta_cli import __version__
from seo_meta_cli.cli import generate, validate

app = typer.Typer(
    help="Generate length-checked SEO titles, descriptions, and focus keywords with an LLM.",
    no_args_is_help=True,
)


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"seo-meta {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(
        False, "--version", callback=_version_callback, is_eager=True,
        help="Show the version and exit",
    ),
) -> None:
    """Generate length-checked SEO metadata for a batch of URLs."""


generate.register(app)
validate.register(app)
