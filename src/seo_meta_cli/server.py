"""FastMCP server exposing metadata generation as a tool."""

from __future__ import annotations

from typing import Any

from fastmcp import FastMCP

from seo_meta_cli.core.config import detect_model, load_config
from seo_meta_cli.core.errors import ConfigurationError, InputError
from seo_meta_cli.core.generate import GenerationClient, generate_from_text

mcp = FastMCP(name="seo-meta")


@mcp.tool
async def generate_metadata(urls: str, model: str | None = None) -> dict[str, Any]:
    """Generate SEO title, meta description, and focus keyword for each URL.

    Args:
        urls: Newline- or comma-separated list of absolute URLs.
        model: Optional litellm model identifier (auto-detected if omitted).

    Returns one result per valid URL, in input order. Failed URLs carry
    ``error: true`` with the failure reason in ``description``.
    """
    try:
        cfg = load_config()
        client = GenerationClient(
            model or cfg.model or detect_model(), timeout=cfg.timeout
        )
        batch = await generate_from_text(urls, client)
    except (InputError, ConfigurationError) as e:
        return {"error": str(e)}
    return batch.model_dump(by_alias=True)


def main() -> None:
    mcp.run()


if __name__ == "__main__":
    main()
