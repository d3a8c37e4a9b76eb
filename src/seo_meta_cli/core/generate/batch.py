"""Batch generation orchestrator for multiple URLs."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable, Sequence

from seo_meta_cli.core.errors import InputError
from seo_meta_cli.core.generate.retry import MAX_RETRIES, Generator, run_workflow
from seo_meta_cli.core.models import BatchGenerateResult, MetadataResult
from seo_meta_cli.core.validator import parse_urls

logger = logging.getLogger(__name__)

ProgressCallback = Callable[[str, MetadataResult], None]


async def _generate_one(
    url: str,
    client: Generator,
    max_retries: int,
    progress_callback: ProgressCallback | None,
) -> MetadataResult:
    """Run one URL's workflow and always return a MetadataResult."""
    try:
        outcome = await run_workflow(url, client, max_retries=max_retries)
        result = outcome.to_result()
    except Exception as e:
        logger.exception("Unexpected failure while processing %s", url)
        result = MetadataResult.from_error(url, str(e) or "An unknown error occurred.")

    if progress_callback is not None:
        try:
            progress_callback(url, result)
        except Exception:
            logger.exception("Progress callback failed for %s", url)
    return result


async def generate_batch(
    urls: Sequence[str],
    client: Generator,
    *,
    max_retries: int = MAX_RETRIES,
    progress_callback: ProgressCallback | None = None,
) -> BatchGenerateResult:
    """Generate metadata for every URL concurrently.

    Returns one result per input URL in input order. Per-URL failures become
    error-flagged results; only an empty URL list raises (InputError).
    """
    if not urls:
        raise InputError("Please provide at least one URL.")

    logger.info("Generating metadata for %d URL(s)", len(urls))
    results = await asyncio.gather(
        *(_generate_one(url, client, max_retries, progress_callback) for url in urls)
    )
    return BatchGenerateResult(
        model=getattr(client, "model", "unknown"),
        results=list(results),
    )


async def generate_from_text(
    text: str,
    client: Generator,
    *,
    max_retries: int = MAX_RETRIES,
    progress_callback: ProgressCallback | None = None,
) -> BatchGenerateResult:
    """Extract URLs from raw text and run the batch on them."""
    urls = parse_urls(text)
    if not urls:
        raise InputError("Please provide at least one valid URL.")
    return await generate_batch(
        urls, client, max_retries=max_retries, progress_callback=progress_callback
    )
