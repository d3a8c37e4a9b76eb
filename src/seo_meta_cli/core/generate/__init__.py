"""LLM-powered metadata generation: prompts, client, retry loop, batching."""

from seo_meta_cli.core.generate.batch import generate_batch, generate_from_text
from seo_meta_cli.core.generate.client import GenerationClient
from seo_meta_cli.core.generate.retry import MAX_RETRIES, run_workflow

__all__ = [
    "MAX_RETRIES",
    "GenerationClient",
    "generate_batch",
    "generate_from_text",
    "run_workflow",
]
