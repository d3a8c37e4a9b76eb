"""Generate metadata for a URL list and record convergence statistics.

Usage:
    python benchmarks/run_benchmark.py [model]

Requires seo-meta-cli to be installed: pip install -e ".[dev]"
Reads benchmarks/urls.txt; results are saved to benchmarks/data.json.
"""

import asyncio
import sys
import time
from pathlib import Path

from seo_meta_cli.core.config import detect_model
from seo_meta_cli.core.generate import GenerationClient, generate_from_text


async def main() -> None:
    url_file = Path(__file__).parent / "urls.txt"
    if not url_file.exists():
        print("Error: urls.txt not found")
        sys.exit(1)

    model = sys.argv[1] if len(sys.argv) > 1 else detect_model()
    client = GenerationClient(model)
    print(f"Generating metadata with {model}...\n")

    start = time.time()
    batch = await generate_from_text(
        url_file.read_text(),
        client,
        progress_callback=lambda url, result: print(
            f"  {'FAIL' if result.error else 'ok  '} {url}"
        ),
    )
    elapsed = time.time() - start

    out_path = Path(__file__).parent / "data.json"
    out_path.write_text(batch.model_dump_json(indent=2, by_alias=True))

    print(f"\nDone in {elapsed:.1f}s")
    print(f"  Succeeded: {batch.succeeded}")
    print(f"  Failed:    {batch.failed}")
    print(f"  Output:    {out_path}")

    if batch.failed:
        print("\nFailed URLs:")
        for result in batch.results:
            if result.error:
                print(f"  {result.url}: {result.description}")


if __name__ == "__main__":
    asyncio.run(main())
