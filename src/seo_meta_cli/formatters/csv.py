"""CSV export for generated metadata."""

from __future__ import annotations

import csv
import io
from collections.abc import Iterable

from seo_meta_cli.core.models import BatchGenerateResult, MetadataResult

CSV_HEADERS = [
    "Page URL",
    "Page Title",
    "Title Length",
    "Page Description",
    "Description Length",
    "Focus Keyword",
]


def format_results_csv(results: Iterable[MetadataResult]) -> str:
    """Format successful results as CSV.

    The header row is unquoted; every data field is double-quoted with
    embedded quotes doubled. Error rows are left out.
    """
    output = io.StringIO()
    output.write(",".join(CSV_HEADERS) + "\n")

    writer = csv.writer(output, quoting=csv.QUOTE_ALL, lineterminator="\n")
    for row in results:
        if row.error:
            continue
        writer.writerow([
            row.url,
            row.title,
            row.title_length,
            row.description,
            row.description_length,
            row.focus_keyword,
        ])

    # Rows are newline-joined with no trailing newline.
    return output.getvalue().rstrip("\n")


def format_batch_csv(batch: BatchGenerateResult) -> str:
    return format_results_csv(batch.results)
