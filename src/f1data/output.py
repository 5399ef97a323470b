"""Console lines and CSV export for decoded records."""

import csv
import logging
from collections.abc import Iterable
from dataclasses import asdict
from pathlib import Path

from f1data.models import PageResult, Record

logger = logging.getLogger(__name__)

_PLACEHOLDER = "-"


def format_record(record: Record) -> str:
    body = ", ".join(f"{k}={v!r}" for k, v in record.fields.items())
    return f"{record.kind}({body})"


def page_prefix(page: PageResult) -> str:
    """``[year][Display (slug)]`` for detail pages, empty for summaries."""
    if page.fragment is None:
        return ""
    display_name = page.fragment.display_name or _PLACEHOLDER
    slug = page.fragment.slug or _PLACEHOLDER
    return f"[{page.year}][{display_name} ({slug})]"


def format_page(page: PageResult) -> list[str]:
    prefix = page_prefix(page)
    lines = []
    for record in page.records:
        line = format_record(record)
        lines.append(f"{prefix} {line}" if prefix else line)
    return lines


def _fragment_columns(record: Record) -> dict[str, str]:
    if record.fragment is None:
        return {}
    return {
        f"entity_{k}": str(v) for k, v in asdict(record.fragment).items()
    }


def _records_to_dicts(records: Iterable[Record]) -> list[dict]:
    """Flatten records to CSV rows: year, entity identity, fields, link."""
    rows = []
    for r in records:
        row = {"kind": r.kind, "year": str(r.year)}
        row.update(_fragment_columns(r))
        row.update(r.fields)
        if r.link is not None:
            row["link"] = r.link
        rows.append(row)
    return rows


def write_records_csv(records: Iterable[Record], path: Path) -> int:
    """Write records to CSV with LF line endings. Returns the row count.

    Columns are taken in first-seen order, so a file mixing kinds gets the
    union of their columns with blanks where a kind has no value.
    """
    rows = _records_to_dicts(records)
    fieldnames: list[str] = []
    for row in rows:
        for key in row:
            if key not in fieldnames:
                fieldnames.append(key)

    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8", newline="") as f:
        writer = csv.DictWriter(
            f, fieldnames=fieldnames, quoting=csv.QUOTE_MINIMAL,
            lineterminator="\n", restval="",
        )
        writer.writeheader()
        writer.writerows(rows)
    logger.info("Wrote %d rows to %s", len(rows), path)
    return len(rows)
