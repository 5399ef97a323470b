"""Results archive table extraction and row decoding."""

import logging
from collections.abc import Iterable, Iterator

from bs4 import BeautifulSoup, Tag

from f1data.models import Fragment, PageResult, Record
from f1data.schemas import LIMITER_CLASS, Column, Strategy, TableSchema
from f1data.util import (
    DecodeError,
    InvalidColumnCount,
    MissingExpectedCell,
    TableNotFound,
    clean_text,
)

logger = logging.getLogger(__name__)


class RawTable:
    """A located <table> and lazy views over its header cells and body rows.

    Both views walk the parsed document, so consume them before dropping the
    table.
    """

    def __init__(self, table: Tag) -> None:
        self.table = table

    def header_cells(self) -> Iterator[Tag]:
        return self.table.css.iselect("thead > tr > th")

    def body_rows(self) -> Iterator[Tag]:
        return self.table.css.iselect("tbody > tr")


def locate_table(html: str, selector: str) -> RawTable:
    """Parse *html* and return the first table matching *selector*."""
    soup = BeautifulSoup(html, "html.parser")
    table = soup.select_one(selector)
    if table is None:
        raise TableNotFound(selector)
    return RawTable(table)


def _is_limiter(cell: Tag) -> bool:
    return any(c.lower() == LIMITER_CLASS for c in cell.get("class", []))


def filter_cells(cells: Iterable[Tag]) -> list[Tag]:
    """Drop decorative limiter cells."""
    return [c for c in cells if not _is_limiter(c)]


def _check_arity(cols: list[Tag], schema: TableSchema) -> None:
    if len(cols) == schema.arity:
        return
    # a short row names the first column it is missing
    missing = schema.names[len(cols)] if len(cols) < schema.arity else None
    raise InvalidColumnCount(schema.arity, len(cols), column=missing)


def _anchor(cell: Tag, column: Column) -> Tag:
    link = cell.find("a")
    if link is None:
        raise MissingExpectedCell("expected <a> element", column=column.name)
    return link


def _extract(cell: Tag, column: Column) -> str:
    if column.strategy is Strategy.ANCHOR_TEXT:
        return clean_text(_anchor(cell, column).get_text())
    if column.strategy is Strategy.SPANS:
        # Names are split across spans (first name, last name, abbreviation)
        parts = [clean_text(s.get_text()) for s in cell.find_all("span")]
        return " ".join(p for p in parts if p)
    return clean_text(cell.get_text(" "))


def _extract_href(cell: Tag, column: Column) -> str:
    href = _anchor(cell, column).get("href")
    if not href or not href.strip():
        raise MissingExpectedCell(
            "expected <a> element to contain url", column=column.name,
        )
    return href.strip()


def decode_row(
    cells: Iterable[Tag],
    schema: TableSchema,
) -> tuple[dict[str, str], str | None]:
    """Decode one row's cells into named fields plus the row link, if any."""
    cols = filter_cells(cells)
    _check_arity(cols, schema)

    fields: dict[str, str] = {}
    link = None
    for cell, column in zip(cols, schema.columns):
        fields[column.name] = _extract(cell, column)
        if column.link:
            link = _extract_href(cell, column)
    return fields, link


def decode_headers(cells: Iterable[Tag], schema: TableSchema) -> dict[str, str]:
    """Map each column name to the table's header label."""
    cols = filter_cells(cells)
    _check_arity(cols, schema)
    return {
        column.name: clean_text(cell.get_text(" "))
        for cell, column in zip(cols, schema.columns)
    }


def parse_page(
    html: str,
    schema: TableSchema,
    year: int,
    fragment: Fragment | None = None,
    source_url: str | None = None,
) -> PageResult:
    """Locate the schema's table in *html* and decode every row.

    A single bad row fails the whole page; no partial results.
    """
    table = locate_table(html, schema.selector)

    try:
        headers = decode_headers(table.header_cells(), schema)
    except DecodeError as e:
        e.add_context("parse table headers")
        raise

    records: list[Record] = []
    for row_no, row in enumerate(table.body_rows(), start=1):
        try:
            fields, link = decode_row(row.find_all("td"), schema)
        except DecodeError as e:
            e.add_context(f"parse table rows: row {row_no}")
            raise
        records.append(Record(
            kind=schema.kind, year=year, fields=fields,
            link=link, fragment=fragment,
        ))

    logger.info("Parsed %d %s rows for %d", len(records), schema.kind, year)
    return PageResult(
        kind=schema.kind,
        year=year,
        headers=headers,
        records=records,
        fragment=fragment,
        source_url=source_url,
    )
