"""Table layouts of the results archive.

The site layout is encoded here and nowhere else: one CSS selector per table
family and one column list per entity kind. Columns are listed in page order
after ``limiter`` padding cells are removed.
"""

from dataclasses import dataclass
from enum import Enum

# Summary listings (races, teams, fastest laps)
SUMMARY_TABLE_SELECTOR = (
    "div.resultsarchive-content>div.table-wrap>table.resultsarchive-table"
)
# Driver standings and per-driver / per-team detail pages
ARCHIVE_TABLE_SELECTOR = (
    "div.resultsarchive-wrapper>div.resultsarchive-content"
    ">div.table-wrap>table.resultsarchive-table"
)
# Race result pages put the table in the right-hand column
RACE_RESULT_TABLE_SELECTOR = (
    "div.resultsarchive-wrapper>div.resultsarchive-content"
    ">div.resultsarchive-col-right>table.resultsarchive-table"
)

LIMITER_CLASS = "limiter"


class Strategy(Enum):
    TEXT = "text"  # trimmed text of the cell
    ANCHOR_TEXT = "anchor_text"  # trimmed text of the cell's <a>
    SPANS = "spans"  # space-joined text of every <span> in the cell


@dataclass(frozen=True)
class Column:
    name: str
    strategy: Strategy = Strategy.TEXT
    link: bool = False  # also capture the <a href> of this cell


@dataclass(frozen=True)
class TableSchema:
    kind: str
    selector: str
    columns: tuple[Column, ...]

    @property
    def arity(self) -> int:
        return len(self.columns)

    @property
    def names(self) -> list[str]:
        return [c.name for c in self.columns]


RACE_SUMMARY = TableSchema(
    kind="race_summary",
    selector=SUMMARY_TABLE_SELECTOR,
    columns=(
        Column("grand_prix", Strategy.ANCHOR_TEXT, link=True),
        Column("date"),
        Column("winner", Strategy.SPANS),
        Column("car"),
        Column("laps"),
        Column("time"),
    ),
)

RACE_RESULT = TableSchema(
    kind="race_result",
    selector=RACE_RESULT_TABLE_SELECTOR,
    columns=(
        Column("pos"),
        Column("no"),
        Column("driver", Strategy.SPANS),
        Column("car"),
        Column("laps"),
        Column("time_retired"),
        Column("pts"),
    ),
)

DRIVER_SUMMARY = TableSchema(
    kind="driver_summary",
    selector=ARCHIVE_TABLE_SELECTOR,
    columns=(
        Column("pos"),
        Column("driver", Strategy.SPANS, link=True),
        Column("nationality"),
        Column("car", Strategy.ANCHOR_TEXT),
        Column("pts"),
    ),
)

DRIVER_RESULT = TableSchema(
    kind="driver_result",
    selector=ARCHIVE_TABLE_SELECTOR,
    columns=(
        Column("grand_prix", Strategy.ANCHOR_TEXT),
        Column("date"),
        Column("car", Strategy.ANCHOR_TEXT),
        Column("pos"),
        Column("pts"),
    ),
)

TEAM_SUMMARY = TableSchema(
    kind="team_summary",
    selector=SUMMARY_TABLE_SELECTOR,
    columns=(
        Column("pos"),
        Column("team", Strategy.ANCHOR_TEXT, link=True),
        Column("pts"),
    ),
)

TEAM_RESULT = TableSchema(
    kind="team_result",
    selector=ARCHIVE_TABLE_SELECTOR,
    columns=(
        Column("grand_prix", Strategy.ANCHOR_TEXT),
        Column("date"),
        Column("pts"),
    ),
)

FASTEST_LAP_SUMMARY = TableSchema(
    kind="fastest_lap_summary",
    selector=SUMMARY_TABLE_SELECTOR,
    columns=(
        Column("grand_prix"),
        Column("driver", Strategy.SPANS),
        Column("car"),
        Column("time"),
    ),
)
