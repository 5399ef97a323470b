"""Summary/detail scrape orchestration.

Detail pages are addressed by identifiers that only appear in the links of
the season's summary page. For each year the summary is scraped first, every
row is resolved into an entity fragment and indexed by name, and the
selected fragments are then used to build the detail page targets.
"""

import logging
from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass

from f1data import schemas, targets
from f1data.fetch import Fetcher
from f1data.models import Fragment, PageResult, PageTarget
from f1data.parse_table import parse_page
from f1data.resolve import resolve_circuit, resolve_driver, resolve_team
from f1data.schemas import TableSchema
from f1data.util import EntityNotFound, F1dataError

logger = logging.getLogger(__name__)

YEAR_MIN = 1950
YEAR_MAX = 2023


@dataclass(frozen=True)
class EntitySpec:
    name: str
    summary_schema: TableSchema
    summary_target: Callable[[int], PageTarget]
    label_field: str  # summary column holding the display name
    detail_schema: TableSchema | None = None
    detail_target: Callable[[int, Fragment], PageTarget] | None = None
    resolve: Callable[[str, str], Fragment] | None = None

    @property
    def has_detail(self) -> bool:
        return self.detail_schema is not None


ENTITIES: dict[str, EntitySpec] = {
    "race": EntitySpec(
        name="race",
        summary_schema=schemas.RACE_SUMMARY,
        summary_target=targets.race_summary_target,
        label_field="grand_prix",
        detail_schema=schemas.RACE_RESULT,
        detail_target=targets.race_result_target,
        resolve=resolve_circuit,
    ),
    "driver": EntitySpec(
        name="driver",
        summary_schema=schemas.DRIVER_SUMMARY,
        summary_target=targets.driver_summary_target,
        label_field="driver",
        detail_schema=schemas.DRIVER_RESULT,
        detail_target=targets.driver_result_target,
        resolve=resolve_driver,
    ),
    "team": EntitySpec(
        name="team",
        summary_schema=schemas.TEAM_SUMMARY,
        summary_target=targets.team_summary_target,
        label_field="team",
        detail_schema=schemas.TEAM_RESULT,
        detail_target=targets.team_result_target,
        resolve=resolve_team,
    ),
    "fastest-lap": EntitySpec(
        name="fastest-lap",
        summary_schema=schemas.FASTEST_LAP_SUMMARY,
        summary_target=targets.fastest_lap_summary_target,
        label_field="driver",
    ),
}


def year_range(
    year: int | None,
    year_min: int = YEAR_MIN,
    year_max: int = YEAR_MAX,
) -> range:
    """Inclusive range of seasons; an exact year takes precedence."""
    if year is not None:
        return range(year, year + 1)
    return range(year_min, year_max + 1)


def _key(name: str) -> str:
    return name.strip().lower()


class NameIndex:
    """Lookup of a season's entities by slug and by display name."""

    def __init__(self) -> None:
        self.by_name: dict[str, Fragment] = {}
        self.by_display_name: dict[str, Fragment] = {}
        # every distinct fragment in page order; slugs may repeat within a
        # season (e.g. two races at the same circuit)
        self._fragments: dict[Fragment, None] = {}

    def add(self, fragment: Fragment) -> None:
        self._fragments[fragment] = None
        self.by_name[_key(fragment.slug)] = fragment
        self.by_display_name[_key(fragment.display_name)] = fragment

    def lookup(self, name: str) -> Fragment | None:
        key = _key(name)
        for index in (self.by_name, self.by_display_name):
            if key in index:
                return index[key]
        return None

    def entities(self) -> list[Fragment]:
        return list(self._fragments)

    def __len__(self) -> int:
        return len(self._fragments)


def _fetch_and_parse(
    fetcher: Fetcher,
    target: PageTarget,
    schema: TableSchema,
    year: int,
    fragment: Fragment | None = None,
) -> PageResult:
    html = fetcher.fetch(target)
    return parse_page(html, schema, year, fragment=fragment, source_url=target.url)


def scrape_summary(fetcher: Fetcher, entity: EntitySpec, year: int) -> PageResult:
    """Fetch and parse the summary page of *entity* for *year*."""
    what = f"{entity.name} result summary {year}"
    try:
        target = entity.summary_target(year)
    except F1dataError as e:
        e.add_context(f"create scrape target: {what}")
        raise
    try:
        return _fetch_and_parse(fetcher, target, entity.summary_schema, year)
    except F1dataError as e:
        e.add_context(f"scrape: {what}")
        raise


def scrape_detail(
    fetcher: Fetcher,
    entity: EntitySpec,
    year: int,
    fragment: Fragment,
) -> PageResult:
    """Fetch and parse the detail page of one resolved entity."""
    if not entity.has_detail:
        raise ValueError(f"{entity.name} has no detail pages")
    what = f"{entity.name} result {year} ({fragment.display_name})"
    try:
        target = entity.detail_target(year, fragment)
    except F1dataError as e:
        e.add_context(f"create scrape target: {what}")
        raise
    try:
        return _fetch_and_parse(
            fetcher, target, entity.detail_schema, year, fragment=fragment,
        )
    except F1dataError as e:
        e.add_context(f"scrape: {what}")
        raise


def build_name_index(entity: EntitySpec, summary: PageResult) -> NameIndex:
    """Resolve every summary row into a fragment and index it.

    An unresolvable row aborts the whole index.
    """
    index = NameIndex()
    for record in summary.records:
        label = record.fields[entity.label_field]
        try:
            fragment = entity.resolve(record.link or "", label)
        except F1dataError as e:
            e.add_context(
                f"obtain {entity.name} infos from summary data "
                f"({entity.name}: `{label}`)"
            )
            raise
        index.add(fragment)
    logger.debug("%s index (%d): %s", entity.name, summary.year, index.by_name)
    return index


def select_entities(
    index: NameIndex,
    year: int,
    name: str | None = None,
) -> list[Fragment]:
    """All indexed entities, or the single one matching *name*."""
    if name is None:
        return index.entities()
    fragment = index.lookup(name)
    if fragment is None:
        raise EntityNotFound(year, _key(name))
    return [fragment]


def iter_summaries(
    fetcher: Fetcher,
    entity: EntitySpec,
    years: Iterable[int],
) -> Iterator[PageResult]:
    for year in years:
        yield scrape_summary(fetcher, entity, year)


def iter_results(
    fetcher: Fetcher,
    entity: EntitySpec,
    years: Iterable[int],
    name: str | None = None,
) -> Iterator[PageResult]:
    """Yield the detail pages of *entity* for every year in *years*.

    With *name*, only the entity matching it (by slug first, then by display
    name, case-insensitively) is fetched. Any failure stops the whole run.
    """
    if not entity.has_detail:
        raise ValueError(f"{entity.name} has no detail pages")

    for year in years:
        summary = scrape_summary(fetcher, entity, year)
        index = build_name_index(entity, summary)
        selected = select_entities(index, year, name)
        logger.info(
            "%d: %d %s entities indexed, %d selected",
            year, len(index), entity.name, len(selected),
        )
        for fragment in selected:
            yield scrape_detail(fetcher, entity, year, fragment)
