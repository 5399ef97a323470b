"""Data models."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class PageTarget:
    url: str
    method: str = "GET"


@dataclass(frozen=True)
class Circuit:
    index: int  # 0..65535
    slug: str
    display_name: str


@dataclass(frozen=True)
class Driver:
    id: str  # e.g. NINFAR01
    slug: str
    display_name: str


@dataclass(frozen=True)
class Team:
    slug: str
    display_name: str


Fragment = Circuit | Driver | Team


@dataclass
class Record:
    kind: str  # race_summary / race_result / driver_summary / ...
    year: int
    fields: dict[str, str]
    link: str | None = None  # summary rows only
    fragment: Fragment | None = None  # detail rows only


@dataclass
class PageResult:
    kind: str
    year: int
    headers: dict[str, str] | None
    records: list[Record] = field(default_factory=list)
    fragment: Fragment | None = None
    source_url: str | None = None
