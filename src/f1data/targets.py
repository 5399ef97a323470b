"""Page target builders for the results archive."""

import requests

from f1data.models import Circuit, Driver, PageTarget, Team
from f1data.util import InvalidUrl

BASE_URL = "https://www.formula1.com"
ARCHIVE_PATH = "/en/results.html"


def _make_target(url: str) -> PageTarget:
    """Validate *url* by preparing a GET request for it."""
    try:
        prepared = requests.Request("GET", url).prepare()
    except requests.RequestException as e:
        raise InvalidUrl(url, e) from e
    return PageTarget(url=prepared.url)


def _archive_url(year: int, path: str) -> str:
    return f"{BASE_URL}{ARCHIVE_PATH}/{year}/{path}"


def race_summary_target(year: int) -> PageTarget:
    return _make_target(_archive_url(year, "races.html"))


def race_result_target(year: int, circuit: Circuit) -> PageTarget:
    return _make_target(
        _archive_url(year, f"races/{circuit.index}/{circuit.slug}/race-result.html")
    )


def driver_summary_target(year: int) -> PageTarget:
    return _make_target(_archive_url(year, "drivers.html"))


def driver_result_target(year: int, driver: Driver) -> PageTarget:
    return _make_target(_archive_url(year, f"drivers/{driver.id}/{driver.slug}.html"))


def team_summary_target(year: int) -> PageTarget:
    return _make_target(_archive_url(year, "team.html"))


def team_result_target(year: int, team: Team) -> PageTarget:
    return _make_target(_archive_url(year, f"team/{team.slug}.html"))


def fastest_lap_summary_target(year: int) -> PageTarget:
    return _make_target(_archive_url(year, "fastest-laps.html"))
