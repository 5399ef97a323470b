"""Tests for f1data.targets."""

import pytest

from f1data import targets
from f1data.models import Circuit, Driver, PageTarget, Team
from f1data.targets import (
    driver_result_target,
    driver_summary_target,
    fastest_lap_summary_target,
    race_result_target,
    race_summary_target,
    team_result_target,
    team_summary_target,
)
from f1data.util import InvalidUrl

ITALY = Circuit(index=100, slug="italy", display_name="Italy")
FARINA = Driver(id="NINFAR01", slug="nino-farina", display_name="Nino Farina FAR")
ALFA = Team(slug="alfa_romeo_ferrari", display_name="Alfa Romeo Ferrari")


class TestSummaryTargets:
    def test_race_summary(self) -> None:
        assert race_summary_target(1950).url == (
            "https://www.formula1.com/en/results.html/1950/races.html"
        )

    def test_driver_summary(self) -> None:
        assert driver_summary_target(1950).url == (
            "https://www.formula1.com/en/results.html/1950/drivers.html"
        )

    def test_team_summary(self) -> None:
        assert team_summary_target(1958).url == (
            "https://www.formula1.com/en/results.html/1958/team.html"
        )

    def test_fastest_lap_summary(self) -> None:
        assert fastest_lap_summary_target(2023).url == (
            "https://www.formula1.com/en/results.html/2023/fastest-laps.html"
        )

    def test_method_is_get(self) -> None:
        assert race_summary_target(1950).method == "GET"


class TestDetailTargets:
    """Tests for the per-entity detail page builders."""

    def test_race_result(self) -> None:
        assert race_result_target(1950, ITALY).url == (
            "https://www.formula1.com/en/results.html/1950/races/100/italy/race-result.html"
        )

    def test_driver_result(self) -> None:
        assert driver_result_target(1950, FARINA).url == (
            "https://www.formula1.com/en/results.html/1950/drivers/NINFAR01/nino-farina.html"
        )

    def test_team_result(self) -> None:
        assert team_result_target(1950, ALFA).url == (
            "https://www.formula1.com/en/results.html/1950/team/alfa_romeo_ferrari.html"
        )

    def test_display_name_not_in_url(self) -> None:
        other = Circuit(index=100, slug="italy", display_name="Something Else")
        assert race_result_target(1950, other) == race_result_target(1950, ITALY)

    def test_deterministic(self) -> None:
        first = race_result_target(1951, ITALY)
        second = race_result_target(1951, ITALY)
        assert first == second
        assert isinstance(first, PageTarget)


class TestInvalidUrl:
    def test_bad_base_url_raises(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr(targets, "BASE_URL", "not a url")
        with pytest.raises(InvalidUrl, match="parse url"):
            race_summary_target(1950)
