"""Shared pytest fixtures for loading HTML test fixtures."""

from pathlib import Path

import pytest

FIXTURES_DIR = Path(__file__).parent / "fixtures"


def load_fixture(name: str) -> str:
    return (FIXTURES_DIR / name).read_text(encoding="utf-8")


@pytest.fixture()
def race_summary_html() -> str:
    return load_fixture("race_summary.html")


@pytest.fixture()
def race_result_html() -> str:
    return load_fixture("race_result.html")


@pytest.fixture()
def driver_summary_html() -> str:
    return load_fixture("driver_summary.html")


@pytest.fixture()
def driver_result_html() -> str:
    return load_fixture("driver_result.html")


@pytest.fixture()
def team_summary_html() -> str:
    return load_fixture("team_summary.html")


@pytest.fixture()
def team_result_html() -> str:
    return load_fixture("team_result.html")


@pytest.fixture()
def fastest_laps_html() -> str:
    return load_fixture("fastest_laps.html")
