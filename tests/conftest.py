"""Pytest configuration and shared fixtures."""

from collections.abc import Callable, Iterator
from pathlib import Path

import pytest
import structlog

SCENARIO_A = """\
lat,lon,value@Interp
float,float,float
10.0,20.0,5.5
11.0,21.0,6.6
"""


@pytest.fixture(autouse=True)
def reset_structlog() -> Iterator[None]:
    """Undo logging configuration done by a test."""
    yield
    structlog.reset_defaults()


@pytest.fixture
def write_table(tmp_path: Path) -> Callable[..., Path]:
    """Return a factory writing table text to a file under tmp_path."""

    def _write(text: str, name: str = "table.csv") -> Path:
        path = tmp_path / name
        path.write_text(text, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def scenario_a(write_table: Callable[..., Path]) -> Path:
    """Two-row float table with coordinates lat/lon and payload group Interp."""
    return write_table(SCENARIO_A)


@pytest.fixture
def mixed_table(write_table: Callable[..., Path]) -> Path:
    """Table with one column of every declared type and some missing cells."""
    return write_table(
        "station_id,Station/name,time@MetaData,height,ObsBias/brightness_temperature\n"
        "int,string,datetime,float,integer\n"
        "1,alpha,2021-01-01T00:00:00Z,10.5,3\n"
        "2,_,2021-01-02T00:00:00Z,_,_\n"
        "_,gamma,_,30.25,5\n"
    )
