"""
Pytest configuration and fixtures for Chinese Mainland Holidays tests.

Provides holiday pack factories and isolation of the cached default table.
"""
from pathlib import Path
from typing import Any, Optional

import pytest
import yaml

from chinese_mainland_holidays.packs import reset_default_table


# =============================================================================
# Factory Helpers
# =============================================================================

def make_arrangement(
    festival: str = "national_day",
    start: str = "2030-10-01",
    end: str = "2030-10-07",
    workdays: tuple[str, ...] = ("2030-09-29", "2030-10-12"),
) -> dict[str, Any]:
    """Create an arrangement entry. 2030-10-01 is a Tuesday."""
    return {
        "festival": festival,
        "start": start,
        "end": end,
        "workdays": list(workdays),
    }


def make_year(
    year: int = 2030,
    arrangements: Optional[list[dict[str, Any]]] = None,
    notice: str = "Test notice",
) -> dict[str, Any]:
    """Create a year schedule entry."""
    return {
        "year": year,
        "notice": notice,
        "arrangements": arrangements if arrangements is not None else [make_arrangement()],
    }


def make_pack(
    years: Optional[list[dict[str, Any]]] = None,
    **overrides: Any,
) -> dict[str, Any]:
    """Create a holiday pack dictionary with sensible defaults."""
    pack: dict[str, Any] = {
        "schema_version": "1.0.0",
        "id": "test-pack",
        "region": "cn",
        "name": "Test holidays",
        "years": years if years is not None else [make_year()],
    }
    pack.update(overrides)
    return pack


def write_pack(directory: Path, pack: dict[str, Any], name: str = "holidays.yaml") -> Path:
    """Write a pack dictionary as YAML and return its path."""
    path = directory / name
    path.write_text(yaml.safe_dump(pack, allow_unicode=True), encoding="utf-8")
    return path


# =============================================================================
# Fixtures
# =============================================================================

@pytest.fixture(autouse=True)
def isolated_default_table(monkeypatch):
    """Ensure every test starts from the bundled pack and no env overrides."""
    for name in ("CMH_DATA_PATH", "CMH_STRICT_SCHEMA", "CMH_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    reset_default_table()
    yield
    reset_default_table()


@pytest.fixture
def pack_data() -> dict[str, Any]:
    """A valid single-year (2030) holiday pack."""
    return make_pack()


@pytest.fixture
def pack_path(tmp_path, pack_data) -> Path:
    """The default test pack written to a temporary YAML file."""
    return write_pack(tmp_path, pack_data)
