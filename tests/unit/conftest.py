"""Shared fixtures for the unit suite."""

from __future__ import annotations

import json
from importlib import resources
from pathlib import Path
from typing import Any, Callable, Iterator

import pytest

from phone_territory.tables import get_tables


@pytest.fixture
def fresh_tables(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Drop the cached tables before and after the test."""
    monkeypatch.delenv("PHONE_TERRITORY_DATA_DIR", raising=False)
    get_tables.cache_clear()
    yield
    get_tables.cache_clear()


@pytest.fixture
def packaged_data() -> dict[str, Any]:
    """The shipped JSON files, decoded."""
    data = resources.files("phone_territory").joinpath("data")
    return {
        "calling_codes": json.loads(data.joinpath("calling_codes.json").read_text("utf-8")),
        "prefixes": json.loads(data.joinpath("prefixes.json").read_text("utf-8")),
    }


@pytest.fixture
def write_data_dir(tmp_path: Path) -> Callable[..., Path]:
    """Write ``calling_codes.json`` / ``prefixes.json`` into a temp directory."""

    def _write(calling_codes: Any, prefixes: Any) -> Path:
        (tmp_path / "calling_codes.json").write_text(json.dumps(calling_codes), "utf-8")
        (tmp_path / "prefixes.json").write_text(json.dumps(prefixes), "utf-8")
        return tmp_path

    return _write
