"""Unit tests for reference table loading and validation."""

from __future__ import annotations

import copy
from pathlib import Path
from typing import Any, Callable

import pytest
from structlog.testing import capture_logs

from phone_territory import CallingCodes, DataIntegrityError, TerritoryCode, resolve
from phone_territory.tables import TerritoryTables, get_tables


# ---------------------------------------------------------------------------
# Packaged data
# ---------------------------------------------------------------------------


class TestPackagedTables:
    def test_covers_every_territory(self) -> None:
        tables = get_tables()
        assert set(tables.calling_codes) == set(TerritoryCode)

    def test_prefix_count(self) -> None:
        assert len(get_tables().prefixes) == 611

    def test_every_territory_reachable_by_some_prefix(self) -> None:
        assert set(get_tables().prefixes.values()) == set(TerritoryCode)

    def test_prefix_lengths(self) -> None:
        lengths = {len(str(p)) for p in get_tables().prefixes}
        assert min(lengths) == 1
        assert max(lengths) == 7

    def test_nanp_entries_are_four_digits(self) -> None:
        for prefix in get_tables().prefixes:
            if str(prefix).startswith("1"):
                assert len(str(prefix)) == 4

    def test_known_entries(self) -> None:
        prefixes = get_tables().prefixes
        assert prefixes[7] is TerritoryCode.RU
        assert prefixes[262] is TerritoryCode.RE
        assert prefixes[262269] is TerritoryCode.YT
        assert prefixes[6189162] is TerritoryCode.CC
        assert prefixes[882] is TerritoryCode.XV
        assert prefixes[883] is TerritoryCode.XV

    def test_mappings_are_read_only(self) -> None:
        tables = get_tables()
        with pytest.raises(TypeError):
            tables.prefixes[1999] = TerritoryCode.US  # type: ignore[index]
        with pytest.raises(TypeError):
            tables.calling_codes[TerritoryCode.US] = CallingCodes.of(2)  # type: ignore[index]

    def test_tables_object_is_frozen(self) -> None:
        with pytest.raises(AttributeError):
            get_tables().source = "elsewhere"  # type: ignore[misc]

    def test_cached_per_process(self) -> None:
        assert get_tables() is get_tables()
        assert get_tables().source == "package"


# ---------------------------------------------------------------------------
# Loading from a directory
# ---------------------------------------------------------------------------


class TestLoadFromDirectory:
    def test_load_explicit_dir(
        self, packaged_data: dict[str, Any], write_data_dir: Callable[..., Path]
    ) -> None:
        prefixes = [p for p in packaged_data["prefixes"] if p[0] != "262269"]
        data_dir = write_data_dir(packaged_data["calling_codes"], prefixes)
        tables = TerritoryTables.load(data_dir)
        assert tables.source == str(data_dir)
        assert 262269 not in tables.prefixes

    def test_env_setting_selects_dir(
        self,
        fresh_tables: None,
        monkeypatch: pytest.MonkeyPatch,
        packaged_data: dict[str, Any],
        write_data_dir: Callable[..., Path],
    ) -> None:
        data_dir = write_data_dir(packaged_data["calling_codes"], [["33", "FR"]])
        monkeypatch.setenv("PHONE_TERRITORY_DATA_DIR", str(data_dir))
        tables = get_tables()
        assert tables.source == str(data_dir)
        assert dict(tables.prefixes) == {33: TerritoryCode.FR}

    def test_bad_log_level_does_not_block_lookups(
        self, fresh_tables: None, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("PHONE_TERRITORY_LOG_LEVEL", "verbose")
        assert resolve(12069359290) is TerritoryCode.US
        assert TerritoryCode.FR.calling_codes.primary == 33
        assert get_tables().source == "package"

    def test_load_logs_summary(self) -> None:
        with capture_logs() as logs:
            TerritoryTables.load()
        assert logs == [
            {
                "event": "tables_loaded",
                "log_level": "info",
                "source": "package",
                "territories": 247,
                "prefixes": 611,
            }
        ]

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(DataIntegrityError) as exc_info:
            TerritoryTables.load(tmp_path)
        assert exc_info.value.code == "data_integrity"
        assert isinstance(exc_info.value.__cause__, OSError)

    def test_invalid_json(self, tmp_path: Path) -> None:
        (tmp_path / "calling_codes.json").write_text("{not json", "utf-8")
        (tmp_path / "prefixes.json").write_text("[]", "utf-8")
        with pytest.raises(DataIntegrityError, match="not valid JSON"):
            TerritoryTables.load(tmp_path)

    def test_duplicate_json_key(self, tmp_path: Path) -> None:
        (tmp_path / "calling_codes.json").write_text('{"US": [1], "US": [2]}', "utf-8")
        (tmp_path / "prefixes.json").write_text("[]", "utf-8")
        with pytest.raises(DataIntegrityError, match="Duplicate key"):
            TerritoryTables.load(tmp_path)


# ---------------------------------------------------------------------------
# Validation of decoded data
# ---------------------------------------------------------------------------


class TestValidation:
    def test_from_raw_accepts_packaged_data(self, packaged_data: dict[str, Any]) -> None:
        tables = TerritoryTables.from_raw(
            packaged_data["calling_codes"], packaged_data["prefixes"]
        )
        assert tables.source == "memory"
        assert tables.calling_codes[TerritoryCode.BQ].all() == (5993, 5994, 5997)

    def test_missing_territory(self, packaged_data: dict[str, Any]) -> None:
        codes = copy.deepcopy(packaged_data["calling_codes"])
        del codes["FR"]
        with pytest.raises(DataIntegrityError, match="FR") as exc_info:
            TerritoryTables.from_raw(codes, [])
        assert exc_info.value.detail["missing"] == ["FR"]

    def test_unknown_territory_in_codes(self, packaged_data: dict[str, Any]) -> None:
        codes = copy.deepcopy(packaged_data["calling_codes"])
        codes["ZZ"] = [999]
        with pytest.raises(DataIntegrityError, match="Unknown territory 'ZZ'"):
            TerritoryTables.from_raw(codes, [])

    @pytest.mark.parametrize("bad", [[], [0], [1, 2, 3, 4], ["33"], 33])
    def test_bad_calling_codes(self, packaged_data: dict[str, Any], bad: Any) -> None:
        codes = copy.deepcopy(packaged_data["calling_codes"])
        codes["FR"] = bad
        with pytest.raises(DataIntegrityError):
            TerritoryTables.from_raw(codes, [])

    def test_codes_must_be_object(self) -> None:
        with pytest.raises(DataIntegrityError):
            TerritoryTables.from_raw([], [])

    def test_prefixes_must_be_array(self, packaged_data: dict[str, Any]) -> None:
        with pytest.raises(DataIntegrityError):
            TerritoryTables.from_raw(packaged_data["calling_codes"], {"33": "FR"})

    def test_duplicate_prefix(self, packaged_data: dict[str, Any]) -> None:
        with pytest.raises(DataIntegrityError, match="Duplicate prefix 33"):
            TerritoryTables.from_raw(
                packaged_data["calling_codes"], [["33", "FR"], ["33", "MC"]]
            )

    @pytest.mark.parametrize("digits", ["", "033", "12345678", "3a", 33, "-3"])
    def test_malformed_prefix(self, packaged_data: dict[str, Any], digits: Any) -> None:
        with pytest.raises(DataIntegrityError):
            TerritoryTables.from_raw(packaged_data["calling_codes"], [[digits, "FR"]])

    @pytest.mark.parametrize("digits", ["1", "12", "120", "12060"])
    def test_nanp_prefix_must_be_four_digits(
        self, packaged_data: dict[str, Any], digits: str
    ) -> None:
        with pytest.raises(DataIntegrityError, match="exactly 4 digits"):
            TerritoryTables.from_raw(packaged_data["calling_codes"], [[digits, "US"]])

    def test_unknown_territory_in_prefixes(self, packaged_data: dict[str, Any]) -> None:
        with pytest.raises(DataIntegrityError, match="prefixes.json"):
            TerritoryTables.from_raw(packaged_data["calling_codes"], [["33", "fr"]])

    @pytest.mark.parametrize("entry", [["33"], ["33", "FR", "x"], "33"])
    def test_malformed_entry(self, packaged_data: dict[str, Any], entry: Any) -> None:
        with pytest.raises(DataIntegrityError):
            TerritoryTables.from_raw(packaged_data["calling_codes"], [entry])
