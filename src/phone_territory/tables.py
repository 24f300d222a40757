"""Reference tables: territory -> calling codes and prefix -> territory.

The data lives in two JSON files, by default the ones shipped in
``phone_territory/data``:

``calling_codes.json``
    Object mapping every territory name to a list of 1 to 3 calling codes,
    primary first.
``prefixes.json``
    List of ``[digits, territory]`` pairs. ``digits`` are the leading digits
    of a phone number (1 to 7 of them).

Both are validated on load and exposed as read-only mappings.
"""
from __future__ import annotations

import dataclasses
import functools
import json
import os
from importlib import resources
from pathlib import Path
from types import MappingProxyType
from typing import Any, Final, Mapping

from phone_territory.calling_codes import CallingCodes
from phone_territory.config.loaders import load_data_settings
from phone_territory.errors import DataIntegrityError
from phone_territory.observability.logging import get_logger
from phone_territory.territory import TerritoryCode

CALLING_CODES_FILE: Final = "calling_codes.json"
PREFIXES_FILE: Final = "prefixes.json"

MAX_PREFIX_DIGITS: Final = 7
NANP_PREFIX: Final = "1"
NANP_PREFIX_DIGITS: Final = 4

_log = get_logger(__name__)


@dataclasses.dataclass(frozen=True)
class TerritoryTables:
    """Immutable, validated reference data."""

    calling_codes: Mapping[TerritoryCode, CallingCodes]
    prefixes: Mapping[int, TerritoryCode]
    source: str = "package"

    @classmethod
    def load(cls, data_dir: str | os.PathLike[str] | None = None) -> "TerritoryTables":
        """Read and validate both JSON files.

        *data_dir* selects a directory holding replacement files; ``None`` or
        ``""`` reads the packaged data.
        """
        if data_dir:
            base: Any = Path(data_dir)
            source = str(base)
        else:
            base = resources.files("phone_territory").joinpath("data")
            source = "package"

        raw_codes = _read_json(base.joinpath(CALLING_CODES_FILE), CALLING_CODES_FILE)
        raw_prefixes = _read_json(base.joinpath(PREFIXES_FILE), PREFIXES_FILE)
        tables = cls.from_raw(raw_codes, raw_prefixes, source=source)
        _log.info(
            "tables_loaded",
            source=source,
            territories=len(tables.calling_codes),
            prefixes=len(tables.prefixes),
        )
        return tables

    @classmethod
    def from_raw(
        cls,
        raw_codes: Any,
        raw_prefixes: Any,
        *,
        source: str = "memory",
    ) -> "TerritoryTables":
        """Build tables from already-decoded JSON values."""
        return cls(
            calling_codes=MappingProxyType(_build_calling_codes(raw_codes)),
            prefixes=MappingProxyType(_build_prefixes(raw_prefixes)),
            source=source,
        )


def _reject_duplicate_keys(pairs: list[tuple[str, Any]]) -> dict[str, Any]:
    result: dict[str, Any] = {}
    for key, value in pairs:
        if key in result:
            raise DataIntegrityError(
                f"Duplicate key {key!r}", detail={"key": key}
            )
        result[key] = value
    return result


def _read_json(path: Any, label: str) -> Any:
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise DataIntegrityError(
            f"Cannot read {label}", detail={"path": str(path)}, cause=exc
        ) from exc
    try:
        return json.loads(text, object_pairs_hook=_reject_duplicate_keys)
    except json.JSONDecodeError as exc:
        raise DataIntegrityError(
            f"{label} is not valid JSON: {exc.msg}",
            detail={"path": str(path), "line": exc.lineno},
            cause=exc,
        ) from exc


def _territory(name: Any, where: str) -> TerritoryCode:
    territory = TerritoryCode.from_name(name)
    if territory is None:
        raise DataIntegrityError(
            f"Unknown territory {name!r} in {where}", detail={"territory": name}
        )
    return territory


def _build_calling_codes(raw: Any) -> dict[TerritoryCode, CallingCodes]:
    if not isinstance(raw, dict):
        raise DataIntegrityError(f"{CALLING_CODES_FILE} must hold a JSON object")

    table: dict[TerritoryCode, CallingCodes] = {}
    for name, codes in raw.items():
        territory = _territory(name, CALLING_CODES_FILE)
        if not isinstance(codes, list):
            raise DataIntegrityError(
                f"Calling codes of {name} must be a list", detail={"territory": name}
            )
        table[territory] = CallingCodes(tuple(codes))

    missing = [t.name for t in TerritoryCode if t not in table]
    if missing:
        raise DataIntegrityError(
            f"Territories without calling codes: {', '.join(missing)}",
            detail={"missing": missing},
        )
    return table


def _build_prefixes(raw: Any) -> dict[int, TerritoryCode]:
    if not isinstance(raw, list):
        raise DataIntegrityError(f"{PREFIXES_FILE} must hold a JSON array")

    table: dict[int, TerritoryCode] = {}
    for entry in raw:
        if not (isinstance(entry, list) and len(entry) == 2):
            raise DataIntegrityError(
                f"Prefix entries must be [digits, territory] pairs: {entry!r}"
            )
        digits, name = entry
        if (
            not isinstance(digits, str)
            or not digits.isdigit()
            or digits.startswith("0")
            or len(digits) > MAX_PREFIX_DIGITS
        ):
            raise DataIntegrityError(
                f"Prefix must be 1 to {MAX_PREFIX_DIGITS} digits without a leading zero: {digits!r}",
                detail={"prefix": digits},
            )
        # the fast path only ever looks up 4 digits under a leading 1
        if digits.startswith(NANP_PREFIX) and len(digits) != NANP_PREFIX_DIGITS:
            raise DataIntegrityError(
                f"Prefixes under {NANP_PREFIX} must have exactly {NANP_PREFIX_DIGITS} digits: {digits!r}",
                detail={"prefix": digits},
            )
        prefix = int(digits)
        if prefix in table:
            raise DataIntegrityError(
                f"Duplicate prefix {digits}", detail={"prefix": digits}
            )
        table[prefix] = _territory(name, PREFIXES_FILE)
    return table


@functools.lru_cache(maxsize=1)
def get_tables() -> TerritoryTables:
    """Process-wide tables, loaded on first use from the configured source."""
    return TerritoryTables.load(load_data_settings().data_dir or None)


__all__ = [
    "MAX_PREFIX_DIGITS",
    "NANP_PREFIX",
    "NANP_PREFIX_DIGITS",
    "TerritoryTables",
    "get_tables",
]
