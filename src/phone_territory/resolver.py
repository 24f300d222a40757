"""Prefix resolution engine: phone number -> territory, longest prefix wins.

Calling-code prefixes are 1 to 7 digits long and nest: ``262`` is Réunion
but ``262269`` is Mayotte. Resolution therefore tries the longest candidate
first and walks down to a single digit.

Numbers starting with ``1`` belong to the North American Numbering Plan,
where every assigned area code is listed at exactly four digits (``1`` plus
the area code). Those numbers are looked up at four digits only; a miss there
is final.
"""

from __future__ import annotations

from typing import Final, Mapping

from phone_territory.errors import InvalidPhoneNumberError, TerritoryNotFoundError
from phone_territory.observability.logging import get_logger
from phone_territory.tables import MAX_PREFIX_DIGITS, NANP_PREFIX, NANP_PREFIX_DIGITS, get_tables
from phone_territory.territory import TerritoryCode

MIN_PHONE_DIGITS: Final = 10

_NANP_LEADING_DIGIT: Final = int(NANP_PREFIX)

_log = get_logger(__name__)


def digit_count(phone: int) -> int:
    """Number of decimal digits of a positive integer."""
    return len(str(phone))


def leading_digits(phone: int, count: int, total: int | None = None) -> int:
    """The integer formed by the first *count* digits of *phone*.

    *total* is the digit count of *phone*, when the caller already has it.
    """
    total = digit_count(phone) if total is None else total
    return phone // 10 ** (total - count)


class PrefixResolver:
    """Longest-prefix matcher over a ``prefix -> territory`` mapping.

    Without an explicit mapping the packaged table is used, loaded lazily on
    the first lookup.
    """

    def __init__(self, prefixes: Mapping[int, TerritoryCode] | None = None) -> None:
        self._prefixes = prefixes

    @property
    def prefixes(self) -> Mapping[int, TerritoryCode]:
        if self._prefixes is None:
            return get_tables().prefixes
        return self._prefixes

    def resolve(self, phone: int) -> TerritoryCode:
        """Return the territory owning *phone*.

        Raises:
            InvalidPhoneNumberError: not an ``int``, not positive, or fewer
                than 10 digits.
            TerritoryNotFoundError: no prefix of any length matches.
        """
        if isinstance(phone, bool) or not isinstance(phone, int) or phone <= 0:
            raise InvalidPhoneNumberError(phone)
        total = digit_count(phone)
        if total < MIN_PHONE_DIGITS:
            raise InvalidPhoneNumberError(phone)

        table = self.prefixes

        if leading_digits(phone, 1, total) == _NANP_LEADING_DIGIT:
            prefix = leading_digits(phone, NANP_PREFIX_DIGITS, total)
            territory = table.get(prefix)
            if territory is None:
                _log.debug("prefix_not_found", phone=phone, tried=[prefix])
                raise TerritoryNotFoundError(phone)
            return territory

        candidates = [
            leading_digits(phone, count, total)
            for count in range(MAX_PREFIX_DIGITS, 0, -1)
        ]
        for prefix in candidates:
            territory = table.get(prefix)
            if territory is not None:
                return territory

        _log.debug("prefix_not_found", phone=phone, tried=candidates)
        raise TerritoryNotFoundError(phone)


_default_resolver = PrefixResolver()


def resolve(phone: int) -> TerritoryCode:
    """Resolve *phone* against the packaged prefix table."""
    return _default_resolver.resolve(phone)


__all__ = [
    "MIN_PHONE_DIGITS",
    "PrefixResolver",
    "digit_count",
    "leading_digits",
    "resolve",
]
