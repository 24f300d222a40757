"""Deprecated string-based API.

Kept for callers of the older two-function interface. Error handling here is
intentionally inconsistent with the typed API and must stay that way:

* :func:`find_iso_3166` lets parse errors and invalid numbers propagate as
  uncaught exceptions, but returns ``""`` for an unassigned prefix.
* :func:`find_phone_cc` returns ``""`` for an unknown territory and a single
  code even where a territory has several.

New code should use :meth:`TerritoryCode.from_phone_number` and
:attr:`TerritoryCode.calling_codes`.
"""

from __future__ import annotations

import re
import warnings
from typing import Final

from phone_territory.errors import TerritoryNotFoundError
from phone_territory.observability.logging import get_logger
from phone_territory.territory import TerritoryCode

# The old string table abbreviated Caribbean Netherlands (5993, 5994, 5997)
# to 599. XV only ever reported 882 there; 883 was never returned.
_LEGACY_CALLING_CODES: Final = {TerritoryCode.BQ: "599"}

_PHONE_TEXT: Final = re.compile(r"\+?[0-9]+")

_log = get_logger(__name__)


def _warn(name: str, replacement: str) -> None:
    warnings.warn(
        f"{name}() is deprecated; use {replacement} instead",
        DeprecationWarning,
        stacklevel=3,
    )
    _log.debug("deprecated_api_called", function=name)


def find_iso_3166(phone: str) -> str:
    """Find the ISO 3166 code for a phone number given as a digit string.

    Raises ``ValueError`` unless *phone* is ASCII digits with an optional
    leading ``+``, and :class:`InvalidPhoneNumberError` when it has fewer
    than 10 digits.
    Returns ``""`` when no territory matches.
    """
    _warn("find_iso_3166", "TerritoryCode.from_phone_number")
    if not isinstance(phone, str) or _PHONE_TEXT.fullmatch(phone) is None:
        raise ValueError(f"not a phone number: {phone!r}")
    number = int(phone)
    try:
        return TerritoryCode.from_phone_number(number).name
    except TerritoryNotFoundError:
        return ""


def find_phone_cc(code: str) -> str:
    """Find the calling code of an ISO 3166 code, as a decimal string.

    Returns ``""`` for an unknown code. Territories with several calling
    codes yield only one of them.
    """
    _warn("find_phone_cc", "TerritoryCode.calling_codes")
    territory = TerritoryCode.from_name(code)
    if territory is None:
        return ""
    legacy = _LEGACY_CALLING_CODES.get(territory)
    if legacy is not None:
        return legacy
    return str(territory.calling_codes.primary)


__all__ = ["find_iso_3166", "find_phone_cc"]
