"""
phone_territory – ISO 3166 territory codes <-> E.164 calling codes.

Import path convention::

    from phone_territory import TerritoryCode, CallingCodes
    from phone_territory import InvalidPhoneNumberError, TerritoryNotFoundError
    from phone_territory.config import load_settings
    from phone_territory.observability import configure_logging

Quick use::

    >>> TerritoryCode.from_phone_number(12069359290)
    <TerritoryCode.US: 'US'>
    >>> TerritoryCode.FR.calling_codes.primary
    33
"""

from phone_territory.calling_codes import CallingCodes
from phone_territory.compat import find_iso_3166, find_phone_cc
from phone_territory.errors import (
    DataIntegrityError,
    FromPhoneError,
    InvalidPhoneNumberError,
    PhoneTerritoryError,
    TerritoryNotFoundError,
)
from phone_territory.resolver import PrefixResolver, resolve
from phone_territory.territory import TerritoryCode

__version__ = "0.1.0"
__all__ = [
    "CallingCodes",
    "DataIntegrityError",
    "FromPhoneError",
    "InvalidPhoneNumberError",
    "PhoneTerritoryError",
    "PrefixResolver",
    "TerritoryCode",
    "TerritoryNotFoundError",
    "__version__",
    "find_iso_3166",
    "find_phone_cc",
    "resolve",
]
