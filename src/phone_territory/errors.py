"""Error hierarchy for phone-territory.

Hierarchy::

    PhoneTerritoryError
    ├── FromPhoneError
    │   ├── InvalidPhoneNumberError
    │   └── TerritoryNotFoundError
    ├── DataIntegrityError
    └── ConfigError              (config/errors.py)
        ├── MissingRequiredSettingError
        └── InvalidSettingValueError
"""

from __future__ import annotations

from typing import Any


class PhoneTerritoryError(Exception):
    """Root of the error hierarchy.

    Args:
        message: Human-readable description.
        code: Machine-readable slug (defaults to ``default_code``).
        detail: Arbitrary extra context (serialisable dict).
        cause: Original exception that triggered this error.
    """

    default_code: str = "phone_territory_error"

    def __init__(
        self,
        message: str,
        *,
        code: str | None = None,
        detail: dict[str, Any] | None = None,
        cause: BaseException | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code or self.default_code
        self.detail: dict[str, Any] = detail or {}
        self.cause = cause
        if cause is not None:
            self.__cause__ = cause

    def __str__(self) -> str:
        return self.message

    def __repr__(self) -> str:
        return f"{type(self).__name__}(code={self.code!r}, message={self.message!r})"

    def to_dict(self) -> dict[str, Any]:
        """Serialise to a plain dict (safe for logging / HTTP responses)."""
        payload: dict[str, Any] = {
            "code": self.code,
            "message": self.message,
            "detail": self.detail,
        }
        if self.cause is not None:
            payload["cause"] = repr(self.cause)
        return payload


class FromPhoneError(PhoneTerritoryError):
    """A phone number could not be resolved to a territory.

    Each subclass carries a fixed display message; catch this class to handle
    both kinds, or a subclass to tell them apart.
    """

    default_code = "from_phone_error"
    default_message: str = "Could not resolve phone number"

    def __init__(self, phone: object = None, **kwargs: Any) -> None:
        detail = kwargs.pop("detail", None) or {}
        if phone is not None:
            detail.setdefault("phone", phone)
        super().__init__(self.default_message, detail=detail, **kwargs)
        self.phone = phone

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FromPhoneError):
            return NotImplemented
        return type(self) is type(other) and self.phone == other.phone

    def __hash__(self) -> int:
        return hash((type(self), self.phone))


class InvalidPhoneNumberError(FromPhoneError):
    """Input is zero, negative, not an integer, or shorter than 10 digits."""

    default_code = "invalid_phone_number"
    default_message = "Invalid phone. Must be at least 10 digits"


class TerritoryNotFoundError(FromPhoneError):
    """Input is well formed but no prefix entry matches it."""

    default_code = "not_found"
    default_message = "Did not match any territory code"


class DataIntegrityError(PhoneTerritoryError):
    """Reference data is malformed or violates a table invariant."""

    default_code = "data_integrity"


__all__ = [
    "DataIntegrityError",
    "FromPhoneError",
    "InvalidPhoneNumberError",
    "PhoneTerritoryError",
    "TerritoryNotFoundError",
]
