"""E.164 calling codes value object."""

from __future__ import annotations

import dataclasses
from typing import Final

from phone_territory.errors import DataIntegrityError

MAX_CODES: Final = 3


@dataclasses.dataclass(frozen=True, slots=True)
class CallingCodes:
    """A territory's calling codes; rarely more than one.

    The first code is the primary one. Ordering compares primary codes
    numerically, so ``7`` sorts before ``33``. Equality is over all codes.
    """

    codes: tuple[int, ...]

    def __post_init__(self) -> None:
        codes = tuple(self.codes)
        object.__setattr__(self, "codes", codes)
        if not 1 <= len(codes) <= MAX_CODES:
            raise DataIntegrityError(
                f"A territory needs 1 to {MAX_CODES} calling codes, got {len(codes)}",
                detail={"codes": list(codes)},
            )
        for code in codes:
            if isinstance(code, bool) or not isinstance(code, int) or code <= 0:
                raise DataIntegrityError(
                    f"Calling codes must be positive integers: {code!r}",
                    detail={"codes": list(codes)},
                )

    @classmethod
    def of(cls, *codes: int) -> "CallingCodes":
        return cls(codes)

    @property
    def primary(self) -> int:
        """The primary calling code. Most territories only have this one."""
        return self.codes[0]

    def all(self) -> tuple[int, ...]:
        return self.codes

    def has_multiple(self) -> bool:
        return len(self.codes) > 1

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, CallingCodes):
            return NotImplemented
        return self.primary < other.primary

    def __le__(self, other: object) -> bool:
        if not isinstance(other, CallingCodes):
            return NotImplemented
        return self.primary <= other.primary

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, CallingCodes):
            return NotImplemented
        return self.primary > other.primary

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, CallingCodes):
            return NotImplemented
        return self.primary >= other.primary

    def __len__(self) -> int:
        return len(self.codes)

    def __str__(self) -> str:
        return ",".join(str(code) for code in self.codes)


__all__ = ["CallingCodes", "MAX_CODES"]
