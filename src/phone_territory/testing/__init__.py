"""Testing – property-based strategies for code that consumes phone_territory."""
from phone_territory.testing.strategies import (
    nanp_phone_number_strategy,
    phone_number_strategy,
    prefixed_phone_number_strategy,
    short_phone_number_strategy,
    territory_strategy,
)

__all__ = [
    "nanp_phone_number_strategy",
    "phone_number_strategy",
    "prefixed_phone_number_strategy",
    "short_phone_number_strategy",
    "territory_strategy",
]
