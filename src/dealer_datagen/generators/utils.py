"""
Utility classes for synthetic data generation.

This module provides the injectable random source every factory draws
from, plus address and identifier helpers built on top of it.
"""

import random
from collections.abc import Sequence
from datetime import datetime, timedelta
from decimal import ROUND_CEILING, ROUND_FLOOR, Decimal
from typing import TypeVar

import numpy as np

from dealer_datagen.shared.exceptions import (
    EmptyCollectionError,
    GenerationParameterError,
)

T = TypeVar("T")

# VINs exclude I, O and Q to avoid confusion with 1 and 0
VIN_ALPHABET = "ABCDEFGHJKLMNPRSTUVWXYZ0123456789"


def _to_decimal(value: Decimal | int | float | str) -> Decimal:
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


class RandomSource:
    """
    Injectable source of randomness for all generators.

    Wraps a ``random.Random`` for scalar draws and a NumPy ``Generator``
    for vectorized sampling. Passing a seed makes every draw reproducible;
    omitting it uses OS entropy.
    """

    def __init__(self, seed: int | None = None):
        """
        Initialize random source.

        Args:
            seed: Random seed for reproducibility (None for OS entropy)
        """
        self.seed = seed
        self._rng = random.Random(seed)
        self._np_rng = np.random.default_rng(None if seed is None else seed + 777)

    def random_int(self, min_value: int, max_value: int) -> int:
        """
        Return an integer in ``[min_value, max_value]`` inclusive.

        Raises:
            GenerationParameterError: If min_value > max_value
        """
        if min_value > max_value:
            raise GenerationParameterError(
                f"min ({min_value}) must not exceed max ({max_value})",
                parameter="range",
                value=(min_value, max_value),
            )
        return self._rng.randint(min_value, max_value)

    def random_currency(
        self,
        min_value: Decimal | int | float | str,
        max_value: Decimal | int | float | str,
    ) -> Decimal:
        """
        Return a cent-precision amount in ``[min_value, max_value]``.

        The draw is uniform over whole cents inside the range, so the
        result never falls outside the bounds after rounding.

        Raises:
            GenerationParameterError: If the range is inverted or holds no cent value
        """
        low = _to_decimal(min_value)
        high = _to_decimal(max_value)
        if low > high:
            raise GenerationParameterError(
                f"min ({low}) must not exceed max ({high})",
                parameter="range",
                value=(low, high),
            )

        low_cents = int((low * 100).to_integral_value(rounding=ROUND_CEILING))
        high_cents = int((high * 100).to_integral_value(rounding=ROUND_FLOOR))
        if low_cents > high_cents:
            raise GenerationParameterError(
                f"No whole-cent amount lies between {low} and {high}",
                parameter="range",
                value=(low, high),
            )

        cents = self._rng.randint(low_cents, high_cents)
        return (Decimal(cents) / 100).quantize(Decimal("0.01"))

    def pick_one(self, collection: Sequence[T]) -> T:
        """
        Uniformly select one element.

        Raises:
            EmptyCollectionError: If the collection is empty
        """
        if not collection:
            raise EmptyCollectionError()
        return collection[self._rng.randrange(len(collection))]

    def pick_many(self, collection: Sequence[T], size: int) -> list[T]:
        """Uniformly select ``size`` elements with replacement (vectorized)."""
        if size < 0:
            raise GenerationParameterError(
                "size must be >= 0", parameter="size", value=size
            )
        if size == 0:
            return []
        if not collection:
            raise EmptyCollectionError()
        indices = self._np_rng.integers(0, len(collection), size=size)
        return [collection[int(i)] for i in indices]

    def random_date(self, start: datetime, end: datetime) -> datetime:
        """
        Return an instant uniformly distributed in ``[start, end]``.

        Draws are taken in millisecond steps from ``start``. Both bounds
        must be timezone-aware.

        Raises:
            GenerationParameterError: If start > end or either bound is naive
        """
        if start.tzinfo is None or end.tzinfo is None:
            raise GenerationParameterError(
                "Date bounds must be timezone-aware",
                parameter="range",
                value=(start, end),
            )
        if start > end:
            raise GenerationParameterError(
                f"start ({start.isoformat()}) must not be after end ({end.isoformat()})",
                parameter="range",
                value=(start, end),
            )

        span_ms = (end - start) // timedelta(milliseconds=1)
        return start + timedelta(milliseconds=self._rng.randint(0, span_ms))

    def chance(self, probability: float) -> bool:
        """Return True with the given probability."""
        return self._rng.random() < probability

    def uniform(self, low: float, high: float) -> float:
        return self._rng.uniform(low, high)

    def shuffled(self, items: Sequence[T]) -> list[T]:
        result = list(items)
        self._rng.shuffle(result)
        return result


class AddressGenerator:
    """Generates synthetic street addresses."""

    street_names = ["Main", "Oak", "Pine", "Elm", "Cedar"]
    cities = [
        "Springfield",
        "Riverside",
        "Franklin",
        "Georgetown",
        "Madison",
        "Fairview",
        "Clinton",
        "Salem",
        "Bristol",
        "Greenville",
    ]
    states = ["CA", "TX", "FL", "NY", "IL", "PA", "OH", "GA", "NC", "MI"]

    def __init__(self, random_source: RandomSource):
        self._random = random_source

    def street_line(self, street_name: str | None = None) -> str:
        """Generate ``"<number> <street> St"``."""
        number = self._random.random_int(100, 9999)
        street = street_name or self._random.pick_one(self.street_names)
        return f"{number} {street} St"

    def city(self, choices: Sequence[str] | None = None) -> str:
        return self._random.pick_one(choices or self.cities)

    def state(self, choices: Sequence[str] | None = None) -> str:
        return self._random.pick_one(choices or self.states)

    def zip_code(self) -> str:
        return f"{self._random.random_int(10000, 99999)}"


class IdentifierGenerator:
    """Generates synthetic identifiers for various entity types."""

    def __init__(self, random_source: RandomSource):
        self._random = random_source

    def generate_vin(self) -> str:
        """Generate a 17-character VIN: '1', a manufacturer letter, 15 VIN characters."""
        manufacturer = self._random.pick_one("FGH")
        body = "".join(self._random.pick_one(VIN_ALPHABET) for _ in range(15))
        return f"1{manufacturer}{body}"

    def generate_phone_number(self) -> str:
        """Generate synthetic phone number in format XXX-XXX-XXXX."""
        area_code = self._random.random_int(200, 999)
        exchange = self._random.random_int(200, 999)
        number = self._random.random_int(1000, 9999)
        return f"{area_code}-{exchange}-{number}"

    def generate_license_number(self) -> str:
        """Generate driver license number in format DL12345678."""
        return f"DL{self._random.random_int(10000000, 99999999)}"

    def generate_factory_id(self) -> str:
        """Generate OEM factory identifier in format F1234."""
        return f"F{self._random.random_int(1000, 9999)}"

