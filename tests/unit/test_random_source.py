"""
Unit tests for RandomSource and the address/identifier helpers.
"""

import re
from datetime import UTC, datetime, timedelta
from decimal import Decimal

import pytest

from dealer_datagen.generators.utils import (
    VIN_ALPHABET,
    AddressGenerator,
    IdentifierGenerator,
    RandomSource,
)
from dealer_datagen.shared.exceptions import (
    EmptyCollectionError,
    GenerationParameterError,
)

_hyp = pytest.importorskip("hypothesis")
from hypothesis import given  # noqa: E402
from hypothesis import strategies as st  # noqa: E402


class TestRandomInt:
    def test_inclusive_bounds(self, random_source):
        values = {random_source.random_int(1, 3) for _ in range(200)}
        assert values == {1, 2, 3}

    def test_degenerate_range(self, random_source):
        assert random_source.random_int(5, 5) == 5

    def test_inverted_range_raises(self, random_source):
        with pytest.raises(GenerationParameterError):
            random_source.random_int(10, 1)

    @given(low=st.integers(-1000, 1000), span=st.integers(0, 1000))
    def test_within_bounds(self, low, span):
        value = RandomSource(seed=1).random_int(low, low + span)
        assert low <= value <= low + span


class TestRandomCurrency:
    def test_returns_cent_precision_decimal(self, random_source):
        value = random_source.random_currency(100, 200)
        assert isinstance(value, Decimal)
        assert value == value.quantize(Decimal("0.01"))

    def test_degenerate_range(self, random_source):
        assert random_source.random_currency(5, 5) == Decimal("5.00")

    def test_inverted_range_raises(self, random_source):
        with pytest.raises(GenerationParameterError):
            random_source.random_currency(200, 100)

    def test_range_without_whole_cent_raises(self, random_source):
        with pytest.raises(GenerationParameterError, match="No whole-cent amount"):
            random_source.random_currency("1.001", "1.009")

    @given(
        low=st.decimals(min_value=0, max_value=100000, places=2),
        span=st.decimals(min_value=0, max_value=100000, places=2),
    )
    def test_never_leaves_range(self, low, span):
        high = low + span
        value = RandomSource(seed=3).random_currency(low, high)
        assert low <= value <= high
        assert value.as_tuple().exponent == -2


class TestPickOne:
    def test_single_element(self, random_source):
        assert random_source.pick_one(["only"]) == "only"

    def test_empty_raises(self, random_source):
        with pytest.raises(EmptyCollectionError):
            random_source.pick_one([])

    def test_empty_is_a_value_error(self, random_source):
        with pytest.raises(ValueError):
            random_source.pick_one(())

    def test_all_elements_reachable(self, random_source):
        picks = {random_source.pick_one("abc") for _ in range(200)}
        assert picks == {"a", "b", "c"}


class TestPickMany:
    def test_size_and_membership(self, random_source):
        picks = random_source.pick_many(["x", "y"], 50)
        assert len(picks) == 50
        assert set(picks) <= {"x", "y"}

    def test_zero_size_allows_empty_collection(self, random_source):
        assert random_source.pick_many([], 0) == []

    def test_empty_collection_raises(self, random_source):
        with pytest.raises(EmptyCollectionError):
            random_source.pick_many([], 3)


class TestRandomDate:
    start = datetime(2024, 1, 1, tzinfo=UTC)

    def test_within_bounds(self, random_source):
        end = self.start + timedelta(days=30)
        for _ in range(100):
            value = random_source.random_date(self.start, end)
            assert self.start <= value <= end
            assert value.tzinfo is not None

    def test_equal_bounds(self, random_source):
        assert random_source.random_date(self.start, self.start) == self.start

    def test_inverted_bounds_raise(self, random_source):
        with pytest.raises(GenerationParameterError):
            random_source.random_date(self.start, self.start - timedelta(seconds=1))

    def test_naive_bounds_raise(self, random_source):
        naive = datetime(2024, 1, 1)
        with pytest.raises(GenerationParameterError, match="timezone-aware"):
            random_source.random_date(naive, naive)

    def test_millisecond_precision(self, random_source):
        value = random_source.random_date(self.start, self.start + timedelta(days=1))
        assert value.microsecond % 1000 == 0


class TestDeterminism:
    def test_same_seed_same_sequence(self):
        a, b = RandomSource(seed=99), RandomSource(seed=99)
        assert [a.random_int(0, 10**6) for _ in range(20)] == [
            b.random_int(0, 10**6) for _ in range(20)
        ]
        assert a.pick_many(range(100), 20) == b.pick_many(range(100), 20)

    def test_different_seeds_differ(self):
        a, b = RandomSource(seed=1), RandomSource(seed=2)
        assert [a.random_int(0, 10**6) for _ in range(20)] != [
            b.random_int(0, 10**6) for _ in range(20)
        ]


class TestIdentifierGenerator:
    def test_vin_format(self, random_source):
        ids = IdentifierGenerator(random_source)
        for _ in range(50):
            vin = ids.generate_vin()
            assert len(vin) == 17
            assert vin[0] == "1"
            assert vin[1] in "FGH"
            assert all(c in VIN_ALPHABET for c in vin)

    def test_phone_number_format(self, random_source):
        phone = IdentifierGenerator(random_source).generate_phone_number()
        assert re.fullmatch(r"[2-9]\d{2}-[2-9]\d{2}-\d{4}", phone)

    def test_license_and_factory_id_format(self, random_source):
        ids = IdentifierGenerator(random_source)
        assert re.fullmatch(r"DL\d{8}", ids.generate_license_number())
        assert re.fullmatch(r"F\d{4}", ids.generate_factory_id())


class TestAddressGenerator:
    def test_street_line(self, random_source):
        line = AddressGenerator(random_source).street_line("Main")
        assert re.fullmatch(r"\d{3,4} Main St", line)

    def test_zip_code_is_five_digits(self, random_source):
        assert re.fullmatch(r"\d{5}", AddressGenerator(random_source).zip_code())

    def test_city_from_choices(self, random_source):
        assert AddressGenerator(random_source).city(["Salem"]) == "Salem"
