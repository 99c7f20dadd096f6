"""
Pytest configuration and fixtures for dealer data generator tests.

Provides seeded generators, a fixed reference time, and small datasets.
"""

import sys
from datetime import UTC, datetime
from pathlib import Path

import pytest

# Ensure src/ is on sys.path for local test runs without installation
_SRC = Path(__file__).resolve().parents[1] / "src"
if _SRC.exists() and str(_SRC) not in sys.path:
    sys.path.insert(0, str(_SRC))

from dealer_datagen.config.models import GenerationConfig, VolumeConfig  # noqa: E402
from dealer_datagen.generators.master_generators import (  # noqa: E402
    DatasetGenerator,
)
from dealer_datagen.generators.utils import RandomSource  # noqa: E402

REFERENCE_TIME = datetime(2025, 6, 15, 12, 0, 0, tzinfo=UTC)


@pytest.fixture
def reference_time() -> datetime:
    """Fixed instant used as 'now' for generated dates."""
    return REFERENCE_TIME


@pytest.fixture
def random_source() -> RandomSource:
    return RandomSource(seed=42)


@pytest.fixture
def test_config() -> GenerationConfig:
    """Seeded configuration with the default volumes."""
    return GenerationConfig(seed=42, reference_time=REFERENCE_TIME)


@pytest.fixture
def small_config() -> GenerationConfig:
    """Seeded configuration with small volumes for fast tests."""
    return GenerationConfig(
        seed=7,
        reference_time=REFERENCE_TIME,
        volume=VolumeConfig(
            stores=2,
            employees=10,
            customers=12,
            vehicles=15,
            deals=20,
            appointments=10,
            repair_orders=10,
            orders=20,
        ),
    )


@pytest.fixture
def generator(test_config: GenerationConfig) -> DatasetGenerator:
    """Seeded dataset generator (entity factories are reachable as methods)."""
    return DatasetGenerator(test_config)


@pytest.fixture
def small_dataset(small_config: GenerationConfig):
    return DatasetGenerator(small_config).generate()


@pytest.fixture
def base_entities(generator: DatasetGenerator) -> dict:
    """Stores, employees, customers and vehicles for dependent factories."""
    return {
        "stores": generator.generate_stores(3),
        "employees": generator.generate_employees(25),
        "customers": generator.generate_customers(30),
        "vehicles": generator.generate_vehicles(20),
    }
