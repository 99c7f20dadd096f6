"""
Immutable dataset snapshots and the holder that swaps them on refresh.
"""

import logging
import threading
from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import datetime
from functools import cached_property

from dealer_datagen.kpi.synthesizer import KPISynthesizer
from dealer_datagen.shared.models import (
    Customer,
    DealSummary,
    Employee,
    KPIRecord,
    Order,
    RepairOrder,
    ServiceAppointment,
    Store,
    UserRole,
    Vehicle,
)

logger = logging.getLogger(__name__)

COLLECTION_NAMES = (
    "stores",
    "employees",
    "customers",
    "vehicles",
    "deals",
    "service_appointments",
    "repair_orders",
    "orders",
)


@dataclass(frozen=True)
class Dataset:
    """
    One generated snapshot of every entity collection.

    Collections are tuples and records are frozen models, so a snapshot can
    be shared between readers without copying. KPI records are not stored:
    ``kpis_for`` draws fresh values from the snapshot's synthesizer.
    """

    stores: tuple[Store, ...]
    employees: tuple[Employee, ...]
    customers: tuple[Customer, ...]
    vehicles: tuple[Vehicle, ...]
    deals: tuple[DealSummary, ...]
    service_appointments: tuple[ServiceAppointment, ...]
    repair_orders: tuple[RepairOrder, ...]
    orders: tuple[Order, ...]
    reference_time: datetime
    seed: int | None = None
    kpi_synthesizer: KPISynthesizer = field(
        default_factory=KPISynthesizer, repr=False, compare=False
    )

    def kpis_for(self, role: UserRole | str) -> list[KPIRecord]:
        return self.kpi_synthesizer.kpis_for(role)

    def get_collection(self, name: str) -> tuple:
        """
        Return a collection by name.

        Raises:
            KeyError: If name is not one of COLLECTION_NAMES
        """
        if name not in COLLECTION_NAMES:
            raise KeyError(f"Unknown collection '{name}'")
        return getattr(self, name)

    def counts(self) -> dict[str, int]:
        return {name: len(getattr(self, name)) for name in COLLECTION_NAMES}

    @cached_property
    def stores_by_id(self) -> dict[int, Store]:
        return {s.StoreId: s for s in self.stores}

    @cached_property
    def employees_by_id(self) -> dict[str, Employee]:
        return {e.EmployeeId: e for e in self.employees}

    @cached_property
    def customers_by_key(self) -> dict[str, Customer]:
        return {c.CustomerKey: c for c in self.customers}

    @cached_property
    def vehicles_by_key(self) -> dict[str, Vehicle]:
        return {v.InventoryKey: v for v in self.vehicles}


class DatasetHolder:
    """
    Holds the current dataset snapshot for concurrent readers.

    ``refresh`` builds a complete new snapshot before swapping the reference,
    so readers see either the old snapshot or the new one, never a mix.
    """

    def __init__(self, factory: Callable[[], Dataset], dataset: Dataset | None = None):
        self._factory = factory
        self._lock = threading.Lock()
        self._dataset = dataset

    def current(self) -> Dataset:
        """Return the current snapshot, building the first one on demand."""
        with self._lock:
            if self._dataset is None:
                self._dataset = self._factory()
            return self._dataset

    def refresh(self) -> Dataset:
        """Build a new snapshot and make it current."""
        dataset = self._factory()
        with self._lock:
            self._dataset = dataset
        logger.info(f"Dataset refreshed: {dataset.counts()}")
        return dataset
