"""
Dataset assembly orchestrator.

Coordinates all entity collection generation using modular mixins.
"""

import logging

from dealer_datagen.config.models import GenerationConfig
from dealer_datagen.dataset import COLLECTION_NAMES, Dataset
from dealer_datagen.kpi.synthesizer import KPISynthesizer
from dealer_datagen.shared.logging_utils import get_structured_logger

from ..progress_tracker import CollectionProgressTracker
from ..utils import RandomSource
from .base_generator import BaseGenerator
from .customer_generator import CustomerGeneratorMixin
from .deal_generator import DealGeneratorMixin
from .employee_generator import EmployeeGeneratorMixin
from .order_generator import OrderGeneratorMixin
from .service_generator import ServiceGeneratorMixin
from .store_generator import StoreGeneratorMixin
from .vehicle_generator import VehicleGeneratorMixin

logger = logging.getLogger(__name__)


class DatasetGenerator(
    BaseGenerator,
    StoreGeneratorMixin,
    EmployeeGeneratorMixin,
    CustomerGeneratorMixin,
    VehicleGeneratorMixin,
    DealGeneratorMixin,
    ServiceGeneratorMixin,
    OrderGeneratorMixin,
):
    """
    Main dataset generation engine.

    Builds every collection in dependency order:
    stores, employees, customers, vehicles, deals, service appointments,
    repair orders, orders.
    """

    def __init__(
        self,
        config: GenerationConfig | None = None,
        random_source: RandomSource | None = None,
    ):
        """
        Initialize dataset generator.

        Args:
            config: Generation configuration (volumes, seed, reference time)
            random_source: Shared random source; built from the config seed
                when omitted
        """
        super().__init__(config, random_source)
        self._structured = get_structured_logger(__name__)
        logger.debug(f"DatasetGenerator initialized with seed {self.config.seed}")

    @property
    def progress_tracker(self) -> CollectionProgressTracker | None:
        return self._progress_tracker

    def _finish(self, name: str, records: tuple) -> tuple:
        self._progress_tracker.mark_completed(name, len(records))
        self._emit_progress(
            name,
            1.0,
            f"Generated {len(records)} {name.replace('_', ' ')}",
            self._progress_tracker.get_counts(),
        )
        return records

    def _start(self, name: str, *dependencies: str) -> None:
        self._progress_tracker.require_completed(name, *dependencies)
        self._progress_tracker.mark_started(name)
        self._emit_progress(name, 0.0, f"Generating {name.replace('_', ' ')}")

    def generate(self) -> Dataset:
        """
        Generate a complete dataset snapshot.

        Returns:
            Immutable Dataset holding every collection

        Raises:
            DealerDataGenException: If any factory rejects its inputs
        """
        volume = self.config.volume
        self._progress_tracker = CollectionProgressTracker(list(COLLECTION_NAMES))

        with self._structured.run(
            seed=self.config.seed, reference_time=self.reference_time.isoformat()
        ):
            self._structured.info(
                "Dataset generation started", volume=volume.model_dump()
            )
            try:
                return self._generate_collections()
            except Exception as exc:
                self._structured.error(
                    "Dataset generation failed",
                    error_type=type(exc).__name__,
                    error=str(exc),
                )
                logger.error(f"Dataset generation failed: {exc}", exc_info=True)
                raise

    def _generate_collections(self) -> Dataset:
        volume = self.config.volume

        self._start("stores")
        stores = self._finish("stores", self.generate_stores(volume.stores))

        self._start("employees")
        employees = self._finish("employees", self.generate_employees(volume.employees))

        self._start("customers")
        customers = self._finish("customers", self.generate_customers(volume.customers))

        self._start("vehicles")
        vehicles = self._finish("vehicles", self.generate_vehicles(volume.vehicles))

        self._start("deals", "customers", "vehicles", "employees", "stores")
        deals = self._finish(
            "deals",
            self.generate_deals(volume.deals, customers, vehicles, employees, stores),
        )

        self._start("service_appointments", "customers", "vehicles", "employees")
        appointments = self._finish(
            "service_appointments",
            self.generate_service_appointments(
                volume.appointments, customers, vehicles, employees
            ),
        )

        self._start("repair_orders", "customers", "vehicles", "employees")
        repair_orders = self._finish(
            "repair_orders",
            self.generate_repair_orders(
                volume.repair_orders, customers, vehicles, employees
            ),
        )

        self._start("orders", "customers")
        orders = self._finish("orders", self.generate_orders(volume.orders, customers))

        dataset = Dataset(
            stores=stores,
            employees=employees,
            customers=customers,
            vehicles=vehicles,
            deals=deals,
            service_appointments=appointments,
            repair_orders=repair_orders,
            orders=orders,
            reference_time=self.reference_time,
            seed=self.config.seed,
            kpi_synthesizer=KPISynthesizer(self.random),
        )
        self._structured.info("Dataset generation completed", counts=dataset.counts())
        return dataset


def generate_dataset(
    config: GenerationConfig | None = None, seed: int | None = None
) -> Dataset:
    """
    Generate a dataset in one call.

    Args:
        config: Generation configuration (defaults when omitted)
        seed: Overrides ``config.seed`` when given

    Returns:
        Immutable Dataset snapshot

    Raises:
        pydantic.ValidationError: If ``seed`` is out of range
    """
    config = config or GenerationConfig()
    if seed is not None:
        config = config.with_seed(seed)
    return DatasetGenerator(config).generate()
