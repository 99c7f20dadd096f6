"""
Deal generation with gross profit breakdown.
"""

import logging
from collections.abc import Sequence
from datetime import UTC, datetime
from decimal import Decimal

from dealer_datagen.shared.id_generator import SequentialKeyGenerator
from dealer_datagen.shared.models import (
    Customer,
    DealStatus,
    DealSummary,
    DealType,
    Employee,
    EmployeeRole,
    Money,
    Store,
    Vehicle,
)

logger = logging.getLogger(__name__)

SALES_WINDOW_START = datetime(2024, 1, 1, tzinfo=UTC)
FRONTEND_GROSS_RANGE = (Decimal("500"), Decimal("5000"))
BACKEND_GROSS_RANGE = (Decimal("200"), Decimal("2000"))

GENERATED_DEAL_TYPES = [DealType.CASH, DealType.FINANCE, DealType.LEASE]
GENERATED_DEAL_STATUSES = [DealStatus.OPEN, DealStatus.CLOSED, DealStatus.DELIVERED]


class DealGeneratorMixin:
    """Mixin for deal generation."""

    def generate_deals(
        self,
        count: int,
        customers: Sequence[Customer],
        vehicles: Sequence[Vehicle],
        employees: Sequence[Employee],
        stores: Sequence[Store],
    ) -> tuple[DealSummary, ...]:
        """
        Generate deals referencing existing customers, vehicles, staff and stores.

        Each deal picks its customer, vehicle, salesperson, finance manager
        and store independently, so one customer can appear on many deals.
        Cash deals carry no backend gross; TotalGross is always the sum of
        frontend and backend gross.

        Args:
            count: Number of deals to generate
            customers: Generated customers
            vehicles: Generated vehicles
            employees: Generated employees (must include salespeople and
                finance managers)
            stores: Generated stores

        Returns:
            Tuple of DealSummary records keyed DEAL000001..

        Raises:
            MissingDependencyError: If a dependency collection is missing or empty
            EmptyRolePoolError: If no salesperson or finance manager exists
        """
        self._validate_count(count, "deals")
        if count == 0:
            return ()
        self._require(customers, "customers", "deals")
        self._require(vehicles, "vehicles", "deals")
        self._require(employees, "employees", "deals")
        self._require(stores, "stores", "deals")

        salespeople = self._role_pool(employees, EmployeeRole.SALESPERSON, "deals")
        finance_managers = self._role_pool(
            employees, EmployeeRole.FINANCE_MANAGER, "deals"
        )

        sold_window_start = min(SALES_WINDOW_START, self.reference_time)
        keys = SequentialKeyGenerator("DEAL").generate(count)

        deals = []
        for i, key in enumerate(keys):
            customer = self.random.pick_one(customers)
            vehicle = self.random.pick_one(vehicles)
            salesperson = self.random.pick_one(salespeople)
            finance_manager = self.random.pick_one(finance_managers)
            store = self.random.pick_one(stores)
            deal_type = self.random.pick_one(GENERATED_DEAL_TYPES)
            deal_status = self.random.pick_one(GENERATED_DEAL_STATUSES)

            frontend_gross = self._money(*FRONTEND_GROSS_RANGE)
            backend_gross = (
                self._money(*BACKEND_GROSS_RANGE)
                if deal_type != DealType.CASH
                else Money.zero()
            )

            date_sold = None
            if deal_status != DealStatus.OPEN:
                date_sold = self.random.random_date(
                    sold_window_start, self.reference_time
                )

            deals.append(
                DealSummary(
                    DealKey=key,
                    DealNumber=i + 1,
                    CustomerKey=customer.CustomerKey,
                    CustomerName=customer.full_name,
                    InventoryKey=vehicle.InventoryKey,
                    VehicleInfo=vehicle.description,
                    DealType=deal_type,
                    DealStatus=deal_status,
                    DateSold=date_sold,
                    FrontendGross=frontend_gross,
                    BackendGross=backend_gross,
                    TotalGross=frontend_gross + backend_gross,
                    SalespersonId=salesperson.EmployeeId,
                    Salesperson=salesperson.full_name,
                    FinanceManagerId=finance_manager.EmployeeId,
                    FinanceManager=finance_manager.full_name,
                    StoreId=store.StoreId,
                    StoreName=store.StoreName,
                )
            )

        logger.info(f"Generated {len(deals)} deal records")
        return tuple(deals)
