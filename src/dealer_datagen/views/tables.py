"""
Table views and dashboard slices over generated collections.

Each sortable column maps to a key extractor with a concrete return type,
so sorting never compares values of different kinds. String columns sort
case-insensitively.
"""

import logging
from collections.abc import Callable, Iterable, Sequence
from datetime import datetime, timezone
from decimal import Decimal
from enum import Enum
from typing import Any

from dealer_datagen.shared.models import (
    DealStatus,
    DealSummary,
    DealType,
    Employee,
    EmployeeRole,
    RepairOrder,
    RepairOrderStatus,
    Vehicle,
)

logger = logging.getLogger(__name__)

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)
DEFAULT_MAX_ROWS = 10


class DealSortField(str, Enum):
    DEAL_NUMBER = "dealNumber"
    CUSTOMER_NAME = "customerName"
    VEHICLE_INFO = "vehicleInfo"
    DEAL_STATUS = "dealStatus"
    TOTAL_GROSS = "totalGross"
    DATE_SOLD = "dateSold"


class InventorySortField(str, Enum):
    STOCK_NUMBER = "StockNumber"
    YEAR = "Year"
    MAKE = "Make"
    MODEL = "Model"
    MSRP = "MSRP"
    DAYS_ON_LOT = "DaysOnLot"


class VehicleTypeFilter(str, Enum):
    ALL = "all"
    NEW = "new"
    USED = "used"


DEAL_SORT_KEYS: dict[DealSortField, Callable[[DealSummary], Any]] = {
    DealSortField.DEAL_NUMBER: lambda d: d.DealNumber,
    DealSortField.CUSTOMER_NAME: lambda d: d.CustomerName.lower(),
    DealSortField.VEHICLE_INFO: lambda d: d.VehicleInfo.lower(),
    DealSortField.DEAL_STATUS: lambda d: d.DealStatus.value.lower(),
    DealSortField.TOTAL_GROSS: lambda d: d.TotalGross.Amount,
    # Unsold deals sort as the epoch
    DealSortField.DATE_SOLD: lambda d: d.DateSold or EPOCH,
}

INVENTORY_SORT_KEYS: dict[InventorySortField, Callable[[Vehicle], Any]] = {
    InventorySortField.STOCK_NUMBER: lambda v: v.StockNumber.lower(),
    InventorySortField.YEAR: lambda v: v.Year,
    InventorySortField.MAKE: lambda v: v.Make.lower(),
    InventorySortField.MODEL: lambda v: v.Model.lower(),
    InventorySortField.MSRP: lambda v: v.MSRP.Amount,
    InventorySortField.DAYS_ON_LOT: lambda v: v.DaysOnLot or 0,
}


def sort_deals(
    deals: Iterable[DealSummary],
    field: DealSortField | str = DealSortField.DEAL_NUMBER,
    descending: bool = False,
) -> list[DealSummary]:
    """
    Sort deals by a table column.

    Raises:
        ValueError: If field is not a DealSortField value
    """
    key = DEAL_SORT_KEYS[DealSortField(field)]
    return sorted(deals, key=key, reverse=descending)


def sort_vehicles(
    vehicles: Iterable[Vehicle],
    field: InventorySortField | str = InventorySortField.STOCK_NUMBER,
    descending: bool = False,
) -> list[Vehicle]:
    """
    Sort vehicles by a table column.

    Raises:
        ValueError: If field is not an InventorySortField value
    """
    key = INVENTORY_SORT_KEYS[InventorySortField(field)]
    return sorted(vehicles, key=key, reverse=descending)


def filter_deals(
    deals: Iterable[DealSummary],
    search: str = "",
    status: DealStatus | str | None = None,
) -> list[DealSummary]:
    """
    Filter deals by search text and status.

    The search matches the deal number, customer name or vehicle info,
    case-insensitively. ``status`` of None (or "all") keeps every status.
    """
    term = search.strip().lower()
    wanted = None if status in (None, "all") else DealStatus(status)

    result = []
    for deal in deals:
        if wanted is not None and deal.DealStatus != wanted:
            continue
        if term and not (
            term in str(deal.DealNumber)
            or term in deal.CustomerName.lower()
            or term in deal.VehicleInfo.lower()
        ):
            continue
        result.append(deal)
    return result


def filter_vehicles(
    vehicles: Iterable[Vehicle],
    search: str = "",
    vehicle_type: VehicleTypeFilter | str = VehicleTypeFilter.ALL,
) -> list[Vehicle]:
    """
    Filter vehicles by search text and new/used type.

    The search matches ``"<Year> <Make> <Model> <StockNumber>"``,
    case-insensitively.
    """
    term = search.strip().lower()
    type_filter = VehicleTypeFilter(vehicle_type)

    result = []
    for vehicle in vehicles:
        if type_filter == VehicleTypeFilter.NEW and not vehicle.IsNew:
            continue
        if type_filter == VehicleTypeFilter.USED and vehicle.IsNew:
            continue
        haystack = (
            f"{vehicle.Year} {vehicle.Make} {vehicle.Model} {vehicle.StockNumber}"
        ).lower()
        if term and term not in haystack:
            continue
        result.append(vehicle)
    return result


def deals_table(
    deals: Iterable[DealSummary],
    search: str = "",
    status: DealStatus | str | None = None,
    sort_field: DealSortField | str = DealSortField.DEAL_NUMBER,
    descending: bool = True,
    max_rows: int = DEFAULT_MAX_ROWS,
) -> list[DealSummary]:
    """Rows of the deals table: filter, then sort (newest deal first), then truncate."""
    rows = sort_deals(filter_deals(deals, search, status), sort_field, descending)
    return rows[: max(max_rows, 0)]


def inventory_table(
    vehicles: Iterable[Vehicle],
    search: str = "",
    vehicle_type: VehicleTypeFilter | str = VehicleTypeFilter.ALL,
    sort_field: InventorySortField | str = InventorySortField.STOCK_NUMBER,
    descending: bool = False,
    max_rows: int = DEFAULT_MAX_ROWS,
) -> list[Vehicle]:
    """Rows of the inventory table: filter, then sort, then truncate."""
    rows = sort_vehicles(
        filter_vehicles(vehicles, search, vehicle_type), sort_field, descending
    )
    return rows[: max(max_rows, 0)]


# ================================
# DASHBOARD SLICES
# ================================

FINANCED_DEAL_TYPES = {DealType.FINANCE, DealType.LEASE}
OPEN_REPAIR_ORDER_STATUSES = {
    RepairOrderStatus.OPEN,
    RepairOrderStatus.IN_PROGRESS,
    RepairOrderStatus.WAITING_PARTS,
    RepairOrderStatus.WAITING_APPROVAL,
}


def finance_deals(
    deals: Sequence[DealSummary], limit: int | None = None
) -> list[DealSummary]:
    """Finance and lease deals, as shown on the finance manager dashboard."""
    result = [d for d in deals if d.DealType in FINANCED_DEAL_TYPES]
    return result if limit is None else result[:limit]


def open_repair_orders(repair_orders: Sequence[RepairOrder]) -> list[RepairOrder]:
    """Repair orders still being worked."""
    return [ro for ro in repair_orders if ro.Status in OPEN_REPAIR_ORDER_STATUSES]


def new_inventory(vehicles: Sequence[Vehicle]) -> list[Vehicle]:
    return [v for v in vehicles if v.IsNew]


def employees_with_role(
    employees: Sequence[Employee], role: EmployeeRole | str
) -> list[Employee]:
    role = EmployeeRole(role)
    return [e for e in employees if e.Role == role]


def total_gross(deals: Iterable[DealSummary]) -> Decimal:
    """Sum of TotalGross over the given deals."""
    return sum((d.TotalGross.Amount for d in deals), Decimal("0.00"))
