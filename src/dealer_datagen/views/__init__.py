"""
Sorted, filtered and sliced views over generated collections.
"""

from .tables import (
    DealSortField,
    InventorySortField,
    VehicleTypeFilter,
    deals_table,
    employees_with_role,
    filter_deals,
    filter_vehicles,
    finance_deals,
    inventory_table,
    new_inventory,
    open_repair_orders,
    sort_deals,
    sort_vehicles,
    total_gross,
)

__all__ = [
    "DealSortField",
    "InventorySortField",
    "VehicleTypeFilter",
    "deals_table",
    "employees_with_role",
    "filter_deals",
    "filter_vehicles",
    "finance_deals",
    "inventory_table",
    "new_inventory",
    "open_repair_orders",
    "sort_deals",
    "sort_vehicles",
    "total_gross",
]
