"""
Role-specific KPI synthesis.

Each dashboard role has a fixed list of four KPIs. The list (ids, titles,
format, icon, colour and order) never changes between calls; only the
current and previous values are redrawn, and every derived field follows
from those two numbers.
"""

import logging
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal

from dealer_datagen.generators.utils import RandomSource
from dealer_datagen.shared.models import ChangeType, KPIFormat, KPIRecord, UserRole

logger = logging.getLogger(__name__)

CURRENCY = KPIFormat.CURRENCY
NUMBER = KPIFormat.NUMBER
PERCENTAGE = KPIFormat.PERCENTAGE


@dataclass(frozen=True)
class KPISchema:
    """Static description of one KPI widget."""

    id: str
    title: str
    value_range: tuple[int, int]
    previous_range: tuple[int, int]
    format: KPIFormat
    icon: str
    color: str
    unit: str | None = None
    target: int | None = None
    higher_is_better: bool = True


ROLE_KPI_SCHEMAS: dict[UserRole, tuple[KPISchema, ...]] = {
    UserRole.GENERAL_MANAGER: (
        KPISchema("total-revenue", "Total Revenue (MTD)", (500000, 2000000), (450000, 1800000), CURRENCY, "DollarSign", "green"),
        KPISchema("gross-profit", "Gross Profit (MTD)", (100000, 400000), (90000, 350000), CURRENCY, "TrendingUp", "blue"),
        KPISchema("units-sold", "Units Sold (MTD)", (80, 300), (75, 280), NUMBER, "Car", "purple"),
        KPISchema("customer-satisfaction", "Customer Satisfaction", (85, 98), (80, 95), PERCENTAGE, "Star", "yellow"),
    ),
    UserRole.SALES_MANAGER: (
        KPISchema("deals-closed", "Deals Closed (Today)", (5, 25), (3, 20), NUMBER, "Handshake", "green"),
        KPISchema("sales-gross", "Sales Gross (MTD)", (150000, 600000), (140000, 550000), CURRENCY, "DollarSign", "blue"),
        KPISchema("closing-ratio", "Closing Ratio", (15, 35), (12, 30), PERCENTAGE, "Target", "purple"),
        KPISchema("inventory-turn", "Inventory Turn (Days)", (25, 60), (30, 65), NUMBER, "RotateCcw", "orange", higher_is_better=False),
    ),
    UserRole.SERVICE_MANAGER: (
        KPISchema("service-revenue", "Service Revenue (MTD)", (80000, 300000), (75000, 280000), CURRENCY, "Wrench", "blue"),
        KPISchema("ros-written", "ROs Written (Today)", (15, 50), (12, 45), NUMBER, "FileText", "green"),
        KPISchema("tech-efficiency", "Tech Efficiency", (85, 120), (80, 115), PERCENTAGE, "Gauge", "purple"),
        KPISchema("avg-ro-value", "Avg RO Value", (250, 800), (230, 750), CURRENCY, "Calculator", "orange"),
    ),
    UserRole.FINANCE_MANAGER: (
        KPISchema("backend-gross", "Backend Gross (MTD)", (50000, 200000), (45000, 180000), CURRENCY, "CreditCard", "green"),
        KPISchema("penetration-rate", "Product Penetration", (65, 85), (60, 80), PERCENTAGE, "Shield", "blue"),
        KPISchema("approval-rate", "Approval Rate", (75, 95), (70, 90), PERCENTAGE, "CheckCircle", "purple"),
        KPISchema("avg-backend", "Avg Backend per Deal", (800, 2500), (750, 2300), CURRENCY, "TrendingUp", "orange"),
    ),
    UserRole.SALESPERSON: (
        KPISchema("my-deals", "My Deals (MTD)", (8, 25), (6, 20), NUMBER, "User", "green"),
        KPISchema("my-gross", "My Gross (MTD)", (15000, 60000), (12000, 50000), CURRENCY, "DollarSign", "blue", target=60000),
        KPISchema("my-prospects", "Active Prospects", (5, 20), (3, 18), NUMBER, "Users", "purple"),
        KPISchema("my-closing", "My Closing Ratio", (12, 30), (10, 25), PERCENTAGE, "Target", "orange"),
    ),
    UserRole.SERVICE_ADVISOR: (
        KPISchema("my-appointments", "My Appointments (Today)", (8, 20), (6, 18), NUMBER, "Calendar", "green"),
        KPISchema("my-ros", "My ROs (Open)", (12, 35), (10, 30), NUMBER, "FileText", "blue"),
        KPISchema("my-revenue", "My Revenue (MTD)", (8000, 25000), (7000, 22000), CURRENCY, "DollarSign", "purple"),
        KPISchema("my-csi", "My CSI Score", (85, 98), (80, 95), PERCENTAGE, "Star", "yellow"),
    ),
    UserRole.TECHNICIAN: (
        KPISchema("my-efficiency", "My Efficiency", (85, 125), (80, 120), PERCENTAGE, "Gauge", "green"),
        KPISchema("hours-billed", "Hours Billed (Today)", (6, 10), (5, 9), NUMBER, "Clock", "blue", unit="hrs"),
        KPISchema("jobs-completed", "Jobs Completed (Today)", (4, 12), (3, 10), NUMBER, "CheckCircle", "purple"),
        KPISchema("comeback-rate", "Comeback Rate", (1, 5), (2, 6), PERCENTAGE, "RotateCcw", "orange", higher_is_better=False),
    ),
    UserRole.PARTS_COUNTER: (
        KPISchema("parts-sales", "Parts Sales (Today)", (2000, 8000), (1800, 7500), CURRENCY, "Package", "green"),
        KPISchema("invoices-processed", "Invoices Processed", (15, 40), (12, 35), NUMBER, "Receipt", "blue"),
        KPISchema("fill-rate", "Fill Rate", (85, 98), (80, 95), PERCENTAGE, "CheckSquare", "purple"),
        KPISchema("avg-ticket", "Avg Ticket Value", (150, 500), (140, 450), CURRENCY, "Calculator", "orange"),
    ),
    UserRole.ACCOUNTANT: (
        KPISchema("daily-cash", "Daily Cash Flow", (25000, 100000), (20000, 95000), CURRENCY, "Banknote", "green"),
        KPISchema("ar-balance", "A/R Balance", (50000, 200000), (55000, 210000), CURRENCY, "CreditCard", "blue", higher_is_better=False),
        KPISchema("ap-balance", "A/P Balance", (30000, 150000), (35000, 160000), CURRENCY, "Receipt", "purple", higher_is_better=False),
        KPISchema("profit-margin", "Profit Margin", (12, 25), (10, 22), PERCENTAGE, "TrendingUp", "orange"),
    ),
}  # fmt: skip


def _resolve_role(role: UserRole | str) -> UserRole | None:
    if isinstance(role, UserRole):
        return role
    try:
        return UserRole(role)
    except ValueError:
        return None


def kpi_titles_for(role: UserRole | str) -> list[str]:
    """Titles of the KPIs shown for a role, in display order ([] if unknown)."""
    resolved = _resolve_role(role)
    if resolved is None:
        return []
    return [schema.title for schema in ROLE_KPI_SCHEMAS[resolved]]


def change_type_for(change: int | Decimal) -> ChangeType:
    if change > 0:
        return ChangeType.INCREASE
    if change < 0:
        return ChangeType.DECREASE
    return ChangeType.NEUTRAL


class KPISynthesizer:
    """Produces randomized KPI records for a dashboard role."""

    def __init__(self, random_source: RandomSource | None = None):
        self.random = random_source or RandomSource()

    def _draw(self, schema: KPISchema, bounds: tuple[int, int]) -> int | Decimal:
        if schema.format == KPIFormat.CURRENCY:
            return self.random.random_currency(*bounds)
        return self.random.random_int(*bounds)

    def synthesize(self, schema: KPISchema) -> KPIRecord:
        """Draw current and previous values for one KPI and derive the change."""
        value = self._draw(schema, schema.value_range)
        previous = self._draw(schema, schema.previous_range)
        change = value - previous
        change_percent = (Decimal(change) / Decimal(previous) * 100).quantize(
            Decimal("0.1"), rounding=ROUND_HALF_UP
        )

        return KPIRecord(
            id=schema.id,
            title=schema.title,
            value=value,
            previous_value=previous,
            change=change,
            change_percent=change_percent,
            change_type=change_type_for(change),
            format=schema.format,
            icon=schema.icon,
            color=schema.color,
            target=schema.target,
            unit=schema.unit,
            higher_is_better=schema.higher_is_better,
        )

    def kpis_for(self, role: UserRole | str) -> list[KPIRecord]:
        """
        Produce the KPI records for a role.

        Args:
            role: Dashboard role, as a UserRole or its string value

        Returns:
            Four KPI records in the role's fixed order, or an empty list
            for a role outside the known set.
        """
        resolved = _resolve_role(role)
        if resolved is None:
            logger.debug(f"No KPI schema for role {role!r}")
            return []
        return [self.synthesize(schema) for schema in ROLE_KPI_SCHEMAS[resolved]]
