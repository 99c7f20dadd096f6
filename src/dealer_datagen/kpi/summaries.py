"""
KPIs derived from generated collections.

Unlike the role KPIs, these are computed from a dataset: the inventory
page summarizes vehicles and the order management page summarizes orders.
Both use pandas for the aggregation.
"""

import logging
from collections.abc import Sequence
from datetime import datetime, timedelta
from decimal import ROUND_HALF_UP, Decimal

import pandas as pd

from dealer_datagen.shared.models import (
    KPIFormat,
    KPIRecord,
    Order,
    OrderStatus,
    OrderSummary,
    Vehicle,
)

from .synthesizer import change_type_for

logger = logging.getLogger(__name__)

AGING_THRESHOLD_DAYS = 60
DUE_SOON_WINDOW = timedelta(days=7)


def _round_half_up(value: float) -> int:
    return int(Decimal(str(value)).quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def _count_kpi(
    kpi_id: str,
    title: str,
    value: int,
    previous: int,
    icon: str,
    color: str,
    higher_is_better: bool = True,
) -> KPIRecord:
    previous = max(previous, 0)
    change = value - previous
    change_percent = (
        (Decimal(change) / Decimal(previous) * 100).quantize(
            Decimal("0.1"), rounding=ROUND_HALF_UP
        )
        if previous
        else None
    )
    return KPIRecord(
        id=kpi_id,
        title=title,
        value=value,
        previous_value=previous,
        change=change,
        change_percent=change_percent,
        change_type=change_type_for(change),
        format=KPIFormat.NUMBER,
        icon=icon,
        color=color,
        higher_is_better=higher_is_better,
    )


def _vehicle_frame(vehicles: Sequence[Vehicle]) -> pd.DataFrame:
    return pd.DataFrame.from_records(
        [{"IsNew": v.IsNew, "DaysOnLot": v.DaysOnLot or 0} for v in vehicles],
        columns=["IsNew", "DaysOnLot"],
    )


def _order_frame(orders: Sequence[Order]) -> pd.DataFrame:
    return pd.DataFrame.from_records(
        [
            {
                "Status": o.Status.value,
                "OrderDate": o.OrderDate,
                "ExpectedDeliveryDate": o.ExpectedDeliveryDate,
                "ActualDeliveryDate": o.ActualDeliveryDate,
            }
            for o in orders
        ],
        columns=["Status", "OrderDate", "ExpectedDeliveryDate", "ActualDeliveryDate"],
    )


def inventory_kpis(vehicles: Sequence[Vehicle]) -> list[KPIRecord]:
    """
    Inventory page KPIs: total, new, average days on lot, aging units.

    Previous-period values are fixed offsets from the current figures
    (8 fewer vehicles, 3 fewer new vehicles, 2 more average days on lot,
    one more aging vehicle), floored at zero.
    """
    frame = _vehicle_frame(vehicles)

    total = len(frame)
    new_count = int(frame["IsNew"].sum()) if total else 0
    avg_days = _round_half_up(frame["DaysOnLot"].mean()) if total else 0
    aging = int((frame["DaysOnLot"] > AGING_THRESHOLD_DAYS).sum()) if total else 0

    return [
        _count_kpi(
            "total-vehicles", "Total Vehicles", total, total - 8, "Car", "green"
        ),
        _count_kpi(
            "new-vehicles", "New Vehicles", new_count, new_count - 3, "Package", "blue"
        ),
        _count_kpi(
            "avg-days-on-lot",
            "Avg Days on Lot",
            avg_days,
            avg_days + 2,
            "TrendingUp",
            "green",
            higher_is_better=False,
        ),
        _count_kpi(
            "aging-inventory",
            "Aging Inventory",
            aging,
            aging + 1,
            "AlertTriangle",
            "orange",
            higher_is_better=False,
        ),
    ]


def order_summary(orders: Sequence[Order], as_of: datetime) -> OrderSummary:
    """
    Summarize orders relative to ``as_of``.

    Overdue orders are past their expected delivery and not DELIVERED.
    Average delivery time covers DELIVERED orders that carry an actual
    delivery date (0.0 when there are none). Orders due this week are
    expected within seven days of ``as_of`` and not DELIVERED.
    """
    frame = _order_frame(orders)
    if frame.empty:
        return OrderSummary(
            totalOrders=0,
            pendingOrders=0,
            overdueOrders=0,
            averageDeliveryTime=0.0,
            ordersDueThisWeek=0,
        )

    as_of_ts = pd.Timestamp(as_of)
    if as_of_ts.tzinfo is None:
        as_of_ts = as_of_ts.tz_localize("UTC")
    expected = pd.to_datetime(frame["ExpectedDeliveryDate"], utc=True)
    undelivered = frame["Status"] != OrderStatus.DELIVERED.value

    delivered = frame[~undelivered & frame["ActualDeliveryDate"].notna()]
    if delivered.empty:
        average_days = 0.0
    else:
        actual = pd.to_datetime(delivered["ActualDeliveryDate"], utc=True)
        durations = actual - pd.to_datetime(delivered["OrderDate"], utc=True)
        average_days = float(durations.dt.total_seconds().mean() / 86400)

    return OrderSummary(
        totalOrders=len(frame),
        pendingOrders=int((frame["Status"] == OrderStatus.PENDING.value).sum()),
        overdueOrders=int(((expected < as_of_ts) & undelivered).sum()),
        averageDeliveryTime=max(average_days, 0.0),
        ordersDueThisWeek=int(
            ((expected <= as_of_ts + DUE_SOON_WINDOW) & undelivered).sum()
        ),
    )


def order_kpis(orders: Sequence[Order], as_of: datetime) -> list[KPIRecord]:
    """Order management page KPIs built from :func:`order_summary`."""
    summary = order_summary(orders, as_of)
    avg_days = _round_half_up(summary.averageDeliveryTime)
    logger.debug(f"Order summary as of {as_of.isoformat()}: {summary.model_dump()}")

    return [
        _count_kpi(
            "total-orders",
            "Total Orders",
            summary.totalOrders,
            summary.totalOrders - 15,
            "Package",
            "blue",
        ),
        _count_kpi(
            "pending-orders",
            "Pending Orders",
            summary.pendingOrders,
            summary.pendingOrders + 5,
            "Clock",
            "yellow",
            higher_is_better=False,
        ),
        _count_kpi(
            "overdue-orders",
            "Overdue Orders",
            summary.overdueOrders,
            summary.overdueOrders + 2,
            "AlertTriangle",
            "red",
            higher_is_better=False,
        ),
        _count_kpi(
            "avg-delivery-time",
            "Avg Delivery Time",
            avg_days,
            avg_days + 1,
            "Calendar",
            "green",
            higher_is_better=False,
        ),
        _count_kpi(
            "orders-due-week",
            "Due This Week",
            summary.ordersDueThisWeek,
            summary.ordersDueThisWeek - 3,
            "Clock",
            "orange",
        ),
    ]
