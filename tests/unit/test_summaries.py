"""
Unit tests for dataset-derived KPI summaries (inventory and orders).
"""

from decimal import Decimal

import pytest

from dealer_datagen.kpi import inventory_kpis, order_kpis, order_summary
from dealer_datagen.shared.models import ChangeType, OrderStatus
from tests.test_utils import AS_OF, make_order, make_vehicle


class TestInventoryKpis:
    def test_counts(self):
        vehicles = [
            make_vehicle(1, True, 10),
            make_vehicle(2, True, 61),
            make_vehicle(3, False, 60),
            make_vehicle(4, False, 90),
            make_vehicle(5, False, None),
        ]
        kpis = {k.id: k for k in inventory_kpis(vehicles)}

        assert kpis["total-vehicles"].value == 5
        assert kpis["new-vehicles"].value == 2
        # (10 + 61 + 60 + 90 + 0) / 5 = 44.2
        assert kpis["avg-days-on-lot"].value == 44
        assert kpis["avg-days-on-lot"].previous_value == 46
        assert kpis["aging-inventory"].value == 2

    def test_previous_values_and_direction(self):
        vehicles = [make_vehicle(i, True, 5) for i in range(1, 21)]
        kpis = {k.id: k for k in inventory_kpis(vehicles)}

        assert kpis["total-vehicles"].previous_value == 12
        assert kpis["total-vehicles"].change_type == ChangeType.INCREASE
        assert kpis["aging-inventory"].change == -1
        assert kpis["aging-inventory"].is_favorable

    def test_empty_inventory(self):
        kpis = inventory_kpis([])
        assert [k.value for k in kpis] == [0, 0, 0, 0]
        assert all(k.previous_value >= 0 for k in kpis)


class TestOrderSummary:
    @pytest.fixture
    def orders(self):
        return [
            make_order(1, OrderStatus.PENDING, expected_in_days=-2),
            make_order(2, OrderStatus.SHIPPED, expected_in_days=3),
            make_order(3, OrderStatus.DELIVERED, expected_in_days=-5, delivered_after_days=10),
            make_order(4, OrderStatus.DELIVERED, expected_in_days=-1, delivered_after_days=14),
            make_order(5, OrderStatus.PENDING, expected_in_days=20),
            make_order(6, OrderStatus.CANCELLED, expected_in_days=7),
        ]

    def test_summary(self, orders):
        summary = order_summary(orders, AS_OF)
        assert summary.totalOrders == 6
        assert summary.pendingOrders == 2
        assert summary.overdueOrders == 1
        assert summary.averageDeliveryTime == pytest.approx(12.0)
        # Orders 1, 2 and 6 are undelivered and expected within a week
        assert summary.ordersDueThisWeek == 3

    def test_delivered_without_actual_date_is_ignored(self):
        orders = [make_order(1, OrderStatus.DELIVERED, expected_in_days=-1)]
        assert order_summary(orders, AS_OF).averageDeliveryTime == 0.0

    def test_naive_as_of_is_utc(self, orders):
        naive = AS_OF.replace(tzinfo=None)
        assert order_summary(orders, naive) == order_summary(orders, AS_OF)

    def test_empty(self):
        summary = order_summary([], AS_OF)
        assert summary.totalOrders == 0
        assert summary.averageDeliveryTime == 0.0

    def test_order_kpis(self, orders):
        kpis = {k.id: k for k in order_kpis(orders, AS_OF)}
        assert kpis["total-orders"].value == 6
        assert kpis["total-orders"].previous_value == 0
        assert kpis["pending-orders"].previous_value == 7
        assert kpis["avg-delivery-time"].value == 12
        assert kpis["orders-due-week"].value == 3
        assert all(k.change == k.value - k.previous_value for k in kpis.values())

    def test_change_percent_rounds_half_up(self):
        # 255 orders against a previous 240: 15 / 240 = 6.25%
        orders = [
            make_order(n, OrderStatus.SHIPPED, expected_in_days=30)
            for n in range(1, 256)
        ]
        kpis = {k.id: k for k in order_kpis(orders, AS_OF)}
        assert kpis["total-orders"].previous_value == 240
        assert kpis["total-orders"].change_percent == Decimal("6.3")

    def test_generated_orders(self, small_dataset):
        summary = order_summary(small_dataset.orders, small_dataset.reference_time)
        assert summary.totalOrders == len(small_dataset.orders)
        assert summary.overdueOrders <= summary.totalOrders
        assert Decimal(str(summary.averageDeliveryTime)) >= 0
