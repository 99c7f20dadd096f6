"""
Order generation with independent OEM, upfitter, logistics, payment and
administrative status tracks.
"""

import logging
from collections.abc import Sequence
from datetime import timedelta
from decimal import Decimal

from dealer_datagen.shared.id_generator import SequentialKeyGenerator
from dealer_datagen.shared.models import (
    AdministrativeStatus,
    Customer,
    LogisticsStatus,
    OEMStatus,
    Order,
    OrderPriority,
    OrderStatus,
    OrderType,
    PaymentStatus,
    UpfitterStatus,
)

logger = logging.getLogger(__name__)

BASE_AMOUNT_BY_TYPE: dict[OrderType, Decimal] = {
    OrderType.VEHICLE: Decimal("25000"),
    OrderType.PARTS: Decimal("500"),
    OrderType.SERVICE: Decimal("1500"),
    OrderType.ACCESSORIES: Decimal("200"),
}
AMOUNT_SPREAD = (Decimal("0.8"), Decimal("1.2"))
ORDER_NOTES = [
    "Special instructions",
    "Customer preference",
    "Rush order",
    "Custom configuration",
]

ORDER_LOOKBACK = timedelta(days=90)
DELIVERY_LEAD_TIME = (timedelta(days=7), timedelta(days=37))
DELIVERY_VARIANCE = timedelta(days=3.5)
DELIVERED_RATE = 0.7
NOTE_RATE = 0.3


class OrderGeneratorMixin:
    """Mixin for order generation."""

    def generate_orders(
        self, count: int, customers: Sequence[Customer]
    ) -> tuple[Order, ...]:
        """
        Generate orders placed over the last 90 days.

        Expected delivery falls 7-37 days after the order. About 70% of
        orders have an actual delivery within 3.5 days of the expected
        date; deliveries are never placed after the reference time.

        Args:
            count: Number of orders to generate
            customers: Generated customers

        Returns:
            Tuple of Order records keyed ORD000001..

        Raises:
            MissingDependencyError: If customers are missing or empty
        """
        self._validate_count(count, "orders")
        if count == 0:
            return ()
        self._require(customers, "customers", "orders")

        now = self.reference_time
        keys = SequentialKeyGenerator("ORD").generate(count)
        numbers = SequentialKeyGenerator("ORD", width=5, separator="-").generate(count)

        orders = []
        for i, key in enumerate(keys):
            customer = self.random.pick_one(customers)
            order_date = self.random.random_date(now - ORDER_LOOKBACK, now)
            expected = self.random.random_date(
                order_date + DELIVERY_LEAD_TIME[0], order_date + DELIVERY_LEAD_TIME[1]
            )

            actual = None
            earliest_delivery = expected - DELIVERY_VARIANCE
            if self.random.chance(DELIVERED_RATE) and earliest_delivery <= now:
                actual = self.random.random_date(
                    earliest_delivery, min(expected + DELIVERY_VARIANCE, now)
                )

            order_type = self.random.pick_one(list(OrderType))
            base_amount = BASE_AMOUNT_BY_TYPE[order_type]

            orders.append(
                Order(
                    OrderKey=key,
                    OrderNumber=numbers[i],
                    CustomerKey=customer.CustomerKey,
                    CustomerName=customer.full_name,
                    OrderType=order_type,
                    OrderDate=order_date,
                    ExpectedDeliveryDate=expected,
                    ActualDeliveryDate=actual,
                    TotalAmount=self._money(
                        base_amount * AMOUNT_SPREAD[0], base_amount * AMOUNT_SPREAD[1]
                    ),
                    Status=self.random.pick_one(list(OrderStatus)),
                    OEMStatus=self.random.pick_one(list(OEMStatus)),
                    UpfitterStatus=self.random.pick_one(list(UpfitterStatus)),
                    LogisticsStatus=self.random.pick_one(list(LogisticsStatus)),
                    PaymentStatus=self.random.pick_one(list(PaymentStatus)),
                    AdministrativeStatus=self.random.pick_one(
                        list(AdministrativeStatus)
                    ),
                    Notes=(
                        f"Order note {i + 1}: {self.random.pick_one(ORDER_NOTES)}"
                        if self.random.chance(NOTE_RATE)
                        else None
                    ),
                    Priority=self.random.pick_one(list(OrderPriority)),
                )
            )

        logger.info(f"Generated {len(orders)} order records")
        return tuple(orders)
