"""Test utilities for building valid records by hand."""

from datetime import UTC, datetime, timedelta

from dealer_datagen.shared.models import (
    AdministrativeStatus,
    DealStatus,
    DealSummary,
    DealType,
    LogisticsStatus,
    Money,
    OEMStatus,
    Order,
    OrderPriority,
    OrderStatus,
    OrderType,
    PaymentStatus,
    UpfitterStatus,
    Vehicle,
)

AS_OF = datetime(2025, 6, 15, tzinfo=UTC)


def make_vehicle(n: int, is_new: bool, days_on_lot: int | None) -> Vehicle:
    """Create a 2024 Ford Escape with stock number STK{n:04d}."""
    return Vehicle(
        InventoryKey=f"INV{n:06d}",
        VIN=f"1FABCDEFGHJK{n:05d}",
        StockNumber=f"STK{n:04d}",
        Year=2024,
        Make="Ford",
        Model="Escape",
        IsNew=is_new,
        Mileage=10 if is_new else 20000,
        Cost=Money.usd("20000"),
        MSRP=Money.usd("25000"),
        SellingPrice=Money.usd("24500"),
        DaysOnLot=days_on_lot,
    )


def make_order(
    n: int,
    status: OrderStatus,
    expected_in_days: float,
    delivered_after_days: float | None = None,
) -> Order:
    """
    Create a parts order placed 20 days before AS_OF.

    Args:
        n: Sequence number for the keys
        status: Order status
        expected_in_days: Expected delivery relative to AS_OF
        delivered_after_days: Actual delivery relative to the order date
    """
    order_date = AS_OF - timedelta(days=20)
    return Order(
        OrderKey=f"ORD{n:06d}",
        OrderNumber=f"ORD-{n:05d}",
        CustomerKey="CUST000001",
        CustomerName="Jane Smith",
        OrderType=OrderType.PARTS,
        OrderDate=order_date,
        ExpectedDeliveryDate=AS_OF + timedelta(days=expected_in_days),
        ActualDeliveryDate=(
            order_date + timedelta(days=delivered_after_days)
            if delivered_after_days is not None
            else None
        ),
        TotalAmount=Money.usd("500"),
        Status=status,
        OEMStatus=OEMStatus.PENDING,
        UpfitterStatus=UpfitterStatus.PENDING,
        LogisticsStatus=LogisticsStatus.PENDING,
        PaymentStatus=PaymentStatus.PENDING,
        AdministrativeStatus=AdministrativeStatus.PENDING,
        Priority=OrderPriority.MEDIUM,
    )


def make_deal(
    n: int,
    customer: str,
    vehicle: str,
    status: DealStatus,
    total: str,
    sold: datetime | None,
    deal_type: DealType = DealType.FINANCE,
) -> DealSummary:
    """Create a deal whose whole gross is frontend gross."""
    gross = Money.usd(total)
    return DealSummary(
        DealKey=f"DEAL{n:06d}",
        DealNumber=n,
        CustomerKey=f"CUST{n:06d}",
        CustomerName=customer,
        InventoryKey=f"INV{n:06d}",
        VehicleInfo=vehicle,
        DealType=deal_type,
        DealStatus=status,
        DateSold=sold,
        FrontendGross=gross,
        BackendGross=Money.zero(),
        TotalGross=gross,
        SalespersonId="EMP001",
        Salesperson="John Smith",
        StoreId=1,
        StoreName="Downtown Auto",
    )
