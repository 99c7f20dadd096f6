"""
Unit tests for the pydantic data models.

Tests money arithmetic, value-object validation, derived-total validators
and KPI record consistency.
"""

from datetime import UTC, datetime
from decimal import Decimal

import pytest
from pydantic import ValidationError

from dealer_datagen.shared.models import (
    ChangeType,
    CurrencyCode,
    DealStatus,
    DealSummary,
    DealType,
    KPIFormat,
    KPIRecord,
    Money,
    PersonalName,
    PhoneNumber,
    RepairOrder,
    RepairOrderStatus,
    ServiceAppointment,
    AppointmentStatus,
    StoreAddress,
    Vehicle,
)

_hyp = pytest.importorskip("hypothesis")
from hypothesis import given  # noqa: E402
from hypothesis import strategies as st  # noqa: E402

NOW = datetime(2025, 6, 15, tzinfo=UTC)


def usd(amount: str) -> Money:
    return Money.usd(Decimal(amount))


class TestMoney:
    def test_defaults_to_us_dollar(self):
        assert Money(Amount=Decimal("1.50")).Currency == CurrencyCode.US_DOLLAR
        assert CurrencyCode.US_DOLLAR.value == "UsDollar"

    def test_parses_strings_and_floats(self):
        assert Money(Amount="12.34").Amount == Decimal("12.34")
        assert Money(Amount=0.5).Amount == Decimal("0.5")

    def test_rejects_sub_cent_precision(self):
        with pytest.raises(ValidationError, match="at most 2 decimal places"):
            Money(Amount=Decimal("1.001"))

    def test_rejects_garbage(self):
        with pytest.raises(ValidationError):
            Money(Amount="twelve")

    def test_addition(self):
        assert (usd("1.25") + usd("2.50")).Amount == Decimal("3.75")

    def test_is_frozen(self):
        money = usd("1.00")
        with pytest.raises(ValidationError):
            money.Amount = Decimal("2.00")

    @given(
        a=st.decimals(min_value=0, max_value=10**7, places=2),
        b=st.decimals(min_value=0, max_value=10**7, places=2),
    )
    def test_addition_is_exact(self, a, b):
        assert (Money.usd(a) + Money.usd(b)).Amount == a + b


class TestValueObjects:
    def test_full_name(self):
        assert PersonalName(FirstName="Jane", LastName="Smith").full_name == "Jane Smith"

    def test_zip_must_be_five_digits(self):
        with pytest.raises(ValidationError, match="ZIP code must be 5 digits"):
            StoreAddress(Line1="1 Main St", City="Salem", State="CA", Zip="1234")

    def test_phone_format(self):
        assert PhoneNumber(Digits="555-123-4567").Digits == "555-123-4567"
        with pytest.raises(ValidationError, match="XXX-XXX-XXXX"):
            PhoneNumber(Digits="5551234567")


def _vehicle(**overrides) -> Vehicle:
    data = dict(
        InventoryKey="INV000001",
        VIN="1FABCDEFGHJKLMNPR",
        StockNumber="STK0001",
        Year=2024,
        Make="Ford",
        Model="F-150",
        IsNew=True,
        Mileage=10,
        Cost=usd("30000.00"),
        MSRP=usd("40000.00"),
        SellingPrice=usd("39000.00"),
        DaysOnLot=12,
    )
    data.update(overrides)
    return Vehicle(**data)


class TestVehicle:
    def test_description(self):
        assert _vehicle().description == "2024 Ford F-150"

    @pytest.mark.parametrize(
        "vin", ["1FABCDEFGHJKLMNP", "1FABCDEFGHJKLMNPRS", "1FABCDEFGHJKLMNPI"]
    )
    def test_rejects_bad_vins(self, vin):
        with pytest.raises(ValidationError):
            _vehicle(VIN=vin)

    def test_rejects_negative_days_on_lot(self):
        with pytest.raises(ValidationError):
            _vehicle(DaysOnLot=-1)


def _deal(**overrides) -> DealSummary:
    data = dict(
        DealKey="DEAL000001",
        DealNumber=1,
        CustomerKey="CUST000001",
        CustomerName="Jane Smith",
        InventoryKey="INV000001",
        VehicleInfo="2024 Ford F-150",
        DealType=DealType.FINANCE,
        DealStatus=DealStatus.CLOSED,
        DateSold=NOW,
        FrontendGross=usd("1000.00"),
        BackendGross=usd("500.00"),
        TotalGross=usd("1500.00"),
        SalespersonId="EMP001",
        Salesperson="John Brown",
        StoreId=1,
        StoreName="Downtown Auto",
    )
    data.update(overrides)
    return DealSummary(**data)


class TestDealSummary:
    def test_valid_deal(self):
        assert _deal().TotalGross.Amount == Decimal("1500.00")

    def test_total_gross_must_be_sum(self):
        with pytest.raises(ValidationError, match="TotalGross"):
            _deal(TotalGross=usd("1499.99"))


def _repair_order(**overrides) -> RepairOrder:
    data = dict(
        RepairOrderKey="RO000001",
        RepairOrderNumber="RO00001",
        CustomerKey="CUST000001",
        VehicleKey="INV000001",
        ServiceAdvisorId="EMP002",
        TechnicianId="EMP003",
        Status=RepairOrderStatus.OPEN,
        OpenDate=NOW,
        TotalLabor=usd("200.00"),
        TotalParts=usd("100.00"),
        TotalSublet=usd("0.00"),
        TotalTax=usd("24.00"),
        TotalAmount=usd("324.00"),
    )
    data.update(overrides)
    return RepairOrder(**data)


class TestRepairOrder:
    def test_valid_repair_order(self):
        assert _repair_order().TotalAmount.Amount == Decimal("324.00")

    def test_total_amount_must_be_sum(self):
        with pytest.raises(ValidationError, match="TotalAmount"):
            _repair_order(TotalAmount=usd("300.00"))


class TestServiceAppointment:
    def _appointment(self, time_slot: str) -> ServiceAppointment:
        return ServiceAppointment(
            AppointmentKey="APPT000001",
            AppointmentNumber="A00001",
            CustomerKey="CUST000001",
            VehicleKey="INV000001",
            AppointmentDate=NOW,
            AppointmentTime=time_slot,
            Status=AppointmentStatus.SCHEDULED,
            ServiceAdvisorId="EMP002",
            EstimatedDuration=60,
            CreatedDate=NOW,
        )

    @pytest.mark.parametrize("slot", ["8:00", "9:30", "17:30"])
    def test_half_hour_slots(self, slot):
        assert self._appointment(slot).AppointmentTime == slot

    @pytest.mark.parametrize("slot", ["8:15", "0930", "9:3"])
    def test_rejects_other_times(self, slot):
        with pytest.raises(ValidationError):
            self._appointment(slot)


class TestKPIRecord:
    def _record(self, **overrides) -> KPIRecord:
        data = dict(
            id="units-sold",
            title="Units Sold (MTD)",
            value=120,
            previous_value=100,
            change=20,
            change_percent=Decimal("20.0"),
            change_type=ChangeType.INCREASE,
            format=KPIFormat.NUMBER,
        )
        data.update(overrides)
        return KPIRecord(**data)

    def test_change_must_match_values(self):
        with pytest.raises(ValidationError, match="change"):
            self._record(change=5)

    def test_favorable_when_lower_is_better(self):
        record = self._record(
            value=90,
            change=-10,
            change_type=ChangeType.DECREASE,
            higher_is_better=False,
        )
        assert record.is_favorable

    def test_unfavorable_increase_when_lower_is_better(self):
        assert not self._record(higher_is_better=False).is_favorable

    def test_target_progress(self):
        assert self._record(target=240).target_progress == Decimal("50.0")
        assert self._record().target_progress is None
