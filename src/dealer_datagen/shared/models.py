"""
Core data models for the dealer data generator.

This module contains the enumerations, value objects (money, names,
addresses), the generated entity models and the KPI record consumed by
the dashboard widgets. Every model is frozen: a generated dataset is an
immutable snapshot.
"""

import re
from datetime import datetime
from decimal import Decimal
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

CENT = Decimal("0.01")


class FrozenModel(BaseModel):
    """Base model for immutable generated records."""

    model_config = ConfigDict(frozen=True)


# ================================
# ENUMERATIONS
# ================================


class CurrencyCode(str, Enum):
    """Currency codes used by the dealership data contracts."""

    US_DOLLAR = "UsDollar"


class EmployeeRole(str, Enum):
    """Job role held by a generated employee."""

    SALESPERSON = "Salesperson"
    SERVICE_ADVISOR = "ServiceAdvisor"
    TECHNICIAN = "Technician"
    FINANCE_MANAGER = "FinanceManager"
    SERVICE_MANAGER = "ServiceManager"
    SALES_MANAGER = "SalesManager"
    GENERAL_MANAGER = "GeneralManager"


class UserRole(str, Enum):
    """Dashboard role used to select a KPI schema."""

    GENERAL_MANAGER = "general-manager"
    SALES_MANAGER = "sales-manager"
    SERVICE_MANAGER = "service-manager"
    FINANCE_MANAGER = "finance-manager"
    SALESPERSON = "salesperson"
    SERVICE_ADVISOR = "service-advisor"
    TECHNICIAN = "technician"
    PARTS_COUNTER = "parts-counter"
    ACCOUNTANT = "accountant"


class CustomerType(str, Enum):
    RETAIL = "Retail"
    WHOLESALE = "Wholesale"
    FLEET = "Fleet"


class PhoneNumberType(str, Enum):
    MOBILE = "Mobile"
    HOME = "Home"
    WORK = "Work"


class DealType(str, Enum):
    CASH = "Cash"
    FINANCE = "Finance"
    LEASE = "Lease"


class DealStatus(str, Enum):
    OPEN = "Open"
    CLOSED = "Closed"
    DELIVERED = "Delivered"
    CANCELLED = "Cancelled"


class AppointmentStatus(str, Enum):
    SCHEDULED = "Scheduled"
    CONFIRMED = "Confirmed"
    IN_PROGRESS = "InProgress"
    COMPLETED = "Completed"
    CANCELLED = "Cancelled"
    NO_SHOW = "NoShow"


class RepairOrderStatus(str, Enum):
    OPEN = "Open"
    IN_PROGRESS = "InProgress"
    WAITING_PARTS = "WaitingParts"
    WAITING_APPROVAL = "WaitingApproval"
    COMPLETED = "Completed"
    INVOICED = "Invoiced"
    CLOSED = "Closed"
    CANCELLED = "Cancelled"


class OrderType(str, Enum):
    VEHICLE = "VEHICLE"
    PARTS = "PARTS"
    SERVICE = "SERVICE"
    ACCESSORIES = "ACCESSORIES"


class OrderStatus(str, Enum):
    PENDING = "PENDING"
    CONFIRMED = "CONFIRMED"
    IN_PRODUCTION = "IN_PRODUCTION"
    SHIPPED = "SHIPPED"
    DELIVERED = "DELIVERED"
    CANCELLED = "CANCELLED"


class OEMStatus(str, Enum):
    PENDING = "PENDING"
    CONFIRMED = "CONFIRMED"
    IN_PRODUCTION = "IN_PRODUCTION"
    SHIPPED = "SHIPPED"
    DELIVERED = "DELIVERED"


class UpfitterStatus(str, Enum):
    PENDING = "PENDING"
    CONFIRMED = "CONFIRMED"
    IN_PROGRESS = "IN_PROGRESS"
    COMPLETED = "COMPLETED"
    SHIPPED = "SHIPPED"


class LogisticsStatus(str, Enum):
    PENDING = "PENDING"
    PICKED_UP = "PICKED_UP"
    IN_TRANSIT = "IN_TRANSIT"
    DELIVERED = "DELIVERED"


class PaymentStatus(str, Enum):
    PENDING = "PENDING"
    PARTIAL = "PARTIAL"
    PAID = "PAID"
    OVERDUE = "OVERDUE"


class AdministrativeStatus(str, Enum):
    PENDING = "PENDING"
    APPROVED = "APPROVED"
    REJECTED = "REJECTED"
    COMPLETED = "COMPLETED"


class OrderPriority(str, Enum):
    LOW = "LOW"
    MEDIUM = "MEDIUM"
    HIGH = "HIGH"
    CRITICAL = "CRITICAL"


class KPIFormat(str, Enum):
    CURRENCY = "currency"
    NUMBER = "number"
    PERCENTAGE = "percentage"


class ChangeType(str, Enum):
    INCREASE = "increase"
    DECREASE = "decrease"
    NEUTRAL = "neutral"


# ================================
# VALUE OBJECTS
# ================================


class Money(FrozenModel):
    """A currency amount paired with its currency code."""

    Amount: Decimal = Field(..., description="Amount with cent precision")
    Currency: CurrencyCode = Field(
        default=CurrencyCode.US_DOLLAR, description="Currency of the amount"
    )

    @field_validator("Amount", mode="before")
    @classmethod
    def parse_amount(cls, v) -> Decimal:
        """Parse amounts from strings, floats or Decimals."""
        if isinstance(v, Decimal):
            return v
        try:
            return Decimal(str(v))
        except Exception:
            raise ValueError("Amount must be a valid decimal number")

    @field_validator("Amount")
    @classmethod
    def validate_cent_precision(cls, v: Decimal) -> Decimal:
        """Amounts carry at most two decimal places."""
        if v != v.quantize(CENT):
            raise ValueError(f"Amount must have at most 2 decimal places, got {v}")
        return v

    @classmethod
    def usd(cls, amount: Decimal | int | str) -> "Money":
        return cls(Amount=Decimal(str(amount)).quantize(CENT))

    @classmethod
    def zero(cls) -> "Money":
        return cls(Amount=Decimal("0.00"))

    def __add__(self, other: "Money") -> "Money":
        if not isinstance(other, Money):
            return NotImplemented
        if other.Currency != self.Currency:
            raise ValueError(
                f"Cannot add {other.Currency.value} to {self.Currency.value}"
            )
        return Money(Amount=self.Amount + other.Amount, Currency=self.Currency)


class PersonalName(FrozenModel):
    FirstName: str = Field(..., min_length=1, description="Synthetic first name")
    LastName: str = Field(..., min_length=1, description="Synthetic last name")

    @property
    def full_name(self) -> str:
        return f"{self.FirstName} {self.LastName}"


class StoreAddress(FrozenModel):
    Line1: str = Field(..., min_length=1)
    City: str = Field(..., min_length=1)
    State: str = Field(..., min_length=2, max_length=2, description="State code")
    Zip: str = Field(..., description="5-digit ZIP code")
    Country: str = Field(default="USA")

    @field_validator("Zip")
    @classmethod
    def validate_zip_format(cls, v: str) -> str:
        if not re.match(r"^\d{5}$", v):
            raise ValueError("ZIP code must be 5 digits")
        return v


class PhoneNumber(FrozenModel):
    Digits: str = Field(..., description="Phone number (synthetic)")
    NumberType: PhoneNumberType = Field(default=PhoneNumberType.MOBILE)

    @field_validator("Digits")
    @classmethod
    def validate_phone_format(cls, v: str) -> str:
        """Validate phone number format."""
        if not re.match(r"^\d{3}-\d{3}-\d{4}$", v):
            raise ValueError("Phone must be in format XXX-XXX-XXXX")
        return v


class CustomerIdentity(FrozenModel):
    PersonalName: PersonalName
    Address1: str = Field(..., min_length=1)
    City: str = Field(..., min_length=1)
    State: str = Field(..., min_length=2, max_length=2)
    Zip: str = Field(..., min_length=5, max_length=5)
    EmailAddress: str = Field(..., min_length=3)
    PhoneNumbers: tuple[PhoneNumber, ...] = Field(default_factory=tuple)


class DriverLicense(FrozenModel):
    Number: str = Field(..., min_length=1)
    State: str = Field(..., min_length=2, max_length=2)


# ================================
# ENTITY MODELS (GENERATED DATA)
# ================================


class Store(FrozenModel):
    """Dealership rooftop."""

    StoreId: int = Field(..., gt=0, description="Primary key")
    StoreName: str = Field(..., min_length=1, description="Display name")
    LegalName: str = Field(..., min_length=1, description="Registered legal name")
    Address: StoreAddress
    DealerState: str = Field(..., min_length=2, max_length=2)
    DealerZip: str = Field(..., min_length=5, max_length=5)


class Employee(FrozenModel):
    """Dealership employee."""

    EmployeeId: str = Field(..., min_length=1, description="Primary key")
    PersonalName: PersonalName
    Role: EmployeeRole
    IsActive: bool = Field(default=True)
    FactoryID: str | None = Field(None, description="OEM factory identifier")
    Username: str | None = Field(None, description="Dashboard login name")

    @property
    def full_name(self) -> str:
        return self.PersonalName.full_name


class Customer(FrozenModel):
    """Dealership customer."""

    CustomerKey: str = Field(..., min_length=1, description="Primary key")
    Identity: CustomerIdentity
    DMSCustomerID: str | None = Field(None, description="Dealer management system ID")
    CustomerType: CustomerType
    License: DriverLicense | None = None

    @property
    def full_name(self) -> str:
        return self.Identity.PersonalName.full_name


class Vehicle(FrozenModel):
    """Vehicle in dealership inventory."""

    InventoryKey: str = Field(..., min_length=1, description="Primary key")
    VIN: str = Field(..., min_length=17, max_length=17)
    StockNumber: str = Field(..., min_length=1)
    Year: int = Field(..., ge=1900, le=2100)
    Make: str = Field(..., min_length=1)
    Model: str = Field(..., min_length=1)
    IsNew: bool
    Mileage: int = Field(..., ge=0)
    Cost: Money
    MSRP: Money
    SellingPrice: Money
    Color: str | None = None
    Engine: str | None = None
    Transmission: str | None = None
    FuelType: str | None = None
    BodyStyle: str | None = None
    DaysOnLot: int | None = Field(None, ge=0, description="Days since stocked")

    @field_validator("VIN")
    @classmethod
    def validate_vin_alphabet(cls, v: str) -> str:
        """VINs never contain I, O or Q."""
        if not re.match(r"^[A-HJ-NPR-Z0-9]{17}$", v):
            raise ValueError("VIN must be 17 characters excluding I, O and Q")
        return v

    @property
    def description(self) -> str:
        return f"{self.Year} {self.Make} {self.Model}"


class DealSummary(FrozenModel):
    """Vehicle sales deal with its gross profit breakdown."""

    DealKey: str = Field(..., min_length=1, description="Primary key")
    DealNumber: int = Field(..., gt=0)
    CustomerKey: str
    CustomerName: str
    InventoryKey: str
    VehicleInfo: str
    DealType: DealType
    DealStatus: DealStatus
    DateSold: datetime | None = None
    FrontendGross: Money
    BackendGross: Money
    TotalGross: Money
    SalespersonId: str
    Salesperson: str
    FinanceManagerId: str | None = None
    FinanceManager: str | None = None
    StoreId: int = Field(..., gt=0)
    StoreName: str

    @model_validator(mode="after")
    def validate_total_gross(self) -> "DealSummary":
        """TotalGross is always FrontendGross + BackendGross."""
        if self.TotalGross != self.FrontendGross + self.BackendGross:
            raise ValueError(
                f"TotalGross ({self.TotalGross.Amount}) must equal FrontendGross "
                f"+ BackendGross ({self.FrontendGross.Amount} + {self.BackendGross.Amount})"
            )
        return self


class ServiceAppointment(FrozenModel):
    """Scheduled service visit."""

    AppointmentKey: str = Field(..., min_length=1, description="Primary key")
    AppointmentNumber: str
    CustomerKey: str
    VehicleKey: str
    AppointmentDate: datetime
    AppointmentTime: str = Field(..., description="Wall clock slot, H:MM")
    Status: AppointmentStatus
    ServiceAdvisorId: str
    EstimatedDuration: int = Field(..., gt=0, description="Minutes")
    Concerns: tuple[str, ...] = Field(default_factory=tuple)
    Notes: str | None = None
    CreatedDate: datetime
    UpdatedDate: datetime | None = None

    @field_validator("AppointmentTime")
    @classmethod
    def validate_time_slot(cls, v: str) -> str:
        if not re.match(r"^\d{1,2}:(00|30)$", v):
            raise ValueError("AppointmentTime must be a half-hour slot like 9:30")
        return v


class RepairOrder(FrozenModel):
    """Service repair order with itemized totals."""

    RepairOrderKey: str = Field(..., min_length=1, description="Primary key")
    RepairOrderNumber: str
    CustomerKey: str
    VehicleKey: str
    ServiceAdvisorId: str
    TechnicianId: str
    Status: RepairOrderStatus
    OpenDate: datetime
    CloseDate: datetime | None = None
    PromisedDate: datetime | None = None
    TotalLabor: Money
    TotalParts: Money
    TotalSublet: Money
    TotalTax: Money
    TotalAmount: Money
    CustomerConcerns: str | None = None
    TechnicianFindings: str | None = None
    WorkPerformed: str | None = None
    Mileage: int | None = Field(None, ge=0)

    @model_validator(mode="after")
    def validate_total_amount(self) -> "RepairOrder":
        """TotalAmount is the sum of labor, parts, sublet and tax."""
        expected = self.TotalLabor + self.TotalParts + self.TotalSublet + self.TotalTax
        if self.TotalAmount != expected:
            raise ValueError(
                f"TotalAmount ({self.TotalAmount.Amount}) must equal the sum of "
                f"labor, parts, sublet and tax ({expected.Amount})"
            )
        return self


class Order(FrozenModel):
    """Vehicle, parts, service or accessories order with its status tracks."""

    OrderKey: str = Field(..., min_length=1, description="Primary key")
    OrderNumber: str
    CustomerKey: str
    CustomerName: str
    OrderType: OrderType
    OrderDate: datetime
    ExpectedDeliveryDate: datetime
    ActualDeliveryDate: datetime | None = None
    TotalAmount: Money
    Status: OrderStatus
    OEMStatus: OEMStatus
    UpfitterStatus: UpfitterStatus
    LogisticsStatus: LogisticsStatus
    PaymentStatus: PaymentStatus
    AdministrativeStatus: AdministrativeStatus
    Notes: str | None = None
    Priority: OrderPriority


# ================================
# KPI MODELS
# ================================


class KPIRecord(FrozenModel):
    """Display-oriented metric bundle rendered by a KPI widget."""

    id: str = Field(..., min_length=1)
    title: str = Field(..., min_length=1)
    value: int | Decimal | str
    previous_value: int | Decimal | str | None = None
    change: int | Decimal | None = Field(
        None, description="Signed delta, value - previous_value"
    )
    change_percent: Decimal | None = Field(
        None, description="Delta relative to previous_value, in percent"
    )
    change_type: ChangeType = ChangeType.NEUTRAL
    format: KPIFormat
    icon: str | None = None
    color: str | None = None
    target: int | Decimal | None = None
    unit: str | None = None
    higher_is_better: bool = True

    @model_validator(mode="after")
    def validate_change(self) -> "KPIRecord":
        """A numeric change must equal value - previous_value."""
        if self.change is None or self.previous_value is None:
            return self
        if isinstance(self.value, str) or isinstance(self.previous_value, str):
            return self
        if self.change != self.value - self.previous_value:
            raise ValueError(
                f"change ({self.change}) must equal value - previous_value "
                f"({self.value} - {self.previous_value})"
            )
        return self

    @property
    def is_favorable(self) -> bool:
        """Whether the movement since the previous period is good news."""
        if self.change_type == ChangeType.NEUTRAL:
            return True
        return (self.change_type == ChangeType.INCREASE) == self.higher_is_better

    @property
    def target_progress(self) -> Decimal | None:
        """Percent of target reached (one decimal place), when a target is set."""
        if not self.target or isinstance(self.value, str):
            return None
        return (Decimal(self.value) / Decimal(self.target) * 100).quantize(
            Decimal("0.1")
        )


class OrderSummary(FrozenModel):
    """Order counts shown on the order management page."""

    totalOrders: int = Field(..., ge=0)
    pendingOrders: int = Field(..., ge=0)
    overdueOrders: int = Field(..., ge=0)
    averageDeliveryTime: float = Field(..., ge=0.0, description="Days")
    ordersDueThisWeek: int = Field(..., ge=0)
