"""
Service department generation: appointments and repair orders.
"""

import logging
from collections.abc import Sequence
from datetime import timedelta
from decimal import Decimal

from dealer_datagen.shared.id_generator import SequentialKeyGenerator
from dealer_datagen.shared.models import (
    CENT,
    AppointmentStatus,
    Customer,
    Employee,
    EmployeeRole,
    Money,
    RepairOrder,
    RepairOrderStatus,
    ServiceAppointment,
    Vehicle,
)

logger = logging.getLogger(__name__)

APPOINTMENT_CONCERNS = [
    "Oil change needed",
    "Strange noise from engine",
    "Brake inspection",
    "Tire rotation",
    "Check engine light",
    "Air conditioning not working",
    "Battery replacement",
    "Transmission service",
    "Wheel alignment",
    "Routine maintenance",
]
REPAIR_ORDER_CONCERNS = [
    "Vehicle making strange noise",
    "Check engine light on",
    "Brakes feel spongy",
    "Air conditioning not cold",
    "Routine maintenance due",
]
APPOINTMENT_NOTE = "Customer prefers morning appointment"
TECHNICIAN_FINDINGS = "Diagnosed and repaired as requested"
WORK_PERFORMED = "Completed all requested services"

GENERATED_APPOINTMENT_STATUSES = [
    AppointmentStatus.SCHEDULED,
    AppointmentStatus.CONFIRMED,
    AppointmentStatus.IN_PROGRESS,
    AppointmentStatus.COMPLETED,
]
GENERATED_REPAIR_ORDER_STATUSES = [
    RepairOrderStatus.OPEN,
    RepairOrderStatus.IN_PROGRESS,
    RepairOrderStatus.WAITING_PARTS,
    RepairOrderStatus.COMPLETED,
    RepairOrderStatus.INVOICED,
]
# Statuses for which the repair order has been closed out
CLOSED_REPAIR_ORDER_STATUSES = {
    RepairOrderStatus.COMPLETED,
    RepairOrderStatus.INVOICED,
    RepairOrderStatus.CLOSED,
}

APPOINTMENT_HORIZON = timedelta(days=30)
APPOINTMENT_HOURS = (8, 17)
APPOINTMENT_DURATION_MINUTES = (30, 240)
LABOR_RANGE = (Decimal("100"), Decimal("800"))
PARTS_RANGE = (Decimal("50"), Decimal("500"))
SUBLET_RANGE = (Decimal("0"), Decimal("200"))
SUBLET_RATE = 0.3
SERVICE_TAX_RATE = Decimal("0.08")


class ServiceGeneratorMixin:
    """Mixin for service appointment and repair order generation."""

    def generate_service_appointments(
        self,
        count: int,
        customers: Sequence[Customer],
        vehicles: Sequence[Vehicle],
        employees: Sequence[Employee],
    ) -> tuple[ServiceAppointment, ...]:
        """
        Generate appointments over the next 30 days.

        Args:
            count: Number of appointments to generate
            customers: Generated customers
            vehicles: Generated vehicles
            employees: Generated employees (must include service advisors)

        Returns:
            Tuple of ServiceAppointment records keyed APPT000001..

        Raises:
            MissingDependencyError: If a dependency collection is missing or empty
            EmptyRolePoolError: If no service advisor exists
        """
        self._validate_count(count, "service appointments")
        if count == 0:
            return ()
        self._require(customers, "customers", "service appointments")
        self._require(vehicles, "vehicles", "service appointments")
        self._require(employees, "employees", "service appointments")
        advisors = self._role_pool(
            employees, EmployeeRole.SERVICE_ADVISOR, "service appointments"
        )

        now = self.reference_time
        keys = SequentialKeyGenerator("APPT").generate(count)
        numbers = SequentialKeyGenerator("A", width=5).generate(count)

        appointments = []
        for i, key in enumerate(keys):
            hour = self.random.random_int(*APPOINTMENT_HOURS)
            minute = self.random.pick_one(["00", "30"])
            appointments.append(
                ServiceAppointment(
                    AppointmentKey=key,
                    AppointmentNumber=numbers[i],
                    CustomerKey=self.random.pick_one(customers).CustomerKey,
                    VehicleKey=self.random.pick_one(vehicles).InventoryKey,
                    AppointmentDate=self.random.random_date(
                        now, now + APPOINTMENT_HORIZON
                    ),
                    AppointmentTime=f"{hour}:{minute}",
                    Status=self.random.pick_one(GENERATED_APPOINTMENT_STATUSES),
                    ServiceAdvisorId=self.random.pick_one(advisors).EmployeeId,
                    EstimatedDuration=self.random.random_int(
                        *APPOINTMENT_DURATION_MINUTES
                    ),
                    Concerns=(self.random.pick_one(APPOINTMENT_CONCERNS),),
                    Notes=APPOINTMENT_NOTE if self.random.chance(0.5) else None,
                    CreatedDate=self.random.random_date(now - timedelta(days=7), now),
                    UpdatedDate=(
                        self.random.random_date(now - timedelta(days=3), now)
                        if self.random.chance(0.5)
                        else None
                    ),
                )
            )

        logger.info(f"Generated {len(appointments)} service appointment records")
        return tuple(appointments)

    def generate_repair_orders(
        self,
        count: int,
        customers: Sequence[Customer],
        vehicles: Sequence[Vehicle],
        employees: Sequence[Employee],
    ) -> tuple[RepairOrder, ...]:
        """
        Generate repair orders with itemized totals.

        Tax is 8% of labor, parts and sublet, rounded to the cent, and
        TotalAmount is the exact sum of the four items. Closed-out orders
        (Completed, Invoiced, Closed) get a CloseDate between their
        OpenDate and the reference time.

        Args:
            count: Number of repair orders to generate
            customers: Generated customers
            vehicles: Generated vehicles
            employees: Generated employees (must include service advisors
                and technicians)

        Returns:
            Tuple of RepairOrder records keyed RO000001..

        Raises:
            MissingDependencyError: If a dependency collection is missing or empty
            EmptyRolePoolError: If no service advisor or technician exists
        """
        self._validate_count(count, "repair orders")
        if count == 0:
            return ()
        self._require(customers, "customers", "repair orders")
        self._require(vehicles, "vehicles", "repair orders")
        self._require(employees, "employees", "repair orders")
        advisors = self._role_pool(
            employees, EmployeeRole.SERVICE_ADVISOR, "repair orders"
        )
        technicians = self._role_pool(
            employees, EmployeeRole.TECHNICIAN, "repair orders"
        )

        now = self.reference_time
        keys = SequentialKeyGenerator("RO").generate(count)
        numbers = SequentialKeyGenerator("RO", width=5).generate(count)

        repair_orders = []
        for i, key in enumerate(keys):
            labor = self._money(*LABOR_RANGE)
            parts = self._money(*PARTS_RANGE)
            sublet = (
                self._money(*SUBLET_RANGE)
                if self.random.chance(SUBLET_RATE)
                else Money.zero()
            )
            taxable = labor + parts + sublet
            tax = Money.usd((taxable.Amount * SERVICE_TAX_RATE).quantize(CENT))

            status = self.random.pick_one(GENERATED_REPAIR_ORDER_STATUSES)
            open_date = self.random.random_date(now - timedelta(days=14), now)
            close_date = (
                self.random.random_date(open_date, now)
                if status in CLOSED_REPAIR_ORDER_STATUSES
                else None
            )

            repair_orders.append(
                RepairOrder(
                    RepairOrderKey=key,
                    RepairOrderNumber=numbers[i],
                    CustomerKey=self.random.pick_one(customers).CustomerKey,
                    VehicleKey=self.random.pick_one(vehicles).InventoryKey,
                    ServiceAdvisorId=self.random.pick_one(advisors).EmployeeId,
                    TechnicianId=self.random.pick_one(technicians).EmployeeId,
                    Status=status,
                    OpenDate=open_date,
                    CloseDate=close_date,
                    PromisedDate=self.random.random_date(now, now + timedelta(days=3)),
                    TotalLabor=labor,
                    TotalParts=parts,
                    TotalSublet=sublet,
                    TotalTax=tax,
                    TotalAmount=taxable + tax,
                    CustomerConcerns=self.random.pick_one(REPAIR_ORDER_CONCERNS),
                    TechnicianFindings=(
                        TECHNICIAN_FINDINGS if self.random.chance(0.7) else None
                    ),
                    WorkPerformed=WORK_PERFORMED if self.random.chance(0.7) else None,
                    Mileage=self.random.random_int(10000, 150000),
                )
            )

        logger.info(f"Generated {len(repair_orders)} repair order records")
        return tuple(repair_orders)
