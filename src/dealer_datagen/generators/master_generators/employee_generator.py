"""
Employee master data generation with role coverage.
"""

import logging

from dealer_datagen.shared.id_generator import SequentialKeyGenerator
from dealer_datagen.shared.models import Employee, EmployeeRole, PersonalName

logger = logging.getLogger(__name__)

EMPLOYEE_FIRST_NAMES = [
    "John", "Jane", "Mike", "Sarah", "David", "Lisa", "Chris", "Amy", "Robert", "Emily"
]
EMPLOYEE_LAST_NAMES = [
    "Smith",
    "Johnson",
    "Williams",
    "Brown",
    "Jones",
    "Garcia",
    "Miller",
    "Davis",
    "Rodriguez",
    "Martinez",
]

ACTIVE_RATE = 0.9


class EmployeeGeneratorMixin:
    """Mixin for employee generation."""

    def generate_employees(self, count: int = 20) -> tuple[Employee, ...]:
        """
        Generate employees across the seven dealership roles.

        When ``count`` is at least the number of roles, every role is
        assigned once (in shuffled order) before the remaining employees
        draw roles uniformly, so every role-filtered pool is non-empty.

        Args:
            count: Number of employees to generate

        Returns:
            Tuple of Employee records with IDs EMP001..
        """
        self._validate_count(count, "employees")

        all_roles = list(EmployeeRole)
        roles: list[EmployeeRole] = []
        if count >= len(all_roles):
            roles.extend(self.random.shuffled(all_roles))
        remaining = count - len(roles)
        roles.extend(self.random.pick_one(all_roles) for _ in range(remaining))

        firsts = self.random.pick_many(EMPLOYEE_FIRST_NAMES, count)
        lasts = self.random.pick_many(EMPLOYEE_LAST_NAMES, count)
        keys = SequentialKeyGenerator("EMP", width=3).generate(count)

        employees = tuple(
            Employee(
                EmployeeId=keys[i],
                PersonalName=PersonalName(FirstName=firsts[i], LastName=lasts[i]),
                Role=roles[i],
                IsActive=self.random.chance(ACTIVE_RATE),
                FactoryID=self.identifiers.generate_factory_id(),
                Username=f"user{i + 1}",
            )
            for i in range(count)
        )

        logger.info(f"Generated {len(employees)} employee records")
        return employees
