"""
Customer master data generation.
"""

import logging

from dealer_datagen.shared.id_generator import SequentialKeyGenerator
from dealer_datagen.shared.models import (
    Customer,
    CustomerIdentity,
    CustomerType,
    DriverLicense,
    PersonalName,
    PhoneNumber,
    PhoneNumberType,
)

logger = logging.getLogger(__name__)

CUSTOMER_FIRST_NAMES = [
    "John",
    "Jane",
    "Mike",
    "Sarah",
    "David",
    "Lisa",
    "Chris",
    "Amy",
    "Robert",
    "Emily",
    "James",
    "Mary",
    "William",
    "Patricia",
    "Richard",
    "Jennifer",
]
CUSTOMER_LAST_NAMES = [
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
    "Hernandez",
    "Lopez",
    "Gonzalez",
    "Wilson",
    "Anderson",
    "Thomas",
]


class CustomerGeneratorMixin:
    """Mixin for customer generation."""

    def generate_customers(self, count: int = 100) -> tuple[Customer, ...]:
        """
        Generate retail, wholesale and fleet customers.

        Args:
            count: Number of customers to generate

        Returns:
            Tuple of Customer records keyed CUST000001..
        """
        self._validate_count(count, "customers")

        # Vectorized first/last name sampling
        firsts = self.random.pick_many(CUSTOMER_FIRST_NAMES, count)
        lasts = self.random.pick_many(CUSTOMER_LAST_NAMES, count)
        keys = SequentialKeyGenerator("CUST").generate(count)

        customers = []
        for i, key in enumerate(keys):
            number = i + 1
            identity = CustomerIdentity(
                PersonalName=PersonalName(FirstName=firsts[i], LastName=lasts[i]),
                Address1=self.addresses.street_line(),
                City=self.addresses.city(),
                State=self.addresses.state(),
                Zip=self.addresses.zip_code(),
                EmailAddress=f"customer{number}@email.com",
                PhoneNumbers=(
                    PhoneNumber(
                        Digits=self.identifiers.generate_phone_number(),
                        NumberType=PhoneNumberType.MOBILE,
                    ),
                ),
            )
            customers.append(
                Customer(
                    CustomerKey=key,
                    Identity=identity,
                    DMSCustomerID=f"DMS{number}",
                    CustomerType=self.random.pick_one(list(CustomerType)),
                    License=DriverLicense(
                        Number=self.identifiers.generate_license_number(),
                        State=self.addresses.state(),
                    ),
                )
            )

        logger.info(f"Generated {len(customers)} customer records")
        return tuple(customers)
