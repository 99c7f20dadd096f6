"""
Store master data generation.
"""

import logging

from dealer_datagen.shared.models import Store, StoreAddress

logger = logging.getLogger(__name__)

STORE_NAMES = [
    "Downtown Auto",
    "Westside Motors",
    "Northpoint Dealership",
    "Southgate Auto",
    "Central Motors",
]
STORE_CITIES = ["Springfield", "Riverside", "Franklin", "Georgetown", "Madison"]
STORE_STATES = ["CA", "TX", "FL", "NY", "IL"]


class StoreGeneratorMixin:
    """Mixin for store generation."""

    def generate_stores(self, count: int = 3) -> tuple[Store, ...]:
        """
        Generate dealership stores.

        The first stores take the fixed rooftop names; later ones are
        named ``Store <n>``.

        Args:
            count: Number of stores to generate

        Returns:
            Tuple of Store records with StoreId 1..count
        """
        self._validate_count(count, "stores")

        stores = []
        for i in range(count):
            store_id = i + 1
            name = STORE_NAMES[i] if i < len(STORE_NAMES) else f"Store {store_id}"
            stores.append(
                Store(
                    StoreId=store_id,
                    StoreName=name,
                    LegalName=f"{name} LLC",
                    Address=StoreAddress(
                        Line1=self.addresses.street_line("Main"),
                        City=self.addresses.city(STORE_CITIES),
                        State=self.addresses.state(STORE_STATES),
                        Zip=self.addresses.zip_code(),
                    ),
                    DealerState=self.addresses.state(STORE_STATES),
                    DealerZip=self.addresses.zip_code(),
                )
            )

        logger.info(f"Generated {len(stores)} store records")
        return tuple(stores)
