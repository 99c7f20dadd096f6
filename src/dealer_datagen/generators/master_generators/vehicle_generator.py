"""
Vehicle inventory generation with make/model catalog and pricing.
"""

import logging
from decimal import Decimal

from dealer_datagen.shared.id_generator import SequentialKeyGenerator
from dealer_datagen.shared.models import CENT, Money, Vehicle

logger = logging.getLogger(__name__)

MODELS_BY_MAKE: dict[str, list[str]] = {
    "Ford": ["F-150", "Mustang", "Explorer", "Escape", "Focus"],
    "Chevrolet": ["Silverado", "Camaro", "Equinox", "Malibu", "Cruze"],
    "Toyota": ["Camry", "Corolla", "RAV4", "Highlander", "Prius"],
    "Honda": ["Civic", "Accord", "CR-V", "Pilot", "Fit"],
    "Nissan": ["Altima", "Sentra", "Rogue", "Pathfinder", "Maxima"],
    "BMW": ["3 Series", "5 Series", "X3", "X5", "i3"],
    "Mercedes-Benz": ["C-Class", "E-Class", "GLC", "GLE", "A-Class"],
    "Audi": ["A4", "A6", "Q5", "Q7", "A3"],
    "Volkswagen": ["Jetta", "Passat", "Tiguan", "Atlas", "Golf"],
    "Hyundai": ["Elantra", "Sonata", "Tucson", "Santa Fe", "Accent"],
}
COLORS = [
    "White",
    "Black",
    "Silver",
    "Gray",
    "Red",
    "Blue",
    "Green",
    "Brown",
    "Gold",
    "Orange",
]
ENGINES = ["2.0L I4", "3.5L V6", "5.0L V8", "1.5L Turbo", "2.5L Hybrid"]
TRANSMISSIONS = ["Automatic", "Manual", "CVT"]
FUEL_TYPES = ["Gasoline", "Hybrid", "Electric", "Diesel"]
BODY_STYLES = ["Sedan", "SUV", "Truck", "Coupe", "Hatchback", "Wagon"]

MODEL_YEAR_RANGE = (2018, 2025)
# Only current model years can be sold as new
NEW_MODEL_YEAR = 2024
NEW_RATE = 0.7
MSRP_RANGE = (20000, 80000)
COST_RATIO_RANGE = (0.7, 0.9)
SELLING_RATIO_RANGE = (0.95, 1.05)
MAX_DAYS_ON_LOT = 120


class VehicleGeneratorMixin:
    """Mixin for vehicle inventory generation."""

    def _price_ratio(self, msrp: Decimal, ratio_range: tuple[float, float]) -> Money:
        ratio = Decimal(str(round(self.random.uniform(*ratio_range), 4)))
        return Money.usd((msrp * ratio).quantize(CENT))

    def generate_vehicles(self, count: int = 50) -> tuple[Vehicle, ...]:
        """
        Generate new and used inventory.

        Cost is 70-90% of MSRP and selling price 95-105% of MSRP. Only
        model years from 2024 on can be new; new vehicles carry delivery
        mileage only.

        Args:
            count: Number of vehicles to generate

        Returns:
            Tuple of Vehicle records keyed INV000001..
        """
        self._validate_count(count, "vehicles")

        inventory_keys = SequentialKeyGenerator("INV").generate(count)
        stock_numbers = SequentialKeyGenerator("STK", width=4).generate(count)
        makes = list(MODELS_BY_MAKE)

        vehicles = []
        for i in range(count):
            make = self.random.pick_one(makes)
            model = self.random.pick_one(MODELS_BY_MAKE[make])
            year = self.random.random_int(*MODEL_YEAR_RANGE)
            is_new = year >= NEW_MODEL_YEAR and self.random.chance(NEW_RATE)
            mileage = (
                self.random.random_int(0, 50)
                if is_new
                else self.random.random_int(1000, 150000)
            )
            msrp = self._money(*MSRP_RANGE)

            vehicles.append(
                Vehicle(
                    InventoryKey=inventory_keys[i],
                    VIN=self.identifiers.generate_vin(),
                    StockNumber=stock_numbers[i],
                    Year=year,
                    Make=make,
                    Model=model,
                    IsNew=is_new,
                    Mileage=mileage,
                    Cost=self._price_ratio(msrp.Amount, COST_RATIO_RANGE),
                    MSRP=msrp,
                    SellingPrice=self._price_ratio(msrp.Amount, SELLING_RATIO_RANGE),
                    Color=self.random.pick_one(COLORS),
                    Engine=self.random.pick_one(ENGINES),
                    Transmission=self.random.pick_one(TRANSMISSIONS),
                    FuelType=self.random.pick_one(FUEL_TYPES),
                    BodyStyle=self.random.pick_one(BODY_STYLES),
                    DaysOnLot=self.random.random_int(0, MAX_DAYS_ON_LOT),
                )
            )

        logger.info(f"Generated {len(vehicles)} vehicle records")
        return tuple(vehicles)
