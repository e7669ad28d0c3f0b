"""
Zoo Simulation — Animal Market
A rotating stock of animals for sale, regenerated whole from the species table.
"""

from typing import List
import random
import logging

from ..core.animal import Animal
from ..core.errors import InvalidIndexError
from ..config import Gender, MarketConfig, MARKET

logger = logging.getLogger(__name__)


class AnimalMarket:
    """
    Market offer list.

    Regeneration replaces every animal on offer. It happens for free once
    the day counter passes the last regeneration day, or on demand for a
    fee under the same once-per-day rule.
    """

    def __init__(self, rng: random.Random, config: MarketConfig = MARKET):
        self.rng = rng
        self.config = config
        self.animals: List[Animal] = []
        self.last_update_day = -1
        self.total_regenerations = 0

    def __len__(self) -> int:
        return len(self.animals)

    def generate_animals(self, current_day: int):
        """Replace the offer with a fresh draw from the species table."""
        self.animals = []
        names = list(self.config.species.keys())
        genders = [Gender.MALE, Gender.FEMALE]

        for _ in range(self.config.max_animals):
            spec = self.config.species[names[self.rng.randrange(len(names))]]
            gender = genders[self.rng.randrange(len(genders))]
            self.animals.append(Animal.create(
                self.rng,
                name=spec.name,
                species=spec.name,
                diet=spec.diet,
                climate=spec.climate,
                gender=gender,
                price=spec.price,
                min_weight_kg=spec.min_weight_kg,
                max_weight_kg=spec.max_weight_kg,
                description=spec.climate.label,
            ))

        self.last_update_day = current_day
        self.total_regenerations += 1
        logger.debug(f"Market regenerated on day {current_day}")

    def can_update(self, current_day: int) -> bool:
        return current_day > self.last_update_day

    def get(self, index: int) -> Animal:
        if not 0 <= index < len(self.animals):
            raise InvalidIndexError("market", index)
        return self.animals[index]

    def take(self, index: int) -> Animal:
        """Remove and return the animal at index."""
        animal = self.get(index)
        self.animals.pop(index)
        return animal

    def get_status(self) -> dict:
        return {
            "last_update_day": self.last_update_day,
            "total_regenerations": self.total_regenerations,
            "offers": [
                {"species": a.species, "gender": a.gender.name, "climate": a.climate.name,
                 "diet": a.diet.name, "price": a.price}
                for a in self.animals
            ],
        }
