"""
Zoo Simulation — Pen
An enclosure holding animals of one diet class and one climate.
"""

from dataclasses import dataclass, field
from typing import List
import logging
import random

from .animal import Animal
from ..config import DietClass, Climate

logger = logging.getLogger(__name__)


@dataclass(eq=False)
class Pen:
    """
    Enclosure with fixed capacity.

    Tracks:
    - Contained animals (ordered)
    - Cleanliness
    - Outbreak flag and start day
    - Last day a natural infection was seeded
    """
    capacity: int
    allowed_diet: DietClass
    climate: Climate
    animals: List[Animal] = field(default_factory=list)

    is_clean: bool = True
    outbreak_started: bool = False
    outbreak_day: int = 0
    last_infection_day: int = 0

    @property
    def animal_count(self) -> int:
        return len(self.animals)

    @property
    def free_capacity(self) -> int:
        return self.capacity - len(self.animals)

    @property
    def is_full(self) -> bool:
        return len(self.animals) >= self.capacity

    @property
    def is_empty(self) -> bool:
        return not self.animals

    @property
    def description(self) -> str:
        return f"{self.allowed_diet.name.lower()} pen ({self.climate.label})"

    @property
    def infected_count(self) -> int:
        """Infected animals that are not dying."""
        return sum(1 for a in self.animals if a.is_sick)

    def can_add(self, animal: Animal) -> bool:
        """
        Check whether the animal may live here.

        Diet must always match. Cross-species hybrids may be housed under
        either parent's climate and are not capacity-checked here; every
        other animal needs the pen's climate and a free slot.
        """
        if animal.diet != self.allowed_diet:
            return False

        if animal.is_hybrid and animal.has_parents:
            if animal.parent1.species == animal.parent2.species:
                return animal.climate == self.climate
            return self.climate in (animal.parent1.climate, animal.parent2.climate)

        return animal.climate == self.climate and not self.is_full

    def add_animal(self, animal: Animal) -> bool:
        """Insert the animal if eligible. Returns True if added."""
        if not self.can_add(animal):
            return False
        self.animals.append(animal)
        return True

    def remove_animal(self, index: int) -> Animal:
        return self.animals.pop(index)

    def handle_aging(self):
        for animal in self.animals:
            animal.increase_age()

    def update_cleanliness(self, rng: random.Random, one_in: int = 3) -> bool:
        """
        Roll for the pen getting dirty. Empty pens never get dirty and
        cleanliness never improves here.

        Returns True if the pen became dirty on this roll.
        """
        if self.animals and rng.randrange(one_in) == 0:
            self.is_clean = False
            logger.debug(f"{self.description} became dirty")
            return True
        return False

    def get_status(self) -> dict:
        """Get current status as dictionary."""
        return {
            "description": self.description,
            "diet": self.allowed_diet.name,
            "climate": self.climate.name,
            "capacity": self.capacity,
            "free_capacity": self.free_capacity,
            "animal_count": self.animal_count,
            "is_clean": self.is_clean,
            "infected": self.infected_count,
            "outbreak": self.outbreak_started,
            "animals": [a.get_status() for a in self.animals],
        }

    def __repr__(self) -> str:
        return f"Pen({self.description}: {self.animal_count}/{self.capacity})"
