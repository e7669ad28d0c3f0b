"""
Zoo Simulation — Animal
Individual animal with lineage, infection state, and derived predicates.
"""

from dataclasses import dataclass, field
from typing import Optional, Tuple
import random

from ..config import DietClass, Climate, Gender

# Minimum age before an animal can breed
BREEDING_AGE_DAYS = 5


def sample_weight(rng: random.Random, min_weight: float, max_weight: float) -> float:
    """Uniform weight in [min_weight, max_weight)."""
    return min_weight + rng.random() * (max_weight - min_weight)


@dataclass(eq=False)
class Animal:
    """
    An animal owned by the zoo or offered on the market.

    Parents are shared references and are never mutated through their
    offspring. Identity is by object, so the same animal can be located
    in a pen even after it is renamed.
    """
    name: str
    species: str
    diet: DietClass
    climate: Climate
    gender: Gender
    price: float
    min_weight_kg: float
    max_weight_kg: float
    weight_kg: float
    description: str = ""

    # Lineage
    parent1: Optional["Animal"] = field(default=None, repr=False)
    parent2: Optional["Animal"] = field(default=None, repr=False)
    is_hybrid: bool = False

    # State
    age_days: int = 1
    is_infected: bool = False
    infection_day: int = 0     # 0 = never infected (or cured)
    is_dying: bool = False     # Never set by the engine; cleared by treatment

    @classmethod
    def create(
        cls,
        rng: random.Random,
        name: str,
        species: str,
        diet: DietClass,
        climate: Climate,
        gender: Gender,
        price: float,
        min_weight_kg: float,
        max_weight_kg: float,
        description: str = "",
        parents: Tuple[Optional["Animal"], Optional["Animal"]] = (None, None),
        is_hybrid: bool = False,
    ) -> "Animal":
        """Create an animal aged one day with a freshly sampled weight."""
        return cls(
            name=name,
            species=species,
            diet=diet,
            climate=climate,
            gender=gender,
            price=price,
            min_weight_kg=min_weight_kg,
            max_weight_kg=max_weight_kg,
            weight_kg=sample_weight(rng, min_weight_kg, max_weight_kg),
            description=description,
            parent1=parents[0],
            parent2=parents[1],
            is_hybrid=is_hybrid,
        )

    @property
    def has_parents(self) -> bool:
        return self.parent1 is not None and self.parent2 is not None

    @property
    def is_sick(self) -> bool:
        """Infected and still counted as a live carrier."""
        return self.is_infected and not self.is_dying

    def can_reproduce(self) -> bool:
        """Old enough, healthy and not dying."""
        return self.age_days >= BREEDING_AGE_DAYS and not self.is_infected and not self.is_dying

    def can_die_of_old_age(self, max_age: int, rng: random.Random) -> bool:
        """
        Old-age mortality roll.

        Each day past max_age adds one percentage point of risk. No draw
        is made for animals at or under max_age.
        """
        if self.age_days > max_age:
            chance = self.age_days - max_age
            return rng.randrange(100) < chance
        return False

    def increase_age(self):
        self.age_days += 1

    def infect(self, day: int):
        self.is_infected = True
        self.infection_day = day

    def cure(self):
        self.is_infected = False
        self.infection_day = 0
        self.is_dying = False

    def get_status(self) -> dict:
        """Get current status as dictionary."""
        status = {
            "name": self.name,
            "species": self.species,
            "diet": self.diet.name,
            "climate": self.climate.name,
            "gender": self.gender.name,
            "price": self.price,
            "weight_kg": round(self.weight_kg, 2),
            "age_days": self.age_days,
            "description": self.description,
            "is_hybrid": self.is_hybrid,
            "is_infected": self.is_infected,
            "is_dying": self.is_dying,
        }
        if self.has_parents:
            status["parents"] = [self.parent1.name, self.parent2.name]
        return status

    def __repr__(self) -> str:
        flag = " infected" if self.is_infected else ""
        return f"Animal({self.name}: {self.species} {self.gender.name} {self.age_days}d{flag})"
