"""
Zoo Simulation — Configuration
Game parameters, species data, and staff tables.
"""

from dataclasses import dataclass, field
from typing import Dict, Optional
from enum import Enum, auto


class DietClass(Enum):
    """What an animal eats; pens accept exactly one diet class."""
    HERBIVORE = auto()
    CARNIVORE = auto()


class Climate(Enum):
    """Climate zones shared by species and pens."""
    TROPICAL = auto()
    TEMPERATE = auto()
    ARCTIC = auto()
    DESERT = auto()

    @property
    def label(self) -> str:
        return self.name.capitalize()


class Gender(Enum):
    MALE = auto()
    FEMALE = auto()


class WorkerType(Enum):
    """Staff roles."""
    VET = auto()
    CLEANER = auto()
    FEEDER = auto()
    DIRECTOR = auto()     # Mandatory, exactly one


# Daily salary per worker type
WORKER_SALARIES: Dict[WorkerType, float] = {
    WorkerType.VET: 50.0,
    WorkerType.CLEANER: 20.0,
    WorkerType.FEEDER: 30.0,
    WorkerType.DIRECTOR: 500.0,
}


@dataclass(frozen=True)
class SpeciesSpec:
    """Market data for one species."""
    name: str
    price: float
    min_weight_kg: float
    max_weight_kg: float
    diet: DietClass
    climate: Climate


SPECIES: Dict[str, SpeciesSpec] = {
    "Lion": SpeciesSpec("Lion", 1000.0, 180.0, 250.0, DietClass.CARNIVORE, Climate.TROPICAL),
    "Tiger": SpeciesSpec("Tiger", 950.0, 160.0, 230.0, DietClass.CARNIVORE, Climate.TEMPERATE),
    "Giraffe": SpeciesSpec("Giraffe", 700.0, 800.0, 1200.0, DietClass.HERBIVORE, Climate.TROPICAL),
    "Elephant": SpeciesSpec("Elephant", 800.0, 5000.0, 6000.0, DietClass.HERBIVORE, Climate.TEMPERATE),
    "Zebra": SpeciesSpec("Zebra", 600.0, 250.0, 400.0, DietClass.HERBIVORE, Climate.DESERT),
    "Wolf": SpeciesSpec("Wolf", 700.0, 40.0, 80.0, DietClass.CARNIVORE, Climate.ARCTIC),
    "Cheetah": SpeciesSpec("Cheetah", 850.0, 35.0, 65.0, DietClass.CARNIVORE, Climate.DESERT),
    "Musk-ox": SpeciesSpec("Musk-ox", 750.0, 200.0, 400.0, DietClass.HERBIVORE, Climate.ARCTIC),
}


@dataclass
class ZooConfig:
    """Core game parameters."""

    # Session length
    max_days: int = 50             # Reaching this day wins the game
    max_age_days: int = 30         # Old-age mortality starts past this age

    # Starting state
    initial_money: float = 10000.0
    initial_food: int = 0
    initial_popularity: int = 50

    # From this day on only one animal may be bought per day
    purchase_limit_after_day: int = 10
    late_purchases_per_day: int = 1

    # Disease
    infection_chance_pct: int = 35
    spread_per_spreader: int = 2

    # Daily rolls
    dirty_chance_one_in: int = 3
    popularity_swing: int = 10

    # Visitors
    visitors_per_popularity: int = 2

    # RNG seed (None = nondeterministic)
    seed: Optional[int] = None


@dataclass
class CostConfig:
    """Prices of player actions."""
    pen_cost_per_capacity: float = 10.0
    min_pen_capacity: int = 1
    max_pen_capacity: int = 100

    treatment_cost: float = 100.0
    food_unit_cost: float = 1.0
    advertising_popularity_per_unit: int = 1

    loan_interest_rate: float = 0.2   # 20% added to principal
    missed_payment_penalty: int = 10  # Popularity lost per missed payment

    def pen_cost(self, capacity: int) -> float:
        return capacity * self.pen_cost_per_capacity


@dataclass
class MarketConfig:
    """Animal market parameters."""
    max_animals: int = 10
    refresh_cost: float = 200.0
    species: Dict[str, SpeciesSpec] = field(default_factory=lambda: dict(SPECIES))


@dataclass
class StaffingConfig:
    """Recommended staffing ratios."""
    animals_per_vet: int = 20
    pens_per_cleaner: int = 1
    pens_per_feeder: int = 2


# Default configurations
ZOO = ZooConfig()
COSTS = CostConfig()
MARKET = MarketConfig()
STAFFING = StaffingConfig()
