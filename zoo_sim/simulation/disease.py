"""
Zoo Simulation — Disease Engine

Per-pen infection model. Each day every pen goes through:
1. Seeding   - at most one natural infection in a pen with no carriers
2. Spread    - each carrier infected before today infects up to 2 others
3. Outbreak  - sticky flag once carriers exceed half the pen
4. Mortality - while the outbreak flag is set, carriers die and every
               other animal faces the old-age roll

Stages 1-3 run before veterinary treatment, stage 4 after it. There is no
transmission between pens.
"""

from dataclasses import dataclass, field
from typing import List, Optional
from enum import Enum, auto
import random
import logging

from ..core.animal import Animal
from ..core.pen import Pen
from ..config import ZooConfig, ZOO

logger = logging.getLogger(__name__)


class DeathCause(Enum):
    DISEASE = auto()
    OLD_AGE = auto()


@dataclass
class Death:
    animal: Animal
    cause: DeathCause


@dataclass
class InfectionReport:
    """New infections in one pen for one day."""
    seeded: Optional[Animal] = None
    spread: List[Animal] = field(default_factory=list)
    outbreak_started: bool = False

    @property
    def newly_infected(self) -> List[Animal]:
        return ([self.seeded] if self.seeded else []) + self.spread


class DiseaseEngine:
    """
    Runs the infection stages against a pen.

    All random draws come from the shared generator, in pen order, so a
    seeded game replays identically.
    """

    def __init__(self, rng: random.Random, config: ZooConfig = ZOO):
        self.rng = rng
        self.config = config

        # Lifetime stats
        self.total_infections = 0
        self.total_outbreaks = 0
        self.total_disease_deaths = 0

    def infect_random_animal(self, pen: Pen, current_day: int) -> Optional[Animal]:
        """Seed one infection with 35% chance if the pen has no carriers."""
        if pen.infected_count != 0 or pen.last_infection_day == current_day:
            return None
        if self.rng.randrange(100) >= self.config.infection_chance_pct:
            return None

        healthy = [a for a in pen.animals if not a.is_infected and not a.is_dying]
        if not healthy:
            return None

        selected = healthy[self.rng.randrange(len(healthy))]
        selected.infect(current_day)
        pen.last_infection_day = current_day
        self.total_infections += 1

        logger.warning(f"{pen.description}: {selected.name} infected")
        return selected

    def spread_disease(self, pen: Pen, current_day: int) -> List[Animal]:
        """
        Each carrier infected on a previous day infects up to two animals
        that have never been infected. The healthy pool is rebuilt per
        carrier so it shrinks within the pass.
        """
        spreaders = [
            a for a in pen.animals
            if a.is_sick and a.infection_day <= current_day - 1
        ]

        newly_infected = []
        for _ in spreaders:
            healthy = [
                b for b in pen.animals
                if not b.is_infected and not b.is_dying and b.infection_day == 0
            ]
            for _ in range(self.config.spread_per_spreader):
                if not healthy:
                    break
                victim = healthy.pop(self.rng.randrange(len(healthy)))
                victim.infect(current_day)
                newly_infected.append(victim)
                logger.warning(f"{pen.description}: {victim.name} infected")

        self.total_infections += len(newly_infected)
        return newly_infected

    def handle_outbreak(self, pen: Pen, current_day: int) -> bool:
        """Flag an outbreak once carriers exceed half the pen. Returns True when newly flagged."""
        if pen.outbreak_started:
            return False
        if pen.infected_count > pen.animal_count // 2:
            pen.outbreak_started = True
            pen.outbreak_day = current_day
            self.total_outbreaks += 1
            logger.warning(f"{pen.description}: outbreak started on day {current_day}")
            return True
        return False

    def run_infection_stages(self, pen: Pen, current_day: int) -> InfectionReport:
        """Seeding, spread and outbreak detection, in that order."""
        report = InfectionReport()
        report.seeded = self.infect_random_animal(pen, current_day)
        report.spread = self.spread_disease(pen, current_day)
        report.outbreak_started = self.handle_outbreak(pen, current_day)
        return report

    def handle_dying(self, pen: Pen, max_age: Optional[int] = None) -> List[Death]:
        """
        Outbreak mortality. Infected animals die; the rest take the old-age
        roll. The outbreak clears when no carriers remain.
        """
        if not pen.outbreak_started:
            return []

        if max_age is None:
            max_age = self.config.max_age_days

        survivors = []
        deaths = []
        for animal in pen.animals:
            if animal.is_infected:
                deaths.append(Death(animal, DeathCause.DISEASE))
            elif animal.can_die_of_old_age(max_age, self.rng):
                deaths.append(Death(animal, DeathCause.OLD_AGE))
            else:
                survivors.append(animal)

        for death in deaths:
            logger.warning(f"{pen.description}: {death.animal.name} died ({death.cause.name.lower()})")

        pen.animals = survivors
        self.total_disease_deaths += sum(1 for d in deaths if d.cause == DeathCause.DISEASE)

        if pen.infected_count == 0:
            pen.outbreak_started = False
            logger.info(f"{pen.description}: outbreak over")

        return deaths

    def get_status(self) -> dict:
        return {
            "total_infections": self.total_infections,
            "total_outbreaks": self.total_outbreaks,
            "total_disease_deaths": self.total_disease_deaths,
        }
