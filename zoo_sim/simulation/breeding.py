"""
Zoo Simulation — Breeding Engine

Offspring synthesis from two parents:
- Same species: a purebred at the mean of the parents' weight bounds and price
- Different species: a hybrid with a spliced name, one parent's climate,
  and a 20% price discount

Placement of the offspring is left to the caller.
"""

import random
import logging

from ..core.animal import Animal
from ..core.errors import NotEligibleError, SameGenderError
from ..config import Gender

logger = logging.getLogger(__name__)

HYBRID_PRICE_FACTOR = 0.8


def hybrid_name(first_species: str, second_species: str) -> str:
    """Front half-plus-one of the first name joined to the back half of the second."""
    return first_species[:len(first_species) // 2 + 1] + second_species[len(second_species) // 2:]


def check_pair(parent1: Animal, parent2: Animal):
    """Raise if the pair cannot breed. Eligibility is checked before gender."""
    if not parent1.can_reproduce() or not parent2.can_reproduce():
        raise NotEligibleError(
            "One of the animals cannot reproduce (too young, infected or dying)"
        )
    if parent1.gender == parent2.gender:
        raise SameGenderError("Animals of the same gender cannot be bred")


def breed(parent1: Animal, parent2: Animal, rng: random.Random) -> Animal:
    """
    Produce one offspring aged 1 day.

    Draw order: name ordering and climate (hybrids only), then diet,
    then gender, then weight.

    Raises:
        NotEligibleError: either parent fails can_reproduce()
        SameGenderError: parents share a gender
    """
    check_pair(parent1, parent2)

    if parent1.species == parent2.species:
        species = parent1.species
        is_hybrid = False
        climate = parent1.climate
    else:
        if rng.randrange(2) == 0:
            species = hybrid_name(parent1.species, parent2.species)
        else:
            species = hybrid_name(parent2.species, parent1.species)
        is_hybrid = True
        climate = parent1.climate if rng.randrange(2) == 0 else parent2.climate

    diet = parent1.diet if rng.randrange(2) == 0 else parent2.diet
    gender = Gender.MALE if rng.randrange(2) == 0 else Gender.FEMALE

    min_weight = (parent1.min_weight_kg + parent2.min_weight_kg) / 2.0
    max_weight = (parent1.max_weight_kg + parent2.max_weight_kg) / 2.0

    price = (parent1.price + parent2.price) / 2.0
    if is_hybrid:
        price *= HYBRID_PRICE_FACTOR
        description = f"Hybrid of {parent1.species} and {parent2.species}"
    else:
        description = parent1.species

    offspring = Animal.create(
        rng,
        name=species,
        species=species,
        diet=diet,
        climate=climate,
        gender=gender,
        price=price,
        min_weight_kg=min_weight,
        max_weight_kg=max_weight,
        description=description,
        parents=(parent1, parent2),
        is_hybrid=is_hybrid,
    )

    logger.info(f"Bred {parent1.name} x {parent2.name} -> {offspring.species}"
                f"{' (hybrid)' if is_hybrid else ''}")
    return offspring
