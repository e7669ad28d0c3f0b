"""
Tests for the breeding engine.
"""

import random

import pytest

from zoo_sim.config import SPECIES, Climate, DietClass, Gender
from zoo_sim.core.animal import Animal
from zoo_sim.core.errors import NotEligibleError, SameGenderError
from zoo_sim.simulation.breeding import breed, hybrid_name, HYBRID_PRICE_FACTOR


# =============================================================================
# TEST HELPERS
# =============================================================================

class ScriptedRandom(random.Random):
    """Serves queued randrange() results, then falls back to a seeded stream."""

    def __init__(self, values=(), seed: int = 0):
        super().__init__(seed)
        self.values = list(values)

    def randrange(self, start, stop=None, step=1):
        if self.values:
            return self.values.pop(0)
        return super().randrange(start, stop, step)


def make_animal(species: str, gender: Gender, age: int = 10, name: str = None) -> Animal:
    spec = SPECIES[species]
    animal = Animal(
        name=name or spec.name,
        species=spec.name,
        diet=spec.diet,
        climate=spec.climate,
        gender=gender,
        price=spec.price,
        min_weight_kg=spec.min_weight_kg,
        max_weight_kg=spec.max_weight_kg,
        weight_kg=spec.max_weight_kg,
    )
    animal.age_days = age
    return animal


# =============================================================================
# PRECONDITIONS
# =============================================================================

class TestBreedingPreconditions:
    """Eligibility is checked before gender."""

    def test_same_gender_fails(self):
        a = make_animal("Lion", Gender.MALE)
        b = make_animal("Lion", Gender.MALE)
        with pytest.raises(SameGenderError):
            breed(a, b, random.Random(0))

    @pytest.mark.parametrize("age1, age2", [(4, 10), (10, 4), (1, 1)])
    def test_too_young_fails(self, age1, age2):
        a = make_animal("Wolf", Gender.MALE, age=age1)
        b = make_animal("Wolf", Gender.FEMALE, age=age2)
        with pytest.raises(NotEligibleError):
            breed(a, b, random.Random(0))

    def test_young_same_gender_reports_eligibility(self):
        a = make_animal("Wolf", Gender.MALE, age=2)
        b = make_animal("Wolf", Gender.MALE, age=10)
        with pytest.raises(NotEligibleError):
            breed(a, b, random.Random(0))

    def test_infected_parent_fails(self):
        a = make_animal("Zebra", Gender.MALE)
        b = make_animal("Zebra", Gender.FEMALE)
        b.infect(3)
        with pytest.raises(NotEligibleError):
            breed(a, b, random.Random(0))


# =============================================================================
# OFFSPRING
# =============================================================================

class TestPurebredOffspring:
    """Same-species breeding."""

    def test_musk_ox_pair(self):
        """Two adult musk-oxen of opposite gender produce a musk-ox calf."""
        bull = make_animal("Musk-ox", Gender.MALE, age=10)
        cow = make_animal("Musk-ox", Gender.FEMALE, age=6)

        calf = breed(bull, cow, random.Random(11))

        assert calf.species == "Musk-ox"
        assert not calf.is_hybrid
        assert calf.age_days == 1
        assert calf.climate == Climate.ARCTIC
        assert calf.diet == DietClass.HERBIVORE
        assert calf.description == "Musk-ox"
        assert calf.parent1 is bull
        assert calf.parent2 is cow

    def test_price_is_unrounded_mean(self):
        a = make_animal("Musk-ox", Gender.MALE)
        b = make_animal("Musk-ox", Gender.FEMALE)
        a.price = 700.0
        b.price = 751.0
        calf = breed(a, b, random.Random(0))
        assert calf.price == 725.5

    def test_weight_resampled_within_mean_bounds(self):
        a = make_animal("Musk-ox", Gender.MALE)
        b = make_animal("Musk-ox", Gender.FEMALE)
        b.min_weight_kg, b.max_weight_kg = 100.0, 200.0
        calf = breed(a, b, random.Random(3))
        assert calf.min_weight_kg == 150.0
        assert calf.max_weight_kg == 300.0
        assert 150.0 <= calf.weight_kg < 300.0

    def test_parents_unchanged(self):
        a = make_animal("Giraffe", Gender.MALE, age=12)
        b = make_animal("Giraffe", Gender.FEMALE, age=9)
        breed(a, b, random.Random(0))
        assert (a.age_days, b.age_days) == (12, 9)
        assert a.parent1 is None and b.parent1 is None


class TestHybridOffspring:
    """Cross-species breeding."""

    def test_hybrid_name_splice(self):
        assert hybrid_name("Lion", "Tiger") == "Lioger"
        assert hybrid_name("Tiger", "Lion") == "Tigon"

    def test_scripted_hybrid(self):
        """Draws: name order, climate, diet, gender."""
        lion = make_animal("Lion", Gender.MALE)
        tiger = make_animal("Tiger", Gender.FEMALE)
        rng = ScriptedRandom([1, 1, 0, 1])

        cub = breed(lion, tiger, rng)

        assert cub.is_hybrid
        assert cub.name == "Tigon"
        assert cub.species == "Tigon"
        assert cub.climate == Climate.TEMPERATE
        assert cub.diet == DietClass.CARNIVORE
        assert cub.gender == Gender.FEMALE
        assert cub.description == "Hybrid of Lion and Tiger"

    def test_hybrid_price_discount(self):
        lion = make_animal("Lion", Gender.MALE)
        tiger = make_animal("Tiger", Gender.FEMALE)
        cub = breed(lion, tiger, random.Random(0))
        assert cub.price == pytest.approx(HYBRID_PRICE_FACTOR * (1000.0 + 950.0) / 2)

    def test_hybrid_diet_from_a_parent(self):
        zebra = make_animal("Zebra", Gender.MALE)
        cheetah = make_animal("Cheetah", Gender.FEMALE)
        diets = set()
        for seed in range(40):
            diets.add(breed(zebra, cheetah, random.Random(seed)).diet)
        assert diets == {DietClass.HERBIVORE, DietClass.CARNIVORE}

    def test_hybrid_climate_from_a_parent(self):
        wolf = make_animal("Wolf", Gender.MALE)
        lion = make_animal("Lion", Gender.FEMALE)
        for seed in range(20):
            cub = breed(wolf, lion, random.Random(seed))
            assert cub.climate in (Climate.ARCTIC, Climate.TROPICAL)

    def test_seeded_breeding_is_reproducible(self):
        wolf = make_animal("Wolf", Gender.MALE)
        lion = make_animal("Lion", Gender.FEMALE)
        a = breed(wolf, lion, random.Random(99))
        b = breed(wolf, lion, random.Random(99))
        assert (a.name, a.climate, a.diet, a.gender, a.weight_kg) == \
               (b.name, b.climate, b.diet, b.gender, b.weight_kg)


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
