"""
Test: Entity Model
Verifies Animal predicates, Pen eligibility, and the staff roster.
"""

import random

import pytest

from zoo_sim.config import SPECIES, DietClass, Climate, Gender, WorkerType
from zoo_sim.core.animal import Animal, sample_weight
from zoo_sim.core.pen import Pen
from zoo_sim.core.worker import Worker, Staff


# =============================================================================
# TEST HELPERS
# =============================================================================

def make_animal(species: str = "Musk-ox", gender: Gender = Gender.MALE, age: int = 10) -> Animal:
    spec = SPECIES[species]
    animal = Animal(
        name=spec.name,
        species=spec.name,
        diet=spec.diet,
        climate=spec.climate,
        gender=gender,
        price=spec.price,
        min_weight_kg=spec.min_weight_kg,
        max_weight_kg=spec.max_weight_kg,
        weight_kg=spec.min_weight_kg,
        description=spec.climate.label,
    )
    animal.age_days = age
    return animal


def make_hybrid(climate: Climate, parent_a: str = "Lion", parent_b: str = "Tiger") -> Animal:
    p1 = make_animal(parent_a, Gender.MALE)
    p2 = make_animal(parent_b, Gender.FEMALE)
    hybrid = make_animal(parent_a)
    hybrid.is_hybrid = True
    hybrid.parent1 = p1
    hybrid.parent2 = p2
    hybrid.climate = climate
    return hybrid


# =============================================================================
# ANIMAL
# =============================================================================

class TestAnimal:
    """Tests for animal predicates."""

    def test_create_samples_weight_in_range(self):
        rng = random.Random(1)
        spec = SPECIES["Wolf"]
        for _ in range(50):
            animal = Animal.create(
                rng, "Wolf", "Wolf", spec.diet, spec.climate, Gender.MALE,
                spec.price, spec.min_weight_kg, spec.max_weight_kg,
            )
            assert spec.min_weight_kg <= animal.weight_kg < spec.max_weight_kg
            assert animal.age_days == 1

    def test_sample_weight_lower_bound(self):
        class ZeroRandom(random.Random):
            def random(self):
                return 0.0

        assert sample_weight(ZeroRandom(), 10.0, 20.0) == 10.0

    def test_can_reproduce_requires_age_five(self):
        assert not make_animal(age=4).can_reproduce()
        assert make_animal(age=5).can_reproduce()

    def test_infected_cannot_reproduce(self):
        animal = make_animal(age=10)
        animal.infect(3)
        assert not animal.can_reproduce()

    def test_dying_cannot_reproduce(self):
        animal = make_animal(age=10)
        animal.is_dying = True
        assert not animal.can_reproduce()

    def test_cure_resets_infection(self):
        animal = make_animal()
        animal.infect(7)
        animal.is_dying = True
        animal.cure()
        assert not animal.is_infected
        assert animal.infection_day == 0
        assert not animal.is_dying

    def test_old_age_no_draw_under_max(self):
        """No random draw is consumed at or under the age limit."""
        rng = random.Random(5)
        state = rng.getstate()
        animal = make_animal(age=30)
        assert not animal.can_die_of_old_age(30, rng)
        assert rng.getstate() == state

    def test_old_age_certain_past_one_hundred(self):
        rng = random.Random(5)
        animal = make_animal(age=200)
        assert all(animal.can_die_of_old_age(30, rng) for _ in range(20))

    def test_increase_age(self):
        animal = make_animal(age=1)
        animal.increase_age()
        assert animal.age_days == 2


# =============================================================================
# PEN
# =============================================================================

class TestPen:
    """Tests for pen membership rules."""

    def test_diet_must_match(self):
        pen = Pen(capacity=5, allowed_diet=DietClass.CARNIVORE, climate=Climate.ARCTIC)
        assert not pen.can_add(make_animal("Musk-ox"))
        assert pen.can_add(make_animal("Wolf"))

    def test_climate_must_match(self):
        pen = Pen(capacity=5, allowed_diet=DietClass.HERBIVORE, climate=Climate.DESERT)
        assert not pen.can_add(make_animal("Musk-ox"))
        assert pen.can_add(make_animal("Zebra"))

    def test_capacity_enforced_for_purebreds(self):
        pen = Pen(capacity=1, allowed_diet=DietClass.HERBIVORE, climate=Climate.ARCTIC)
        assert pen.add_animal(make_animal("Musk-ox"))
        assert not pen.add_animal(make_animal("Musk-ox", Gender.FEMALE))
        assert pen.animal_count == 1

    def test_hybrid_accepted_under_either_parent_climate(self):
        hybrid = make_hybrid(Climate.TROPICAL)  # Lion (tropical) x Tiger (temperate)
        tropical = Pen(capacity=5, allowed_diet=DietClass.CARNIVORE, climate=Climate.TROPICAL)
        temperate = Pen(capacity=5, allowed_diet=DietClass.CARNIVORE, climate=Climate.TEMPERATE)
        arctic = Pen(capacity=5, allowed_diet=DietClass.CARNIVORE, climate=Climate.ARCTIC)

        assert tropical.can_add(hybrid)
        assert temperate.can_add(hybrid)
        assert not arctic.can_add(hybrid)

    def test_hybrid_skips_capacity_check(self):
        hybrid = make_hybrid(Climate.TROPICAL)
        pen = Pen(capacity=1, allowed_diet=DietClass.CARNIVORE, climate=Climate.TROPICAL)
        pen.animals.append(make_animal("Lion"))
        assert pen.is_full
        assert pen.can_add(hybrid)

    def test_hybrid_of_same_species_parents_needs_own_climate(self):
        hybrid = make_hybrid(Climate.ARCTIC, "Wolf", "Wolf")
        arctic = Pen(capacity=5, allowed_diet=DietClass.CARNIVORE, climate=Climate.ARCTIC)
        desert = Pen(capacity=5, allowed_diet=DietClass.CARNIVORE, climate=Climate.DESERT)
        assert arctic.can_add(hybrid)
        assert not desert.can_add(hybrid)

    def test_infected_count_ignores_dying(self):
        pen = Pen(capacity=5, allowed_diet=DietClass.HERBIVORE, climate=Climate.ARCTIC)
        a, b, c = make_animal(), make_animal(), make_animal()
        pen.animals.extend([a, b, c])
        a.infect(1)
        b.infect(1)
        b.is_dying = True
        assert pen.infected_count == 1

    def test_empty_pen_never_gets_dirty(self):
        pen = Pen(capacity=5, allowed_diet=DietClass.HERBIVORE, climate=Climate.ARCTIC)
        rng = random.Random(0)
        for _ in range(30):
            pen.update_cleanliness(rng)
        assert pen.is_clean

    def test_aging(self):
        pen = Pen(capacity=5, allowed_diet=DietClass.HERBIVORE, climate=Climate.ARCTIC)
        pen.animals.extend([make_animal(age=1), make_animal(age=7)])
        pen.handle_aging()
        assert [a.age_days for a in pen.animals] == [2, 8]


# =============================================================================
# STAFF
# =============================================================================

class TestStaff:
    """Tests for the roster."""

    def test_salaries_by_type(self):
        assert Worker(WorkerType.VET, "v").salary == 50.0
        assert Worker(WorkerType.CLEANER, "c").salary == 20.0
        assert Worker(WorkerType.FEEDER, "f").salary == 30.0
        assert Worker(WorkerType.DIRECTOR, "d").salary == 500.0

    def test_payroll_and_counts(self):
        staff = Staff()
        staff.hire(Worker(WorkerType.DIRECTOR, "Dana"))
        staff.hire(Worker(WorkerType.VET, "Vic"))
        staff.hire(Worker(WorkerType.VET, "Val"))
        assert staff.total_salary == 600.0
        assert staff.count(WorkerType.VET) == 2
        assert staff.has_director()

        staff.fire(0)
        assert not staff.has_director()

    def test_recommended_staffing(self):
        rec = Staff().recommended(total_animals=21, total_pens=3)
        assert rec[WorkerType.VET] == 2
        assert rec[WorkerType.CLEANER] == 3
        assert rec[WorkerType.FEEDER] == 2

    def test_recommended_staffing_empty_zoo(self):
        rec = Staff().recommended(total_animals=0, total_pens=0)
        assert rec[WorkerType.VET] == 0
        assert rec[WorkerType.FEEDER] == 0


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
