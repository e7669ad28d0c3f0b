"""
Zoo Simulation — Simulation Engine
Zoo state, the day-cycle orchestrator, and player commands.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional
from enum import Enum, auto
import json
import logging
import random

from .animal import Animal
from .pen import Pen
from .worker import Worker, Staff
from .errors import (
    GameOverError,
    InsufficientFundsError,
    InvalidIndexError,
    NoSuitablePenError,
    NoCapacityError,
    NotEligiblePenError,
    NotInfectedError,
    DirectorAlreadyExistsError,
    PenNotEmptyError,
    LoanAlreadyOutstandingError,
    MarketRefreshUnavailableError,
    PurchaseLimitError,
)
from ..config import (
    DietClass,
    Climate,
    WorkerType,
    ZooConfig,
    CostConfig,
    MarketConfig,
    StaffingConfig,
    ZOO,
    COSTS,
    MARKET,
    STAFFING,
)
from ..simulation.breeding import breed
from ..simulation.disease import DiseaseEngine, Death, DeathCause
from ..simulation.economy import LoanLedger, PaymentStatus
from ..simulation.events import EventLog, LogEntry, ZooEventType, VisitorEventGenerator
from ..simulation.market import AnimalMarket
from ..simulation.metrics import DaySummary, MetricsCollector

logger = logging.getLogger(__name__)


class GameOutcome(Enum):
    WON = auto()
    LOST = auto()


@dataclass
class SimulationState:
    """Mutable ledger of the zoo."""
    day: int = 0
    money: float = 0.0
    food: int = 0
    popularity: int = 0
    animals_bought_today: int = 0

    is_ended: bool = False
    outcome: Optional[GameOutcome] = None
    end_reason: str = ""


@dataclass
class DayResult:
    """What one call to advance_day() produced."""
    day: int
    events: List[LogEntry] = field(default_factory=list)
    outcome: Optional[GameOutcome] = None
    end_reason: str = ""
    summary: Optional[DaySummary] = None

    @property
    def is_terminal(self) -> bool:
        return self.outcome is not None


class ZooSimulation:
    """
    Main simulation engine.

    Manages:
    - Zoo state (money, food, popularity, day counter)
    - Pens, staff, market and loan
    - The ordered day cycle
    - Player commands, which raise ZooError subclasses on failure

    Every random draw goes through self.rng, so a fixed seed replays the
    same game for the same sequence of commands.
    """

    def __init__(
        self,
        zoo_name: str,
        director_name: str,
        config: ZooConfig = ZOO,
        costs: CostConfig = COSTS,
        market_config: MarketConfig = MARKET,
        staffing: StaffingConfig = STAFFING,
        rng: Optional[random.Random] = None,
    ):
        self.name = zoo_name
        self.config = config
        self.costs = costs
        self.rng = rng if rng is not None else random.Random(config.seed)

        # State
        self.state = SimulationState(
            money=config.initial_money,
            food=config.initial_food,
            popularity=config.initial_popularity,
        )

        self.pens: List[Pen] = []
        self.staff = Staff(staffing)
        self.staff.hire(Worker(WorkerType.DIRECTOR, director_name))

        # Subsystems
        self.market = AnimalMarket(self.rng, market_config)
        self.disease = DiseaseEngine(self.rng, config)
        self.loan = LoanLedger(interest_rate=costs.loan_interest_rate)
        self.visitors = VisitorEventGenerator(self.rng)

        # Logs
        self.events = EventLog()
        self.metrics = MetricsCollector()

        self.market.generate_animals(0)

        logger.info(f"Zoo '{zoo_name}' opened with director {director_name}")

    # -------------------------------------------------------------------------
    # Accessors
    # -------------------------------------------------------------------------

    @property
    def day(self) -> int:
        return self.state.day

    @property
    def money(self) -> float:
        return self.state.money

    @property
    def food(self) -> int:
        return self.state.food

    @property
    def popularity(self) -> int:
        return self.state.popularity

    @property
    def workers(self) -> List[Worker]:
        return self.staff.workers

    def total_animals(self) -> int:
        return sum(p.animal_count for p in self.pens)

    def total_infected(self) -> int:
        return sum(p.infected_count for p in self.pens)

    def dirty_pens(self) -> int:
        return sum(1 for p in self.pens if not p.is_clean)

    def recommended_staff(self) -> Dict[WorkerType, int]:
        return self.staff.recommended(self.total_animals(), len(self.pens))

    def can_buy_animal(self) -> bool:
        if self.state.day >= self.config.purchase_limit_after_day:
            return self.state.animals_bought_today < self.config.late_purchases_per_day
        return True

    def _log(self, event_type: ZooEventType, message: str, **details) -> LogEntry:
        return self.events.add(self.state.day, event_type, message, **details)

    # -------------------------------------------------------------------------
    # Lookup helpers
    # -------------------------------------------------------------------------

    def _require_active(self):
        if self.state.is_ended:
            raise GameOverError(f"Game over: {self.state.end_reason}")

    def _get_pen(self, index: int) -> Pen:
        if not 0 <= index < len(self.pens):
            raise InvalidIndexError("pen", index)
        return self.pens[index]

    def _get_animal(self, pen: Pen, index: int) -> Animal:
        if not 0 <= index < len(pen.animals):
            raise InvalidIndexError("animal", index)
        return pen.animals[index]

    def _get_worker(self, index: int) -> Worker:
        if not 0 <= index < len(self.staff):
            raise InvalidIndexError("worker", index)
        return self.staff[index]

    def _charge(self, amount: float):
        if self.state.money < amount:
            raise InsufficientFundsError(amount, self.state.money)

    def _end_game(self, outcome: GameOutcome, reason: str):
        self.state.is_ended = True
        self.state.outcome = outcome
        self.state.end_reason = reason

        if outcome == GameOutcome.WON:
            logger.info(f"Game won: {reason}")
        else:
            logger.warning(f"Game lost: {reason}")

    def _terminal_result(self) -> DayResult:
        return DayResult(
            day=self.state.day,
            events=self.events.drain(),
            outcome=self.state.outcome,
            end_reason=self.state.end_reason,
        )

    # -------------------------------------------------------------------------
    # Day cycle
    # -------------------------------------------------------------------------

    def advance_day(self) -> DayResult:
        """
        Run one full day.

        Stages, each over every pen before the next starts:
        debt, aging, cleanliness, infection, vet treatment, mortality,
        feeding, cleaning, popularity, payroll, revenue, bankruptcy check,
        market refresh, visitors.

        Returns a DayResult; its outcome is set when the game ended.
        """
        if self.state.is_ended:
            return self._terminal_result()

        if self.state.day >= self.config.max_days:
            self._end_game(GameOutcome.WON, f"Completed all {self.config.max_days} days")
            return self._terminal_result()

        if not self.staff.has_director():
            self._end_game(GameOutcome.LOST, "The zoo has no director")
            return self._terminal_result()

        day = self.state.day
        summary = DaySummary(day=day)

        # Debt
        self.state.animals_bought_today = 0
        summary.loan_payment = self._process_debt()

        # Aging
        for pen in self.pens:
            pen.handle_aging()

        # Cleanliness
        for pen in self.pens:
            if pen.update_cleanliness(self.rng, self.config.dirty_chance_one_in):
                self._log(ZooEventType.PEN_DIRTY, f"{pen.description} became dirty")

        # Infection
        for pen in self.pens:
            report = self.disease.run_infection_stages(pen, day)
            for animal in report.newly_infected:
                self._log(ZooEventType.INFECTION, f"{animal.name} infected in {pen.description}",
                          animal=animal.name)
            if report.outbreak_started:
                self._log(ZooEventType.OUTBREAK, f"Disease outbreak in {pen.description}!")
            summary.new_infections += len(report.newly_infected)

        # Vets
        summary.cured_by_vets = self.auto_treat_animals()

        # Mortality
        for pen in self.pens:
            deaths = self.disease.handle_dying(pen, self.config.max_age_days)
            self._record_deaths(pen, deaths, summary)

        # Feeding, then cleaning
        summary.starvation_deaths = self._feed_animals()
        self._clean_pens()

        # Popularity
        swing = self.rng.randint(-self.config.popularity_swing, self.config.popularity_swing)
        self.state.popularity = max(
            self.state.popularity - self.dirty_pens() - self.total_infected() + swing, 0
        )

        # Payroll
        payroll = self.staff.total_salary
        self.state.money -= payroll
        summary.payroll = payroll
        self._log(ZooEventType.PAYROLL, f"Salaries paid: ${payroll:.0f}", amount=payroll)

        # Revenue
        total = self.total_animals()
        if total > 0:
            visitors = int(self.config.visitors_per_popularity * self.state.popularity)
            revenue = visitors * max(total, 1)
            self.state.money += revenue
            summary.revenue = revenue
            self._log(ZooEventType.REVENUE, f"Visitor income: ${revenue:.0f}",
                      visitors=visitors, amount=revenue)

        if self.state.money < 0:
            self._fill_summary(summary)
            self.metrics.record(summary)
            self._end_game(GameOutcome.LOST, "Bankrupt: the zoo ran out of money")
            result = self._terminal_result()
            result.summary = summary
            return result

        # Market
        if self.market.can_update(day):
            self.market.generate_animals(day)

        # Visitors
        roll = self.visitors.roll()
        if roll.any_visitors:
            self._log(ZooEventType.VISITORS, roll.describe(), bonus=roll.popularity_bonus)
        self.state.popularity += roll.popularity_bonus
        summary.celebrities = roll.celebrities
        summary.photographers = roll.photographers

        self._fill_summary(summary)
        self.metrics.record(summary)

        self.state.day += 1
        logger.info(f"Day {day} complete: ${self.state.money:.0f}, "
                    f"{self.total_animals()} animals, popularity {self.state.popularity}")

        return DayResult(day=day, events=self.events.drain(), summary=summary)

    def _fill_summary(self, summary: DaySummary):
        summary.money = self.state.money
        summary.food = self.state.food
        summary.popularity = self.state.popularity
        summary.debt = self.loan.debt
        summary.total_animals = self.total_animals()
        summary.infected = self.total_infected()
        summary.dirty_pens = self.dirty_pens()
        summary.outbreaks = sum(1 for p in self.pens if p.outbreak_started)

    def _process_debt(self) -> float:
        status, paid = self.loan.settle_day(self.state.money)
        if status == PaymentStatus.PAID:
            self.state.money -= paid
            self._log(ZooEventType.LOAN_PAYMENT, f"Loan payment: ${paid:.0f}", amount=paid)
        elif status == PaymentStatus.MISSED:
            self.state.popularity = max(self.state.popularity - self.costs.missed_payment_penalty, 0)
            self._log(ZooEventType.LOAN_ARREARS, "Missed loan payment!")
        return paid

    def _record_deaths(self, pen: Pen, deaths: List[Death], summary: DaySummary):
        for death in deaths:
            cause = "disease" if death.cause == DeathCause.DISEASE else "old age"
            self._log(ZooEventType.DEATH, f"{death.animal.name} died in {pen.description} ({cause})",
                      animal=death.animal.name, cause=death.cause.name)
            if death.cause == DeathCause.DISEASE:
                summary.disease_deaths += 1
            else:
                summary.old_age_deaths += 1

    def auto_treat_animals(self) -> int:
        """
        Veterinarians cure infected animals, scanning pens in order.

        The cap is (animals // vets) * vets, so it can fall short of the
        herd size. No vets means no treatment.
        """
        vets = self.staff.count(WorkerType.VET)
        if vets == 0:
            return 0

        limit = (self.total_animals() // vets) * vets
        treated = 0
        for pen in self.pens:
            for animal in pen.animals:
                if animal.is_infected and treated < limit:
                    animal.cure()
                    treated += 1

        if treated > 0:
            self._log(ZooEventType.VET_TREATMENT, f"Vets cured {treated} animals", count=treated)
        return treated

    def _feed_animals(self) -> int:
        """
        Consume one food unit per animal. On a shortage, each pen keeps
        animals while the stock count lasts and every later animal survives
        with 50% chance. The stock is then emptied.

        Returns the number of starvation deaths.
        """
        needed = self.total_animals()
        if self.state.food >= needed:
            self.state.food -= needed
            return 0

        self._log(ZooEventType.FOOD_SHORTAGE, "Not enough food for all animals!",
                  needed=needed, available=self.state.food)
        logger.warning(f"Food shortage: need {needed}, have {self.state.food}")

        starved = 0
        for pen in self.pens:
            survivors = []
            current_food = self.state.food
            for animal in pen.animals:
                if current_food > 0:
                    current_food -= 1
                    survivors.append(animal)
                elif self.rng.randrange(2) == 0:
                    survivors.append(animal)

            dead = pen.animal_count - len(survivors)
            if dead > 0:
                self._log(ZooEventType.STARVATION,
                          f"{dead} animals starved to death in {pen.description}!", count=dead)
                starved += dead
            pen.animals = survivors

        self.state.food = 0
        return starved

    def _clean_pens(self):
        """Each cleaner cleans the first dirty pen, one pen per cleaner."""
        for cleaner in self.staff.get_by_type(WorkerType.CLEANER):
            for pen in self.pens:
                if not pen.is_clean:
                    pen.is_clean = True
                    self._log(ZooEventType.PEN_CLEANED, f"{cleaner.name} cleaned {pen.description}")
                    break

    # -------------------------------------------------------------------------
    # Animal commands
    # -------------------------------------------------------------------------

    def buy_animal(self, market_index: int) -> Animal:
        """Buy from the market into the first pen that accepts the animal."""
        self._require_active()
        if not self.can_buy_animal():
            raise PurchaseLimitError(
                f"Only {self.config.late_purchases_per_day} purchase per day "
                f"from day {self.config.purchase_limit_after_day}"
            )

        offer = self.market.get(market_index)
        pen = next((p for p in self.pens if p.can_add(offer)), None)
        if pen is None:
            raise NoSuitablePenError(f"No pen accepts {offer.species}")
        self._charge(offer.price)

        animal = self.market.take(market_index)
        self.state.money -= animal.price
        pen.add_animal(animal)
        self.state.animals_bought_today += 1

        self._log(ZooEventType.ANIMAL_BOUGHT, f"Bought {animal.name}", price=animal.price)
        logger.info(f"Bought {animal.species} for ${animal.price:.0f}")
        return animal

    def sell_animal(self, pen_index: int, animal_index: int) -> float:
        """Sell at the animal's listed price. Returns the amount received."""
        self._require_active()
        pen = self._get_pen(pen_index)
        self._get_animal(pen, animal_index)

        animal = pen.remove_animal(animal_index)
        self.state.money += animal.price
        self._log(ZooEventType.ANIMAL_SOLD, f"Sold {animal.name}", price=animal.price)
        return animal.price

    def rename_animal(self, pen_index: int, animal_index: int, new_name: str):
        self._require_active()
        animal = self._get_animal(self._get_pen(pen_index), animal_index)
        if not new_name:
            raise ValueError("Name cannot be empty")
        animal.name = new_name
        self._log(ZooEventType.ANIMAL_RENAMED, f"Animal renamed: {new_name}")

    def breed(self, animal1: Animal, animal2: Animal) -> Animal:
        """Run the breeding engine. The offspring is not placed."""
        self._require_active()
        return breed(animal1, animal2, self.rng)

    def breed_animals(self, pen1_index: int, animal1_index: int,
                      pen2_index: int, animal2_index: int) -> Animal:
        """
        Breed two housed animals. The first animal's pen must have room
        for the offspring before the pair is even checked.
        """
        self._require_active()
        pen1 = self._get_pen(pen1_index)
        animal1 = self._get_animal(pen1, animal1_index)
        animal2 = self._get_animal(self._get_pen(pen2_index), animal2_index)

        if pen1.is_full:
            raise NoCapacityError(f"No room for offspring in {pen1.description}")
        return self.breed(animal1, animal2)

    def suitable_pens(self, animal: Animal) -> List[int]:
        """Indices of pens that would accept the animal."""
        return [i for i, pen in enumerate(self.pens) if pen.can_add(animal)]

    def place_offspring(self, offspring: Animal, pen_index: int):
        self._require_active()
        pen = self._get_pen(pen_index)
        if any(offspring in p.animals for p in self.pens):
            raise NotEligiblePenError(f"{offspring.name} already lives in a pen")
        if pen.is_full:
            raise NoCapacityError(f"{pen.description} is full")
        if not pen.can_add(offspring):
            raise NotEligiblePenError(f"{pen.description} does not accept {offspring.species}")

        pen.animals.append(offspring)

        parents = ""
        if offspring.has_parents:
            parents = f" (from {offspring.parent1.name} and {offspring.parent2.name})"
        if offspring.is_hybrid:
            self._log(ZooEventType.HYBRID_BORN, f"New hybrid born: {offspring.name}{parents}")
        else:
            self._log(ZooEventType.ANIMAL_BORN, f"New animal born: {offspring.name}{parents}")

    # -------------------------------------------------------------------------
    # Treatment
    # -------------------------------------------------------------------------

    def treat_animal(self, pen_index: int, animal_index: int):
        self._require_active()
        animal = self._get_animal(self._get_pen(pen_index), animal_index)
        if not animal.is_infected:
            raise NotInfectedError(f"{animal.name} is not infected")
        self._charge(self.costs.treatment_cost)

        animal.cure()
        self.state.money -= self.costs.treatment_cost
        self._log(ZooEventType.TREATMENT, f"Treated {animal.name}", cost=self.costs.treatment_cost)

    def treat_all(self) -> int:
        """Cure every infected animal, all or nothing. Returns the number cured."""
        self._require_active()
        infected = [a for pen in self.pens for a in pen.animals if a.is_infected]
        cost = len(infected) * self.costs.treatment_cost
        self._charge(cost)

        for animal in infected:
            animal.cure()
        self.state.money -= cost
        self._log(ZooEventType.TREATMENT, f"Treated {len(infected)} animals for ${cost:.0f}",
                  count=len(infected), cost=cost)
        return len(infected)

    # -------------------------------------------------------------------------
    # Staff
    # -------------------------------------------------------------------------

    def hire_worker(self, worker_type: WorkerType, name: str) -> Worker:
        self._require_active()
        if not name:
            raise ValueError("Name cannot be empty")
        if worker_type == WorkerType.DIRECTOR and self.staff.has_director():
            raise DirectorAlreadyExistsError("The zoo already has a director")

        worker = Worker(worker_type, name)
        self.staff.hire(worker)
        self._log(ZooEventType.WORKER_HIRED, f"Hired {name} ({worker_type.name.lower()})")
        return worker

    def fire_worker(self, index: int) -> Worker:
        """Dismiss a worker. Dismissing the director ends the game."""
        self._require_active()
        self._get_worker(index)

        worker = self.staff.fire(index)
        self._log(ZooEventType.WORKER_FIRED, f"Fired {worker.name}")
        if worker.worker_type == WorkerType.DIRECTOR:
            self._end_game(GameOutcome.LOST, "The director was dismissed")
        return worker

    def rename_worker(self, index: int, new_name: str):
        self._require_active()
        worker = self._get_worker(index)
        if not new_name:
            raise ValueError("Name cannot be empty")
        worker.name = new_name
        self._log(ZooEventType.WORKER_RENAMED, f"Worker renamed: {new_name}")

    # -------------------------------------------------------------------------
    # Facilities
    # -------------------------------------------------------------------------

    def build_pen(self, capacity: int, diet: DietClass, climate: Climate) -> Pen:
        self._require_active()
        if not self.costs.min_pen_capacity <= capacity <= self.costs.max_pen_capacity:
            raise ValueError(
                f"Capacity must be {self.costs.min_pen_capacity}-{self.costs.max_pen_capacity}: {capacity}"
            )
        cost = self.costs.pen_cost(capacity)
        self._charge(cost)

        pen = Pen(capacity=capacity, allowed_diet=diet, climate=climate)
        self.state.money -= cost
        self.pens.append(pen)
        self._log(ZooEventType.PEN_BUILT, f"Built {pen.description} for ${cost:.0f}", cost=cost)
        logger.info(f"Built {pen.description}, capacity {capacity}")
        return pen

    def destroy_pen(self, index: int):
        self._require_active()
        pen = self._get_pen(index)
        if not pen.is_empty:
            raise PenNotEmptyError("Cannot destroy a pen with animals in it")
        self.pens.pop(index)
        self._log(ZooEventType.PEN_DESTROYED, f"Destroyed {pen.description}")

    def refresh_market(self):
        """Paid market refresh, at most once per day."""
        self._require_active()
        if not self.market.can_update(self.state.day):
            raise MarketRefreshUnavailableError("The market was already refreshed today")
        self._charge(self.market.config.refresh_cost)

        self.state.money -= self.market.config.refresh_cost
        self.market.generate_animals(self.state.day)
        self._log(ZooEventType.MARKET_REFRESHED, "Animal market refreshed")

    # -------------------------------------------------------------------------
    # Economy
    # -------------------------------------------------------------------------

    def take_loan(self, amount: float, days: int):
        self._require_active()
        if self.loan.is_outstanding:
            raise LoanAlreadyOutstandingError("Repay the current loan first")

        self.loan.originate(amount, days)
        self.state.money += amount
        self._log(ZooEventType.LOAN_TAKEN, f"Took a loan of ${amount:.0f} for {days} days",
                  amount=amount, days=days)

    def buy_food(self, amount: int):
        self._require_active()
        if amount <= 0:
            raise ValueError(f"Food amount must be positive: {amount}")
        cost = amount * self.costs.food_unit_cost
        self._charge(cost)

        self.state.money -= cost
        self.state.food += amount
        self._log(ZooEventType.FOOD_PURCHASED, f"Bought {amount} food", amount=amount)

    def advertise(self, amount: int):
        """Spend whole currency units on advertising for popularity."""
        self._require_active()
        if not isinstance(amount, int) or isinstance(amount, bool):
            raise ValueError(f"Advertising budget must be a whole number: {amount}")
        if amount <= 0:
            raise ValueError(f"Advertising budget must be positive: {amount}")
        self._charge(amount)

        self.state.money -= amount
        self.state.popularity += amount * self.costs.advertising_popularity_per_unit
        self._log(ZooEventType.ADVERTISING, f"Spent ${amount:.0f} on advertising", amount=amount)

    # -------------------------------------------------------------------------
    # Reports
    # -------------------------------------------------------------------------

    def get_status(self) -> Dict:
        """Get current simulation status."""
        return {
            "name": self.name,
            "day": self.state.day,
            "max_days": self.config.max_days,
            "money": self.state.money,
            "food": self.state.food,
            "popularity": self.state.popularity,
            "total_animals": self.total_animals(),
            "infected": self.total_infected(),
            "pens": len(self.pens),
            "staff": {t.name: self.staff.count(t) for t in WorkerType},
            "recommended_staff": {t.name: n for t, n in self.recommended_staff().items()},
            "loan": self.loan.get_status(),
            "market": self.market.get_status(),
            "is_ended": self.state.is_ended,
            "outcome": self.state.outcome.name if self.state.outcome else None,
            "end_reason": self.state.end_reason,
        }

    def get_final_report(self) -> Dict:
        """Generate the end-of-game report."""
        return {
            "summary": {
                "name": self.name,
                "days_played": self.state.day,
                "outcome": self.state.outcome.name if self.state.outcome else None,
                "end_reason": self.state.end_reason,
                "final_money": self.state.money,
                "final_popularity": self.state.popularity,
                "final_animals": self.total_animals(),
                "peak_animals": self.metrics.peak_population(),
            },
            "totals": self.metrics.totals(),
            "disease": self.disease.get_status(),
            "loan": self.loan.get_status(),
            "staff": self.staff.get_status(),
            "pens": [p.get_status() for p in self.pens],
            "day_summaries": self.metrics.to_rows(),
        }

    def export_log(self, filepath: str):
        """Export the final report and event history to a JSON file."""
        report = self.get_final_report()
        report["event_history"] = [
            {"day": e.day, "event_type": e.event_type.name, "message": e.message, **e.details}
            for e in self.events.history
        ]

        with open(filepath, 'w') as f:
            json.dump(report, f, indent=2, default=str)

        logger.info(f"Simulation log exported to {filepath}")
