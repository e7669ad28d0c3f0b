"""
Zoo Simulation — Event Log & Daily Visitor Events

The event log is the player-facing record of what happened during a day.
It is filled by the day cycle and by player commands, returned with each
day result, and cleared once handed over.

Visitor events are the random end-of-day roll of celebrities and
photographers that boost popularity.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Any
from enum import Enum, auto
import random
import logging

logger = logging.getLogger(__name__)


class ZooEventType(Enum):
    """Types of entries in the daily event log."""
    # Economy
    LOAN_TAKEN = auto()
    LOAN_PAYMENT = auto()
    LOAN_ARREARS = auto()
    PAYROLL = auto()
    REVENUE = auto()
    FOOD_PURCHASED = auto()
    ADVERTISING = auto()

    # Animals
    ANIMAL_BOUGHT = auto()
    ANIMAL_SOLD = auto()
    ANIMAL_RENAMED = auto()
    ANIMAL_BORN = auto()
    HYBRID_BORN = auto()

    # Health
    INFECTION = auto()
    OUTBREAK = auto()
    DEATH = auto()
    STARVATION = auto()
    FOOD_SHORTAGE = auto()
    TREATMENT = auto()
    VET_TREATMENT = auto()

    # Facilities
    PEN_DIRTY = auto()
    PEN_CLEANED = auto()
    PEN_BUILT = auto()
    PEN_DESTROYED = auto()
    MARKET_REFRESHED = auto()

    # Staff
    WORKER_HIRED = auto()
    WORKER_FIRED = auto()
    WORKER_RENAMED = auto()

    # Visitors
    VISITORS = auto()


@dataclass
class LogEntry:
    """One line of the daily event log."""
    day: int
    event_type: ZooEventType
    message: str
    details: Dict[str, Any] = field(default_factory=dict)


class EventLog:
    """Per-day transient log, plus full history for reports."""

    def __init__(self):
        self.entries: List[LogEntry] = []
        self.history: List[LogEntry] = []

    def add(self, day: int, event_type: ZooEventType, message: str, **details) -> LogEntry:
        entry = LogEntry(day=day, event_type=event_type, message=message, details=details)
        self.entries.append(entry)
        self.history.append(entry)
        return entry

    def drain(self) -> List[LogEntry]:
        """Return the pending entries and clear them."""
        entries = self.entries
        self.entries = []
        return entries

    def of_type(self, event_type: ZooEventType) -> List[LogEntry]:
        return [e for e in self.history if e.event_type == event_type]

    def __len__(self) -> int:
        return len(self.entries)


@dataclass
class VisitorRoll:
    """Result of the daily visitor roll."""
    celebrities: int = 0
    photographers: int = 0
    popularity_bonus: int = 0

    @property
    def any_visitors(self) -> bool:
        return self.celebrities > 0 or self.photographers > 0

    def describe(self) -> str:
        parts = []
        if self.celebrities > 0:
            noun = "celebrity" if self.celebrities == 1 else "celebrities"
            parts.append(f"{self.celebrities} {noun} (+{self.celebrities * VisitorEventGenerator.CELEBRITY_BONUS})")
        if self.photographers > 0:
            noun = "photographer" if self.photographers == 1 else "photographers"
            parts.append(f"{self.photographers} {noun} (+{self.photographers * VisitorEventGenerator.PHOTOGRAPHER_BONUS})")
        return "Visitors of the day: " + ", ".join(parts)


class VisitorEventGenerator:
    """
    Rolls notable visitors once per day.

    0-2 celebrities worth 10 popularity each, then 0-5 photographers
    worth 5 each.
    """

    MAX_CELEBRITIES = 2
    MAX_PHOTOGRAPHERS = 5
    CELEBRITY_BONUS = 10
    PHOTOGRAPHER_BONUS = 5

    def __init__(self, rng: random.Random):
        self.rng = rng
        self.last_roll = VisitorRoll()

    def roll(self) -> VisitorRoll:
        celebrities = self.rng.randrange(self.MAX_CELEBRITIES + 1)
        photographers = self.rng.randrange(self.MAX_PHOTOGRAPHERS + 1)
        bonus = celebrities * self.CELEBRITY_BONUS + photographers * self.PHOTOGRAPHER_BONUS

        self.last_roll = VisitorRoll(celebrities, photographers, bonus)
        if self.last_roll.any_visitors:
            logger.debug(f"Visitors: {celebrities} celebrities, {photographers} photographers")
        return self.last_roll
