"""
Zoo Simulation — Metrics Collection
Per-day ledger of the zoo's finances, population and health.
"""

from dataclasses import dataclass, field, asdict
from typing import Dict, List, Any
import logging

logger = logging.getLogger(__name__)


@dataclass
class DaySummary:
    """Snapshot taken at the end of one simulated day."""
    day: int

    # Ledger
    money: float = 0.0
    food: int = 0
    popularity: int = 0
    debt: float = 0.0
    payroll: float = 0.0
    revenue: float = 0.0
    loan_payment: float = 0.0

    # Population
    total_animals: int = 0
    infected: int = 0
    dirty_pens: int = 0
    outbreaks: int = 0

    # Day's casualties and infections
    new_infections: int = 0
    cured_by_vets: int = 0
    disease_deaths: int = 0
    old_age_deaths: int = 0
    starvation_deaths: int = 0

    # Visitors
    celebrities: int = 0
    photographers: int = 0

    @property
    def total_deaths(self) -> int:
        return self.disease_deaths + self.old_age_deaths + self.starvation_deaths

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        data["total_deaths"] = self.total_deaths
        return data


@dataclass
class MetricsCollector:
    """Accumulates day summaries and lifetime totals."""
    summaries: List[DaySummary] = field(default_factory=list)

    def record(self, summary: DaySummary):
        self.summaries.append(summary)
        logger.debug(f"Day {summary.day}: ${summary.money:.0f}, "
                     f"{summary.total_animals} animals, popularity {summary.popularity}")

    def totals(self) -> Dict[str, float]:
        """Lifetime sums of the flow columns."""
        keys = [
            "payroll", "revenue", "loan_payment", "new_infections", "cured_by_vets",
            "disease_deaths", "old_age_deaths", "starvation_deaths",
        ]
        return {k: sum(getattr(s, k) for s in self.summaries) for k in keys}

    def peak_population(self) -> int:
        if not self.summaries:
            return 0
        return max(s.total_animals for s in self.summaries)

    def to_rows(self) -> List[Dict[str, Any]]:
        return [s.to_dict() for s in self.summaries]
