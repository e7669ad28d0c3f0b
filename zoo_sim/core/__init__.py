"""
Zoo Simulation — Core Module
Entity model and the simulation engine.
"""

from .animal import Animal
from .pen import Pen
from .worker import Worker, Staff
from .errors import (
    ZooError,
    InsufficientFundsError,
    InvalidIndexError,
    NoSuitablePenError,
    NotEligibleError,
    SameGenderError,
    NoCapacityError,
    NotEligiblePenError,
    NotInfectedError,
    DirectorAlreadyExistsError,
    PenNotEmptyError,
    LoanAlreadyOutstandingError,
    MarketRefreshUnavailableError,
    PurchaseLimitError,
    GameOverError,
)
from .simulation import ZooSimulation, SimulationState, DayResult, GameOutcome

__all__ = [
    # Entities
    "Animal",
    "Pen",
    "Worker",
    "Staff",

    # Errors
    "ZooError",
    "InsufficientFundsError",
    "InvalidIndexError",
    "NoSuitablePenError",
    "NotEligibleError",
    "SameGenderError",
    "NoCapacityError",
    "NotEligiblePenError",
    "NotInfectedError",
    "DirectorAlreadyExistsError",
    "PenNotEmptyError",
    "LoanAlreadyOutstandingError",
    "MarketRefreshUnavailableError",
    "PurchaseLimitError",
    "GameOverError",

    # Simulation
    "ZooSimulation",
    "SimulationState",
    "DayResult",
    "GameOutcome",
]
