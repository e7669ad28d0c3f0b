"""
Zoo Simulation
Turn-based zoo management: a seeded daily simulation of animal aging,
disease, breeding, feeding, staffing and finances over a fixed number of days.
"""

__version__ = "1.0.0"

from .config import (
    ZOO,
    COSTS,
    MARKET,
    STAFFING,
    SPECIES,
    WORKER_SALARIES,
    ZooConfig,
    CostConfig,
    MarketConfig,
    StaffingConfig,
    SpeciesSpec,
    DietClass,
    Climate,
    Gender,
    WorkerType,
)

from .core import (
    Animal,
    Pen,
    Worker,
    Staff,
    ZooError,
    ZooSimulation,
    SimulationState,
    DayResult,
    GameOutcome,
)

__all__ = [
    # Version info
    "__version__",

    # Config
    "ZOO",
    "COSTS",
    "MARKET",
    "STAFFING",
    "SPECIES",
    "WORKER_SALARIES",
    "ZooConfig",
    "CostConfig",
    "MarketConfig",
    "StaffingConfig",
    "SpeciesSpec",
    "DietClass",
    "Climate",
    "Gender",
    "WorkerType",

    # Core classes
    "Animal",
    "Pen",
    "Worker",
    "Staff",
    "ZooError",
    "ZooSimulation",
    "SimulationState",
    "DayResult",
    "GameOutcome",
]
