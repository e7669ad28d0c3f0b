"""
Zoo Simulation — Simulation Package
Disease, breeding, market, loans, event log, and metrics.
"""

from .events import (
    ZooEventType,
    LogEntry,
    EventLog,
    VisitorRoll,
    VisitorEventGenerator,
)

from .disease import (
    DeathCause,
    Death,
    InfectionReport,
    DiseaseEngine,
)

from .breeding import (
    breed,
    check_pair,
    hybrid_name,
    HYBRID_PRICE_FACTOR,
)

from .market import AnimalMarket

from .economy import LoanLedger, PaymentStatus

from .metrics import DaySummary, MetricsCollector

__all__ = [
    # Events
    "ZooEventType",
    "LogEntry",
    "EventLog",
    "VisitorRoll",
    "VisitorEventGenerator",

    # Disease
    "DeathCause",
    "Death",
    "InfectionReport",
    "DiseaseEngine",

    # Breeding
    "breed",
    "check_pair",
    "hybrid_name",
    "HYBRID_PRICE_FACTOR",

    # Market & economy
    "AnimalMarket",
    "LoanLedger",
    "PaymentStatus",

    # Metrics
    "DaySummary",
    "MetricsCollector",
]
