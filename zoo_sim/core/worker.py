"""
Zoo Simulation — Workers
Staff members and the roster that manages them.
"""

from dataclasses import dataclass
from typing import Dict, List
import logging

from ..config import WorkerType, WORKER_SALARIES, STAFFING, StaffingConfig

logger = logging.getLogger(__name__)


@dataclass
class Worker:
    """A staff member; salary is fixed by type."""
    worker_type: WorkerType
    name: str

    @property
    def salary(self) -> float:
        return WORKER_SALARIES[self.worker_type]

    def get_status(self) -> dict:
        return {
            "name": self.name,
            "type": self.worker_type.name,
            "salary": self.salary,
        }


class Staff:
    """
    Ordered roster of workers.

    Enforces nothing about the director on its own; the simulation decides
    what hiring a second director or firing the only one means.
    """

    def __init__(self, staffing: StaffingConfig = STAFFING):
        self.workers: List[Worker] = []
        self.staffing = staffing

    def __len__(self) -> int:
        return len(self.workers)

    def __iter__(self):
        return iter(self.workers)

    def __getitem__(self, index: int) -> Worker:
        return self.workers[index]

    def hire(self, worker: Worker):
        self.workers.append(worker)
        logger.info(f"Hired {worker.worker_type.name.lower()} {worker.name}")

    def fire(self, index: int) -> Worker:
        worker = self.workers.pop(index)
        logger.info(f"Fired {worker.worker_type.name.lower()} {worker.name}")
        return worker

    def count(self, worker_type: WorkerType) -> int:
        return sum(1 for w in self.workers if w.worker_type == worker_type)

    def has_director(self) -> bool:
        return self.count(WorkerType.DIRECTOR) > 0

    def get_by_type(self, worker_type: WorkerType) -> List[Worker]:
        return [w for w in self.workers if w.worker_type == worker_type]

    @property
    def total_salary(self) -> float:
        return sum(w.salary for w in self.workers)

    def recommended(self, total_animals: int, total_pens: int) -> Dict[WorkerType, int]:
        """Suggested headcount per role for the current zoo size."""
        s = self.staffing
        return {
            WorkerType.VET: -(-total_animals // s.animals_per_vet),
            WorkerType.CLEANER: -(-total_pens // s.pens_per_cleaner),
            WorkerType.FEEDER: -(-total_pens // s.pens_per_feeder),
            WorkerType.DIRECTOR: 1,
        }

    def get_status(self) -> dict:
        return {
            "workers": [w.get_status() for w in self.workers],
            "counts": {t.name: self.count(t) for t in WorkerType},
            "total_salary": self.total_salary,
        }
