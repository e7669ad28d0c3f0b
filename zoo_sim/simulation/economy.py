"""
Zoo Simulation — Loans
Debt amortization ledger: one loan at a time, paid in equal daily instalments.
"""

from dataclasses import dataclass
from typing import Tuple
from enum import Enum, auto
import logging

logger = logging.getLogger(__name__)


class PaymentStatus(Enum):
    NONE_DUE = auto()
    PAID = auto()
    MISSED = auto()


@dataclass
class LoanLedger:
    """
    Outstanding debt.

    Interest is added once at origination; the total is split evenly over
    the term. A missed payment does not extend the term count; the
    instalment is simply retried the next day.
    """
    interest_rate: float = 0.2
    debt: float = 0.0
    daily_payment: float = 0.0
    days_left: int = 0

    # Stats
    total_borrowed: float = 0.0
    total_repaid: float = 0.0
    missed_payments: int = 0

    @property
    def is_outstanding(self) -> bool:
        return self.debt > 0

    def originate(self, amount: float, days: int) -> float:
        """Open a loan. Returns the total owed."""
        if amount <= 0 or days <= 0:
            raise ValueError(f"Loan amount and term must be positive: {amount}, {days}")

        self.debt += amount * (1 + self.interest_rate)
        self.daily_payment = self.debt / days
        self.days_left = days
        self.total_borrowed += amount

        logger.info(f"Loan of ${amount:.0f} over {days} days, owing ${self.debt:.2f}")
        return self.debt

    def settle_day(self, money: float) -> Tuple[PaymentStatus, float]:
        """
        Attempt today's instalment against the available money.

        Returns (status, amount paid). The caller deducts the amount.
        """
        if self.days_left <= 0:
            return PaymentStatus.NONE_DUE, 0.0

        payment = min(self.daily_payment, self.debt)
        if money < payment:
            self.missed_payments += 1
            logger.warning(f"Missed loan payment of ${payment:.2f}")
            return PaymentStatus.MISSED, 0.0

        self.debt -= payment
        self.days_left -= 1
        self.total_repaid += payment

        if self.days_left == 0:
            # Clear float residue so a new loan can be taken
            self.debt = 0.0
            self.daily_payment = 0.0
            logger.info("Loan repaid")

        return PaymentStatus.PAID, payment

    def get_status(self) -> dict:
        return {
            "debt": self.debt,
            "daily_payment": self.daily_payment,
            "days_left": self.days_left,
            "total_borrowed": self.total_borrowed,
            "total_repaid": self.total_repaid,
            "missed_payments": self.missed_payments,
        }
