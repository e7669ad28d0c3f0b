"""
Zoo Simulation — Command Errors
Recoverable failures raised by player commands. State is unchanged when
any of these is raised.
"""


class ZooError(Exception):
    """Base class for recoverable command errors."""


class InsufficientFundsError(ZooError):
    def __init__(self, required: float, available: float):
        self.required = required
        self.available = available
        super().__init__(f"Insufficient funds: need ${required:.0f}, have ${available:.0f}")


class InvalidIndexError(ZooError, IndexError):
    def __init__(self, kind: str, index: int):
        self.kind = kind
        self.index = index
        super().__init__(f"Invalid {kind} index: {index}")


class NoSuitablePenError(ZooError):
    """No pen accepts the animal."""


class NotEligibleError(ZooError):
    """One of the animals cannot reproduce (too young, infected or dying)."""


class SameGenderError(ZooError):
    """Breeding requires animals of different genders."""


class NoCapacityError(ZooError):
    """The pen has no free space."""


class NotEligiblePenError(ZooError):
    """The pen does not accept this animal."""


class NotInfectedError(ZooError):
    """Treatment requested for a healthy animal."""


class DirectorAlreadyExistsError(ZooError):
    """The zoo already has a director."""


class PenNotEmptyError(ZooError):
    """Only empty pens can be destroyed."""


class LoanAlreadyOutstandingError(ZooError):
    """A new loan requires the previous one to be repaid."""


class MarketRefreshUnavailableError(ZooError):
    """The market was already refreshed today."""


class PurchaseLimitError(ZooError):
    """Daily purchase limit reached."""


class GameOverError(ZooError):
    """The session has ended; no further commands are accepted."""
