"""Exception types raised by the astronomy engine."""


class SkyObserverError(Exception):
    """Base class for engine errors."""


class InvalidInputError(SkyObserverError, ValueError):
    """Malformed date/time or out-of-range observer coordinates.

    Raised before any computation starts.
    """


class NonConvergenceError(SkyObserverError, ArithmeticError):
    """An iterative solver exhausted its iteration budget."""

    def __init__(self, message: str, iterations: int, residual: float) -> None:
        super().__init__(message)
        self.iterations = iterations
        self.residual = residual
