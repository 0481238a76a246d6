from __future__ import annotations


class ConvexHullError(Exception):
    """Base class for every error raised by the convex hull package."""


class UnknownAlgorithmError(ConvexHullError, ValueError):
    """Raised when an algorithm name or tag does not match a known algorithm."""


class OutputBufferTooSmallError(ConvexHullError, ValueError):
    """Raised when a range-based call receives a destination that cannot hold the hull."""

    def __init__(self, algorithm: str, required: int, actual: int) -> None:
        super().__init__(
            f"{algorithm} needs an output buffer of at least {required} slots, got {actual}"
        )
        self.algorithm = algorithm
        self.required = required
        self.actual = actual


class NonFiniteCoordinateError(ConvexHullError, ValueError):
    """Raised when precondition checks find a NaN or infinite coordinate."""


class HullConstructionError(ConvexHullError, RuntimeError):
    """Raised when a gift-wrapping walk never returns to its first vertex."""


class HullValidationError(ConvexHullError, AssertionError):
    """Raised when a computed hull breaks one of the hull invariants."""
