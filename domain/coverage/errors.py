"""Coverage Bounded Context - Error Hierarchy.

Custom exceptions for coverage operations.

The coverage services are total over well-formed input, so the only
condition raised here is a malformed Interval. It is raised both by the
Interval validator at construction time and by the service preconditions
(for instances built with ``model_construct``, which skips validation).
"""

from __future__ import annotations


class CoverageError(Exception):
    """Base error for coverage operations."""


class InvalidIntervalError(CoverageError):
    """Interval bounds are inverted (lo > hi) or not finite.

    Not a ValueError subclass: pydantic propagates it unchanged out of
    model validators instead of wrapping it in ValidationError.

    Attributes:
        lo: The offending lower bound
        hi: The offending upper bound
    """

    def __init__(self, lo: float, hi: float, reason: str = "lo > hi") -> None:
        self.lo = lo
        self.hi = hi
        self.reason = reason
        super().__init__(f"Invalid interval [{lo!r}, {hi!r}]: {reason}")
