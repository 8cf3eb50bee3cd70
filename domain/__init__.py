"""Coverage Planner Domain Layer.

This package contains the core business logic organized by bounded contexts:
- coverage: device operating envelopes, 2D distance x light coverage checks
"""

from domain import coverage

__all__ = ["coverage"]
