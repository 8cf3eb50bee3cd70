"""Coverage Bounded Context - Value Objects.

Immutable data structures describing device operating envelopes and the
coverage requirement they are checked against.
All validation occurs at construction time via Pydantic.

Axes:
    distance: subject distance (any consistent unit, e.g. meters)
    light: ambient light level (any consistent unit, e.g. lux)
"""

from __future__ import annotations

import math
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, model_validator

from domain.coverage.errors import InvalidIntervalError


# ---------------------------------------------------------------------------
# Interval
# ---------------------------------------------------------------------------
class Interval(BaseModel):
    """Closed numeric range [lo, hi] (Value Object).

    Used for both the distance axis and the light axis.

    Invariants:
        IV-1: lo <= hi
        IV-2: lo and hi are finite (no NaN, no infinity)

    A zero-width interval (lo == hi) is legal and denotes a single point.
    Violations raise InvalidIntervalError directly from the constructor.
    """

    lo: float
    hi: float

    model_config = ConfigDict(frozen=True)

    @model_validator(mode="after")
    def validate_order(self) -> "Interval":
        check_interval(self)
        return self

    @property
    def width(self) -> float:
        return self.hi - self.lo

    @property
    def is_degenerate(self) -> bool:
        """True if the interval is a single point."""
        return self.lo == self.hi

    def contains(self, value: float) -> bool:
        """Check if value lies within the interval (inclusive on both ends)."""
        return self.lo <= value <= self.hi

    def intersects(self, other: "Interval") -> bool:
        """Check if two closed intervals share at least one point."""
        return not (other.hi < self.lo or other.lo > self.hi)

    def __str__(self) -> str:
        return f"[{self.lo!r}, {self.hi!r}]"


def check_interval(interval: Interval) -> None:
    """Raise InvalidIntervalError unless interval satisfies IV-1 and IV-2.

    Shared by the Interval validator and by the coverage services, which
    re-check their inputs because ``Interval.model_construct`` bypasses
    validation.
    """
    lo, hi = interval.lo, interval.hi
    if not (math.isfinite(lo) and math.isfinite(hi)):
        raise InvalidIntervalError(lo, hi, "bounds must be finite")
    if lo > hi:
        raise InvalidIntervalError(lo, hi)


# ---------------------------------------------------------------------------
# Device / Requirement
# ---------------------------------------------------------------------------
class Device(BaseModel):
    """One hardware unit's joint distance/light operating envelope (Value Object).

    The device covers its distance interval only while ambient light falls
    within its light interval. ``device_id`` is opaque and only used for
    diagnostics.

    Note on __eq__ and __hash__: Pydantic frozen models compare by value, so
    two devices with identical fields are interchangeable (and collapse in a set).
    """

    device_id: str
    distance: Interval
    light: Interval

    model_config = ConfigDict(frozen=True)

    def is_active_at(self, light_level: float) -> bool:
        """Check if the device operates at the given light level (inclusive)."""
        return self.light.contains(light_level)

    def overlaps_light(self, light: Interval) -> bool:
        """Check if the device's light range shares any value with ``light``."""
        return self.light.intersects(light)


class Requirement(BaseModel):
    """Distance x light rectangle that must be fully covered (Value Object)."""

    distance: Interval
    light: Interval

    model_config = ConfigDict(frozen=True)


# ---------------------------------------------------------------------------
# Policy
# ---------------------------------------------------------------------------
class DegenerateLightPolicy(str, Enum):
    """How a zero-width requirement light interval is evaluated.

    A single light value yields one boundary and therefore no segments.

    POINT_CHECK: check distance coverage of the devices active at exactly
        that light value (treated as one zero-width segment).
    PARITY: report covered as soon as any device survives the light
        pre-filter, without checking distance coverage.
    """

    POINT_CHECK = "point_check"
    PARITY = "parity"


# ---------------------------------------------------------------------------
# Diagnostics
# ---------------------------------------------------------------------------
class LightSegment(BaseModel):
    """Light-axis stretch between two adjacent boundaries (Value Object).

    The active-device set is constant on the open interior (lower, upper);
    ``midpoint`` is the representative value it is sampled at.

    Invariants:
        LS-1: lower <= midpoint <= upper
    """

    lower: float
    upper: float
    midpoint: float

    model_config = ConfigDict(frozen=True)

    @model_validator(mode="after")
    def validate_midpoint(self) -> "LightSegment":
        if not (self.lower <= self.midpoint <= self.upper):
            raise ValueError(
                f"midpoint {self.midpoint} outside segment [{self.lower}, {self.upper}]"
            )
        return self


class SegmentCoverage(BaseModel):
    """Distance coverage result for one light segment (Value Object).

    Invariants:
        SC-1: covered == (gap is None)
    """

    segment: LightSegment
    active_device_ids: tuple[str, ...] = Field(default=())  # Input order
    covered: bool
    gap: Interval | None = None  # First uncovered distance stretch

    model_config = ConfigDict(frozen=True)

    @model_validator(mode="after")
    def validate_gap_consistency(self) -> "SegmentCoverage":
        if self.covered and self.gap is not None:
            raise ValueError("covered=True requires gap=None")
        if not self.covered and self.gap is None:
            raise ValueError("covered=False requires a gap")
        return self


class CoverageReport(BaseModel):
    """Per-segment explanation of a requirement coverage check (Value Object).

    ``segments`` is empty when no device survives the light pre-filter, or
    when a degenerate light requirement is evaluated with
    DegenerateLightPolicy.PARITY.
    """

    requirement: Requirement
    relevant_device_ids: tuple[str, ...]  # Devices surviving the light pre-filter
    segments: tuple[SegmentCoverage, ...]

    model_config = ConfigDict(frozen=True)

    @property
    def covered(self) -> bool:
        if not self.relevant_device_ids:
            return False
        return all(s.covered for s in self.segments)

    def failing_segments(self) -> tuple[SegmentCoverage, ...]:
        """Return segments whose distance target was not covered."""
        return tuple(s for s in self.segments if not s.covered)

    def first_failure(self) -> SegmentCoverage | None:
        """Return the lowest-light failing segment, if any."""
        failing = self.failing_segments()
        return failing[0] if failing else None
