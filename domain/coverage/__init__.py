"""Coverage Bounded Context.

Responsible for deciding whether a set of devices covers a required
distance x light operating envelope:
- Value Objects: Interval, Device, Requirement, CoverageReport
- Services: covers_distance_range, covers_requirement, coverage_report

Public functions are re-exported here for simplified imports.
"""

from domain.coverage.errors import CoverageError, InvalidIntervalError
from domain.coverage.services import (
    active_devices,
    coverage_report,
    covers_distance_range,
    covers_requirement,
    find_distance_gap,
    light_boundaries,
    light_relevant_devices,
    light_segments,
)
from domain.coverage.value_objects import (
    CoverageReport,
    DegenerateLightPolicy,
    Device,
    Interval,
    LightSegment,
    Requirement,
    SegmentCoverage,
)

__all__ = [
    "CoverageError",
    "CoverageReport",
    "DegenerateLightPolicy",
    "Device",
    "Interval",
    "InvalidIntervalError",
    "LightSegment",
    "Requirement",
    "SegmentCoverage",
    "active_devices",
    "coverage_report",
    "covers_distance_range",
    "covers_requirement",
    "find_distance_gap",
    "light_boundaries",
    "light_relevant_devices",
    "light_segments",
]
