"""Coverage Bounded Context - Domain Services.

Pure domain logic deciding whether a set of devices covers a required
distance x light rectangle. NO I/O operations and no shared state: every
function here is safe to call concurrently with distinct inputs.

Two layers, evaluated leaf-first:
    covers_distance_range: 1D greedy interval-union sweep on the distance axis
    covers_requirement: splits the light axis at device light endpoints and
        runs the distance sweep once per light segment
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence

import numpy as np

from domain.coverage.value_objects import (
    CoverageReport,
    DegenerateLightPolicy,
    Device,
    Interval,
    LightSegment,
    Requirement,
    SegmentCoverage,
    check_interval,
)

# Module-level logger (reused across all calls)
logger = logging.getLogger(__name__)

DEFAULT_DEGENERATE_LIGHT_POLICY = DegenerateLightPolicy.POINT_CHECK


# ---------------------------------------------------------------------------
# Preconditions
# ---------------------------------------------------------------------------
def _check_requirement(requirement: Requirement) -> None:
    check_interval(requirement.distance)
    check_interval(requirement.light)


def _check_devices(devices: Iterable[Device]) -> list[Device]:
    checked = list(devices)
    for device in checked:
        check_interval(device.distance)
        check_interval(device.light)
    return checked


# ---------------------------------------------------------------------------
# Distance Axis
# ---------------------------------------------------------------------------
def _distance_sweep(target: Interval, intervals: list[Interval]) -> Interval | None:
    """Greedy sweep over intervals sorted by lo; return the first gap or None.

    Intervals ending below target.lo can never advance coverage, so they are
    dropped up front. For a zero-width target this keeps e.g. [1, 3] from
    certifying the point 5.
    """
    candidates = sorted(
        (iv for iv in intervals if iv.hi >= target.lo), key=lambda iv: iv.lo
    )

    covered_up_to = target.lo
    for interval in candidates:
        # Later intervals start at or after this one, so none can close the gap
        if interval.lo > covered_up_to:
            return Interval(lo=covered_up_to, hi=min(interval.lo, target.hi))

        covered_up_to = max(covered_up_to, interval.hi)
        if covered_up_to >= target.hi:
            return None

    return Interval(lo=covered_up_to, hi=target.hi)


def covers_distance_range(target: Interval, devices: Iterable[Interval]) -> bool:
    """Check if the union of device distance intervals contains target.

    An empty device collection never covers anything, including a
    zero-width target.

    Args:
        target: Distance interval that must be covered
        devices: Distance intervals of light-compatible devices, any order

    Returns:
        True if the union covers target with no gap

    Raises:
        InvalidIntervalError: If target or any device interval is malformed

    Example:
        >>> covers_distance_range(
        ...     Interval(lo=1, hi=10),
        ...     [Interval(lo=1, hi=5), Interval(lo=4, hi=10)],
        ... )
        True
    """
    return find_distance_gap(target, devices) is None


def find_distance_gap(target: Interval, devices: Iterable[Interval]) -> Interval | None:
    """Return the first (lowest) uncovered stretch of target, or None if covered.

    The gap runs from the furthest point reached by contiguous coverage to
    the start of the next interval (clamped to target.hi). When no interval
    touches target.lo, the gap starts at target.lo; for a zero-width target
    it is the target itself.

    Raises:
        InvalidIntervalError: If target or any device interval is malformed
    """
    check_interval(target)
    intervals = list(devices)
    for interval in intervals:
        check_interval(interval)
    return _distance_sweep(target, intervals)


# ---------------------------------------------------------------------------
# Light Axis
# ---------------------------------------------------------------------------
def light_relevant_devices(
    requirement: Requirement, devices: Iterable[Device]
) -> list[Device]:
    """Drop devices whose light range misses the requirement's light range."""
    return [d for d in devices if d.overlaps_light(requirement.light)]


def light_boundaries(
    requirement: Requirement, devices: Iterable[Device]
) -> tuple[float, ...]:
    """Build the ascending, de-duplicated light boundary sequence.

    Contains requirement.light.lo, requirement.light.hi, and every device
    light endpoint strictly between them. The set of devices active by light
    level can only change at these values.

    De-duplication is exact (no tolerance): near-equal floats produce
    near-zero-width segments.
    """
    req_lo, req_hi = requirement.light.lo, requirement.light.hi
    endpoints = np.array(
        [(d.light.lo, d.light.hi) for d in devices], dtype=np.float64
    ).reshape(-1)
    interior = endpoints[(endpoints > req_lo) & (endpoints < req_hi)]
    # np.unique returns sorted values
    boundaries = np.unique(np.concatenate(([req_lo, req_hi], interior)))
    return tuple(float(b) for b in boundaries)


def _midpoint(lower: float, upper: float) -> float:
    # Halve before adding: (lower + upper) overflows to inf near the float max.
    # Clamped because halving subnormals rounds.
    return min(max(lower / 2 + upper / 2, lower), upper)


def light_segments(boundaries: Sequence[float]) -> list[LightSegment]:
    """Pair adjacent boundaries into segments sampled at their midpoint."""
    return [
        LightSegment(lower=lower, upper=upper, midpoint=_midpoint(lower, upper))
        for lower, upper in zip(boundaries, boundaries[1:])
    ]


def _point_segment(light_level: float) -> LightSegment:
    return LightSegment(lower=light_level, upper=light_level, midpoint=light_level)


def active_devices(devices: Sequence[Device], light_level: float) -> list[Device]:
    """Select devices whose light range contains light_level (inclusive).

    Returns devices in input order.
    """
    if not devices:
        return []
    n = len(devices)
    light_lo = np.fromiter((d.light.lo for d in devices), dtype=np.float64, count=n)
    light_hi = np.fromiter((d.light.hi for d in devices), dtype=np.float64, count=n)
    mask = (light_lo <= light_level) & (light_level <= light_hi)
    return [d for d, active in zip(devices, mask) if active]


def _segments_to_check(
    requirement: Requirement,
    relevant: list[Device],
    degenerate_light: DegenerateLightPolicy,
) -> list[LightSegment]:
    if requirement.light.is_degenerate:
        if degenerate_light is DegenerateLightPolicy.PARITY:
            return []
        return [_point_segment(requirement.light.lo)]

    boundaries = light_boundaries(requirement, relevant)
    logger.debug("Light boundaries: %s", boundaries)
    return light_segments(boundaries)


def _evaluate_segment(
    requirement: Requirement, relevant: list[Device], segment: LightSegment
) -> SegmentCoverage:
    active = active_devices(relevant, segment.midpoint)
    gap = _distance_sweep(requirement.distance, [d.distance for d in active])
    logger.debug(
        "Light segment [%r, %r] @ %r: active=%s gap=%s",
        segment.lower,
        segment.upper,
        segment.midpoint,
        [d.device_id for d in active],
        gap,
    )
    return SegmentCoverage(
        segment=segment,
        active_device_ids=tuple(d.device_id for d in active),
        covered=gap is None,
        gap=gap,
    )


# ---------------------------------------------------------------------------
# Main Services
# ---------------------------------------------------------------------------
def covers_requirement(
    requirement: Requirement,
    devices: Iterable[Device],
    *,
    degenerate_light: DegenerateLightPolicy = DEFAULT_DEGENERATE_LIGHT_POLICY,
) -> bool:
    """Check if devices jointly cover the requirement's distance x light rectangle.

    Steps:
        1. Discard devices whose light range misses the requirement's
        2. Split the requirement's light range at the remaining devices'
           light endpoints
        3. For each segment, check distance coverage by the devices active
           at the segment midpoint; stop at the first failure

    Boundary points are not re-checked: the devices active at a boundary
    are a superset of those active on at least one adjacent segment.

    Args:
        requirement: Required distance and light ranges
        devices: Candidate devices, any order
        degenerate_light: Policy for a zero-width requirement light range

    Returns:
        True if every light segment has full distance coverage

    Raises:
        InvalidIntervalError: If any interval in the input is malformed

    Example:
        >>> req = Requirement(
        ...     distance=Interval(lo=1, hi=10), light=Interval(lo=10, hi=1000)
        ... )
        >>> cams = [
        ...     Device(device_id="cam1", distance=Interval(lo=1, hi=5),
        ...            light=Interval(lo=10, hi=1000)),
        ...     Device(device_id="cam2", distance=Interval(lo=4, hi=10),
        ...            light=Interval(lo=10, hi=1000)),
        ... ]
        >>> covers_requirement(req, cams)
        True
    """
    _check_requirement(requirement)
    relevant = light_relevant_devices(requirement, _check_devices(devices))

    if not relevant:
        logger.debug("No device operates within light range %s", requirement.light)
        return False

    for segment in _segments_to_check(requirement, relevant, degenerate_light):
        if not _evaluate_segment(requirement, relevant, segment).covered:
            return False

    return True


def coverage_report(
    requirement: Requirement,
    devices: Iterable[Device],
    *,
    degenerate_light: DegenerateLightPolicy = DEFAULT_DEGENERATE_LIGHT_POLICY,
) -> CoverageReport:
    """Evaluate every light segment and explain the coverage decision.

    Same decision as covers_requirement (``report.covered`` always agrees
    with it), but without short-circuiting, so all failing segments and
    their first distance gap are reported.

    Raises:
        InvalidIntervalError: If any interval in the input is malformed
    """
    _check_requirement(requirement)
    relevant = light_relevant_devices(requirement, _check_devices(devices))
    relevant_ids = tuple(d.device_id for d in relevant)

    if not relevant:
        logger.debug("No device operates within light range %s", requirement.light)
        return CoverageReport(
            requirement=requirement, relevant_device_ids=relevant_ids, segments=()
        )

    results: list[SegmentCoverage] = []
    for segment in _segments_to_check(requirement, relevant, degenerate_light):
        result = _evaluate_segment(requirement, relevant, segment)
        if not result.covered:
            logger.info(
                "Coverage gap %s at light [%r, %r] (active: %s)",
                result.gap,
                segment.lower,
                segment.upper,
                ", ".join(result.active_device_ids) or "none",
            )
        results.append(result)

    return CoverageReport(
        requirement=requirement,
        relevant_device_ids=relevant_ids,
        segments=tuple(results),
    )
