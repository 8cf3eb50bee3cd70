"""Pytest configuration for coverage domain tests.

Scenario fixtures reproduce reference camera setups:
- basic: two overlapping cameras over the full light range
- gap: two cameras leaving a 4-6 distance gap
- advanced: three cameras with staggered light ranges
- professional: five lenses against a demanding requirement

All value objects are constructed directly; no I/O is involved.
"""

from __future__ import annotations

import pytest

from domain.coverage.value_objects import Device, Interval, Requirement


def make_device(
    device_id: str,
    distance: tuple[float, float],
    light: tuple[float, float],
) -> Device:
    """Build a Device from (lo, hi) tuples."""
    return Device(
        device_id=device_id,
        distance=Interval(lo=distance[0], hi=distance[1]),
        light=Interval(lo=light[0], hi=light[1]),
    )


def make_requirement(
    distance: tuple[float, float], light: tuple[float, float]
) -> Requirement:
    """Build a Requirement from (lo, hi) tuples."""
    return Requirement(
        distance=Interval(lo=distance[0], hi=distance[1]),
        light=Interval(lo=light[0], hi=light[1]),
    )


@pytest.fixture
def basic_requirement() -> Requirement:
    """Distance 1-10 m, light 10-1000 lux."""
    return make_requirement((1, 10), (10, 1000))


@pytest.fixture
def basic_cameras() -> list[Device]:
    """cam1 and cam2 overlap on distance 4-5."""
    return [
        make_device("cam1", (1, 5), (10, 1000)),
        make_device("cam2", (4, 10), (10, 1000)),
    ]


@pytest.fixture
def gap_cameras() -> list[Device]:
    """cam1 stops at 4, cam2 starts at 6."""
    return [
        make_device("cam1", (1, 4), (10, 1000)),
        make_device("cam2", (6, 10), (10, 1000)),
    ]


@pytest.fixture
def advanced_requirement() -> Requirement:
    """Distance 1-15 m, light 5-2000 lux."""
    return make_requirement((1, 15), (5, 2000))


@pytest.fixture
def advanced_cameras() -> list[Device]:
    """Light boundaries: 5, 100, 500, 800, 1500, 2000."""
    return [
        make_device("lowLightCam", (1, 8), (5, 500)),
        make_device("midRangeCam", (3, 12), (100, 1500)),
        make_device("brightLightCam", (5, 15), (800, 2000)),
    ]


@pytest.fixture
def professional_requirement() -> Requirement:
    """Distance 0.1-100 m, light 1-10000 lux."""
    return make_requirement((0.1, 100), (1, 10000))


@pytest.fixture
def professional_cameras() -> list[Device]:
    """Light boundaries: 1, 5, 10, 20, 50, 100, 5000, 8000, 9000, 10000."""
    return [
        make_device("macroLens", (0.1, 0.5), (50, 5000)),
        make_device("wideAngle", (0.3, 10), (10, 8000)),
        make_device("standardLens", (0.5, 30), (5, 9000)),
        make_device("telephotoLens", (10, 100), (20, 10000)),
        make_device("nightVision", (1, 50), (1, 100)),
    ]
