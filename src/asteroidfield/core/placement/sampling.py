"""Spherical-shell placement sampling and minimum-separation checks.

All functions are pure: every random draw comes from the ``rng`` argument.

Usage:
    rng = random.Random(3)
    candidate = generate_sphere_position(observer, 100.0, 500.0, rng)
    if is_valid_placement(candidate, live_positions, 35.0):
        ...
"""

from __future__ import annotations

import math
import random
from collections.abc import Iterable

from asteroidfield.core.vector import Vec3

SEGMENT_JITTER_FRACTION = 0.8
"""Share of a segment's angular width used for azimuth jitter in bulk placement."""

_TWO_PI = 2.0 * math.pi


def _check_shell(r_min: float, r_max: float) -> None:
    if r_min < 0.0 or r_max < r_min:
        raise ValueError(f"Invalid shell radii: r_min={r_min}, r_max={r_max}")


def sample_shell_radius(r_min: float, r_max: float, rng: random.Random) -> float:
    """Radius with density proportional to r^2 inside [r_min, r_max].

    Drawing r^3 uniformly and taking the cube root keeps the density even
    across the shell's volume instead of piling points toward the inner
    surface.
    """
    _check_shell(r_min, r_max)
    cubed = rng.uniform(r_min**3, r_max**3)
    return min(max(cubed ** (1.0 / 3.0), r_min), r_max)


def spherical_direction(polar: float, azimuth: float) -> Vec3:
    """Unit vector from polar angle (from +Y) and azimuth (around Y)."""
    sin_polar = math.sin(polar)
    return Vec3(
        sin_polar * math.cos(azimuth),
        math.cos(polar),
        sin_polar * math.sin(azimuth),
    )


def sample_polar_angle(rng: random.Random) -> float:
    """Polar angle uniform over the sphere's surface (not uniform in angle)."""
    return math.acos(rng.uniform(-1.0, 1.0))


def generate_sphere_position(
    center: Vec3, r_min: float, r_max: float, rng: random.Random
) -> Vec3:
    """Volume-uniform point in the spherical shell around ``center``."""
    distance = sample_shell_radius(r_min, r_max, rng)
    direction = spherical_direction(sample_polar_angle(rng), rng.uniform(0.0, _TWO_PI))
    return center + direction * distance


def generate_distributed_position(
    segment_index: int,
    segment_count: int,
    center: Vec3,
    r_min: float,
    r_max: float,
    rng: random.Random,
) -> Vec3:
    """Shell point whose azimuth falls inside one of ``segment_count`` wedges.

    The azimuth is centred on the segment's base angle and jittered across
    80% of the segment width, so a sweep over all segments covers the full
    circle for the first population burst.
    """
    if segment_count < 1:
        raise ValueError(f"segment_count must be >= 1, got {segment_count}")
    width = _TWO_PI / segment_count
    base = segment_index * width
    half_jitter = width * SEGMENT_JITTER_FRACTION / 2.0
    azimuth = base + rng.uniform(-half_jitter, half_jitter)

    distance = sample_shell_radius(r_min, r_max, rng)
    direction = spherical_direction(sample_polar_angle(rng), azimuth)
    return center + direction * distance


def is_valid_placement(
    candidate: Vec3, positions: Iterable[Vec3], min_separation: float
) -> bool:
    """True iff ``candidate`` is at least ``min_separation`` from every position."""
    min_sq = min_separation * min_separation
    for position in positions:
        if candidate.distance_squared_to(position) < min_sq:
            return False
    return True


def _perpendicular_basis(direction: Vec3) -> tuple[Vec3, Vec3]:
    helper = Vec3(0.0, 1.0, 0.0) if abs(direction.y) < 0.9 else Vec3(1.0, 0.0, 0.0)
    u = direction.cross(helper).normalized()
    v = direction.cross(u)
    return u, v


def jitter_direction(
    direction: Vec3, max_angle_degrees: float, rng: random.Random
) -> Vec3:
    """Unit vector tilted from ``direction`` by at most ``max_angle_degrees``.

    Tilt angle is uniform in [0, max], the tilt heading uniform around the
    axis. A zero direction yields +Z.
    """
    axis = direction.normalized(fallback=Vec3(0.0, 0.0, 1.0))
    if max_angle_degrees <= 0.0:
        return axis

    tilt = math.radians(rng.uniform(0.0, max_angle_degrees))
    heading = rng.uniform(0.0, _TWO_PI)
    u, v = _perpendicular_basis(axis)
    offset = u * math.cos(heading) + v * math.sin(heading)
    return (axis * math.cos(tilt) + offset * math.sin(tilt)).normalized(fallback=axis)


def antipodal_position(
    center: Vec3,
    relative: Vec3,
    rng: random.Random,
    *,
    max_angle_degrees: float,
    distance_variation: float,
    r_min: float,
    r_max: float,
) -> Vec3:
    """Placement mirrored through ``center`` from the lost ``relative`` offset.

    The mirrored direction is jittered inside a cone and the distance is
    perturbed by up to +/- ``distance_variation``, then clamped into
    [r_min, r_max].
    """
    _check_shell(r_min, r_max)
    opposite = -relative
    direction = jitter_direction(opposite, max_angle_degrees, rng)
    distance = opposite.length() + rng.uniform(-distance_variation, distance_variation)
    distance = min(max(distance, r_min), r_max)
    return center + direction * distance
