"""Tests for shell sampling and placement validation.

Critical Invariants:
- Sampled distances stay inside [r_min, r_max]
- Radius density is proportional to r^2 (volume-uniform), not uniform in r
- Directions are uniform over the sphere (no pole clustering)
- Separation uses a strict minimum, inclusive at the boundary
"""

import math

import pytest

from asteroidfield.core.placement import (
    antipodal_position,
    generate_distributed_position,
    generate_sphere_position,
    is_valid_placement,
    jitter_direction,
    sample_shell_radius,
)
from asteroidfield.core.vector import Vec3

EPS = 1e-6


@pytest.fixture
def center():
    return Vec3(1000.0, -250.0, 40.0)


def test_sphere_position_stays_in_shell(rng, center):
    for _ in range(2000):
        point = generate_sphere_position(center, 100.0, 500.0, rng)
        distance = math.sqrt(point.distance_squared_to(center))
        assert 100.0 - EPS <= distance <= 500.0 + EPS


def test_radius_histogram_proportional_to_r_squared(rng):
    """CRITICAL: 10k samples over [100, 300] follow the shell-volume CDF.

    Why: Sampling r uniformly would crowd the inner shell with rocks.
    """
    samples = 10_000
    r_min, r_max = 100.0, 300.0
    radii = [
        generate_sphere_position(Vec3.zero(), r_min, r_max, rng).length() for _ in range(samples)
    ]

    edges = [100.0, 150.0, 200.0, 250.0, 300.0]
    volume = r_max**3 - r_min**3
    for low, high in zip(edges, edges[1:]):
        observed = sum(1 for r in radii if low <= r < high) / samples
        expected = (high**3 - low**3) / volume
        assert abs(observed - expected) < 0.02, (low, high, observed, expected)

    # Uniform-in-r would put half the samples below 200
    below_mid = sum(1 for r in radii if r < 200.0) / samples
    assert below_mid < 0.35

    mean = sum(radii) / samples
    expected_mean = 0.75 * (r_max**4 - r_min**4) / (r_max**3 - r_min**3)
    assert mean == pytest.approx(expected_mean, rel=0.01)


def test_directions_uniform_over_sphere(rng):
    """Vertical component is uniform in [-1, 1] for a uniform sphere."""
    samples = 10_000
    heights = [
        generate_sphere_position(Vec3.zero(), 1.0, 1.0, rng).y for _ in range(samples)
    ]

    polar_cap = sum(1 for h in heights if h > 0.9) / samples
    equator_band = sum(1 for h in heights if -0.1 < h < 0.1) / samples
    assert polar_cap == pytest.approx(0.05, abs=0.01)
    assert equator_band == pytest.approx(0.10, abs=0.015)


def test_degenerate_shell_returns_fixed_distance(rng):
    point = generate_sphere_position(Vec3.zero(), 250.0, 250.0, rng)
    assert point.length() == pytest.approx(250.0)


def test_invalid_shell_rejected(rng):
    with pytest.raises(ValueError):
        sample_shell_radius(300.0, 100.0, rng)
    with pytest.raises(ValueError):
        sample_shell_radius(-1.0, 100.0, rng)


# Separation


def test_is_valid_placement_uses_minimum_separation():
    live = [Vec3(0.0, 0.0, 0.0), Vec3(100.0, 0.0, 0.0)]

    assert is_valid_placement(Vec3(50.0, 0.0, 0.0), live, 35.0)
    assert not is_valid_placement(Vec3(20.0, 0.0, 0.0), live, 35.0)
    assert not is_valid_placement(Vec3(90.0, 0.0, 0.0), live, 35.0)


def test_exact_separation_distance_is_allowed():
    assert is_valid_placement(Vec3(35.0, 0.0, 0.0), [Vec3.zero()], 35.0)


def test_empty_live_set_always_valid():
    assert is_valid_placement(Vec3.zero(), [], 35.0)


# Segmented bulk sampling


def test_distributed_position_stays_in_segment(rng, center):
    segment_count = 8
    width = 2 * math.pi / segment_count
    for segment in range(segment_count):
        for _ in range(50):
            point = generate_distributed_position(segment, segment_count, center, 100.0, 500.0, rng)
            offset = point - center
            distance = offset.length()
            assert 100.0 - EPS <= distance <= 500.0 + EPS

            azimuth = math.atan2(offset.z, offset.x)
            base = segment * width
            delta = (azimuth - base + math.pi) % (2 * math.pi) - math.pi
            assert abs(delta) <= width * 0.4 + EPS


def test_distributed_position_requires_segments(rng):
    with pytest.raises(ValueError):
        generate_distributed_position(0, 0, Vec3.zero(), 100.0, 200.0, rng)


# Cone jitter and antipodal placement


def test_jitter_direction_stays_in_cone(rng):
    axis = Vec3(0.3, -0.5, 0.8).normalized()
    max_cos = math.cos(math.radians(10.0))
    for _ in range(500):
        direction = jitter_direction(axis, 10.0, rng)
        assert direction.length() == pytest.approx(1.0)
        assert direction.dot(axis) >= max_cos - EPS


def test_jitter_handles_vertical_axis(rng):
    direction = jitter_direction(Vec3(0.0, 5.0, 0.0), 5.0, rng)
    assert direction.dot(Vec3(0.0, 1.0, 0.0)) >= math.cos(math.radians(5.0)) - EPS


def test_zero_angle_returns_axis(rng):
    assert jitter_direction(Vec3(0.0, 0.0, 2.0), 0.0, rng) == Vec3(0.0, 0.0, 1.0)


def test_antipodal_position_lands_on_opposite_side(rng, center):
    lost = Vec3(300.0, 0.0, 0.0)
    for _ in range(200):
        point = antipodal_position(
            center,
            lost,
            rng,
            max_angle_degrees=10.0,
            distance_variation=50.0,
            r_min=100.0,
            r_max=500.0,
        )
        offset = point - center
        assert offset.normalized().dot(Vec3(-1.0, 0.0, 0.0)) >= math.cos(math.radians(10.0)) - EPS
        assert 250.0 - EPS <= offset.length() <= 350.0 + EPS


def test_antipodal_distance_is_clamped_into_shell(rng):
    far = antipodal_position(
        Vec3.zero(),
        Vec3(0.0, 0.0, 900.0),
        rng,
        max_angle_degrees=0.0,
        distance_variation=0.0,
        r_min=100.0,
        r_max=500.0,
    )
    near = antipodal_position(
        Vec3.zero(),
        Vec3(0.0, 0.0, 10.0),
        rng,
        max_angle_degrees=0.0,
        distance_variation=0.0,
        r_min=100.0,
        r_max=500.0,
    )

    assert far.as_tuple() == pytest.approx((0.0, 0.0, -500.0))
    assert near.as_tuple() == pytest.approx((0.0, 0.0, -100.0))
