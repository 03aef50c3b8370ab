"""Placement functionality: shell sampling and separation checks."""

from asteroidfield.core.placement.sampling import (
    SEGMENT_JITTER_FRACTION,
    antipodal_position,
    generate_distributed_position,
    generate_sphere_position,
    is_valid_placement,
    jitter_direction,
    sample_polar_angle,
    sample_shell_radius,
    spherical_direction,
)

__all__ = [
    "SEGMENT_JITTER_FRACTION",
    "antipodal_position",
    "generate_distributed_position",
    "generate_sphere_position",
    "is_valid_placement",
    "jitter_direction",
    "sample_polar_angle",
    "sample_shell_radius",
    "spherical_direction",
]
