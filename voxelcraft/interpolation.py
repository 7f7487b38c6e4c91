"""Interpolation helpers used for terrain heights."""

from __future__ import annotations


def smoothstep(edge0: float, edge1: float, x: float) -> float:
    """Blend from ``edge1`` at x=0 to ``edge0`` at x=1 along a cubic curve."""
    x = x * x * (3 - 2 * x)
    return edge0 * x + edge1 * (1 - x)


def clamp(x: float, lower: float, upper: float) -> float:
    if x < lower:
        x = lower
    if x > upper:
        x = upper
    return x


def smooth_interpolation(
    bottom_left: float,
    top_left: float,
    bottom_right: float,
    top_right: float,
    x_min: float,
    x_max: float,
    z_min: float,
    z_max: float,
    x: float,
    z: float,
) -> float:
    width = x_max - x_min
    height = z_max - z_min
    x_value = 1 - (x - x_min) / width
    z_value = 1 - (z - z_min) / height
    a = smoothstep(bottom_left, bottom_right, x_value)
    b = smoothstep(top_left, top_right, x_value)
    return smoothstep(a, b, z_value)


def bilinear_interpolation(
    bottom_left: float,
    top_left: float,
    bottom_right: float,
    top_right: float,
    x_min: float,
    x_max: float,
    z_min: float,
    z_max: float,
    x: float,
    z: float,
) -> float:
    width = x_max - x_min
    height = z_max - z_min
    x_to_max = x_max - x
    z_to_max = z_max - z
    x_to_min = x - x_min
    z_to_min = z - z_min
    return (
        1.0
        / (width * height)
        * (
            bottom_left * x_to_max * z_to_max
            + bottom_right * x_to_min * z_to_max
            + top_left * x_to_max * z_to_min
            + top_right * x_to_min * z_to_min
        )
    )