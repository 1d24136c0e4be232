"""Amoeba silhouette: a closed polar contour around the blob center."""
from __future__ import annotations

import math
from typing import Sequence

from idle_blob.config import BlobAnimationConfig
from idle_blob.state import BlobAnimationState
from idle_frame.types import Vec2

TAU = 2 * math.pi

BLOB_RADIUS_FACTOR = 0.35
RIPPLE_WAVES = 3


def nominal_radius(size: float) -> float:
    return max(size, 0.0) * BLOB_RADIUS_FACTOR


def _interpolated_noise(samples: Sequence[float], position: float) -> float:
    """Cosine interpolation between neighbouring samples, wrapping around."""
    count = len(samples)
    index = int(position)
    frac = position - index
    a = samples[index % count]
    b = samples[(index + 1) % count]
    w = (1.0 - math.cos(math.pi * frac)) * 0.5
    return a + (b - a) * w


def contour_radii(
    size: float, state: BlobAnimationState, config: BlobAnimationConfig,
) -> list[float]:
    """Radius at each of ``lobes * points_per_lobe`` evenly spaced angles.

    Every radius lies within ``max_deviation`` of the nominal radius, so the
    contour stays star-shaped around the center and cannot fold over itself.
    """
    nominal = nominal_radius(size)
    samples = state.noise_samples or [0.0]
    total = config.contour_points
    points_per_sample = total / len(samples)
    radii: list[float] = []

    for i in range(total):
        theta = TAU * i / total
        noise = _interpolated_noise(samples, i / points_per_sample)
        breathing = math.sin(state.breathing_phase) * (0.7 + 0.3 * math.cos(2.0 * theta))
        deviation = (
            config.breathing_amplitude * breathing
            + config.noise_amplitude * noise
            + config.boost_amplitude * state.click_boost
            + config.ripple_amplitude * state.ripple_intensity
            * math.sin(RIPPLE_WAVES * theta - state.ripple_phase)
            - config.pressure_amplitude * state.pressure
        )
        if not math.isfinite(deviation):
            deviation = 0.0
        deviation = min(max(deviation, -config.max_deviation), config.max_deviation)
        radii.append(nominal * (1.0 + deviation))

    return radii


def amoeba_contour(
    size: float,
    state: BlobAnimationState,
    config: BlobAnimationConfig,
    center: Vec2 = (0.0, 0.0),
    rotation_deg: float = 0.0,
) -> list[Vec2]:
    """Contour points, first point repeated at the end."""
    radii = contour_radii(size, state, config)
    total = len(radii)
    offset = math.radians(rotation_deg)
    points = [
        (
            center[0] + r * math.cos(TAU * i / total + offset),
            center[1] + r * math.sin(TAU * i / total + offset),
        )
        for i, r in enumerate(radii)
    ]
    points.append(points[0])
    return points


def svg_path(points: Sequence[Vec2]) -> str:
    if not points:
        return ""
    head, *rest = points
    parts = [f"M {head[0]:.2f} {head[1]:.2f}"]
    parts.extend(f"L {x:.2f} {y:.2f}" for x, y in rest)
    parts.append("Z")
    return " ".join(parts)
