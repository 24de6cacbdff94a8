"""Cone placement and checkpoint generation along a generated path."""

from __future__ import annotations

import bisect
import math
from collections.abc import Sequence
from dataclasses import dataclass, field

from racesim.geometry import Transform, Vector3
from racesim.path import PathConfig, PathResult, _ieee_div


class TrackGenerationError(RuntimeError):
    """Raised when a path cannot be turned into a usable track."""


@dataclass
class TrackResult:
    """Cone and checkpoint transforms of a generated track."""

    left_cones: list[Transform] = field(default_factory=list)
    right_cones: list[Transform] = field(default_factory=list)
    checkpoints: list[Transform] = field(default_factory=list)


def _c_round(value: float) -> int:
    """Round half away from zero."""
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


def _to_vector3(point: complex) -> Vector3:
    return Vector3(point.real, 0.0, point.imag)


def resample_boundary(points: Sequence[complex], n_resample: int) -> list[complex]:
    """Resample a polyline to ``n_resample`` points equally spaced by arc length.

    Raises ``ValueError`` when fewer than two points are given or
    ``n_resample`` is below one.
    """
    pts = list(points)
    if len(pts) < 2 or n_resample < 1:
        raise ValueError("need at least two points and one sample")

    cumulative = [0.0]
    for a, b in zip(pts, pts[1:]):
        cumulative.append(cumulative[-1] + abs(b - a))
    total_length = cumulative[-1]
    last_segment = len(pts) - 2

    resampled = []
    for j in range(n_resample):
        target = 0.0 if n_resample == 1 else j * total_length / (n_resample - 1)
        i = min(bisect.bisect_left(cumulative, target, 1) - 1, last_segment)
        segment_length = cumulative[i + 1] - cumulative[i]
        fraction = (target - cumulative[i]) / segment_length if segment_length > 0 else 0.0
        resampled.append(pts[i] + fraction * (pts[i + 1] - pts[i]))
    return resampled


def place_cones(
    points: Sequence[complex],
    radii: Sequence[float],
    side: int,
    config: PathConfig,
) -> list[complex]:
    """Choose cone positions among ``points`` by a curvature-dependent density.

    ``side`` is 1 for the left boundary and -1 for the right one. The first
    point is always selected; the result keeps the order of ``points``.
    """
    pts = list(points)
    radii = list(radii)
    if not pts:
        raise ValueError("no points to place cones on")
    if len(radii) != len(pts):
        raise ValueError("points and radii differ in length")

    min_density = 1.0 / config.max_cone_spacing + 0.1
    max_density = 1.0 / config.min_cone_spacing
    density_range = max_density - min_density
    bias = config.cone_spacing_bias
    half_width = config.track_width / 2.0
    c1 = density_range / 2.0 * (
        (1 - bias) * config.min_corner_radius - (1 + bias) * half_width
    )
    c2 = density_range / 2.0 * (
        (1 + bias) * config.min_corner_radius - (1 - bias) * half_width
    )

    dist_to_next = [abs(b - a) for a, b in zip(pts, pts[1:] + pts[:1])]
    # Each point is weighted by the length of the segment that follows its successor.
    segment_weights = dist_to_next[1:] + dist_to_next[:1]

    density = [
        (min_density + _ieee_div(side * c1, r) + _ieee_div(c2, abs(r))) * weight
        for r, weight in zip(radii, segment_weights)
    ]

    modified_length = sum(density)
    if not math.isfinite(modified_length):
        raise TrackGenerationError("cone density along the boundary is not finite")
    rounded = _c_round(modified_length)
    threshold = modified_length / rounded if rounded != 0 else 1.0

    selected = [pts[0]]
    current = 0.0
    for point, d in zip(pts[1:], density[1:]):
        current += d
        if current >= threshold:
            current -= threshold
            selected.append(point)
    return selected


def generate_track(config: PathConfig, path: PathResult) -> TrackResult:
    """Place cones on both sides of ``path`` and checkpoints between them.

    Both boundaries are resampled to the smaller cone count; checkpoints are
    the midpoints of matching left and right cones, their yaw pointing from
    left to right. Raises ``TrackGenerationError`` when a side has fewer than
    two cones.
    """
    half_width = config.track_width / 2.0
    left_points = [p + n * half_width for p, n in zip(path.points, path.normals)]
    right_points = [p - n * half_width for p, n in zip(path.points, path.normals)]
    left_radii = [r - half_width for r in path.corner_radii]
    right_radii = [r + half_width for r in path.corner_radii]

    left_cones = place_cones(left_points, left_radii, 1, config)
    right_cones = place_cones(right_points, right_radii, -1, config)

    n_resample = min(len(left_cones), len(right_cones))
    if n_resample < 2:
        raise TrackGenerationError(
            "Not enough cones on one side to compute a racing line."
        )

    left = resample_boundary(left_cones, n_resample)
    right = resample_boundary(right_cones, n_resample)

    checkpoints = []
    for lp, rp in zip(left, right):
        mid = (lp + rp) / 2.0
        delta = rp - lp
        checkpoints.append(
            Transform(_to_vector3(mid), math.atan2(delta.imag, delta.real))
        )

    return TrackResult(
        left_cones=[Transform(_to_vector3(p), 0.0) for p in left],
        right_cones=[Transform(_to_vector3(p), 0.0) for p in right],
        checkpoints=checkpoints,
    )