"""Random closed race paths built from wave perturbations of a circle."""

from __future__ import annotations

import cmath
import math
import random
from dataclasses import dataclass, field


def _ieee_div(num: float, den: float) -> float:
    if den != 0:
        return num / den
    if num == 0 or math.isnan(num):
        return math.nan
    return math.copysign(math.inf, num) * math.copysign(1.0, den)


@dataclass
class PathConfig:
    """Parameters of track generation; ``resolution`` and ``length`` are derived."""

    seed: float = 0.0
    min_corner_radius: float = 3.0
    max_frequency: int = 6
    amplitude: float = 1.0 / 3.0
    check_self_intersection: bool = True
    starting_amplitude: float = 0.4
    relative_accuracy: float = 0.005
    margin: float = 0.0
    starting_straight_length: float = 6.0
    starting_straight_downsample: int = 2
    min_cone_spacing: float = 3.0 * math.pi / 16.0
    max_cone_spacing: float = 0.6
    track_width: float = 5.0
    cone_spacing_bias: float = 1.0
    starting_cone_spacing: float = 2.5
    resolution: int = field(default=0, init=False)
    length: float = field(default=0.0, init=False)

    def __post_init__(self) -> None:
        self.calculate_resolution_and_length()

    def calculate_resolution_and_length(self) -> None:
        """Recompute the track length estimate and the sampling resolution."""
        t = self.amplitude * self.max_frequency
        length = ((0.6387 * t + 43.86) * t + 123.1) * t + 35.9
        self.length = length
        r = math.log2(length) / self.min_corner_radius
        self.resolution = int(
            4 * length * max(1 / self.min_cone_spacing, r / self.max_cone_spacing)
        )


def default_path_config(rng: random.Random | None = None) -> PathConfig:
    """Return the default configuration with a random seed in [0, 1)."""
    source = rng if rng is not None else random
    return PathConfig(seed=source.random())


@dataclass
class PathResult:
    """Sampled path: points and unit normals as complex x + i*z, and corner radii."""

    points: list[complex]
    normals: list[complex]
    corner_radii: list[float]

    @property
    def n_points(self) -> int:
        return len(self.points)


def _corner_radii(dt: float, derivative: list[complex]) -> list[float]:
    following = derivative[1:] + derivative[:1]
    radii = []
    for d, d_next in zip(derivative, following):
        dd = (d_next - d) / dt
        denom = (d.conjugate() * dd).imag
        radii.append(0.0 if denom == 0 else abs(d) ** 3 / denom)
    return radii


def generate_path(
    config: PathConfig, n_points: int, rng: random.Random | None = None
) -> PathResult:
    """Sample a closed path of ``n_points`` points scaled to the minimum corner radius."""
    if n_points < 1:
        raise ValueError("n_points must be at least 1")
    source = rng if rng is not None else random
    amplitude = config.amplitude

    z = [cmath.exp(1j * 2 * math.pi * t / n_points) for t in range(n_points)]
    waves = [0j] * n_points
    dwaves = [0j] * n_points

    for frequency in range(2, config.max_frequency + 1):
        phase = cmath.exp(1j * source.random() * 2 * math.pi)
        for t, zt in enumerate(z):
            z_pow = zt**frequency
            waves[t] += zt * (
                z_pow / (phase * (frequency + 1)) + phase / (z_pow * (frequency - 1))
            )
            dwaves[t] += z_pow / phase - phase / z_pow

    points = [zt + w * amplitude for zt, w in zip(z, waves)]
    derivative = [1j * zt * (1 + amplitude * dw) for zt, dw in zip(z, dwaves)]
    normals = [1j * d / (abs(d) or 1.0) for d in derivative]

    radii = _corner_radii(2 * math.pi / n_points, derivative)
    min_value = min(abs(r) for r in radii)
    scale = _ieee_div(config.min_corner_radius, min_value)

    return PathResult(
        points=[p * scale for p in points],
        normals=normals,
        corner_radii=[r * scale for r in radii],
    )