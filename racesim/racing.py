"""Checkpoint-following throttle and steering controller."""

from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import dataclass

from racesim.geometry import Transform, Vector2, Vector3

MAX_SPEED = 30.1964649875


@dataclass
class RacingConfig:
    """Look-ahead sensitivities and acceleration factor of the controller."""

    speed_look_ahead_sensitivity: float = 0.7
    steering_look_ahead_sensitivity: float = 0.1
    acceleration_factor: float = 0.002


def _ieee_div(num: float, den: float) -> float:
    if den != 0:
        return num / den
    if num == 0 or math.isnan(num):
        return math.nan
    return math.copysign(math.inf, num) * math.copysign(1.0, den)


def _clamp(value: float, low: float, high: float) -> float:
    if value < low:
        return low
    if value > high:
        return high
    return value


def _lookahead_target(
    checkpoints: Sequence[Vector3],
    car_velocity: float,
    transform: Transform,
    config: RacingConfig,
    use_speed: bool,
) -> tuple[float, float]:
    """Signed angle in degrees and distance to the look-ahead checkpoint."""
    speed_distance = math.floor(config.speed_look_ahead_sensitivity * car_velocity) + 1
    steering_distance = (
        math.floor(config.steering_look_ahead_sensitivity * car_velocity) + 1
    )
    lookahead_max = min(max(speed_distance, steering_distance), len(checkpoints) - 1)
    wanted = speed_distance if use_speed else steering_distance
    index = max(0, min(wanted, lookahead_max))

    target = checkpoints[index]
    offset = Vector2(target.x - transform.position.x, target.z - transform.position.z)
    forward = Vector2(math.cos(transform.yaw), math.sin(transform.yaw)).normalized()
    return forward.signed_angle(offset.normalized()), offset.magnitude()


def _expected_speed(angle: float, acceleration_factor: float) -> float:
    if abs(angle) < 0.001:
        return MAX_SPEED
    return min(abs(_ieee_div(1.0, acceleration_factor * angle)), MAX_SPEED)


def _throttle(acceleration_needed: float) -> float:
    if acceleration_needed > 0:
        throttle = acceleration_needed / 3.4323432343
    else:
        throttle = acceleration_needed / 10.0
    return _clamp(throttle, -1.0, 1.0)


def _effective_speed(car_velocity: float) -> float:
    return 0.1 if abs(car_velocity) < 0.001 else car_velocity


def throttle_input(
    checkpoints: Sequence[Vector3],
    car_velocity: float,
    transform: Transform,
    config: RacingConfig,
    dt: float,
) -> float:
    """Throttle in [-1, 1] that drives toward the speed the look-ahead corner allows."""
    if not checkpoints:
        return 0.0
    angle, distance = _lookahead_target(
        checkpoints, car_velocity, transform, config, use_speed=True
    )
    expected = _expected_speed(angle, config.acceleration_factor)
    speed = _effective_speed(car_velocity)
    acceleration_needed = _ieee_div(expected - speed, _ieee_div(distance, speed))
    if abs(acceleration_needed) < 0.001:
        acceleration_needed = 1.0
    return _throttle(acceleration_needed)


def steering_input(
    checkpoints: Sequence[Vector3],
    car_velocity: float,
    transform: Transform,
    config: RacingConfig,
    dt: float,
) -> float:
    """Steering in [-1, 1] that turns toward the look-ahead checkpoint."""
    if not checkpoints:
        return 0.0
    angle, distance = _lookahead_target(
        checkpoints, car_velocity, transform, config, use_speed=False
    )
    speed = _effective_speed(car_velocity)
    reaction_time = _ieee_div(distance, speed)
    if abs(reaction_time) < 0.001:
        reaction_time = 0.1
    angle_change_rate = -angle / reaction_time
    updated_angle = angle + angle_change_rate * dt
    return -_clamp(updated_angle / 21.0, -1.0, 1.0)