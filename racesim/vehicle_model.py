"""Base vehicle model: input and state validation, slip angles and wheel speeds."""

from __future__ import annotations

import math
import os
from dataclasses import replace

from racesim.params import VehicleParam, load_vehicle_params
from racesim.state import Input, State, WheelsInfo


def _ieee_div(num: float, den: float) -> float:
    """Divide like floating-point hardware: a zero divisor yields inf or nan."""
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


class VehicleModel:
    """A vehicle described by its physical parameters.

    The base model does not move the vehicle; subclasses override
    :meth:`update_state`.
    """

    def __init__(self, param: VehicleParam) -> None:
        self.param = param

    @classmethod
    def from_yaml(cls, path: str | os.PathLike[str]) -> VehicleModel:
        """Create a model from a YAML parameter file."""
        return cls(load_vehicle_params(path))

    def update_state(self, state: State, input_: Input, dt: float) -> State:
        """Return the state after ``dt`` seconds; the base model leaves it as is."""
        return state

    def validate_state(self, state: State) -> State:
        """Return the state with a non-negative longitudinal velocity."""
        return replace(state, v_x=max(0.0, state.v_x))

    def validate_input(self, input_: Input) -> Input:
        """Return the input clamped to the ranges allowed by the parameters."""
        ranges = self.param.input_ranges
        return Input(
            acc=_clamp(input_.acc, ranges.acc.min, ranges.acc.max),
            vel=_clamp(input_.vel, ranges.vel.min, ranges.vel.max),
            delta=_clamp(input_.delta, ranges.delta.min, ranges.delta.max),
        )

    def slip_angle(self, state: State, input_: Input, front: bool) -> float:
        """Slip angle in radians of the front or rear axle."""
        kin = self.param.kinematic
        lever_arm = kin.l * kin.w_front
        v_x = max(1.0, state.v_x)
        denominator = v_x - 0.5 * kin.axle_width * state.r_z
        if front:
            numerator = state.v_y + lever_arm * state.r_z
            return math.atan(_ieee_div(numerator, denominator)) - input_.delta
        numerator = state.v_y - lever_arm * state.r_z
        return math.atan(_ieee_div(numerator, denominator))

    def wheel_speeds(self, state: State, input_: Input) -> WheelsInfo:
        """Wheel speeds in RPM, all four equal, with the steering angle."""
        circumference = 2.0 * math.pi * self.param.tire.radius
        rpm = _ieee_div(state.v_x, circumference) * 60.0
        return WheelsInfo(rpm, rpm, rpm, rpm, input_.delta)