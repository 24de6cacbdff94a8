"""Dynamic bicycle vehicle model with a low-speed kinematic correction."""

from __future__ import annotations

import math
from dataclasses import replace

from racesim.state import Input, State
from racesim.vehicle_model import VehicleModel, _ieee_div


def calculate_magnitude(x_component: float, y_component: float) -> float:
    """Euclidean norm of a two-dimensional vector."""
    return math.sqrt(x_component * x_component + y_component * y_component)


class DynamicBicycle(VehicleModel):
    """Single-track vehicle model with Pacejka-style lateral tire forces."""

    def update_state(self, state: State, input_: Input, dt: float) -> State:
        """Advance the state by ``dt`` seconds and return the new state."""
        u = self.validate_input(input_)
        fz = self._normal_force(state)
        fy_front = self._lateral_force(fz, True, self.slip_angle(state, u, True))
        fy_rear = self._lateral_force(fz, False, self.slip_angle(state, u, False))
        fx = self._longitudinal_force(state, u)

        x_dot = self._derivative(state, u, fx, fy_front, fy_rear)
        x_next = state + x_dot * dt
        corrected = self._kinematic_correction(x_next, state, u, fx, dt)
        corrected = replace(corrected, a_x=x_dot.v_x, a_y=x_dot.v_y)
        return self.validate_state(corrected)

    def _derivative(
        self, x: State, u: Input, fx: float, fy_front: float, fy_rear: float
    ) -> State:
        inertia = self.param.inertia
        kin = self.param.kinematic
        fy_front_total = 2.0 * fy_front
        fy_rear_total = 2.0 * fy_rear
        cos_yaw, sin_yaw = math.cos(x.yaw), math.sin(x.yaw)
        return State(
            x=cos_yaw * x.v_x - sin_yaw * x.v_y,
            y=sin_yaw * x.v_x + cos_yaw * x.v_y,
            yaw=x.r_z,
            v_x=x.r_z * x.v_y
            + _ieee_div(fx - math.sin(u.delta) * fy_front_total, inertia.m),
            v_y=_ieee_div(math.cos(u.delta) * fy_front_total + fy_rear_total, inertia.m)
            - x.r_z * x.v_x,
            r_z=_ieee_div(
                math.cos(u.delta) * fy_front_total * kin.l_F - fy_rear_total * kin.l_R,
                inertia.I_z,
            ),
        )

    def _kinematic_correction(
        self, x: State, previous: State, u: Input, fx: float, dt: float
    ) -> State:
        kin = self.param.kinematic
        v_x_dot = _ieee_div(fx, self.param.inertia.m)
        speed = calculate_magnitude(previous.v_x, previous.v_y)
        blend = min(1.0, max(0.0, 0.5 * (speed - 1.5)))

        v_x = blend * x.v_x + (1.0 - blend) * (previous.v_x + dt * v_x_dot)
        tan_delta = math.tan(u.delta)
        v_y_kin = _ieee_div(tan_delta * v_x * kin.l_R, kin.l)
        r_kin = _ieee_div(tan_delta * v_x, kin.l)
        return replace(
            x,
            v_x=v_x,
            v_y=blend * x.v_y + (1.0 - blend) * v_y_kin,
            r_z=blend * x.r_z + (1.0 - blend) * r_kin,
        )

    def _drag(self, x: State) -> float:
        return self.param.aero.c_drag * x.v_x * x.v_x

    def _downforce(self, x: State) -> float:
        return self.param.aero.c_down * x.v_x * x.v_x

    def _normal_force(self, x: State) -> float:
        inertia = self.param.inertia
        return inertia.g * inertia.m + self._downforce(x)

    def _longitudinal_force(self, x: State, u: Input) -> float:
        acc = 0.0 if (x.v_x <= 0.0 and u.acc < 0.0) else u.acc
        return acc * self.param.inertia.m - self._drag(x)

    def _lateral_force(self, fz: float, front: bool, slip_angle: float) -> float:
        w_front = self.param.kinematic.w_front
        fz_axle = 0.5 * (w_front if front else 1.0 - w_front) * fz
        tire = self.param.tire
        mu_y = tire.D * math.sin(
            tire.C
            * math.atan(
                tire.B * (1.0 - tire.E) * slip_angle
                + tire.E * math.atan(tire.B * slip_angle)
            )
        )
        return fz_axle * mu_y