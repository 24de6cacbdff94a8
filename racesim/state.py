"""Vehicle state, control input and wheel information records."""

from __future__ import annotations

from dataclasses import dataclass, fields


@dataclass
class State:
    """Position, orientation, velocities, rotation rates and accelerations."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    yaw: float = 0.0
    v_x: float = 0.0
    v_y: float = 0.0
    v_z: float = 0.0
    r_x: float = 0.0
    r_y: float = 0.0
    r_z: float = 0.0
    a_x: float = 0.0
    a_y: float = 0.0
    a_z: float = 0.0

    def __mul__(self, dt: float) -> State:
        return State(*(getattr(self, f.name) * dt for f in fields(self)))

    __rmul__ = __mul__

    def __add__(self, other: State) -> State:
        if not isinstance(other, State):
            return NotImplemented
        return State(
            *(getattr(self, f.name) + getattr(other, f.name) for f in fields(self))
        )

    def __str__(self) -> str:
        return " | ".join(f"{f.name}:{getattr(self, f.name):f}" for f in fields(self))


@dataclass
class Input:
    """Control input: acceleration, velocity and steering angle."""

    acc: float = 0.0
    vel: float = 0.0
    delta: float = 0.0

    def __str__(self) -> str:
        return f"acc: {self.acc:f} | vel: {self.vel:f} | delta: {self.delta:f}"


@dataclass
class WheelsInfo:
    """Speeds of the four wheels and the steering angle."""

    lf_speed: float = 0.0
    rf_speed: float = 0.0
    lb_speed: float = 0.0
    rb_speed: float = 0.0
    steering: float = 0.0

    def __str__(self) -> str:
        return (
            f"LF: {self.lf_speed:f} | RF: {self.rf_speed:f} | "
            f"LB: {self.lb_speed:f} | RB: {self.rb_speed:f} | "
            f"Steering: {self.steering:f}"
        )