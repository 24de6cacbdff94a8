"""Vehicle parameters and their loading from a YAML description."""

from __future__ import annotations

import enum
import math
import os
import re
from dataclasses import dataclass, field

import yaml


@dataclass
class Range:
    min: float = 0.0
    max: float = 0.0


@dataclass
class Inertia:
    m: float = 0.0
    g: float = 0.0
    I_z: float = 0.0
    C_f: float = 0.0
    C_r: float = 0.0


@dataclass
class Kinematic:
    l: float = 0.0  # noqa: E741
    b_F: float = 0.0
    b_R: float = 0.0
    w_front: float = 0.0
    l_F: float = 0.0
    l_R: float = 0.0
    axle_width: float = 0.0


@dataclass
class Tire:
    tire_coefficient: float = 0.0
    B: float = 0.0
    C: float = 0.0
    D: float = 0.0
    E: float = 0.0
    radius: float = 0.0


@dataclass
class Aero:
    c_down: float = 0.0
    c_drag: float = 0.0


@dataclass
class InputRanges:
    acc: Range = field(default_factory=Range)
    vel: Range = field(default_factory=Range)
    delta: Range = field(default_factory=Range)


@dataclass
class VehicleParam:
    """All physical parameters of a vehicle; every value defaults to zero."""

    inertia: Inertia = field(default_factory=Inertia)
    kinematic: Kinematic = field(default_factory=Kinematic)
    tire: Tire = field(default_factory=Tire)
    aero: Aero = field(default_factory=Aero)
    input_ranges: InputRanges = field(default_factory=InputRanges)


class _Section(enum.Enum):
    NONE = enum.auto()
    INERTIA = enum.auto()
    KINEMATICS = enum.auto()
    TIRE = enum.auto()
    AERO = enum.auto()
    INPUT_RANGES = enum.auto()
    ACCELERATION = enum.auto()
    VELOCITY = enum.auto()
    STEERING = enum.auto()


_TOP_SECTIONS = {
    "inertia": _Section.INERTIA,
    "kinematics": _Section.KINEMATICS,
    "tire": _Section.TIRE,
    "aero": _Section.AERO,
    "input_ranges": _Section.INPUT_RANGES,
}

_RANGE_SECTIONS = {
    "acceleration": _Section.ACCELERATION,
    "velocity": _Section.VELOCITY,
    "steering": _Section.STEERING,
}

_NUMBER = re.compile(
    r"\s*([+-]?(?:(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?|inf(?:inity)?|nan))",
    re.IGNORECASE,
)


def _atof(text: str) -> float:
    """Read the leading number of ``text``; 0.0 when there is none."""
    match = _NUMBER.match(text)
    return float(match.group(1)) if match else 0.0


def _divide(value: float, divisor: float) -> float:
    if divisor != 0:
        return value / divisor
    if value == 0 or math.isnan(value):
        return math.nan
    return math.copysign(math.inf, value) * math.copysign(1.0, divisor)


def _assign(vp: VehicleParam, section: _Section, key: str, raw: str) -> None:
    value = _atof(raw)
    if section is _Section.INERTIA:
        names = {"m": "m", "g": "g", "I_z": "I_z", "Cf": "C_f", "Cr": "C_r"}
        if key in names:
            setattr(vp.inertia, names[key], value)
    elif section is _Section.KINEMATICS:
        if key in ("l", "b_F", "b_R", "w_front", "axle_width"):
            setattr(vp.kinematic, key, value)
    elif section is _Section.TIRE:
        tire = vp.tire
        if key == "tire_coefficient":
            tire.tire_coefficient = value
        elif key == "B":
            tire.B = _divide(value, tire.tire_coefficient)
        elif key == "D":
            tire.D = value * tire.tire_coefficient
        elif key in ("C", "E", "radius"):
            setattr(tire, key, value)
    elif section is _Section.AERO:
        if key == "C_Down":
            vp.aero.c_down = value
        elif key == "C_drag":
            vp.aero.c_drag = value
    elif section in (_Section.ACCELERATION, _Section.VELOCITY, _Section.STEERING):
        target = {
            _Section.ACCELERATION: vp.input_ranges.acc,
            _Section.VELOCITY: vp.input_ranges.vel,
            _Section.STEERING: vp.input_ranges.delta,
        }[section]
        if key in ("min", "max"):
            setattr(target, key, value)


def parse_vehicle_params(text: str) -> VehicleParam:
    """Build a VehicleParam from YAML text.

    Tire ``B`` is divided and ``D`` multiplied by the tire coefficient known
    at the point they are read. Raises ``yaml.YAMLError`` on malformed input.
    """
    vp = VehicleParam()
    section = _Section.NONE
    last_key: str | None = None

    for event in yaml.parse(text):
        if isinstance(event, yaml.ScalarEvent):
            scalar = event.value
            if last_key is None:
                if scalar in _TOP_SECTIONS:
                    section = _TOP_SECTIONS[scalar]
                elif section is _Section.INPUT_RANGES and scalar in _RANGE_SECTIONS:
                    section = _RANGE_SECTIONS[scalar]
                else:
                    last_key = scalar
            else:
                _assign(vp, section, last_key, scalar)
                last_key = None
        elif isinstance(event, yaml.MappingEndEvent):
            if section in (_Section.ACCELERATION, _Section.VELOCITY, _Section.STEERING):
                section = _Section.INPUT_RANGES
        elif isinstance(event, yaml.StreamEndEvent):
            break

    kin = vp.kinematic
    kin.l_F = kin.l * (1.0 - kin.w_front)
    kin.l_R = kin.l * kin.w_front
    return vp


def load_vehicle_params(path: str | os.PathLike[str]) -> VehicleParam:
    """Read vehicle parameters from a YAML file."""
    with open(path, encoding="utf-8") as fh:
        return parse_vehicle_params(fh.read())