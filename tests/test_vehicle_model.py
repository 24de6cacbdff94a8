import math

import pytest

from racesim.params import InputRanges, Range, VehicleParam
from racesim.state import Input, State
from racesim.vehicle_model import VehicleModel


@pytest.fixture
def model():
    param = VehicleParam()
    param.input_ranges = InputRanges(
        acc=Range(-5.0, 5.0), vel=Range(0.0, 20.0), delta=Range(-0.4, 0.4)
    )
    param.kinematic.l = 1.5
    param.kinematic.w_front = 0.5
    param.kinematic.axle_width = 1.2
    param.tire.radius = 0.25
    return VehicleModel(param)


def test_validate_state_clamps_negative_velocity(model):
    result = model.validate_state(State(x=3.0, v_x=-2.0))
    assert result.v_x == 0.0
    assert result.x == 3.0


def test_validate_state_keeps_positive_velocity(model):
    assert model.validate_state(State(v_x=7.5)).v_x == 7.5


def test_validate_input_clamps_to_ranges(model):
    result = model.validate_input(Input(acc=9.0, vel=-3.0, delta=-1.0))
    assert result == Input(acc=5.0, vel=0.0, delta=-0.4)


def test_validate_input_keeps_values_inside(model):
    inside = Input(acc=1.0, vel=10.0, delta=0.1)
    assert model.validate_input(inside) == inside


def test_validate_input_with_default_params_is_zero():
    result = VehicleModel(VehicleParam()).validate_input(Input(2.0, 3.0, 0.5))
    assert result == Input(0.0, 0.0, 0.0)


def test_rear_slip_angle_zero_at_rest(model):
    assert model.slip_angle(State(), Input(delta=0.3), False) == 0.0


def test_front_slip_angle_subtracts_steering(model):
    assert model.slip_angle(State(), Input(delta=0.2), True) == pytest.approx(-0.2)


def test_slip_angle_uses_at_least_unit_velocity(model):
    slow = model.slip_angle(State(v_x=0.5, v_y=1.0), Input(), False)
    unit = model.slip_angle(State(v_x=1.0, v_y=1.0), Input(), False)
    assert slow == unit
    assert unit == pytest.approx(math.pi / 4)


def test_slip_angles_symmetric_in_lateral_velocity(model):
    left = model.slip_angle(State(v_x=5.0, v_y=0.7), Input(), True)
    right = model.slip_angle(State(v_x=5.0, v_y=-0.7), Input(), True)
    assert left == pytest.approx(-right)


def test_wheel_speeds_one_revolution_per_second(model):
    state = State(v_x=2.0 * math.pi * 0.25)
    wheels = model.wheel_speeds(state, Input(delta=0.3))
    assert wheels.lf_speed == pytest.approx(60.0)
    assert wheels.lf_speed == wheels.rf_speed == wheels.lb_speed == wheels.rb_speed
    assert wheels.steering == 0.3


def test_wheel_speeds_zero_radius_is_infinite():
    wheels = VehicleModel(VehicleParam()).wheel_speeds(State(v_x=1.0), Input())
    assert wheels.lf_speed == math.inf
    assert wheels.rb_speed == math.inf


def test_base_update_state_leaves_state(model):
    state = State(x=1.0, v_x=2.0)
    assert model.update_state(state, Input(acc=1.0), 0.1) == State(x=1.0, v_x=2.0)


def test_from_yaml_loads_params(tmp_path):
    path = tmp_path / "vehicle.yaml"
    path.write_text("inertia:\n  m: 200.0\nkinematics:\n  l: 1.5\n", encoding="utf-8")
    loaded = VehicleModel.from_yaml(path)
    assert loaded.param.inertia.m == 200.0
    assert loaded.param.kinematic.l == 1.5