import pytest

from racesim.dynamic_bicycle import DynamicBicycle, calculate_magnitude
from racesim.params import (
    Aero,
    Inertia,
    InputRanges,
    Kinematic,
    Range,
    Tire,
    VehicleParam,
)
from racesim.state import Input, State


@pytest.fixture
def car():
    param = VehicleParam(
        inertia=Inertia(m=200.0, g=9.81, I_z=100.0),
        kinematic=Kinematic(
            l=1.5, w_front=0.5, l_F=0.75, l_R=0.75, axle_width=1.2
        ),
        tire=Tire(tire_coefficient=1.0, B=10.0, C=1.3, D=1.5, E=0.9, radius=0.25),
        aero=Aero(c_down=1.0, c_drag=0.5),
        input_ranges=InputRanges(
            acc=Range(-10.0, 10.0), vel=Range(0.0, 30.0), delta=Range(-0.5, 0.5)
        ),
    )
    return DynamicBicycle(param)


def test_calculate_magnitude():
    assert calculate_magnitude(3.0, 4.0) == pytest.approx(5.0)


def test_rest_with_no_input_stays_at_rest(car):
    result = car.update_state(State(), Input(), 0.05)
    assert result == State()


def test_braking_at_rest_does_not_reverse(car):
    result = car.update_state(State(), Input(acc=-5.0), 0.05)
    assert result.v_x == 0.0
    assert result.x == 0.0


def test_acceleration_from_rest(car):
    result = car.update_state(State(), Input(acc=4.0), 0.05)
    assert result.v_x == pytest.approx(4.0 * 0.05)
    assert result.a_x == pytest.approx(4.0)
    assert result.x == 0.0
    assert result.y == 0.0


def test_input_is_clamped(car):
    result = car.update_state(State(), Input(acc=100.0), 0.05)
    assert result.v_x == pytest.approx(10.0 * 0.05)


def test_straight_acceleration_moves_forward(car):
    state = State()
    speeds = []
    for _ in range(50):
        state = car.update_state(state, Input(acc=5.0), 0.05)
        speeds.append(state.v_x)
    assert all(b > a for a, b in zip(speeds, speeds[1:]))
    assert state.x > 0.0
    assert state.y == pytest.approx(0.0)
    assert state.yaw == pytest.approx(0.0)


def test_low_speed_steering_turns_with_delta(car):
    result = car.update_state(State(), Input(acc=4.0, delta=0.3), 0.05)
    assert result.r_z > 0.0
    assert result.v_y > 0.0


def test_high_speed_steering_is_symmetric(car):
    start = State(v_x=10.0)
    left = car.update_state(start, Input(delta=0.3), 0.01)
    right = car.update_state(start, Input(delta=-0.3), 0.01)
    assert left.r_z == pytest.approx(-right.r_z)
    assert left.v_y == pytest.approx(-right.v_y)
    assert left.r_z != 0.0
    assert left.v_x == pytest.approx(right.v_x)


def test_zero_timestep_keeps_motion(car):
    start = State(x=2.0, y=1.0, yaw=0.4, v_x=10.0)
    result = car.update_state(start, Input(acc=3.0), 0.0)
    assert (result.x, result.y, result.yaw, result.v_x) == (2.0, 1.0, 0.4, 10.0)


def test_velocity_never_negative(car):
    state = State(v_x=0.5)
    for _ in range(30):
        state = car.update_state(state, Input(acc=-10.0), 0.1)
        assert state.v_x >= 0.0