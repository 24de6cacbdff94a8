from dataclasses import astuple

import pytest

from racesim.state import Input, State, WheelsInfo


def _sample_state():
    return State(1.0, 2.0, 3.0, 0.5, 4.0, 5.0, 6.0, 7.0, 8.0, 9.0, 10.0, 11.0, 12.0)


def test_default_state_is_zero():
    assert astuple(State()) == (0.0,) * 13


def test_multiply_scales_every_field():
    s = _sample_state()
    scaled = s * 2.0
    assert astuple(scaled) == tuple(v * 2.0 for v in astuple(s))


def test_multiply_by_zero_gives_default():
    assert _sample_state() * 0.0 == State()


def test_rmul_matches_mul():
    s = _sample_state()
    assert 0.5 * s == s * 0.5


def test_add_default_is_identity():
    s = _sample_state()
    assert s + State() == s


def test_add_is_fieldwise():
    a = _sample_state()
    b = State(yaw=1.0, v_x=-4.0)
    total = a + b
    assert total.yaw == pytest.approx(a.yaw + 1.0)
    assert total.v_x == pytest.approx(0.0)
    assert total.x == a.x


def test_add_then_subtract_via_negative_scale():
    a = _sample_state()
    b = State(x=0.25, r_z=-3.0, a_z=1.5)
    assert (a + b) + b * -1.0 == a


def test_add_rejects_non_state():
    with pytest.raises(TypeError):
        _sample_state() + 1.0


def test_state_str_format():
    text = str(State(x=1.0, yaw=-0.5))
    assert text.startswith("x:1.000000 | y:0.000000 | z:0.000000 | yaw:-0.500000 | v_x:")
    assert text.endswith("a_z:0.000000")
    assert text.count(" | ") == 12


def test_input_defaults_and_str():
    assert Input() == Input(0.0, 0.0, 0.0)
    assert str(Input(1.0, 0.0, -0.5)) == "acc: 1.000000 | vel: 0.000000 | delta: -0.500000"


def test_wheels_info_str():
    info = WheelsInfo(1.0, 2.0, 3.0, 4.0, 0.5)
    assert str(info) == (
        "LF: 1.000000 | RF: 2.000000 | LB: 3.000000 | RB: 4.000000 | Steering: 0.500000"
    )


def test_wheels_info_default_zero():
    assert astuple(WheelsInfo()) == (0.0, 0.0, 0.0, 0.0, 0.0)