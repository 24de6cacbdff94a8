from racesim.geometry import Transform, Vector3
from racesim.state import State
from racesim.telemetry import format_telemetry, print_telemetry


def _sample():
    state = State(x=1.5, y=-2.25, yaw=0.5, v_x=3.0)
    transform = Transform(Vector3(1.5, 0.5, -2.25), 0.5)
    return state, transform


def test_first_line_reports_time_distance_and_lap():
    state, transform = _sample()
    text = format_telemetry(state, transform, 1.5, 12.0, 2)
    assert text.splitlines()[0] == "Time: 1.50 s, Distance: 12.00, Lap: 2"


def test_state_line_uses_two_decimals():
    state, transform = _sample()
    text = format_telemetry(state, transform, 0.0, 0.0, 0)
    assert text.splitlines()[1] == (
        "Car State -> x: 1.50, y: -2.25, yaw: 0.50, v_x: 3.00"
    )


def test_transform_line_lists_position_and_yaw():
    state, transform = _sample()
    text = format_telemetry(state, transform, 0.0, 0.0, 0)
    assert text.splitlines()[2] == (
        "Car Transform -> Pos: (1.50, 0.50, -2.25), Yaw: 0.50"
    )


def test_report_ends_with_separator_line():
    state, transform = _sample()
    lines = format_telemetry(state, transform, 0.0, 0.0, 0).splitlines()
    assert len(lines) == 4
    assert set(lines[3]) == {"-"}
    assert len(lines[3]) == 45


def test_print_writes_formatted_report(capsys):
    state, transform = _sample()
    print_telemetry(state, transform, 2.0, 5.0, 1)
    captured = capsys.readouterr().out
    assert captured == format_telemetry(state, transform, 2.0, 5.0, 1)