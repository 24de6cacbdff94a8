"""Terminal telemetry for the running simulation."""

from __future__ import annotations

from racesim.geometry import Transform
from racesim.state import State

_SEPARATOR = "-" * 45


def format_telemetry(
    state: State,
    transform: Transform,
    total_time: float,
    total_distance: float,
    lap_count: int,
) -> str:
    """Return the telemetry report as text, one line per item, ending in a separator."""
    pos = transform.position
    lines = [
        f"Time: {total_time:.2f} s, Distance: {total_distance:.2f}, Lap: {lap_count}",
        f"Car State -> x: {state.x:.2f}, y: {state.y:.2f}, "
        f"yaw: {state.yaw:.2f}, v_x: {state.v_x:.2f}",
        f"Car Transform -> Pos: ({pos.x:.2f}, {pos.y:.2f}, {pos.z:.2f}), "
        f"Yaw: {transform.yaw:.2f}",
        _SEPARATOR,
    ]
    return "\n".join(lines) + "\n"


def print_telemetry(
    state: State,
    transform: Transform,
    total_time: float,
    total_distance: float,
    lap_count: int,
) -> None:
    """Print the telemetry report to standard output."""
    print(
        format_telemetry(state, transform, total_time, total_distance, lap_count),
        end="",
    )