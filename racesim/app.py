"""Run the autonomous racing simulation in a window and log it to CSV."""

from __future__ import annotations

import random
import sys
import time
from collections.abc import Sequence
from contextlib import ExitStack
from typing import IO

from racesim.controller import CarController
from racesim.graphics import Graphics
from racesim.keyboard import KeyboardInput
from racesim.params import _atof
from racesim.state import State
from racesim.track import TrackGenerationError

DEFAULT_DT = 0.01
CONFIG_FILE = "configDry.yaml"
STATE_LOG = "CarStateLog.csv"
CONTROL_LOG = "RALog.csv"
STATE_HEADER = "time,x,y,z,yaw,v_x,v_y,v_z"
CONTROL_HEADER = "time,t,s"

WINDOW_TITLE = "Car Simulation"
WINDOW_WIDTH = 800
WINDOW_HEIGHT = 600
GRID_SIZE = 50
CONE_RADIUS = 5
CAR_RADIUS = 10.0
EXIT_KEYS = ("c", "C")


def parse_dt(argv: Sequence[str]) -> float:
    """Time step from the first argument; the default when absent or not positive."""
    if not argv:
        return DEFAULT_DT
    dt = _atof(argv[0])
    if dt <= 0:
        print(f"Invalid dt value provided. Using default dt = {DEFAULT_DT}")
        return DEFAULT_DT
    return dt


def state_log_row(time: float, state: State) -> str:
    """One CSV row of the car state log, without a line end."""
    values = (state.x, state.y, state.z, state.yaw, state.v_x, state.v_y, state.v_z)
    return f"{time:.2f}," + ",".join(f"{v:.6f}" for v in values)


def control_log_row(time: float, throttle: float, steering: float) -> str:
    """One CSV row of the throttle and steering log, without a line end."""
    return f"{time:.2f},{throttle:.6f},{steering:.6f}"


def _draw_frame(graphics: Graphics, controller: CarController) -> None:
    graphics.clear()
    graphics.draw_grid(GRID_SIZE)

    graphics.set_color(0, 0, 0)
    half_w = graphics.width // 2
    half_h = graphics.height // 2
    for cone in (*controller.left_cones, *controller.right_cones):
        graphics.draw_filled_circle(
            int(cone.x + half_w), int(cone.z + half_h), CONE_RADIUS
        )

    state = controller.car_state
    graphics.draw_car(
        state.x + graphics.width / 2.0,
        state.y + graphics.height / 2.0,
        CAR_RADIUS,
        state.yaw,
    )
    graphics.present()


def _run(
    controller: CarController,
    keyboard: KeyboardInput,
    graphics: Graphics,
    state_log: IO[str],
    control_log: IO[str],
    dt: float,
) -> None:
    total_time = 0.0
    while True:
        if graphics.poll_quit():
            break
        if keyboard.read_key() in EXIT_KEYS:
            print("Exit key 'c' detected. Exiting simulation loop.")
            break

        controller.update(dt)
        state_log.write(state_log_row(total_time, controller.car_state) + "\n")
        control_log.write(
            control_log_row(
                total_time, controller.throttle_input, controller.steering_angle
            )
            + "\n"
        )
        total_time += dt

        _draw_frame(graphics, controller)
        time.sleep(dt)


def main(argv: Sequence[str] | None = None) -> int:
    """Run the simulation until the window closes or ``c`` is pressed."""
    args = sys.argv[1:] if argv is None else list(argv)
    dt = parse_dt(args)
    print(f"Using dt = {dt:.4f} seconds")

    rng = random.Random()
    with ExitStack() as stack:
        keyboard = stack.enter_context(KeyboardInput())

        try:
            controller = CarController(CONFIG_FILE, rng=rng, key_reader=keyboard.read_key)
        except OSError as exc:
            print(f"Error opening YAML file: {CONFIG_FILE} ({exc})", file=sys.stderr)
            return 1
        except TrackGenerationError as exc:
            print(exc, file=sys.stderr)
            return 1

        try:
            state_log = stack.enter_context(
                open(STATE_LOG, "w", encoding="utf-8", newline="")
            )
            control_log = stack.enter_context(
                open(CONTROL_LOG, "w", encoding="utf-8", newline="")
            )
        except OSError as exc:
            print(f"Failed to open log file: {exc}", file=sys.stderr)
            return 1
        state_log.write(STATE_HEADER + "\n")
        control_log.write(CONTROL_HEADER + "\n")

        try:
            graphics = Graphics(WINDOW_TITLE, WINDOW_WIDTH, WINDOW_HEIGHT)
        except RuntimeError as exc:
            print(f"Graphics_Init failed: {exc}", file=sys.stderr)
            return 1
        stack.enter_context(graphics)

        _run(controller, keyboard, graphics, state_log, control_log, dt)

    print(f"Simulation complete. Car state log saved to {STATE_LOG}")
    return 0


if __name__ == "__main__":
    sys.exit(main())