"""Drive the dynamic bicycle model by keyboard and log its full state."""

from __future__ import annotations

import sys
import time
from collections.abc import Sequence
from contextlib import ExitStack
from dataclasses import fields

from racesim.dynamic_bicycle import DynamicBicycle
from racesim.graphics import Graphics
from racesim.keyboard import KeyboardInput, key_to_controls
from racesim.state import Input, State

DT = 0.05
CONFIG_FILE = "configDry.yaml"
STATE_LOG = "CarStateLog.csv"
STATE_HEADER = "Time,x,y,z,yaw,v_x,v_y,v_z,r_x,r_y,r_z,a_x,a_y,a_z"
GRID_SIZE = 50
CAR_RADIUS = 10
EXIT_KEYS = ("c", "C")


def manual_input(key: str | None) -> Input:
    """Control input for one frame; controls without a key stay at zero."""
    throttle, steering = key_to_controls(key)
    return Input(
        acc=0.0 if throttle is None else throttle,
        delta=0.0 if steering is None else steering,
    )


def full_state_row(time: float, state: State) -> str:
    """One CSV row with every state field, without a line end."""
    return f"{time:.2f}," + ",".join(
        f"{getattr(state, f.name):.6f}" for f in fields(state)
    )


def main(argv: Sequence[str] | None = None) -> int:
    """Drive the car with w, a, s, d until the window closes or ``c`` is pressed."""
    with ExitStack() as stack:
        keyboard = stack.enter_context(KeyboardInput())

        try:
            model = DynamicBicycle.from_yaml(CONFIG_FILE)
        except OSError as exc:
            print(f"Error opening YAML file: {CONFIG_FILE} ({exc})", file=sys.stderr)
            return 1

        state = State()
        try:
            log = stack.enter_context(open(STATE_LOG, "w", encoding="utf-8", newline=""))
        except OSError as exc:
            print(f"Error opening file for writing: {exc}", file=sys.stderr)
            return 1
        log.write(STATE_HEADER + "\n")

        try:
            graphics = Graphics("Car Simulation", 800, 600)
        except RuntimeError as exc:
            print(f"Graphics_Init failed: {exc}", file=sys.stderr)
            return 1
        stack.enter_context(graphics)

        total_time = 0.0
        while True:
            if graphics.poll_quit():
                print("SDL_QUIT event received. Exiting simulation loop.")
                break
            key = keyboard.read_key()
            if key in EXIT_KEYS:
                print("Exit key 'c' detected. Exiting simulation loop.")
                break

            state = model.update_state(state, manual_input(key), DT)
            log.write(full_state_row(total_time, state) + "\n")
            total_time += DT

            graphics.clear()
            graphics.draw_grid(GRID_SIZE)
            graphics.draw_car(state.x, state.y, CAR_RADIUS, state.yaw)
            graphics.present()
            time.sleep(DT)

    print(f"Simulation complete. Car state log saved to {STATE_LOG}")
    return 0


if __name__ == "__main__":
    sys.exit(main())