"""Simulation controller: car model, track, driving inputs and lap timing."""

from __future__ import annotations

import math
import os
import random
from collections.abc import Callable
from dataclasses import dataclass

from racesim.dynamic_bicycle import DynamicBicycle
from racesim.geometry import Transform, Vector3
from racesim.keyboard import key_to_controls
from racesim.path import default_path_config, generate_path
from racesim.racing import RacingConfig, steering_input, throttle_input
from racesim.state import Input, State
from racesim.telemetry import print_telemetry
from racesim.track import generate_track

_CAR_HEIGHT = 0.5


@dataclass
class ControllerConfig:
    """Distance below which the car counts as touching a checkpoint."""

    collision_threshold: float = 1.0


class CarController:
    """Drives a dynamic bicycle model around a generated track.

    With ``use_racing_algorithm`` set the car follows the checkpoints on its
    own; otherwise keys from ``key_reader`` steer it.
    """

    def __init__(
        self,
        yaml_path: str | os.PathLike[str],
        rng: random.Random | None = None,
        key_reader: Callable[[], str | None] | None = None,
    ) -> None:
        self.rng = rng
        self.key_reader = key_reader

        self.total_time = 0.0
        self.total_distance = 0.0
        self.lap_count = 0
        self.delta_time = 0.0

        self.config = ControllerConfig()
        self.use_racing_algorithm = True
        self.racing_config = RacingConfig(
            speed_look_ahead_sensitivity=0.7,
            steering_look_ahead_sensitivity=0.1,
            acceleration_factor=0.002,
        )

        self.steering_angle = 0.0
        self.throttle_input = 0.0

        self.car_model = DynamicBicycle.from_yaml(yaml_path)
        self.car_input = Input()
        self.car_state = State()
        self.car_transform = Transform()
        self._sync_transform(height=_CAR_HEIGHT)

        self.checkpoint_positions: list[Vector3] = []
        self.last_checkpoint = Vector3()
        self.left_cones: list[Vector3] = []
        self.right_cones: list[Vector3] = []
        self._load_track()

    def _sync_transform(self, height: float | None = None) -> None:
        pos = self.car_transform.position
        self.car_transform.position = Vector3(
            self.car_state.x, pos.y if height is None else height, self.car_state.y
        )
        self.car_transform.yaw = self.car_state.yaw

    def _load_track(self) -> None:
        path_config = default_path_config(self.rng)
        path = generate_path(path_config, path_config.resolution, self.rng)
        track = generate_track(path_config, path)
        self.checkpoint_positions = [t.position for t in track.checkpoints]
        self.last_checkpoint = (
            self.checkpoint_positions[-1] if self.checkpoint_positions else Vector3()
        )
        self.left_cones = [t.position for t in track.left_cones]
        self.right_cones = [t.position for t in track.right_cones]

    def update(self, dt: float) -> None:
        """Advance the simulation by ``dt`` seconds."""
        self.delta_time = dt
        self.total_time += dt

        if not self.checkpoint_positions:
            print("No checkpoints available. Resetting simulation.")
            self.reset()
            return

        if self.use_racing_algorithm:
            print("Racing algorithm mode. Using racing algorithm for control.")
            speed = self.car_state.v_x
            self.throttle_input = throttle_input(
                self.checkpoint_positions,
                speed,
                self.car_transform,
                self.racing_config,
                dt,
            )
            self.steering_angle = steering_input(
                self.checkpoint_positions,
                speed,
                self.car_transform,
                self.racing_config,
                dt,
            )
        else:
            print("Manual control mode. Use arrow keys to control the car.")
            key = self.key_reader() if self.key_reader is not None else None
            throttle, steering = key_to_controls(key)
            if throttle is not None:
                self.throttle_input = throttle
            if steering is not None:
                self.steering_angle = steering

        self.car_input.acc = self.throttle_input
        self.car_input.delta = self.steering_angle

        self.car_state = self.car_model.update_state(
            self.car_state, self.car_input, dt
        )
        self._sync_transform()

        self.total_distance += self.car_state.v_x * dt

        pos = self.car_transform.position
        dist_to_last = math.hypot(
            pos.x - self.last_checkpoint.x, pos.z - self.last_checkpoint.z
        )
        if dist_to_last < self.config.collision_threshold:
            if self.lap_count > 0:
                print(
                    f"Lap Completed. Time: {self.total_time:.2f} s, "
                    f"Distance: {self.total_distance:.2f}, Lap: {self.lap_count}"
                )
            self.lap_count += 1
            self.total_time = 0.0
            self.total_distance = 0.0

        print_telemetry(
            self.car_state,
            self.car_transform,
            self.total_time,
            self.total_distance,
            self.lap_count,
        )

    def reset(self) -> None:
        """Put the car back at the origin and generate a new track."""
        self.car_input = Input()
        self.car_state = State()
        self.car_transform = Transform(Vector3(0.0, _CAR_HEIGHT, 0.0), 0.0)
        self._load_track()
        self.total_time = 0.0
        self.total_distance = 0.0