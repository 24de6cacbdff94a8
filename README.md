# racesim

A small racing car simulation. It generates a random closed track lined with
cones, drives a car around it with a dynamic bicycle vehicle model, and steers
the car with a look-ahead racing controller. The run is drawn in a pygame
window and logged to CSV files. A second command lets you drive the model by
keyboard.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Vehicle parameters

Both simulators read the car's parameters from `configDry.yaml` in the current
directory. No such file is shipped with the package; write your own. The file
has five sections, and unknown keys are ignored:

```yaml
inertia:
  m: 190.0
  g: 9.81
  I_z: 110.0
kinematics:
  l: 1.53
  b_F: 2.0
  b_R: 2.0
  w_front: 0.5
  axle_width: 1.4
tire:
  tire_coefficient: 1.0
  B: 12.56
  C: -1.38
  D: 1.6
  E: -0.58
  radius: 0.2525
aero:
  C_Down: 1.9
  C_drag: 0.9
input_ranges:
  acceleration:
    min: -10.0
    max: 10.0
  velocity:
    min: 0.0
    max: 30.0
  steering:
    min: -0.5
    max: 0.5
```

`inertia` also accepts `Cf` and `Cr`. `tire_coefficient` must appear before
`B` and `D`: while the file is read, `B` is divided by it and `D` multiplied
by it. The front and rear lever arms (`l_F`, `l_R`) are derived from `l` and
`w_front`. Any value left out is zero.

## Commands

### `racesim`

Runs the full simulation: the racing controller drives the car around a
freshly generated track, shown in an 800×600 window with a 50-pixel grid, the
cones and the car.

```
racesim          # time step 0.01 s
racesim 0.02     # custom time step in seconds
```

A time step that is not a positive number falls back to 0.01 s. Press `c` in
the terminal or close the window to stop. Two logs are written in the current
directory:

* `CarStateLog.csv` — `time,x,y,z,yaw,v_x,v_y,v_z`
* `RALog.csv` — `time,t,s` (throttle and steering from the controller)

Each time the car comes within 1.0 of the last checkpoint, the lap counter
goes up and lap time and distance restart; from the second time on, the
completed lap's time and distance are printed. Telemetry is printed every
step.

### `racesim-manual`

Drives the car by hand with a time step of 0.05 s and no track. In the
terminal press `w` to accelerate, `s` to brake, `a`/`d` to steer full left or
right, and `c` to quit; closing the window also quits. Controls go back to
zero on frames without a key. The full state, including rotation rates and
accelerations, is logged to `CarStateLog.csv`.

### `racesim-track`

```
racesim-track            # write into the current directory
racesim-track out/       # write into an existing directory
```

Generates one track and writes `left_cones.csv`, `right_cones.csv` and
`checkpoints.csv` (columns `x,y,z,rotation`). It then tries to run
`python plot_track.py` in the current directory and prints a notice if that
fails.

## Library use

The pieces can be used on their own:

```python
import random

from racesim.path import default_path_config, generate_path
from racesim.track import generate_track
from racesim.track_export import write_track_csv

rng = random.Random(42)
config = default_path_config(rng)
path = generate_path(config, config.resolution, rng)
track = generate_track(config, path)
write_track_csv(track, ".")
```

* `racesim.geometry` — `Vector2`, `Vector3`, `Transform`, `points_collide`
* `racesim.state` — `State`, `Input`, `WheelsInfo`
* `racesim.params` — `VehicleParam` and its parts, `parse_vehicle_params`,
  `load_vehicle_params`
* `racesim.vehicle_model` / `racesim.dynamic_bicycle` — `VehicleModel`,
  `DynamicBicycle`, `calculate_magnitude`; `update_state` returns a new
  `State` rather than changing the one passed in
* `racesim.racing` — `RacingConfig`, `throttle_input`, `steering_input`
* `racesim.path` — `PathConfig`, `default_path_config`, `PathResult`,
  `generate_path`
* `racesim.track` — `resample_boundary`, `place_cones`, `generate_track`,
  `TrackResult`; `generate_track` raises `TrackGenerationError` when a side
  ends up with fewer than two cones
* `racesim.track_export` — `write_transforms_csv`, `write_track_csv`
* `racesim.telemetry` — `format_telemetry`, `print_telemetry`
* `racesim.keyboard` — `KeyboardInput` (a context manager for non-blocking
  key reads) and `key_to_controls`
* `racesim.graphics` — `Graphics` window, plus `grid_lines`,
  `filled_circle_spans` and `heading_endpoint`
* `racesim.controller` — `CarController`, which ties the model, the track and
  the racing controller together

## What it does not do

* No plotting script is included; `racesim-track` only calls
  `plot_track.py` if you provide one.
* `PathConfig` carries `seed`, `check_self_intersection`,
  `starting_amplitude`, `relative_accuracy`, `margin`,
  `starting_straight_length`, `starting_straight_downsample` and
  `starting_cone_spacing`, but track generation does not use them: tracks are
  not checked for self-intersection, have no starting straight, and are made
  reproducible only by passing a seeded `random.Random`.
* The commands always start from a new random track; tracks cannot be loaded
  back from the CSV files.