"""Generate a track and write its cones and checkpoints to CSV files."""

from __future__ import annotations

import argparse
import os
import random
import subprocess
import sys
from collections.abc import Iterable
from pathlib import Path

from racesim.geometry import Transform
from racesim.path import default_path_config, generate_path
from racesim.track import TrackResult, generate_track

_HEADER = "x,y,z,rotation\n"

TRACK_FILES = ("left_cones.csv", "right_cones.csv", "checkpoints.csv")


def write_transforms_csv(
    transforms: Iterable[Transform], path: str | os.PathLike[str]
) -> None:
    """Write transforms as ``x,y,z,rotation`` rows with six decimals."""
    with open(path, "w", encoding="utf-8", newline="") as fh:
        fh.write(_HEADER)
        for t in transforms:
            p = t.position
            fh.write(f"{p.x:f},{p.y:f},{p.z:f},{t.yaw:f}\n")


def write_track_csv(
    track: TrackResult, directory: str | os.PathLike[str] = "."
) -> list[Path]:
    """Write left cones, right cones and checkpoints into ``directory``."""
    base = Path(directory)
    groups = (track.left_cones, track.right_cones, track.checkpoints)
    written = []
    for name, transforms in zip(TRACK_FILES, groups):
        target = base / name
        write_transforms_csv(transforms, target)
        written.append(target)
    return written


def main(argv: list[str] | None = None) -> int:
    """Generate a random track, save it as CSV and try to plot it."""
    parser = argparse.ArgumentParser(
        description="Generate a race track and write it to CSV files."
    )
    parser.add_argument(
        "directory", nargs="?", default=".", help="where to write the CSV files"
    )
    args = parser.parse_args(argv)

    rng = random.Random()
    config = default_path_config(rng)
    path = generate_path(config, config.resolution, rng)
    track = generate_track(config, path)

    try:
        write_track_csv(track, args.directory)
    except OSError as exc:
        print(f"Cannot write track files: {exc}", file=sys.stderr)
        return 1

    print("Data written to left_cones.csv, right_cones.csv, and checkpoints.csv")

    try:
        returncode = subprocess.run(["python", "plot_track.py"], check=False).returncode
    except OSError:
        returncode = -1
    if returncode != 0:
        print(
            "Graphing tool did not run successfully. "
            "Please run plot_track.py manually.",
            file=sys.stderr,
        )
    return 0


if __name__ == "__main__":
    sys.exit(main())