[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "racesim"
version = "0.1.0"
description = "Racing car simulation: procedural cone tracks, a dynamic bicycle vehicle model and an autonomous racing controller."
requires-python = ">=3.10"
keywords = [
    "simulation",
    "racing",
    "vehicle-dynamics",
    "bicycle-model",
    "track-generation",
    "autonomous-driving",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Simulation",
    "Topic :: Scientific/Engineering :: Physics",
]
dependencies = [
    "pyyaml",
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
racesim = "racesim.app:main"
racesim-manual = "racesim.manual_drive:main"
racesim-track = "racesim.track_export:main"

[tool.hatch.build.targets.wheel]
packages = ["racesim"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
