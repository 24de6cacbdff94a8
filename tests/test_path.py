import math
import random

import pytest

from racesim.path import PathConfig, PathResult, default_path_config, generate_path


def test_default_config_matches_documented_defaults():
    config = default_path_config(random.Random(1))
    assert config.min_corner_radius == 3.0
    assert config.max_frequency == 6
    assert config.track_width == 5.0
    assert config.min_cone_spacing == pytest.approx(3.0 * math.pi / 16.0)
    assert config.max_cone_spacing == 0.6


def test_default_config_seed_in_unit_interval_and_reproducible():
    a = default_path_config(random.Random(42))
    b = default_path_config(random.Random(42))
    assert 0.0 <= a.seed < 1.0
    assert a.seed == b.seed


def test_length_follows_cubic_in_amplitude_times_frequency():
    config = PathConfig(amplitude=0.0)
    assert config.length == pytest.approx(35.9)


def test_resolution_recomputed_after_change():
    config = PathConfig()
    before = (config.resolution, config.length)
    config.amplitude = 0.5
    config.calculate_resolution_and_length()
    assert config.length > before[1]
    assert config.resolution > before[0]


def test_resolution_is_positive_integer():
    config = PathConfig()
    assert isinstance(config.resolution, int)
    assert config.resolution > 0


def test_generate_path_lengths_match():
    config = PathConfig()
    path = generate_path(config, 200, random.Random(3))
    assert path.n_points == 200
    assert len(path.normals) == 200
    assert len(path.corner_radii) == 200


def test_min_corner_radius_after_scaling():
    config = PathConfig(min_corner_radius=4.0)
    path = generate_path(config, 500, random.Random(7))
    assert min(abs(r) for r in path.corner_radii) == pytest.approx(4.0)


def test_normals_are_unit_length():
    path = generate_path(PathConfig(), 300, random.Random(11))
    for n in path.normals:
        assert abs(n) == pytest.approx(1.0)


def test_same_rng_seed_gives_same_path():
    config = PathConfig()
    a = generate_path(config, 100, random.Random(5))
    b = generate_path(config, 100, random.Random(5))
    assert a == b


def test_different_seeds_give_different_paths():
    config = PathConfig()
    a = generate_path(config, 100, random.Random(5))
    b = generate_path(config, 100, random.Random(6))
    assert a.points != b.points


def test_without_waves_path_is_circle_with_inward_normals():
    config = PathConfig(max_frequency=1, min_corner_radius=2.0)
    path = generate_path(config, 64, random.Random(0))
    radius = abs(path.points[0])
    for point, normal, corner in zip(path.points, path.normals, path.corner_radii):
        assert abs(point) == pytest.approx(radius)
        assert corner == pytest.approx(2.0)
        inward = -point / abs(point)
        assert normal.real == pytest.approx(inward.real, abs=1e-9)
        assert normal.imag == pytest.approx(inward.imag, abs=1e-9)


def test_path_result_counts_points():
    result = PathResult(points=[0j, 1j], normals=[1, 1], corner_radii=[1.0, 1.0])
    assert result.n_points == 2


@pytest.mark.parametrize("n", [0, -3])
def test_generate_path_rejects_non_positive_count(n):
    with pytest.raises(ValueError):
        generate_path(PathConfig(), n, random.Random(0))