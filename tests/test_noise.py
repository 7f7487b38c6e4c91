import pytest

from voxelcraft.config import WATER_LEVEL
from voxelcraft.noise import NoiseGenerator, NoiseParameters

POINTS = [(0, 0, 0, 0), (3, 7, 10, 12), (15, 15, 150, 180), (8, 2, 99, 1)]


def test_negative_world_coordinates_are_below_water():
    gen = NoiseGenerator(1234)
    assert gen.get_height(0, 0, -1, 5) == WATER_LEVEL - 1
    assert gen.get_height(3, -20, 0, 1) == WATER_LEVEL - 1


def test_same_seed_is_deterministic():
    a, b = NoiseGenerator(99), NoiseGenerator(99)
    assert [a.get_height(*p) for p in POINTS] == [b.get_height(*p) for p in POINTS]


def test_seed_changes_heights():
    a, b = NoiseGenerator(99), NoiseGenerator(100)
    assert [a.get_height(*p) for p in POINTS] != [b.get_height(*p) for p in POINTS]


def test_zero_amplitude_gives_offset():
    gen = NoiseGenerator(5)
    gen.set_parameters(NoiseParameters(5, 0, 100, 10, 0.5))
    assert gen.get_height(4, 4, 20, 20) == pytest.approx(10.0)


def test_non_positive_height_becomes_one():
    gen = NoiseGenerator(5)
    gen.set_parameters(NoiseParameters(5, 0, 100, -5, 0.5))
    assert gen.get_height(4, 4, 20, 20) == 1.0


def test_heights_stay_within_octave_bounds():
    gen = NoiseGenerator(4242)
    p = gen.parameters
    weight = sum(p.roughness**a for a in range(p.octaves - 1))
    low = ((-weight / 2.1) + 1.2) * p.amplitude + p.height_offset
    high = ((weight / 2.1) + 1.2) * p.amplitude + p.height_offset
    for x in range(0, 16, 5):
        for cz in range(100, 140, 13):
            h = gen.get_height(x, 3, 120, cz)
            assert low - 1e-6 <= h <= high + 1e-6


def test_set_parameters_changes_output():
    gen = NoiseGenerator(77)
    before = [gen.get_height(*p) for p in POINTS]
    gen.set_parameters(NoiseParameters(9, 85, 235, -20, 0.51))
    after = [gen.get_height(*p) for p in POINTS]
    assert before != after