import pytest

from noisekit.fbm import Fbm
from noisekit.generators import Constant


class Recorder:
    def __init__(self, seed, log):
        self.seed = seed
        self.log = log

    def get(self, point):
        self.log.append((self.seed, tuple(point)))
        return 0.0


def constant_factory(value):
    return lambda seed: Constant(value)


def test_zero_sources_give_zero():
    assert Fbm(constant_factory(0.0)).get((0.3, 0.7, 1.1)) == 0.0


def test_single_octave_returns_source_value():
    fbm = Fbm(constant_factory(0.6)).set_octaves(1)
    assert fbm.get((1.0, 2.0)) == pytest.approx(0.6)


def test_output_is_linear_in_source():
    one = Fbm(constant_factory(0.25)).get((1.0, 2.0, 3.0, 4.0))
    two = Fbm(constant_factory(0.5)).get((1.0, 2.0, 3.0, 4.0))
    assert two == pytest.approx(2 * one)


def test_initial_scale_factor():
    assert Fbm(constant_factory(0.0)).scale_factor == pytest.approx(1 - 0.5**6)


def test_octave_points_and_seeds():
    log = []
    fbm = (
        Fbm(lambda seed: Recorder(seed, log), 3)
        .set_octaves(2)
        .set_frequency(3.0)
        .set_lacunarity(2.0)
    )
    fbm.get((1.0, 2.0))
    assert log == [(3, (3.0, 6.0)), (4, (6.0, 12.0))]


def test_unsupported_dimension_raises():
    with pytest.raises(ValueError):
        Fbm(constant_factory(0.0)).get((1.0,))


def test_too_few_sources_raises():
    fbm = Fbm(constant_factory(0.0)).set_sources([Constant(0.0)])
    with pytest.raises(ValueError):
        fbm.get((1.0, 2.0))