import pytest

from noisekit.basic_multi import BasicMulti
from noisekit.generators import Constant


class Recorder:
    def __init__(self, value=0.0):
        self.value = value
        self.points = []

    def get(self, point):
        self.points.append(tuple(point))
        return self.value


def constant_factory(value):
    return lambda seed: Constant(value)


def test_default_frequency_is_two():
    noise = BasicMulti(constant_factory(0.0))
    assert noise.frequency == 2.0
    assert noise.octaves == 6


def test_single_octave_scale_factor_is_one():
    noise = BasicMulti(constant_factory(0.3)).set_octaves(1)
    assert noise.scale_factor == 1.0
    assert noise.get((0.1, 0.2)) == pytest.approx(0.3)


def test_zero_source_gives_zero():
    noise = BasicMulti(constant_factory(0.0))
    assert noise.get((1.5, -2.0, 0.25)) == 0.0


def test_first_octave_is_sampled_at_frequency():
    recorder = Recorder()
    noise = BasicMulti(lambda seed: recorder).set_octaves(2)
    noise.get((1.0, 3.0))
    assert recorder.points[0] == pytest.approx((2.0, 6.0))
    assert recorder.points[1] == pytest.approx(
        (2.0 * noise.lacunarity, 6.0 * noise.lacunarity)
    )


def test_each_octave_queried_once():
    recorder = Recorder(0.1)
    noise = BasicMulti(lambda seed: recorder)
    noise.get((0.5, 0.5, 0.5, 0.5))
    assert len(recorder.points) == noise.octaves


def test_scale_factor_shrinks_with_more_octaves():
    base = BasicMulti(constant_factory(0.0))
    factors = [base.set_octaves(n).scale_factor for n in (2, 3, 4, 5)]
    assert factors == sorted(factors, reverse=True)


def test_set_persistence_updates_scale_factor():
    base = BasicMulti(constant_factory(0.0))
    changed = base.set_persistence(0.9)
    assert changed.persistence == 0.9
    assert changed.scale_factor < base.scale_factor
    assert base.persistence == 0.5


def test_octaves_are_clamped():
    noise = BasicMulti(constant_factory(0.0)).set_octaves(100)
    assert noise.octaves == BasicMulti.MAX_OCTAVES
    assert len(noise.sources) == BasicMulti.MAX_OCTAVES


def test_too_few_sources_raises():
    noise = BasicMulti(constant_factory(0.0)).set_sources([Constant(0.0)])
    with pytest.raises(ValueError):
        noise.get((0.0, 0.0))


def test_invalid_dimension_raises():
    noise = BasicMulti(constant_factory(0.0))
    with pytest.raises(ValueError):
        noise.get((0.0,))