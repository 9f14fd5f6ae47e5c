import pytest

from noisekit.generators import Constant
from noisekit.hybrid_multi import HybridMulti


class Recorder:
    def __init__(self, value=0.0):
        self.value = value
        self.points = []

    def get(self, point):
        self.points.append(tuple(point))
        return self.value


def constant_factory(value):
    return lambda seed: Constant(value)


def test_defaults():
    noise = HybridMulti(constant_factory(0.0))
    assert noise.frequency == 2.0
    assert noise.persistence == 0.25
    assert noise.octaves == 6


def test_zero_source_gives_zero():
    noise = HybridMulti(constant_factory(0.0))
    assert noise.get((0.3, 0.7)) == 0.0


def test_single_octave_is_weighted_by_persistence():
    noise = HybridMulti(constant_factory(0.6)).set_octaves(1)
    assert noise.get((1.0, 2.0, 3.0)) / noise.scale_factor == pytest.approx(
        0.6 * noise.persistence
    )


def test_single_octave_is_linear_in_source():
    low = HybridMulti(constant_factory(0.2)).set_octaves(1)
    high = HybridMulti(constant_factory(0.4)).set_octaves(1)
    point = (0.5, 0.5)
    assert high.get(point) == pytest.approx(2.0 * low.get(point))


def test_first_octave_is_sampled_at_frequency():
    recorder = Recorder()
    noise = HybridMulti(lambda seed: recorder).set_octaves(3)
    noise.get((1.0, -1.0, 0.5))
    assert recorder.points[0] == pytest.approx((2.0, -2.0, 1.0))
    assert len(recorder.points) == 3


def test_scale_factor_shrinks_with_more_octaves():
    base = HybridMulti(constant_factory(0.0))
    factors = [base.set_octaves(n).scale_factor for n in (1, 2, 3, 8)]
    assert factors == sorted(factors, reverse=True)


def test_set_persistence_does_not_mutate_original():
    base = HybridMulti(constant_factory(0.0))
    changed = base.set_persistence(0.5)
    assert base.persistence == 0.25
    assert changed.scale_factor < base.scale_factor


def test_set_seed_rebuilds_sources():
    seeds = []

    def factory(seed):
        seeds.append(seed)
        return Constant(0.0)

    noise = HybridMulti(factory).set_octaves(2)
    seeds.clear()
    reseeded = noise.set_seed(10)
    assert reseeded.seed == 10
    assert seeds == [10, 11]


def test_too_few_sources_raises():
    noise = HybridMulti(constant_factory(0.0)).set_sources([])
    with pytest.raises(ValueError):
        noise.get((0.0, 0.0))