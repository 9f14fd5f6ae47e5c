import pytest

from noisekit.generators import Constant
from noisekit.selectors import Blend, Select


class _Coord:
    def get(self, point):
        return point[0]


LOW = Constant(-0.75)
HIGH = Constant(0.625)


def test_blend_endpoints():
    assert Blend(LOW, HIGH, Constant(0.0)).get([0.0]) == -0.75
    assert Blend(LOW, HIGH, Constant(1.0)).get([0.0]) == 0.625


@pytest.mark.parametrize("alpha", [0.1, 0.25, 0.5, 0.9])
def test_blend_stays_between_sources(alpha):
    value = Blend(LOW, HIGH, Constant(alpha)).get([0.0])
    assert -0.75 <= value <= 0.625


def test_blend_is_monotonic_in_control():
    blend = Blend(LOW, HIGH, _Coord())
    values = [blend.get([a]) for a in (0.0, 0.2, 0.4, 0.6, 0.8, 1.0)]
    assert values == sorted(values)


def test_select_defaults():
    select = Select(LOW, HIGH, Constant(0.5))
    assert select.bounds == (0.0, 1.0)
    assert select.falloff == 0.0


@pytest.mark.parametrize("control, expected", [(-0.5, -0.75), (0.0, 0.625), (0.5, 0.625), (1.0, 0.625), (1.5, -0.75)])
def test_select_without_falloff(control, expected):
    assert Select(LOW, HIGH, _Coord()).get([control]) == expected


def test_set_bounds_returns_configured_copy():
    original = Select(LOW, HIGH, _Coord())
    select = original.set_bounds(-2.0, -1.0)
    assert select.bounds == (-2.0, -1.0)
    assert original.bounds == (0.0, 1.0)
    assert select.get([-1.5]) == 0.625
    assert select.get([0.5]) == -0.75


def test_falloff_outside_and_inside():
    select = Select(LOW, HIGH, _Coord()).set_falloff(0.1)
    assert select.falloff == 0.1
    assert select.get([-0.5]) == -0.75
    assert select.get([0.5]) == 0.625
    assert select.get([1.5]) == -0.75


def test_falloff_transition_is_between_sources_and_monotonic():
    select = Select(LOW, HIGH, _Coord()).set_falloff(0.2)
    rising = [select.get([c]) for c in (-0.19, -0.1, 0.0, 0.1, 0.19)]
    falling = [select.get([c]) for c in (0.81, 0.9, 1.0, 1.1, 1.19)]
    assert all(-0.75 <= v <= 0.625 for v in rising + falling)
    assert rising == sorted(rising)
    assert falling == sorted(falling, reverse=True)


def test_falloff_midpoint_is_symmetric():
    select = Select(Constant(-1.0), Constant(1.0), _Coord()).set_falloff(0.2)
    assert select.get([0.0]) == pytest.approx(0.0)
    assert select.get([1.0]) == pytest.approx(0.0)