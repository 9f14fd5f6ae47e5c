"""Noise functions that choose between or blend two sources under a control."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, replace
from typing import Any


def _linear(a: float, b: float, alpha: float) -> float:
    return (b - a) * alpha + a


def _cubic_curve(t: float) -> float:
    return t * t * (3.0 - t * 2.0)


@dataclass
class Blend:
    """Linear blend of two sources weighted by a control source."""

    source1: Any
    source2: Any
    control: Any

    def get(self, point: Sequence[float]) -> float:
        lower = self.source1.get(point)
        upper = self.source2.get(point)
        control = self.control.get(point)
        return _linear(lower, upper, control)


@dataclass
class Select:
    """Outputs ``source2`` where the control lies within bounds, else ``source1``."""

    source1: Any
    source2: Any
    control: Any
    bounds: tuple[float, float] = (0.0, 1.0)
    falloff: float = 0.0

    def set_bounds(self, lower_bound: float, upper_bound: float) -> Select:
        return replace(self, bounds=(lower_bound, upper_bound))

    def set_falloff(self, falloff: float) -> Select:
        return replace(self, falloff=falloff)

    def get(self, point: Sequence[float]) -> float:
        control_value = self.control.get(point)
        lower, upper = self.bounds
        falloff = self.falloff

        if falloff > 0.0:
            if control_value < lower - falloff:
                return self.source1.get(point)
            if control_value < lower + falloff:
                lower_curve, upper_curve = lower - falloff, lower + falloff
                alpha = _cubic_curve(
                    (control_value - lower_curve) / (upper_curve - lower_curve)
                )
                return _linear(self.source1.get(point), self.source2.get(point), alpha)
            if control_value < upper - falloff:
                return self.source2.get(point)
            if control_value < upper + falloff:
                lower_curve, upper_curve = upper - falloff, upper + falloff
                alpha = _cubic_curve(
                    (control_value - lower_curve) / (upper_curve - lower_curve)
                )
                return _linear(self.source2.get(point), self.source1.get(point), alpha)
            return self.source1.get(point)

        if control_value < lower or control_value > upper:
            return self.source1.get(point)
        return self.source2.get(point)