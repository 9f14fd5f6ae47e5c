"""Noise functions that reshape the output value of a single source."""

from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import dataclass, replace
from typing import Any


def _powf(base: float, exponent: float) -> float:
    """Power of a non-negative base that yields infinity instead of raising."""
    try:
        return math.pow(base, exponent)
    except (ValueError, OverflowError):
        return math.inf


def _scale_shift(value: float, n: float) -> float:
    return abs(value) * n - 1.0


@dataclass
class Abs:
    """Outputs the absolute value of the source's output."""

    source: Any

    def get(self, point: Sequence[float]) -> float:
        return abs(self.source.get(point))


@dataclass
class Clamp:
    """Clamps the source's output to ``bounds`` (default -1.0 to 1.0)."""

    source: Any
    bounds: tuple[float, float] = (-1.0, 1.0)

    def set_lower_bound(self, lower_bound: float) -> Clamp:
        return replace(self, bounds=(lower_bound, self.bounds[1]))

    def set_upper_bound(self, upper_bound: float) -> Clamp:
        return replace(self, bounds=(self.bounds[0], upper_bound))

    def set_bounds(self, lower_bound: float, upper_bound: float) -> Clamp:
        return replace(self, bounds=(lower_bound, upper_bound))

    def get(self, point: Sequence[float]) -> float:
        lower, upper = self.bounds
        if math.isnan(lower) or math.isnan(upper) or lower > upper:
            raise ValueError(f"invalid clamp bounds ({lower}, {upper})")
        value = self.source.get(point)
        if math.isnan(value):
            return value
        return max(lower, min(value, upper))


@dataclass
class Exponent:
    """Maps the source's output onto an exponential curve within -1.0 to 1.0."""

    source: Any
    exponent: float = 1.0

    def set_exponent(self, exponent: float) -> Exponent:
        return replace(self, exponent=exponent)

    def get(self, point: Sequence[float]) -> float:
        value = abs((self.source.get(point) + 1.0) / 2.0)
        value = _powf(value, self.exponent)
        return _scale_shift(value, 2.0)


@dataclass
class Negate:
    """Outputs the negated output of the source."""

    source: Any

    def get(self, point: Sequence[float]) -> float:
        return -self.source.get(point)


@dataclass
class ScaleBias:
    """Multiplies the source's output by ``scale`` and adds ``bias``."""

    source: Any
    scale: float = 1.0
    bias: float = 0.0

    def set_scale(self, scale: float) -> ScaleBias:
        return replace(self, scale=scale)

    def set_bias(self, bias: float) -> ScaleBias:
        return replace(self, bias=bias)

    def get(self, point: Sequence[float]) -> float:
        return self.source.get(point) * self.scale + self.bias