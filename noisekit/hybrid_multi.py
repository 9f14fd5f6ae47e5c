"""Hybrid multifractal noise."""

from __future__ import annotations

import math
from collections.abc import Sequence

from noisekit.multifractal import MultiFractal


def _fmax(a: float, b: float) -> float:
    if math.isnan(a):
        return b
    if math.isnan(b):
        return a
    return max(a, b)


class HybridMulti(MultiFractal):
    """Multifractal noise whose valleys have smooth bottoms at all altitudes."""

    DEFAULT_FREQUENCY = 2.0
    DEFAULT_PERSISTENCE = 0.25

    def _calc_scale_factor(self, persistence: float, octaves: int) -> float:
        result = persistence + persistence
        amplitude = persistence
        for _ in range(octaves):
            amplitude *= persistence
            result += amplitude
        return 2.0 / result

    def get(self, point: Sequence[float]) -> float:
        result = 0.0
        weight = 0.0
        for index, source, coords in self._octaves(point):
            if index == 0:
                result = source.get(coords) * self.persistence
                weight = result
                continue
            weight = _fmax(weight, 1.0)
            signal = source.get(coords) * self.persistence**index
            result += weight * signal
            weight *= signal
        return result * self._scale_factor