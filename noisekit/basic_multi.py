"""Heterogeneous multifractal noise."""

from __future__ import annotations

from collections.abc import Sequence

from noisekit.multifractal import MultiFractal


class BasicMulti(MultiFractal):
    """Multifractal noise whose fractal dimension varies with location.

    Near zero the higher octaves are damped heavily and the result stays
    smooth; further from zero they are damped less and grow more jagged.
    """

    DEFAULT_FREQUENCY = 2.0

    def _calc_scale_factor(self, persistence: float, octaves: int) -> float:
        if octaves == 1:
            return 1.0
        denom = 1.0
        for x in range(1, octaves + 1):
            denom += denom * persistence**x
        return 1.0 / denom

    def get(self, point: Sequence[float]) -> float:
        result = 0.0
        for index, source, coords in self._octaves(point):
            if index == 0:
                result = source.get(coords)
                continue
            signal = source.get(coords) * self.persistence**index
            result += signal * result
        return result * self._scale_factor