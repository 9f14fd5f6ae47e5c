"""Billowy fractal noise suited to clouds and rocks."""

from __future__ import annotations

from collections.abc import Sequence

from noisekit.multifractal import MultiFractal


class Billow(MultiFractal):
    """Like fBm, but each octave's absolute value is rescaled to -1.0 to 1.0."""

    def get(self, point: Sequence[float]) -> float:
        result = 0.0
        for index, source, coords in self._octaves(point):
            signal = abs(source.get(coords)) * 2.0 - 1.0
            result += signal * self.persistence ** (index + 1)
        return result * self._scale_factor