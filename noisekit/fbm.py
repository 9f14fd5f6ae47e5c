"""Fractal Brownian motion noise."""

from __future__ import annotations

from collections.abc import Sequence

from noisekit.multifractal import MultiFractal


class Fbm(MultiFractal):
    """Sum of octaves of ever higher frequency and ever lower amplitude."""

    def _initial_scale_factor(self) -> float:
        return 1.0 - self.persistence**self.octaves

    def get(self, point: Sequence[float]) -> float:
        result = 0.0
        attenuation = self.persistence
        for _, source, coords in self._octaves(point):
            result += source.get(coords) * attenuation
            attenuation *= attenuation
        return result * self._scale_factor