"""Ridged multifractal noise."""

from __future__ import annotations

import math
from collections.abc import Sequence
from typing import Any

from noisekit.multifractal import MultiFractal, SourceFactory


def _clamp_unit(value: float) -> float:
    if math.isnan(value):
        return value
    return max(0.0, min(value, 1.0))


class RidgedMulti(MultiFractal):
    """fBm-like noise whose octaves are folded by an absolute value into ridges.

    Each octave's contribution is weighted by the previous one, divided by
    ``attenuation``, so successive ridges become smaller. Output usually lies
    in -1.0 to 1.0 with the default parameters, but this is not guaranteed.
    """

    DEFAULT_PERSISTENCE = 1.0
    DEFAULT_ATTENUATION = 2.0

    def __init__(
        self, source_factory: SourceFactory, seed: int = MultiFractal.DEFAULT_SEED
    ) -> None:
        self.attenuation = self.DEFAULT_ATTENUATION
        super().__init__(source_factory, seed)

    def _calc_scale_factor(self, persistence: float, octaves: int) -> float:
        amplitude = 1.0
        signal = 1.0
        denom = signal
        for x in range(1, octaves + 1):
            amplitude *= persistence
            weight = _clamp_unit(signal / self.attenuation**x)
            signal = weight * amplitude
            denom += signal
        return 2.0 / denom

    def set_attenuation(self, attenuation: float) -> Any:
        new = self._with(attenuation=attenuation)
        new._scale_factor = new._calc_scale_factor(new.persistence, new.octaves)
        return new

    def get(self, point: Sequence[float]) -> float:
        result = 0.0
        weight = 1.0
        for index, source, coords in self._octaves(point):
            signal = 1.0 - abs(source.get(coords))
            signal *= signal
            signal *= weight
            weight = _clamp_unit(signal / self.attenuation)
            result += signal * self.persistence**index
        return result * self._scale_factor - 1.0

    def __repr__(self) -> str:
        return (
            f"RidgedMulti(octaves={self.octaves}, frequency={self.frequency}, "
            f"lacunarity={self.lacunarity}, persistence={self.persistence}, "
            f"attenuation={self.attenuation}, seed={self.seed})"
        )