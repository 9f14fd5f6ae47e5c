"""Pseudo-random displacement of the input point before querying a source."""

from __future__ import annotations

import copy
from collections.abc import Sequence
from typing import Any

from noisekit.fbm import Fbm
from noisekit.multifractal import SourceFactory

_MASK32 = 0xFFFFFFFF

# Offsets keep the sampled points away from integer lattice boundaries,
# where gradient noise is zero. One row per displaced axis.
_OFFSETS = (
    (12414.0, 65124.0, 31337.0, 57948.0),
    (26519.0, 18128.0, 60943.0, 48513.0),
    (53820.0, 11213.0, 44845.0, 39357.0),
    (18128.0, 44845.0, 12414.0, 60943.0),
)


class Turbulence:
    """Displaces each coordinate by an fBm noise value scaled by ``power``.

    ``source_factory`` builds the noise sources of the fBm distortion
    functions from a seed. The ``set_*`` methods return a new instance.
    """

    DEFAULT_SEED = 0
    DEFAULT_FREQUENCY = 1.0
    DEFAULT_POWER = 1.0
    DEFAULT_ROUGHNESS = 3

    def __init__(self, source: Any, source_factory: SourceFactory) -> None:
        self.source = source
        self.source_factory = source_factory
        self.frequency = self.DEFAULT_FREQUENCY
        self.power = self.DEFAULT_POWER
        self.roughness = self.DEFAULT_ROUGHNESS
        self._seed = self.DEFAULT_SEED
        self._distort = tuple(
            Fbm(source_factory, self.DEFAULT_SEED + offset)
            .set_octaves(self.DEFAULT_ROUGHNESS)
            .set_frequency(self.DEFAULT_FREQUENCY)
            for offset in range(4)
        )

    @property
    def seed(self) -> int:
        return self._seed

    @property
    def x_distort_function(self) -> Fbm:
        return self._distort[0]

    @property
    def y_distort_function(self) -> Fbm:
        return self._distort[1]

    @property
    def z_distort_function(self) -> Fbm:
        return self._distort[2]

    @property
    def u_distort_function(self) -> Fbm:
        return self._distort[3]

    def _with(self, **changes: Any) -> Turbulence:
        new = copy.copy(self)
        for name, value in changes.items():
            setattr(new, name, value)
        return new

    def set_frequency(self, frequency: float) -> Turbulence:
        return self._with(
            frequency=frequency,
            _distort=tuple(f.set_frequency(frequency) for f in self._distort),
        )

    def set_power(self, power: float) -> Turbulence:
        return self._with(power=power)

    def set_roughness(self, roughness: int) -> Turbulence:
        return self._with(
            roughness=roughness,
            _distort=tuple(f.set_octaves(roughness) for f in self._distort),
        )

    def set_seed(self, seed: int) -> Turbulence:
        """Seed the distortion functions with ``seed`` through ``seed + 3``."""
        if not 0 <= seed <= _MASK32:
            raise ValueError(f"seed must be an unsigned 32-bit integer, got {seed}")
        return self._with(
            _seed=seed,
            _distort=tuple(
                f.set_seed((seed + offset) & _MASK32)
                for offset, f in enumerate(self._distort)
            ),
        )

    def get(self, point: Sequence[float]) -> float:
        coords = tuple(point)
        dims = len(coords)
        if dims not in (2, 3, 4):
            raise ValueError(f"points must have 2, 3 or 4 coordinates, got {dims}")
        displaced = []
        for coord, distort, offsets in zip(coords, self._distort, _OFFSETS):
            sample = tuple(c + o / 65536.0 for c, o in zip(coords, offsets))
            displaced.append(coord + distort.get(sample) * self.power)
        return self.source.get(tuple(displaced))

    def __repr__(self) -> str:
        return (
            f"Turbulence(frequency={self.frequency}, power={self.power}, "
            f"roughness={self.roughness}, seed={self._seed})"
        )