"""Shared machinery for fractal noise built from several octaves of a source."""

from __future__ import annotations

import copy
import math
from collections.abc import Callable, Iterable, Iterator, Sequence
from typing import Any

_MASK32 = 0xFFFFFFFF
_SUPPORTED_DIMENSIONS = (2, 3, 4)

SourceFactory = Callable[[int], Any]


def build_sources(source_factory: SourceFactory, seed: int, octaves: int) -> list[Any]:
    """Create one source per octave, seeded ``seed``, ``seed + 1``, and so on.

    Seeds are unsigned 32-bit values and wrap around past the top of that range.
    """
    if not 0 <= seed <= _MASK32:
        raise ValueError(f"seed must be an unsigned 32-bit integer, got {seed}")
    if octaves < 0:
        raise ValueError(f"octave count must not be negative, got {octaves}")
    return [source_factory((seed + offset) & _MASK32) for offset in range(octaves)]


def _as_point(point: Sequence[float]) -> tuple[float, ...]:
    coords = tuple(point)
    if len(coords) not in _SUPPORTED_DIMENSIONS:
        raise ValueError(f"points must have 2, 3 or 4 coordinates, got {len(coords)}")
    return coords


class MultiFractal:
    """Octave settings, per-octave sources and a scale factor for fractal noise.

    The ``set_*`` methods return a new instance and leave the original intact.
    ``source_factory`` is called with a seed and returns a noise source.
    """

    DEFAULT_SEED = 0
    DEFAULT_OCTAVES = 6
    DEFAULT_FREQUENCY = 1.0
    DEFAULT_LACUNARITY = math.pi * 2.0 / 3.0
    DEFAULT_PERSISTENCE = 0.5
    MAX_OCTAVES = 32

    def __init__(self, source_factory: SourceFactory, seed: int = DEFAULT_SEED) -> None:
        self.source_factory = source_factory
        self.octaves = self.DEFAULT_OCTAVES
        self.frequency = self.DEFAULT_FREQUENCY
        self.lacunarity = self.DEFAULT_LACUNARITY
        self.persistence = self.DEFAULT_PERSISTENCE
        self._sources = build_sources(source_factory, seed, self.octaves)
        self._seed = seed
        self._scale_factor = self._initial_scale_factor()

    def _initial_scale_factor(self) -> float:
        return self._calc_scale_factor(self.persistence, self.octaves)

    def _calc_scale_factor(self, persistence: float, octaves: int) -> float:
        denom = sum(persistence**x for x in range(1, octaves + 1))
        return 1.0 / denom

    def _with(self, **changes: Any) -> Any:
        new = copy.copy(self)
        for name, value in changes.items():
            setattr(new, name, value)
        return new

    @property
    def seed(self) -> int:
        return self._seed

    @property
    def sources(self) -> tuple[Any, ...]:
        return tuple(self._sources)

    @property
    def scale_factor(self) -> float:
        return self._scale_factor

    def set_octaves(self, octaves: int) -> Any:
        """Set the octave count, clamped to ``1..MAX_OCTAVES``."""
        if self.octaves == octaves:
            return self
        octaves = max(1, min(octaves, self.MAX_OCTAVES))
        new = self._with(
            octaves=octaves,
            _sources=build_sources(self.source_factory, self._seed, octaves),
        )
        new._scale_factor = new._calc_scale_factor(new.persistence, octaves)
        return new

    def set_frequency(self, frequency: float) -> Any:
        return self._with(frequency=frequency)

    def set_lacunarity(self, lacunarity: float) -> Any:
        return self._with(lacunarity=lacunarity)

    def set_persistence(self, persistence: float) -> Any:
        new = self._with(persistence=persistence)
        new._scale_factor = new._calc_scale_factor(persistence, new.octaves)
        return new

    def set_seed(self, seed: int) -> Any:
        if self._seed == seed:
            return self
        return self._with(
            _seed=seed,
            _sources=build_sources(self.source_factory, seed, self.octaves),
        )

    def set_sources(self, sources: Iterable[Any]) -> Any:
        """Replace the per-octave sources; the octave count is left unchanged."""
        return self._with(_sources=list(sources))

    def _octaves(self, point: Sequence[float]) -> Iterator[tuple[int, Any, tuple[float, ...]]]:
        """Yield ``(index, source, point)`` for each octave at rising frequency."""
        coords = _as_point(point)
        if len(self._sources) < self.octaves:
            raise ValueError(
                f"{self.octaves} octaves need as many sources, have {len(self._sources)}"
            )
        coords = tuple(c * self.frequency for c in coords)
        for index in range(self.octaves):
            yield index, self._sources[index], coords
            coords = tuple(c * self.lacunarity for c in coords)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(octaves={self.octaves}, frequency={self.frequency}, "
            f"lacunarity={self.lacunarity}, persistence={self.persistence}, "
            f"seed={self._seed})"
        )