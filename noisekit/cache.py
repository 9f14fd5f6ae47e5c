"""Caching wrapper that remembers the last value computed by a source."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any


class Cache:
    """Return the source's previous result when asked again for the same point."""

    def __init__(self, source: Any) -> None:
        self.source = source
        self._value: float | None = None
        self._point: tuple[float, ...] = ()

    def get(self, point: Sequence[float]) -> float:
        point = tuple(point)
        if self._value is not None:
            if len(self._point) != len(point):
                raise ValueError(
                    f"point has {len(point)} coordinates, cached point has "
                    f"{len(self._point)}"
                )
            if all(a == b for a, b in zip(self._point, point)):
                return self._value
        value = self.source.get(point)
        self._value = value
        self._point = point
        return value