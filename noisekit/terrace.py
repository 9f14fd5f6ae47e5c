"""Maps a source's output onto a terrace-forming curve."""

from __future__ import annotations

import sys
from collections.abc import Sequence
from dataclasses import dataclass, replace
from typing import Any

_EPSILON = sys.float_info.epsilon


def _linear(a: float, b: float, alpha: float) -> float:
    return (b - a) * alpha + a


def _clamp(value: int, low: int, high: int) -> int:
    return max(low, min(value, high))


@dataclass
class Terrace:
    """Terrace curve through sorted control points; needs at least two of them.

    Output below the lowest or above the highest control point is clamped to
    that control point.
    """

    source: Any
    invert_terraces: bool = False
    control_points: tuple[float, ...] = ()

    def add_control_point(self, control_point: float) -> Terrace:
        """Return a terrace with the point added; duplicates are ignored."""
        points = self.control_points
        if any(abs(p - control_point) < _EPSILON for p in points):
            return replace(self)
        insertion = next(
            (i for i, p in enumerate(points) if p >= control_point), len(points)
        )
        new_points = points[:insertion] + (control_point,) + points[insertion:]
        return replace(self, control_points=new_points)

    def set_invert_terraces(self, invert_terraces: bool) -> Terrace:
        return replace(self, invert_terraces=invert_terraces)

    def get(self, point: Sequence[float]) -> float:
        points = self.control_points
        count = len(points)
        if count < 2:
            raise ValueError(f"a terrace needs at least 2 control points, has {count}")

        source_value = self.source.get(point)

        index_pos = next(
            (i for i, p in enumerate(points) if p >= source_value), count
        )
        last = count - 1
        index0 = _clamp(index_pos - 1, 0, last)
        index1 = _clamp(index_pos, 0, last)

        if index0 == index1:
            return points[index1]

        input0 = points[index0]
        input1 = points[index1]
        alpha = (source_value - input0) / (input1 - input0)

        if self.invert_terraces:
            alpha = 1.0 - alpha
            input0, input1 = input1, input0

        alpha *= alpha
        return _linear(input0, input1, alpha)