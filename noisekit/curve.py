"""Maps a source's output onto a cubic spline defined by control points."""

from __future__ import annotations

import sys
from collections.abc import Sequence
from dataclasses import dataclass, replace
from typing import Any

_EPSILON = sys.float_info.epsilon


def _cubic(n0: float, n1: float, n2: float, n3: float, alpha: float) -> float:
    p = (n3 - n2) - (n0 - n1)
    q = (n0 - n1) - p
    r = n2 - n0
    s = n1
    return p * alpha * alpha * alpha + q * alpha * alpha + r * alpha + s


def _clamp(value: int, low: int, high: int) -> int:
    return max(low, min(value, high))


@dataclass
class Curve:
    """Spline mapping of a source's output; needs at least four control points."""

    source: Any
    control_points: tuple[tuple[float, float], ...] = ()

    def add_control_point(self, input_value: float, output_value: float) -> Curve:
        """Return a curve with the point added; inputs already present are ignored."""
        points = self.control_points
        if any(abs(inp - input_value) < _EPSILON for inp, _ in points):
            return replace(self)
        insertion = next(
            (i for i, (inp, _) in enumerate(points) if inp >= input_value), len(points)
        )
        new_points = points[:insertion] + ((input_value, output_value),) + points[insertion:]
        return replace(self, control_points=new_points)

    def get(self, point: Sequence[float]) -> float:
        points = self.control_points
        count = len(points)
        if count < 4:
            raise ValueError(f"a curve needs at least 4 control points, has {count}")

        source_value = self.source.get(point)

        index_pos = next(
            (i for i, (inp, _) in enumerate(points) if inp > source_value), count
        )
        index_pos = _clamp(index_pos, 2, count)

        last = count - 1
        index0 = _clamp(index_pos - 2, 0, last)
        index1 = _clamp(index_pos - 1, 0, last)
        index2 = _clamp(index_pos, 0, last)
        index3 = _clamp(index_pos + 1, 0, last)

        if index1 == index2:
            return points[index1][1]

        input0 = points[index1][0]
        input1 = points[index2][0]
        alpha = (source_value - input0) / (input1 - input0)

        return _cubic(
            points[index0][1],
            points[index1][1],
            points[index2][1],
            points[index3][1],
            alpha,
        )