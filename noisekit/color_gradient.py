"""Colour gradients that map noise values to RGBA colours."""

from __future__ import annotations

import math
import sys
from collections.abc import Sequence

Color = tuple[int, int, int, int]

_EPSILON = sys.float_info.epsilon
_BLACK: Color = (0, 0, 0, 0)


def _as_color(color: Sequence[int]) -> Color:
    channels = tuple(int(c) for c in color)
    if len(channels) != 4:
        raise ValueError(f"a color has 4 channels, got {len(channels)}")
    for channel in channels:
        if not 0 <= channel <= 255:
            raise ValueError(f"color channels must be in 0..255, got {channel}")
    return channels  # type: ignore[return-value]


def _to_u8(value: float) -> int:
    if math.isnan(value):
        return 0
    return int(max(0.0, min(value, 255.0)))


def interpolate_color(
    color0: Sequence[int], color1: Sequence[int], alpha: float
) -> Color:
    """Linearly interpolate each channel between two colours."""

    def blend(channel0: int, channel1: int) -> int:
        c0 = channel0 / 255.0
        c1 = channel1 / 255.0
        return _to_u8(((c1 - c0) * alpha + c0) * 255.0)

    return tuple(blend(a, b) for a, b in zip(color0, color1))  # type: ignore[return-value]


class ColorGradient:
    """Ordered gradient points spanning a domain; grayscale from -1 to 1 by default.

    The building methods return a new gradient and leave the original intact.
    """

    __slots__ = ("_points", "_min", "_max")

    def __init__(self) -> None:
        self._points: tuple[tuple[float, Color], ...] = ()
        self._min = 0.0
        self._max = 1.0
        grayscale = self.build_grayscale_gradient()
        self._points, self._min, self._max = (
            grayscale._points,
            grayscale._min,
            grayscale._max,
        )

    def _copy(
        self,
        points: tuple[tuple[float, Color], ...],
        domain_min: float,
        domain_max: float,
    ) -> ColorGradient:
        gradient = ColorGradient.__new__(ColorGradient)
        gradient._points = points
        gradient._min = domain_min
        gradient._max = domain_max
        return gradient

    @property
    def points(self) -> tuple[tuple[float, Color], ...]:
        """The gradient points as ``(position, color)`` pairs in order."""
        return self._points

    @property
    def domain(self) -> tuple[float, float]:
        return (self._min, self._max)

    def add_gradient_point(self, pos: float, color: Sequence[int]) -> ColorGradient:
        new_point = (pos, _as_color(color))
        points = self._points
        if self._min > pos:
            return self._copy((new_point,) + points, pos, self._max)
        if self._max < pos:
            return self._copy(points + (new_point,), self._min, pos)
        if any(abs(p - pos) < _EPSILON for p, _ in points):
            return self._copy(points, self._min, self._max)
        insertion = next((i for i, (p, _) in enumerate(points) if p >= pos), len(points))
        new_points = points[:insertion] + (new_point,) + points[insertion:]
        return self._copy(new_points, self._min, self._max)

    def clear_gradient(self) -> ColorGradient:
        return self._copy((), 0.0, 0.0)

    def build_grayscale_gradient(self) -> ColorGradient:
        return (
            self.clear_gradient()
            .add_gradient_point(-1.0, (0, 0, 0, 255))
            .add_gradient_point(1.0, (255, 255, 255, 255))
        )

    def build_terrain_gradient(self) -> ColorGradient:
        stops = [
            (-1.00, (0, 0, 0, 255)),
            (-256.0 / 16384.0, (6, 58, 127, 255)),
            (-1.0 / 16384.0, (14, 112, 192, 255)),
            (0.0, (70, 120, 60, 255)),
            (1024.0 / 16384.0, (110, 140, 75, 255)),
            (2048.0 / 16384.0, (160, 140, 111, 255)),
            (3072.0 / 16384.0, (184, 163, 141, 255)),
            (4096.0 / 16384.0, (128, 128, 128, 255)),
            (5632.0 / 16384.0, (128, 128, 128, 255)),
            (6144.0 / 16384.0, (250, 250, 250, 255)),
            (1.0, (255, 255, 255, 255)),
        ]
        return self._build(stops)

    def build_rainbow_gradient(self) -> ColorGradient:
        stops = [
            (-1.0, (255, 0, 0, 255)),
            (-0.7, (255, 255, 0, 255)),
            (-0.4, (0, 255, 0, 255)),
            (0.0, (0, 255, 255, 255)),
            (0.3, (0, 0, 255, 255)),
            (0.6, (255, 0, 255, 255)),
            (1.0, (255, 0, 0, 255)),
        ]
        return self._build(stops)

    def _build(self, stops: list[tuple[float, Color]]) -> ColorGradient:
        gradient = self.clear_gradient()
        for pos, color in stops:
            gradient = gradient.add_gradient_point(pos, color)
        return gradient

    def get_color(self, pos: float) -> Color:
        """Colour at ``pos``; black with zero alpha if the gradient is empty."""
        points = self._points
        if not points:
            return _BLACK
        if pos < self._min:
            return points[0][1]
        if pos > self._max:
            return points[-1][1]
        color = _BLACK
        for (pos0, color0), (pos1, color1) in zip(points, points[1:]):
            if pos0 <= pos < pos1:
                alpha = (pos - pos0) / (pos1 - pos0)
                color = interpolate_color(color0, color1, alpha)
        return color

    def __repr__(self) -> str:
        return f"ColorGradient(points={self._points!r}, domain={self.domain!r})"