"""Noise functions that move the input point before querying a source."""

from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import dataclass, replace
from typing import Any

_SUPPORTED_DIMENSIONS = (2, 3, 4)


def _as_point(point: Sequence[float]) -> tuple[float, ...]:
    coords = tuple(point)
    if len(coords) not in _SUPPORTED_DIMENSIONS:
        raise ValueError(
            f"points must have 2, 3 or 4 coordinates, got {len(coords)}"
        )
    return coords


@dataclass
class Displace:
    """Offsets each coordinate by the output of its own displacement source."""

    source: Any
    x_displace: Any
    y_displace: Any
    z_displace: Any = None
    u_displace: Any = None

    def get(self, point: Sequence[float]) -> float:
        coords = _as_point(point)
        displacers = (self.x_displace, self.y_displace, self.z_displace, self.u_displace)
        needed = displacers[: len(coords)]
        axes = "xyzu"
        for axis, displacer in zip(axes, needed):
            if displacer is None:
                raise ValueError(
                    f"{len(coords)}-dimensional displacement needs a {axis}_displace source"
                )
        moved = tuple(c + d.get(coords) for c, d in zip(coords, needed))
        return self.source.get(moved)


@dataclass
class RotatePoint:
    """Rotates the input point around the origin; angles are in degrees."""

    source: Any
    x_angle: float = 0.0
    y_angle: float = 0.0
    z_angle: float = 0.0
    u_angle: float = 0.0

    def set_x_angle(self, x_angle: float) -> RotatePoint:
        return replace(self, x_angle=x_angle)

    def set_y_angle(self, y_angle: float) -> RotatePoint:
        return replace(self, y_angle=y_angle)

    def set_z_angle(self, z_angle: float) -> RotatePoint:
        return replace(self, z_angle=z_angle)

    def set_u_angle(self, u_angle: float) -> RotatePoint:
        return replace(self, u_angle=u_angle)

    def set_angles(
        self, x_angle: float, y_angle: float, z_angle: float, u_angle: float
    ) -> RotatePoint:
        return replace(
            self, x_angle=x_angle, y_angle=y_angle, z_angle=z_angle, u_angle=u_angle
        )

    def get(self, point: Sequence[float]) -> float:
        coords = _as_point(point)
        if len(coords) == 2:
            return self.source.get(self._rotate_2d(coords))
        if len(coords) == 3:
            return self.source.get(self._rotate_3d(coords))
        raise ValueError("4-dimensional rotation is not supported")

    def _rotate_2d(self, coords: tuple[float, ...]) -> tuple[float, float]:
        x, y = coords
        theta = math.radians(self.z_angle)
        cos_t, sin_t = math.cos(theta), math.sin(theta)
        return (x * cos_t - y * sin_t, x * sin_t + y * cos_t)

    def _rotate_3d(self, coords: tuple[float, ...]) -> tuple[float, float, float]:
        x_rad = math.radians(self.x_angle)
        y_rad = math.radians(self.y_angle)
        z_rad = math.radians(self.z_angle)
        x_cos, y_cos, z_cos = math.cos(x_rad), math.cos(y_rad), math.cos(z_rad)
        x_sin, y_sin, z_sin = math.sin(x_rad), math.sin(y_rad), math.sin(z_rad)

        x1 = x_sin * y_sin * z_sin + y_cos * z_cos
        y1 = x_cos * z_sin
        z1 = y_sin * z_cos - y_cos * x_sin * z_sin
        x2 = y_sin * x_sin * z_cos - y_cos * z_sin
        y2 = x_cos * z_cos
        z2 = -y_cos * x_sin * z_cos - y_sin * z_sin
        x3 = -y_sin * x_cos
        y3 = x_sin
        z3 = y_cos * x_cos

        px, py, pz = coords
        return (
            x1 * px + y1 * py + z1 * pz,
            x2 * px + y2 * py + z2 * pz,
            x3 * px + y3 * py + z3 * pz,
        )


@dataclass
class ScalePoint:
    """Multiplies each coordinate of the input point by a scaling factor."""

    source: Any
    x_scale: float = 1.0
    y_scale: float = 1.0
    z_scale: float = 1.0
    u_scale: float = 1.0

    def set_x_scale(self, x_scale: float) -> ScalePoint:
        return replace(self, x_scale=x_scale)

    def set_y_scale(self, y_scale: float) -> ScalePoint:
        return replace(self, y_scale=y_scale)

    def set_z_scale(self, z_scale: float) -> ScalePoint:
        return replace(self, z_scale=z_scale)

    def set_u_scale(self, u_scale: float) -> ScalePoint:
        return replace(self, u_scale=u_scale)

    def set_scale(self, scale: float) -> ScalePoint:
        return replace(self, x_scale=scale, y_scale=scale, z_scale=scale, u_scale=scale)

    def set_all_scales(
        self, x_scale: float, y_scale: float, z_scale: float, u_scale: float
    ) -> ScalePoint:
        return replace(
            self, x_scale=x_scale, y_scale=y_scale, z_scale=z_scale, u_scale=u_scale
        )

    def get(self, point: Sequence[float]) -> float:
        coords = _as_point(point)
        scales = (self.x_scale, self.y_scale, self.z_scale, self.u_scale)
        return self.source.get(tuple(c * s for c, s in zip(coords, scales)))


@dataclass
class TranslatePoint:
    """Adds a translation amount to each coordinate of the input point."""

    source: Any
    x_translation: float = 0.0
    y_translation: float = 0.0
    z_translation: float = 0.0
    u_translation: float = 0.0

    def set_x_translation(self, x_translation: float) -> TranslatePoint:
        return replace(self, x_translation=x_translation)

    def set_y_translation(self, y_translation: float) -> TranslatePoint:
        return replace(self, y_translation=y_translation)

    def set_z_translation(self, z_translation: float) -> TranslatePoint:
        return replace(self, z_translation=z_translation)

    def set_u_translation(self, u_translation: float) -> TranslatePoint:
        return replace(self, u_translation=u_translation)

    def set_translation(self, translation: float) -> TranslatePoint:
        return replace(
            self,
            x_translation=translation,
            y_translation=translation,
            z_translation=translation,
            u_translation=translation,
        )

    def set_all_translations(
        self,
        x_translation: float,
        y_translation: float,
        z_translation: float,
        u_translation: float,
    ) -> TranslatePoint:
        return replace(
            self,
            x_translation=x_translation,
            y_translation=y_translation,
            z_translation=z_translation,
            u_translation=u_translation,
        )

    def get(self, point: Sequence[float]) -> float:
        coords = _as_point(point)
        offsets = (
            self.x_translation,
            self.y_translation,
            self.z_translation,
            self.u_translation,
        )
        return self.source.get(tuple(c + o for c, o in zip(coords, offsets)))