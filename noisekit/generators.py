"""Simple generator noise functions."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass


@dataclass
class Constant:
    """Outputs the same value at every point."""

    value: float

    def get(self, point: Sequence[float]) -> float:
        return self.value