# -*- coding: utf-8 -*-
"""
Двумерный вектор (float32) – текстурные координаты (u, v).
"""
from typing import Tuple

import numpy as np


class Vec2:
    __slots__ = ("_v",)

    def __init__(self, x: float = 0.0, y: float = 0.0):
        self._v = np.array([x, y], dtype=np.float32)

    @property
    def x(self) -> float:
        return float(self._v[0])

    @property
    def y(self) -> float:
        return float(self._v[1])

    def __eq__(self, other):
        if not isinstance(other, Vec2):
            return NotImplemented
        return bool(np.array_equal(self._v, other._v))

    __hash__ = None

    def as_np(self) -> np.ndarray:
        """Копия 2‑компонентного ndarray (float32)."""
        return self._v.copy()

    def to_tuple(self) -> Tuple[float, float]:
        return tuple(self._v.tolist())

    def __repr__(self) -> str:
        return f"Vec2({self.x:.3f}, {self.y:.3f})"
