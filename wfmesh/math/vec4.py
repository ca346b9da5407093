# wfmesh/math/vec4.py
"""
4‑мерный вектор (float32). В загрузчике используется как RGBA‑цвет вершины.
"""

import numpy as np
from typing import Tuple


class Vec4:
    """Короткий вектор‑4 (float32); w – альфа‑канал (alias ``a``)."""

    __slots__ = ("_v",)

    def __init__(self, x: float = 0.0, y: float = 0.0,
                 z: float = 0.0, w: float = 0.0):
        self._v = np.array([x, y, z, w], dtype=np.float32)

    @staticmethod
    def white() -> "Vec4":
        """Непрозрачный белый (1, 1, 1, 1)."""
        return Vec4(1.0, 1.0, 1.0, 1.0)

    # -----------------------------------------------------------------
    # свойства
    # -----------------------------------------------------------------
    @property
    def x(self) -> float:
        return float(self._v[0])

    @property
    def y(self) -> float:
        return float(self._v[1])

    @property
    def z(self) -> float:
        return float(self._v[2])

    @property
    def w(self) -> float:
        return float(self._v[3])

    a = w

    def __eq__(self, other):
        if not isinstance(other, Vec4):
            return NotImplemented
        return bool(np.array_equal(self._v, other._v))

    __hash__ = None

    def as_np(self) -> np.ndarray:
        """Копия 4‑компонентного ndarray (float32)."""
        return self._v.copy()

    def to_tuple(self) -> Tuple[float, float, float, float]:
        return tuple(self._v.tolist())

    def __repr__(self) -> str:
        return f"Vec4({self.x:.3f}, {self.y:.3f}, {self.z:.3f}, {self.w:.3f})"
