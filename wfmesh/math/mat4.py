# wfmesh/math/mat4.py
"""
Аффинная матрица 4×4 (row‑major, перенос в столбце 3).

Базисные векторы i/j/k – это столбцы 0..2 линейной части.
"""
import numpy as np
from math import radians, sin, cos

from wfmesh.math.vec3 import Vec3


class Mat4:
    __slots__ = ("m",)

    def __init__(self, array: np.ndarray = None):
        if array is None:
            self.m = np.identity(4, dtype=np.float32)
        else:
            self.m = np.array(array, dtype=np.float32).reshape((4, 4))

    @staticmethod
    def identity():
        return Mat4(np.identity(4, dtype=np.float32))

    @staticmethod
    def translate(x: float, y: float, z: float):
        m = np.identity(4, dtype=np.float32)
        m[0, 3] = x
        m[1, 3] = y
        m[2, 3] = z
        return Mat4(m)

    @staticmethod
    def scale(sx: float, sy: float, sz: float):
        m = np.identity(4, dtype=np.float32)
        m[0, 0] = sx
        m[1, 1] = sy
        m[2, 2] = sz
        return Mat4(m)

    @staticmethod
    def rotate_x(angle_deg: float):
        a = radians(angle_deg)
        c, s = cos(a), sin(a)
        m = np.identity(4, dtype=np.float32)
        m[1, 1] = c
        m[1, 2] = -s
        m[2, 1] = s
        m[2, 2] = c
        return Mat4(m)

    @staticmethod
    def rotate_y(angle_deg: float):
        a = radians(angle_deg)
        c, s = cos(a), sin(a)
        m = np.identity(4, dtype=np.float32)
        m[0, 0] = c
        m[0, 2] = s
        m[2, 0] = -s
        m[2, 2] = c
        return Mat4(m)

    @staticmethod
    def rotate_z(angle_deg: float):
        a = radians(angle_deg)
        c, s = cos(a), sin(a)
        m = np.identity(4, dtype=np.float32)
        m[0, 0] = c
        m[0, 1] = -s
        m[1, 0] = s
        m[1, 1] = c
        return Mat4(m)

    @staticmethod
    def from_euler(pitch: float, yaw: float, roll: float):
        Rx = Mat4.rotate_x(pitch)
        Ry = Mat4.rotate_y(yaw)
        Rz = Mat4.rotate_z(roll)
        return Ry @ Rx @ Rz

    @staticmethod
    def from_basis(i_basis: Vec3, j_basis: Vec3, k_basis: Vec3,
                   translation: Vec3 = None) -> "Mat4":
        """Собрать матрицу из трёх базисных столбцов и переноса."""
        m = np.identity(4, dtype=np.float32)
        m[:3, 0] = i_basis.as_np()
        m[:3, 1] = j_basis.as_np()
        m[:3, 2] = k_basis.as_np()
        if translation is not None:
            m[:3, 3] = translation.as_np()
        return Mat4(m)

    # -----------------------------------------------------------------
    # базис
    # -----------------------------------------------------------------
    def get_i_basis_3d(self) -> Vec3:
        return Vec3.from_np(self.m[:3, 0])

    def get_j_basis_3d(self) -> Vec3:
        return Vec3.from_np(self.m[:3, 1])

    def get_k_basis_3d(self) -> Vec3:
        return Vec3.from_np(self.m[:3, 2])

    def get_translation_3d(self) -> Vec3:
        return Vec3.from_np(self.m[:3, 3])

    def get_orthonormal_linear(self) -> "Mat4":
        """
        Линейная часть с независимо нормализованными базисными столбцами,
        без переноса. Корректна для нормалей только при вращении и
        равномерном масштабе: неравномерный масштаб даёт неперпендикулярные
        нормали (известное ограничение, inverse‑transpose не применяется).
        """
        return Mat4.from_basis(self.get_i_basis_3d().normalized(),
                               self.get_j_basis_3d().normalized(),
                               self.get_k_basis_3d().normalized())

    # -----------------------------------------------------------------
    # применение к точкам и векторам
    # -----------------------------------------------------------------
    def transform_position_3d(self, v: Vec3) -> Vec3:
        """Точка (w = 1): линейная часть + перенос."""
        return Vec3.from_np(self.m[:3, :3] @ v.as_np() + self.m[:3, 3])

    def transform_vector_quantity_3d(self, v: Vec3) -> Vec3:
        """Вектор (w = 0): только линейная часть."""
        return Vec3.from_np(self.m[:3, :3] @ v.as_np())

    def __matmul__(self, other: "Mat4") -> "Mat4":
        return Mat4(np.dot(self.m, other.m))

    def __repr__(self):
        return f"Mat4({self.m})"

    def to_np(self) -> np.ndarray:
        return self.m.copy()
