# -*- coding: utf-8 -*-
"""
Вершина выходного буфера: позиция, нормаль, цвет, UV.
"""

from wfmesh.math.vec2 import Vec2
from wfmesh.math.vec3 import Vec3
from wfmesh.math.vec4 import Vec4

DEFAULT_NORMAL = (1.0, 0.0, 0.0)
DEFAULT_UV = (0.0, 0.0)


class Vertex:
    """Независимо изменяемая запись вершины (без дедупликации)."""

    __slots__ = ("position", "normal", "color", "uv")

    def __init__(self,
                 position: Vec3,
                 normal: Vec3 = None,
                 color: Vec4 = None,
                 uv: Vec2 = None):
        self.position = position
        self.normal = normal if normal is not None else Vec3(*DEFAULT_NORMAL)
        self.color = color if color is not None else Vec4.white()
        self.uv = uv if uv is not None else Vec2(*DEFAULT_UV)

    def copy(self) -> "Vertex":
        return Vertex(Vec3(*self.position.as_np()),
                      Vec3(*self.normal.as_np()),
                      Vec4(*self.color.as_np()),
                      Vec2(*self.uv.as_np()))

    def __eq__(self, other):
        if not isinstance(other, Vertex):
            return NotImplemented
        return (self.position == other.position
                and self.normal == other.normal
                and self.color == other.color
                and self.uv == other.uv)

    __hash__ = None

    def __repr__(self):
        return f"Vertex(pos={self.position}, n={self.normal}, uv={self.uv})"
