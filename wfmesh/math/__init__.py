"""
Математический суб‑пакет: Vec2, Vec3, Vec4, Mat4.
"""

from wfmesh.math.vec2 import Vec2
from wfmesh.math.vec3 import Vec3
from wfmesh.math.vec4 import Vec4
from wfmesh.math.mat4 import Mat4

__all__ = ["Vec2", "Vec3", "Vec4", "Mat4"]
