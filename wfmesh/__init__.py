"""
wfmesh – загрузчик Wavefront OBJ для рендер‑движка.
Декодирует текст OBJ в плоский буфер вершин/индексов + статистику.
"""

from wfmesh.utils import logger, LoaderConfig
from wfmesh.math import Vec2, Vec3, Vec4, Mat4
from wfmesh.mesh import Vertex, MeshBuffers
from wfmesh.loader import (
    OBJLoader,
    OBJLoaderMetaData,
    OBJParseError,
    MalformedNumberError,
    MalformedFaceError,
    IndexOutOfRangeError,
)
from wfmesh.utils.loader import load_obj

__version__ = "1.0.0"

__all__ = [
    "OBJLoader",
    "OBJLoaderMetaData",
    "OBJParseError",
    "MalformedNumberError",
    "MalformedFaceError",
    "IndexOutOfRangeError",
    "LoaderConfig",
    "load_obj",
    "Vertex",
    "MeshBuffers",
    "Vec2",
    "Vec3",
    "Vec4",
    "Mat4",
]
