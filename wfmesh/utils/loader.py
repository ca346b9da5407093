# -*- coding: utf-8 -*-
"""
Загрузка OBJ сразу в numpy‑массивы (позиции, нормали, цвета, texcoords, индексы).
"""

from wfmesh.loader.obj_loader import OBJLoader, OBJLoaderMetaData
from wfmesh.math.mat4 import Mat4
from wfmesh.mesh.buffers import MeshBuffers
from wfmesh.utils.config import LoaderConfig


def load_obj(path, transform: Mat4 = None, config: LoaderConfig = None):
    """Вернуть (MeshBuffers, OBJLoaderMetaData) для одного файла."""
    vertices = []
    indices = []
    meta = OBJLoaderMetaData()
    OBJLoader.parse_file(path, transform, vertices, indices, meta, config)
    return MeshBuffers.from_vertices(vertices, indices), meta
