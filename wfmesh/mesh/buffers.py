"""
Плоские numpy‑буферы, готовые к загрузке в GPU.
"""

from typing import Sequence

import numpy as np

from wfmesh.mesh.vertex import Vertex


class MeshBuffers:
    """Массивы атрибутов вершин + индексы (float32 / uint32)."""

    def __init__(self,
                 positions: np.ndarray,
                 normals: np.ndarray,
                 colors: np.ndarray,
                 texcoords: np.ndarray,
                 indices: np.ndarray):
        self.positions = np.asarray(positions, dtype=np.float32).reshape((-1, 3))
        self.normals = np.asarray(normals, dtype=np.float32).reshape((-1, 3))
        self.colors = np.asarray(colors, dtype=np.float32).reshape((-1, 4))
        self.texcoords = np.asarray(texcoords, dtype=np.float32).reshape((-1, 2))
        self.indices = np.asarray(indices, dtype=np.uint32).ravel()

    @classmethod
    def from_vertices(cls, vertices: Sequence[Vertex],
                      indices: Sequence[int]) -> "MeshBuffers":
        n = len(vertices)
        positions = np.zeros((n, 3), dtype=np.float32)
        normals = np.zeros((n, 3), dtype=np.float32)
        colors = np.zeros((n, 4), dtype=np.float32)
        texcoords = np.zeros((n, 2), dtype=np.float32)
        for i, v in enumerate(vertices):
            positions[i] = v.position.as_np()
            normals[i] = v.normal.as_np()
            colors[i] = v.color.as_np()
            texcoords[i] = v.uv.as_np()
        return cls(positions, normals, colors, texcoords,
                   np.asarray(indices, dtype=np.uint32))

    @property
    def vertex_count(self) -> int:
        return len(self.positions)

    @property
    def index_count(self) -> int:
        return len(self.indices)

    def interleaved(self) -> np.ndarray:
        """pos(3) + normal(3) + color(4) + uv(2) на вершину, одним массивом."""
        return np.column_stack(
            [self.positions, self.normals, self.colors, self.texcoords]
        ).astype(np.float32).ravel()

    @property
    def bounding_sphere(self):
        """(центр, радиус) в пространстве модели."""
        if self.vertex_count == 0:
            return np.zeros(3, dtype=np.float32), 0.0
        centre = self.positions.mean(axis=0).astype(np.float32)
        radius = np.linalg.norm(self.positions - centre, axis=1).max()
        return centre, float(radius)
