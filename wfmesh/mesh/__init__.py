from wfmesh.mesh.vertex import Vertex
from wfmesh.mesh.buffers import MeshBuffers

__all__ = ["Vertex", "MeshBuffers"]
