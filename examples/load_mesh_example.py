import sys

import wfmesh as wf
from wfmesh.utils import logger


def create_cube_obj():
    """Куб из квадов – для отладки без файла."""
    return "\n".join([
        "v -0.5 -0.5 0.5", "v 0.5 -0.5 0.5", "v 0.5 0.5 0.5", "v -0.5 0.5 0.5",
        "v -0.5 -0.5 -0.5", "v 0.5 -0.5 -0.5", "v 0.5 0.5 -0.5", "v -0.5 0.5 -0.5",
        "f 1 2 3 4",  # Front
        "f 8 7 6 5",  # Back
        "f 5 6 2 1",  # Bottom
        "f 4 3 7 8",  # Top
        "f 5 1 4 8",  # Left
        "f 2 6 7 3",  # Right
    ])


if __name__ == "__main__":
    transform = wf.Mat4.from_euler(0, 45, 0) @ wf.Mat4.scale(2, 2, 2)
    vertices, indices = [], []
    meta = wf.OBJLoaderMetaData()

    if len(sys.argv) > 1:
        wf.OBJLoader.parse_file(sys.argv[1], transform, vertices, indices, meta)
    else:
        wf.OBJLoader.parse_string(create_cube_obj(), transform, vertices, indices, meta)

    buffers = wf.MeshBuffers.from_vertices(vertices, indices)
    centre, radius = buffers.bounding_sphere
    logger.info(f"Triangles: {meta.num_triangles}, vertices: {meta.num_vertices}, "
                f"indices: {meta.num_indices}")
    logger.info(f"Bounding sphere: centre={centre}, radius={radius:.3f}")
    logger.info(f"Parse time: {meta.total_parse_and_load_time * 1000.0:.2f} ms")
