from wfmesh.loader.errors import (
    OBJParseError,
    MalformedNumberError,
    MalformedFaceError,
    IndexOutOfRangeError,
)
from wfmesh.loader.obj_loader import OBJLoader, OBJLoaderMetaData, FaceIndexGroup

__all__ = [
    "OBJLoader",
    "OBJLoaderMetaData",
    "FaceIndexGroup",
    "OBJParseError",
    "MalformedNumberError",
    "MalformedFaceError",
    "IndexOutOfRangeError",
]
