# -*- coding: utf-8 -*-
"""
conftest.py – общие фикстуры: типовые OBJ‑тексты и помощник разбора.
"""

import pytest

from wfmesh.loader import OBJLoader, OBJLoaderMetaData

TRIANGLE_OBJ = """\
v 0 0 0
v 1 0 0
v 0 1 0
f 1 2 3
"""

QUAD_OBJ = """\
v 0 0 0
v 1 0 0
v 1 1 0
v 0 1 0
f 1 2 3 4
"""


@pytest.fixture
def triangle_obj() -> str:
    return TRIANGLE_OBJ


@pytest.fixture
def quad_obj() -> str:
    return QUAD_OBJ


@pytest.fixture
def parse():
    """Разобрать текст в новые (или переданные) буферы, вернуть (vertices, indices, meta)."""
    def _parse(text, transform=None, config=None, vertices=None, indices=None):
        vertices = [] if vertices is None else vertices
        indices = [] if indices is None else indices
        meta = OBJLoaderMetaData()
        OBJLoader.parse_string(text, transform, vertices, indices, meta, config)
        return vertices, indices, meta
    return _parse
