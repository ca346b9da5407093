# -*- coding: utf-8 -*-
"""
Декодер Wavefront OBJ → плоский буфер вершин + индексы.

Поддерживаются записи ``v``, ``vt``, ``vn`` и ``f``; всё остальное
(комментарии, группы, материалы) молча пропускается. Грани‑многоугольники
разбиваются веером от первого угла (предполагаются выпуклые плоские грани).
Вершины не дедуплицируются: каждый угол каждого треугольника – новая запись.

Результат добавляется в списки вызывающей стороны только после успешного
разбора всего текста: при ошибке её буферы не меняются.
"""

from dataclasses import dataclass
from typing import List, NamedTuple, Optional

import numpy as np

from wfmesh.loader.errors import (
    IndexOutOfRangeError,
    MalformedFaceError,
    MalformedNumberError,
)
from wfmesh.math.mat4 import Mat4
from wfmesh.math.vec2 import Vec2
from wfmesh.math.vec3 import Vec3
from wfmesh.math.vec4 import Vec4
from wfmesh.mesh.vertex import DEFAULT_NORMAL, DEFAULT_UV, Vertex
from wfmesh.utils.config import LoaderConfig
from wfmesh.utils.file_utils import read_file_to_string
from wfmesh.utils.logger import logger
from wfmesh.utils.profiler import Profiler


@dataclass
class OBJLoaderMetaData:
    """Статистика одного разбора. Заполняется целиком в конце."""
    num_positions: int = 0
    num_uvs: int = 0
    num_normals: int = 0
    num_faces: int = 0
    num_triangles: int = 0
    num_vertices: int = 0
    num_indices: int = 0
    total_parse_and_load_time: float = 0.0


class FaceIndexGroup(NamedTuple):
    """Ссылки одного угла грани, уже 0‑based; None – ссылки нет."""
    position: Optional[int]
    uv: Optional[int]
    normal: Optional[int]


class OBJLoader:
    """Точка входа: разбор файла или строки в буферы вызывающей стороны."""

    @staticmethod
    def parse_file(file_path,
                   transform: Mat4,
                   out_vertices: List[Vertex],
                   out_indices: List[int],
                   out_metadata: OBJLoaderMetaData = None,
                   config: LoaderConfig = None) -> OBJLoaderMetaData:
        text = read_file_to_string(file_path)
        return OBJLoader.parse_string(text, transform, out_vertices, out_indices,
                                      out_metadata, config, source=str(file_path))

    @staticmethod
    def parse_string(text: str,
                     transform: Mat4,
                     out_vertices: List[Vertex],
                     out_indices: List[int],
                     out_metadata: OBJLoaderMetaData = None,
                     config: LoaderConfig = None,
                     source: str = "<string>") -> OBJLoaderMetaData:
        parse = _OBJParse(transform, config or LoaderConfig(),
                          index_base=len(out_vertices))
        with Profiler(f"OBJLoader {source}") as prof:
            parse.run(text)

        # атомарная фиксация результата
        out_vertices.extend(parse.vertices)
        out_indices.extend(parse.indices)

        meta = out_metadata if out_metadata is not None else OBJLoaderMetaData()
        meta.num_positions = len(parse.positions)
        meta.num_uvs = len(parse.uvs)
        meta.num_normals = len(parse.normals)
        meta.num_faces = parse.num_faces
        meta.num_triangles = parse.num_triangles
        meta.num_vertices = len(out_vertices)
        meta.num_indices = len(out_indices)
        meta.total_parse_and_load_time = prof.elapsed

        logger.info(
            f"[OBJLoader] {source}: {meta.num_positions} positions, "
            f"{meta.num_uvs} uvs, {meta.num_normals} normals, "
            f"{meta.num_faces} faces -> {meta.num_triangles} triangles "
            f"({prof.elapsed * 1000.0:.2f} ms)")
        return meta


class _OBJParse:
    """Состояние одного разбора: сырые атрибуты и локальные выходные буферы."""

    def __init__(self, transform: Mat4, config: LoaderConfig, index_base: int = 0):
        self.transform = transform if transform is not None else Mat4.identity()
        self.normal_transform = self.transform.get_orthonormal_linear()
        self.config = config
        self.index_base = index_base

        self.positions: List[Vec3] = []
        self.uvs: List[Vec2] = []
        self.normals: List[Vec3] = []

        self.vertices: List[Vertex] = []
        self.indices: List[int] = []
        self.num_faces = 0
        self.num_triangles = 0

        self._line_number = 0
        self._line = ""

    # -----------------------------------------------------------------
    # сканер записей
    # -----------------------------------------------------------------
    def run(self, text: str):
        for line_number, line in enumerate(text.splitlines(), start=1):
            self._line_number, self._line = line_number, line
            if self.config.strip_inline_comments:
                line = line.split("#", 1)[0]
            words = line.split()
            if not words:
                continue
            tag, args = words[0], words[1:]
            if tag == "v":
                self._add_position(args)
            elif tag == "vt":
                self._add_uv(args)
            elif tag == "vn":
                self._add_normal(args)
            elif tag == "f":
                self._add_face(args)

        if self.num_faces == 0:
            self._emit_point_cloud()
        if not self.normals:
            self._generate_flat_normals()

    # -----------------------------------------------------------------
    # накопители атрибутов
    # -----------------------------------------------------------------
    def _add_position(self, args):
        point = Vec3(*self._read_floats(args, 3))
        self.positions.append(self.transform.transform_position_3d(point))

    def _add_uv(self, args):
        self.uvs.append(Vec2(*self._read_floats(args, 2)))

    def _add_normal(self, args):
        normal = Vec3(*self._read_floats(args, 3))
        self.normals.append(self.normal_transform.transform_vector_quantity_3d(normal))

    def _read_floats(self, args, count: int) -> List[float]:
        values = []
        for i in range(count):
            if i >= len(args):
                if self.config.strict_numbers:
                    self._fail(MalformedNumberError,
                               f"expected {count} numbers, got {len(args)}")
                values.append(0.0)
                continue
            try:
                values.append(float(args[i]))
            except ValueError:
                if self.config.strict_numbers:
                    self._fail(MalformedNumberError, f"not a number: {args[i]!r}")
                values.append(0.0)
        return values

    # -----------------------------------------------------------------
    # грани
    # -----------------------------------------------------------------
    def _add_face(self, args):
        if len(args) < 3:
            self._fail(MalformedFaceError,
                       f"face needs at least 3 corners, got {len(args)}")

        candidates = [self._resolve_group(self._parse_group(chunk)) for chunk in args]

        if len(candidates) == 3:
            for vertex in candidates:
                self._emit(vertex)
        else:
            for k in range(1, len(candidates) - 1):
                self._emit(candidates[0].copy())
                self._emit(candidates[k].copy())
                self._emit(candidates[k + 1].copy())

        self.num_faces += 1
        self.num_triangles += len(candidates) - 2

    def _parse_group(self, chunk: str) -> FaceIndexGroup:
        fields = chunk.split("/")
        refs = [self._read_index(fields[i]) if i < len(fields) else None
                for i in range(3)]
        # нечисловой индекс в lenient‑режиме = "нет ссылки": для UV и нормали
        # это значение по‑умолчанию, а угол без позиции – ошибка грани
        if refs[0] is None:
            self._fail(MalformedFaceError, f"corner {chunk!r} has no position index")
        return FaceIndexGroup(*refs)

    def _read_index(self, field: str) -> Optional[int]:
        if field == "":
            return None
        try:
            value = int(field)
        except ValueError:
            if self.config.strict_numbers:
                self._fail(MalformedNumberError, f"not an index: {field!r}")
            return None
        return value - 1

    def _resolve_group(self, group: FaceIndexGroup) -> Vertex:
        position = self._lookup(group.position, self.positions, "position")
        uv = self._lookup(group.uv, self.uvs, "uv")
        normal = self._lookup(group.normal, self.normals, "normal")
        return Vertex(Vec3(*position.as_np()),
                      Vec3(*normal.as_np()) if normal is not None else Vec3(*DEFAULT_NORMAL),
                      Vec4.white(),
                      Vec2(*uv.as_np()) if uv is not None else Vec2(*DEFAULT_UV))

    def _lookup(self, index: Optional[int], items: list, kind: str):
        if index is None:
            return None
        if 0 <= index < len(items):
            return items[index]
        if self.config.index_policy == "clamp" and items:
            clamped = min(max(index, 0), len(items) - 1)
            logger.warning(
                f"[OBJLoader] line {self._line_number}: {kind} index {index + 1} "
                f"clamped to {clamped + 1}")
            return items[clamped]
        self._fail(IndexOutOfRangeError,
                   f"{kind} index {index + 1} out of range (have {len(items)})")

    def _emit(self, vertex: Vertex):
        self.indices.append(self.index_base + len(self.vertices))
        self.vertices.append(vertex)

    # -----------------------------------------------------------------
    # пост‑проход
    # -----------------------------------------------------------------
    def _emit_point_cloud(self):
        for position in self.positions:
            self._emit(Vertex(Vec3(*position.as_np())))

    def _generate_flat_normals(self):
        count = len(self.vertices)
        full = count - count % 3
        if full != count:
            logger.warning(
                f"[OBJLoader] {count - full} trailing vertices keep the default "
                f"normal (vertex count {count} is not a multiple of 3)")
        if full == 0:
            return

        tris = np.array([v.position.as_np() for v in self.vertices[:full]],
                        dtype=np.float32).reshape((-1, 3, 3))
        normals = np.cross(tris[:, 1] - tris[:, 0], tris[:, 2] - tris[:, 1])
        lengths = np.linalg.norm(normals, axis=1)
        degenerate = lengths == 0.0
        if degenerate.any():
            logger.warning(
                f"[OBJLoader] {int(degenerate.sum())} degenerate triangles "
                f"get a zero normal")
        normals = normals / np.where(degenerate, 1.0, lengths)[:, None]

        for tri, normal in enumerate(normals):
            for corner in range(3):
                self.vertices[tri * 3 + corner].normal = Vec3(*normal)

    def _fail(self, error_type, message: str):
        raise error_type(message, self._line_number, self._line)
