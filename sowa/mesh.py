"""Triangle meshes loaded from Wavefront OBJ files."""

from __future__ import annotations

from typing import List, Optional, Sequence, Tuple

import numpy as np

from .filesystem import FileSystem
from .resource import Resource

# Per-vertex layout: (attribute location, float count).
ATTRIBUTES: Tuple[Tuple[int, int], ...] = ((0, 3), (1, 3), (2, 2))
VERTEX_STRIDE = sum(count for _, count in ATTRIBUTES)

_FaceVertex = Tuple[int, Optional[int], Optional[int]]


def _floats(fields: Sequence[str], count: int, lineno: int) -> Tuple[float, ...]:
    values = []
    for position in range(count):
        if position >= len(fields):
            values.append(0.0)
            continue
        try:
            values.append(float(fields[position]))
        except ValueError:
            raise ValueError(f"line {lineno}: not a number: {fields[position]!r}") from None
    return tuple(values)


def _resolve(token: str, count: int, lineno: int, what: str) -> int:
    try:
        number = int(token)
    except ValueError:
        raise ValueError(f"line {lineno}: invalid {what} index {token!r}") from None
    if number == 0:
        raise ValueError(f"line {lineno}: zero {what} index")
    index = number - 1 if number > 0 else count + number
    if not 0 <= index < count:
        raise ValueError(f"line {lineno}: {what} index {number} out of bounds")
    return index


def _face_vertex(
    token: str, counts: Tuple[int, int, int], lineno: int
) -> _FaceVertex:
    parts = token.split("/")
    if len(parts) > 3 or not parts[0]:
        raise ValueError(f"line {lineno}: malformed face vertex {token!r}")
    vertex = _resolve(parts[0], counts[0], lineno, "vertex")
    texcoord = None
    normal = None
    if len(parts) > 1 and parts[1]:
        texcoord = _resolve(parts[1], counts[1], lineno, "texcoord")
    if len(parts) > 2 and parts[2]:
        normal = _resolve(parts[2], counts[2], lineno, "normal")
    return vertex, texcoord, normal


def parse_obj(text: str) -> Tuple[np.ndarray, np.ndarray]:
    """Parse OBJ text into flat vertex data and index data.

    Every face vertex becomes its own vertex of eight floats: position,
    normal (zeros if absent) and texture coordinate with V flipped (zeros
    if absent). Polygons are split into triangle fans. Raises ValueError
    on malformed input or out-of-range indices.
    """
    positions: List[Tuple[float, ...]] = []
    normals: List[Tuple[float, ...]] = []
    texcoords: List[Tuple[float, ...]] = []
    triangles: List[_FaceVertex] = []

    for lineno, raw in enumerate(text.splitlines(), 1):
        line = raw.split("#", 1)[0].strip()
        if not line:
            continue
        keyword, *fields = line.split()
        if keyword == "v":
            positions.append(_floats(fields, 3, lineno))
        elif keyword == "vn":
            normals.append(_floats(fields, 3, lineno))
        elif keyword == "vt":
            texcoords.append(_floats(fields, 2, lineno))
        elif keyword == "f":
            counts = (len(positions), len(texcoords), len(normals))
            polygon = [_face_vertex(token, counts, lineno) for token in fields]
            if len(polygon) < 3:
                continue
            first = polygon[0]
            for second, third in zip(polygon[1:], polygon[2:]):
                triangles.extend((first, second, third))

    vertex_data: List[float] = []
    for vertex, texcoord, normal in triangles:
        vertex_data.extend(positions[vertex])
        vertex_data.extend(normals[normal] if normal is not None else (0.0, 0.0, 0.0))
        if texcoord is not None:
            u, v = texcoords[texcoord]
            vertex_data.extend((u, 1.0 - v))
        else:
            vertex_data.extend((0.0, 0.0))

    vertices = np.array(vertex_data, dtype=np.float32)
    indices = np.arange(len(triangles), dtype=np.uint32)
    return vertices, indices


class Mesh(Resource):
    """A 3D mesh whose geometry is read through a file system."""

    def __init__(self, fs: Optional[FileSystem] = None, rid: int = 0) -> None:
        super().__init__(rid)
        self.fs = fs
        self.vertex_data = np.zeros(0, dtype=np.float32)
        self.index_data = np.zeros(0, dtype=np.uint32)

    @property
    def vertex_count(self) -> int:
        return len(self.vertex_data) // VERTEX_STRIDE

    def _reset(self) -> None:
        self.vertex_data = np.zeros(0, dtype=np.float32)
        self.index_data = np.zeros(0, dtype=np.uint32)

    def load(self, path: str) -> bool:
        """Load geometry from ``path``.

        Returns False, leaving the mesh empty, when the file cannot be read;
        raises ValueError when its contents are not valid OBJ.
        """
        if self.fs is None:
            raise RuntimeError("mesh has no file system to load from")
        self._reset()
        file = self.fs.load(path)
        if file is None:
            return False
        text = file.data.decode("utf-8", errors="replace")
        self.vertex_data, self.index_data = parse_obj(text)
        return True