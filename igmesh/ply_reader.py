"""Reader for ASCII PLY files holding triangle meshes."""

from __future__ import annotations

import logging
import os
from typing import NamedTuple, Optional

from igmesh.tuples import Vector

logger = logging.getLogger(__name__)

_INT_MAX = 2**31 - 1


class PlyError(ValueError):
    """Raised when a PLY file cannot be opened or is malformed."""


class PlyData(NamedTuple):
    """Vertex coordinates and triangles (vertex index triples) of a PLY file."""

    vertices: list[Vector]
    faces: list[Vector]


class _Tokens:
    """Whitespace-separated tokens of a text, with line skipping."""

    def __init__(self, text: str):
        self._lines = [line.split() for line in text.splitlines()]
        self._line = 0
        self._word = 0

    def next(self) -> Optional[str]:
        """The next token, possibly on a later line, or None at the end."""
        while self._line < len(self._lines) and self._word >= len(self._lines[self._line]):
            self._line += 1
            self._word = 0
        if self._line >= len(self._lines):
            return None
        token = self._lines[self._line][self._word]
        self._word += 1
        return token

    def skip_line(self) -> None:
        """Discard whatever remains of the current line."""
        self._line += 1
        self._word = 0


def _need(tokens: _Tokens, eof_message: str) -> str:
    token = tokens.next()
    if token is None:
        raise PlyError(eof_message)
    return token


def _to_int(token: str, what: str) -> int:
    try:
        return int(token)
    except ValueError:
        raise PlyError(f"expected an integer for {what}, found '{token}'") from None


def _to_float(token: str) -> float:
    try:
        return float(token)
    except ValueError:
        raise PlyError(f"expected a vertex coordinate, found '{token}'") from None


def _read_header(tokens: _Tokens, with_faces: bool) -> tuple[int, int]:
    if tokens.next() != "ply":
        raise PlyError("the input does not start with 'ply'")
    tokens.skip_line()

    # 0: before 'element vertex'; 1: before 'element face'; 2: both seen.
    state = 0
    num_vertices = 0
    num_faces = 0
    eof_message = "premature end of file before end_header"

    while True:
        token = _need(tokens, eof_message)
        if token == "end_header":
            if state != 2:
                raise PlyError("'element vertex' or 'element face' missing from the header")
            tokens.skip_line()
            break
        if token == "comment":
            tokens.skip_line()
        elif token == "format":
            fmt = tokens.next() or ""
            if fmt != "ascii":
                raise PlyError(f"the ply format is '{fmt}', not 'ascii'; it cannot be read")
            tokens.skip_line()
        elif token == "element":
            kind = _need(tokens, eof_message)
            if kind == "vertex":
                if state != 0:
                    raise PlyError("the 'element vertex' line comes after 'element face'")
                num_vertices = _to_int(_need(tokens, eof_message), "the vertex count")
                state = 1 if with_faces else 2
            elif with_faces and kind == "face":
                if state != 1:
                    raise PlyError("'element vertex' comes after 'element face'")
                num_faces = _to_int(_need(tokens, eof_message), "the face count")
                state = 2
            tokens.skip_line()
        elif token == "property":
            tokens.skip_line()

    if num_vertices <= 0:
        raise PlyError("the vertex count is missing, zero or negative")
    if with_faces and num_faces <= 0:
        raise PlyError("the face count is missing, zero or negative")
    if num_vertices > _INT_MAX:
        raise PlyError("the vertex count exceeds the largest 'int' value")
    if with_faces and num_faces > _INT_MAX:
        raise PlyError("the face count exceeds the largest 'int' value")
    return num_vertices, num_faces


def _read_vertices(tokens: _Tokens, count: int) -> list[Vector]:
    eof_message = "premature end of file in the vertex list"
    vertices = []
    for _ in range(count):
        x, y, z = (_to_float(_need(tokens, eof_message)) for _ in range(3))
        tokens.skip_line()
        vertices.append(Vector(x, y, z))
    return vertices


def _read_faces(tokens: _Tokens, num_vertices: int, count: int) -> list[Vector]:
    eof_message = "premature end of file in the face list"
    faces = []
    for _ in range(count):
        corners = _to_int(_need(tokens, eof_message), "the face vertex count")
        if corners != 3:
            raise PlyError("found a face whose vertex count is not 3")
        indices = []
        for _ in range(3):
            index = _to_int(_need(tokens, eof_message), "a vertex index")
            if not 0 <= index < num_vertices:
                raise PlyError("found a vertex index outside the vertex list")
            indices.append(index)
        tokens.skip_line()
        faces.append(Vector(indices))
    return faces


def parse(text: str) -> PlyData:
    """Parse the text of an ASCII PLY file with triangles only."""
    tokens = _Tokens(text)
    num_vertices, num_faces = _read_header(tokens, with_faces=True)
    vertices = _read_vertices(tokens, num_vertices)
    faces = _read_faces(tokens, num_vertices, num_faces)
    return PlyData(vertices, faces)


def parse_vertices(text: str) -> list[Vector]:
    """Parse only the vertices of an ASCII PLY file; faces are ignored."""
    tokens = _Tokens(text)
    num_vertices, _ = _read_header(tokens, with_faces=False)
    return _read_vertices(tokens, num_vertices)


def _resolve_name(filename) -> str:
    name = os.fspath(filename)
    if name.rsplit(".", 1)[-1] != "ply":
        name += ".ply"
    return name


def _load_text(name: str) -> str:
    try:
        with open(name, encoding="utf-8", errors="replace") as source:
            return source.read()
    except OSError as exc:
        raise PlyError(f"cannot open the file '{name}' for reading") from exc


def read(filename) -> PlyData:
    """Read vertices and triangles from a PLY file ('.ply' is added if missing)."""
    name = _resolve_name(filename)
    data = parse(_load_text(name))
    logger.info(
        "ply file '%s' read: %d vertices, %d faces",
        name, len(data.vertices), len(data.faces),
    )
    return data


def read_vertices(filename) -> list[Vector]:
    """Read only the vertices of a PLY file ('.ply' is added if missing)."""
    name = _resolve_name(filename)
    vertices = parse_vertices(_load_text(name))
    logger.info("ply file '%s' read: %d vertices (faces not read)", name, len(vertices))
    return vertices