"""Reading PLY meshes into vertex and index lists."""

from __future__ import annotations

import struct
from dataclasses import dataclass, field
from os import PathLike
from typing import BinaryIO

Vertex = tuple[float, float, float]

# Binary vertex records: x, y, z followed by colour bytes (and, for
# single precision, one extra float before them).
_FLOAT_TAIL = 4 + 3
_DOUBLE_TAIL = 3


class PlyError(ValueError):
    """Raised when a PLY file is malformed or ends early."""


def _to_float32(value: float) -> float:
    try:
        return struct.unpack("f", struct.pack("f", value))[0]
    except (OverflowError, struct.error) as exc:
        raise PlyError(f"value {value!r} does not fit a single-precision float") from exc


@dataclass
class PlyMesh:
    """Vertices and flattened face indices read from a PLY file."""

    vertices: list[Vertex] = field(default_factory=list)
    triangles: list[int] = field(default_factory=list)
    source: str = ""

    def is_valid(self) -> bool:
        """A mesh is usable when it has at least one vertex and one index."""
        return bool(self.vertices) and bool(self.triangles)

    def dump(self, path: str | PathLike) -> None:
        """Write a plain-text listing of the vertices and indices to ``path``."""
        with open(path, "w", encoding="utf-8") as out:
            out.write("Vertices:\n")
            for x, y, z in self.vertices:
                out.write(f"X={x:g}, Y={y:g}, Z={z:g}\n")
            out.write("\nTriangles:\n")
            for index in self.triangles:
                out.write(f"F {index}\n")


@dataclass
class _Header:
    is_binary: bool = False
    is_big: bool = False
    is_double: bool = False
    vertex_count: int = 0
    face_count: int = 0


def _read_header_lines(stream: BinaryIO) -> list[str]:
    lines = []
    for raw in iter(stream.readline, b""):
        line = raw.decode("utf-8", errors="replace").rstrip("\r\n")
        lines.append(line)
        if "header" in line:
            break
    return lines


def _parse_count(tokens: list[str]) -> int:
    try:
        return int(tokens[2])
    except (IndexError, ValueError) as exc:
        raise PlyError(f"bad element line: {' '.join(tokens)!r}") from exc


def _parse_header(lines: list[str]) -> _Header:
    header = _Header()
    for line in lines:
        if "binary" in line:
            header.is_binary = True
            break
        if "format" in line:
            break
    seen_vertex = seen_face = False
    for line in lines:
        tokens = line.split()
        if "format" in line:
            if "big" in line:
                header.is_big = True
            elif "little" in line:
                header.is_big = False
        if tokens and tokens[0] == "element" and len(tokens) > 1:
            if tokens[1] == "vertex" and not seen_vertex:
                seen_vertex = True
                header.vertex_count = _parse_count(tokens)
            elif tokens[1] == "face" and not seen_face:
                seen_face = True
                header.face_count = _parse_count(tokens)
        if "property double x" in line:
            header.is_double = True
    return header


def _read_exact(stream: BinaryIO, size: int) -> bytes:
    data = stream.read(size)
    if len(data) != size:
        raise PlyError("PLY body ends early")
    return data


def _read_binary(stream: BinaryIO, header: _Header, mesh: PlyMesh) -> None:
    order = ">" if header.is_big else "<"
    if header.is_double:
        coords = struct.Struct(order + "3d")
        tail = _DOUBLE_TAIL
    else:
        coords = struct.Struct(order + "3f")
        tail = _FLOAT_TAIL
    for _ in range(header.vertex_count):
        x, y, z = coords.unpack(_read_exact(stream, coords.size))
        _read_exact(stream, tail)
        mesh.vertices.append((_to_float32(x), _to_float32(y), _to_float32(z)))
    for _ in range(header.face_count):
        (count,) = struct.unpack("B", _read_exact(stream, 1))
        indices = struct.unpack(f"{order}{count}i", _read_exact(stream, 4 * count))
        mesh.triangles.extend(indices)


def _read_ascii(stream: BinaryIO, header: _Header, mesh: PlyMesh) -> None:
    lines = iter(stream.read().decode("utf-8", errors="replace").splitlines())
    try:
        for _ in range(header.vertex_count):
            parts = next(lines).split()
            if len(parts) < 3:
                raise PlyError("PLY vertex line has fewer than three values")
            try:
                mesh.vertices.append(tuple(_to_float32(float(p)) for p in parts[:3]))
            except ValueError as exc:
                raise PlyError(f"bad vertex value in {' '.join(parts)!r}") from exc
        for _ in range(header.face_count):
            parts = next(lines).split()
            try:
                count = int(parts[0]) if parts else 0
                values = [int(p) for p in parts[1:1 + count]]
            except ValueError as exc:
                raise PlyError(f"bad face line {' '.join(parts)!r}") from exc
            if len(values) < count:
                raise PlyError("PLY face line has fewer indices than declared")
            mesh.triangles.extend(values)
    except StopIteration:
        raise PlyError("PLY body ends early") from None


def read_ply(path: str | PathLike) -> PlyMesh:
    """Read the x, y, z of every vertex and all face indices of a PLY file."""
    mesh = PlyMesh(source=str(path))
    with open(path, "rb") as stream:
        header = _parse_header(_read_header_lines(stream))
        if header.is_binary:
            _read_binary(stream, header, mesh)
        else:
            _read_ascii(stream, header, mesh)
    return mesh