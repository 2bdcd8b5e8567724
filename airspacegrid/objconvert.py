"""Conversion of PLY meshes to Wavefront OBJ text."""

from __future__ import annotations

import struct
from os import PathLike
from typing import BinaryIO, TextIO

Vertex = tuple[float, float, float]

_END_HEADER = ("end_header", "end header")


def _read_header(stream: BinaryIO) -> list[str]:
    lines = []
    while True:
        raw = stream.readline()
        if not raw:
            raise ValueError("PLY header has no end_header line")
        line = raw.decode("utf-8", errors="replace").rstrip("\r\n")
        lines.append(line)
        if line.strip() in _END_HEADER:
            return lines


def _header_info(lines: list[str]) -> tuple[bool, bool, int, int]:
    is_binary = False
    for line in lines:
        if "binary" in line:
            is_binary = True
            break
        if "format" in line:
            break
    is_big = False
    vertex_count = 0
    face_count = 0
    seen_vertex = seen_face = False
    for line in lines:
        tokens = line.split()
        if "format" in line:
            if "big" in line:
                is_big = True
            elif "little" in line:
                is_big = False
        if len(tokens) >= 3 and tokens[0] == "element":
            if tokens[1] == "vertex" and not seen_vertex:
                seen_vertex = True
                vertex_count = int(tokens[2])
            elif tokens[1] == "face" and not seen_face:
                seen_face = True
                face_count = int(tokens[2])
    return is_binary, is_big, vertex_count, face_count


def _read_exact(stream: BinaryIO, size: int) -> bytes:
    data = stream.read(size)
    if len(data) != size:
        raise ValueError("PLY body ends early")
    return data


def _read_binary(
    stream: BinaryIO, big: bool, vertex_count: int, face_count: int
) -> tuple[list[Vertex], list[list[int]]]:
    order = ">" if big else "<"
    vertex_struct = struct.Struct(order + "3f")
    vertices = [
        vertex_struct.unpack(_read_exact(stream, vertex_struct.size))
        for _ in range(vertex_count)
    ]
    faces = []
    for _ in range(face_count):
        (count,) = struct.unpack("B", _read_exact(stream, 1))
        faces.append(list(struct.unpack(f"{order}{count}i", _read_exact(stream, 4 * count))))
    return vertices, faces


def _read_ascii(
    stream: BinaryIO, vertex_count: int, face_count: int
) -> tuple[list[Vertex], list[list[int]]]:
    lines = iter(stream.read().decode("utf-8", errors="replace").splitlines())
    vertices: list[Vertex] = []
    faces: list[list[int]] = []
    try:
        for _ in range(vertex_count):
            parts = next(lines).split()
            if len(parts) < 3:
                raise ValueError("PLY vertex line has fewer than three values")
            vertices.append((float(parts[0]), float(parts[1]), float(parts[2])))
        for _ in range(face_count):
            parts = next(lines).split()
            if not parts:
                raise ValueError("PLY face line is empty")
            count = int(parts[0])
            faces.append([int(p) for p in parts[1:1 + count]])
    except StopIteration:
        raise ValueError("PLY body ends early") from None
    return vertices, faces


def read_ply_faces(path: str | PathLike) -> tuple[list[Vertex], list[list[int]], int]:
    """Read vertices (x, y, z only) and faces of a PLY file.

    Returns ``(vertices, faces, face_count)`` where ``face_count`` is the
    count declared in the header.
    """
    with open(path, "rb") as stream:
        header = _read_header(stream)
        is_binary, is_big, vertex_count, face_count = _header_info(header)
        if is_binary:
            vertices, faces = _read_binary(stream, is_big, vertex_count, face_count)
        else:
            vertices, faces = _read_ascii(stream, vertex_count, face_count)
    return vertices, faces, face_count


def write_obj(
    vertices: list[Vertex], faces: list[list[int]], face_count: int, stream: TextIO
) -> None:
    """Write OBJ text: vertex lines, the face count, then 1-based face lines."""
    for x, y, z in vertices:
        stream.write(f"v {x:g} {y:g} {z:g}\n")
    stream.write(str(face_count))
    for face in faces:
        stream.write("f " + "".join(f"{index + 1} " for index in face) + "\n")


def convert_ply_to_obj(source: str | PathLike, target: str | PathLike) -> None:
    """Convert the PLY file ``source`` into the OBJ file ``target``."""
    vertices, faces, face_count = read_ply_faces(source)
    with open(target, "w", encoding="utf-8") as stream:
        write_obj(vertices, faces, face_count, stream)