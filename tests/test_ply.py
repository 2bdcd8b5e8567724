import struct

import pytest

from airspacegrid.ply import PlyError, PlyMesh, read_ply


def _header(fmt, vertex_props, vertex_count=3, face_count=1):
    lines = ["ply", f"format {fmt} 1.0", f"element vertex {vertex_count}"]
    lines += [f"property {p}" for p in vertex_props]
    lines += [f"element face {face_count}", "property list uchar int vertex_indices", "end_header"]
    return ("\n".join(lines) + "\n").encode()


VERTS = [(1.5, 2.25, -3.0), (0.0, 4.0, 8.5), (-1.0, -2.5, 0.75)]
FACE = [0, 1, 2]


def test_ascii_file(tmp_path):
    path = tmp_path / "mesh.ply"
    body = "".join(f"{x} {y} {z} 255 0 0\n" for x, y, z in VERTS) + "3 0 1 2\n"
    path.write_bytes(_header("ascii", ["float x", "float y", "float z"]) + body.encode())
    mesh = read_ply(path)
    assert mesh.vertices == VERTS
    assert mesh.triangles == FACE
    assert mesh.source == str(path)


@pytest.mark.parametrize("big", [False, True])
def test_binary_float(tmp_path, big):
    order = ">" if big else "<"
    fmt = "binary_big_endian" if big else "binary_little_endian"
    data = _header(fmt, ["float x", "float y", "float z", "float w", "uchar r", "uchar g", "uchar b"])
    for v in VERTS:
        data += struct.pack(order + "4f3B", *v, 9.0, 1, 2, 3)
    data += struct.pack("B", 3) + struct.pack(order + "3i", *FACE)
    path = tmp_path / "mesh.ply"
    path.write_bytes(data)
    mesh = read_ply(path)
    assert mesh.vertices == VERTS
    assert mesh.triangles == FACE


def test_binary_double(tmp_path):
    data = _header("binary_little_endian", ["double x", "double y", "double z", "uchar r", "uchar g", "uchar b"])
    for v in VERTS:
        data += struct.pack("<3d3B", *v, 1, 2, 3)
    data += struct.pack("B", 3) + struct.pack("<3i", *FACE)
    path = tmp_path / "mesh.ply"
    path.write_bytes(data)
    mesh = read_ply(path)
    assert mesh.vertices == VERTS
    assert mesh.triangles == FACE


def test_truncated_binary_raises(tmp_path):
    data = _header("binary_little_endian", ["float x", "float y", "float z"])
    data += struct.pack("<4f3B", *VERTS[0], 0.0, 1, 2, 3)
    path = tmp_path / "mesh.ply"
    path.write_bytes(data)
    with pytest.raises(PlyError):
        read_ply(path)


def test_truncated_ascii_raises(tmp_path):
    path = tmp_path / "mesh.ply"
    path.write_bytes(_header("ascii", ["float x", "float y", "float z"]) + b"1 2 3\n")
    with pytest.raises(PlyError):
        read_ply(path)


def test_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_ply(tmp_path / "absent.ply")


def test_is_valid():
    assert PlyMesh(vertices=VERTS, triangles=FACE).is_valid()
    assert not PlyMesh(vertices=[], triangles=FACE).is_valid()
    assert not PlyMesh(vertices=VERTS, triangles=[]).is_valid()


def test_dump(tmp_path):
    mesh = PlyMesh(vertices=[(1.5, 2.25, -3.0)], triangles=[0, 7])
    out = tmp_path / "dump.txt"
    mesh.dump(out)
    assert out.read_text(encoding="utf-8") == (
        "Vertices:\nX=1.5, Y=2.25, Z=-3\n\nTriangles:\nF 0\nF 7\n"
    )