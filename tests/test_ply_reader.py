import pytest

from igmesh.ply_reader import PlyError, parse, parse_vertices, read, read_vertices

TRIANGLE = """ply
format ascii 1.0
comment a single triangle
element vertex 3
property float x
property float y
property float z
element face 1
property list uchar int vertex_indices
end_header
0 0 0
1.5 0 0 255 0 0
0 2 -3
3 0 1 2
"""


def test_parse_reads_vertices_and_faces():
    data = parse(TRIANGLE)
    assert [tuple(v) for v in data.vertices] == [(0.0, 0.0, 0.0), (1.5, 0.0, 0.0), (0.0, 2.0, -3.0)]
    assert [tuple(f) for f in data.faces] == [(0, 1, 2)]


def test_parse_vertices_ignores_faces():
    vertices = parse_vertices(TRIANGLE)
    assert [tuple(v) for v in vertices] == [(0.0, 0.0, 0.0), (1.5, 0.0, 0.0), (0.0, 2.0, -3.0)]


def test_parse_vertices_without_face_element():
    text = "ply\nformat ascii 1.0\nelement vertex 2\nend_header\n1 2 3\n4 5 6\n"
    assert [tuple(v) for v in parse_vertices(text)] == [(1.0, 2.0, 3.0), (4.0, 5.0, 6.0)]


def test_parse_requires_face_element():
    text = "ply\nformat ascii 1.0\nelement vertex 2\nend_header\n1 2 3\n4 5 6\n"
    with pytest.raises(PlyError):
        parse(text)


def test_missing_magic():
    with pytest.raises(PlyError, match="ply"):
        parse(TRIANGLE.replace("ply\n", "plx\n", 1))


def test_binary_format_rejected():
    with pytest.raises(PlyError, match="binary_little_endian"):
        parse(TRIANGLE.replace("format ascii", "format binary_little_endian"))


def test_face_before_vertex_rejected():
    text = "ply\nformat ascii 1.0\nelement face 1\nelement vertex 3\nend_header\n"
    with pytest.raises(PlyError):
        parse(text)


def test_zero_vertices_rejected():
    with pytest.raises(PlyError):
        parse(TRIANGLE.replace("element vertex 3", "element vertex 0"))


def test_quad_face_rejected():
    with pytest.raises(PlyError):
        parse(TRIANGLE.replace("3 0 1 2", "4 0 1 2 2"))


def test_index_out_of_range_rejected():
    with pytest.raises(PlyError):
        parse(TRIANGLE.replace("3 0 1 2", "3 0 1 3"))


def test_premature_end_in_vertices():
    text = TRIANGLE.split("0 2 -3")[0]
    with pytest.raises(PlyError, match="vertex list"):
        parse(text)


def test_premature_end_in_header():
    with pytest.raises(PlyError, match="end_header"):
        parse("ply\nformat ascii 1.0\nelement vertex 3\n")


def test_read_appends_extension(tmp_path):
    (tmp_path / "tri.ply").write_text(TRIANGLE)
    data = read(tmp_path / "tri")
    assert len(data.vertices) == 3
    assert [tuple(f) for f in data.faces] == [(0, 1, 2)]


def test_read_vertices_from_file(tmp_path):
    path = tmp_path / "tri.ply"
    path.write_text(TRIANGLE)
    assert read_vertices(path) == parse_vertices(TRIANGLE)


def test_read_missing_file(tmp_path):
    with pytest.raises(PlyError, match="cannot open"):
        read(tmp_path / "absent.ply")