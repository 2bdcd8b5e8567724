import pytest

from airspacegrid.paths import load_path_file, parse_path_text, path_segments


def test_parse_points():
    assert parse_path_text("1 2 3\n4.5 5 6\n") == [(1.0, 2.0, 3.0), (4.5, 5.0, 6.0)]


def test_parse_skips_short_and_zero_lines():
    text = "1 2\n0 0 0\n\n7 8 9\n"
    assert parse_path_text(text) == [(7.0, 8.0, 9.0)]


def test_parse_extra_spaces_and_columns():
    assert parse_path_text("  1   2  3 99\r\n") == [(1.0, 2.0, 3.0)]


def test_parse_leading_number_prefix():
    assert parse_path_text("abc 1 2\n1.5x 2 3") == [(0.0, 1.0, 2.0), (1.5, 2.0, 3.0)]


def test_parse_exponent_and_sign():
    assert parse_path_text("-1e2 +2 .5") == [(-100.0, 2.0, 0.5)]


def test_load_file_round_trip(tmp_path):
    points = [(1.0, 2.0, 3.0), (-4.0, 5.5, 6.0), (7.0, 8.0, 9.25)]
    file = tmp_path / "path.txt"
    file.write_text("\n".join(f"{x} {y} {z}" for x, y, z in points), encoding="utf-8")
    assert load_path_file(file) == points


def test_load_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_path_file(tmp_path / "missing.txt")


def test_segments_join_consecutive_points():
    points = [(1.0, 0.0, 0.0), (2.0, 0.0, 0.0), (3.0, 1.0, 0.0)]
    segments = path_segments(points)
    assert len(segments) == len(points) - 1
    assert segments[0] == (points[0], points[1])
    for (_, end), (start, _) in zip(segments, segments[1:]):
        assert end == start


@pytest.mark.parametrize("points", [[], [(1.0, 1.0, 1.0)]])
def test_segments_need_two_points(points):
    assert path_segments(points) == []