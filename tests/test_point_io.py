import pytest

from errors import HullError, MalformedSourceError, SourceIOError
from point_io import format_point, format_points, parse_points, read_points


def test_read_points(points_file):
    path = points_file("0 0\n0 2\n2 2\n2 0\n1 1\n")
    assert read_points(path) == [(0, 0), (0, 2), (1, 1), (2, 0), (2, 2)]


def test_duplicates_are_dropped(points_file):
    path = points_file("1 1\n1 1\n0 0\n1.0 1.0\n")
    assert read_points(path) == [(0, 0), (1, 1)]


def test_whitespace_is_free_form():
    assert parse_points("  1\t2 3\n\n4  ") == [(1, 2), (3, 4)]


def test_scientific_notation():
    assert parse_points("1e2 -2.5E-1") == [(100.0, -0.25)]


def test_empty_source(points_file):
    assert read_points(points_file("")) == []
    assert parse_points("   \n ") == []


def test_lone_trailing_coordinate_is_ignored():
    assert parse_points("1 2\n3") == [(1, 2)]


def test_bad_token(points_file):
    path = points_file("1 2\n3 x\n")
    with pytest.raises(MalformedSourceError) as excinfo:
        read_points(path)
    assert str(excinfo.value) == f"{path}: error reading point"


def test_bad_trailing_token():
    with pytest.raises(MalformedSourceError, match="<string>: error reading point"):
        parse_points("1 2 oops")


@pytest.mark.parametrize("token", ["nan", "inf", "-inf"])
def test_non_finite_coordinates_are_rejected(token):
    with pytest.raises(MalformedSourceError):
        parse_points(f"1 {token}")


def test_missing_file(tmp_path):
    path = str(tmp_path / "missing.txt")
    with pytest.raises(SourceIOError) as excinfo:
        read_points(path)
    assert str(excinfo.value) == f"{path}: No such file or directory"
    assert isinstance(excinfo.value, HullError)


def test_directory_is_unreadable(tmp_path):
    with pytest.raises(SourceIOError):
        read_points(str(tmp_path))


def test_format_point():
    assert format_point((0.0, 2.0)) == "(0,2)"
    assert format_point((1.5, -3)) == "(1.5,-3)"
    assert format_point((1234567.0, 0.1)) == "(1.23457e+06,0.1)"


def test_format_points():
    assert format_points([(0, 0), (0, 2)]) == "(0,0)\n(0,2)"
    assert format_points([]) == ""


@pytest.mark.parametrize("token", ["1_0", "١", "0x10", "1.5.2", "+", "e5", "1e"])
def test_only_plain_decimal_numbers(token):
    with pytest.raises(MalformedSourceError):
        parse_points(f"{token} 2")


@pytest.mark.parametrize("text, expected", [
    ("+1 -2", (1.0, -2.0)),
    (".5 5.", (0.5, 5.0)),
    ("3E+2 4e-1", (300.0, 0.4)),
])
def test_accepted_number_forms(text, expected):
    assert parse_points(text) == [expected]


def test_overflowing_number_is_rejected():
    with pytest.raises(MalformedSourceError):
        parse_points("1e999 0")


def test_undecodable_file_is_malformed(tmp_path):
    path = tmp_path / "binary.txt"
    path.write_bytes(b"1 2\n\xff\xfe 3\n")
    with pytest.raises(MalformedSourceError, match="error reading point"):
        read_points(str(path))
