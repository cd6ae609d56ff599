import io
import pickle

import pytest

from nntsp import PointErrorKind, PointParseError, parse_point, read_points, write_points


def test_parse_point_whitespace():
    assert parse_point("  1.5\t-2e3 \n") == (1.5, -2000.0)


@pytest.mark.parametrize("line", ["1 2 3", "1", "", "   "])
def test_wrong_token_count_is_format_error(line):
    with pytest.raises(PointParseError) as exc:
        parse_point(line)
    assert exc.value.kind is PointErrorKind.FORMAT
    assert str(exc.value).startswith("Invalid format:")


@pytest.mark.parametrize("line", ["1 abc", "x 2", "1 2 abc"])
def test_non_numeric_token_is_parse_error(line):
    with pytest.raises(PointParseError) as exc:
        parse_point(line)
    assert exc.value.kind is PointErrorKind.PARSE
    assert isinstance(exc.value.__cause__, ValueError)
    assert str(exc.value).startswith("Error parsing coordinate:")


@pytest.mark.parametrize("line", ["nan 1", "1 inf", "-Infinity 0"])
def test_non_finite_rejected_by_default(line):
    with pytest.raises(PointParseError) as exc:
        parse_point(line)
    assert exc.value.kind is PointErrorKind.PARSE


def test_non_finite_allowed_when_requested():
    x, y = parse_point("1 inf", allow_non_finite=True)
    assert x == 1.0 and y == float("inf")


def test_read_points_from_path(tmp_path):
    f = tmp_path / "data5.txt"
    f.write_text("0 0\n3 4\n-1.5 2.25\n")
    assert read_points(f) == [(0.0, 0.0), (3.0, 4.0), (-1.5, 2.25)]
    assert read_points(str(f)) == [(0.0, 0.0), (3.0, 4.0), (-1.5, 2.25)]


def test_read_points_from_stream_and_lines():
    assert read_points(io.StringIO("1 2\n3 4\n")) == [(1.0, 2.0), (3.0, 4.0)]
    assert read_points(["5 6", "7 8"]) == [(5.0, 6.0), (7.0, 8.0)]


def test_bad_line_aborts_read_with_line_number():
    with pytest.raises(PointParseError) as exc:
        read_points(["0 0", "1 1", "2 2 2", "3 3"])
    assert exc.value.kind is PointErrorKind.FORMAT
    assert exc.value.line_number == 3
    assert "2 2 2" in str(exc.value)
    assert "line 3" in str(exc.value)


def test_blank_line_is_rejected():
    with pytest.raises(PointParseError) as exc:
        read_points(io.StringIO("0 0\n\n1 1\n"))
    assert exc.value.kind is PointErrorKind.FORMAT
    assert exc.value.line_number == 2


def test_missing_file_is_io_error(tmp_path):
    with pytest.raises(PointParseError) as exc:
        read_points(tmp_path / "nope.txt")
    assert exc.value.kind is PointErrorKind.IO
    assert isinstance(exc.value.__cause__, OSError)
    assert str(exc.value).startswith("I/O Error:")


def test_undecodable_file_is_io_error(tmp_path):
    f = tmp_path / "bad.txt"
    f.write_bytes(b"0 0\n\xff\xfe 1\n")
    with pytest.raises(PointParseError) as exc:
        read_points(f)
    assert exc.value.kind is PointErrorKind.IO


def test_empty_file_gives_no_points(tmp_path):
    f = tmp_path / "empty.txt"
    f.write_text("")
    assert read_points(f) == []


def test_write_then_read(tmp_path):
    coords = [(0.1, 0.2), (1e-7, 12345.678), (-3.0, 4.5)]
    path = write_points(tmp_path / "sub" / "pts.txt", coords)
    assert read_points(path) == coords


def test_error_is_a_value_error():
    with pytest.raises(ValueError):
        parse_point("a b")


@pytest.mark.parametrize("line", ["1_0 2", "1 2_000.5"])
def test_underscore_digits_are_parse_errors(line):
    with pytest.raises(PointParseError) as exc:
        parse_point(line)
    assert exc.value.kind is PointErrorKind.PARSE


def test_read_error_args_match_message():
    with pytest.raises(PointParseError) as exc:
        read_points(["0 0", "1 2 3"])
    err = exc.value
    assert err.args == (PointErrorKind.FORMAT, "1 2 3", 2)
    assert str(err) == "Invalid format: 1 2 3 (line 2)"


def test_read_error_keeps_cause():
    with pytest.raises(PointParseError) as exc:
        read_points(["0 0", "1 abc"])
    assert isinstance(exc.value.__cause__, ValueError)
    assert exc.value.line_number == 2


def test_error_survives_pickling():
    with pytest.raises(PointParseError) as exc:
        read_points(["0 0", "1 2 3"])
    copy = pickle.loads(pickle.dumps(exc.value))
    assert copy.kind is PointErrorKind.FORMAT
    assert copy.detail == "1 2 3"
    assert copy.line_number == 2
    assert str(copy) == str(exc.value)
