import json

import pytest

from triangulate import main, parse_args


@pytest.fixture
def points_file(tmp_path):
    src = tmp_path / "points.json"
    src.write_text(json.dumps([{"x": -1, "y": -1}, {"x": 1, "y": -1}, {"x": 0, "y": 1}]))
    yield src


def test_neighbors(points_file, capsys):
    assert main([str(points_file)]) == 0
    out = capsys.readouterr().out
    assert "(-1.0, -1.0): [(0.0, 1.0), (1.0, -1.0)]" in out


def test_triangles(points_file, capsys):
    assert main([str(points_file), "--triangles"]) == 0
    out = capsys.readouterr().out
    assert out.strip() == "[((-1.0, -1.0), (0.0, 1.0), (1.0, -1.0))]"


def test_json(capsys):
    assert main(["--random", "12", "--seed", "3", "--json"]) == 0
    data = json.loads(capsys.readouterr().out)
    assert len(data["points"]) == 12
    assert all(p["neighbors"] for p in data["points"])


def test_trace_dir(points_file, tmp_path, capsys):
    steps = tmp_path / "steps"
    assert main([str(points_file), "--trace-dir", str(steps)]) == 0
    assert sorted(steps.glob("delaunay_*.json"))


def test_coincident_points(tmp_path, capsys):
    src = tmp_path / "points.json"
    src.write_text(json.dumps([[0, 0], [1, 1], [0, 0]]))

    assert main([str(src)]) == 1
    assert "both at [0.0, 0.0]" in capsys.readouterr().err


def test_unknown_extension(tmp_path, capsys):
    src = tmp_path / "points.txt"
    src.write_text("0 0\n")
    assert main([str(src)]) == 1
    assert "Unknown extension" in capsys.readouterr().err


def test_missing_file(tmp_path, capsys):
    assert main([str(tmp_path / "missing.json")]) == 1
    assert capsys.readouterr().err.startswith("Error:")


@pytest.mark.parametrize("argv", [
    [],
    ["points.json", "--random", "5"],
    ["points.json", "--json", "--triangles"],
])
def test_bad_arguments(argv):
    with pytest.raises(SystemExit):
        parse_args(argv)


def test_rounding_options():
    args = parse_args(["--random", "5", "--input-digits", "4", "--radius-sigfigs", "8"])
    assert args.input_digits == 4
    assert args.radius_sigfigs == 8
    assert args.cross_digits == 12


def test_normalize(points_file, capsys):
    assert main([str(points_file), "--normalize", "--triangles"]) == 0
    out = capsys.readouterr().out
    assert out.strip() == "[((0.0, 0.0), (0.5, 1.0), (1.0, 0.0))]"
