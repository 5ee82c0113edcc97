"""Tests for the command line front end."""

import json
import logging

import pytest
import structlog

from py_delaunay.cli import load_coordinates, main
from py_delaunay.core.alea_prng import AleaPRNG

SQUARE_WITH_CENTER = [[0, 0], [2, 0], [2, 2], [0, 2], [1, 1]]


@pytest.fixture(autouse=True)
def restore_logging():
    yield
    structlog.reset_defaults()
    root = logging.getLogger()
    for handler in list(root.handlers):
        root.removeHandler(handler)
    root.setLevel(logging.WARNING)


@pytest.fixture
def json_input(tmp_path):
    path = tmp_path / "points.json"
    path.write_text(json.dumps(SQUARE_WITH_CENTER))
    return path


class TestLoadCoordinates:
    """Input file formats."""

    def test_json(self, json_input):
        coords = load_coordinates(json_input)
        assert coords.shape == (5, 2)

    def test_csv(self, tmp_path):
        path = tmp_path / "points.csv"
        path.write_text("0,0\n2,0\n2,2\n0,2\n1,1\n")
        coords = load_coordinates(path)
        assert coords.shape == (5, 2)
        assert coords[4].tolist() == [1.0, 1.0]

    def test_whitespace(self, tmp_path):
        path = tmp_path / "points.txt"
        path.write_text("0 0\n1 0\n0 1\n")
        assert load_coordinates(path).shape == (3, 2)

    def test_bad_shape(self, tmp_path):
        path = tmp_path / "points.json"
        path.write_text(json.dumps([[0, 0, 0], [1, 1, 1]]))
        with pytest.raises(ValueError):
            load_coordinates(path)


class TestMain:
    """End-to-end runs."""

    def test_writes_output(self, json_input, tmp_path):
        out = tmp_path / "triangles.json"
        assert main([str(json_input), "--output", str(out), "--verify"]) == 0

        payload = json.loads(out.read_text())
        assert payload["points"] == 5
        assert len(payload["triangles"]) == 4
        assert all(4 in triangle for triangle in payload["triangles"])

    def test_verify_random_points(self, tmp_path, capsys):
        prng = AleaPRNG("cli verify")
        coords = [[0, 0], [10, 0], [10, 10], [0, 10]]
        coords += [[1 + 8 * prng.random(), 1 + 8 * prng.random()] for _ in range(30)]
        path = tmp_path / "random.json"
        path.write_text(json.dumps(coords))

        assert main([str(path), "--verify"]) == 0
        assert len(json.loads(capsys.readouterr().out)["triangles"]) == 2 * len(coords) - 6

    def test_stdout(self, json_input, capsys):
        assert main([str(json_input), "--seed", "cli", "--log-format", "console"]) == 0
        payload = json.loads(capsys.readouterr().out)
        assert len(payload["triangles"]) == 4

    def test_bounding_box_mode(self, json_input, capsys):
        assert main([str(json_input), "--mode", "bounding_box", "--scale", "20"]) == 0
        assert len(json.loads(capsys.readouterr().out)["triangles"]) == 4

    def test_plot(self, json_input, tmp_path):
        image = tmp_path / "mesh.png"
        assert main([str(json_input), "--output", str(tmp_path / "t.json"), "--plot", str(image)]) == 0
        assert image.exists()
        assert image.stat().st_size > 0

    def test_too_few_points(self, tmp_path):
        path = tmp_path / "two.json"
        path.write_text(json.dumps([[0, 0], [1, 1]]))
        assert main([str(path)]) == 2

    def test_missing_file(self, tmp_path):
        assert main([str(tmp_path / "missing.json")]) == 2
