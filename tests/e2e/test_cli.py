"""End-to-end CLI tests: JSON graph in, JSON layout out."""

import json

from click.testing import CliRunner

from grid_layout.__main__ import main

GRAPH = {
    "nodes": [{"id": "a", "name": "Alpha"}, {"id": "b"}],
    "edges": [{"id": "e1", "from": "a", "to": "b"}],
}


def _run(args, stdin=None):
    return CliRunner().invoke(main, args, input=stdin)


def test_stdin_to_stdout():
    result = _run([], json.dumps(GRAPH))
    assert result.exit_code == 0, result.output
    out = json.loads(result.output)
    assert out["layers"] == [["a"], ["b"]]
    assert out["edges"][0]["points"][0] == {"x": 9, "y": 1}


def test_file_input_and_output(tmp_path):
    src = tmp_path / "graph.json"
    dst = tmp_path / "layout.json"
    src.write_text(json.dumps(GRAPH))
    result = _run([str(src), "--output", str(dst)])
    assert result.exit_code == 0, result.output
    out = json.loads(dst.read_text())
    assert [n["id"] for n in out["nodes"]] == ["a", "b"]


def test_flow_override():
    result = _run(["--flow", "SOUTH"], json.dumps(GRAPH))
    assert result.exit_code == 0, result.output
    nodes = {n["id"]: n for n in json.loads(result.output)["nodes"]}
    assert nodes["b"]["x"] == 0
    assert nodes["b"]["y"] == 8


def test_compact_profile():
    result = _run(["--compact"], json.dumps(GRAPH))
    nodes = {n["id"]: n for n in json.loads(result.output)["nodes"]}
    assert nodes["b"]["x"] == nodes["a"]["width"] + 3


def test_single_line_output():
    result = _run(["--indent", "0"], json.dumps(GRAPH))
    assert result.output.count("\n") == 1


def test_empty_input_gives_empty_layout():
    result = _run([], "")
    assert result.exit_code == 0
    assert json.loads(result.output)["nodes"] == []


def test_invalid_json():
    result = _run([], "{nodes: ")
    assert result.exit_code == 1
    assert "invalid JSON" in result.output


def test_unknown_node_reference():
    bad = {"nodes": [{"id": "a"}], "edges": [{"id": "e1", "from": "a", "to": "zz"}]}
    result = _run([], json.dumps(bad))
    assert result.exit_code == 1
    assert "unknown node 'zz'" in result.output


def test_version():
    result = _run(["--version"])
    assert result.exit_code == 0
    assert "0.1.0" in result.output
