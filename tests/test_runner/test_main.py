"""Tests for the runner command line entry point."""

import io
import json

from kvtable.runner.__main__ import main


def run(monkeypatch, capsys, stdin="", argv=()):
    monkeypatch.setattr("sys.stdin", io.StringIO(stdin))
    code = main(list(argv))
    return code, json.loads(capsys.readouterr().out)


def test_success(monkeypatch, capsys):
    payload = {
        "table": "todos",
        "operations": [
            {"op": "create", "data": "a"},
            {"op": "slot", "offset": 0, "count": 5},
        ],
    }

    code, output = run(monkeypatch, capsys, json.dumps(payload))

    assert code == 0
    assert output["success"] is True
    assert output["results"] == [0, [{"pkey": 0, "data": "a"}]]


def test_failure_exit_code(monkeypatch, capsys):
    payload = {"table": "todos", "operations": [{"op": "delete", "pkey": "max"}]}

    code, output = run(monkeypatch, capsys, json.dumps(payload))

    assert code == 1
    assert output["error_type"] == "InvalidOperationError"


def test_invalid_input_still_outputs_json(monkeypatch, capsys):
    code, output = run(monkeypatch, capsys, "{not json")

    assert code == 1
    assert output["success"] is False
    assert output["error_type"] == "ValidationError"


def test_reads_input_file(monkeypatch, capsys, tmp_path):
    path = tmp_path / "input.json"
    path.write_text(json.dumps({"table": "todos", "operations": [{"op": "count"}]}))

    code, output = run(monkeypatch, capsys, argv=[str(path)])

    assert code == 0
    assert output["results"] == [0]


def test_missing_input_file(monkeypatch, capsys, tmp_path):
    code, output = run(monkeypatch, capsys, argv=[str(tmp_path / "nope.json")])

    assert code == 1
    assert output["error_type"] == "FileNotFoundError"


def test_table_and_sqlite_overrides(monkeypatch, capsys, tmp_path):
    db = str(tmp_path / "t.db")
    create = json.dumps({"table": "ignored", "operations": [{"op": "create", "data": "a"}]})
    read = json.dumps({"table": "ignored", "operations": [{"op": "read", "pkey": 0}]})

    run(monkeypatch, capsys, create, argv=["--table", "todos", "--sqlite", db])
    code, output = run(monkeypatch, capsys, read, argv=["--table", "todos", "--sqlite", db])
    _, other = run(monkeypatch, capsys, read, argv=["--sqlite", db])

    assert code == 0
    assert output["results"] == ["a"]
    assert other["results"] == [None]
