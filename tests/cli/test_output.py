"""Tests for CLI output helpers."""

import json

import yaml

from arraytable.cli._output import print_error, print_object, print_table


def test_print_table_json(capsys):
    print_table(["id", "name"], [["1", "Alice"], ["2", "Bob"]], fmt="json")
    data = json.loads(capsys.readouterr().out)
    assert len(data) == 2
    assert data[0] == {"id": "1", "name": "Alice"}


def test_print_table_yaml(capsys):
    print_table(["id"], [["1"]], fmt="yaml")
    assert yaml.safe_load(capsys.readouterr().out) == [{"id": "1"}]


def test_print_table_text(capsys):
    print_table(["measurement", "elapsed_ms"], [["Remove all items", "1.500"]])
    lines = capsys.readouterr().out.splitlines()
    assert lines[0].startswith("measurement")
    assert set(lines[1].replace(" ", "")) == {"-"}
    assert "Remove all items" in lines[2]


def test_print_table_empty(capsys):
    print_table(["id"], [])
    assert capsys.readouterr().out == ""


def test_print_object_json(capsys):
    print_object({"key": "val"}, fmt="json")
    assert json.loads(capsys.readouterr().out) == {"key": "val"}


def test_print_object_yaml_keeps_order(capsys):
    print_object({"status": "ok", "checks": []}, fmt="yaml")
    out = capsys.readouterr().out
    assert out.index("status") < out.index("checks")
    assert yaml.safe_load(out) == {"status": "ok", "checks": []}


def test_print_object_text(capsys):
    print_object({"key": "val"})
    assert "key: val" in capsys.readouterr().out


def test_print_object_text_list(capsys):
    print_object([{"a": 1}, "plain"])
    out = capsys.readouterr().out
    assert "  a: 1" in out
    assert "  plain" in out


def test_print_error(capsys):
    print_error("something broke")
    assert "Error: something broke" in capsys.readouterr().err
