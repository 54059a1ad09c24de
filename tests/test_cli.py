"""Tests for the command line entry point (tsgen.cli)."""

from __future__ import annotations

import os
from unittest.mock import patch

import pytest

from tsgen.cli import main


pytestmark = pytest.mark.integration


@pytest.fixture(autouse=True)
def clean_env():
    with patch.dict(os.environ, {}, clear=True):
        yield


class TestRender:
    def test_prints_rendering_to_stdout(self, blueprint_yaml_file, reference_output, capsys):
        assert main([str(blueprint_yaml_file)]) == 0
        assert capsys.readouterr().out == reference_output

    def test_indent_flag(self, blueprint_json_file, capsys):
        assert main([str(blueprint_json_file), "--indent", "4"]) == 0
        assert "    testProp: string;" in capsys.readouterr().out

    def test_indent_from_env(self, blueprint_json_file, capsys):
        with patch.dict(os.environ, {"TSGEN_INDENT": "3"}):
            assert main([str(blueprint_json_file)]) == 0
        assert "   testProp: string;" in capsys.readouterr().out

    def test_empty_blueprint_warns(self, tmp_path, capsys):
        path = tmp_path / "empty.json"
        path.write_text("{}", encoding="utf-8")
        assert main([str(path)]) == 0
        captured = capsys.readouterr()
        assert captured.out == ""
        assert "declares no files" in captured.err


class TestWrite:
    def test_writes_files(self, blueprint_yaml_file, tmp_path, capsys):
        out_dir = tmp_path / "out"
        assert main([str(blueprint_yaml_file), "-o", str(out_dir), "--write"]) == 0
        content = (out_dir / "test.ts").read_text(encoding="utf-8")
        assert content.startswith("export interface TestInterface {")
        captured = capsys.readouterr()
        assert captured.out == ""
        assert "Wrote 1 file(s)" in captured.err


class TestErrors:
    def test_missing_blueprint(self, tmp_path, capsys):
        assert main([str(tmp_path / "missing.yaml")]) == 1
        assert "not found" in capsys.readouterr().err

    def test_negative_indent(self, blueprint_json_file, capsys):
        assert main([str(blueprint_json_file), "--indent", "-1"]) == 1
        assert "invalid options" in capsys.readouterr().err

    def test_missing_constructor(self, tmp_path, capsys):
        path = tmp_path / "bp.json"
        path.write_text('{"files": [{"path": "a.ts", "classes": [{"name": "C"}]}]}', encoding="utf-8")
        assert main([str(path)]) == 1
        assert "has no constructor" in capsys.readouterr().err

    def test_escaping_output_path(self, tmp_path, capsys):
        path = tmp_path / "bp.json"
        path.write_text('{"files": [{"path": "../x.ts"}]}', encoding="utf-8")
        assert main([str(path), "-o", str(tmp_path / "out"), "--write"]) == 1
        assert "escapes" in capsys.readouterr().err

    def test_undecodable_blueprint(self, tmp_path, capsys):
        path = tmp_path / "bp.json"
        path.write_bytes(b"\xff\xfe")
        assert main([str(path)]) == 1
        assert "Could not read" in capsys.readouterr().err

    def test_output_path_naming_output_directory(self, tmp_path, capsys):
        path = tmp_path / "bp.json"
        path.write_text('{"files": [{"path": "sub/.."}]}', encoding="utf-8")
        out_dir = tmp_path / "out"
        assert main([str(path), "-o", str(out_dir), "--write"]) == 1
        assert "output directory itself" in capsys.readouterr().err
        assert not out_dir.exists()
