"""Tests for the command line interface."""

from __future__ import annotations

import json
from pathlib import Path

from click.testing import CliRunner

from g4meta.cli.main import main

from tests.conftest import make_pom

runner = CliRunner()


class TestInspect:
    def test_text_output(self, combined_project: Path):
        result = runner.invoke(main, ["inspect", str(combined_project)])
        assert result.exit_code == 0, result.output
        assert "FooParser" in result.output
        assert "FooListener" in result.output
        assert "foo_base_listener.go" in result.output
        assert "COMBINED" in result.output

    def test_json_output(self, split_project: Path):
        result = runner.invoke(main, ["inspect", "--json", "--target", "plain", str(split_project)])
        assert result.exit_code == 0, result.output
        data = json.loads(result.stdout)
        assert data["parser_name"] == "FooParser"
        assert data["listener_name"] == "FooParserListener"
        assert data["generated_filenames"] == [
            "fooparser_base_listener",
            "fooparser_listener",
            "foo_parser",
            "foo_lexer",
        ]
        assert data["warnings"] == []

    def test_missing_names_shown_as_na(self, write_file):
        write_file("FooLexer.g4", "lexer grammar FooLexer;\n")
        pom = write_file("pom.xml", make_pom(["FooLexer.g4"]))
        result = runner.invoke(main, ["inspect", str(pom)])
        assert result.exit_code == 0, result.output
        assert "n/a" in result.output
        assert "foo_lexer.go" in result.output

    def test_malformed_descriptor(self, write_file):
        pom = write_file("pom.xml", "<project>")
        result = runner.invoke(main, ["inspect", str(pom)])
        assert result.exit_code == 2

    def test_unknown_target(self, combined_project: Path):
        result = runner.invoke(main, ["inspect", "--target", "cobol", str(combined_project)])
        assert result.exit_code != 0


class TestScan:
    def test_scan(self, tmp_path: Path, write_file):
        write_file("foo/Foo.g4", "grammar Foo;\n")
        write_file("foo/pom.xml", make_pom(["Foo.g4"]))
        write_file("bar/BarLexer.g4", "lexer grammar BarLexer;\n")
        write_file("bar/pom.xml", make_pom(["BarLexer.g4"]))
        write_file("broken/pom.xml", "<project>")

        result = runner.invoke(main, ["scan", str(tmp_path)])
        assert result.exit_code == 0, result.output
        lines = result.stdout.strip().splitlines()
        assert len(lines) == 2
        assert lines[0].startswith(str(tmp_path / "bar" / "pom.xml"))
        assert "does not contain a parser" in lines[0]
        assert lines[1].endswith("FooParser")


class TestVersion:
    def test_version(self):
        result = runner.invoke(main, ["--version"])
        assert result.exit_code == 0
        assert "0.1.0" in result.output
