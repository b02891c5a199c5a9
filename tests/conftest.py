"""Shared test fixtures."""

from __future__ import annotations

from pathlib import Path

import pytest

POM_TEMPLATE = """<?xml version="1.0" encoding="UTF-8"?>
<project xmlns="http://maven.apache.org/POM/4.0.0">
  <modelVersion>4.0.0</modelVersion>
  <artifactId>{artifact}</artifactId>
  <build>
    <plugins>
{plugins}
    </plugins>
  </build>
</project>
"""

ANTLR_PLUGIN = """      <plugin>
        <groupId>org.antlr</groupId>
        <artifactId>antlr4-maven-plugin</artifactId>
        <configuration>
          <sourceDirectory>${{basedir}}</sourceDirectory>
          <includes>
{includes}
          </includes>
        </configuration>
      </plugin>"""

TEST_PLUGIN = """      <plugin>
        <groupId>com.khubla.antlr</groupId>
        <artifactId>antlr4test-maven-plugin</artifactId>
        <configuration>
          <grammarName>{grammar_name}</grammarName>
          <entryPoint>{entry_point}</entryPoint>
          <exampleFiles>{example_files}</exampleFiles>
          <caseInsensitiveType>{case_type}</caseInsensitiveType>
        </configuration>
      </plugin>"""


def make_pom(
    includes=(),
    artifact="foo",
    plugin=True,
    grammar_name=None,
    entry_point="start",
    example_files="examples/",
    case_type="None",
) -> str:
    plugins = []
    if plugin:
        lines = "\n".join(f"            <include>{i}</include>" for i in includes)
        plugins.append(ANTLR_PLUGIN.format(includes=lines))
    if grammar_name is not None:
        plugins.append(TEST_PLUGIN.format(
            grammar_name=grammar_name,
            entry_point=entry_point,
            example_files=example_files,
            case_type=case_type,
        ))
    return POM_TEMPLATE.format(artifact=artifact, plugins="\n".join(plugins))


@pytest.fixture
def write_file(tmp_path: Path):
    """Return a helper writing text files below tmp_path."""

    def _write(relative: str, content: str) -> Path:
        path = tmp_path / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content)
        return path

    return _write


@pytest.fixture
def combined_project(write_file) -> Path:
    """A project with one combined grammar and two examples."""
    write_file("Foo.g4", "// Foo\ngrammar Foo;\n\nstart : 'a' ;\n")
    write_file("examples/one.txt", "a")
    write_file("examples/two.txt", "a")
    return write_file("pom.xml", make_pom(["Foo.g4"], grammar_name="Foo"))


@pytest.fixture
def split_project(write_file) -> Path:
    """A project with a parser grammar followed by a lexer grammar."""
    write_file("FooParser.g4", "parser grammar FooParser;\noptions { tokenVocab=FooLexer; }\n")
    write_file("FooLexer.g4", "lexer grammar FooLexer;\nA : 'a' ;\n")
    return write_file("pom.xml", make_pom(["FooParser.g4", "FooLexer.g4"], grammar_name="Foo"))
