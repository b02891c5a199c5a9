"""
Build descriptor reading.

Streams a Maven pom.xml and assembles a Project from the handful of elements
the grammar harness cares about. Elements are matched by local name only, so
namespaces and nesting depth do not matter:

    artifactId            -> plugin detection
    grammars, include     -> grammar file references
    grammarName           -> long name
    entryPoint            -> entry rule
    exampleFiles          -> example directory
    caseInsensitiveType   -> case folding mode

Missing or unclassifiable grammar files are reported as diagnostics and do
not abort the parse.
"""

from __future__ import annotations

import glob
import logging
import os
import re
import xml.etree.ElementTree as ET
from dataclasses import dataclass
from pathlib import Path
from typing import Callable

from g4meta.errors import DescriptorDecodeError, ExampleGlobError, GrammarHeaderError
from g4meta.grammar.header import parse_grammar_header
from g4meta.project.diagnostics import Diagnostic, Severity
from g4meta.project.model import Project, ProjectBuilder
from g4meta.targets import DEFAULT_TARGET, TargetConfig

logger = logging.getLogger(__name__)

DEFAULT_DESCRIPTOR_NAME = "pom.xml"

# A "[" that is never closed
_UNCLOSED_CLASS = re.compile(r"\[[^\]]*$")


@dataclass(frozen=True)
class DescriptorResult:
    """A parsed project together with the warnings collected on the way."""
    project: Project
    warnings: tuple[Diagnostic, ...] = ()

    def __iter__(self):
        return iter((self.project, self.warnings))


def local_name(tag: str) -> str:
    """Strip any "{namespace}" prefix from an element tag."""
    return tag.rsplit("}", 1)[-1]


def example_root_for(directory: Path) -> str:
    """Relative path from the descriptor directory back to the repository root."""
    return "../" * directory.as_posix().count("/")


def _check_pattern(pattern: str) -> None:
    if _UNCLOSED_CLASS.search(pattern) or pattern.endswith("\\"):
        raise ExampleGlobError(f"malformed example pattern: {pattern!r}")


class DescriptorReader:
    """
    Reads one build descriptor into a Project.

    A reader is single use: create one per descriptor.
    """

    def __init__(self, path: Path | str, target: TargetConfig | None = None, encoding: str = "utf-8"):
        self.path = Path(path)
        self.directory = Path(os.path.dirname(path) or ".")
        self.target = target or DEFAULT_TARGET
        self.encoding = encoding
        self.builder = ProjectBuilder(file_name=str(path))
        self.warnings: list[Diagnostic] = []

        self._handlers: dict[str, Callable[[str], None]] = {
            "artifactId": self._on_artifact_id,
            "grammars": self._on_include,
            "include": self._on_include,
            "grammarName": self._on_grammar_name,
            "entryPoint": self._on_entry_point,
            "exampleFiles": self._on_example_files,
            "caseInsensitiveType": self._on_case_insensitive_type,
        }

    def read(self) -> DescriptorResult:
        """
        Stream the descriptor and build the project.

        Raises:
            OSError: The descriptor could not be opened or read
            DescriptorDecodeError: The descriptor markup is malformed
            ExampleGlobError: The example-file pattern is malformed
        """
        with open(self.path, "rb") as f:
            try:
                for _, elem in ET.iterparse(f, events=("end",)):
                    handler = self._handlers.get(local_name(elem.tag))
                    if handler is not None:
                        handler(elem.text or "")
                    elem.clear()
            except ET.ParseError as e:
                raise DescriptorDecodeError(f"failed to decode {self.path}: {e}") from e

        logger.debug(
            f"{self.path}: {len(self.builder.includes)} includes, "
            f"{len(self.builder.grammars)} grammars, {len(self.warnings)} warnings"
        )
        return DescriptorResult(project=self.builder.build(), warnings=tuple(self.warnings))

    def _warn(self, message: str, path: Path | None = None, severity: Severity = Severity.WARNING):
        logger.debug(message)
        self.warnings.append(Diagnostic(message=message, path=path, severity=severity))

    def _on_artifact_id(self, text: str):
        if text.strip() == self.target.plugin_artifact_id:
            self.builder.found_antlr4_maven_plugin = True

    def resolve_include(self, text: str) -> Path:
        """Resolve a grammar reference, preferring the target's variant file."""
        file = os.path.normpath(os.path.join(self.directory, text))
        variant = self.target.variant_of(file)
        if variant is not None and os.path.exists(variant):
            file = variant
        return Path(file)

    def _on_include(self, text: str):
        text = text.strip()
        if not text:
            self._warn(f"empty grammar reference in {str(self.path)!r}", self.path)
            return

        file = self.resolve_include(text)
        if not file.exists():
            self._warn(f"missing grammar {str(file)!r} referenced in {str(self.path)!r}", file)
            return

        if self.builder.has_include(file):
            return
        self.builder.includes.append(file)

        try:
            grammar = parse_grammar_header(file, encoding=self.encoding)
        except (GrammarHeaderError, OSError) as e:
            self._warn(f"failed to parse grammar {str(file)!r}: {e}", file)
            return

        existing = self.builder.grammar_of_type(grammar.type)
        if existing is not None:
            self._warn(
                f"ignoring {grammar.type.value} grammar {grammar.name!r} in {str(file)!r}: "
                f"already have {existing.name!r} from {str(existing.filename)!r}",
                file,
                severity=Severity.INFO,
            )
            return

        self.builder.grammars.append(grammar)

    def _on_grammar_name(self, text: str):
        self.builder.long_name = text

    def _on_entry_point(self, text: str):
        self.builder.entry_point = text

    def _on_example_files(self, text: str):
        pattern = os.path.join(self.directory, text, self.target.example_pattern)
        _check_pattern(pattern)
        try:
            matches = glob.glob(pattern, include_hidden=True)
        except (OSError, ValueError) as e:
            raise ExampleGlobError(f"failed to expand {pattern!r}: {e}") from e
        self.builder.examples = sorted(Path(m) for m in matches)
        self.builder.example_root = example_root_for(self.directory)

    def _on_case_insensitive_type(self, text: str):
        self.builder.case_insensitive_type = text


def parse_descriptor(
    path: Path | str,
    target: TargetConfig | None = None,
    encoding: str = "utf-8",
) -> DescriptorResult:
    """
    Parse a build descriptor into a Project.

    Args:
        path: Path to the descriptor (pom.xml)
        target: Code generation target, defaults to the Go target
        encoding: Encoding of the referenced grammar files

    Returns:
        DescriptorResult with the project and collected warnings
    """
    return DescriptorReader(path, target=target, encoding=encoding).read()


def find_descriptors(root: Path | str, name: str = DEFAULT_DESCRIPTOR_NAME) -> list[Path]:
    """Find every descriptor named `name` below root, sorted by path."""
    return sorted(Path(root).rglob(name))
