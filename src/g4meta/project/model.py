"""
Project model.

A Project is everything known about one grammar project after reading its
build descriptor: identifying names, the grammar files it references, the
classified grammars, and the test metadata used by a downstream harness.
"""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from g4meta.errors import DuplicateGrammarTypeError, G4MetaError
from g4meta.grammar import naming
from g4meta.grammar.header import Grammar, GrammarType


@dataclass(frozen=True)
class Project:
    """
    One grammar project defined by a build descriptor and its .g4 files.

    Instances are immutable. The reader builds them through ProjectBuilder.
    """
    file_name: str
    long_name: str = ""
    includes: tuple[Path, ...] = ()
    grammars: tuple[Grammar, ...] = ()

    # Test related info
    entry_point: str = ""
    example_root: str = ""
    examples: tuple[Path, ...] = ()
    case_insensitive_type: str = ""

    found_antlr4_maven_plugin: bool = False

    def __post_init__(self):
        object.__setattr__(self, "includes", tuple(Path(p) for p in self.includes))
        object.__setattr__(self, "grammars", tuple(self.grammars))
        object.__setattr__(self, "examples", tuple(Path(p) for p in self.examples))

        if len(set(self.includes)) != len(self.includes):
            raise ValueError(f"{self.file_name!r} lists an include more than once")

        counts = Counter(g.type for g in self.grammars)
        duplicated = sorted(t.value for t, n in counts.items() if n > 1)
        if duplicated:
            raise DuplicateGrammarTypeError(
                f"{self.file_name!r} has more than one grammar of type {', '.join(duplicated)}"
            )

    def find_grammar(self, grammar_type: GrammarType | str) -> Grammar | None:
        """Return the grammar of the given type, if the project has one."""
        grammar_type = GrammarType.coerce(grammar_type)
        for g in self.grammars:
            if g.type is grammar_type:
                return g
        return None

    def has_grammar(self, grammar_type: GrammarType | str) -> bool:
        return self.find_grammar(grammar_type) is not None

    def parser_name(self) -> str:
        """Name of the generated parser."""
        return naming.parser_name(self)

    def lexer_name(self) -> str:
        """Name of the generated lexer."""
        return naming.lexer_name(self)

    def listener_name(self) -> str:
        """Name of the generated listener."""
        return naming.listener_name(self)

    def generated_filenames(self, extension: str = "") -> list[str]:
        """Files a grammar compiler would generate for this project."""
        return naming.generated_filenames(self, extension)

    def to_dict(self, extension: str = "") -> dict[str, Any]:
        """JSON-serialisable summary. Names that cannot be derived are None."""

        def derived(fn):
            try:
                return fn()
            except G4MetaError:
                return None

        return {
            "file_name": self.file_name,
            "long_name": self.long_name,
            "includes": [str(p) for p in self.includes],
            "grammars": [
                {"name": g.name, "filename": str(g.filename), "type": g.type.value}
                for g in self.grammars
            ],
            "entry_point": self.entry_point,
            "example_root": self.example_root,
            "examples": [str(p) for p in self.examples],
            "case_insensitive_type": self.case_insensitive_type,
            "found_antlr4_maven_plugin": self.found_antlr4_maven_plugin,
            "parser_name": derived(self.parser_name),
            "lexer_name": derived(self.lexer_name),
            "listener_name": derived(self.listener_name),
            "generated_filenames": derived(lambda: self.generated_filenames(extension)),
        }


@dataclass
class ProjectBuilder:
    """Mutable accumulator filled in while the descriptor is streamed."""
    file_name: str
    long_name: str = ""
    includes: list[Path] = field(default_factory=list)
    grammars: list[Grammar] = field(default_factory=list)
    entry_point: str = ""
    example_root: str = ""
    examples: list[Path] = field(default_factory=list)
    case_insensitive_type: str = ""
    found_antlr4_maven_plugin: bool = False

    def has_include(self, path: Path) -> bool:
        return path in self.includes

    def grammar_of_type(self, grammar_type: GrammarType) -> Grammar | None:
        for g in self.grammars:
            if g.type is grammar_type:
                return g
        return None

    def build(self) -> Project:
        return Project(
            file_name=self.file_name,
            long_name=self.long_name,
            includes=tuple(self.includes),
            grammars=tuple(self.grammars),
            entry_point=self.entry_point,
            example_root=self.example_root,
            examples=tuple(self.examples),
            case_insensitive_type=self.case_insensitive_type,
            found_antlr4_maven_plugin=self.found_antlr4_maven_plugin,
        )
