"""
Grammar header scanning.

Classifies an ANTLR4 grammar file by its header line, the first line that
declares the grammar kind and name:

    grammar Foo;                -> COMBINED, "Foo"
    lexer grammar FooLexer;     -> LEXER, "FooLexer"
    parser grammar FooParser;   -> PARSER, "FooParser"

Only the header line is inspected; the rest of the file is not read.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from g4meta.errors import HeaderNotFoundError, HeaderParseError, UnknownGrammarTypeError

logger = logging.getLogger(__name__)


class GrammarType(Enum):
    """Kind of grammar declared by a header line."""
    PARSER = "PARSER"
    LEXER = "LEXER"
    COMBINED = "COMBINED"

    @classmethod
    def coerce(cls, value: "GrammarType | str") -> "GrammarType":
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            raise UnknownGrammarTypeError(value) from None


# Checked in this order; the first keyword the line starts with wins
HEADER_KEYWORDS: tuple[tuple[str, GrammarType], ...] = (
    ("grammar", GrammarType.COMBINED),
    ("lexer", GrammarType.LEXER),
    ("parser", GrammarType.PARSER),
)


@dataclass(frozen=True)
class Grammar:
    """A classified grammar file."""
    name: str
    filename: Path
    type: GrammarType

    def __post_init__(self):
        object.__setattr__(self, "filename", Path(self.filename))
        object.__setattr__(self, "type", GrammarType.coerce(self.type))


def classify_line(line: str) -> GrammarType | None:
    """Return the grammar type a (trimmed) line declares, if any."""
    for keyword, grammar_type in HEADER_KEYWORDS:
        if line.startswith(keyword):
            return grammar_type
    return None


def parse_header_line(line: str, grammar_type: GrammarType, path: Path) -> Grammar:
    """Extract the grammar name from a header line of a known type."""
    declaration = line.split(";", 1)[0]
    parts = declaration.split()
    if len(parts) < 2:
        raise HeaderParseError(path, f"failed to parse grammar name: {declaration!r}")
    return Grammar(name=parts[-1], filename=path, type=grammar_type)


def parse_grammar_header(path: Path | str, encoding: str = "utf-8") -> Grammar:
    """
    Classify a grammar file from its header line.

    Args:
        path: Path to a .g4 grammar file
        encoding: Grammar file encoding

    Returns:
        The Grammar declared by the first header line

    Raises:
        HeaderParseError: The header line carries no name
        HeaderNotFoundError: No header line before end of file
        OSError: The file could not be opened or read
    """
    path = Path(path)
    with open(path, encoding=encoding, errors="replace") as f:
        for line in f:
            line = line.strip()
            grammar_type = classify_line(line)
            if grammar_type is not None:
                grammar = parse_header_line(line, grammar_type, path)
                logger.debug(f"{path}: {grammar.type.value} grammar {grammar.name}")
                return grammar

    raise HeaderNotFoundError(path, "failed to find fields of interest in grammar")
