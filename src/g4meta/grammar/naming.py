"""
Derived names for generated code.

Pure functions over a fully parsed Project: the names of the generated
parser, lexer and listener, and the filenames a grammar compiler would
emit. The conventions follow the ANTLR4 Go target:

    parser grammar FooParser -> FooParser, FooParserListener
                                fooparser_base_listener, fooparser_listener,
                                foo_parser
    lexer grammar FooLexer   -> FooLexer, foo_lexer
    grammar Foo              -> FooParser, FooLexer, FooListener
                                foo_base_listener, foo_listener,
                                foo_parser, foo_lexer
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from g4meta.errors import NoLexerError, NoParserError, UnknownGrammarTypeError
from g4meta.grammar.header import Grammar, GrammarType

if TYPE_CHECKING:
    from g4meta.project.model import Project


def _trim_suffix(name: str, suffix: str) -> str:
    if name.endswith(suffix):
        return name[: -len(suffix)]
    return name


def _first_of(project: "Project", *types: GrammarType) -> Grammar | None:
    for grammar_type in types:
        grammar = project.find_grammar(grammar_type)
        if grammar is not None:
            return grammar
    return None


def parser_base_name(project: "Project") -> str:
    """Parser grammar name without its "Parser" suffix, else the combined name."""
    grammar = project.find_grammar(GrammarType.PARSER)
    if grammar is not None:
        return _trim_suffix(grammar.name, "Parser")

    grammar = project.find_grammar(GrammarType.COMBINED)
    if grammar is not None:
        return grammar.name

    raise NoParserError(project.file_name)


def lexer_base_name(project: "Project") -> str:
    """Lexer grammar name without its "Lexer" suffix, else the combined name."""
    grammar = project.find_grammar(GrammarType.LEXER)
    if grammar is not None:
        return _trim_suffix(grammar.name, "Lexer")

    grammar = project.find_grammar(GrammarType.COMBINED)
    if grammar is not None:
        return grammar.name

    raise NoLexerError(project.file_name)


def parser_name(project: "Project") -> str:
    return parser_base_name(project) + "Parser"


def lexer_name(project: "Project") -> str:
    return lexer_base_name(project) + "Lexer"


def listener_name(project: "Project") -> str:
    """Name of the generated listener; the parser grammar keeps its suffix."""
    grammar = _first_of(project, GrammarType.PARSER, GrammarType.COMBINED)
    if grammar is None:
        raise NoParserError(project.file_name)
    return grammar.name + "Listener"


def _lexer_files(grammar: Grammar) -> list[str]:
    base = _trim_suffix(grammar.name, "Lexer").lower()
    return [f"{base}_lexer"]


def _parser_files(grammar: Grammar) -> list[str]:
    base = grammar.name.lower()
    parser_base = _trim_suffix(grammar.name, "Parser").lower()
    return [f"{base}_base_listener", f"{base}_listener", f"{parser_base}_parser"]


def _combined_files(grammar: Grammar) -> list[str]:
    base = grammar.name.lower()
    return [f"{base}_base_listener", f"{base}_listener", f"{base}_parser", f"{base}_lexer"]


_GENERATORS = {
    GrammarType.LEXER: _lexer_files,
    GrammarType.PARSER: _parser_files,
    GrammarType.COMBINED: _combined_files,
}


def grammar_generated_filenames(grammar: Grammar, extension: str = "") -> list[str]:
    """Filenames generated for a single grammar, in emission order."""
    generate = _GENERATORS.get(grammar.type)
    if generate is None:
        raise UnknownGrammarTypeError(grammar.type)
    return [name + extension for name in generate(grammar)]


def generated_filenames(project: "Project", extension: str = "") -> list[str]:
    """Filenames generated for every grammar of the project, in project order."""
    files = []
    for grammar in project.grammars:
        files.extend(grammar_generated_filenames(grammar, extension))
    return files
