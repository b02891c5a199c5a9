"""
Grammar header scanning and derived names.
"""

from g4meta.grammar.header import (
    Grammar,
    GrammarType,
    classify_line,
    parse_grammar_header,
)
from g4meta.grammar.naming import (
    parser_base_name,
    lexer_base_name,
    parser_name,
    lexer_name,
    listener_name,
    grammar_generated_filenames,
    generated_filenames,
)

__all__ = [
    # header
    "Grammar",
    "GrammarType",
    "classify_line",
    "parse_grammar_header",
    # naming
    "parser_base_name",
    "lexer_base_name",
    "parser_name",
    "lexer_name",
    "listener_name",
    "grammar_generated_filenames",
    "generated_filenames",
]
