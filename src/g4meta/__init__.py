"""
g4meta: grammar project metadata extraction for ANTLR4 build descriptors.
"""

from g4meta.grammar import Grammar, GrammarType, parse_grammar_header
from g4meta.project import DescriptorResult, Diagnostic, Project, parse_descriptor

__version__ = "0.1.0"

__all__ = [
    "Grammar",
    "GrammarType",
    "parse_grammar_header",
    "DescriptorResult",
    "Diagnostic",
    "Project",
    "parse_descriptor",
]
