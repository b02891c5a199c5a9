"""Typed exceptions and the CLI error handling decorator."""

from __future__ import annotations

import functools
from typing import Any, Callable, TypeVar

import click

F = TypeVar("F", bound=Callable[..., Any])


class G4MetaError(Exception):
    """Base exception for g4meta."""

    exit_code: int = 1


class DescriptorDecodeError(G4MetaError):
    """The descriptor markup or one of its element bodies could not be decoded."""

    exit_code = 2


class ExampleGlobError(G4MetaError):
    """The example-file pattern is malformed."""

    exit_code = 3


class GrammarHeaderError(G4MetaError):
    """A grammar file header could not be classified."""

    exit_code = 4

    def __init__(self, path, detail: str) -> None:
        self.path = path
        self.detail = detail
        super().__init__(f"{path}: {detail}")


class HeaderParseError(GrammarHeaderError):
    """A header line was found but it does not carry a grammar name."""


class HeaderNotFoundError(GrammarHeaderError):
    """No header line was found before end of file."""


class MissingGrammarError(G4MetaError):
    """A name derivation needed a grammar type the project does not have."""

    exit_code = 5
    kind = "grammar"

    def __init__(self, project_name: str) -> None:
        self.project_name = project_name
        super().__init__(f"{project_name!r} does not contain a {self.kind}")


class NoParserError(MissingGrammarError):
    kind = "parser"


class NoLexerError(MissingGrammarError):
    kind = "lexer"


class UnknownGrammarTypeError(G4MetaError):
    """A grammar type outside PARSER, LEXER and COMBINED."""

    exit_code = 6

    def __init__(self, value: Any) -> None:
        self.value = value
        super().__init__(f"unknown grammar type {value!r}")


class DuplicateGrammarTypeError(G4MetaError):
    """A project holds more than one grammar of the same type."""

    exit_code = 6


def error_handler(func: F) -> F:
    """Decorator that catches G4MetaError and prints a one-line message."""

    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return func(*args, **kwargs)
        except G4MetaError as exc:
            click.echo(f"Error: {exc}", err=True)
            raise SystemExit(exc.exit_code)
        except OSError as exc:
            click.echo(f"Error: {exc}", err=True)
            raise SystemExit(1)

    return wrapper  # type: ignore[return-value]
