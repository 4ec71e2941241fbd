"""
Error handling for the bitexpr tokenizer.

Tokenization is fail-fast: the first lexical error aborts the call and is
raised as one of the two ``TokenizerError`` subclasses below, each carrying
a diagnostic with the source location and a short help text.
"""

from typing import Optional, List
from dataclasses import dataclass

from .tokens import SourceLocation, OPERATORS


@dataclass
class Diagnostic:
    """
    Message, location and fix-up hints for one tokenizer error.

    Renders as an ``ERROR:`` line, a ``line:column`` pointer and optional
    help and suggestion lines.
    """
    message: str
    location: SourceLocation
    severity: str  # always "error"
    code: Optional[str] = None
    help_text: Optional[str] = None
    suggestions: Optional[List[str]] = None

    def __str__(self) -> str:
        lines = [f"{self.severity.upper()}: {self.message}", f"  --> {self.location}"]
        if self.help_text:
            lines.append(f"  help: {self.help_text}")
        if self.suggestions:
            lines.append("  suggestions:")
            lines.extend(f"    - {suggestion}" for suggestion in self.suggestions)
        return "\n".join(lines) + "\n"


class TokenizerError(Exception):
    """
    Base class for errors raised while tokenizing an expression.

    Contains detailed diagnostic information for error reporting.
    """

    def __init__(
        self,
        message: str,
        location: SourceLocation,
        code: Optional[str] = None,
        help_text: Optional[str] = None,
        suggestions: Optional[List[str]] = None
    ):
        super().__init__(message)
        self.message = message
        self.location = location
        self.diagnostic = Diagnostic(
            message=message,
            location=location,
            severity="error",
            code=code,
            help_text=help_text,
            suggestions=suggestions
        )

    @property
    def code(self) -> Optional[str]:
        return self.diagnostic.code

    def __str__(self) -> str:
        return str(self.diagnostic)


class UnexpectedCharError(TokenizerError):
    """A character that cannot begin any valid operator."""

    def __init__(self, char: str, location: SourceLocation, **kwargs):
        super().__init__(f"Unexpected character '{char}'", location, **kwargs)
        self.char = char


class UnexpectedEndOfStringError(TokenizerError):
    """Input ended where another character was required."""

    def __init__(self, location: SourceLocation, message: Optional[str] = None, **kwargs):
        super().__init__(message or "Unexpected end of string after escape character", location, **kwargs)


ERROR_CODES = {
    "T001": "Unexpected character",
    "T002": "Unexpected end of string",
}


def suggest_operator_completions(char: str) -> List[str]:
    """Suggest the two-character operators that start with ``char``."""
    return [lexeme for lexeme in OPERATORS if len(lexeme) == 2 and lexeme[0] == char]


def create_unexpected_char_error(char: str, location: SourceLocation) -> UnexpectedCharError:
    """Create an error for a lone '=', '!', '&' or '|'."""
    suggestions = suggest_operator_completions(char)
    help_text = f"'{char}' is only valid as part of {', '.join(repr(s) for s in suggestions)}."

    return UnexpectedCharError(
        char,
        location,
        code="T001",
        help_text=help_text,
        suggestions=suggestions
    )


def create_unexpected_end_of_string_error(location: SourceLocation, in_string: bool = False,
                                          after_escape: bool = True) -> UnexpectedEndOfStringError:
    """Create an error for input that ends inside an escape or string."""
    if after_escape:
        where = "a string literal" if in_string else "an identifier"
        return UnexpectedEndOfStringError(
            location,
            code="T002",
            help_text=f"A backslash in {where} must be followed by the character to escape.",
            suggestions=["Remove the trailing backslash", "Escape the backslash itself with '\\\\'"]
        )

    return UnexpectedEndOfStringError(
        location,
        message="Unterminated string literal",
        code="T002",
        help_text="String literals must be closed with a matching '\"' quote.",
        suggestions=["Add a closing '\"' quote", "Check for escaped quotes in the string"]
    )
