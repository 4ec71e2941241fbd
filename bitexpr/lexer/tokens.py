"""
Token definitions for the bitexpr tokenizer.

This module defines the closed set of token kinds produced when an
expression is tokenized:
- Identifiers (names, and numbers, which are lexed as plain identifiers)
- Function names (identifiers immediately followed by an open parenthesis)
- Operators (arithmetic, comparison and logical)
- String literals
- Parentheses and commas
"""

from enum import Enum, auto
from dataclasses import dataclass, field
from typing import Optional, Union


class TokenType(Enum):
    """Enumeration of all token kinds the tokenizer can produce."""

    IDENTIFIER = auto()             # x, 42, π, math.pi
    FUNCTION = auto()               # sin in sin(x)
    OPERATOR = auto()               # +, ==, &&, ...
    OPEN_PARENTHESIS = auto()       # (
    CLOSE_PARENTHESIS = auto()      # )
    COMMA = auto()                  # ,
    STRING_LITERAL = auto()         # "hello"


class Operator(Enum):
    """
    The fourteen operators recognized in expressions.

    Each member's value is its lexeme.
    """

    # Arithmetic
    PLUS = "+"
    MINUS = "-"
    MULTIPLY = "*"
    DIVIDE = "/"
    MODULO = "%"
    POWER = "^"

    # Comparison
    EQUAL = "=="
    NOT_EQUAL = "!="
    GREATER = ">"
    LESS = "<"
    GREATER_EQUAL = ">="
    LESS_EQUAL = "<="

    # Logical
    AND = "&&"
    OR = "||"

    @property
    def lexeme(self) -> str:
        return self.value

    @property
    def display_name(self) -> str:
        """CamelCase name, e.g. ``GreaterEqual``."""
        return "".join(part.capitalize() for part in self.name.split("_"))


@dataclass(frozen=True)
class SourceLocation:
    """
    Represents a location in the expression text.

    Used for error reporting only; tokens compare equal regardless of
    where they were found.
    """
    line: int
    column: int
    offset: int  # Character offset from start of text

    def __str__(self) -> str:
        return f"{self.line}:{self.column}"

    def __repr__(self) -> str:
        return f"SourceLocation({self.line}, {self.column}, {self.offset})"


TokenValue = Union[str, Operator, None]


@dataclass(frozen=True)
class Token:
    """
    Represents one lexical token of an expression.

    Every token carries at most one payload in ``value``: the text of an
    identifier, function name or string literal, the ``Operator`` of an
    operator token, or ``None`` for parentheses and commas.
    """
    type: TokenType
    value: TokenValue = None
    location: Optional[SourceLocation] = field(default=None, compare=False)

    # ------------------------------------------------------------------
    # Variant constructors
    # ------------------------------------------------------------------

    @classmethod
    def identifier(cls, text: str, location: Optional[SourceLocation] = None) -> "Token":
        return cls(TokenType.IDENTIFIER, text, location)

    @classmethod
    def function(cls, text: str, location: Optional[SourceLocation] = None) -> "Token":
        return cls(TokenType.FUNCTION, text, location)

    @classmethod
    def operator(cls, op: Operator, location: Optional[SourceLocation] = None) -> "Token":
        return cls(TokenType.OPERATOR, op, location)

    @classmethod
    def open_parenthesis(cls, location: Optional[SourceLocation] = None) -> "Token":
        return cls(TokenType.OPEN_PARENTHESIS, None, location)

    @classmethod
    def close_parenthesis(cls, location: Optional[SourceLocation] = None) -> "Token":
        return cls(TokenType.CLOSE_PARENTHESIS, None, location)

    @classmethod
    def comma(cls, location: Optional[SourceLocation] = None) -> "Token":
        return cls(TokenType.COMMA, None, location)

    @classmethod
    def string_literal(cls, text: str, location: Optional[SourceLocation] = None) -> "Token":
        return cls(TokenType.STRING_LITERAL, text, location)

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------

    @property
    def lexeme(self) -> str:
        """
        Minimal source text that tokenizes back to this token.

        Identifier characters outside ``[alnum _ .]`` are backslash-escaped
        and string literals are re-quoted with their escapes restored.
        """
        if self.type == TokenType.OPERATOR:
            return self.value.lexeme
        if self.type in STRUCTURAL_LEXEMES:
            return STRUCTURAL_LEXEMES[self.type]
        if self.type == TokenType.STRING_LITERAL:
            return '"' + "".join(STRING_ESCAPES.get(c, c) for c in self.value) + '"'
        return "".join(c if is_identifier_char(c) else "\\" + c for c in self.value)

    def __str__(self) -> str:
        if self.type == TokenType.OPERATOR:
            return self.value.display_name
        if self.type == TokenType.STRING_LITERAL:
            return f'"{self.value}"'
        if self.type in STRUCTURAL_LEXEMES:
            return STRUCTURAL_LEXEMES[self.type]
        return self.value

    def __repr__(self) -> str:
        if self.type == TokenType.OPERATOR:
            return f"Token({self.type.name}, {self.value.name})"
        if self.value is None:
            return f"Token({self.type.name})"
        return f"Token({self.type.name}, {self.value!r})"

    @property
    def is_operator(self) -> bool:
        return self.type == TokenType.OPERATOR

    @property
    def is_identifier(self) -> bool:
        return self.type == TokenType.IDENTIFIER

    @property
    def is_function(self) -> bool:
        return self.type == TokenType.FUNCTION

    @property
    def is_literal(self) -> bool:
        """Check if this token is a string literal."""
        return self.type == TokenType.STRING_LITERAL


def is_identifier_char(char: str) -> bool:
    """Check if character continues an identifier without escaping."""
    return char.isalnum() or char == "_" or char == "."


# Lookup tables used by the tokenizer for single-character dispatch

STRUCTURAL_LEXEMES = {
    TokenType.OPEN_PARENTHESIS: "(",
    TokenType.CLOSE_PARENTHESIS: ")",
    TokenType.COMMA: ",",
}

STRUCTURAL_TOKENS = {lexeme: token_type for token_type, lexeme in STRUCTURAL_LEXEMES.items()}

OPERATORS = {op.lexeme: op for op in Operator}

# Operators that are always exactly one character long
SINGLE_CHAR_OPERATORS = {
    "+": Operator.PLUS,
    "-": Operator.MINUS,
    "*": Operator.MULTIPLY,
    "/": Operator.DIVIDE,
    "%": Operator.MODULO,
    "^": Operator.POWER,
}

# Lead character -> (operator when followed by '=', operator when alone).
# A lone '=' or '!' has no single-character form.
COMPARISON_OPERATORS = {
    "=": (Operator.EQUAL, None),
    "!": (Operator.NOT_EQUAL, None),
    "<": (Operator.LESS_EQUAL, Operator.LESS),
    ">": (Operator.GREATER_EQUAL, Operator.GREATER),
}

# Operators spelled by doubling their lead character
DOUBLED_OPERATORS = {
    "&": Operator.AND,
    "|": Operator.OR,
}

# Escape decoding inside string literals; any other escaped char is literal
ESCAPE_SEQUENCES = {
    "n": "\n",
    "t": "\t",
    '"': '"',
}

STRING_ESCAPES = {
    "\\": "\\\\",
    '"': '\\"',
    "\n": "\\n",
    "\t": "\\t",
}
