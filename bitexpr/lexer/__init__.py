"""
bitexpr Lexer Package

Implements the expression tokenizer: a single forward pass with one
character of lookahead that turns expression text into typed tokens.

Key Features:
- Arithmetic, comparison and logical operators (+ - * / % ^ == != < <= > >= && ||)
- Function names distinguished from identifiers by a directly following '('
- Double-quoted string literals with backslash escapes
- Unicode-aware identifiers (π, θ, ...)
- Fail-fast errors with source locations and diagnostics
"""

from .tokens import Token, TokenType, Operator, SourceLocation
from .tokenizer import Tokenizer, tokenize, detokenize
from .errors import TokenizerError, UnexpectedCharError, UnexpectedEndOfStringError

__all__ = [
    "Tokenizer",
    "tokenize",
    "detokenize",
    "Token",
    "TokenType",
    "Operator",
    "SourceLocation",
    "TokenizerError",
    "UnexpectedCharError",
    "UnexpectedEndOfStringError",
]
