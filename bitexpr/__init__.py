"""
bitexpr Package

Tokenizer for arithmetic and logical expressions such as
``(2 + 3 * sin(π/4)) / (sqrt(9) + log(100, 10)) - 2^3``.

Architecture:
    bitexpr/
    └── lexer/           # Tokenization and lexical analysis

License: MIT
"""

__version__ = "0.1.0"
__license__ = "MIT"

from .lexer import (
    Tokenizer,
    tokenize,
    detokenize,
    Token,
    TokenType,
    Operator,
    SourceLocation,
    TokenizerError,
    UnexpectedCharError,
    UnexpectedEndOfStringError,
)

__all__ = [
    # Core API
    "Tokenizer",
    "tokenize",
    "detokenize",

    # Token types
    "Token",
    "TokenType",
    "Operator",
    "SourceLocation",

    # Errors
    "TokenizerError",
    "UnexpectedCharError",
    "UnexpectedEndOfStringError",

    # Version info
    "__version__",
    "__license__",
]
