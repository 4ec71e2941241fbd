"""
bitexpr tokenizer - turns an expression string into a list of tokens

Single left-to-right pass with one character of lookahead. Numbers are
not a separate token kind; digits are ordinary identifier characters and
a parser further down the line decides what ``42`` means.
"""

import logging
from typing import Iterable, List, Optional

from .tokens import (
    Token, TokenType, SourceLocation, STRUCTURAL_TOKENS, SINGLE_CHAR_OPERATORS,
    COMPARISON_OPERATORS, DOUBLED_OPERATORS, ESCAPE_SEQUENCES, is_identifier_char
)
from .errors import (
    TokenizerError, create_unexpected_char_error, create_unexpected_end_of_string_error
)

logger = logging.getLogger(__name__)


class Tokenizer:
    """
    Expression tokenizer.

    Converts expression text into a list of tokens, stopping at the
    first lexical error.
    """

    def __init__(self, source: str, *, skip_all_whitespace: bool = False, strict_strings: bool = False):
        """
        Initialize the tokenizer with expression text.

        Args:
            source: Expression text
            skip_all_whitespace: Skip tabs, newlines and other whitespace the
                same way as spaces. By default only ' ' is skipped and other
                whitespace is lexed as identifier text.
            strict_strings: Raise UnexpectedEndOfStringError for a string
                literal with no closing quote instead of accepting it.
        """
        self.source = source
        self.skip_all_whitespace = skip_all_whitespace
        self.strict_strings = strict_strings
        self.pos = 0
        self.line = 1
        self.column = 1

    def tokenize(self) -> List[Token]:
        """
        Tokenize the entire expression.

        Returns:
            List of tokens, empty for empty input

        Raises:
            UnexpectedCharError: On a malformed '=', '!', '&' or '|' operator
            UnexpectedEndOfStringError: When input ends after a backslash
        """
        self.pos = 0
        self.line = 1
        self.column = 1
        tokens: List[Token] = []

        try:
            while self.pos < len(self.source):
                token = self._next_token()
                if token is not None:
                    tokens.append(token)
        except TokenizerError as e:
            logger.debug("tokenize failed at %s: %s", e.location, e.message)
            raise

        logger.debug("tokenized %d characters into %d tokens", len(self.source), len(tokens))
        return tokens

    def _next_token(self) -> Optional[Token]:
        """Consume one token, or skippable whitespace, from the source."""
        location = self._location()
        current_char = self.source[self.pos]

        if current_char == ' ' or (self.skip_all_whitespace and current_char.isspace()):
            self._advance()
            return None

        if current_char in STRUCTURAL_TOKENS:
            self._advance()
            return Token(STRUCTURAL_TOKENS[current_char], None, location)

        if current_char in SINGLE_CHAR_OPERATORS:
            self._advance()
            return Token.operator(SINGLE_CHAR_OPERATORS[current_char], location)

        if current_char in COMPARISON_OPERATORS:
            return self._tokenize_comparison(current_char, location)

        if current_char in DOUBLED_OPERATORS:
            return self._tokenize_doubled(current_char, location)

        if current_char == '"':
            return self._tokenize_string(location)

        return self._tokenize_identifier_or_function(location)

    def _tokenize_comparison(self, lead: str, location: SourceLocation) -> Token:
        """Tokenize '==', '!=', '<', '<=', '>' or '>='."""
        with_equals, alone = COMPARISON_OPERATORS[lead]
        self._advance()

        if self._peek() == '=':
            self._advance()
            return Token.operator(with_equals, location)
        if alone is None:
            # '=' and '!' are only valid followed by '='
            raise create_unexpected_char_error(lead, location)
        return Token.operator(alone, location)

    def _tokenize_doubled(self, lead: str, location: SourceLocation) -> Token:
        """Tokenize '&&' or '||'."""
        self._advance()

        if self._peek() != lead:
            raise create_unexpected_char_error(lead, location)
        self._advance()
        return Token.operator(DOUBLED_OPERATORS[lead], location)

    def _tokenize_string(self, location: SourceLocation) -> Token:
        """Tokenize a double-quoted string literal, decoding escapes."""
        self._advance()  # Skip opening quote

        value_parts = []
        terminated = False

        while self.pos < len(self.source):
            char = self.source[self.pos]
            if char == '\\':
                escape_location = self._location()
                self._advance()
                if self.pos >= len(self.source):
                    raise create_unexpected_end_of_string_error(escape_location, in_string=True)
                escaped_char = self.source[self.pos]
                value_parts.append(ESCAPE_SEQUENCES.get(escaped_char, escaped_char))
                self._advance()
            elif char == '"':
                self._advance()  # Skip closing quote
                terminated = True
                break
            else:
                value_parts.append(char)
                self._advance()

        if not terminated and self.strict_strings:
            raise create_unexpected_end_of_string_error(location, in_string=True, after_escape=False)

        return Token.string_literal(''.join(value_parts), location)

    def _tokenize_identifier_or_function(self, location: SourceLocation) -> Token:
        """
        Tokenize an identifier, or a function name when '(' follows directly.

        The first character is always taken, so a stray symbol such as '@'
        becomes (part of) an identifier instead of an error.
        """
        value_parts = []
        first = True

        while self.pos < len(self.source):
            char = self.source[self.pos]
            if char == '\\':
                escape_location = self._location()
                self._advance()
                if self.pos >= len(self.source):
                    raise create_unexpected_end_of_string_error(escape_location)
                value_parts.append(self.source[self.pos])
                self._advance()
            elif first or is_identifier_char(char):
                value_parts.append(char)
                self._advance()
            else:
                break
            first = False

        # Peek, don't consume: '(' only decides the token kind
        if self._peek() == '(':
            return Token.function(''.join(value_parts), location)
        return Token.identifier(''.join(value_parts), location)

    def _location(self) -> SourceLocation:
        return SourceLocation(self.line, self.column, self.pos)

    def _advance(self):
        """Advance position by one character, updating line/column."""
        if self.pos < len(self.source):
            if self.source[self.pos] == '\n':
                self.line += 1
                self.column = 1
            else:
                self.column += 1
            self.pos += 1

    def _peek(self) -> Optional[str]:
        """Current character without consuming it, None at end of input."""
        if self.pos < len(self.source):
            return self.source[self.pos]
        return None


def tokenize(text: str, **options) -> List[Token]:
    """
    Convenience function to tokenize an expression string.

    Args:
        text: Expression text
        **options: Keyword options passed to Tokenizer

    Returns:
        List of tokens

    Raises:
        TokenizerError: If tokenizing fails
    """
    return Tokenizer(text, **options).tokenize()


def detokenize(tokens: Iterable[Token]) -> str:
    """
    Render tokens back to expression text.

    Tokens are joined by single spaces, except that a function name is
    kept directly against its '(' so it tokenizes as a function again.
    """
    parts = []
    previous = None
    for token in tokens:
        if previous is not None:
            glued = previous.type == TokenType.FUNCTION and token.type == TokenType.OPEN_PARENTHESIS
            if not glued:
                parts.append(' ')
        parts.append(token.lexeme)
        previous = token
    return ''.join(parts)
