"""
Tests for token definitions and error diagnostics.
"""

import unittest
import sys
import os

# Add the project root to the Python path
project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
sys.path.insert(0, project_root)

from bitexpr.lexer.tokens import Token, TokenType, Operator, SourceLocation, OPERATORS
from bitexpr.lexer.errors import (
    TokenizerError, UnexpectedCharError, UnexpectedEndOfStringError, ERROR_CODES,
    create_unexpected_char_error, create_unexpected_end_of_string_error
)


class TestOperator(unittest.TestCase):

    def test_fourteen_operators(self):
        self.assertEqual(len(Operator), 14)
        self.assertEqual(len(OPERATORS), 14)

    def test_lexeme_lookup(self):
        for lexeme, operator in OPERATORS.items():
            self.assertEqual(operator.lexeme, lexeme)
        self.assertIs(OPERATORS["&&"], Operator.AND)

    def test_display_name(self):
        self.assertEqual(Operator.GREATER_EQUAL.display_name, "GreaterEqual")
        self.assertEqual(Operator.PLUS.display_name, "Plus")


class TestToken(unittest.TestCase):

    def test_equality_ignores_location(self):
        located = Token.identifier("x", SourceLocation(1, 5, 4))
        self.assertEqual(located, Token.identifier("x"))
        self.assertEqual(hash(located), hash(Token.identifier("x")))

    def test_kind_matters_for_equality(self):
        self.assertNotEqual(Token.identifier("f"), Token.function("f"))
        self.assertNotEqual(Token.identifier("a"), Token.string_literal("a"))

    def test_tokens_are_immutable(self):
        token = Token.identifier("x")
        with self.assertRaises(AttributeError):
            token.value = "y"

    def test_structural_lexemes(self):
        self.assertEqual(Token.open_parenthesis().lexeme, "(")
        self.assertEqual(Token.close_parenthesis().lexeme, ")")
        self.assertEqual(Token.comma().lexeme, ",")

    def test_operator_lexeme(self):
        self.assertEqual(Token.operator(Operator.NOT_EQUAL).lexeme, "!=")

    def test_string_literal_lexeme_is_escaped(self):
        token = Token.string_literal('say "hi"\n\tback\\slash')
        self.assertEqual(token.lexeme, '"say \\"hi\\"\\n\\tback\\\\slash"')

    def test_identifier_lexeme_escapes_special_chars(self):
        self.assertEqual(Token.identifier("math.pi_2").lexeme, "math.pi_2")
        self.assertEqual(Token.identifier("a b").lexeme, "a\\ b")
        self.assertEqual(Token.function("f(").lexeme, "f\\(")

    def test_str(self):
        self.assertEqual(str(Token.identifier("x")), "x")
        self.assertEqual(str(Token.function("sin")), "sin")
        self.assertEqual(str(Token.operator(Operator.LESS_EQUAL)), "LessEqual")
        self.assertEqual(str(Token.string_literal("hi")), '"hi"')
        self.assertEqual(str(Token.comma()), ",")

    def test_repr(self):
        self.assertEqual(repr(Token.identifier("x")), "Token(IDENTIFIER, 'x')")
        self.assertEqual(repr(Token.operator(Operator.OR)), "Token(OPERATOR, OR)")
        self.assertEqual(repr(Token.open_parenthesis()), "Token(OPEN_PARENTHESIS)")

    def test_predicates(self):
        self.assertTrue(Token.operator(Operator.PLUS).is_operator)
        self.assertTrue(Token.identifier("x").is_identifier)
        self.assertTrue(Token.function("f").is_function)
        self.assertTrue(Token.string_literal("s").is_literal)
        self.assertFalse(Token.comma().is_literal)

    def test_structural_tokens_have_no_payload(self):
        for token in (Token.open_parenthesis(), Token.close_parenthesis(), Token.comma()):
            self.assertIsNone(token.value)
        self.assertEqual(Token.comma().type, TokenType.COMMA)


class TestDiagnostics(unittest.TestCase):

    def test_unexpected_char_suggestions(self):
        location = SourceLocation(1, 1, 0)
        self.assertEqual(create_unexpected_char_error("=", location).diagnostic.suggestions, ["=="])
        self.assertEqual(create_unexpected_char_error("!", location).diagnostic.suggestions, ["!="])
        self.assertEqual(create_unexpected_char_error("&", location).diagnostic.suggestions, ["&&"])
        self.assertEqual(create_unexpected_char_error("|", location).diagnostic.suggestions, ["||"])

    def test_unexpected_char_help_names_operator(self):
        error = create_unexpected_char_error("=", SourceLocation(1, 1, 0))
        self.assertEqual(error.diagnostic.help_text, "'=' is only valid as part of '=='.")

    def test_unexpected_char_message(self):
        error = create_unexpected_char_error("&", SourceLocation(1, 3, 2))
        self.assertIsInstance(error, TokenizerError)
        self.assertEqual(error.message, "Unexpected character '&'")
        self.assertEqual(error.code, "T001")
        rendered = str(error)
        self.assertTrue(rendered.startswith("ERROR: Unexpected character '&'\n"))
        self.assertIn("  --> 1:3\n", rendered)
        self.assertIn("'&&'", rendered)

    def test_diagnostic_rendering(self):
        error = create_unexpected_char_error("|", SourceLocation(2, 7, 9))
        self.assertEqual(error.diagnostic.severity, "error")
        self.assertEqual(
            str(error),
            "ERROR: Unexpected character '|'\n"
            "  --> 2:7\n"
            "  help: '|' is only valid as part of '||'.\n"
            "  suggestions:\n"
            "    - ||\n"
        )

    def test_end_of_string_messages(self):
        location = SourceLocation(1, 4, 3)
        escape_error = create_unexpected_end_of_string_error(location, in_string=True)
        self.assertIsInstance(escape_error, UnexpectedEndOfStringError)
        self.assertEqual(escape_error.message, "Unexpected end of string after escape character")
        self.assertIn("string literal", escape_error.diagnostic.help_text)

        identifier_error = create_unexpected_end_of_string_error(location)
        self.assertIn("identifier", identifier_error.diagnostic.help_text)

        unterminated = create_unexpected_end_of_string_error(location, after_escape=False)
        self.assertEqual(unterminated.message, "Unterminated string literal")
        self.assertEqual(unterminated.code, "T002")

    def test_error_codes(self):
        self.assertEqual(set(ERROR_CODES), {"T001", "T002"})

    def test_error_hierarchy(self):
        self.assertTrue(issubclass(UnexpectedCharError, TokenizerError))
        self.assertTrue(issubclass(UnexpectedEndOfStringError, TokenizerError))
        self.assertTrue(issubclass(TokenizerError, Exception))


if __name__ == "__main__":
    unittest.main()
