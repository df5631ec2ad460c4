"""
Tests for the formula tokenizer.
"""

import pytest

from echo.style.expr import (
    ExpressionLimits,
    LimitExceededError,
    ParseError,
    TokenizerError,
    tokenize,
)
from echo.style.expr.tokenizer import TokenType


class TestNumbers:
    """Tests for number tokenization."""

    def test_tokenizes_integer_literals(self):
        tokens = tokenize("42")
        assert len(tokens) == 2
        assert tokens[0].type == TokenType.NUMBER
        assert tokens[0].value == "42"
        assert tokens[0].position == 0
        assert tokens[1].type == TokenType.EOF

    def test_tokenizes_decimal_literals(self):
        tokens = tokenize("3.14159")
        assert tokens[0].type == TokenType.NUMBER
        assert tokens[0].value == "3.14159"

    def test_tokenizes_trailing_decimal_point(self):
        tokens = tokenize("5.")
        assert tokens[0].value == "5."
        assert tokens[1].type == TokenType.EOF

    def test_rejects_leading_decimal_point(self):
        with pytest.raises(TokenizerError):
            tokenize(".5")


class TestOperators:
    """Tests for operator and delimiter tokenization."""

    def test_tokenizes_all_operators(self):
        tokens = tokenize("+-*/()")
        assert [t.type for t in tokens] == [
            TokenType.PLUS,
            TokenType.MINUS,
            TokenType.STAR,
            TokenType.SLASH,
            TokenType.LPAREN,
            TokenType.RPAREN,
            TokenType.EOF,
        ]

    def test_records_positions(self):
        tokens = tokenize("1 + 22")
        assert [t.position for t in tokens] == [0, 2, 4, 6]


class TestWhitespace:
    """Tests for whitespace handling."""

    def test_skips_spaces_tabs_and_newlines(self):
        tokens = tokenize(" 1\t+\n2\r ")
        assert [t.value for t in tokens[:-1]] == ["1", "+", "2"]


class TestErrors:
    """Tests for tokenizer errors."""

    def test_rejects_identifiers(self):
        with pytest.raises(TokenizerError) as exc_info:
            tokenize("2+gap")
        assert exc_info.value.position == 2
        assert "'g'" in str(exc_info.value)

    def test_tokenizer_error_is_a_parse_error(self):
        with pytest.raises(ParseError):
            tokenize("2%3")

    def test_formats_error_with_context(self):
        with pytest.raises(TokenizerError) as exc_info:
            tokenize("1+x")
        assert exc_info.value.format_with_context().endswith("1+x\n    ^")

    def test_enforces_length_limit(self):
        with pytest.raises(LimitExceededError):
            tokenize("1+1", ExpressionLimits(max_expression_length=2))
