"""
Tokenizer for style sheet formulas.

Formulas reach the tokenizer after variable substitution, so the only
lexemes left are decimal numbers (``12``, ``2.5``, ``7.``), the four
operators and round brackets. Whitespace separates nothing and is dropped.
"""

import re
from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Optional

from .errors import TokenizerError
from .limits import DEFAULT_EXPRESSION_LIMITS, ExpressionLimits, check_expression_length


class TokenType(Enum):
    """Token types produced by the tokenizer."""

    NUMBER = "NUMBER"
    PLUS = "PLUS"
    MINUS = "MINUS"
    STAR = "STAR"
    SLASH = "SLASH"
    LPAREN = "LPAREN"
    RPAREN = "RPAREN"
    EOF = "EOF"


@dataclass
class Token:
    """A token and the offset of its first character in the formula."""

    type: TokenType
    value: str
    position: int


SINGLE_CHAR_TOKENS: Dict[str, TokenType] = {
    "(": TokenType.LPAREN,
    ")": TokenType.RPAREN,
    "+": TokenType.PLUS,
    "-": TokenType.MINUS,
    "*": TokenType.STAR,
    "/": TokenType.SLASH,
}

# ASCII digits only; a fraction needs an integer part, "7." is accepted
_NUMBER_PATTERN = re.compile(r"[0-9]+(?:\.[0-9]*)?")

_WHITESPACE = frozenset(" \t\n\r")


class Tokenizer:
    """Splits a formula into number, operator and bracket tokens."""

    def __init__(self, source: str, limits: Optional[ExpressionLimits] = None):
        self._source = source
        self._limits = limits or DEFAULT_EXPRESSION_LIMITS

    def tokenize(self) -> List[Token]:
        """Scans the whole formula; the last token is always EOF."""
        check_expression_length(self._source, self._limits)

        source = self._source
        tokens: List[Token] = []
        position = 0
        while position < len(source):
            ch = source[position]
            if ch in _WHITESPACE:
                position += 1
                continue

            operator = SINGLE_CHAR_TOKENS.get(ch)
            if operator is not None:
                tokens.append(Token(operator, ch, position))
                position += 1
                continue

            number = _NUMBER_PATTERN.match(source, position)
            if number is None:
                raise TokenizerError(
                    f"Unexpected character: '{ch}' at position {position}",
                    position,
                    source,
                )
            tokens.append(Token(TokenType.NUMBER, number.group(0), position))
            position = number.end()

        tokens.append(Token(TokenType.EOF, "", position))
        return tokens


def tokenize(source: str, limits: Optional[ExpressionLimits] = None) -> List[Token]:
    """
    Tokenizes a formula string.

    Raises:
        TokenizerError: If the formula contains a character that starts no token
        LimitExceededError: If the formula is longer than the configured limit
    """
    return Tokenizer(source, limits).tokenize()
