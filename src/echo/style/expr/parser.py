"""
Parser for style sheet formulas.

Parses a stream of tokens into an Abstract Syntax Tree (AST).
Uses recursive descent parsing with operator precedence.

Grammar:
    expression := term { ('+'|'-') term }
    term       := factor { ('*'|'/') factor }
    factor     := '(' expression ')' | '-' factor | number
    number     := digit+ ('.' digit*)?
"""

from typing import List

from .ast import AstNode, BinaryOperator, BinaryOpNode, NumberNode, UnaryMinusNode
from .errors import ParseError
from .limits import DEFAULT_EXPRESSION_LIMITS, ExpressionLimits, check_nesting_depth
from .tokenizer import Token, TokenType, tokenize

_OPERATORS = {
    TokenType.PLUS: "+",
    TokenType.MINUS: "-",
    TokenType.STAR: "*",
    TokenType.SLASH: "/",
}


class Parser:
    """Parser for formula strings."""

    def __init__(
        self,
        tokens: List[Token],
        source: str,
        limits: ExpressionLimits = DEFAULT_EXPRESSION_LIMITS,
    ):
        self._tokens = tokens
        self._source = source
        self._limits = limits
        self._current = 0
        self._nesting = 0

    def parse(self) -> AstNode:
        """Parses the token stream into an AST."""
        ast = self._parse_expression()

        if not self._is_at_end():
            raise self._unexpected(self._peek())

        return ast

    # ============================================================
    # Token Helpers
    # ============================================================

    def _is_at_end(self) -> bool:
        return self._peek().type == TokenType.EOF

    def _peek(self) -> Token:
        return self._tokens[self._current]

    def _previous(self) -> Token:
        return self._tokens[self._current - 1]

    def _advance(self) -> Token:
        if not self._is_at_end():
            self._current += 1
        return self._previous()

    def _check(self, token_type: TokenType) -> bool:
        if self._is_at_end():
            return False
        return self._peek().type == token_type

    def _match(self, *types: TokenType) -> bool:
        for token_type in types:
            if self._check(token_type):
                self._advance()
                return True
        return False

    def _unexpected(self, token: Token) -> ParseError:
        return ParseError(
            f"Unexpected character: '{token.value}' at position {token.position}",
            token.position,
            self._source,
        )

    def _build_binary(
        self, token: Token, left: AstNode, right: AstNode
    ) -> BinaryOpNode:
        operator: BinaryOperator = _OPERATORS[token.type]
        return BinaryOpNode(
            position=token.position, operator=operator, left=left, right=right
        )

    # ============================================================
    # Expression Parsing (by precedence, lowest to highest)
    # ============================================================

    def _parse_expression(self) -> AstNode:
        """Parses additive: +, -"""
        node = self._parse_term()

        while self._match(TokenType.PLUS, TokenType.MINUS):
            operator_token = self._previous()
            right = self._parse_term()
            node = self._build_binary(operator_token, node, right)

        return node

    def _parse_term(self) -> AstNode:
        """Parses multiplicative: *, /"""
        node = self._parse_factor()

        while self._match(TokenType.STAR, TokenType.SLASH):
            operator_token = self._previous()
            right = self._parse_factor()
            node = self._build_binary(operator_token, node, right)

        return node

    def _parse_factor(self) -> AstNode:
        """Parses factor: parenthesised expression, unary minus or number."""
        token = self._peek()

        if self._match(TokenType.LPAREN):
            self._enter()
            try:
                node = self._parse_expression()
            finally:
                self._nesting -= 1
            if not self._match(TokenType.RPAREN):
                raise ParseError(
                    "Missing ')' bracket", self._peek().position, self._source
                )
            return node

        if self._match(TokenType.MINUS):
            self._enter()
            try:
                operand = self._parse_factor()
            finally:
                self._nesting -= 1
            return UnaryMinusNode(position=token.position, operand=operand)

        if self._match(TokenType.NUMBER):
            return NumberNode(position=token.position, value=self._number_value(token.value))

        if self._is_at_end():
            raise ParseError("Unexpected end of expression", token.position, self._source)

        raise self._unexpected(token)

    def _enter(self) -> None:
        self._nesting += 1
        check_nesting_depth(self._nesting, self._limits)

    def _number_value(self, text: str) -> float:
        integer, _, fraction = text.partition(".")
        excess = len(integer) - self._limits.max_number_digits
        if excess > 0:
            # Digits past the limit only scale the magnitude
            integer = integer[: self._limits.max_number_digits] + "0" * excess
        return float(f"{integer}.{fraction or '0'}")


def parse(
    source: str, limits: ExpressionLimits = DEFAULT_EXPRESSION_LIMITS
) -> AstNode:
    """
    Parses a formula string into an AST.

    Args:
        source: The formula string to parse
        limits: Optional formula limits

    Returns:
        The parsed AST

    Raises:
        TokenizerError: If tokenization fails
        ParseError: If parsing fails
        LimitExceededError: If the formula is too long or nests brackets too deeply
    """
    tokens = tokenize(source, limits)
    parser = Parser(tokens, source, limits)
    return parser.parse()
