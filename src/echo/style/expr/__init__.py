"""
Arithmetic formula engine for style sheet constants.

This module provides a deterministic, side-effect-free evaluator for
formulas made of numbers, parentheses, unary minus and the four basic
operators, with variables substituted by name before parsing.
"""

# Core types and utilities
from .ast import (
    AstNode,
    AstNodeBase,
    BinaryOperator,
    BinaryOpNode,
    NumberNode,
    UnaryMinusNode,
    ast_to_string,
)
from .errors import (
    ExpressionError,
    LimitExceededError,
    ParseError,
    TokenizerError,
)

# Evaluator
from .evaluator import (
    VARIABLE_PATTERN,
    Evaluator,
    evaluate,
    find_identifiers,
    substitute_variables,
)
from .limits import (
    DEFAULT_EXPRESSION_LIMITS,
    ExpressionLimits,
    check_nesting_depth,
    check_expression_length,
)

# Parser
from .parser import (
    Parser,
    parse,
)

# Tokenizer
from .tokenizer import (
    Token,
    Tokenizer,
    TokenType,
    tokenize,
)

__all__ = [
    # AST types
    "AstNode",
    "AstNodeBase",
    "NumberNode",
    "UnaryMinusNode",
    "BinaryOpNode",
    "BinaryOperator",
    "ast_to_string",
    # Errors
    "ExpressionError",
    "TokenizerError",
    "ParseError",
    "LimitExceededError",
    # Limits
    "ExpressionLimits",
    "DEFAULT_EXPRESSION_LIMITS",
    "check_expression_length",
    "check_nesting_depth",
    # Tokenizer
    "Token",
    "TokenType",
    "Tokenizer",
    "tokenize",
    # Parser
    "Parser",
    "parse",
    # Evaluator
    "VARIABLE_PATTERN",
    "Evaluator",
    "evaluate",
    "find_identifiers",
    "substitute_variables",
]
