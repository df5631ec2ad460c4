"""
Resource limits for formula parsing and evaluation.

These limits cap pathological style sheet formulas without rejecting
ordinary ones. Flat operator chains (``1+1+...+1``) are never limited:
the parser builds them in a loop and the evaluator walks them in a loop.
"""

from dataclasses import dataclass
from typing import Optional

from .errors import LimitExceededError


@dataclass(frozen=True)
class ExpressionLimits:
    """Formula limits configuration."""

    # Maximum formula string length in characters; None means unbounded
    max_expression_length: Optional[int] = None

    # Significant integer digits kept per number literal; further digits
    # only scale the magnitude
    max_number_digits: int = 38

    # Maximum nesting of brackets and unary minus, the only constructs the
    # parser and evaluator recurse through
    max_nesting_depth: int = 200


# Default formula limits.
DEFAULT_EXPRESSION_LIMITS = ExpressionLimits()


def check_expression_length(
    expression: str, limits: Optional[ExpressionLimits] = None
) -> None:
    """Validates that formula length is within limits."""
    limits = limits or DEFAULT_EXPRESSION_LIMITS
    max_length = limits.max_expression_length
    if max_length is not None and len(expression) > max_length:
        raise LimitExceededError("max_expression_length", max_length, len(expression))


def check_nesting_depth(depth: int, limits: Optional[ExpressionLimits] = None) -> None:
    """Validates bracket and unary minus nesting during parsing."""
    limits = limits or DEFAULT_EXPRESSION_LIMITS
    if depth > limits.max_nesting_depth:
        raise LimitExceededError("max_nesting_depth", limits.max_nesting_depth, depth)
