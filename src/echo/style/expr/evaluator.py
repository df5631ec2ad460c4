"""
Formula evaluator.

Evaluates a formula AST to a float. Variables are not part of the grammar:
they are substituted into the formula text before parsing.

NaN handling semantics:
- A variable bound to NaN means "value not known yet".
- Any formula referencing such a variable evaluates to NaN without being
  parsed, so an unknown value never turns into a parse error.
- Division by zero follows IEEE-754 (infinity or NaN), it is not an error.
"""

import math
import re
from decimal import Decimal
from typing import List, Mapping, Optional

from .ast import AstNode, BinaryOpNode
from .limits import DEFAULT_EXPRESSION_LIMITS, ExpressionLimits
from .parser import parse

# Identifier syntax for variables in a formula
VARIABLE_PATTERN = re.compile(r"[a-zA-Z_][a-zA-Z_0-9]*")


class Evaluator:
    """Evaluates an AST node and returns the result."""

    def evaluate(self, node: AstNode) -> float:
        """Evaluates an AST node and returns the value."""
        node_type = node.type

        if node_type == "Number":
            return node.value

        if node_type == "UnaryMinus":
            return -self.evaluate(node.operand)

        if node_type == "BinaryOp":
            return self._evaluate_binary_op(node)

        raise ValueError(f"Unexpected node type: {node_type}")

    def _evaluate_binary_op(self, node: BinaryOpNode) -> float:
        # Left associative chains lean left; walk that spine in a loop
        chain: List[BinaryOpNode] = []
        current: AstNode = node
        while current.type == "BinaryOp":
            chain.append(current)
            current = current.left

        value = self.evaluate(current)
        for op_node in reversed(chain):
            value = self._apply(op_node.operator, value, self.evaluate(op_node.right))
        return value

    def _apply(self, operator: str, left: float, right: float) -> float:
        if operator == "+":
            return left + right
        if operator == "-":
            return left - right
        if operator == "*":
            return left * right
        if operator == "/":
            return _divide(left, right)

        raise ValueError(f"Unknown operator: {operator}")


def _divide(left: float, right: float) -> float:
    """Floating point division with IEEE-754 semantics for a zero divisor."""
    if right != 0:
        return left / right
    if left == 0 or math.isnan(left):
        return math.nan
    return math.copysign(math.inf, left) * math.copysign(1.0, right)


def _format_variable(value: float) -> str:
    text = repr(float(value))
    if "e" in text:
        # The grammar has no exponent notation
        text = format(Decimal(text), "f")
    return text


def find_identifiers(formula: str) -> List[str]:
    """Returns the identifiers of a formula in the order they appear."""
    return VARIABLE_PATTERN.findall(formula)


def substitute_variables(
    formula: str, variables: Mapping[str, float]
) -> Optional[str]:
    """
    Replaces the known variables of a formula with their decimal text.

    Unknown identifiers are left untouched. Returns None as soon as a
    referenced variable is NaN.
    """
    parts: List[str] = []
    last = 0
    for match in VARIABLE_PATTERN.finditer(formula):
        name = match.group(0)
        value = variables.get(name)
        parts.append(formula[last : match.start()])
        if value is None:
            parts.append(name)
        elif math.isnan(value):
            return None
        else:
            parts.append(_format_variable(value))
        last = match.end()
    parts.append(formula[last:])
    return "".join(parts)


def evaluate(
    formula: str,
    variables: Optional[Mapping[str, float]] = None,
    limits: ExpressionLimits = DEFAULT_EXPRESSION_LIMITS,
) -> float:
    """
    Evaluates a formula, substituting variables first when given.

    Args:
        formula: The formula to evaluate, e.g. ``"gap*2+1"``
        variables: Optional variable name to value mapping; NaN values mark
            variables whose value is not known yet
        limits: Optional formula limits

    Returns:
        The value, or NaN if a referenced variable is NaN

    Raises:
        ParseError: If the (substituted) formula is malformed
        LimitExceededError: If formula limits are exceeded
    """
    if variables is not None:
        substituted = substitute_variables(formula, variables)
        if substituted is None:
            return math.nan
        formula = substituted

    ast = parse(formula, limits)
    return Evaluator().evaluate(ast)
