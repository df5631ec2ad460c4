"""
Abstract Syntax Tree (AST) node types for style sheet formulas.

The AST is produced by the parser and consumed by the evaluator. Trees are
immutable and never shared between evaluations.
"""

from abc import ABC
from dataclasses import dataclass
from typing import Literal, Union

# ============================================================
# Operator Types
# ============================================================

BinaryOperator = Literal["+", "-", "*", "/"]


# ============================================================
# AST Node Types
# ============================================================


@dataclass(frozen=True)
class AstNodeBase(ABC):
    """Base class for all AST nodes."""

    position: int
    """Position in source formula (for error reporting)."""


@dataclass(frozen=True)
class NumberNode(AstNodeBase):
    """Number literal node."""

    value: float

    @property
    def type(self) -> Literal["Number"]:
        return "Number"


@dataclass(frozen=True)
class UnaryMinusNode(AstNodeBase):
    """Unary minus node."""

    operand: "AstNode"

    @property
    def type(self) -> Literal["UnaryMinus"]:
        return "UnaryMinus"


@dataclass(frozen=True)
class BinaryOpNode(AstNodeBase):
    """Binary operator node."""

    operator: BinaryOperator
    left: "AstNode"
    right: "AstNode"

    @property
    def type(self) -> Literal["BinaryOp"]:
        return "BinaryOp"


# Union type for all AST nodes
AstNode = Union[NumberNode, UnaryMinusNode, BinaryOpNode]


# ============================================================
# AST Utilities
# ============================================================


def ast_to_string(node: AstNode, indent: int = 0) -> str:
    """Returns a human-readable representation of an AST node for debugging."""
    prefix = "  " * indent

    if node.type == "Number":
        return f"{prefix}Number: {node.value}"

    if node.type == "UnaryMinus":
        return f"{prefix}UnaryMinus\n{ast_to_string(node.operand, indent + 1)}"

    if node.type == "BinaryOp":
        return (
            f"{prefix}BinaryOp: {node.operator}\n"
            f"{ast_to_string(node.left, indent + 1)}\n"
            f"{ast_to_string(node.right, indent + 1)}"
        )

    return f"{prefix}Unknown: {node}"
