"""
Transition shorthand values: model, keywords and text codec.
"""

from .codec import (
    Slot,
    TokenKind,
    classify_token,
    compile_transition,
    parse_time,
    parse_transition,
)
from .errors import TransitionParseError
from .keywords import TransitionBehavior, TransitionFunction
from .model import PROPERTY_ALL, SingleTransition, Transition

__all__ = [
    "PROPERTY_ALL",
    "SingleTransition",
    "Transition",
    "TransitionBehavior",
    "TransitionFunction",
    "TransitionParseError",
    "Slot",
    "TokenKind",
    "classify_token",
    "compile_transition",
    "parse_time",
    "parse_transition",
]
