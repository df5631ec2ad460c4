"""
Keyword enumerations of the transition shorthand.
"""

from __future__ import annotations

from enum import Enum
from typing import Optional


class TransitionFunction(Enum):
    """CSS easing functions."""

    EASE = "ease"
    LINEAR = "linear"
    EASE_IN = "ease-in"
    EASE_OUT = "ease-out"
    EASE_IN_OUT = "ease-in-out"
    STEP_START = "step-start"
    STEP_END = "step-end"

    @classmethod
    def from_text(cls, text: str) -> Optional[TransitionFunction]:
        return _FUNCTIONS_BY_TEXT.get(text)


class TransitionBehavior(Enum):
    """CSS ``transition-behavior`` values."""

    NORMAL = "normal"
    DISCRETE = "discrete"

    @classmethod
    def from_text(cls, text: str) -> Optional[TransitionBehavior]:
        return _BEHAVIORS_BY_TEXT.get(text)


_FUNCTIONS_BY_TEXT: dict[str, TransitionFunction] = {f.value: f for f in TransitionFunction}
_BEHAVIORS_BY_TEXT: dict[str, TransitionBehavior] = {b.value: b for b in TransitionBehavior}
