"""Transition property values."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from echo.style.transition.keywords import TransitionBehavior, TransitionFunction

# Property name that targets every animatable property
PROPERTY_ALL = "all"


@dataclass(frozen=True)
class SingleTransition:
    """One comma separated entry of a transition: every field is optional."""

    property: Optional[str] = None
    time1_ms: Optional[int] = None
    function: Optional[TransitionFunction] = None
    time2_ms: Optional[int] = None
    behavior: Optional[TransitionBehavior] = None

    def compile(self) -> str:
        """Renders the present fields in canonical order, space separated."""
        parts: list[str] = []
        if self.property is not None:
            parts.append(self.property)
        if self.time1_ms is not None:
            parts.append(f"{self.time1_ms}ms")
        if self.function is not None:
            parts.append(self.function.value)
        if self.time2_ms is not None:
            parts.append(f"{self.time2_ms}ms")
        if self.behavior is not None:
            parts.append(self.behavior.value)
        return " ".join(parts)


@dataclass(frozen=True)
class Transition:
    """
    A transition property: one or more single transitions, in the order
    they apply.
    """

    transitions: tuple[SingleTransition, ...] = ()

    @classmethod
    def single(
        cls,
        property: Optional[str] = None,
        time1_ms: Optional[int] = None,
        function: Optional[TransitionFunction] = None,
        time2_ms: Optional[int] = None,
        behavior: Optional[TransitionBehavior] = None,
    ) -> Transition:
        return cls(
            (SingleTransition(property, time1_ms, function, time2_ms, behavior),)
        )

    def compile(self) -> str:
        """Renders the transition shorthand, records separated by commas."""
        return ",".join(t.compile() for t in self.transitions)

    def __len__(self) -> int:
        return len(self.transitions)
