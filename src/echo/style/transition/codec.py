"""
Parser and serializer for the transition shorthand.

Syntax: comma separated records, each an ordered subset of::

    [property] [time1] [function] [time2] [behavior]

e.g. ``"opacity 300ms ease-in 100ms discrete, width 1s"``. A record is
read with a slot machine: every token moves the record to a later slot,
so fields can be omitted but never reordered.
"""

from __future__ import annotations

import logging
import re
from enum import Enum, IntEnum
from typing import Any, Optional, Union

from echo.style.transition.errors import TransitionParseError
from echo.style.transition.keywords import TransitionBehavior, TransitionFunction
from echo.style.transition.model import SingleTransition, Transition

logger = logging.getLogger(__name__)

# Words and single commas; whitespace runs are separators
_TOKEN_PATTERN = re.compile(r",|[^\s,]+")

_TIME_PATTERN = re.compile(r"(\d+(\.\d*)?)(m?s)")


class TokenKind(Enum):
    TIME = "time"
    FUNCTION = "function"
    BEHAVIOR = "behavior"
    PROPERTY = "property"


class Slot(IntEnum):
    """Position reached in the current record."""

    START = 0
    PROPERTY = 1
    TIME1 = 2
    FUNCTION = 3
    TIME2 = 4
    BEHAVIOR = 5


# slot -> token kind -> next slot
_SLOT_TRANSITIONS: dict[Slot, dict[TokenKind, Slot]] = {
    Slot.START: {
        TokenKind.TIME: Slot.TIME1,
        TokenKind.FUNCTION: Slot.FUNCTION,
        TokenKind.BEHAVIOR: Slot.BEHAVIOR,
        TokenKind.PROPERTY: Slot.PROPERTY,
    },
    Slot.PROPERTY: {
        TokenKind.TIME: Slot.TIME1,
        TokenKind.FUNCTION: Slot.FUNCTION,
        TokenKind.BEHAVIOR: Slot.BEHAVIOR,
    },
    Slot.TIME1: {
        TokenKind.TIME: Slot.TIME2,
        TokenKind.FUNCTION: Slot.FUNCTION,
        TokenKind.BEHAVIOR: Slot.BEHAVIOR,
    },
    Slot.FUNCTION: {
        TokenKind.TIME: Slot.TIME2,
        TokenKind.BEHAVIOR: Slot.BEHAVIOR,
    },
    Slot.TIME2: {
        TokenKind.BEHAVIOR: Slot.BEHAVIOR,
    },
    Slot.BEHAVIOR: {},
}

_EXPECTED: dict[Slot, tuple[str, ...]] = {
    Slot.PROPERTY: ("time", "function", "behavior"),
    Slot.TIME1: ("function", "second time", "behavior"),
    Slot.FUNCTION: ("second time", "behavior"),
    Slot.TIME2: ("behavior",),
    Slot.BEHAVIOR: ("comma", "end"),
}

# Field filled when a token lands in a slot
_SLOT_FIELDS: dict[Slot, str] = {
    Slot.PROPERTY: "property",
    Slot.TIME1: "time1_ms",
    Slot.FUNCTION: "function",
    Slot.TIME2: "time2_ms",
    Slot.BEHAVIOR: "behavior",
}

TokenValue = Union[int, TransitionFunction, TransitionBehavior, str]


def parse_time(text: str) -> Optional[int]:
    """Reads ``"300ms"`` or ``"1.5s"`` as whole milliseconds; None otherwise."""
    match = _TIME_PATTERN.fullmatch(text)
    if match is None:
        return None
    value = float(match.group(1))
    if match.group(3) == "s":
        value *= 1000
    return int(value)


def classify_token(token: str) -> tuple[TokenKind, TokenValue]:
    """Classifies a word as time, easing function, behavior or property."""
    time = parse_time(token)
    if time is not None:
        return TokenKind.TIME, time
    function = TransitionFunction.from_text(token)
    if function is not None:
        return TokenKind.FUNCTION, function
    behavior = TransitionBehavior.from_text(token)
    if behavior is not None:
        return TokenKind.BEHAVIOR, behavior
    return TokenKind.PROPERTY, token


def parse_transition(value: Optional[str]) -> Optional[Transition]:
    """
    Parses a transition shorthand string.

    Empty records (two commas in a row, a leading or trailing comma) are
    skipped.

    Raises:
        TransitionParseError: If a token does not fit its position
    """
    if value is None:
        return None

    records: list[SingleTransition] = []
    fields: dict[str, Any] = {}
    slot = Slot.START

    for token in _TOKEN_PATTERN.findall(value):
        if token == ",":
            if fields:
                records.append(SingleTransition(**fields))
            fields = {}
            slot = Slot.START
            continue

        kind, token_value = classify_token(token)
        next_slot = _SLOT_TRANSITIONS[slot].get(kind)
        if next_slot is None:
            logger.debug(
                "transition_parse_failed",
                extra={"token": token, "slot": slot.name, "value": value},
            )
            raise TransitionParseError(token, _EXPECTED[slot], value)
        fields[_SLOT_FIELDS[next_slot]] = token_value
        slot = next_slot

    if fields:
        records.append(SingleTransition(**fields))
    return Transition(tuple(records))


def compile_transition(transition: Transition) -> str:
    """Serializes a transition back to its shorthand text."""
    return transition.compile()
