"""Transition shorthand parse errors."""

from typing import Sequence


class TransitionParseError(ValueError):
    """Raised when a token does not fit the current transition slot."""

    def __init__(self, token: str, expected: Sequence[str], source: str):
        message = (
            f"Invalid transition (expected {', '.join(expected)}, got {token!r}): {source}"
        )
        super().__init__(message)
        self.message = message
        self.token = token
        self.expected = tuple(expected)
        self.source = source
