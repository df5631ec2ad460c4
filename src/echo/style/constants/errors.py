"""
Error types for style sheet constant definition and resolution.
"""

from typing import Optional, Sequence


class ResolutionError(Exception):
    """
    Base error for constants that cannot be defined or resolved.

    Fatal to the style sheet load that triggered it.
    """

    def __init__(
        self,
        message: str,
        name: Optional[str] = None,
        formula: Optional[str] = None,
    ):
        super().__init__(message)
        self.message = message
        self.name = name
        self.formula = formula


class ConstantDefinitionError(ResolutionError):
    """
    Raised when a raw constant entry is malformed (blank name or value,
    unreadable constant document).
    """

    pass


class UnresolvedReferenceError(ResolutionError):
    """
    Raised when constants reference names that are missing or never
    converge (cycles, undefined results).
    """

    def __init__(self, message: str, names: Sequence[str]):
        super().__init__(message, name=names[0] if names else None)
        self.names = tuple(names)
