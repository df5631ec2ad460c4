"""Numeric text helpers shared by constant definition and resolution."""

from __future__ import annotations

import re
from typing import Optional

# A leading decimal number followed by an optional unit, e.g. "12.5px"
CONSTANT_SPLIT = re.compile(r"(\d+(\.\d*)?)(.*)", re.DOTALL)


def split_numeric(value: str) -> Optional[tuple[float, Optional[str]]]:
    """Split ``"12px"`` into ``(12.0, "px")``; None when *value* is not numeric."""
    match = CONSTANT_SPLIT.fullmatch(value)
    if match is None:
        return None
    unit = match.group(3) or None
    return float(match.group(1)), unit


def format_numeric(number: float, unit: Optional[str] = None) -> str:
    """
    Format *number* with six decimals, drop trailing zeros and a trailing
    decimal point, then append *unit* verbatim.
    """
    text = f"{number:.6f}"
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    if unit is None:
        return text
    return text + unit
