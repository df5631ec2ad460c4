"""Extent values built from resolved ``Extent`` constants."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional

# Constant type whose resolved values are published as named extents
EXTENT_TYPE = "Extent"


class ExtentUnit(Enum):
    """CSS length units an extent can carry."""

    CM = "cm"
    EM = "em"
    EX = "ex"
    IN = "in"
    MM = "mm"
    PC = "pc"
    PERCENT = "percent"
    PT = "pt"
    PX = "px"

    @classmethod
    def from_text(cls, unit: Optional[str]) -> Optional[ExtentUnit]:
        if unit is None:
            return None
        return _UNITS_BY_TEXT.get(unit)


_UNITS_BY_TEXT: dict[str, ExtentUnit] = {u.value: u for u in ExtentUnit}
_UNITS_BY_TEXT["%"] = ExtentUnit.PERCENT


@dataclass(frozen=True)
class Extent:
    """An integral length with a unit, e.g. ``Extent(12, ExtentUnit.PX)``."""

    value: int
    unit: ExtentUnit

    def __str__(self) -> str:
        suffix = "%" if self.unit is ExtentUnit.PERCENT else self.unit.value
        return f"{self.value}{suffix}"
