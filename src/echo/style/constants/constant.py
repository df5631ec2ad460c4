"""
Constant model: raw constant entries and parsed constant records.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from echo.style.constants.config import ResolverConfig, is_multi_valued
from echo.style.constants.formatting import split_numeric


class ConstantEntry(BaseModel):
    """
    A raw ``{name, type, value}`` constant triple as declared in a style sheet.

    Accepts both the style sheet attribute names (``n``, ``t``, ``v``) and
    the long field names.
    """

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    name: Optional[str] = Field(default=None, alias="n")
    type: Optional[str] = Field(default=None, alias="t")
    value: Optional[str] = Field(default=None, alias="v")

    @field_validator("name", "type", "value", mode="before")
    @classmethod
    def _stringify_scalars(cls, v: Any) -> Any:
        # YAML reads "v: 10" as an int
        if isinstance(v, bool):
            return str(v).lower()
        if isinstance(v, (int, float)):
            return str(v)
        return v


@dataclass(frozen=True)
class Constant:
    """
    A named style sheet constant.

    ``numeric_value`` and ``unit`` are set when the raw value reads as a
    number with an optional unit (``"12px"``). Multi-valued values with
    several tokens (``"@gap 2px"`` for an ``Insets`` constant) are kept as
    text; their tokens are resolved one by one.
    """

    name: str
    raw_value: str
    type: Optional[str] = None
    numeric_value: Optional[float] = None
    unit: Optional[str] = None
    multi_valued: bool = False
    source: Any = field(default=None, compare=False, repr=False)

    @classmethod
    def create(
        cls,
        name: str,
        value: str,
        type: Optional[str] = None,
        source: Any = None,
        config: Optional[ResolverConfig] = None,
    ) -> Constant:
        multi_valued = is_multi_valued(type, config)
        numeric_value = None
        unit = None
        if not multi_valued or " " not in value or len(value) <= 1:
            numeric = split_numeric(value)
            if numeric is not None:
                numeric_value, unit = numeric
        return cls(
            name=name,
            raw_value=value,
            type=type,
            numeric_value=numeric_value,
            unit=unit,
            multi_valued=multi_valued,
            source=source,
        )

    @property
    def is_reference(self) -> bool:
        """Whether the raw value refers to other constants (``@...``)."""
        return self.raw_value.startswith("@")

    @property
    def is_composite(self) -> bool:
        """Whether the value is a multi-valued list of several tokens."""
        return self.multi_valued and len(self.raw_value.split()) > 1
