"""
Configuration for constant resolution.
"""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from echo.style.expr.limits import DEFAULT_EXPRESSION_LIMITS, ExpressionLimits

# Property types whose values are space separated lists (e.g. "2px 4px")
DEFAULT_MULTI_VALUED_TYPES = frozenset({"Insets", "Border"})


class ResolverConfig(BaseModel):
    """
    Settings for building and resolving a constant table.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    # Types whose values hold several space separated tokens resolved one by one
    multi_valued_types: frozenset[str] = Field(default=DEFAULT_MULTI_VALUED_TYPES)

    # Raise when constants are left unresolved instead of only logging them
    strict: bool = True

    # Limits applied to every formula evaluated during resolution
    limits: ExpressionLimits = DEFAULT_EXPRESSION_LIMITS


DEFAULT_RESOLVER_CONFIG = ResolverConfig()


def is_multi_valued(
    property_type: Optional[str], config: Optional[ResolverConfig] = None
) -> bool:
    """Whether values of *property_type* are space separated lists."""
    config = config or DEFAULT_RESOLVER_CONFIG
    return property_type in config.multi_valued_types
