"""
Named style sheet constants and their fixpoint resolution.
"""

from .config import (
    DEFAULT_MULTI_VALUED_TYPES,
    DEFAULT_RESOLVER_CONFIG,
    ResolverConfig,
    is_multi_valued,
)
from .constant import Constant, ConstantEntry
from .errors import (
    ConstantDefinitionError,
    ResolutionError,
    UnresolvedReferenceError,
)
from .extent import EXTENT_TYPE, Extent, ExtentUnit
from .formatting import format_numeric, split_numeric
from .loader import load_constants, parse_constant_entries
from .resolver import (
    ConstantResolver,
    Resolution,
    ResolutionStatus,
    ResolvedConstants,
    infer_unit,
    resolve_reference,
)
from .table import ConstantTable

__all__ = [
    # Config
    "ResolverConfig",
    "DEFAULT_RESOLVER_CONFIG",
    "DEFAULT_MULTI_VALUED_TYPES",
    "is_multi_valued",
    # Model
    "Constant",
    "ConstantEntry",
    "ConstantTable",
    "EXTENT_TYPE",
    "Extent",
    "ExtentUnit",
    # Errors
    "ResolutionError",
    "ConstantDefinitionError",
    "UnresolvedReferenceError",
    # Formatting
    "format_numeric",
    "split_numeric",
    # Resolution
    "ConstantResolver",
    "Resolution",
    "ResolutionStatus",
    "ResolvedConstants",
    "infer_unit",
    "resolve_reference",
    # Loading
    "load_constants",
    "parse_constant_entries",
]
