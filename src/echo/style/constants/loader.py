"""
Loads constant declarations from JSON or YAML documents.

Accepted shapes::

    constants:
      - {n: gap, t: Extent, v: 4px}
      - {n: wide_gap, v: "@gap*2"}

or a bare list of entries. Entries use either the style sheet attribute
names (``n``, ``t``, ``v``) or ``name``, ``type`` and ``value``.
"""

from __future__ import annotations

import json
import logging
from typing import Any, Literal, Optional

import yaml
from pydantic import ValidationError

from echo.style.constants.config import ResolverConfig
from echo.style.constants.constant import ConstantEntry
from echo.style.constants.errors import ConstantDefinitionError
from echo.style.constants.table import ConstantTable

logger = logging.getLogger(__name__)

DocumentFormat = Literal["json", "yaml"]


def _detect_format(content: str) -> DocumentFormat:
    """Sniff the document format by its first non-whitespace character."""
    trimmed = content.lstrip()
    if trimmed.startswith("{") or trimmed.startswith("["):
        return "json"
    return "yaml"


def _parse_document(content: str, format: DocumentFormat) -> Any:
    if format == "json":
        return json.loads(content)
    return yaml.safe_load(content or "")


def _entries_from(document: Any) -> list[Any]:
    if document is None:
        return []
    if isinstance(document, dict):
        if "constants" not in document:
            raise ConstantDefinitionError(
                "Constant document object has no 'constants' key: "
                + ", ".join(sorted(str(key) for key in document))
            )
        # "constants:" with nothing after it is an empty list
        document = document["constants"]
        if document is None:
            return []
    if not isinstance(document, list):
        raise ConstantDefinitionError(
            "Constant document must be a list or an object with a 'constants' list"
        )
    return document


def parse_constant_entries(
    content: str, format: Optional[DocumentFormat] = None
) -> list[ConstantEntry]:
    """
    Parses a constant document into raw entries without validating them
    further than their shape.

    Raises:
        ConstantDefinitionError: If the document cannot be parsed
    """
    detected_format = format or _detect_format(content)
    try:
        document = _parse_document(content, detected_format)
        return [ConstantEntry.model_validate(item) for item in _entries_from(document)]
    except (ValueError, yaml.YAMLError, ValidationError) as error:
        logger.error(
            "constant_document_parse_failed",
            extra={"format": detected_format, "error": str(error)},
        )
        raise ConstantDefinitionError(
            f"Failed to parse constant document ({detected_format}): {error}"
        ) from error


def load_constants(
    content: str,
    format: Optional[DocumentFormat] = None,
    config: Optional[ResolverConfig] = None,
) -> ConstantTable:
    """
    Builds a ``ConstantTable`` from a JSON or YAML constant document.

    The returned table still has to be resolved.
    """
    table = ConstantTable(config)
    for index, entry in enumerate(parse_constant_entries(content, format)):
        table.put(entry, source=index)
    logger.debug("constants_loaded", extra={"count": len(table)})
    return table
