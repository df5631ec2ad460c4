"""
Constant table: the named constants declared by one style sheet.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Iterator, Mapping, Optional, Union

from echo.style.constants.config import DEFAULT_RESOLVER_CONFIG, ResolverConfig
from echo.style.constants.constant import Constant, ConstantEntry
from echo.style.constants.errors import ConstantDefinitionError

if TYPE_CHECKING:
    from echo.style.constants.resolver import ResolvedConstants

logger = logging.getLogger(__name__)


class ConstantTable:
    """
    Named constants in declaration order, plus the subset whose value is
    already numeric.

    The table is filled once (``put``) and then handed to the resolver;
    resolution never mutates it.
    """

    def __init__(self, config: Optional[ResolverConfig] = None):
        self._config = config or DEFAULT_RESOLVER_CONFIG
        self._constants: dict[str, Constant] = {}
        self._numeric_values: dict[str, float] = {}

    @property
    def config(self) -> ResolverConfig:
        return self._config

    @property
    def constants(self) -> Mapping[str, Constant]:
        return dict(self._constants)

    @property
    def numeric_values(self) -> Mapping[str, float]:
        return dict(self._numeric_values)

    def put(
        self,
        entry: Union[ConstantEntry, Mapping[str, Any]],
        source: Any = None,
    ) -> Constant:
        """
        Adds one constant from a raw ``{name, type, value}`` entry.

        Raises:
            ConstantDefinitionError: If the name or the value is blank
        """
        if not isinstance(entry, ConstantEntry):
            entry = ConstantEntry.model_validate(entry)

        name, value = entry.name, entry.value
        if name is None or not name.strip():
            raise ConstantDefinitionError(
                f"constant with no name {name} = {value}", name=name
            )
        if value is None or not value.strip():
            raise ConstantDefinitionError(
                f"constant with no value {name} = {value}", name=name
            )

        constant = Constant.create(
            name, value, type=entry.type or None, source=source, config=self._config
        )
        if name in self._constants:
            logger.warning(
                "constant_redefined",
                extra={"constant": name, "value": value},
            )
            self._numeric_values.pop(name, None)

        self._constants[name] = constant
        if constant.numeric_value is not None:
            self._numeric_values[name] = constant.numeric_value

        logger.debug(
            "constant_defined",
            extra={
                "constant": name,
                "type": constant.type,
                "numeric": constant.numeric_value is not None,
            },
        )
        return constant

    def define(
        self,
        name: str,
        value: str,
        type: Optional[str] = None,
        source: Any = None,
    ) -> Constant:
        """Shorthand for ``put`` with keyword fields."""
        return self.put(ConstantEntry(name=name, value=value, type=type), source)

    def get(self, name: str) -> Optional[Constant]:
        return self._constants.get(name)

    def resolve(self) -> ResolvedConstants:
        """Resolves constant references; see ``ConstantResolver``."""
        from echo.style.constants.resolver import ConstantResolver

        return ConstantResolver(self).resolve()

    def __contains__(self, name: object) -> bool:
        return name in self._constants

    def __len__(self) -> int:
        return len(self._constants)

    def __iter__(self) -> Iterator[Constant]:
        return iter(list(self._constants.values()))
