"""
Fixpoint resolution of style sheet constants.

Constants may refer to other constants (``@gap``) or compute a value from
them (``@gap*2+1``), in any declaration order. The resolver never mutates
the ``ConstantTable``: it owns a separate state table (name -> Resolution)
and produces a new version of it on every pass. Each stage repeats its pass
while the previous pass changed at least one entry, so every loop ends
after at most ``len(table)`` productive passes.

Stages:
    aliases     ``@name`` copies text, value and unit once ``name`` is resolved
    formulas    ``@formula`` is evaluated against the resolved numeric values;
                references still pending evaluate to NaN and are retried
    composites  multi-valued lists (``Insets``, ``Border``) resolve each
                ``@`` token; aliases run once more afterwards so aliases of
                composites settle
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, replace
from enum import Enum
from typing import Callable, Mapping, Optional

from echo.style.constants.config import ResolverConfig, is_multi_valued
from echo.style.constants.constant import Constant
from echo.style.constants.errors import ResolutionError, UnresolvedReferenceError
from echo.style.constants.extent import EXTENT_TYPE, Extent, ExtentUnit
from echo.style.constants.formatting import format_numeric
from echo.style.constants.table import ConstantTable
from echo.style.expr import VARIABLE_PATTERN, ExpressionError, evaluate, find_identifiers
from echo.style.expr.limits import ExpressionLimits

logger = logging.getLogger(__name__)


class ResolutionStatus(Enum):
    """Resolution state of one constant."""

    # Depends on constants that are not resolved yet
    PENDING = "pending"
    RESOLVED = "resolved"
    # Evaluates to NaN although every input is resolved (e.g. 0/0)
    FAILED = "failed"


@dataclass(frozen=True)
class Resolution:
    """Resolved (or not yet resolved) value of one constant."""

    name: str
    status: ResolutionStatus
    text: str
    numeric_value: Optional[float] = None
    unit: Optional[str] = None
    error: Optional[str] = None

    @property
    def resolved(self) -> bool:
        return self.status is ResolutionStatus.RESOLVED

    @property
    def is_numeric(self) -> bool:
        return self.resolved and self.numeric_value is not None


StateTable = dict[str, Resolution]


def infer_unit(formula: str, states: Mapping[str, Resolution]) -> Optional[str]:
    """Unit of the first constant referenced by *formula* that has one."""
    for name in find_identifiers(formula):
        state = states.get(name)
        if state is not None and state.unit and state.unit.strip():
            return state.unit
    return None


def _numeric_values(states: Mapping[str, Resolution]) -> dict[str, float]:
    return {
        name: state.numeric_value
        for name, state in states.items()
        if state.is_numeric and state.numeric_value is not None
    }


def _shadow_values(states: Mapping[str, Resolution]) -> dict[str, float]:
    # Unresolved numerics are NaN so formulas using them short-circuit
    shadow = _numeric_values(states)
    for name, state in states.items():
        if not state.resolved:
            shadow[name] = math.nan
    return shadow


def _alias_target(value: str) -> Optional[str]:
    if value.startswith("@") and VARIABLE_PATTERN.fullmatch(value, 1):
        return value[1:]
    return None


def _pending_references(formula: str, states: Mapping[str, Resolution]) -> list[str]:
    return [
        name
        for name in find_identifiers(formula)
        if name in states and not states[name].resolved
    ]


def resolve_reference(
    reference: str,
    states: Mapping[str, Resolution],
    numeric_values: Mapping[str, float],
    limits: ExpressionLimits,
) -> str:
    """
    Resolve one ``@name`` or ``@formula`` token to literal text.

    A reference to a textual constant yields its text; anything else is
    evaluated against *numeric_values* and formatted with the inferred unit.

    Raises:
        ExpressionError: If the formula cannot be evaluated
    """
    formula = reference[1:]
    target = states.get(formula)
    if target is not None and target.resolved and target.numeric_value is None:
        return target.text

    value = evaluate(formula, numeric_values, limits)
    if math.isnan(value):
        raise ExpressionError(f"Formula evaluates to NaN: {formula}", expression=formula)
    return format_numeric(value, infer_unit(formula, states))


class ConstantResolver:
    """Resolves the references of a ``ConstantTable``."""

    def __init__(self, table: ConstantTable, config: Optional[ResolverConfig] = None):
        self._table = table
        self._config = config or table.config
        self._limits = self._config.limits
        self._passes = 0

    def resolve(self) -> ResolvedConstants:
        """
        Runs the resolution stages and returns the resolved constants.

        Raises:
            ResolutionError: If a formula is malformed
            UnresolvedReferenceError: If a formula names an unknown constant,
                or (strict mode) constants are left unresolved
        """
        states = self._initial_states()
        states = self._until_stable("aliases", states, self._alias_pass)
        states = self._until_stable("formulas", states, self._formula_pass)
        states = self._until_stable("composites", states, self._composite_pass)
        states = self._until_stable("aliases", states, self._alias_pass)

        unresolved = [name for name, state in states.items() if not state.resolved]
        if unresolved:
            if self._config.strict:
                raise UnresolvedReferenceError(
                    "Unresolved constants: " + ", ".join(unresolved), unresolved
                )
            for name in unresolved:
                logger.warning(
                    "constant_unresolved",
                    extra={
                        "constant": name,
                        "value": self._table.constants[name].raw_value,
                        "status": states[name].status.value,
                    },
                )

        return ResolvedConstants(self._table, states, self._config, self._passes)

    def _until_stable(
        self,
        stage: str,
        states: StateTable,
        run_pass: Callable[[StateTable], tuple[StateTable, bool]],
    ) -> StateTable:
        changed = True
        while changed:
            states, changed = run_pass(states)
            self._passes += 1
            logger.debug(
                "resolution_pass",
                extra={"stage": stage, "pass": self._passes, "changed": changed},
            )
        return states

    def _initial_states(self) -> StateTable:
        states: StateTable = {}
        for constant in self._table:
            status = ResolutionStatus.RESOLVED
            if constant.numeric_value is None:
                if constant.is_composite:
                    if any(t.startswith("@") for t in constant.raw_value.split()):
                        status = ResolutionStatus.PENDING
                elif constant.is_reference:
                    status = ResolutionStatus.PENDING
            states[constant.name] = Resolution(
                name=constant.name,
                status=status,
                text=constant.raw_value,
                numeric_value=constant.numeric_value,
                unit=constant.unit,
            )
        return states

    def _alias_pass(self, states: StateTable) -> tuple[StateTable, bool]:
        updated = dict(states)
        changed = False
        for constant in self._table:
            if updated[constant.name].resolved or constant.is_composite:
                continue
            target_name = _alias_target(constant.raw_value)
            if target_name is None:
                continue
            target = updated.get(target_name)
            if target is None or not target.resolved:
                continue
            updated[constant.name] = replace(target, name=constant.name)
            self._log_resolved(constant, updated[constant.name])
            changed = True
        return updated, changed

    def _formula_pass(self, states: StateTable) -> tuple[StateTable, bool]:
        updated = dict(states)
        shadow = _shadow_values(updated)
        changed = False
        for constant in self._table:
            state = updated[constant.name]
            if state.status is not ResolutionStatus.PENDING:
                continue
            if constant.is_composite or not constant.is_reference:
                continue

            formula = constant.raw_value[1:]
            self._check_known(constant, formula)
            try:
                value = evaluate(formula, shadow, self._limits)
            except ExpressionError as error:
                logger.error(
                    "formula_evaluation_failed",
                    extra={"constant": constant.name, "formula": formula, "error": str(error)},
                )
                raise ResolutionError(
                    f"Error in formula: {formula} ({error.message})",
                    name=constant.name,
                    formula=formula,
                ) from error

            if math.isnan(value):
                if _pending_references(formula, updated):
                    continue
                updated[constant.name] = replace(
                    state,
                    status=ResolutionStatus.FAILED,
                    error=f"Formula evaluates to NaN: {formula}",
                )
                changed = True
                continue

            unit = infer_unit(formula, updated)
            updated[constant.name] = Resolution(
                name=constant.name,
                status=ResolutionStatus.RESOLVED,
                text=format_numeric(value, unit),
                numeric_value=value,
                unit=unit,
            )
            shadow[constant.name] = value
            self._log_resolved(constant, updated[constant.name])
            changed = True
        return updated, changed

    def _composite_pass(self, states: StateTable) -> tuple[StateTable, bool]:
        updated = dict(states)
        changed = False
        for constant in self._table:
            if updated[constant.name].resolved or not constant.is_composite:
                continue
            tokens = constant.raw_value.split()
            references = [t for t in tokens if t.startswith("@")]
            if any(_pending_references(t[1:], updated) for t in references):
                continue

            numeric_values = _numeric_values(updated)
            resolved_tokens = []
            for token in tokens:
                if not token.startswith("@"):
                    resolved_tokens.append(token)
                    continue
                try:
                    resolved_tokens.append(
                        resolve_reference(token, updated, numeric_values, self._limits)
                    )
                except ExpressionError as error:
                    logger.error(
                        "formula_evaluation_failed",
                        extra={
                            "constant": constant.name,
                            "formula": token,
                            "error": str(error),
                        },
                    )
                    raise ResolutionError(
                        f"Error in formula: {token} (origin: {constant.raw_value})",
                        name=constant.name,
                        formula=token,
                    ) from error

            updated[constant.name] = Resolution(
                name=constant.name,
                status=ResolutionStatus.RESOLVED,
                text=" ".join(resolved_tokens),
            )
            self._log_resolved(constant, updated[constant.name])
            changed = True
        return updated, changed

    def _check_known(self, constant: Constant, formula: str) -> None:
        for name in find_identifiers(formula):
            if name not in self._table:
                raise UnresolvedReferenceError(
                    f"Unknown constant '{name}' referenced by '{constant.name}': "
                    f"{constant.raw_value}",
                    [constant.name],
                )

    def _log_resolved(self, constant: Constant, state: Resolution) -> None:
        logger.debug(
            "constant_resolved",
            extra={"constant": constant.name, "value": state.text, "pass": self._passes},
        )


class ResolvedConstants:
    """
    Read-only result of resolving a constant table.

    Used by the style loader to replace ``@`` references in property values.
    """

    def __init__(
        self,
        table: ConstantTable,
        states: Mapping[str, Resolution],
        config: ResolverConfig,
        passes: int,
    ):
        self._table = table
        self._states = dict(states)
        self._config = config
        self._passes = passes
        self._numeric_values = _numeric_values(self._states)

    @property
    def constants(self) -> Mapping[str, Resolution]:
        return dict(self._states)

    @property
    def numeric_values(self) -> Mapping[str, float]:
        return dict(self._numeric_values)

    @property
    def unresolved(self) -> tuple[str, ...]:
        return tuple(name for name, state in self._states.items() if not state.resolved)

    @property
    def passes(self) -> int:
        """Number of state table versions produced while resolving."""
        return self._passes

    def get(self, name: str) -> Optional[Resolution]:
        return self._states.get(name)

    def value(self, name: str) -> Optional[str]:
        state = self._states.get(name)
        return state.text if state is not None else None

    def substitute(self, value: Optional[str], property_type: Optional[str] = None) -> Optional[str]:
        """
        Replaces the ``@`` references of a property value.

        Multi-valued property types resolve each space separated ``@`` token
        and rejoin the tokens with single spaces; other types only resolve a
        value that is itself a reference. Values without references are
        returned unchanged.

        Raises:
            ResolutionError: If a reference cannot be evaluated
        """
        if value is None:
            return None

        if is_multi_valued(property_type, self._config):
            tokens = value.split()
            if not any(t.startswith("@") for t in tokens):
                return value
            return " ".join(
                self._resolve(t) if t.startswith("@") else t for t in tokens
            )

        if value.startswith("@"):
            return self._resolve(value)
        return value

    def named_extents(self) -> dict[str, Extent]:
        """Numeric ``Extent`` constants with a known unit, by name."""
        extents: dict[str, Extent] = {}
        for constant in self._table:
            if constant.type != EXTENT_TYPE:
                continue
            state = self._states[constant.name]
            if not state.is_numeric or not math.isfinite(state.numeric_value):
                continue
            unit = ExtentUnit.from_text(state.unit)
            if unit is not None:
                extents[constant.name] = Extent(int(state.numeric_value), unit)
        return extents

    def _resolve(self, reference: str) -> str:
        try:
            return resolve_reference(
                reference.strip(), self._states, self._numeric_values, self._config.limits
            )
        except ExpressionError as error:
            raise ResolutionError(
                f"can't evaluate: {reference[1:]}", formula=reference[1:]
            ) from error

    def __contains__(self, name: object) -> bool:
        return name in self._states

    def __len__(self) -> int:
        return len(self._states)
