"""
Attribute constraints and the constraint matcher.

Constraint objects restrict the values an attribute accepts. Each constraint
has a *kind*, the qualified name of its class, and type editors declare the
kinds they know how to honor. :func:`satisfies` decides whether an editor's
supported kinds cover an attribute's constraints under the editor's
:class:`~attribute_editors.types.Quantifier`.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol

from attribute_editors.hierarchy import qualified_name
from attribute_editors.types import INT_MAX, INT_MIN, Quantifier

if TYPE_CHECKING:
    from collections.abc import Iterable
    from typing import Any

    from attribute_editors.types import ConstraintKind


class Constraint(Protocol):
    """Protocol for value-level constraints."""

    def allows(self, value: Any) -> bool:
        """Check if the constraint allows the given value."""
        ...


@dataclass(frozen=True, slots=True)
class NonNull:
    """Constraint that rejects None values."""

    def allows(self, value: Any) -> bool:
        return value is not None


@dataclass(frozen=True, slots=True)
class NotBlank:
    """Constraint that rejects None and strings made of whitespace only."""

    def allows(self, value: Any) -> bool:
        return value is not None and bool(str(value).strip())


@dataclass(frozen=True, slots=True)
class ValueSet:
    """
    Constraint that checks membership in a finite set.

    Parameters
    ----------
    allowed : frozenset[Any]
        The set of allowed values.
    """

    allowed: frozenset[Any] = frozenset()

    def allows(self, value: Any) -> bool:
        return value in self.allowed


@dataclass(frozen=True, slots=True)
class IntRange:
    """
    Inclusive integer range.

    Parameters
    ----------
    min : int, default=INT_MIN
        Lower bound; the sentinel means unbounded.
    max : int, default=INT_MAX
        Upper bound; the sentinel means unbounded.
    """

    min: int = INT_MIN
    max: int = INT_MAX

    def allows(self, value: Any) -> bool:
        """
        Check if the value is an integer within the bounds.

        Booleans, strings and floats with a fractional part are rejected.
        A bound equal to its sentinel does not limit the value.
        """
        if isinstance(value, (bool, str)):
            return False
        try:
            v = int(value)
        except (TypeError, ValueError, OverflowError):
            return False
        if v != value:
            return False
        if self.min != INT_MIN and v < self.min:
            return False
        return self.max == INT_MAX or v <= self.max


@dataclass(frozen=True, slots=True)
class DoubleRange:
    """
    Inclusive floating point range.

    Parameters
    ----------
    min : float, default=-inf
    max : float, default=inf
    """

    min: float = -math.inf
    max: float = math.inf

    def allows(self, value: Any) -> bool:
        """Check if the value is a number within the bounds; NaN and strings are rejected."""
        if isinstance(value, (bool, str)):
            return False
        try:
            v = float(value)
        except (TypeError, ValueError):
            return False
        if math.isnan(v):
            return False
        return self.min <= v <= self.max


def constraint_kind(constraint: object) -> ConstraintKind:
    """
    Return the kind identifier of a constraint.

    Strings are kinds already, classes are identified by their qualified name
    and any other object by the qualified name of its class.
    """
    if isinstance(constraint, str):
        return constraint
    if isinstance(constraint, type):
        return qualified_name(constraint)
    return qualified_name(type(constraint))


def constraint_kinds(constraints: Iterable[object]) -> frozenset[ConstraintKind]:
    """Collapse constraints (objects, classes or kind strings) into a set of kinds."""
    return frozenset(constraint_kind(c) for c in constraints)


def satisfies(
    attribute_constraints: Iterable[ConstraintKind],
    editor_supported: Iterable[ConstraintKind],
    quantifier: Quantifier,
) -> bool:
    """
    Check whether an editor honors an attribute's constraints.

    Parameters
    ----------
    attribute_constraints : iterable of str
        Constraint kinds declared on the attribute.
    editor_supported : iterable of str
        Constraint kinds the editor knows how to honor.
    quantifier : Quantifier
        ``ALL`` requires every attribute kind to be supported, ``ANY``
        requires at least one.

    Returns
    -------
    bool
        Always True for an attribute without constraints.
    """
    required = frozenset(attribute_constraints)
    if not required:
        return True
    supported = frozenset(editor_supported)
    if quantifier == Quantifier.ALL:
        return all(kind in supported for kind in required)
    if quantifier == Quantifier.ANY:
        return any(kind in supported for kind in required)
    return False


__all__ = [
    "Constraint",
    "DoubleRange",
    "IntRange",
    "NonNull",
    "NotBlank",
    "ValueSet",
    "constraint_kind",
    "constraint_kinds",
    "satisfies",
]
