"""
Declarative selection criteria for editor registrations.

A criterion is a small immutable record describing what the resolver is looking
for. The registry evaluates criteria through their ``allows`` method and holds
no matching logic itself.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Protocol, TypeVar

from attribute_editors.attributes import attribute_key as key_of
from attribute_editors.compatibility import is_compatible
from attribute_editors.constraints import satisfies

if TYPE_CHECKING:
    from attribute_editors.hierarchy import TypeHierarchy
    from attribute_editors.registry.registrations import (
        DedicatedEditorRegistration,
        TypeEditorRegistration,
    )
    from attribute_editors.types import AttributeKey, ConstraintKind, TypeLike


R = TypeVar("R", contravariant=True)


class Criterion(Protocol[R]):
    """Protocol for registration criteria."""

    def allows(self, registration: R) -> bool:
        """Check if the registration matches the criterion."""
        ...


@dataclass(frozen=True, slots=True)
class DedicatedEditorCriterion:
    """
    Select dedicated editors for one attribute of a component type.

    Parameters
    ----------
    owner_type : type or str
        Concrete type of the component owning the attribute.
    attribute_key : str
        Key of the attribute.
    hierarchy : TypeHierarchy, optional
        Named-type metadata for owner types given as names.
    """

    owner_type: TypeLike
    attribute_key: AttributeKey
    hierarchy: TypeHierarchy | None = field(default=None, compare=False)

    def allows(self, registration: DedicatedEditorRegistration) -> bool:
        """
        Check key equality and owner compatibility.

        Both must hold: a compatible owner type alone never selects a
        dedicated editor registered for another attribute. For owner classes
        the key is derived from the owner, so a subclass redeclaring the
        attribute still matches an editor registered on its parent.
        """
        if isinstance(self.owner_type, type):
            key = key_of(self.owner_type, registration.attribute_id)
        else:
            key = registration.attribute_key
        return key == self.attribute_key and is_compatible(
            self.owner_type, registration.component_type, self.hierarchy
        )


@dataclass(frozen=True, slots=True)
class TypeEditorCriterion:
    """
    Select type editors for an attribute value type and its constraints.

    Parameters
    ----------
    value_type : type or str
        Declared type of the attribute.
    constraint_kinds : frozenset[str]
        Constraint kinds declared on the attribute.
    hierarchy : TypeHierarchy, optional
        Named-type metadata for value types given as names.
    """

    value_type: TypeLike
    constraint_kinds: frozenset[ConstraintKind] = frozenset()
    hierarchy: TypeHierarchy | None = field(default=None, compare=False)

    def allows(self, registration: TypeEditorRegistration) -> bool:
        return is_compatible(self.value_type, registration.value_type, self.hierarchy) and (
            satisfies(
                self.constraint_kinds,
                registration.supported_constraint_kinds,
                registration.quantifier,
            )
        )


__all__ = [
    "Criterion",
    "DedicatedEditorCriterion",
    "TypeEditorCriterion",
]
