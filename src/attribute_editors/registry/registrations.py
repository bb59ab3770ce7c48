"""
Editor registration records.

Two kinds of registrations exist:

* :class:`DedicatedEditorRegistration` binds an editor to one attribute of
  one component type (and its subtypes);
* :class:`TypeEditorRegistration` binds an editor to an attribute value type,
  together with the constraint kinds the editor honors and the quantifier it
  applies to them.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, TypeAlias

from attribute_editors.attributes import attribute_key
from attribute_editors.constraints import constraint_kinds
from attribute_editors.hierarchy import qualified_name
from attribute_editors.types import Quantifier

if TYPE_CHECKING:
    from attribute_editors.types import AttributeKey, ConstraintKind, EditorFactory, TypeLike


@dataclass(frozen=True, slots=True)
class DedicatedEditorRegistration:
    """
    Editor registered for a specific component attribute.

    Parameters
    ----------
    component_type : type or str
        Component type the editor targets; subtypes match as well.
    attribute_id : str
        Attribute identifier within the component type.
    factory : Callable[[], Any]
        Zero-argument callable producing a new editor instance.

    Notes
    -----
    ``attribute_key`` is the key as seen from ``component_type``. Lookups for
    an owner class recompute the key from the owner and ``attribute_id``.
    """

    component_type: TypeLike
    attribute_id: str
    factory: EditorFactory
    attribute_key: AttributeKey = field(init=False)

    def __post_init__(self) -> None:
        object.__setattr__(
            self, "attribute_key", attribute_key(self.component_type, self.attribute_id)
        )

    def create_editor(self) -> Any:
        """Instantiate the editor."""
        return self.factory()

    def __str__(self) -> str:
        return f"dedicated editor for {self.attribute_key}"


@dataclass(frozen=True, slots=True)
class TypeEditorRegistration:
    """
    Editor registered for an attribute value type.

    Parameters
    ----------
    value_type : type or str
        Attribute value type the editor targets; subtypes match as well.
    factory : Callable[[], Any]
        Zero-argument callable producing a new editor instance.
    supported_constraint_kinds : frozenset[str]
        Constraint kinds the editor can honor. Constraint classes and
        instances are accepted and converted to their kinds.
    quantifier : Quantifier, default=Quantifier.ALL
        Whether every constraint of an attribute must be supported or just one.
    """

    value_type: TypeLike
    factory: EditorFactory
    supported_constraint_kinds: frozenset[ConstraintKind] = frozenset()
    quantifier: Quantifier = Quantifier.ALL

    def __post_init__(self) -> None:
        object.__setattr__(
            self, "supported_constraint_kinds", constraint_kinds(self.supported_constraint_kinds)
        )
        object.__setattr__(self, "quantifier", Quantifier(self.quantifier))

    @property
    def has_constraints(self) -> bool:
        """Whether the editor declares any supported constraint kind."""
        return bool(self.supported_constraint_kinds)

    def create_editor(self) -> Any:
        """Instantiate the editor."""
        return self.factory()

    def __str__(self) -> str:
        return f"type editor for {qualified_name(self.value_type)}"


EditorRegistration: TypeAlias = DedicatedEditorRegistration | TypeEditorRegistration


__all__ = [
    "DedicatedEditorRegistration",
    "EditorRegistration",
    "TypeEditorRegistration",
]
