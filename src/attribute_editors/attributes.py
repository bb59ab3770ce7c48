"""
Attribute descriptors and declarative component attributes.

Components declare their configurable attributes as :class:`Attribute` class
attributes::

    class Clustering:
        threshold = Attribute(float, DoubleRange(0.0, 1.0), default=0.5)

:func:`attributes_of` turns such declarations into immutable
:class:`AttributeDescriptor` records that the editor resolver consumes.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import TYPE_CHECKING, Any, TypeVar

from attribute_editors.constraints import constraint_kinds
from attribute_editors.hierarchy import qualified_name

if TYPE_CHECKING:
    from collections.abc import Mapping

    from attribute_editors.constraints import Constraint
    from attribute_editors.types import AttributeKey, ConstraintKind, TypeLike

C = TypeVar("C")


def _declaring_class(component_type: type, attribute_id: str) -> type:
    for cls in component_type.__mro__:
        if isinstance(vars(cls).get(attribute_id), Attribute):
            return cls
    return component_type


def attribute_key(component_type: TypeLike, attribute_id: str) -> AttributeKey:
    """
    Build the key of an attribute.

    The key is ``"<declaring type>.<attribute id>"``. For classes the
    declaring type is the nearest class in the MRO that declares
    ``attribute_id`` as an :class:`Attribute`, so a subclass and its parent
    share the key of an inherited attribute.
    """
    if isinstance(component_type, str):
        return f"{component_type}.{attribute_id}"
    return f"{qualified_name(_declaring_class(component_type, attribute_id))}.{attribute_id}"


@dataclass(frozen=True, slots=True)
class AttributeDescriptor:
    """
    Immutable description of one configurable attribute of a component.

    Parameters
    ----------
    key : str
        Stable identifier, unique within the owning component type.
    declared_type : type or str
        Nominal value type of the attribute.
    constraints : frozenset
        Constraint objects attached to the attribute. Any iterable is
        accepted and collapsed into a frozenset.
    label : str, optional
        Human-readable name.
    default : Any, optional
        Default value.
    description : str, optional
        Longer documentation of the attribute.
    """

    key: AttributeKey
    declared_type: TypeLike
    constraints: frozenset[Constraint] = field(default_factory=frozenset)
    label: str | None = field(default=None, compare=False)
    default: Any = field(default=None, compare=False)
    description: str | None = field(default=None, compare=False)

    def __post_init__(self) -> None:
        if not isinstance(self.constraints, frozenset):
            object.__setattr__(self, "constraints", frozenset(self.constraints))

    def __str__(self) -> str:
        return f"{self.key} ({qualified_name(self.declared_type)})"

    @property
    def constraint_kinds(self) -> frozenset[ConstraintKind]:
        """Kinds of the attached constraints."""
        return constraint_kinds(self.constraints)

    @property
    def is_constrained(self) -> bool:
        return bool(self.constraints)

    def find_constraint(self, kind: type[C]) -> C | None:
        """Return the first attached constraint that is an instance of ``kind``."""
        for constraint in self.constraints:
            if isinstance(constraint, kind):
                return constraint
        return None

    def validate(self, value: Any) -> None:
        """
        Check a value against every attached constraint.

        Raises
        ------
        ValueError
            If any constraint rejects the value.
        """
        for constraint in self.constraints:
            if not constraint.allows(value):
                raise ValueError(
                    f"Value {value!r} of attribute {self.key} violates {type(constraint).__name__}"
                )


class Attribute:
    """
    Declaration of a configurable attribute on a component class.

    Parameters
    ----------
    declared_type : type or str
        Nominal value type.
    *constraints
        Constraint objects restricting the value.
    default : Any, optional
    label : str, optional
    description : str, optional
    """

    __slots__ = ("constraints", "declared_type", "default", "description", "label", "name")

    def __init__(
        self,
        declared_type: TypeLike,
        *constraints: Constraint,
        default: Any = None,
        label: str | None = None,
        description: str | None = None,
    ) -> None:
        self.declared_type = declared_type
        self.constraints = frozenset(constraints)
        self.default = default
        self.label = label
        self.description = description
        self.name: str | None = None

    def __set_name__(self, owner: type, name: str) -> None:
        self.name = name

    def __repr__(self) -> str:
        return f"Attribute({qualified_name(self.declared_type)}, name={self.name!r})"

    def describe(self, owner: type) -> AttributeDescriptor:
        """Build the descriptor of this declaration as seen from ``owner``."""
        if self.name is None:
            raise ValueError("Attribute is not bound to a component class")
        return AttributeDescriptor(
            key=attribute_key(owner, self.name),
            declared_type=self.declared_type,
            constraints=self.constraints,
            label=self.label if self.label is not None else self.name,
            default=self.default,
            description=self.description,
        )


def attributes_of(component: object) -> Mapping[str, AttributeDescriptor]:
    """
    Collect the attribute descriptors of a component type (or instance).

    Declarations of base classes are inherited; a subclass redeclaring an
    attribute id shadows the base declaration.

    Returns
    -------
    Mapping[str, AttributeDescriptor]
        Read-only mapping from attribute id to descriptor, base classes first.
    """
    component_type = component if isinstance(component, type) else type(component)
    declared: dict[str, AttributeDescriptor] = {}
    for cls in reversed(component_type.__mro__):
        for name, value in vars(cls).items():
            if isinstance(value, Attribute):
                declared[name] = value.describe(component_type)
    return MappingProxyType(declared)


__all__ = [
    "Attribute",
    "AttributeDescriptor",
    "attribute_key",
    "attributes_of",
]
