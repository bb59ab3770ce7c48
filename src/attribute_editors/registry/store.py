"""
Editor Registry
===============

Ordered storage of dedicated and type editor registrations.

The registry is populated once by a loader (see
:class:`~attribute_editors.loader.EditorLoader`) and then frozen. After that
it is read-only, so concurrent lookups need no locking.

Notes
-----
* Registration order is preserved and is meaningful: the resolver takes the
  first matching dedicated editor and uses registration order as the
  tie-break between type editors.
* Matching logic lives in criteria objects
  (:mod:`attribute_editors.registry.criteria`); the registry only iterates.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import warnings
from typing import TYPE_CHECKING

from attribute_editors.registry.registrations import (
    DedicatedEditorRegistration,
    TypeEditorRegistration,
)
from attribute_editors.types import Quantifier

if TYPE_CHECKING:
    from collections.abc import Iterable

    from attribute_editors.registry.criteria import Criterion
    from attribute_editors.types import ConstraintKind, EditorFactory, TypeLike


class EditorRegistry:
    """
    Container of editor registrations.

    Public API
    ----------
    add_dedicated_editor(component_type, attribute_id, factory)
        Register an editor for one component attribute.
    add_type_editor(value_type, factory, supported_constraint_kinds=(), quantifier=ALL)
        Register an editor for an attribute value type.
    freeze()
        Forbid further population.
    filter_dedicated(criterion), filter_type(criterion)
        Registrations the criterion allows, in registration order.
    """

    def __init__(self) -> None:
        self._dedicated: list[DedicatedEditorRegistration] = []
        self._type: list[TypeEditorRegistration] = []
        self._frozen = False

    def __len__(self) -> int:
        return len(self._dedicated) + len(self._type)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(dedicated={len(self._dedicated)}, "
            f"type={len(self._type)}, frozen={self._frozen})"
        )

    # --------------------------------------------------------------------- #
    # Population
    # --------------------------------------------------------------------- #

    @property
    def frozen(self) -> bool:
        return self._frozen

    def freeze(self) -> None:
        """Make the registry read-only. Idempotent."""
        self._frozen = True

    def _check_mutable(self) -> None:
        if self._frozen:
            raise RuntimeError("Editor registry is frozen; register editors before first use")

    def add(self, registration: DedicatedEditorRegistration | TypeEditorRegistration) -> None:
        """
        Append a registration record.

        Notes
        -----
        * An equal registration already present is ignored with a warning.
        """
        self._check_mutable()
        target: list[DedicatedEditorRegistration] | list[TypeEditorRegistration]
        if isinstance(registration, DedicatedEditorRegistration):
            target = self._dedicated
        elif isinstance(registration, TypeEditorRegistration):
            target = self._type
        else:
            raise TypeError(f"Unsupported registration: {registration!r}")

        if registration in target:
            warnings.warn(
                f"{registration} have been already added. "
                "Registration will not be taken into account",
                UserWarning,
                stacklevel=3,
            )
            return
        target.append(registration)  # type: ignore[arg-type]

    def add_dedicated_editor(
        self, component_type: TypeLike, attribute_id: str, factory: EditorFactory
    ) -> DedicatedEditorRegistration:
        """Register an editor for the attribute ``attribute_id`` of ``component_type``."""
        registration = DedicatedEditorRegistration(
            component_type=component_type, attribute_id=attribute_id, factory=factory
        )
        self.add(registration)
        return registration

    def add_type_editor(
        self,
        value_type: TypeLike,
        factory: EditorFactory,
        supported_constraint_kinds: Iterable[ConstraintKind | type] = (),
        quantifier: Quantifier = Quantifier.ALL,
    ) -> TypeEditorRegistration:
        """Register an editor for attributes whose declared type is ``value_type``."""
        registration = TypeEditorRegistration(
            value_type=value_type,
            factory=factory,
            supported_constraint_kinds=frozenset(supported_constraint_kinds),
            quantifier=quantifier,
        )
        self.add(registration)
        return registration

    # --------------------------------------------------------------------- #
    # Lookup
    # --------------------------------------------------------------------- #

    @property
    def dedicated_editors(self) -> tuple[DedicatedEditorRegistration, ...]:
        return tuple(self._dedicated)

    @property
    def type_editors(self) -> tuple[TypeEditorRegistration, ...]:
        return tuple(self._type)

    def filter_dedicated(
        self, criterion: Criterion[DedicatedEditorRegistration]
    ) -> list[DedicatedEditorRegistration]:
        """Return the dedicated registrations allowed by ``criterion``, in registration order."""
        return [reg for reg in self._dedicated if criterion.allows(reg)]

    def filter_type(
        self, criterion: Criterion[TypeEditorRegistration]
    ) -> list[TypeEditorRegistration]:
        """Return the type registrations allowed by ``criterion``, in registration order."""
        return [reg for reg in self._type if criterion.allows(reg)]


__all__ = ["EditorRegistry"]
