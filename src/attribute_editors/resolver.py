"""
Editor Resolution
=================

Chooses the editor responsible for one attribute of a component.

Resolution order
----------------
1. Dedicated editors registered for the owner type (or one of its ancestors)
   and the attribute's key. The first one in registration order wins; no
   further ranking happens.
2. Otherwise, type editors whose value type is compatible with the attribute's
   declared type and whose supported constraint kinds satisfy the attribute's
   constraints under the editor's quantifier.
3. Type editor survivors are ranked: when the attribute declares constraints,
   editors declaring supported constraint kinds precede editors declaring
   none. The sort is stable, so registration order breaks ties. Unconstrained
   attributes keep plain registration order.
4. The first candidate's factory is called with no arguments.

If no candidate survives, :class:`~attribute_editors.errors.EditorNotFoundError`
is raised. No other error is raised by the resolution itself.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import logging
from typing import TYPE_CHECKING, Any

from attribute_editors.errors import EditorNotFoundError
from attribute_editors.registry.configuration import configure_editor_registry
from attribute_editors.registry.criteria import DedicatedEditorCriterion, TypeEditorCriterion

if TYPE_CHECKING:
    from collections.abc import Sequence

    from attribute_editors.attributes import AttributeDescriptor
    from attribute_editors.hierarchy import TypeHierarchy
    from attribute_editors.registry.registrations import (
        DedicatedEditorRegistration,
        EditorRegistration,
        TypeEditorRegistration,
    )
    from attribute_editors.registry.store import EditorRegistry
    from attribute_editors.types import TypeLike

logger = logging.getLogger(__name__)


def owner_type_of(owner: object) -> TypeLike:
    """Reduce a component instance to its type; types and type names pass through."""
    if isinstance(owner, (type, str)):
        return owner
    return type(owner)


def rank_type_editors(
    candidates: Sequence[TypeEditorRegistration], attribute: AttributeDescriptor
) -> list[TypeEditorRegistration]:
    """
    Order type editor candidates for ``attribute``.

    Editors declaring supported constraint kinds go first, but only if the
    attribute itself is constrained. Relative registration order is kept.
    """
    if not attribute.constraints:
        return list(candidates)
    return sorted(candidates, key=lambda reg: not reg.has_constraints)


class EditorResolver:
    """
    Resolver bound to an explicit registry.

    Parameters
    ----------
    registry : EditorRegistry
        Populated registry. The resolver never mutates it.
    hierarchy : TypeHierarchy, optional
        Named-type metadata for owner and value types given as names.
    """

    def __init__(self, registry: EditorRegistry, hierarchy: TypeHierarchy | None = None) -> None:
        self.registry = registry
        self.hierarchy = hierarchy

    def dedicated_candidates(
        self, owner: object, attribute: AttributeDescriptor
    ) -> list[DedicatedEditorRegistration]:
        criterion = DedicatedEditorCriterion(
            owner_type=owner_type_of(owner), attribute_key=attribute.key, hierarchy=self.hierarchy
        )
        return self.registry.filter_dedicated(criterion)

    def type_candidates(self, attribute: AttributeDescriptor) -> list[TypeEditorRegistration]:
        """Type editors eligible for ``attribute``, ranked."""
        criterion = TypeEditorCriterion(
            value_type=attribute.declared_type,
            constraint_kinds=attribute.constraint_kinds,
            hierarchy=self.hierarchy,
        )
        return rank_type_editors(self.registry.filter_type(criterion), attribute)

    def candidates(self, owner: object, attribute: AttributeDescriptor) -> list[EditorRegistration]:
        """
        Return the ordered candidates of the pass that decides for ``attribute``.

        This is the dedicated candidate list when it is non-empty, otherwise
        the ranked type candidates. Nothing is instantiated.
        """
        dedicated = self.dedicated_candidates(owner, attribute)
        if dedicated:
            return list(dedicated)
        return list(self.type_candidates(attribute))

    def select(self, owner: object, attribute: AttributeDescriptor) -> EditorRegistration:
        """
        Return the winning registration without instantiating it.

        Raises
        ------
        EditorNotFoundError
            If no registration qualifies.
        """
        candidates = self.candidates(owner, attribute)
        if not candidates:
            logger.debug("No editor for %s (owner %r)", attribute, owner_type_of(owner))
            raise EditorNotFoundError(attribute)
        chosen = candidates[0]
        logger.debug(
            "Selected %s for %s out of %d candidate(s)", chosen, attribute, len(candidates)
        )
        return chosen

    def resolve(self, owner: object, attribute: AttributeDescriptor) -> Any:
        """
        Resolve and instantiate the editor for ``attribute`` of ``owner``.

        Parameters
        ----------
        owner : object
            Component instance, component type or component type name.
        attribute : AttributeDescriptor
            Attribute to edit.

        Returns
        -------
        AttributeEditor
            A new editor instance produced by the chosen registration.

        Raises
        ------
        EditorNotFoundError
            If neither a dedicated nor a type editor qualifies.
        """
        return self.select(owner, attribute).create_editor()


def resolve_editor(
    owner: object, attribute: AttributeDescriptor, registry: EditorRegistry | None = None
) -> Any:
    """
    Resolve the editor for ``attribute`` of ``owner``.

    Uses ``registry`` when given, otherwise the cached default registry
    (see :func:`~attribute_editors.registry.configure_editor_registry`).
    """
    reg = registry if registry is not None else configure_editor_registry()
    return EditorResolver(reg).resolve(owner, attribute)


__all__ = [
    "EditorResolver",
    "owner_type_of",
    "rank_type_editors",
    "resolve_editor",
]
