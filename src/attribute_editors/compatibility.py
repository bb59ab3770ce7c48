"""
Nominal compatibility between types and registered target type names.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import TYPE_CHECKING

from attribute_editors.hierarchy import TypeHierarchy, qualified_name

if TYPE_CHECKING:
    from attribute_editors.types import TypeLike, TypeName

_EMPTY_HIERARCHY = TypeHierarchy()


def is_compatible(
    candidate: TypeLike, target: TypeLike, hierarchy: TypeHierarchy | None = None
) -> bool:
    """
    Check whether ``candidate`` is ``target`` or one of its subtypes.

    Parameters
    ----------
    candidate : type or str
        Class, or qualified name of a type declared in ``hierarchy``.
    target : type or str
        Registered target type (only its qualified name is compared).
    hierarchy : TypeHierarchy, optional
        Named-type metadata used when ``candidate`` is given as a name.

    Returns
    -------
    bool
        True if the candidate's own qualified name or the name of one of its
        proper ancestors (root excluded) equals the target's qualified name.

    Notes
    -----
    Only the primary inheritance chain is walked. A class that merely mixes in
    ``target`` as a secondary base is not compatible with it.
    """
    target_name: TypeName = qualified_name(target)
    if qualified_name(candidate) == target_name:
        return True
    lineage = (hierarchy if hierarchy is not None else _EMPTY_HIERARCHY).lineage(candidate)
    return target_name in lineage[1:]


__all__ = ["is_compatible"]
