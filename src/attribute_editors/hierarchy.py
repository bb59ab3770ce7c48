"""
Nominal type hierarchy
======================

Explicit single-inheritance metadata used by the compatibility checker.

A type is represented by its *lineage*: its own qualified name followed by the
qualified names of its proper ancestors, nearest first, with the universal root
(``object``) excluded. Python classes derive their lineage from the primary
base chain (``cls.__base__``); secondary bases and mixins are not part of it.
Types that only exist as names (e.g., types declared by a plugin manifest) are
described by :class:`TypeNode` entries of a :class:`TypeHierarchy`.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterator, Mapping

    from attribute_editors.types import TypeLike, TypeName

ROOT_TYPE_NAME: TypeName = "object"
"""Qualified name of the universal root type; never part of a lineage."""


def qualified_name(tp: TypeLike) -> TypeName:
    """
    Return the qualified name of a class, or the name itself for strings.

    Builtin classes are rendered without their module (``float``, ``str``).
    """
    if isinstance(tp, str):
        return tp
    module = getattr(tp, "__module__", None)
    name = getattr(tp, "__qualname__", None) or getattr(tp, "__name__", repr(tp))
    if module is None or module == "builtins":
        return name
    return f"{module}.{name}"


def class_lineage(cls: type) -> tuple[TypeName, ...]:
    """
    Walk the primary base chain of ``cls`` up to (but excluding) ``object``.

    Parameters
    ----------
    cls : type
        Class to describe.

    Returns
    -------
    tuple[str, ...]
        Qualified names of ``cls`` and its proper ancestors, nearest first.
    """
    names: list[TypeName] = []
    current: type | None = cls
    while current is not None and current is not object:
        names.append(qualified_name(current))
        current = current.__base__
    return tuple(names)


@dataclass(frozen=True, slots=True)
class TypeNode:
    """
    Static description of one named type.

    Parameters
    ----------
    name : str
        Qualified type name.
    ancestors : tuple[str, ...]
        Proper ancestors, nearest first, root excluded.
    """

    name: TypeName
    ancestors: tuple[TypeName, ...] = ()

    @property
    def lineage(self) -> tuple[TypeName, ...]:
        """The node's own name followed by its ancestors."""
        return (self.name, *self.ancestors)


@dataclass(slots=True)
class TypeHierarchy:
    """
    Registry of named types with precomputed ancestor chains.

    Nodes are added parent-first; the ancestor tuple of a node is computed once
    when it is added, so lineage queries are plain lookups.
    """

    _nodes: dict[TypeName, TypeNode] = field(default_factory=dict)

    @property
    def nodes(self) -> Mapping[TypeName, TypeNode]:
        """Read-only view of the declared nodes."""
        return MappingProxyType(self._nodes)

    def __contains__(self, name: object) -> bool:
        return name in self._nodes

    def __iter__(self) -> Iterator[TypeNode]:
        return iter(self._nodes.values())

    def __len__(self) -> int:
        return len(self._nodes)

    def add_type(self, name: TypeName, parent: TypeName | None = None) -> TypeNode:
        """
        Declare a named type.

        Parameters
        ----------
        name : str
            Qualified name of the new type.
        parent : str, optional
            Qualified name of the direct superclass. ``None`` (or the root
            name) means the type derives directly from the root.

        Returns
        -------
        TypeNode
            The declared node.

        Raises
        ------
        ValueError
            If ``name`` is already declared with a different parent, or if
            ``parent`` is not declared yet.
        """
        if parent is None or parent == ROOT_TYPE_NAME:
            ancestors: tuple[TypeName, ...] = ()
        else:
            parent_node = self._nodes.get(parent)
            if parent_node is None:
                raise ValueError(f"Parent type {parent} of {name} is not declared")
            ancestors = parent_node.lineage

        node = TypeNode(name=name, ancestors=ancestors)
        existing = self._nodes.get(name)
        if existing is not None:
            if existing != node:
                raise ValueError(f"Type {name} is already declared with another parent")
            return existing
        self._nodes[name] = node
        return node

    def add_class(self, cls: type) -> TypeNode:
        """Declare ``cls`` and its primary base chain so it can be referenced by name."""
        lineage = class_lineage(cls)
        if not lineage:
            raise ValueError("The root type cannot be declared")
        for index in reversed(range(len(lineage))):
            name = lineage[index]
            if name not in self._nodes:
                self._nodes[name] = TypeNode(name=name, ancestors=lineage[index + 1 :])
        return self._nodes[lineage[0]]

    def lineage(self, tp: TypeLike) -> tuple[TypeName, ...]:
        """
        Return the lineage of a class or of a named type.

        Classes are walked directly. Names are looked up; an undeclared name
        has a lineage consisting of itself only.
        """
        if not isinstance(tp, str):
            return class_lineage(tp)
        node = self._nodes.get(tp)
        if node is None:
            return () if tp == ROOT_TYPE_NAME else (tp,)
        return node.lineage


__all__ = [
    "ROOT_TYPE_NAME",
    "TypeHierarchy",
    "TypeNode",
    "class_lineage",
    "qualified_name",
]
