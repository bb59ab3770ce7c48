"""
Editor loader
=============

Populates an :class:`~attribute_editors.registry.EditorRegistry` before it is
handed to a resolver. Editors come from three sources:

* direct registration calls (:meth:`EditorLoader.register_type_editor`,
  :meth:`EditorLoader.register_dedicated_editor`);
* declaration mappings, as found in plugin manifests (:meth:`EditorLoader.load`);
* installed plugins advertising an entry point in the
  :data:`ENTRY_POINT_GROUP` group (:meth:`EditorLoader.load_entry_points`).
  Each entry point resolves to a callable receiving the loader.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import logging
from importlib.metadata import entry_points
from pkgutil import resolve_name
from typing import TYPE_CHECKING, Any

from attribute_editors.registry.store import EditorRegistry
from attribute_editors.types import Quantifier

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping

    from attribute_editors.registry.registrations import (
        DedicatedEditorRegistration,
        TypeEditorRegistration,
    )
    from attribute_editors.types import ConstraintKind, EditorFactory, TypeLike

logger = logging.getLogger(__name__)

ENTRY_POINT_GROUP = "attribute_editors.editors"
"""Entry point group scanned for editor plugins."""


def _resolve(ref: Any) -> Any:
    """Resolve ``'package.module:attr'`` references; other values pass through."""
    if isinstance(ref, str) and ":" in ref:
        return resolve_name(ref)
    return ref


def _quantifier(value: Any) -> Quantifier:
    try:
        return Quantifier(value)
    except ValueError:
        raise ValueError(
            f"Unknown quantifier {value!r}; expected one of {[q.value for q in Quantifier]}"
        ) from None


class EditorLoader:
    """
    Builder of an editor registry.

    Parameters
    ----------
    registry : EditorRegistry, optional
        Registry to populate; a new one is created when omitted.
    """

    def __init__(self, registry: EditorRegistry | None = None) -> None:
        self.registry = registry if registry is not None else EditorRegistry()

    def register_type_editor(
        self,
        value_type: TypeLike,
        factory: EditorFactory,
        supported_constraint_kinds: Iterable[ConstraintKind | type] = (),
        quantifier: Quantifier = Quantifier.ALL,
    ) -> TypeEditorRegistration:
        registration = self.registry.add_type_editor(
            value_type, factory, supported_constraint_kinds, quantifier
        )
        logger.debug("Registered %s", registration)
        return registration

    def register_dedicated_editor(
        self, component_type: TypeLike, attribute_id: str, factory: EditorFactory
    ) -> DedicatedEditorRegistration:
        registration = self.registry.add_dedicated_editor(component_type, attribute_id, factory)
        logger.debug("Registered %s", registration)
        return registration

    def load(self, declarations: Iterable[Mapping[str, Any]]) -> int:
        """
        Register editors described by declaration mappings.

        Parameters
        ----------
        declarations : iterable of mappings
            Type editors are described by ``{"value_type", "factory",
            "constraints" (optional), "quantifier" (optional, "all" or
            "any")}``; dedicated editors by ``{"component_type",
            "attribute_id", "factory"}``. Types and factories may be given as
            ``"package.module:attr"`` references.

        Returns
        -------
        int
            Number of declarations processed.

        Raises
        ------
        ValueError
            If a declaration is malformed.
        """
        count = 0
        for decl in declarations:
            factory = _resolve(decl.get("factory"))
            if not callable(factory):
                raise ValueError(f"Editor declaration {dict(decl)!r} has no callable factory")

            if "component_type" in decl:
                if "attribute_id" not in decl:
                    raise ValueError(
                        f"Dedicated editor declaration {dict(decl)!r} has no attribute_id"
                    )
                self.register_dedicated_editor(
                    _resolve(decl["component_type"]), decl["attribute_id"], factory
                )
            elif "value_type" in decl:
                self.register_type_editor(
                    _resolve(decl["value_type"]),
                    factory,
                    [_resolve(c) for c in decl.get("constraints", ())],
                    _quantifier(decl.get("quantifier", Quantifier.ALL)),
                )
            else:
                raise ValueError(
                    f"Editor declaration {dict(decl)!r} names neither value_type nor component_type"
                )
            count += 1
        return count

    def load_entry_points(self, group: str = ENTRY_POINT_GROUP) -> int:
        """
        Run every editor plugin installed under ``group``.

        A plugin that fails to load is logged and skipped so that one broken
        distribution does not disable every editor. Each plugin registers into
        a scratch registry first; its registrations are copied over only when
        the plugin completes, so a failing plugin leaves no partial state.

        Returns
        -------
        int
            Number of plugins applied.
        """
        applied = 0
        for ep in entry_points(group=group):
            scratch = EditorLoader(EditorRegistry())
            try:
                plugin = ep.load()
                plugin(scratch)
            except Exception:
                logger.warning("Editor plugin %s failed to load", ep.name, exc_info=True)
                continue
            for registration in (
                *scratch.registry.dedicated_editors,
                *scratch.registry.type_editors,
            ):
                self.registry.add(registration)
            logger.debug("Loaded editor plugin %s", ep.name)
            applied += 1
        return applied

    def finish(self) -> EditorRegistry:
        """Freeze and return the populated registry."""
        self.registry.freeze()
        logger.debug("Editor registry ready: %r", self.registry)
        return self.registry


__all__ = [
    "ENTRY_POINT_GROUP",
    "EditorLoader",
]
