"""
Default configuration and cached accessor for the editor registry.

- No auto-configuration in the registry constructor.
- ``configure_editor_registry()`` is wrapped in ``@lru_cache``; it builds the
  default registry, seeds it with the built-in editors, applies installed
  plugins and freezes it.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from enum import Enum, IntEnum, StrEnum
from functools import lru_cache
from typing import TYPE_CHECKING

from attribute_editors.constraints import DoubleRange, IntRange, NonNull, NotBlank, ValueSet
from attribute_editors.editors import (
    BooleanEditor,
    DoubleRangeEditor,
    EnumEditor,
    IntegerRangeEditor,
    StringEditor,
)
from attribute_editors.registry.store import EditorRegistry
from attribute_editors.types import Quantifier

if TYPE_CHECKING:
    from attribute_editors.loader import EditorLoader


def configure_builtin_editors(loader: EditorLoader) -> None:
    """
    Register the built-in type editors.

    Order matters for unconstrained attributes: enum editors precede the
    ``int`` and ``str`` editors so ``IntEnum`` and ``StrEnum`` members get a
    choice editor.
    """
    loader.register_type_editor(bool, BooleanEditor, [NonNull], Quantifier.ANY)

    loader.register_type_editor(Enum, EnumEditor, [ValueSet, NonNull], Quantifier.ANY)
    loader.register_type_editor(StrEnum, EnumEditor, [ValueSet, NonNull], Quantifier.ANY)
    loader.register_type_editor(IntEnum, EnumEditor, [ValueSet, NonNull], Quantifier.ANY)

    loader.register_type_editor(int, IntegerRangeEditor, [IntRange, NonNull], Quantifier.ANY)
    loader.register_type_editor(float, DoubleRangeEditor, [DoubleRange, NonNull], Quantifier.ANY)

    loader.register_type_editor(str, StringEditor, [NotBlank, NonNull], Quantifier.ANY)
    loader.register_type_editor(str, EnumEditor, [ValueSet], Quantifier.ANY)


@lru_cache(maxsize=1)
def configure_editor_registry() -> EditorRegistry:
    """
    Return the cached, configured and frozen default editor registry.

    Notes
    -----
    - Configuration (built-ins, then plugins) runs once per process.
    - Users may build a separate registry with
      :class:`~attribute_editors.loader.EditorLoader` and pass it to the
      resolver explicitly.
    """
    from attribute_editors.loader import EditorLoader

    loader = EditorLoader(EditorRegistry())
    configure_builtin_editors(loader)
    loader.load_entry_points()
    return loader.finish()


def reset_editor_registry() -> None:
    """
    Reset the cached editor registry.
    """
    configure_editor_registry.cache_clear()
