"""
Editors for booleans, strings and finite choices.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from enum import Enum
from typing import TYPE_CHECKING, Any

from attribute_editors.constraints import ValueSet
from attribute_editors.editors.base import AttributeEditorAdapter

if TYPE_CHECKING:
    from attribute_editors.attributes import AttributeDescriptor


class BooleanEditor(AttributeEditorAdapter):
    """Check box model; ``None`` reads as False."""

    def set_value(self, value: Any) -> None:
        self._value = bool(value)

    def toggle(self) -> None:
        self._value = not self._value
        self.fire_attribute_change()


class StringEditor(AttributeEditorAdapter):
    def set_value(self, value: Any) -> None:
        self._value = None if value is None else str(value)

    def edit(self, text: str) -> None:
        """Replace the text and notify listeners."""
        self.set_value(text)
        self.fire_attribute_change()


class EnumEditor(AttributeEditorAdapter):
    """
    Choice editor.

    Choices come from the members of the attribute's declared enum type or,
    for other types, from a :class:`ValueSet` constraint on the attribute.
    """

    def __init__(self) -> None:
        super().__init__()
        self.choices: tuple[Any, ...] = ()

    def init(self, owner: object, attribute: AttributeDescriptor) -> None:
        declared = attribute.declared_type
        if isinstance(declared, type) and issubclass(declared, Enum):
            self.choices = tuple(declared)
        else:
            values = attribute.find_constraint(ValueSet)
            self.choices = tuple(sorted(values.allowed, key=str)) if values is not None else ()
        super().init(owner, attribute)

    def set_value(self, value: Any) -> None:
        """
        Select a choice.

        Raises
        ------
        ValueError
            If ``value`` is neither None nor one of the choices.
        """
        if value is not None and value not in self.choices:
            raise ValueError(f"{value!r} is not one of {list(self.choices)!r}")
        self._value = value

    def select(self, value: Any) -> None:
        self.set_value(value)
        self.fire_attribute_change()


__all__ = [
    "BooleanEditor",
    "EnumEditor",
    "StringEditor",
]
