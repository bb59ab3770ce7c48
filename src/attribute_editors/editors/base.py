"""
Editor contract
===============

The resolver only requires that an editor can be created by calling its
registration's factory with no arguments. Callers then bind the editor to an
attribute with :meth:`AttributeEditor.init` and exchange values through
``get_value`` / ``set_value``; value changes made through the editor are
announced to listeners as :class:`AttributeChangedEvent` objects.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

if TYPE_CHECKING:
    from attribute_editors.attributes import AttributeDescriptor
    from attribute_editors.types import AttributeKey


@dataclass(frozen=True, slots=True)
class AttributeChangedEvent:
    """
    Notification that an editor changed its attribute's value.

    Parameters
    ----------
    editor : AttributeEditor
        Editor that produced the change.
    key : str
        Key of the edited attribute.
    value : Any
        New value as reported by ``editor.get_value()``.
    """

    editor: AttributeEditor
    key: AttributeKey
    value: Any


class AttributeListener(Protocol):
    """Callable receiving attribute change events."""

    def __call__(self, event: AttributeChangedEvent) -> None: ...


@runtime_checkable
class AttributeEditor(Protocol):
    """Protocol every editor instance satisfies."""

    def init(self, owner: object, attribute: AttributeDescriptor) -> None: ...

    def get_value(self) -> Any: ...

    def set_value(self, value: Any) -> None: ...

    def add_listener(self, listener: AttributeListener) -> None: ...

    def remove_listener(self, listener: AttributeListener) -> None: ...


class AttributeEditorAdapter:
    """
    Base class for editors.

    Keeps the bound owner and attribute, the current value and the listener
    list. Subclasses usually override :meth:`init` (calling ``super().init``)
    to read constraint parameters and :meth:`set_value` to coerce values.
    """

    def __init__(self) -> None:
        self.owner: object | None = None
        self.attribute: AttributeDescriptor | None = None
        self._value: Any = None
        self._listeners: list[AttributeListener] = []

    def __repr__(self) -> str:
        key = self.attribute.key if self.attribute is not None else None
        return f"{type(self).__name__}(attribute={key!r})"

    def init(self, owner: object, attribute: AttributeDescriptor) -> None:
        self.owner = owner
        self.attribute = attribute
        self.set_value(attribute.default)

    def get_value(self) -> Any:
        return self._value

    def set_value(self, value: Any) -> None:
        """Store a value without notifying listeners."""
        self._value = value

    def add_listener(self, listener: AttributeListener) -> None:
        self._listeners.append(listener)

    def remove_listener(self, listener: AttributeListener) -> None:
        """Remove a listener; unknown listeners are ignored."""
        if listener in self._listeners:
            self._listeners.remove(listener)

    def fire_attribute_change(self) -> None:
        """Deliver a change event to every listener in registration order."""
        if self.attribute is None:
            raise RuntimeError(f"{type(self).__name__} is not bound to an attribute")
        event = AttributeChangedEvent(editor=self, key=self.attribute.key, value=self.get_value())
        for listener in list(self._listeners):
            listener(event)


__all__ = [
    "AttributeChangedEvent",
    "AttributeEditor",
    "AttributeEditorAdapter",
    "AttributeListener",
]
