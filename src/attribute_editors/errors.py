"""
Errors raised by the editor resolution engine.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from attribute_editors.attributes import AttributeDescriptor


class EditorNotFoundError(LookupError):
    """
    Raised when neither a dedicated nor a type editor qualifies for an attribute.

    This signals a gap in the editor registrations, not a transient failure,
    and is never retried by the resolver.

    Parameters
    ----------
    attribute : AttributeDescriptor
        The attribute no editor could be found for.
    """

    def __init__(self, attribute: AttributeDescriptor) -> None:
        super().__init__(f"No suitable editor found for attribute {attribute}")
        self.attribute = attribute


__all__ = ["EditorNotFoundError"]
