"""
Editors package.

Exports
-------
AttributeEditor, AttributeEditorAdapter, AttributeChangedEvent, AttributeListener
NumericRangeModel, IntegerRangeEditor, DoubleRangeEditor
BooleanEditor, StringEditor, EnumEditor
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from .base import (
    AttributeChangedEvent,
    AttributeEditor,
    AttributeEditorAdapter,
    AttributeListener,
)
from .basic import BooleanEditor, EnumEditor, StringEditor
from .numeric import DoubleRangeEditor, IntegerRangeEditor, NumericRangeModel

__all__ = [
    # contract
    "AttributeChangedEvent",
    "AttributeEditor",
    "AttributeEditorAdapter",
    "AttributeListener",
    # numeric
    "DoubleRangeEditor",
    "IntegerRangeEditor",
    "NumericRangeModel",
    # basic
    "BooleanEditor",
    "EnumEditor",
    "StringEditor",
]
