"""
Core Type Definitions
=====================

Fundamental types and constants shared by the editor resolution engine.
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from collections.abc import Callable
from enum import StrEnum
from typing import Any, TypeAlias

import numpy as np


class Quantifier(StrEnum):
    """
    Quantifier a type editor applies to an attribute's constraints.

    Attributes
    ----------
    ALL : str
        The editor must honor every constraint declared on the attribute.
    ANY : str
        Honoring at least one of the attribute's constraints is enough.
    """

    ALL = "all"
    ANY = "any"


TypeName: TypeAlias = str
"""Type alias for qualified type names (e.g., ``'float'``, ``'enum.Enum'``)."""

ConstraintKind: TypeAlias = str
"""Type alias for constraint-kind identifiers (qualified constraint class names)."""

AttributeKey: TypeAlias = str
"""Type alias for attribute keys, unique within a component type."""

TypeLike: TypeAlias = type | TypeName
"""Either a Python class or the qualified name of a registered type node."""

EditorFactory = Callable[[], Any]
"""Type alias for zero-argument editor factories."""

INT_MIN: int = int(np.iinfo(np.int32).min)
"""Sentinel for an unbounded lower end of an integer tick range."""

INT_MAX: int = int(np.iinfo(np.int32).max)
"""Sentinel for an unbounded upper end of an integer tick range."""


__all__ = [
    "Quantifier",
    "TypeName",
    "ConstraintKind",
    "AttributeKey",
    "TypeLike",
    "EditorFactory",
    "INT_MIN",
    "INT_MAX",
]
