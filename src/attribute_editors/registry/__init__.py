"""
Editor Registry package.

Exports
-------
DedicatedEditorRegistration, TypeEditorRegistration, EditorRegistration
Criterion, DedicatedEditorCriterion, TypeEditorCriterion
EditorRegistry
configure_builtin_editors, configure_editor_registry, reset_editor_registry
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

# Registration records
# Public factory & reset (lazy configuration happens inside configure_editor_registry())
from .configuration import (
    configure_builtin_editors,
    configure_editor_registry,
    reset_editor_registry,
)

# Selection criteria
from .criteria import (
    Criterion,
    DedicatedEditorCriterion,
    TypeEditorCriterion,
)
from .registrations import (
    DedicatedEditorRegistration,
    EditorRegistration,
    TypeEditorRegistration,
)

# Storage
from .store import EditorRegistry

__all__ = [
    # records
    "DedicatedEditorRegistration",
    "EditorRegistration",
    "TypeEditorRegistration",
    # criteria
    "Criterion",
    "DedicatedEditorCriterion",
    "TypeEditorCriterion",
    # storage
    "EditorRegistry",
    # accessors
    "configure_builtin_editors",
    "configure_editor_registry",
    "reset_editor_registry",
]
