"""
Tests for the default editor registry configuration.
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from enum import Enum, IntEnum, StrEnum

import pytest

from attribute_editors.editors import (
    BooleanEditor,
    DoubleRangeEditor,
    EnumEditor,
    IntegerRangeEditor,
    StringEditor,
)
from attribute_editors.registry import (
    EditorRegistry,
    configure_editor_registry,
    reset_editor_registry,
)


class TestConfiguration:
    """Test suite for the cached default registry."""

    def setup_method(self):
        self.registry = configure_editor_registry()

    def test_returns_frozen_registry(self):
        assert isinstance(self.registry, EditorRegistry)
        assert self.registry.frozen
        with pytest.raises(RuntimeError):
            self.registry.add_type_editor(complex, StringEditor)

    def test_is_cached(self):
        assert configure_editor_registry() is self.registry

    def test_reset_builds_new_instance(self):
        reset_editor_registry()
        assert configure_editor_registry() is not self.registry

    def test_builtin_type_editors(self):
        targets = [(reg.value_type, reg.factory) for reg in self.registry.type_editors]
        assert targets[:8] == [
            (bool, BooleanEditor),
            (Enum, EnumEditor),
            (StrEnum, EnumEditor),
            (IntEnum, EnumEditor),
            (int, IntegerRangeEditor),
            (float, DoubleRangeEditor),
            (str, StringEditor),
            (str, EnumEditor),
        ]

    def test_no_builtin_dedicated_editors(self):
        assert self.registry.dedicated_editors == ()
