"""
Attribute Editors
=================

Unit tests: type compatibility, constraint matching, registry, loader,
resolver and the built-in editors.
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"
