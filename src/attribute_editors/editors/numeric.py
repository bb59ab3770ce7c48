"""
Numeric range editors
=====================

Headless value models of the numeric range editors.

Both integer and floating point ranges are edited as integer *ticks*: a
floating point value ``v`` with ``precision_digits`` decimal digits maps to
``round(v * 10**precision_digits)``. Unbounded range ends are represented by
the :data:`~attribute_editors.types.INT_MIN` / :data:`~attribute_editors.types.INT_MAX`
sentinels.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
import sys
from typing import TYPE_CHECKING, Any

import numpy as np

from attribute_editors.constraints import DoubleRange, IntRange
from attribute_editors.editors.base import AttributeEditorAdapter
from attribute_editors.types import INT_MAX, INT_MIN

if TYPE_CHECKING:
    from attribute_editors.attributes import AttributeDescriptor

DEFAULT_PRECISION_DIGITS = 2
"""Decimal digits used by :class:`DoubleRangeEditor` unless configured otherwise."""


class NumericRangeModel(AttributeEditorAdapter):
    """
    Common base of integer and floating point range editors.

    Attributes
    ----------
    min, max : int
        Range bounds in ticks (sentinels for unbounded ends).
    precision_digits : int
        Number of decimal digits kept by the tick representation.
    increment, page_increment : int
        Step sizes in ticks.
    multiplier : float
        ``10 ** precision_digits``.
    tooltip : str
        Human-readable description of the valid range.
    """

    def __init__(self) -> None:
        super().__init__()
        self.min = INT_MIN
        self.max = INT_MAX
        self.precision_digits = 0
        self.increment = 1
        self.page_increment = 10
        self.multiplier = 1.0
        self.tooltip = "Valid range: unbounded"
        self._ticks = 0
        self._during_selection = False

    @property
    def min_bounded(self) -> bool:
        return self.min != INT_MIN

    @property
    def max_bounded(self) -> bool:
        return self.max != INT_MAX

    def set_ranges(
        self, min: int, max: int, precision_digits: int, increment: int, page_increment: int
    ) -> None:
        """Initialize the tick range and the fixed-point precision."""
        self.min = min
        self.max = max
        self.increment = increment
        self.page_increment = page_increment
        self.precision_digits = precision_digits
        self.multiplier = math.pow(10, precision_digits)

        if not self.min_bounded and not self.max_bounded:
            self.tooltip = "Valid range: unbounded"
        else:
            self.tooltip = f"Valid range: [{self.to_s(min)}; {self.to_s(max)}]"

    def to_i(self, v: float) -> int:
        """
        Convert a value to ticks.

        Infinities and the extreme finite floats map to the sentinels, NaN
        maps to 0. Halves round up, and results outside the 32-bit tick range
        saturate to the sentinels.
        """
        if math.isnan(v):
            return 0
        if v == -math.inf or v == -sys.float_info.max:
            return INT_MIN
        if v == math.inf or v == sys.float_info.max:
            return INT_MAX
        ticks = np.floor(np.float64(v) * self.multiplier + 0.5)
        return int(np.clip(ticks, INT_MIN, INT_MAX))

    def to_d(self, i: int) -> float:
        """Convert ticks back to a value."""
        return i / self.multiplier

    def to_s(self, i: int) -> str:
        """Render ticks for humans, using ``∞`` for the sentinels."""
        if i == INT_MIN:
            return "-∞"
        if i == INT_MAX:
            return "∞"
        return f"{self.to_d(i):.{self.precision_digits}f}"

    def clamp(self, i: int) -> int:
        return int(np.clip(i, self.min, self.max))

    @property
    def ticks(self) -> int:
        return self._ticks

    def propagate_new_value(self, i: int) -> None:
        """
        Set the value in ticks and notify listeners once.

        Re-entrant calls made by listeners while the change is delivered are
        ignored.
        """
        if self._during_selection:
            return
        self._during_selection = True
        try:
            self._ticks = self.clamp(i)
            self.fire_attribute_change()
        finally:
            self._during_selection = False

    def step(self, count: int = 1, page: bool = False) -> None:
        """Move the value by ``count`` increments (or page increments)."""
        size = self.page_increment if page else self.increment
        self.propagate_new_value(self._ticks + count * size)


class IntegerRangeEditor(NumericRangeModel):
    """Range editor for integer attributes, bounded by an :class:`IntRange` constraint."""

    def init(self, owner: object, attribute: AttributeDescriptor) -> None:
        rng = attribute.find_constraint(IntRange) or IntRange()
        span = rng.max - rng.min
        page = max(1, span // 10) if rng.min != INT_MIN and rng.max != INT_MAX else 10
        self.set_ranges(rng.min, rng.max, 0, 1, page)
        super().init(owner, attribute)

    def get_value(self) -> int:
        return self._ticks

    def set_value(self, value: Any) -> None:
        self._ticks = self.clamp(0 if value is None else int(value))


class DoubleRangeEditor(NumericRangeModel):
    """
    Range editor for floating point attributes.

    Parameters
    ----------
    precision_digits : int, default=DEFAULT_PRECISION_DIGITS
        Decimal digits of the edited value.
    """

    def __init__(self, precision_digits: int = DEFAULT_PRECISION_DIGITS) -> None:
        super().__init__()
        self._precision_digits = precision_digits

    def init(self, owner: object, attribute: AttributeDescriptor) -> None:
        rng = attribute.find_constraint(DoubleRange) or DoubleRange()
        self.multiplier = math.pow(10, self._precision_digits)
        lo, hi = self.to_i(rng.min), self.to_i(rng.max)
        page = max(1, (hi - lo) // 10) if lo != INT_MIN and hi != INT_MAX else 10
        self.set_ranges(lo, hi, self._precision_digits, 1, page)
        super().init(owner, attribute)

    def get_value(self) -> float:
        return self.to_d(self._ticks)

    def set_value(self, value: Any) -> None:
        self._ticks = self.clamp(0 if value is None else self.to_i(float(value)))


__all__ = [
    "DEFAULT_PRECISION_DIGITS",
    "DoubleRangeEditor",
    "IntegerRangeEditor",
    "NumericRangeModel",
]
