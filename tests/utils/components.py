from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from enum import Enum, IntEnum, StrEnum

from attribute_editors.attributes import Attribute
from attribute_editors.constraints import DoubleRange, IntRange, NotBlank, ValueSet
from attribute_editors.editors import AttributeEditorAdapter


class Component:
    """Root of the test component hierarchy."""


class Clustering(Component):
    threshold = Attribute(float, DoubleRange(0.0, 1.0), default=0.5, label="Threshold")
    max_iterations = Attribute(int, IntRange(1, 1000), default=15)
    title = Attribute(str, NotBlank(), default="clusters")
    language = Attribute(str, ValueSet(frozenset({"en", "de", "pl"})), default="en")
    enabled = Attribute(bool, default=True)


class KMeansClustering(Clustering):
    k = Attribute(int, IntRange(2, 100), default=3)


class TunedClustering(Clustering):
    threshold = Attribute(float, DoubleRange(0.0, 0.5), default=0.25)


class Observer:
    """Unrelated class used as a secondary base."""


class ObservedClustering(Clustering, Observer):
    pass


class Tokenizer(Component):
    threshold = Attribute(float, DoubleRange(0.0, 1.0), default=0.25)


class Linkage(Enum):
    SINGLE = "single"
    COMPLETE = "complete"
    AVERAGE = "average"


class Stemmer(StrEnum):
    NONE = "none"
    PORTER = "porter"


class Level(IntEnum):
    LOW = 1
    HIGH = 2


class RecordingEditor(AttributeEditorAdapter):
    """Editor recording how it was bound."""


class ThresholdEditor(RecordingEditor):
    pass


class RangeDoubleEditor(RecordingEditor):
    pass


class PlainDoubleEditor(RecordingEditor):
    pass


class TextEditor(RecordingEditor):
    pass
