from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from dataclasses import dataclass

import pytest

from attribute_editors.constraints import DoubleRange, NonNull
from attribute_editors.registry import (
    DedicatedEditorCriterion,
    DedicatedEditorRegistration,
    EditorRegistry,
    TypeEditorCriterion,
    TypeEditorRegistration,
)
from attribute_editors.types import Quantifier
from tests.utils.components import (
    Clustering,
    KMeansClustering,
    PlainDoubleEditor,
    RangeDoubleEditor,
    ThresholdEditor,
    Tokenizer,
)

DOUBLE_RANGE = "attribute_editors.constraints.DoubleRange"


@dataclass(frozen=True)
class AcceptAll:
    def allows(self, registration: object) -> bool:
        return True


class TestEditorRegistry:
    def setup_method(self) -> None:
        self.registry = EditorRegistry()

    def test_registration_records(self) -> None:
        dedicated = self.registry.add_dedicated_editor(Clustering, "threshold", ThresholdEditor)
        typed = self.registry.add_type_editor(
            float, RangeDoubleEditor, [DoubleRange, "custom.Kind"], Quantifier.ANY
        )

        assert isinstance(dedicated, DedicatedEditorRegistration)
        assert dedicated.attribute_key == "tests.utils.components.Clustering.threshold"
        assert isinstance(typed, TypeEditorRegistration)
        assert typed.supported_constraint_kinds == frozenset({DOUBLE_RANGE, "custom.Kind"})
        assert typed.quantifier is Quantifier.ANY
        assert typed.has_constraints
        assert len(self.registry) == 2
        assert self.registry.dedicated_editors == (dedicated,)
        assert self.registry.type_editors == (typed,)

    def test_quantifier_strings_are_coerced(self) -> None:
        reg = TypeEditorRegistration(float, PlainDoubleEditor, quantifier="any")  # type: ignore[arg-type]
        assert reg.quantifier is Quantifier.ANY
        assert not reg.has_constraints

    def test_filters_preserve_registration_order(self) -> None:
        first = self.registry.add_type_editor(float, RangeDoubleEditor, [DoubleRange])
        self.registry.add_type_editor(int, PlainDoubleEditor)
        third = self.registry.add_type_editor(float, PlainDoubleEditor)

        found = self.registry.filter_type(TypeEditorCriterion(value_type=float))
        assert found == [first, third]
        assert self.registry.filter_type(AcceptAll()) == list(self.registry.type_editors)

    def test_type_criterion_checks_constraints(self) -> None:
        ranged = self.registry.add_type_editor(float, RangeDoubleEditor, [DoubleRange])
        plain = self.registry.add_type_editor(float, PlainDoubleEditor)

        criterion = TypeEditorCriterion(value_type=float, constraint_kinds=frozenset({DOUBLE_RANGE}))
        assert self.registry.filter_type(criterion) == [ranged]

        unconstrained = TypeEditorCriterion(value_type=float)
        assert self.registry.filter_type(unconstrained) == [ranged, plain]

    def test_dedicated_criterion_needs_key_and_owner(self) -> None:
        reg = self.registry.add_dedicated_editor(Clustering, "threshold", ThresholdEditor)
        key = reg.attribute_key

        assert self.registry.filter_dedicated(DedicatedEditorCriterion(Clustering, key)) == [reg]
        assert self.registry.filter_dedicated(DedicatedEditorCriterion(KMeansClustering, key)) == [reg]
        # compatible owner, other attribute
        assert self.registry.filter_dedicated(
            DedicatedEditorCriterion(Clustering, "tests.utils.components.Clustering.title")
        ) == []
        # same key, incompatible owner
        assert self.registry.filter_dedicated(DedicatedEditorCriterion(Tokenizer, key)) == []

    def test_duplicates_warn_and_are_ignored(self) -> None:
        self.registry.add_type_editor(float, PlainDoubleEditor, [NonNull])
        with pytest.warns(UserWarning):
            self.registry.add_type_editor(float, PlainDoubleEditor, [NonNull])
        self.registry.add_dedicated_editor(Clustering, "threshold", ThresholdEditor)
        with pytest.warns(UserWarning):
            self.registry.add_dedicated_editor(Clustering, "threshold", ThresholdEditor)
        assert len(self.registry) == 2

    def test_frozen_registry_rejects_population(self) -> None:
        self.registry.add_type_editor(float, PlainDoubleEditor)
        self.registry.freeze()
        assert self.registry.frozen
        with pytest.raises(RuntimeError):
            self.registry.add_type_editor(int, PlainDoubleEditor)
        with pytest.raises(RuntimeError):
            self.registry.add_dedicated_editor(Clustering, "threshold", ThresholdEditor)
        assert len(self.registry.filter_type(AcceptAll())) == 1

    def test_unsupported_record(self) -> None:
        with pytest.raises(TypeError):
            self.registry.add(object())  # type: ignore[arg-type]

    def test_create_editor_calls_factory(self) -> None:
        reg = self.registry.add_type_editor(float, PlainDoubleEditor)
        first, second = reg.create_editor(), reg.create_editor()
        assert isinstance(first, PlainDoubleEditor)
        assert first is not second
