from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import dataclasses

import pytest

from attribute_editors.attributes import (
    Attribute,
    AttributeDescriptor,
    attribute_key,
    attributes_of,
)
from attribute_editors.constraints import DoubleRange, IntRange, NonNull
from tests.utils.components import Clustering, KMeansClustering

PREFIX = "tests.utils.components"


class TestAttributeKey:
    def test_declaring_class_names_the_key(self) -> None:
        assert attribute_key(Clustering, "threshold") == f"{PREFIX}.Clustering.threshold"
        assert attribute_key(KMeansClustering, "threshold") == f"{PREFIX}.Clustering.threshold"
        assert attribute_key(KMeansClustering, "k") == f"{PREFIX}.KMeansClustering.k"

    def test_names_and_undeclared_attributes(self) -> None:
        assert attribute_key("org.Foo", "bar") == "org.Foo.bar"
        assert attribute_key(Clustering, "missing") == f"{PREFIX}.Clustering.missing"


class TestAttributeDescriptor:
    def test_constraints_collapse_into_frozenset(self) -> None:
        attr = AttributeDescriptor(
            key="k", declared_type=int, constraints=[IntRange(0, 5), IntRange(0, 5), NonNull()]
        )
        assert isinstance(attr.constraints, frozenset)
        assert len(attr.constraints) == 2
        assert attr.constraint_kinds == frozenset(
            {"attribute_editors.constraints.IntRange", "attribute_editors.constraints.NonNull"}
        )
        assert attr.is_constrained

    def test_immutable(self) -> None:
        attr = AttributeDescriptor(key="k", declared_type=int)
        with pytest.raises(dataclasses.FrozenInstanceError):
            attr.key = "other"  # type: ignore[misc]
        assert not attr.is_constrained
        assert attr.constraint_kinds == frozenset()

    def test_equality_ignores_metadata(self) -> None:
        a = AttributeDescriptor(key="k", declared_type=int, label="K", default=1)
        b = AttributeDescriptor(key="k", declared_type=int, label="Kay", default=2)
        assert a == b

    def test_find_constraint(self) -> None:
        attr = AttributeDescriptor(key="k", declared_type=float, constraints={DoubleRange(0, 1)})
        assert attr.find_constraint(DoubleRange) == DoubleRange(0, 1)
        assert attr.find_constraint(IntRange) is None

    def test_validate(self) -> None:
        attr = AttributeDescriptor(key="k", declared_type=int, constraints={IntRange(1, 3)})
        attr.validate(2)
        with pytest.raises(ValueError, match="IntRange"):
            attr.validate(4)

    def test_validate_half_bounded_int_beyond_32_bits(self) -> None:
        AttributeDescriptor("x.n", int, {IntRange(min=0)}).validate(2**31)
        with pytest.raises(ValueError, match="IntRange"):
            AttributeDescriptor("x.n", int, {IntRange(min=0)}).validate(-1)

    def test_str_mentions_key_and_type(self) -> None:
        assert str(AttributeDescriptor(key="a.b", declared_type=float)) == "a.b (float)"


class TestDeclarations:
    def test_attributes_of_collects_declarations(self) -> None:
        attrs = attributes_of(Clustering)
        assert list(attrs) == ["threshold", "max_iterations", "title", "language", "enabled"]
        threshold = attrs["threshold"]
        assert threshold.key == f"{PREFIX}.Clustering.threshold"
        assert threshold.declared_type is float
        assert threshold.constraints == frozenset({DoubleRange(0.0, 1.0)})
        assert threshold.default == 0.5
        assert threshold.label == "Threshold"
        assert attrs["max_iterations"].label == "max_iterations"

    def test_subclasses_inherit_declarations(self) -> None:
        attrs = attributes_of(KMeansClustering())
        assert "threshold" in attrs
        assert attrs["threshold"].key == f"{PREFIX}.Clustering.threshold"
        assert attrs["k"].key == f"{PREFIX}.KMeansClustering.k"

    def test_keys_are_unique_within_component(self) -> None:
        keys = [a.key for a in attributes_of(KMeansClustering).values()]
        assert len(keys) == len(set(keys))

    def test_unbound_declaration(self) -> None:
        with pytest.raises(ValueError):
            Attribute(int).describe(Clustering)
