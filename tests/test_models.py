"""Tests for the TypeDescriptor / TypeSet / MetricRecord data model."""

import dataclasses

import pytest

from design_analyzer.models import MetricRecord, TypeDescriptor, TypeSet, simple_name_of


class TestTypeDescriptor:
    def test_defaults(self):
        t = TypeDescriptor(name="shapes.Circle")
        assert t.simple_name == "Circle"
        assert t.supertype is None
        assert t.interfaces == ()
        assert t.method_count == 0

    def test_method_count_follows_signatures(self):
        t = TypeDescriptor(name="p.A", method_signatures=[["int"], [], ["p.B", "p.B"]])
        assert t.method_count == 3
        assert t.method_signatures == (("int",), (), ("p.B", "p.B"))

    def test_explicit_method_count_kept(self):
        t = TypeDescriptor(name="p.A", method_count=7)
        assert t.method_count == 7

    def test_negative_method_count_rejected(self):
        with pytest.raises(ValueError, match="non-negative"):
            TypeDescriptor(name="p.A", method_count=-1)

    def test_lists_stored_as_tuples(self):
        t = TypeDescriptor(name="p.A", interfaces=["p.I"], field_types=["int"])
        assert t.interfaces == ("p.I",)
        assert t.field_types == ("int",)
        hash(t)

    def test_is_immutable(self):
        t = TypeDescriptor(name="p.A")
        with pytest.raises(dataclasses.FrozenInstanceError):
            t.supertype = "p.B"

    def test_parameter_types_flattened_in_order(self):
        t = TypeDescriptor(name="p.A", method_signatures=(("p.B", "int"), (), ("p.C",)))
        assert list(t.parameter_types) == ["p.B", "int", "p.C"]

    def test_empty_simple_name_kept_for_anonymous_types(self):
        t = TypeDescriptor(name="p.Outer$1", simple_name="")
        assert t.simple_name == ""


class TestSimpleNameOf:
    def test_top_level(self):
        assert simple_name_of("java.lang.String") == "String"

    def test_nested(self):
        assert simple_name_of("java.util.Map$Entry") == "Entry"

    def test_default_package(self):
        assert simple_name_of("Main") == "Main"


class TestTypeSet:
    def test_membership_by_name_and_descriptor(self, scenario_a):
        base = scenario_a.get("p.Base")
        assert "p.Base" in scenario_a
        assert base in scenario_a
        assert "p.Missing" not in scenario_a
        assert len(scenario_a) == 2

    def test_duplicate_names_rejected(self):
        with pytest.raises(ValueError, match="Duplicate"):
            TypeSet([TypeDescriptor(name="p.A"), TypeDescriptor(name="p.A")])

    def test_sorted_by_qualified_name(self):
        types = TypeSet([TypeDescriptor(name=n) for n in ("p.Zeta", "p.Alpha", "p.Mid")])
        assert [t.name for t in types.sorted()] == ["p.Alpha", "p.Mid", "p.Zeta"]
        assert types.names == ["p.Zeta", "p.Alpha", "p.Mid"]

    def test_supertype_of_members_and_ancestry(self):
        types = TypeSet(
            [TypeDescriptor(name="p.A", supertype="lib.Base")],
            ancestry={"lib.Base": "lib.Root", "lib.Root": "java.lang.Object"},
        )
        assert types.supertype_of("p.A") == "lib.Base"
        assert types.supertype_of("lib.Base") == "lib.Root"
        assert types.supertype_of("unknown.Type") is None

    def test_ancestry_is_read_only(self):
        types = TypeSet([], ancestry={"lib.Base": None})
        with pytest.raises(TypeError):
            types.ancestry["lib.Other"] = None  # type: ignore[index]

    def test_empty(self):
        types = TypeSet()
        assert len(types) == 0
        assert list(types) == []


class TestMetricRecord:
    def test_to_dict(self):
        record = MetricRecord("p.A", "A", 1, 0.5, 0.25, 1.0)
        assert record.to_dict() == {
            "name": "p.A",
            "simple_name": "A",
            "in_depth": 1,
            "instability": 0.5,
            "responsibility": 0.25,
            "workload": 1.0,
        }
