"""Tests for the shape rule table, counters and shape coercion."""

from __future__ import annotations

import dataclasses

import pytest

from factory_shapes.core.descriptor import MethodDescriptor, Visibility
from factory_shapes.errors import (
    CreateMethodCountMismatch,
    MissingNonCreateMethod,
    NonCreateMethodNotAllowed,
    NonCreateMethodsForbidden,
    StaticFactoryMissingOrMiscounted,
    StaticMethodNotAllowed,
    UndefinedShape,
)
from factory_shapes.rules import Rule
from factory_shapes.rules.predefined import AtLeast, Exactly
from factory_shapes.shape import SHAPE_RULES, Counters, Shape, count


def _method(name, visibility=Visibility.PROTECTED, static=False):
    prefix = {Visibility.PUBLIC: "", Visibility.PROTECTED: "_",
              Visibility.PRIVATE: "_Owner__"}[visibility]
    return MethodDescriptor(name, prefix + name, visibility, static, "Owner")


# ---------------------------------------------------------------------------
# Tests: counters
# ---------------------------------------------------------------------------


class TestCount:
    def test_empty(self) -> None:
        assert count([]) == Counters()

    def test_create_and_non_create(self) -> None:
        c = count([_method("create_car"), _method("create_bus"), _method("paint")])
        assert c.create_count == 2
        assert c.non_create_count == 1
        assert c.non_static_count == 3
        assert c.public_count == 0

    def test_public_counts_only_creators(self) -> None:
        c = count([
            _method("create_car", Visibility.PUBLIC),
            _method("paint", Visibility.PUBLIC),
        ])
        assert c.public_count == 1

    def test_static_methods_are_not_creators(self) -> None:
        c = count([_method("create_car", Visibility.PUBLIC, static=True)])
        assert c.static_count == 1
        assert c.create_count == 0
        assert c.public_count == 0

    def test_named_static_factory(self) -> None:
        c = count([_method("factory", Visibility.PUBLIC, static=True)])
        assert c.has_named_static_factory is True

    def test_two_static_factories_are_not_one(self) -> None:
        c = count([
            _method("factory", Visibility.PUBLIC, static=True),
            _method("factory", Visibility.PROTECTED, static=True),
        ])
        assert c.has_named_static_factory is False

    def test_instance_method_named_factory_does_not_count(self) -> None:
        c = count([_method("factory", Visibility.PUBLIC)])
        assert c.has_named_static_factory is False
        assert c.non_create_count == 1

    def test_reserved_names_are_ignored(self) -> None:
        c = count([
            MethodDescriptor("__init__", "__init__", Visibility.PUBLIC, False),
            MethodDescriptor("get", "get", Visibility.PUBLIC, False),
        ])
        assert c == Counters()

    def test_custom_prefix(self) -> None:
        c = count([_method("make_car"), _method("create_car")], prefix="make")
        assert c.create_count == 1
        assert c.non_create_count == 1


# ---------------------------------------------------------------------------
# Tests: rule table
# ---------------------------------------------------------------------------


class TestRuleTable:
    def test_every_shape_has_rules(self) -> None:
        assert set(SHAPE_RULES) == set(Shape)

    def test_table_is_read_only(self) -> None:
        with pytest.raises(TypeError):
            SHAPE_RULES[Shape.SIMPLE] = ()  # type: ignore[index]

    @pytest.mark.parametrize("shape", list(Shape))
    def test_example_satisfies_shape(self, shape: Shape) -> None:
        assert shape.violation(shape.example()) is None

    @pytest.mark.parametrize(
        ("shape", "change", "error"),
        [
            (Shape.ABSTRACT, {"non_create_count": 1}, NonCreateMethodNotAllowed),
            (Shape.ABSTRACT, {"static_count": 1}, StaticMethodNotAllowed),
            (Shape.ABSTRACT, {"create_count": 0}, CreateMethodCountMismatch),
            (Shape.BUILDER, {"static_count": 1}, StaticMethodNotAllowed),
            (Shape.BUILDER, {"create_count": 2}, CreateMethodCountMismatch),
            (Shape.BUILDER, {"non_create_count": 0}, MissingNonCreateMethod),
            (Shape.METHOD, {"static_count": 1}, StaticMethodNotAllowed),
            (Shape.METHOD, {"create_count": 0}, CreateMethodCountMismatch),
            (Shape.METHOD, {"non_create_count": 1}, NonCreateMethodsForbidden),
            (Shape.SIMPLE, {"static_count": 1}, StaticMethodNotAllowed),
            (Shape.SIMPLE, {"create_count": 2}, CreateMethodCountMismatch),
            (Shape.SIMPLE, {"non_create_count": 1}, NonCreateMethodsForbidden),
            (Shape.STATIC, {"static_count": 2}, StaticFactoryMissingOrMiscounted),
            (Shape.STATIC, {"create_count": 1}, StaticFactoryMissingOrMiscounted),
            (Shape.STATIC, {"non_create_count": 1}, StaticFactoryMissingOrMiscounted),
            (Shape.STATIC, {"has_named_static_factory": False},
             StaticFactoryMissingOrMiscounted),
        ],
    )
    def test_single_flip_fails_with_its_kind(self, shape, change, error) -> None:
        counters = dataclasses.replace(shape.example(), **change)
        check = shape.violation(counters)
        assert check is not None
        assert check.error is error

    def test_abstract_allows_many_creators(self) -> None:
        assert Shape.ABSTRACT.violation(Counters(create_count=5)) is None

    def test_builder_allows_many_configuration_steps(self) -> None:
        counters = Counters(create_count=1, non_create_count=4)
        assert Shape.BUILDER.violation(counters) is None

    def test_first_failing_check_wins(self) -> None:
        counters = Counters(create_count=0, non_create_count=2, static_count=1)
        check = Shape.ABSTRACT.violation(counters)
        assert check.error is NonCreateMethodNotAllowed

    def test_describe_lists_every_check(self) -> None:
        lines = Shape.SIMPLE.describe().splitlines()
        assert lines == [
            "- static count must be exactly 0",
            "- create count must be exactly 1",
            "- non create count must be exactly 0",
        ]


# ---------------------------------------------------------------------------
# Tests: coercion
# ---------------------------------------------------------------------------


class TestCoerce:
    def test_values_match_declared_constants(self) -> None:
        assert [s.value for s in Shape] == [1, 2, 3, 4, 5]

    @pytest.mark.parametrize(
        ("value", "shape"),
        [(Shape.METHOD, Shape.METHOD), (3, Shape.METHOD),
         ("method", Shape.METHOD), (" METHOD ", Shape.METHOD)],
    )
    def test_accepted(self, value, shape) -> None:
        assert Shape.coerce(value) is shape

    @pytest.mark.parametrize("value", [0, 6, None, "factory", True, 2.5, [1]])
    def test_rejected(self, value) -> None:
        with pytest.raises(UndefinedShape) as exc_info:
            Shape.coerce(value, factory="Odd")
        assert exc_info.value.got == value
        assert exc_info.value.factory == "Odd"


# ---------------------------------------------------------------------------
# Tests: rule primitives
# ---------------------------------------------------------------------------


class TestRules:
    def test_parameterised_rule_is_a_subclass(self) -> None:
        rule = AtLeast[2]
        assert issubclass(rule, AtLeast)
        assert rule.__rule_params__ == (2,)
        assert rule.__name__ == "AtLeast[2]"
        assert AtLeast[2] is rule

    def test_rules_are_not_instantiated(self) -> None:
        with pytest.raises(TypeError):
            Exactly[1]()
        with pytest.raises(TypeError):
            Rule()
