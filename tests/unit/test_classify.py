import datetime
import logging
from collections import OrderedDict
from decimal import Decimal

import pytest

from typeshape.core.classify import UNDEFINED, ValueKind, classify, kind_of
from typeshape.core.errors import UnsupportedValueKind
from typeshape.core.lattice import EMPTY, SimpleKind, Type
from typeshape.core.render import render


class Point:
    def __init__(self, x, y):
        self.x = x
        self.y = y


# --- Primitive kinds ---


@pytest.mark.parametrize(
    "value, expected",
    [
        (True, "boolean"),
        (False, "boolean"),
        (0, "number"),
        (3.25, "number"),
        (float("nan"), "number"),
        ("", "string"),
        ("text", "string"),
        (None, "null"),
        (UNDEFINED, "undefined"),
    ],
)
def test_primitive_renders_as_its_kind_name(value, expected):
    assert render(classify(value)) == expected


def test_bool_is_not_classified_as_number():
    assert classify(True) == Type.simple(SimpleKind.BOOLEAN)


def test_functions_and_classes_are_functions():
    assert render(classify(len)) == "function"
    assert render(classify(lambda: 0)) == "function"
    assert render(classify(Point)) == "function"
    assert render(classify(Point(1, 2).__init__)) == "function"


# --- Arrays ---


def test_empty_array_has_unknown_element_type():
    t = classify([])
    assert t.array == EMPTY
    assert render(t) == "Array<unknown>"


def test_empty_array_logs_a_warning(caplog):
    with caplog.at_level(logging.WARNING):
        classify({"items": []})
    messages = [record.getMessage() for record in caplog.records]
    assert any("empty_array_found" in m and "$.items" in m for m in messages)


def test_mixed_array_merges_element_types():
    assert render(classify([1, "a"], "all")) == "Array<number | string>"


def test_tuples_are_arrays():
    assert render(classify((1, 2))) == "Array<number>"


def test_strategy_limits_sampled_elements():
    values = [1, "a", True]
    assert render(classify(values, "first")) == "Array<number>"
    assert render(classify(values, "first+last")) == "Array<boolean | number>"
    assert render(classify(values, "all")) == "Array<boolean | number | string>"


def test_strategy_applies_at_every_depth():
    assert render(classify([[1, "a"]], "first")) == "Array<Array<number>>"


def test_nested_arrays_merge_recursively():
    assert render(classify([[1], ["a"]])) == "Array<Array<number | string>>"


def test_unknown_strategy_is_rejected_at_the_boundary():
    with pytest.raises(ValueError):
        classify([1], "random")


# --- Objects ---


def test_empty_object_has_no_members():
    t = classify({})
    assert t.members == ()
    assert render(t) == "{}"


def test_object_members_keep_declaration_order():
    assert render(classify({"a": 1, "b": "x"})) == "{a: number;b: string;}"
    assert render(classify({"b": "x", "a": 1})) == "{b: string;a: number;}"


def test_non_identifier_keys_are_quoted():
    assert render(classify({"a-b": 1})) == '{["a-b"]: number;}'


def test_non_string_keys_are_stringified():
    assert list(classify({1: True}).member_names()) == ["1"]


def test_objects_missing_a_member_make_it_optional():
    t = classify([{"x": 1}, {}])
    assert render(t) == "Array<{x: number | undefined;}>"


def test_array_of_objects_with_other_values():
    assert render(classify([1, {"a": 1}])) == "Array<number | {a: number;}>"
    assert render(classify([[1], {"a": 1}])) == "Array<Array<number> | {a: number;}>"


# --- Named values ---


def test_date_is_a_named_type_without_members():
    t = classify(datetime.date(2024, 1, 1))
    assert t.instance_of == frozenset(["date"])
    assert t.members is None
    assert render(t) == "date"


def test_custom_class_instances_are_opaque():
    assert render(classify(Point(1, 2))) == "Point"


@pytest.mark.parametrize(
    "value, name",
    [
        (OrderedDict(a=1), "OrderedDict"),
        (Decimal("1.5"), "Decimal"),
        (datetime.datetime(2024, 1, 1, 12, 0), "datetime"),
    ],
)
def test_library_values_are_named(value, name):
    assert kind_of(value) is ValueKind.NAMED
    assert render(classify(value)) == name


def test_named_values_sort_before_simples():
    assert render(classify([None, datetime.date(2024, 1, 1)])) == "Array<date | null>"


# --- Unsupported values ---


def test_unsupported_value_reports_kind_and_snapshot():
    with pytest.raises(UnsupportedValueKind) as exc_info:
        classify({1, 2})
    assert exc_info.value.kind == "set"
    assert exc_info.value.snapshot == "{1, 2}"
    assert exc_info.value.path == "$"


def test_unsupported_value_reports_its_path():
    with pytest.raises(UnsupportedValueKind) as exc_info:
        classify({"a-b": [1, b"raw"]})
    assert exc_info.value.kind == "bytes"
    assert exc_info.value.path == '$["a-b"][1]'


def test_kind_of_unsupported_builtin_is_none():
    assert kind_of(1j) is None
    assert kind_of(range(3)) is None
