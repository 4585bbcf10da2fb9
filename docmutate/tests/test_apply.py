# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import pytest

from docmutate import (
    apply_set, apply_unset, apply_increment, apply_min, apply_max,
    apply_multiply, apply_current_date, apply_push, apply_add_to_set,
    apply_pop, op_leaf,
)


def test_apply_set():
    assert apply_set({}, {"a": 1}) == {"a": 1}
    assert apply_set({"a": 1, "b": 2}, {"a": 3}) == {"a": 3, "b": 2}
    assert apply_set({"a": {"b": 1, "c": 2}}, {"a": {"b": 5}}) == {"a": {"b": 5, "c": 2}}

    # Nested update on a missing or scalar field assigns it as a value
    assert apply_set({}, {"a": {"b": 1}}) == {"a": {"b": 1}}
    assert apply_set({"a": 1}, {"a": {"b": 1}}) == {"a": {"b": 1}}

    # Explicit leaf replaces the whole field
    assert apply_set({"a": {"b": 1, "c": 2}}, {"a": op_leaf({"b": 5})}) == {"a": {"b": 5}}


def test_apply_set_list_index():
    doc = {"foods": [{"name": "galbi"}, {"name": "kimchi"}]}
    assert apply_set(doc, {"foods": {"1": {"name": "banana"}}}) == {
        "foods": [{"name": "galbi"}, {"name": "banana"}]}
    assert apply_set(doc, {"foods": {0: {"name": "rice"}}}) == {
        "foods": [{"name": "rice"}, {"name": "kimchi"}]}
    # Out of range and non-index keys are skipped
    assert apply_set(doc, {"foods": {"5": 1, "x": 2}}) == doc


def test_negative_list_index_is_skipped():
    assert apply_set({"a": []}, {"a": {-1: 1}}) == {"a": []}
    assert apply_set({"a": [1, 2]}, {"a": {-1: 5}}) == {"a": [1, 2]}
    assert apply_increment({"a": [1, 2]}, {"a": {-1: 10}}) == {"a": [1, 2]}
    assert apply_unset({"a": [1, 2]}, {"a": {-2: True}}) == {"a": [1, 2]}
    assert apply_pop({"a": [[1, 2]]}, {"a": {-1: -1}}) == {"a": [[1, 2]]}


def test_apply_set_does_not_alias_values():
    value = {"tags": ["a"]}
    result = apply_set({}, {"meta": op_leaf(value)})
    result["meta"]["tags"].append("b")
    assert value == {"tags": ["a"]}


def test_apply_unset():
    assert apply_unset({"a": 1, "b": 2}, {"a": True}) == {"b": 2}
    assert apply_unset({"a": 1}, {"missing": True}) == {"a": 1}
    assert apply_unset({"a": {"b": 1, "c": 2}}, {"a": {"b": True}}) == {"a": {"c": 2}}
    # Any leaf value unsets, it is the presence of the key that counts
    assert apply_unset({"a": 1}, {"a": False}) == {}
    # Nested update on a scalar field is skipped
    assert apply_unset({"a": 1}, {"a": {"b": True}}) == {"a": 1}
    # List elements are nulled to keep positions
    assert apply_unset({"a": [1, 2, 3]}, {"a": {"1": True}}) == {"a": [1, None, 3]}


def test_apply_increment():
    assert apply_increment({"a": 1}, {"a": 2}) == {"a": 3}
    assert apply_increment({"a": 1.5}, {"a": -0.5}) == {"a": 1.0}
    assert apply_increment({"a": {"b": 1}}, {"a": {"b": 10}}) == {"a": {"b": 11}}

    # Mismatches are skipped
    assert apply_increment({"a": "x"}, {"a": 1}) == {"a": "x"}
    assert apply_increment({"a": 1}, {"a": "x"}) == {"a": 1}
    assert apply_increment({"a": 1}, {"a": True}) == {"a": 1}
    assert apply_increment({"a": True}, {"a": 1}) == {"a": True}
    assert apply_increment({}, {"a": 1}) == {}
    assert apply_increment({"a": 1}, {"a": {"b": 1}}) == {"a": 1}


def test_apply_multiply():
    assert apply_multiply({"a": 3}, {"a": 2}) == {"a": 6}
    assert apply_multiply({"a": {"b": 2.5}}, {"a": {"b": 2}}) == {"a": {"b": 5.0}}
    assert apply_multiply({"a": 3}, {"a": "2"}) == {"a": 3}
    assert apply_multiply({}, {"a": 2}) == {}


def test_apply_min():
    assert apply_min({"a": 5}, {"a": 3}) == {"a": 3}
    assert apply_min({"a": 5}, {"a": 7}) == {"a": 5}
    assert apply_min({"a": {"b": 5}}, {"a": {"b": -1}}) == {"a": {"b": -1}}
    assert apply_min({"a": 1}, {"a": False}) == {"a": False}

    # Non-comparable candidates and fields are skipped
    assert apply_min({"a": 5}, {"a": "3"}) == {"a": 5}
    assert apply_min({"a": "x"}, {"a": 3}) == {"a": "x"}
    assert apply_min({}, {"a": 3}) == {}


def test_apply_max():
    assert apply_max({"a": 5}, {"a": 7}) == {"a": 7}
    assert apply_max({"a": 5}, {"a": 3}) == {"a": 5}
    assert apply_max({"a": 0}, {"a": True}) == {"a": True}
    assert apply_max({"a": 5}, {"a": None}) == {"a": 5}


def test_min_max_ties_keep_original():
    result = apply_max({"a": 1}, {"a": True})
    assert result["a"] is not True
    assert result["a"] == 1

    result = apply_min({"a": 2.0}, {"a": 2})
    assert isinstance(result["a"], float)


def test_apply_current_date(fixed_clock):
    expected = 1609459200000
    assert apply_current_date({}, {"a": True}, clock=fixed_clock) == {"a": expected}
    assert apply_current_date({"a": 1}, {"a": False}, clock=fixed_clock) == {"a": expected}
    assert apply_current_date(
        {"a": {"b": 0, "c": 0}}, {"a": {"b": True}}, clock=fixed_clock) == {
            "a": {"b": expected, "c": 0}}
    # Nested update on a scalar field is skipped
    assert apply_current_date({"a": 1}, {"a": {"b": True}}, clock=fixed_clock) == {"a": 1}


def test_apply_current_date_uses_wall_clock():
    result = apply_current_date({}, {"stamp": True})
    assert isinstance(result["stamp"], int)
    assert result["stamp"] > 1600000000000


def test_apply_push():
    assert apply_push({"a": [1]}, {"a": [2, 3]}) == {"a": [1, 2, 3]}
    assert apply_push({"a": {"b": []}}, {"a": {"b": ["x"]}}) == {"a": {"b": ["x"]}}
    assert apply_push({"a": [[1]]}, {"a": {"0": [2]}}) == {"a": [[1, 2]]}

    # Only list fields and list values are pushed
    assert apply_push({"a": 1}, {"a": [2]}) == {"a": 1}
    assert apply_push({"a": [1]}, {"a": 2}) == {"a": [1]}
    assert apply_push({}, {"a": [2]}) == {}


def test_apply_push_preserves_order_and_isolation():
    new = {"name": "banana"}
    doc = {"foods": [{"name": "galbi"}]}
    result = apply_push(doc, {"foods": [new, {"name": "rice"}]})
    assert [f["name"] for f in result["foods"]] == ["galbi", "banana", "rice"]
    result["foods"][1]["name"] = "changed"
    assert new == {"name": "banana"}
    assert doc == {"foods": [{"name": "galbi"}]}


def test_apply_add_to_set_union():
    assert apply_add_to_set({"a": [1, 2]}, {"a": [2, 3, 3]}) == {"a": [1, 2, 3]}
    assert apply_add_to_set({"a": [1, 1]}, {"a": []}) == {"a": [1]}
    assert apply_add_to_set(
        {"a": [{"x": 1}]}, {"a": [{"x": 1}, {"x": 2}]}) == {"a": [{"x": 1}, {"x": 2}]}
    # 1 and True are different values
    assert apply_add_to_set({"a": [1]}, {"a": [True]}) == {"a": [1, True]}
    # but 1 and 1.0 are equal
    assert apply_add_to_set({"a": [1]}, {"a": [1.0]}) == {"a": [1]}
    assert apply_add_to_set({"a": [1.0, 1, 2]}, {"a": [2.0]}) == {"a": [1.0, 2]}

    assert apply_add_to_set({"a": 1}, {"a": [1]}) == {"a": 1}
    assert apply_add_to_set({"a": [1]}, {"a": 2}) == {"a": [1]}


def test_apply_add_to_set_self():
    doc = {"a": ["x", "y", "x", "z", "y"]}
    assert apply_add_to_set(doc, {"a": ["w"]}, strategy="self") == {"a": ["x", "y", "z"]}
    assert apply_add_to_set({"a": [1, 2]}, {"a": True}, strategy="self") == {"a": [1, 2]}


def test_apply_add_to_set_invalid_strategy():
    with pytest.raises(ValueError):
        apply_add_to_set({"a": []}, {"a": [1]}, strategy="bogus")


def test_apply_pop():
    assert apply_pop({"a": [1, 2, 3]}, {"a": -1}) == {"a": [1, 2]}
    assert apply_pop({"a": [1, 2, 3]}, {"a": 1}) == {"a": [2, 3]}
    assert apply_pop({"a": [1, 2, 3]}, {"a": "anything"}) == {"a": [2, 3]}
    assert apply_pop({"a": {"b": [1, 2]}}, {"a": {"b": -1}}) == {"a": {"b": [1]}}
    assert apply_pop({"a": []}, {"a": -1}) == {"a": []}
    assert apply_pop({"a": 1}, {"a": -1}) == {"a": 1}
    assert apply_pop({}, {"a": -1}) == {}


def test_appliers_do_not_mutate_input(fixed_clock):
    doc = {"n": 1, "l": [1, 2], "d": {"x": 1, "l": [3]}}
    snapshot = {"n": 1, "l": [1, 2], "d": {"x": 1, "l": [3]}}
    apply_set(doc, {"n": 2, "d": {"x": 2}})
    apply_unset(doc, {"n": True, "d": {"x": True}})
    apply_increment(doc, {"n": 1, "d": {"x": 1}})
    apply_multiply(doc, {"n": 3})
    apply_min(doc, {"n": 0})
    apply_max(doc, {"n": 9})
    apply_current_date(doc, {"n": True}, clock=fixed_clock)
    apply_push(doc, {"l": [3], "d": {"l": [4]}})
    apply_add_to_set(doc, {"l": [9]})
    apply_pop(doc, {"l": -1, "d": {"l": 1}})
    assert doc == snapshot


def test_appliers_return_copy_for_unusable_input():
    doc = {"a": [1]}
    result = apply_push(doc, [1, 2])
    assert result == doc
    assert result is not doc
    assert apply_set(5, {"a": 1}) == 5
