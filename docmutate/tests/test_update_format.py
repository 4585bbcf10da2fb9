# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import logging

import pytest

from docmutate.log import UpdateFormatError
from docmutate.update_format import (
    UpdateOp, NodeKind, op_leaf, op_nested, is_leaf, is_nested,
    to_update_node, to_update_request, node_value, normalize_operator,
    validate_update, is_valid_update,
)


def test_normalize_operator():
    assert normalize_operator("set") == UpdateOp.SET
    assert normalize_operator("$inc") == UpdateOp.INCREMENT
    assert normalize_operator("$mul") == UpdateOp.MULTIPLY
    assert normalize_operator("$currentDate") == UpdateOp.CURRENT_DATE
    assert normalize_operator("inc") is None
    assert normalize_operator("$rename") is None


def test_to_update_node_tags_plain_values():
    node = to_update_node({"a": 1, "b": {"c": [1, 2]}})
    assert is_nested(node)
    assert is_leaf(node.children["a"])
    assert node.children["a"].value == 1
    assert is_nested(node.children["b"])
    assert is_leaf(node.children["b"].children["c"])
    assert node.children["b"].children["c"].value == [1, 2]


def test_to_update_node_keeps_explicit_leaf():
    node = to_update_node({"address": op_leaf({"city": "Oslo"})})
    child = node.children["address"]
    assert child.kind == NodeKind.LEAF
    assert child.value == {"city": "Oslo"}


def test_to_update_node_converts_inside_explicit_nested():
    node = to_update_node(op_nested({"a": {"b": 1}}))
    assert is_nested(node.children["a"])
    assert is_leaf(node.children["a"].children["b"])


def test_node_value_roundtrip():
    sub = {"a": 1, "b": {"c": [1, 2]}}
    assert node_value(to_update_node(sub)) == sub


def test_to_update_request_normalizes_aliases():
    request = to_update_request({"$set": {"a": 1}, "pop": {"b": -1}, "$bogus": {}})
    assert sorted(request) == ["$bogus", "pop", "set"]
    assert is_nested(request["set"])


def test_to_update_request_merges_spellings(caplog):
    with caplog.at_level(logging.WARNING, logger="docmutate"):
        request = to_update_request({
            "set": {"a": 1, "n": {"x": 1, "y": 2}},
            "$set": {"b": 2, "n": {"y": 3}},
        })
    assert list(request) == ["set"]
    assert node_value(request["set"]) == {"a": 1, "n": {"x": 1, "y": 3}, "b": 2}
    assert "Merging operator 'set'" in caplog.text


def test_op_nested_requires_mapping():
    with pytest.raises(UpdateFormatError):
        op_nested([1, 2])


def test_validate_update():
    validate_update({})
    validate_update({"set": {"a": 1}, "$inc": {"b": 2}})
    validate_update({"unset": op_nested({"a": op_leaf(True)})})

    with pytest.raises(UpdateFormatError):
        validate_update([])
    with pytest.raises(UpdateFormatError):
        validate_update({"$rename": {"a": "b"}})
    with pytest.raises(UpdateFormatError):
        validate_update({"set": 1})
    with pytest.raises(UpdateFormatError):
        validate_update({"set": op_leaf({"a": 1})})
    with pytest.raises(UpdateFormatError):
        validate_update({"set": {"a": 1}, "$set": {"b": 2}})


def test_is_valid_update():
    assert is_valid_update({"push": {"a": [1]}})
    assert not is_valid_update({"rename": {"a": "b"}})
    assert not is_valid_update("set")
