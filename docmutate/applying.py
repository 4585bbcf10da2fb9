# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

from functools import partial
import time

from .cloning import copy
from .log import debug, warning
from .update_format import (
    UpdateOp, UPDATE_OPS, is_leaf, is_nested, node_value,
    to_update_node, to_update_request,
)
from .utils import (
    Missing, is_number, is_comparable, is_composite,
    get_field, set_field, remove_field, join_path,
)


__all__ = [
    "mutate",
    "apply_set", "apply_unset", "apply_increment", "apply_min", "apply_max",
    "apply_multiply", "apply_current_date", "apply_push", "apply_add_to_set",
    "apply_pop",
    "OPERATOR_ORDER", "LEGACY_OPERATOR_ORDER", "ADDTOSET_STRATEGIES",
]


# Order in which mutate applies the operators of a request
OPERATOR_ORDER = (
    UpdateOp.SET,
    UpdateOp.UNSET,
    UpdateOp.CURRENT_DATE,
    UpdateOp.PUSH,
    UpdateOp.INCREMENT,
    UpdateOp.MULTIPLY,
    UpdateOp.MAX,
    UpdateOp.MIN,
    UpdateOp.ADD_TO_SET,
    UpdateOp.POP,
    )

# Dispatch order without currentDate and multiply
LEGACY_OPERATOR_ORDER = (
    UpdateOp.SET,
    UpdateOp.UNSET,
    UpdateOp.PUSH,
    UpdateOp.INCREMENT,
    UpdateOp.MAX,
    UpdateOp.MIN,
    UpdateOp.ADD_TO_SET,
    UpdateOp.POP,
    )

ADDTOSET_STRATEGIES = ("union", "self")

sequence_types = (list, tuple)


def _walk(target, node, leaf, path=()):
    """Walk the children of a nested update node alongside target.

    Descends where the update node is nested and the target field
    is a dict or list, and calls leaf(target, key, field, child, path)
    everywhere else. The target is modified in place.
    """
    for key, child in node.children.items():
        field = get_field(target, key, Missing)
        if is_nested(child) and is_composite(field):
            _walk(field, child, leaf, path + (key,))
        else:
            leaf(target, key, field, child, path + (key,))


def _skip(op, path, reason):
    debug("Skipping %s on '%s': %s", op, join_path(path), reason)


def _apply(document, subdocument, leaf):
    newobj = copy(document)
    node = to_update_node(subdocument)
    if not is_nested(node):
        _skip(leaf.__name__.strip("_"), (), "operator value is not a mapping")
        return newobj
    if not is_composite(newobj):
        _skip(leaf.__name__.strip("_"), (), "document is not a dict or list")
        return newobj
    _walk(newobj, node, leaf)
    return newobj


def _set(target, key, field, child, path):
    if not set_field(target, key, copy(node_value(child))):
        _skip("set", path, "field cannot be addressed")


def apply_set(document, subdocument):
    """Produce a copy of document with the given fields replaced.

    Fields that do not exist are created. A nested update node whose
    target field is missing or not composite is assigned as a plain
    dict value.
    """
    return _apply(document, subdocument, _set)


def _unset(target, key, field, child, path):
    if not is_leaf(child):
        _skip("unset", path, "target is not composite")
    elif field is not Missing:
        remove_field(target, key)


def apply_unset(document, subdocument):
    "Produce a copy of document with the given fields removed."
    return _apply(document, subdocument, _unset)


def _increment(target, key, field, child, path):
    if not is_leaf(child) or not is_number(child.value):
        _skip("increment", path, "delta is not a number")
    elif not is_number(field):
        _skip("increment", path, "field is not a number")
    else:
        set_field(target, key, field + child.value)


def apply_increment(document, subdocument):
    return _apply(document, subdocument, _increment)


def _multiply(target, key, field, child, path):
    if not is_leaf(child) or not is_number(child.value):
        _skip("multiply", path, "factor is not a number")
    elif not is_number(field):
        _skip("multiply", path, "field is not a number")
    else:
        set_field(target, key, field * child.value)


def apply_multiply(document, subdocument):
    return _apply(document, subdocument, _multiply)


def _compare_leaf(op, better):
    def leaf(target, key, field, child, path):
        if not is_leaf(child) or not is_comparable(child.value):
            _skip(op, path, "candidate is not comparable")
        elif not is_comparable(field):
            _skip(op, path, "field is not comparable")
        elif better(child.value, field):
            set_field(target, key, child.value)
    leaf.__name__ = "_" + op
    return leaf


# Strict comparisons, so ties keep the original value
_min = _compare_leaf(UpdateOp.MIN, lambda candidate, field: candidate < field)
_max = _compare_leaf(UpdateOp.MAX, lambda candidate, field: candidate > field)


def apply_min(document, subdocument):
    return _apply(document, subdocument, _min)


def apply_max(document, subdocument):
    return _apply(document, subdocument, _max)


def apply_current_date(document, subdocument, clock=None):
    """Produce a copy of document with fields stamped with the current time.

    The stamp is in epoch milliseconds, and the same stamp is used
    for all fields in one call. Any leaf value triggers a stamp,
    including False. clock defaults to time.time.
    """
    now = int((clock or time.time)() * 1000)

    def _current_date(target, key, field, child, path):
        if not is_leaf(child):
            _skip("currentDate", path, "target is not composite")
        elif not set_field(target, key, now):
            _skip("currentDate", path, "field cannot be addressed")

    return _apply(document, subdocument, _current_date)


def _push(target, key, field, child, path):
    if not isinstance(field, list):
        _skip("push", path, "field is not a list")
    elif not is_leaf(child) or not isinstance(child.value, sequence_types):
        _skip("push", path, "value is not a list")
    else:
        field.extend(copy(v) for v in child.value)


def apply_push(document, subdocument):
    "Produce a copy of document with the given values appended to list fields."
    return _apply(document, subdocument, _push)


def _contains(values, value):
    # 1 == True in Python, keep them apart like distinct json values
    return any(v == value and isinstance(v, bool) == isinstance(value, bool)
               for v in values)


def _unique(values):
    newobj = []
    for value in values:
        if not _contains(newobj, value):
            newobj.append(value)
    return newobj


def apply_add_to_set(document, subdocument, strategy="union"):
    """Produce a copy of document with list fields extended as sets.

    With the "union" strategy, the candidate values in the update
    are appended to the field unless an equal value is already
    there, and the field holds no duplicates afterwards.

    With the "self" strategy, the candidates are ignored and the
    field's own values are deduplicated, keeping first occurrences.
    """
    if strategy not in ADDTOSET_STRATEGIES:
        raise ValueError("Invalid addToSet strategy %r, expected one of %r." % (
            strategy, ADDTOSET_STRATEGIES))

    def _add_to_set(target, key, field, child, path):
        if not isinstance(field, list):
            _skip("addToSet", path, "field is not a list")
            return
        if strategy == "self":
            field[:] = _unique(field)
        elif not is_leaf(child) or not isinstance(child.value, sequence_types):
            _skip("addToSet", path, "value is not a list")
        else:
            field[:] = _unique(field + [copy(v) for v in child.value])

    return _apply(document, subdocument, _add_to_set)


def _pop(target, key, field, child, path):
    if not is_leaf(child):
        _skip("pop", path, "target is not composite")
    elif not isinstance(field, list):
        _skip("pop", path, "field is not a list")
    elif field:
        if child.value == -1 and not isinstance(child.value, bool):
            field.pop()
        else:
            field.pop(0)


def apply_pop(document, subdocument):
    """Produce a copy of document with an element popped from list fields.

    -1 removes the last element, any other value removes the first.
    """
    return _apply(document, subdocument, _pop)


def _build_appliers(addtoset_strategy, clock):
    return {
        UpdateOp.SET: apply_set,
        UpdateOp.UNSET: apply_unset,
        UpdateOp.INCREMENT: apply_increment,
        UpdateOp.MIN: apply_min,
        UpdateOp.MAX: apply_max,
        UpdateOp.MULTIPLY: apply_multiply,
        UpdateOp.CURRENT_DATE: partial(apply_current_date, clock=clock),
        UpdateOp.PUSH: apply_push,
        UpdateOp.ADD_TO_SET: partial(apply_add_to_set, strategy=addtoset_strategy),
        UpdateOp.POP: apply_pop,
    }


def mutate(document, update, operators=None, addtoset_strategy="union", clock=None):
    """Produce a mutated version of document with given update request.

    The update request maps operator names (or their '$' aliases) to
    operator sub-documents. Operators are applied one at a time, in
    the order given by operators (OPERATOR_ORDER by default), each
    working on the result of the previous one. Operators in the
    request that are unknown, or left out of operators, are skipped.

    The input document is never modified.
    """
    if operators is None:
        operators = OPERATOR_ORDER
    for op in operators:
        if op not in UPDATE_OPS:
            raise ValueError("Invalid operator %r in operator order." % (op,))
    if len(set(operators)) != len(operators):
        raise ValueError("Operator order lists an operator more than once: %r." % (
            list(operators),))
    if not isinstance(update, dict):
        raise ValueError("Invalid update type to apply: {}".format(type(update).__name__))

    request = to_update_request(update)
    for name in request:
        if name not in UPDATE_OPS:
            warning("Ignoring unknown update operator %r.", name)
        elif name not in operators:
            warning("Ignoring update operator %r, not in operator order.", name)

    appliers = _build_appliers(addtoset_strategy, clock)
    newobj = None
    for op in operators:
        if op in request:
            newobj = appliers[op](document if newobj is None else newobj, request[op])

    if newobj is None:
        newobj = copy(document)
    return newobj
