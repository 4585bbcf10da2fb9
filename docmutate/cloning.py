# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.


__all__ = ["copy"]


def copy(value):
    """Produce a structural deep copy of value.

    Dicts and lists (and tuples) are rebuilt recursively so that
    the copy shares no mutable container with the original.
    Anything else is treated as an immutable leaf and returned as is.

    Cyclic structures are not supported.
    """
    if isinstance(value, dict):
        return {k: copy(v) for k, v in value.items()}
    elif isinstance(value, list):
        return [copy(v) for v in value]
    elif isinstance(value, tuple):
        return tuple(copy(v) for v in value)
    else:
        return value
