# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import codecs
import io
import json
import locale
import numbers
import os
import re
import sys


r_is_index = re.compile(r"^\d+$")

# Sentinel to allow None as a field value
Missing = object()


def is_number(value):
    "Numbers that arithmetic operators accept. Booleans are excluded."
    return isinstance(value, numbers.Number) and not isinstance(value, bool)


def is_comparable(value):
    "Values that min and max operators accept, booleans included."
    return isinstance(value, (numbers.Real, bool))


def _list_index(container, key):
    if isinstance(key, bool):
        return None
    if isinstance(key, int):
        index = key
    elif isinstance(key, str) and r_is_index.match(key):
        index = int(key)
    else:
        return None
    if 0 <= index < len(container):
        return index
    return None


def get_field(container, key, default=None):
    if isinstance(container, dict):
        return container.get(key, default)
    elif isinstance(container, list):
        index = _list_index(container, key)
        if index is not None:
            return container[index]
    return default


def set_field(container, key, value):
    """Assign value to the field key of container.

    Returns False when the field cannot be addressed, i.e. the
    container is not composite or a list index is out of range.
    """
    if isinstance(container, dict):
        container[key] = value
        return True
    elif isinstance(container, list):
        index = _list_index(container, key)
        if index is not None:
            container[index] = value
            return True
    return False


def remove_field(container, key):
    """Remove the field key from container.

    List elements are replaced with None to keep the
    positions of later elements stable.
    """
    if isinstance(container, dict):
        container.pop(key, None)
    elif isinstance(container, list):
        index = _list_index(container, key)
        if index is not None:
            container[index] = None


def is_composite(value):
    return isinstance(value, (dict, list))


def join_path(path, sep="."):
    "Join a path on the form ('foo', 'bar') into 'foo.bar'."
    return sep.join(str(p) for p in path)


def read_json(f):
    """Read and return json from filename.

    Parameters:
        f:  The filename to read from, or "-" for stdin.
            Alternatively a file-like object can be passed.
    """
    if f == "-":
        return json.load(sys.stdin)
    if not isinstance(f, str):
        return json.load(f)
    with io.open(f, encoding="utf8") as fo:
        return json.load(fo)


def write_json(obj, f):
    with io.open(f, "w", encoding="utf8") as fo:
        json.dump(obj, fo, indent=1, ensure_ascii=False)
        fo.write("\n")


def _setup_std_stream_encoding():
    """Setup encoding on stdout/err

    Ensures sys.stdout/err have error-escaping encoders,
    rather than raising errors.
    """
    if os.getenv('PYTHONIOENCODING'):
        # setting PYTHONIOENCODING overrides anything we would do here
        return
    _default_encoding = locale.getpreferredencoding() or 'UTF-8'
    for name in ('stdout', 'stderr'):
        stream = getattr(sys, name)
        raw_stream = getattr(sys, '__%s__' % name)
        if stream is not raw_stream:
            # don't wrap captured or redirected output
            continue
        enc = getattr(stream, 'encoding', None) or _default_encoding
        errors = getattr(stream, 'errors', None) or 'strict'
        if errors == 'strict' or errors.startswith('surrogate'):
            bin_stream = stream.buffer
            new_stream = codecs.getwriter(enc)(bin_stream, errors='backslashreplace')
            setattr(sys, name, new_stream)


def setup_std_streams():
    """Setup sys.stdout/err

    - Ensures sys.stdout/err have error-escaping encoders,
      rather than raising errors.
    - enables colorama for ANSI escapes on Windows
    """
    _setup_std_stream_encoding()
    # must enable colorama after setting up encoding,
    # or encoding will undo colorama setup
    if sys.platform.startswith('win'):
        import colorama
        colorama.init()
