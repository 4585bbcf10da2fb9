# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

from collections import namedtuple

from .log import debug
from .update_format import (
    UpdateNode, is_nested, normalize_operator, to_update_request,
)
from .utils import join_path


__all__ = ["verify", "VerificationResult"]


class VerificationResult(namedtuple("VerificationResult", ("allowed", "errors", "paths"))):
    """Outcome of verifying an update request against a permission tree.

    allowed is True if no touched field was denied. errors lists the
    denied fields as dotted paths, in the order they appear in the
    update request, and paths lists the same fields as tuples of
    path segments.
    """
    __slots__ = ()

    def as_dict(self):
        return {"allowed": self.allowed, "errors": list(self.errors)}


def _children(update):
    "Return the child mapping of an update (sub)tree, or None for leaf values."
    if isinstance(update, UpdateNode):
        return update.children if is_nested(update) else None
    elif isinstance(update, dict):
        return update
    return None


def _verify_paths(permissions, update, default_permission, path):
    denied = []
    for key, child in update.items():
        permission = permissions.get(key) if isinstance(permissions, dict) else permissions
        keypath = path + (key,)
        children = _children(child)
        if isinstance(permission, dict):
            if children is None:
                # A permission subtree grants nothing to a whole-field update
                debug("Denying '%s': value given for a field with nested permissions",
                      join_path(keypath))
                denied.append(keypath)
            else:
                denied.extend(_verify_paths(permission, children, default_permission, keypath))
        elif isinstance(permission, bool):
            if not permission:
                denied.append(keypath)
        elif children is not None:
            # No entry, decide for each field the update touches below
            denied.extend(_verify_paths({}, children, default_permission, keypath))
        elif not default_permission:
            denied.append(keypath)
    return denied


def _normalize_permissions(permissions):
    "Map the operator names of a permission tree to their canonical names."
    if not isinstance(permissions, dict):
        return permissions
    return {normalize_operator(name) or name: permission
            for name, permission in permissions.items()}


def verify(permissions, update, default_permission=False):
    """Verify that an update request is permitted by a permission tree.

    The permission tree has the same shape as the update request.
    Each entry is True (allowed), False (denied) or a nested tree,
    and True or False on an inner entry covers its whole subtree.
    Fields of the update without an entry in the tree are allowed
    only if default_permission is True, and are reported down to
    the leaves of the update.

    Operator names in both trees may use their '$' aliases, and
    errors use the canonical names. All denied fields are collected,
    not just the first one.
    Returns a VerificationResult.
    """
    children = _children(update)
    if children is None:
        raise ValueError("Invalid update type to verify: {}".format(type(update).__name__))
    paths = _verify_paths(
        _normalize_permissions(permissions), to_update_request(children),
        default_permission, ())
    return VerificationResult(
        allowed=not paths,
        errors=[join_path(p) for p in paths],
        paths=paths,
    )
