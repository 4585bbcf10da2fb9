# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

from ._version import __version__

from .applying import (
    mutate, apply_set, apply_unset, apply_increment, apply_min, apply_max,
    apply_multiply, apply_current_date, apply_push, apply_add_to_set, apply_pop,
    OPERATOR_ORDER, LEGACY_OPERATOR_ORDER,
)
from .cloning import copy
from .log import UpdateFormatError
from .update_format import op_leaf, op_nested, to_update_request, validate_update
from .verifying import verify, VerificationResult


__all__ = [
    "__version__",
    "copy",
    "mutate",
    "apply_set", "apply_unset", "apply_increment", "apply_min", "apply_max",
    "apply_multiply", "apply_current_date", "apply_push", "apply_add_to_set",
    "apply_pop",
    "OPERATOR_ORDER", "LEGACY_OPERATOR_ORDER",
    "op_leaf", "op_nested", "to_update_request", "validate_update",
    "UpdateFormatError",
    "verify", "VerificationResult",
    ]
