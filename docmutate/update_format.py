# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

from .log import UpdateFormatError, warning


class UpdateOp:
    "Collection of valid operator names in update requests."
    SET = "set"
    UNSET = "unset"
    INCREMENT = "increment"
    MIN = "min"
    MAX = "max"
    MULTIPLY = "multiply"
    CURRENT_DATE = "currentDate"
    PUSH = "push"
    ADD_TO_SET = "addToSet"
    POP = "pop"


UPDATE_OPS = (
    UpdateOp.SET,
    UpdateOp.UNSET,
    UpdateOp.INCREMENT,
    UpdateOp.MIN,
    UpdateOp.MAX,
    UpdateOp.MULTIPLY,
    UpdateOp.CURRENT_DATE,
    UpdateOp.PUSH,
    UpdateOp.ADD_TO_SET,
    UpdateOp.POP,
    )

# Mongo style spellings
OPERATOR_ALIASES = {
    "$set": UpdateOp.SET,
    "$unset": UpdateOp.UNSET,
    "$inc": UpdateOp.INCREMENT,
    "$min": UpdateOp.MIN,
    "$max": UpdateOp.MAX,
    "$mul": UpdateOp.MULTIPLY,
    "$currentDate": UpdateOp.CURRENT_DATE,
    "$push": UpdateOp.PUSH,
    "$addToSet": UpdateOp.ADD_TO_SET,
    "$pop": UpdateOp.POP,
}


def normalize_operator(name):
    """Return the canonical operator name for name.

    Aliases like '$inc' map to their canonical name, canonical names
    map to themselves and anything else is returned as None.
    """
    if name in UPDATE_OPS:
        return name
    return OPERATOR_ALIASES.get(name)


class NodeKind:
    "Collection of valid values for the kind field in update nodes."
    LEAF = "leaf"
    NESTED = "nested"


class UpdateNode(dict):
    """For internal usage in docmutate library.

    Minimal class providing attribute access to update node keys.
    A node is either a leaf, carrying the operand for one field,
    or nested, carrying a mapping of child keys to nodes.
    """
    def __getattr__(self, name):
        if name.startswith("__") and name.endswith("__"):
            return self.__getattribute__(name)
        try:
            return self[name]
        except KeyError:
            raise AttributeError(name)

    def __setattr__(self, name, value):
        self[name] = value


def op_leaf(value):
    "Create an update node applying the operator to a single field with value."
    return UpdateNode(kind=NodeKind.LEAF, value=value)


def op_nested(children):
    "Create an update node descending into a composite field."
    if not isinstance(children, dict):
        raise UpdateFormatError("Nested node needs a mapping of children, not '{}'.".format(
            type(children).__name__))
    return UpdateNode(kind=NodeKind.NESTED, children=children)


def is_leaf(node):
    return isinstance(node, UpdateNode) and node.kind == NodeKind.LEAF


def is_nested(node):
    return isinstance(node, UpdateNode) and node.kind == NodeKind.NESTED


def to_update_node(obj):
    """Convert a plain operator sub-document to tagged update nodes.

    Plain dicts become nested nodes, any other value becomes a leaf.
    Nodes created with op_leaf or op_nested are kept, which is how
    a caller marks a dict value as a value rather than a subtree.
    """
    if isinstance(obj, UpdateNode):
        if obj.kind == NodeKind.NESTED:
            return op_nested({k: to_update_node(v) for k, v in obj.children.items()})
        return obj
    elif isinstance(obj, dict):
        return op_nested({k: to_update_node(v) for k, v in obj.items()})
    else:
        return op_leaf(obj)


def node_value(node):
    "Materialize an update node back into a plain value."
    if is_nested(node):
        return {k: node_value(v) for k, v in node.children.items()}
    elif is_leaf(node):
        return node.value
    return node


def to_update_request(update):
    """Convert an update request to canonical operator names and tagged nodes.

    Unknown operator names are kept as they are, so that callers
    can decide whether to ignore or reject them. An operator given
    under more than one spelling is merged, later entries winning
    for fields named in both.
    """
    request = {}
    spellings = {}
    for name, subdocument in update.items():
        op = normalize_operator(name) or name
        node = to_update_node(subdocument)
        if op in request:
            warning("Merging operator '%s' given as both '%s' and '%s'.",
                    op, spellings[op], name)
            node = merge_nodes(request[op], node)
        request[op] = node
        spellings[op] = name
    return request


def merge_nodes(first, second):
    """Merge two update nodes, second taking precedence.

    Nested nodes are merged field by field, anything else
    is replaced by second.
    """
    if not (is_nested(first) and is_nested(second)):
        return second
    children = dict(first.children)
    for key, child in second.children.items():
        if key in children:
            child = merge_nodes(children[key], child)
        children[key] = child
    return op_nested(children)


def is_valid_update(update):
    """Checks whether an update request is well formed.

    Returns a boolean indicating the well-formedness of the update.
    """
    try:
        validate_update(update)
    except UpdateFormatError:
        return False
    return True


def validate_update(update):
    """Check whether an update request is well formed.

    Raises an UpdateFormatError if not well formed.
    """
    if not isinstance(update, dict):
        raise UpdateFormatError("Update request must be a dict, not '{}'.".format(
            type(update).__name__))
    seen = {}
    for name, subdocument in update.items():
        op = normalize_operator(name)
        if op is None:
            raise UpdateFormatError("Unknown update operator '{}'.".format(name))
        if op in seen:
            raise UpdateFormatError(
                "Operator '{}' given more than once (as '{}' and '{}').".format(
                    op, seen[op], name))
        seen[op] = name
        if is_leaf(subdocument) or not isinstance(subdocument, dict):
            raise UpdateFormatError(
                "Operator '{}' expects a mapping of fields, not '{}'.".format(
                    name, subdocument))
