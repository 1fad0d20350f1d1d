# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

from collections.abc import Mapping

from .log import DiffFormatError
from .utils import join_path


# Sentinel to represent an absent value, allowing None as a value
Missing = object()


def is_absent(value):
    "Check whether value is absent or None."
    return value is Missing or value is None


class ChangeType:
    "Collection of valid values for the change_type field of diff nodes."
    ADD = "add"
    CHANGE = "change"
    REMOVE = "remove"

    ALL = (ADD, CHANGE, REMOVE)


class DiffNode(object):
    """Record of a single atomic change at one location of a value.

    A diff node is recognized by its type only. Plain mappings that happen
    to carry the same field names are ordinary data, never diff nodes.

    Absent old or new values are represented by `Missing`.
    """
    __slots__ = ("change_type", "old_value", "new_value")

    def __init__(self, change_type, old_value=Missing, new_value=Missing):
        self.change_type = change_type
        self.old_value = old_value
        self.new_value = new_value

    def __eq__(self, other):
        if not isinstance(other, DiffNode):
            return NotImplemented
        return (self.change_type == other.change_type and
                self.old_value == other.old_value and
                self.new_value == other.new_value)

    def __ne__(self, other):
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    __hash__ = None

    def __repr__(self):
        fields = ["change_type=%r" % (self.change_type,)]
        if self.old_value is not Missing:
            fields.append("old_value=%r" % (self.old_value,))
        if self.new_value is not Missing:
            fields.append("new_value=%r" % (self.new_value,))
        return "DiffNode(%s)" % ", ".join(fields)

    def copy(self):
        "Return a new node with the same fields. Values are shared."
        return DiffNode(self.change_type, self.old_value, self.new_value)


def create_diff_node(change_type, old_value=Missing, new_value=Missing):
    """Create a diff node.

    Usually diff nodes are produced by `with_diff` or `merge_diff`,
    so most callers never need to create one by hand.

    The relation between the arguments is not checked. It is up to the
    caller to pass `Missing` as `old_value` for an add, and as
    `new_value` for a remove.
    """
    return DiffNode(change_type, old_value, new_value)


def is_diff_node(value):
    "Check whether value is a diff node created by `create_diff_node`."
    return isinstance(value, DiffNode)


def is_valid_diff(diff):
    """Checks whether a diff (node or tree of nodes) is well formed.

    Returns a boolean indicating the well-formedness of the diff.
    """
    try:
        validate_diff(diff)
    except DiffFormatError:
        return False
    return True


def validate_diff(diff, path=()):
    """Check whether a diff (node or tree of nodes) is well formed.

    Raises a DiffFormatError if not well formed.
    """
    if is_diff_node(diff):
        validate_diff_node(diff, path)
    elif isinstance(diff, Mapping):
        if not diff:
            raise DiffFormatError(
                "Empty diff tree at {}, expected None.".format(join_path(path)))
        for key, entry in diff.items():
            validate_diff(entry, path + (key,))
    else:
        raise DiffFormatError("Diff entry {!r} at {} is not a diff type.".format(
            diff, join_path(path)))


def validate_diff_node(node, path=()):
    """Check the change type invariants of a single diff node.

    Raises a DiffFormatError if not well formed.
    """
    ct = node.change_type
    where = join_path(path)
    if ct == ChangeType.ADD:
        if node.old_value is not Missing:
            raise DiffFormatError("Add at {} should not have an old value.".format(where))
        if node.new_value is Missing:
            raise DiffFormatError("Add at {} needs a new value.".format(where))
    elif ct == ChangeType.REMOVE:
        if node.new_value is not Missing:
            raise DiffFormatError("Remove at {} should not have a new value.".format(where))
        if node.old_value is Missing:
            raise DiffFormatError("Remove at {} needs an old value.".format(where))
    elif ct == ChangeType.CHANGE:
        if node.old_value is Missing or node.new_value is Missing:
            raise DiffFormatError(
                "Change at {} needs both old and new values.".format(where))
    else:
        raise DiffFormatError("Unknown change type {!r} at {}.".format(ct, where))
