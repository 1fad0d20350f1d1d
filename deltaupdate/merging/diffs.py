# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

from collections.abc import Mapping

import deltaupdate.log
from ..diff_format import ChangeType, Missing, create_diff_node, is_diff_node
from ..diff_utils import copy_diff
from ..log import DiffMergeError
from ..utils import is_same_value


__all__ = ["merge_diff_node", "merge_diff", "DiffAccumulator"]


# Change type of two sequential changes at one location,
# None when the second change undoes the first one.
# Pairs not listed here cannot come from sequential updates:
#
# - add + add: the location already exists after the first add
# - change + add: likewise
# - remove + change, remove + remove: nothing left to change or remove
_change_type_transitions = {
    (ChangeType.ADD, ChangeType.CHANGE): ChangeType.ADD,
    (ChangeType.ADD, ChangeType.REMOVE): None,
    (ChangeType.CHANGE, ChangeType.CHANGE): ChangeType.CHANGE,
    (ChangeType.CHANGE, ChangeType.REMOVE): ChangeType.REMOVE,
    (ChangeType.REMOVE, ChangeType.ADD): ChangeType.CHANGE,
}


def _child_value(value, key):
    if isinstance(value, Mapping):
        return value.get(key, Missing)
    return Missing


def purge(diff):
    """Return None for diffs that do not change anything, otherwise diff.

    These are empty diff trees, change nodes whose old and new
    values are the same, and removals of a value that was absent
    before the first update.
    """
    if diff is None:
        return None
    if is_diff_node(diff):
        if (diff.change_type == ChangeType.CHANGE and
                is_same_value(diff.old_value, diff.new_value)):
            return None
        if diff.change_type == ChangeType.REMOVE and diff.old_value is Missing:
            return None
        return diff
    if not diff:
        return None
    return diff


def merge_diff_node(x, y):
    """Merge two diff nodes at the same location into one.

    x is the change that happened first, y the one that followed.

    Returns the merged node, or None if y undoes x.
    Raises a DiffMergeError if y cannot follow x, which means
    the nodes were given out of order.
    """
    if x is None:
        return y
    if y is None:
        return x

    key = (x.change_type, y.change_type)
    if key not in _change_type_transitions:
        msg = "Unexpected change type {} after {} when merging diff nodes.".format(
            y.change_type, x.change_type)
        deltaupdate.log.error(msg)
        raise DiffMergeError(msg)

    change_type = _change_type_transitions[key]
    if change_type is None:
        return None

    return purge(create_diff_node(
        change_type,
        x.old_value,
        Missing if change_type == ChangeType.REMOVE else y.new_value))


def merge_diff(stored, merging, old_value, new_value):
    """Merge the diff of a later update into the diff of an earlier one.

    Parameters
    ----------

    stored: diff
        The diff accumulated so far. It is owned by this call and
        may be modified in place, use the return value afterwards.
    merging: diff
        The diff of the latest update. Never modified.
    old_value:
        The value before the first update at this location,
        Missing if absent.
    new_value:
        The value after the latest update at this location.

    Returns the merged diff, or None if the updates cancel out.

    The result is not guaranteed to be the smallest possible diff:
    where one diff replaces a value wholesale, the finer grained
    changes of the other are folded into it.
    """
    if stored is None:
        return merging
    if merging is None:
        return stored

    if is_diff_node(stored):
        if is_diff_node(merging):
            return merge_diff_node(stored, merging)
        # The later changes below this location are part of the
        # wholesale replacement already stored here
        stored.new_value = new_value
        return purge(stored)

    if is_diff_node(merging):
        # The earlier changes below this location are replaced
        # wholesale by the merging node
        merged = merging.copy()
        merged.old_value = old_value
        if merged.change_type == ChangeType.CHANGE and old_value is Missing:
            # Nothing was there before the first update
            merged.change_type = ChangeType.ADD
        return purge(merged)

    for key, entry in merging.items():
        merged = merge_diff(stored.get(key), entry,
                            _child_value(old_value, key), _child_value(new_value, key))
        if merged is None:
            stored.pop(key, None)
        else:
            stored[key] = merged

    return purge(stored)


class DiffAccumulator(object):
    """Collects the diffs of a series of updates into one net diff.

    Keeps the value from before the first update, so that the net
    diff always describes the change from that value to the latest:

        acc = DiffAccumulator(source)
        value, diff = with_diff(source, commands1)
        acc.add(value, diff)
        value, diff = with_diff(value, commands2)
        acc.add(value, diff)
        acc.diff  # net change from source to value

    Diffs passed to add are copied, never modified.
    """

    def __init__(self, value):
        self.initial = value
        self.value = value
        self.diff = None

    def add(self, value, diff):
        "Fold the diff of the update producing value into the net diff."
        if diff is not None:
            deltaupdate.log.debug("Accumulating diff %r", diff)
            self.diff = merge_diff(self.diff, copy_diff(diff), self.initial, value)
        self.value = value
        return self.diff

    def reset(self):
        "Start over from the latest value."
        self.initial = self.value
        self.diff = None

    def __bool__(self):
        return self.diff is not None
