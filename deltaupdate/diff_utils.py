# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

from collections.abc import Mapping

from .diff_format import ChangeType, DiffNode, Missing, is_diff_node
from .log import DiffFormatError


# Op of json entries holding a nested diff tree
PATCH = "patch"


def copy_diff(diff):
    """Copy the diff tree structure and its nodes.

    Values referenced by the nodes are shared, not copied.
    """
    if diff is None:
        return None
    if is_diff_node(diff):
        return diff.copy()
    return {key: copy_diff(entry) for key, entry in diff.items()}


def iter_diff_nodes(diff, path=()):
    """Yield (path, node) for every diff node in diff, depth first.

    Keys are visited in sorted order when they are sortable.
    """
    if diff is None:
        return
    if is_diff_node(diff):
        yield path, diff
        return
    for key in _sorted_keys(diff):
        for item in iter_diff_nodes(diff[key], path + (key,)):
            yield item


def count_changes(diff):
    "Count the diff nodes of each change type in diff."
    counts = dict.fromkeys(ChangeType.ALL, 0)
    for _, node in iter_diff_nodes(diff):
        counts[node.change_type] += 1
    return counts


def _sorted_keys(mapping):
    try:
        return sorted(mapping)
    except TypeError:
        return list(mapping)


def _node_to_json(node, key=Missing):
    entry = {"op": node.change_type}
    if key is not Missing:
        entry["key"] = key
    if node.old_value is not Missing:
        entry["old_value"] = node.old_value
    if node.new_value is not Missing:
        entry["new_value"] = node.new_value
    return entry


def to_json_diff(diff):
    """Convert a diff into plain json compatible data.

    A diff tree becomes a list of entries sorted by key:

        {"op": "add"|"change"|"remove", "key": k, "old_value": ..., "new_value": ...}
        {"op": "patch", "key": k, "diff": [...]}

    with absent values left out. A diff node at the root becomes a
    single entry without a key. None stays None.
    """
    if diff is None:
        return None
    if is_diff_node(diff):
        return _node_to_json(diff)
    entries = []
    for key in _sorted_keys(diff):
        entry = diff[key]
        if is_diff_node(entry):
            entries.append(_node_to_json(entry, key))
        else:
            entries.append({"op": PATCH, "key": key, "diff": to_json_diff(entry)})
    return entries


def _node_from_json(entry):
    op = entry.get("op")
    if op not in ChangeType.ALL:
        raise DiffFormatError("Invalid diff entry op {!r}.".format(op))
    return DiffNode(op, entry.get("old_value", Missing), entry.get("new_value", Missing))


def from_json_diff(data):
    "Convert json diff data as produced by to_json_diff back into a diff."
    if data is None:
        return None
    if isinstance(data, Mapping):
        return _node_from_json(data)
    if not isinstance(data, list):
        raise DiffFormatError("Json diff must be a list or a mapping, not {}.".format(
            type(data).__name__))
    diff = {}
    for entry in data:
        if not isinstance(entry, Mapping) or "key" not in entry:
            raise DiffFormatError("Json diff entry {!r} has no key.".format(entry))
        key = entry["key"]
        if key in diff:
            raise DiffFormatError("Multiple json diff entries for key {!r}.".format(key))
        if entry.get("op") == PATCH:
            if not isinstance(entry.get("diff"), list):
                raise DiffFormatError("Patch entry for key {!r} needs a diff list.".format(key))
            diff[key] = from_json_diff(entry["diff"])
            if not diff[key]:
                raise DiffFormatError("Empty patch entry for key {!r}.".format(key))
        else:
            diff[key] = _node_from_json(entry)
    return diff or None
