# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

from collections.abc import Mapping
from types import MappingProxyType

import deltaupdate.log
from .commands import OperationKind, Op, parse_commands
from ..diff_format import ChangeType, Missing, create_diff_node, is_absent
from ..log import CommandFormatError
from ..utils import is_same_value, shallow_clone, join_path


__all__ = ["with_diff", "update"]


# Key of the synthetic container used to apply operations to a root value
_ROOT = "root"


# =============================================================================
#
# Leaf operations
#
# Each takes (container, key, argument) and returns a (value, diff) tuple,
# where value is the new value for container[key] and diff is a diff node,
# a diff tree, or None if nothing changed. The container is never modified.
#
# =============================================================================

def _change_type_at(container, key):
    return ChangeType.CHANGE if key in container else ChangeType.ADD


def apply_set(container, key, value):
    old = container.get(key, Missing)
    if is_same_value(value, old):
        return old, None
    return value, create_diff_node(_change_type_at(container, key), old, value)


def _sequence_at(container, key, kind):
    seq = container.get(key, Missing)
    if not isinstance(seq, (list, tuple)):
        raise CommandFormatError("{} expects a sequence at {!r}, not {}.".format(
            kind, key, "nothing" if seq is Missing else type(seq).__name__))
    return seq


def apply_push(container, key, value):
    seq = _sequence_at(container, key, OperationKind.PUSH)
    result = list(seq)
    result.append(value)
    if isinstance(seq, tuple):
        result = tuple(result)
    return result, create_diff_node(ChangeType.CHANGE, seq, result)


def apply_unshift(container, key, value):
    seq = _sequence_at(container, key, OperationKind.UNSHIFT)
    result = [value]
    result.extend(seq)
    if isinstance(seq, tuple):
        result = tuple(result)
    return result, create_diff_node(ChangeType.CHANGE, seq, result)


def _check_mapping(value, kind, key, what):
    if not isinstance(value, Mapping):
        raise CommandFormatError("{} expects a mapping as {} at {!r}, not {}.".format(
            kind, what, key, type(value).__name__))


def apply_merge(container, key, extensions):
    _check_mapping(extensions, OperationKind.MERGE, key, "argument")
    target = container.get(key, Missing)
    if is_absent(target):
        value = shallow_clone(extensions)
        return value, create_diff_node(_change_type_at(container, key), target, value)

    _check_mapping(target, OperationKind.MERGE, key, "target")
    value = shallow_clone(target)
    diff = {}
    for k, v in extensions.items():
        v, d = apply_set(value, k, v)
        if d is not None:
            value[k] = v
            diff[k] = d
    if not diff:
        return target, None
    return value, diff


def apply_defaults(container, key, defaults):
    _check_mapping(defaults, OperationKind.DEFAULTS, key, "argument")
    target = container.get(key, Missing)
    if is_absent(target):
        extensions = defaults
    else:
        _check_mapping(target, OperationKind.DEFAULTS, key, "target")
        extensions = {k: v for k, v in defaults.items() if k not in target}
    return apply_merge(container, key, extensions)


def apply_invoke(container, key, factory):
    if not callable(factory):
        raise CommandFormatError("{} expects a callable at {!r}, not {}.".format(
            OperationKind.INVOKE, key, type(factory).__name__))
    value = factory(container.get(key, Missing))
    return apply_set(container, key, value)


operations = MappingProxyType({
    OperationKind.SET: apply_set,
    OperationKind.PUSH: apply_push,
    OperationKind.UNSHIFT: apply_unshift,
    OperationKind.MERGE: apply_merge,
    OperationKind.DEFAULTS: apply_defaults,
    OperationKind.INVOKE: apply_invoke,
})


# =============================================================================
#
# Command tree traversal
#
# =============================================================================

def _apply_child(container, key, command, path):
    if isinstance(command, Op):
        return operations[command.kind](container, key, command.argument)
    child = container.get(key, Missing)
    if is_absent(child):
        child = {}
    return _descend(child, command, path + (key,))


def _descend(source, command, path):
    if not isinstance(source, Mapping):
        raise CommandFormatError("Cannot descend into {} at {}.".format(
            type(source).__name__, join_path(path)))

    # Cloned on first change only, untouched levels are returned as is
    result = None
    diff = {}
    for key, child_command in command.children.items():
        container = source if result is None else result
        value, child_diff = _apply_child(container, key, child_command, path)
        if child_diff is None:
            continue
        if result is None:
            result = shallow_clone(source)
        result[key] = value
        diff[key] = child_diff

    if result is None:
        return source, None
    return result, diff


def with_diff(source, commands):
    """Update source following commands, returning the new value and a diff.

    The source value is never modified. Only the levels touched by a
    command are copied, everything else is shared with source.

    Recognized operations are:

    - "$set" for changing the value.
    - "$push" for adding a value at the end of a sequence.
    - "$unshift" for adding a value at the beginning of a sequence.
    - "$merge" for shallow merging a mapping into the value.
    - "$defaults" for filling in keys absent from the value.
    - "$invoke" for setting the value returned by a factory called
      with the current value (Missing if absent).

    Any other mapping descends into the keys it holds, so several
    updates can be combined in one command:

        result, diff = with_diff(
            source,
            {
                "foo": {"bar": {"$set": 1}},
                "alice": {"$push": 1},
                "tom": {"jack": {"$set": {"x": 1}}},
            })

    The diff mirrors the shape of source at the changed locations
    only, with a DiffNode at each changed leaf:

        {"foo": {"bar": DiffNode(change_type="change", old_value=0, new_value=1)},
         ...}

    If commands is itself an operation, it applies to source as a
    whole and the diff is a single DiffNode (or a tree of them for
    "$merge" and "$defaults").

    Returns
    -------
    (result, diff) : tuple
        diff is None if nothing changed.
    """
    command = parse_commands(commands)
    if isinstance(command, Op):
        deltaupdate.log.debug("Applying %s to root value.", command.kind)
        wrapper = {_ROOT: source}
        return operations[command.kind](wrapper, _ROOT, command.argument)
    return _descend(source, command, ())


def update(source, commands):
    "Update source following commands and return the new value only. See with_diff."
    return with_diff(source, commands)[0]
