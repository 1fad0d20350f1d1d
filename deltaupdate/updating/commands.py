# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

from collections import namedtuple
from collections.abc import Mapping

import deltaupdate.log
from ..log import CommandFormatError
from ..utils import join_path


class OperationKind:
    "Collection of the keys recognized as leaf operations in raw commands."
    SET = "$set"
    PUSH = "$push"
    UNSHIFT = "$unshift"
    MERGE = "$merge"
    DEFAULTS = "$defaults"
    INVOKE = "$invoke"

    ALL = (SET, PUSH, UNSHIFT, MERGE, DEFAULTS, INVOKE)


# A leaf operation applied to the value at the current location
Op = namedtuple("Op", ["kind", "argument"])

# A command tree node mapping child keys to nested commands
Descend = namedtuple("Descend", ["children"])


def op_set(value):
    "Create a command replacing the current value with value."
    return Op(OperationKind.SET, value)

def op_push(value):
    "Create a command appending value to the current sequence."
    return Op(OperationKind.PUSH, value)

def op_unshift(value):
    "Create a command prepending value to the current sequence."
    return Op(OperationKind.UNSHIFT, value)

def op_merge(extensions):
    "Create a command shallow merging extensions into the current mapping."
    return Op(OperationKind.MERGE, extensions)

def op_defaults(defaults):
    "Create a command filling absent keys of the current mapping from defaults."
    return Op(OperationKind.DEFAULTS, defaults)

def op_invoke(factory):
    "Create a command setting the result of factory(current value)."
    return Op(OperationKind.INVOKE, factory)


def parse_commands(commands, path=()):
    """Turn a raw command mapping into a tree of Op and Descend commands.

    A mapping with exactly one operation key ("$set", "$merge", ...)
    is a leaf operation. A mapping without any operation key descends
    into every key it holds. Already parsed commands are returned
    unchanged, raw mappings nested in a Descend are parsed.

    Raises a CommandFormatError if a mapping holds several operation
    keys, or if a nested command is not a mapping.
    """
    if isinstance(commands, Op):
        return commands
    if isinstance(commands, Descend):
        children = {
            key: parse_commands(child, path + (key,))
            for key, child in commands.children.items()
        }
        if all(children[key] is child for key, child in commands.children.items()):
            return commands
        return Descend(children)
    if not isinstance(commands, Mapping):
        raise CommandFormatError(
            "Command at {} must be a mapping, not {}.".format(
                join_path(path), type(commands).__name__))

    matched = [kind for kind in OperationKind.ALL if kind in commands]
    if len(matched) > 1:
        raise CommandFormatError(
            "Ambiguous command at {}, found operations {}.".format(
                join_path(path), ", ".join(matched)))
    if matched:
        kind, = matched
        if len(commands) > 1:
            ignored = sorted(str(k) for k in commands if k != kind)
            deltaupdate.log.warning(
                "Ignoring keys %s next to %s at %s.", ignored, kind, join_path(path))
        return Op(kind, commands[kind])

    return Descend({
        key: parse_commands(child, path + (key,))
        for key, child in commands.items()
    })

