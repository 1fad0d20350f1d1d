# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

"""Shortcuts applying a single operation at a path.

A path is None (the source value itself), a single key, or a list
or tuple of keys for nested properties. A single string is always
one key, "a/b" is not split.
"""

from .commands import (
    Descend, op_set, op_push, op_unshift, op_merge, op_defaults, op_invoke)
from .generic import update
from ..utils import as_path


__all__ = ["build_path_command", "set", "push", "unshift", "merge", "defaults", "invoke"]


def build_path_command(path, command):
    "Wrap command in descend commands so that it applies at path."
    for key in reversed(as_path(path)):
        command = Descend({key: command})
    return command


def set(source, path, value):
    "Return a copy of source with the value at path replaced by value."
    return update(source, build_path_command(path, op_set(value)))


def push(source, path, value):
    "Return a copy of source with value appended to the sequence at path."
    return update(source, build_path_command(path, op_push(value)))


def unshift(source, path, value):
    "Return a copy of source with value prepended to the sequence at path."
    return update(source, build_path_command(path, op_unshift(value)))


def merge(source, path, extensions):
    "Return a copy of source with extensions shallow merged into the mapping at path."
    return update(source, build_path_command(path, op_merge(extensions)))


def defaults(source, path, defaults):
    "Return a copy of source with absent keys of the mapping at path filled from defaults."
    return update(source, build_path_command(path, op_defaults(defaults)))


def invoke(source, path, factory):
    """Return a copy of source with the value at path replaced by factory(value).

    factory is called with Missing when there is no value at path.
    """
    return update(source, build_path_command(path, op_invoke(factory)))
