# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

from .commands import OperationKind, Op, Descend, parse_commands
from .generic import with_diff, update
from .shortcuts import build_path_command, set, push, unshift, merge, defaults, invoke

__all__ = [
    "OperationKind", "Op", "Descend", "parse_commands",
    "with_diff", "update",
    "build_path_command", "set", "push", "unshift", "merge", "defaults", "invoke",
]
