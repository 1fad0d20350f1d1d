# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

from ._version import __version__

from .diff_format import ChangeType, DiffNode, Missing, create_diff_node, is_diff_node
from .updating import (
    parse_commands, with_diff, update,
    set, push, unshift, merge, defaults, invoke)
from .merging import merge_diff_node, merge_diff, DiffAccumulator


__all__ = [
    "__version__",
    "ChangeType", "DiffNode", "Missing", "create_diff_node", "is_diff_node",
    "parse_commands", "with_diff", "update",
    "set", "push", "unshift", "merge", "defaults", "invoke",
    "merge_diff_node", "merge_diff", "DiffAccumulator",
    ]
