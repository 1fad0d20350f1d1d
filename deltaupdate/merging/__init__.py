# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

from .diffs import merge_diff_node, merge_diff, purge, DiffAccumulator

__all__ = ["merge_diff_node", "merge_diff", "purge", "DiffAccumulator"]
