# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

from deltaupdate.diff_format import validate_diff


def make_source():
    return {
        "x": {
            "y": {
                "z": [1, 2, 3]
            }
        },
        "foo": [1, 2, 3],
        "alice": 1,
        "bob": 2,
        "tom": {
            "jack": 1
        },
    }


def assert_valid_diff(diff):
    if diff is not None:
        validate_diff(diff)
