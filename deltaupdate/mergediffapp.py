# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import os
import sys

import deltaupdate.log
from .args import (
    ConfigBackedParser, add_generic_args, add_filename_args, add_output_args)
from .diff_utils import to_json_diff, from_json_diff
from .log import DiffFormatError, DiffMergeError
from .merging import merge_diff
from .prettyprint import pretty_print_diff, pretty_print_diff_summary, PrettyPrintConfig
from .updateapp import Printer
from .utils import EXPLICIT_MISSING_FILE, read_json, write_json, setup_std_streams


_description = ("Merge the json diffs of two sequential updates into "
                "the net diff between the value before the first and "
                "after the latest update.")


def main_merge_diff(args):
    for fn in (args.before, args.after, args.stored, args.merging):
        if not os.path.exists(fn) and fn != EXPLICIT_MISSING_FILE:
            print("Missing file {}".format(fn))
            return 1

    before = read_json(args.before, on_null='empty')
    after = read_json(args.after, on_null='empty')

    try:
        stored = from_json_diff(read_json(args.stored, on_null='none'))
        merging = from_json_diff(read_json(args.merging, on_null='none'))
        merged = merge_diff(stored, merging, before, after)
    except (DiffFormatError, DiffMergeError) as e:
        deltaupdate.log.error("Cannot merge %s into %s: %s", args.merging, args.stored, e)
        return 1

    if args.output:
        write_json(to_json_diff(merged), args.output, indent=args.indent)
    elif merged is None:
        print("No changes.")
    else:
        config = PrettyPrintConfig(
            out=Printer(), use_color=args.color, snip_base64=args.snip_base64)
        pretty_print_diff(merged, config=config)
        pretty_print_diff_summary(merged, config=config)

    return 0


def _build_arg_parser(prog=None):
    """Creates an argument parser for the dmergediff command."""
    parser = ConfigBackedParser(
        description=_description,
        prog=prog or 'dmergediff',
        add_help=True,
        )
    add_generic_args(parser)
    add_filename_args(parser, ["before", "after", "stored", "merging"])
    add_output_args(parser, "merged diff")
    return parser


def main(args=None):
    if args is None:
        args = sys.argv[1:]
    setup_std_streams()
    arguments = _build_arg_parser().parse_args(args)
    return main_merge_diff(arguments)


if __name__ == "__main__":
    sys.exit(main())
