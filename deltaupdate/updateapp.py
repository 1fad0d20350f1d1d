# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import json
import os
import sys

import deltaupdate.log
from .args import (
    ConfigBackedParser, add_generic_args, add_filename_args, add_output_args)
from .diff_utils import to_json_diff
from .log import CommandFormatError
from .prettyprint import pretty_print_diff, pretty_print_diff_summary, PrettyPrintConfig
from .updating import with_diff
from .utils import EXPLICIT_MISSING_FILE, read_json, write_json, setup_std_streams


_description = ("Apply json update commands to a json value, "
                "and show the result and what changed.")


# This printer is to keep the unit tests passing,
# some tests capture output with capsys which doesn't
# pick up on sys.stdout.write()
class Printer:
    def write(self, text):
        print(text, end="")


def main_update(args):
    for fn in (args.source, args.commands):
        if not os.path.exists(fn) and fn != EXPLICIT_MISSING_FILE:
            print("Missing file {}".format(fn))
            return 1

    source = read_json(args.source, on_null='empty')
    commands = read_json(args.commands)

    try:
        result, diff = with_diff(source, commands)
    except CommandFormatError as e:
        deltaupdate.log.error("Invalid commands in %s: %s", args.commands, e)
        return 1

    if args.diff_output:
        write_json(to_json_diff(diff), args.diff_output, indent=args.indent)

    if args.output:
        write_json(result, args.output, indent=args.indent)
    else:
        print(json.dumps(result, indent=args.indent, sort_keys=True))

    if args.show_diff:
        config = PrettyPrintConfig(
            out=Printer(), use_color=args.color, snip_base64=args.snip_base64)
        if diff is None:
            print("No changes.")
        else:
            pretty_print_diff(diff, config=config)
            pretty_print_diff_summary(diff, config=config)

    return 0


def _build_arg_parser(prog=None):
    """Creates an argument parser for the dupdate command."""
    parser = ConfigBackedParser(
        description=_description,
        prog=prog or 'dupdate',
        add_help=True,
        )
    add_generic_args(parser)
    add_filename_args(parser, ["source", "commands"])
    add_output_args(parser, "updated value")
    parser.add_argument(
        '--diff-output',
        default=None,
        help="if supplied, the diff is written to this file as json.")
    parser.add_argument(
        '--no-diff',
        dest='show_diff',
        action="store_false",
        default=True,
        help="do not print the diff to the terminal.")
    return parser


def main(args=None):
    if args is None:
        args = sys.argv[1:]
    setup_std_streams()
    arguments = _build_arg_parser().parse_args(args)
    return main_update(arguments)


if __name__ == "__main__":
    sys.exit(main())
