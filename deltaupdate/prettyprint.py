# -*- coding: utf-8 -*-

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

from collections import namedtuple
import hashlib
import pprint
import re
import sys

import colorama

from .diff_format import ChangeType, is_diff_node
from .diff_utils import count_changes
from .log import DiffFormatError


# Indentation offset in pretty-print
IND = "  "

# Max line width used some places in pretty-print
MAXWIDTH = 78

DIFF_ENTRY_END = '\n'

ColoredConstants = namedtuple('ColoredConstants', (
    'KEEP',
    'REMOVE',
    'ADD',
    'INFO',
    'RESET',
))


col_const = {
    True: ColoredConstants(
        KEEP   = '{color}   '.format(color=''),
        REMOVE = '{color}-  '.format(color=colorama.Fore.RED),
        ADD    = '{color}+  '.format(color=colorama.Fore.GREEN),
        INFO   = '{color}## '.format(color=colorama.Fore.BLUE + colorama.Style.BRIGHT),
        RESET  = colorama.Style.RESET_ALL,
    ),

    False: ColoredConstants(
        KEEP   = '   ',
        REMOVE = '-  ',
        ADD    = '+  ',
        INFO   = '## ',
        RESET  = '',
    )
}


class PrettyPrintConfig:
    def __init__(self, out=sys.stdout, use_color=True, snip_base64=False):
        self.out = out
        self.use_color = use_color
        self.snip_base64 = snip_base64

    @property
    def KEEP(self):
        return col_const[self.use_color].KEEP

    @property
    def REMOVE(self):
        return col_const[self.use_color].REMOVE

    @property
    def ADD(self):
        return col_const[self.use_color].ADD

    @property
    def INFO(self):
        return col_const[self.use_color].INFO

    @property
    def RESET(self):
        return col_const[self.use_color].RESET

DefaultConfig = PrettyPrintConfig()


def hash_string(s):
    return hashlib.md5(s.encode("utf8")).hexdigest()

_base64 = re.compile(
    r'^(?:[A-Za-z0-9+/]{4})*(?:[A-Za-z0-9+/]{2}==|[A-Za-z0-9+/]{3}=)?$',
    re.MULTILINE | re.UNICODE)

def _trim_base64(s):
    """Trim and hash base64 strings"""
    if len(s) > 64 and _base64.match(s.replace('\n', '')):
        h = hash_string(s)
        s = '%s...<snip base64, md5=%s...>' % (s[:8], h[:16])
    return s


def format_value(v, config=DefaultConfig):
    """Format simple value for printing.

    Strings are printed as is, or with long base64 data snipped if
    the config asks for it. Uses pprint for the rest.
    """
    if not isinstance(v, str):
        vstr = pprint.pformat(v)
    elif config.snip_base64:
        vstr = _trim_base64(v)
    else:
        vstr = v
    return vstr


def pretty_print_value(value, prefix="", config=DefaultConfig):
    """Print a possibly complex value with all lines prefixed.

    Calls out to generic formatters based on value
    type for dicts, lists, and multiline strings.
    Uses format_value for simple values.
    """
    if isinstance(value, dict):
        if value:
            pretty_print_dict(value, (), prefix, config)
        else:
            config.out.write("%s{}\n" % prefix)
    elif isinstance(value, (list, tuple)) and value:
        pretty_print_list(value, prefix, config)
    else:
        pretty_print_multiline(format_value(value, config), prefix, config)


def pretty_print_key(k, prefix, config):
    config.out.write("%s%s:\n" % (prefix, k))


def pretty_print_key_value(k, v, prefix, config):
    config.out.write("%s%s: %s\n" % (prefix, k, v))


def pretty_print_diff_action(msg, path, config):
    config.out.write("%s%s %s:%s\n" % (config.INFO, msg, path, config.RESET))


def pretty_print_item(k, v, prefix="", config=DefaultConfig):
    if isinstance(v, dict):
        pretty_print_key(k, prefix, config)
        pretty_print_dict(v, (), prefix+IND, config)
    elif isinstance(v, (list, tuple)):
        pretty_print_key(k, prefix, config)
        pretty_print_list(v, prefix+IND, config)
    else:
        vstr = format_value(v, config)
        if "\n" in vstr:
            # Multiline strings
            pretty_print_key(k, prefix, config)
            for line in vstr.splitlines(False):
                config.out.write("%s%s\n" % (prefix+IND, line))
        else:
            # Singleline strings
            pretty_print_key_value(k, vstr, prefix, config)


def pretty_print_multiline(text, prefix="", config=DefaultConfig):
    assert isinstance(text, str), 'expected string argument'

    # Preprend prefix to lines, letting lines keep their own newlines
    lines = text.splitlines(True)
    for line in lines:
        config.out.write(prefix + line)

    # If the final line doesn't have a newline,
    # make sure we still start a new line
    if not text.endswith("\n"):
        config.out.write("\n")


def pretty_print_list(li, prefix="", config=DefaultConfig):
    listr = pprint.pformat(li)
    if len(listr) < MAXWIDTH - len(prefix) and "\\n" not in listr:
        config.out.write("%s%s\n" % (prefix, listr))
    else:
        for k, v in enumerate(li):
            pretty_print_item("item[%d]" % k, v, prefix, config)


def pretty_print_dict(d, exclude_keys=(), prefix="", config=DefaultConfig):
    """Pretty-print a dict without wrapper keys

    Instead of {'key': 'value'}, do

        key: value
        key:
          long
          value

    """
    for k in sorted(set(d) - set(exclude_keys), key=str):
        v = d[k]
        pretty_print_item(k, v, prefix, config)


def pretty_print_diff_node(node, path, config=DefaultConfig):
    ct = node.change_type
    if ct == ChangeType.ADD:
        pretty_print_diff_action("added", path, config)
        pretty_print_value(node.new_value, config.ADD, config)

    elif ct == ChangeType.REMOVE:
        pretty_print_diff_action("removed", path, config)
        pretty_print_value(node.old_value, config.REMOVE, config)

    elif ct == ChangeType.CHANGE:
        aval = node.old_value
        bval = node.new_value
        if aval is not None and bval is not None and type(aval) is not type(bval):
            typechange = " (type changed from %s to %s)" % (
                aval.__class__.__name__, bval.__class__.__name__)
        else:
            typechange = ""
        pretty_print_diff_action("changed" + typechange, path, config)
        pretty_print_value(aval, config.REMOVE, config)
        pretty_print_value(bval, config.ADD, config)

    else:
        raise DiffFormatError("Unknown change type {}".format(ct))

    config.out.write(DIFF_ENTRY_END + config.RESET)


def pretty_print_diff(diff, path="", config=DefaultConfig):
    """Pretty-print a diff tree, one entry per changed location.

    Parameters
    ----------

    diff: diff
        A diff node or tree as produced by with_diff or merge_diff
    path: str
        Path prefix of the location the diff applies to
    config: PrettyPrintConfig
        Config object determining what gets printed and where
    """
    if diff is None:
        return
    if is_diff_node(diff):
        pretty_print_diff_node(diff, path or "/", config)
        return
    for key in sorted(diff, key=str):
        nextpath = "/".join((path, str(key)))
        pretty_print_diff(diff[key], nextpath, config)


def pretty_print_diff_summary(diff, config=DefaultConfig):
    "Print a single line counting the changes in diff."
    counts = count_changes(diff)
    config.out.write("%s%d added, %d changed, %d removed%s\n" % (
        config.INFO,
        counts[ChangeType.ADD],
        counts[ChangeType.CHANGE],
        counts[ChangeType.REMOVE],
        config.RESET,
    ))
