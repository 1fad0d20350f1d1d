# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import codecs
import io
import json
import locale
import os
import sys
from collections.abc import Mapping, MutableSequence, MutableSet

if os.name == 'nt':
    EXPLICIT_MISSING_FILE = 'nul'
else:
    EXPLICIT_MISSING_FILE = '/dev/null'


# Values of these types are only ever the same as themselves,
# never merely equal to another instance
_reference_types = (Mapping, MutableSequence, MutableSet)


def _is_number(value):
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def is_same_value(a, b):
    """Check whether a and b are the same value.

    Containers are compared by identity, so a new but equal
    mapping or list counts as a different value. Numbers are
    compared by numeric equality, so 1 and 1.0 are the same, but
    booleans are not numbers here and 1 and True differ. Other
    scalars are compared by type and equality.
    """
    if a is b:
        return True
    if isinstance(a, _reference_types) or isinstance(b, _reference_types):
        return False
    if _is_number(a) and _is_number(b):
        return a == b
    return type(a) is type(b) and a == b


def shallow_clone(obj):
    "Copy the top level of a mapping into a new dict."
    return dict(obj.items())


def as_path(path):
    """Normalize a path argument to a tuple of keys.

    None gives the empty path, a single string or other
    non-sequence key gives a path of length one.
    """
    if path is None:
        return ()
    if isinstance(path, (list, tuple)):
        return tuple(path)
    return (path,)


def join_path(*args):
    "Join a path on the form ['foo','bar'] into '/foo/bar'."
    if len(args) == 1 and isinstance(args[0], (list, tuple, set)):
        args = args[0]
    args = [str(a) for a in args if a not in ["", "/"]]
    ret = "/".join(args)
    return ret if ret.startswith("/") else "/" + ret


def read_json(f, on_null='empty'):
    """Read and return json from filename

    Parameters:
        f:  The filename to read from or null filename
            ("/dev/null" on *nix, "nul" on Windows).
            Alternatively a file-like object can be passed.
        on_null: What to return when filename null
            "empty": return empty dict
            "none": return None
    """
    if f == EXPLICIT_MISSING_FILE:
        if on_null == 'empty':
            return {}
        elif on_null == 'none':
            return None
        else:
            raise ValueError(
                'Not valid value for `on_null`: %r. Valid values '
                'are "empty" or "none"' % (on_null,))
    if hasattr(f, 'read'):
        return json.load(f)
    with io.open(f, encoding='utf-8') as fo:
        return json.load(fo)


def write_json(obj, f, indent=2):
    "Write obj as json to filename or file-like object f."
    if hasattr(f, 'write'):
        json.dump(obj, f, indent=indent, sort_keys=True)
        f.write('\n')
        return
    with io.open(f, 'w', encoding='utf-8') as fo:
        json.dump(obj, fo, indent=indent, sort_keys=True)
        fo.write('\n')


def _setup_std_stream_encoding():
    """Ensures sys.stdout/err escape unencodable characters
    rather than raising errors.
    """
    if os.getenv('PYTHONIOENCODING'):
        return
    default_encoding = locale.getpreferredencoding() or 'UTF-8'
    for name in ('stdout', 'stderr'):
        stream = getattr(sys, name)
        if stream is not getattr(sys, '__%s__' % name):
            # captured or redirected output
            continue
        enc = getattr(stream, 'encoding', None) or default_encoding
        errors = getattr(stream, 'errors', None) or 'strict'
        if errors == 'strict' or errors.startswith('surrogate'):
            new_stream = codecs.getwriter(enc)(stream.buffer, errors='backslashreplace')
            setattr(sys, name, new_stream)


def setup_std_streams():
    """Setup sys.stdout/err for the command line apps.

    Colorama is enabled after the encoding setup, since
    rewrapping the streams would undo it.
    """
    _setup_std_stream_encoding()
    if sys.platform.startswith('win'):
        import colorama
        colorama.init()
