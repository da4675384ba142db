#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
rpminfo CLI — print one metadata field of an RPM package file.

Behavior
--------
- Exactly two arguments: one OPTION, then the path to a .rpm file
- OPTION must match a known flag exactly (no abbreviations)
- Opens the file with librpm, signature/digest checks disabled
- Prints the selected field, file list or dependency list to stdout
- Usage and errors go to stderr; exit status 1 on any failure

Usage
-----
    rpminfo --name foo-1.0-1.x86_64.rpm
    python -m rpminfo --dependencies foo-1.0-1.x86_64.rpm
"""

import sys
from argparse import ArgumentParser
from typing import Any, List, Optional, Tuple

from .extractor import extract
from .librpm import PackageError, RpmLibrary
from .operations import OPERATIONS, Operation


_OPTION_WIDTH = 17


class UsageError(Exception):
    """Malformed invocation."""


# ------------------------------ CLI parsing ---------------------------------

class _Parser(ArgumentParser):
    """ArgumentParser that reports errors with our usage text and exit status."""

    def format_usage(self):
        lines = [
            "Usage: %s OPTION <file.rpm>" % self.prog,
            "",
            "Available (mutually-exclusive) options are:",
        ]
        for op in OPERATIONS:
            lines.append("  %-*s  %s" % (_OPTION_WIDTH, op.flag, op.description))
        return "\n".join(lines) + "\n"

    format_help = format_usage

    def error(self, message):
        raise UsageError(message)


def _build_parser(prog=None):  # type: (Optional[str]) -> _Parser
    parser = _Parser(prog=prog, add_help=False, allow_abbrev=False)
    group = parser.add_mutually_exclusive_group(required=True)
    for op in OPERATIONS:
        group.add_argument(op.flag, dest="operation", action="store_const", const=op, help=op.description)
    parser.add_argument("rpmfile", metavar="<file.rpm>")
    return parser


def _parse_args(parser, argv):  # type: (_Parser, List[str]) -> Tuple[Operation, str]
    if len(argv) != 2:
        raise UsageError("expected OPTION and <file.rpm>")
    # '--' keeps a path that starts with '-' positional.
    args = parser.parse_args([argv[0], "--", argv[1]])
    return args.operation, args.rpmfile


# ------------------------------ Main logic ----------------------------------

def main(argv=None, library=None):  # type: (Optional[List[str]], Any) -> int
    if argv is None:
        argv = sys.argv[1:]
    parser = _build_parser()

    try:
        operation, path = _parse_args(parser, argv)
    except UsageError:
        sys.stderr.write(parser.format_usage())
        return 1

    if library is None:
        try:
            library = RpmLibrary()
        except RuntimeError as exc:
            sys.stderr.write("error: %s\n" % exc)
            return 1

    try:
        extract(path, operation, sys.stdout, library)
    except PackageError as exc:
        sys.stderr.write("%s\n" % exc)
        return 1

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
