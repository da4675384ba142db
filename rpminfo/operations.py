"""
operations.py — The fixed, ordered table of metadata extractions.

Each Operation maps one command-line flag to a printer. A printer receives
the collaborator, a decoded header and an output stream; it writes zero or
more complete lines and never raises for a missing field.

Flags are matched literally and case-sensitively. Table order is the order
shown in the usage text.
"""

from collections import namedtuple
from types import MappingProxyType
from typing import Any, Callable, Mapping, Optional, TextIO

from .librpm import Dependency


# ------------------------------ Operation model -----------------------------

Operation = namedtuple("Operation", ["flag", "description", "fn"])

Printer = Callable[[Any, Any, TextIO], None]


# ------------------------------ Printers ------------------------------------

def _field_printer(tag):  # type: (str) -> Printer
    def print_field(library, hdr, out):
        value = library.field(hdr, tag)
        if value:
            out.write(value + "\n")

    print_field.__name__ = "print_%s" % tag
    return print_field


def format_dependency(dep):  # type: (Dependency) -> Optional[str]
    """
    Render one requirement as a single line (without the newline).

    Returns None for rpmlib(...) feature requirements: they are markers used
    by the package format itself, not real dependencies.

    The comparison operators are '<' and/or '>' followed by an unconditional
    '=', so "glibc < 2.0" is printed as "glibc <= 2.0".
    """
    if dep.rpmlib:
        return None
    if not dep.version:
        return dep.name
    ops = ""
    if dep.less:
        ops += "<"
    if dep.greater:
        ops += ">"
    ops += "="
    return "%s %s %s" % (dep.name, ops, dep.version)


def print_dependencies(library, hdr, out):
    for dep in library.requires(hdr):
        line = format_dependency(dep)
        if line is not None:
            out.write(line + "\n")


def print_filenames(library, hdr, out):
    for path in library.filenames(hdr):
        out.write(path + "\n")


# ------------------------------ Command table -------------------------------

OPERATIONS = (
    Operation("--arch", "architecture", _field_printer("arch")),
    Operation("--compressor", "payload compressor", _field_printer("payloadcompressor")),
    Operation("--dependencies", "package dependencies", print_dependencies),
    Operation("--description", "package description", _field_printer("description")),
    Operation("--distribution", "distribution name", _field_printer("distribution")),
    Operation("--filenames", "list of files", print_filenames),
    Operation("--license", "package license", _field_printer("license")),
    Operation("--name", "package name", _field_printer("name")),
    Operation("--release", "release number", _field_printer("release")),
    Operation("--summary", "summary information", _field_printer("summary")),
    Operation("--url", "project url", _field_printer("url")),
    Operation("--version", "package version", _field_printer("version")),
)

_BY_FLAG = MappingProxyType({op.flag: op for op in OPERATIONS})  # type: Mapping[str, Operation]


def find_operation(flag):  # type: (str) -> Optional[Operation]
    """Exact, case-sensitive lookup; no prefixes or abbreviations."""
    return _BY_FLAG.get(flag)


# Public API
__all__ = [
    "Operation",
    "OPERATIONS",
    "find_operation",
    "format_dependency",
    "print_dependencies",
    "print_filenames",
]
