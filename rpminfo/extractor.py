#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
extractor.py — Open one package file and run one Operation against it.

Flow: open file -> new session (verification off) -> decode header ->
operation -> release header, session, file (always, in that order).
"""

from contextlib import contextmanager
from typing import Any, Iterator, TextIO

from .operations import Operation


@contextmanager
def open_package(path, library):  # type: (str, Any) -> Iterator[Any]
    """
    Yield the decoded header of the package at `path`.

    Raises:
        OpenError: the file could not be opened. Nothing else was acquired.
        ParseError: the header could not be decoded. The session and the
            file are released before the error propagates.
    """
    fd = library.open(path)
    try:
        ts = library.new_session()
        try:
            hdr = library.read_header(ts, fd, path)
            try:
                yield hdr
            finally:
                library.release_header(hdr)
        finally:
            library.release_session(ts)
    finally:
        library.close(fd)


def extract(path: str, operation: Operation, out: TextIO, library: Any) -> None:
    """Write the output of `operation` for the package at `path` to `out`."""
    with open_package(path, library) as hdr:
        operation.fn(library, hdr, out)
