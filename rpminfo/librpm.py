#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
librpm.py — Read metadata from a single .rpm file with librpm (python3-rpm).

- No subprocess calls; uses rpm.TransactionSet() directly.
- Signature, digest and header checks are disabled: we only inspect
  metadata, we never install or trust the package.
- Everything rpminfo needs from the bindings goes through RpmLibrary, so the
  extractor can be driven by a fake in tests.

Public API
----------
RpmLibrary()
    open(path) -> fd                      raises OpenError
    new_session() -> ts
    read_header(ts, fd, path) -> hdr      raises ParseError
    release_header(hdr), release_session(ts), close(fd)
    field(hdr, tag) -> str | None
    requires(hdr) -> iterator of Dependency
    filenames(hdr) -> iterator of str

Each Dependency:
    Dependency(name="glibc", version="2.34", less=False, greater=True,
               equal=True, rpmlib=False)
"""

from collections import namedtuple
from typing import Any, Iterator, Optional


Dependency = namedtuple("Dependency", [
    "name", "version",
    "less", "greater", "equal",
    "rpmlib",
])


# ------------------------------ Errors ---------------------------------------

class PackageError(Exception):
    """A package file could not be turned into a header."""

    def __init__(self, path, reason=None):  # type: (str, Optional[str]) -> None
        super().__init__(path, reason)
        self.path = path
        self.reason = reason


class OpenError(PackageError):
    """The file is missing, unreadable, or not a usable container."""

    def __str__(self):
        return "Failed to open %s: %s" % (self.path, self.reason or "unknown error")


class ParseError(PackageError):
    """The package header could not be decoded."""

    def __str__(self):
        return "Failed to read package file %s" % self.path


# ------------------------------ Small helpers -------------------------------

def _import_rpm():
    try:
        import rpm  # Provided by: sudo dnf install -y python3-rpm
    except ImportError as exc:
        raise RuntimeError(
            "python3-rpm (librpm bindings) is unavailable. Install the matching bindings for your Python."
        ) from exc
    return rpm


def _text(val: Any) -> str:
    """Header values may come back as bytes on older bindings."""
    if val is None:
        return ""
    if isinstance(val, bytes):
        return val.decode("utf-8", "replace")
    return str(val)


def _query_format(tag: str) -> str:
    # Conditional format: expands to "" instead of "(none)" when the tag is absent.
    return "%%|%s?{%%{%s}}|" % (tag, tag)


# ------------------------------ Collaborator --------------------------------

class RpmLibrary:
    """Thin, read-only view of the rpm bindings."""

    def __init__(self, rpm_module=None):
        self._rpm = rpm_module if rpm_module is not None else _import_rpm()

    # -- lifecycle

    def open(self, path: str) -> Any:
        rpm = self._rpm
        try:
            fd = rpm.fd(path, "r")
        except (OSError, rpm.error) as exc:
            raise OpenError(path, _strerror(exc)) from exc
        return fd

    def new_session(self) -> Any:
        rpm = self._rpm
        ts = rpm.TransactionSet()
        ts.setVSFlags(rpm._RPMVSF_NOSIGNATURES | rpm._RPMVSF_NODIGESTS | rpm.RPMVSF_NOHDRCHK)
        return ts

    def read_header(self, ts: Any, fd: Any, path: str) -> Any:
        try:
            return ts.hdrFromFdno(fd)
        except self._rpm.error as exc:
            raise ParseError(path, _strerror(exc)) from exc

    def release_header(self, hdr: Any) -> None:
        # Headers are reference counted by the bindings; there is no explicit free.
        pass

    def release_session(self, ts: Any) -> None:
        ts.closeDB()

    def close(self, fd: Any) -> None:
        fd.close()

    # -- queries

    def field(self, hdr: Any, tag: str) -> Optional[str]:
        value = _text(hdr.format(_query_format(tag)))
        return value or None

    def requires(self, hdr: Any) -> Iterator[Dependency]:
        rpm = self._rpm
        for dep in rpm.ds(hdr, "requires"):
            flags = int(dep.Flags())
            yield Dependency(
                name=_text(dep.N()),
                version=_text(dep.EVR()),
                less=bool(flags & rpm.RPMSENSE_LESS),
                greater=bool(flags & rpm.RPMSENSE_GREATER),
                equal=bool(flags & rpm.RPMSENSE_EQUAL),
                rpmlib=bool(flags & rpm.RPMSENSE_RPMLIB),
            )

    def filenames(self, hdr: Any) -> Iterator[str]:
        rpm = self._rpm
        for entry in rpm.files(hdr, rpm.RPMTAG_BASENAMES):
            yield _text(entry.name)


def _strerror(exc: BaseException) -> str:
    if isinstance(exc, OSError) and exc.strerror:
        return exc.strerror
    return str(exc) or exc.__class__.__name__
