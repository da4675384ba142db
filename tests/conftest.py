from collections import namedtuple

import pytest

from rpminfo.librpm import Dependency, OpenError, ParseError


FakeHeader = namedtuple("FakeHeader", ["fields", "requires", "files"])


def make_header(fields=None, requires=(), files=()):
    return FakeHeader(dict(fields or {}), list(requires), list(files))


def dep(name, version="", less=False, greater=False, equal=False, rpmlib=False):
    return Dependency(name, version, less, greater, equal, rpmlib)


class FakeLibrary:
    """In-memory stand-in for RpmLibrary that records every call."""

    def __init__(self, packages=None, corrupt=()):
        self.packages = dict(packages or {})
        self.corrupt = set(corrupt)
        self.events = []

    def open(self, path):
        if path not in self.packages and path not in self.corrupt:
            raise OpenError(path, "No such file or directory")
        self.events.append("open")
        return ("fd", path)

    def new_session(self):
        self.events.append("session")
        return "ts"

    def read_header(self, ts, fd, path):
        if path in self.corrupt:
            raise ParseError(path, "bad magic")
        self.events.append("header")
        return self.packages[path]

    def release_header(self, hdr):
        self.events.append("release_header")

    def release_session(self, ts):
        self.events.append("release_session")

    def close(self, fd):
        self.events.append("close")

    def field(self, hdr, tag):
        return hdr.fields.get(tag)

    def requires(self, hdr):
        for entry in hdr.requires:
            yield entry

    def filenames(self, hdr):
        for path in hdr.files:
            yield path


@pytest.fixture
def examplepkg():
    return make_header(
        fields={
            "name": "examplepkg",
            "version": "1.2.3",
            "release": "4.fc40",
            "arch": "x86_64",
            "payloadcompressor": "zstd",
            "license": "MIT",
            "summary": "An example package",
            "description": "Line one.\nLine two.",
            "url": "https://example.org/examplepkg",
        },
        requires=[
            dep("/bin/sh"),
            dep("libc.so.6()(64bit)"),
            dep("glibc", "2.34", greater=True, equal=True),
            dep("rpmlib(CompressedFileNames)", "3.0.4-1", less=True, equal=True, rpmlib=True),
            dep("zlib", "1.2", less=True),
        ],
        files=[
            "/usr/bin/example",
            "/usr/share/doc/examplepkg/README",
            "/usr/share/licenses/examplepkg/LICENSE",
        ],
    )


@pytest.fixture
def library(examplepkg):
    return FakeLibrary(
        packages={
            "examplepkg.rpm": examplepkg,
            "empty.rpm": make_header(),
        },
        corrupt={"broken.rpm"},
    )
