#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Collector
=========

Walks a source directory or a ZIP archive and writes every source file
whose extension is in ALLOWED_EXTENSIONS into one combined text stream:

- DirectorySource: recursive, sorted, depth-first walk of a tree
- ArchiveSource: ZIP members in central-directory order
- Lossy UTF-8 decoding (invalid bytes become U+FFFD)

Each included file is written as a framed record:

    File: <identifier>

    <content>

    ----------------------------------------

"""

from __future__ import annotations

import os
import zipfile
import zlib
from pathlib import Path
from typing import Callable, Iterator, Optional, TextIO, Tuple


ALLOWED_EXTENSIONS = frozenset({
    "rs", "py", "java", "c", "cpp", "h", "js", "ts", "go", "rb", "swift",
    "kt", "php", "cs", "def", "dlg", "rc", "cur", "ico",
})

ARCHIVE_EXTENSION = "zip"

SEPARATOR = "-" * 40

REPLACEMENT_CHAR = "\ufffd"


# ============================================================
# Errors
# ============================================================

class CollectorError(Exception):
    """Base class for input and archive failures."""


class InvalidInputError(CollectorError):
    """Input path is missing, of the wrong kind, or not a ZIP file."""


class ArchiveFormatError(CollectorError):
    """The archive (or one of its members) cannot be parsed."""


# ============================================================
# Entries
# ============================================================

class Entry:
    def __init__(self, identifier: str, reader: Callable[[], bytes]):
        self.identifier = identifier
        self._reader = reader

    def read(self) -> bytes:
        return self._reader()

    def __repr__(self):
        return f"Entry({self.identifier!r})"


def extension_of(identifier: str) -> str:
    """
    Lower-cased text after the last '.' of the final path segment.

    Returns "" when there is no extension. A dot that starts the
    name (".rc") does not start an extension, but "..rc" has "rc".
    """
    name = identifier.replace("\\", "/").rstrip("/").rsplit("/", 1)[-1]
    stem, dot, ext = name.rpartition(".")
    if not dot or not stem:
        return ""
    return ext.lower()


def is_allowed(identifier: str) -> bool:
    return extension_of(identifier) in ALLOWED_EXTENSIONS


def decode_lossy(data: bytes) -> str:
    """Decode UTF-8, replacing invalid sequences with U+FFFD."""
    return data.decode("utf-8", errors="replace")


def size_of(text: str) -> int:
    return len(text.encode("utf-8"))


# ============================================================
# Adapters
# ============================================================

def _raise(err: OSError):
    raise err


class DirectorySource:
    def __init__(self, root):
        self.root = str(root)

    def __iter__(self) -> Iterator[Entry]:
        walker = os.walk(self.root, topdown=True, onerror=_raise,
                         followlinks=False)
        for dirpath, dirnames, filenames in walker:
            dirnames.sort()
            for name in sorted(filenames):
                path = os.path.join(dirpath, name)
                # fifos, sockets and dangling links are not files
                if not os.path.isfile(path):
                    continue
                # undecodable names are shown with U+FFFD
                identifier = decode_lossy(os.fsencode(path))
                yield Entry(identifier, Path(path).read_bytes)


class ArchiveSource:
    def __init__(self, path):
        self.path = Path(path)

    def __iter__(self) -> Iterator[Entry]:
        try:
            archive = zipfile.ZipFile(self.path)
        except zipfile.BadZipFile as e:
            raise ArchiveFormatError(
                f"Cannot read ZIP archive '{self.path}': {e}"
            ) from e

        with archive:
            for info in archive.infolist():
                if info.is_dir():
                    continue
                yield Entry(info.filename, self._member_reader(archive, info))

    def _member_reader(self, archive: zipfile.ZipFile,
                       info: zipfile.ZipInfo) -> Callable[[], bytes]:
        def read() -> bytes:
            try:
                return archive.read(info)
            except (zipfile.BadZipFile, zlib.error, EOFError,
                    RuntimeError, NotImplementedError) as e:
                raise ArchiveFormatError(
                    f"Cannot extract '{info.filename}' "
                    f"from '{self.path}': {e}"
                ) from e
        return read


def open_source(path):
    """
    Pick the adapter for an input path.

    Raises InvalidInputError when the path is missing, is a file
    without a .zip extension, or is neither a file nor a directory.
    """
    path = Path(path)
    if not path.exists():
        raise InvalidInputError(f"Input path '{path}' does not exist.")
    if path.is_dir():
        return DirectorySource(path)
    if path.is_file():
        if extension_of(path.name) == ARCHIVE_EXTENSION:
            return ArchiveSource(path)
        raise InvalidInputError(
            f"Input file '{path}' is not a ZIP file or a directory."
        )
    raise InvalidInputError(
        f"Input path '{path}' is neither a directory nor a file."
    )


# ============================================================
# Output
# ============================================================

def write_record(sink: TextIO, identifier: str, content: str):
    sink.write(f"File: {identifier}\n\n")
    sink.write(f"{content}\n\n")
    sink.write(f"{SEPARATOR}\n\n")


def process(source, sink: TextIO,
            progress: Optional[Callable[[str, int, int], None]] = None
            ) -> Tuple[int, int]:
    """
    Write every allowed entry of `source` to `sink`.

    Returns (entry_count, total_size). `progress`, when given, is
    called after each written record with
    (identifier, entry_count, total_size).
    """
    entry_count = 0
    total_size = 0

    for entry in source:
        if not is_allowed(entry.identifier):
            continue

        content = decode_lossy(entry.read())
        write_record(sink, entry.identifier, content)

        entry_count += 1
        total_size += size_of(content)

        if progress is not None:
            progress(entry.identifier, entry_count, total_size)

    return entry_count, total_size
