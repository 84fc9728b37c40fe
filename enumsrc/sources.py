"""Sources of enum definition content: files on a filesystem or readable streams.

Parsers consume a ``Source`` without caring where its bytes come from. Each
source supplies the raw content and a name for error messages and for notes
in generated code.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import Any, Protocol, runtime_checkable

MAX_FILE_SIZE = 10 * 1024 * 1024
"""Largest file, in bytes, that a ``FileSource`` will read."""


class ReadSourceError(Exception):
    """Raised when content cannot be read from a stream source."""

    def __init__(self, detail: str = "") -> None:
        message = "failed to read from source"
        super().__init__(f"{message}: {detail}" if detail else message)


class ReadFileSourceError(Exception):
    """Raised when content cannot be read from a file source."""

    def __init__(self, detail: str = "") -> None:
        message = "failed to read file source"
        super().__init__(f"{message}: {detail}" if detail else message)


@runtime_checkable
class Source(Protocol):
    """Anything that yields enum definition content and names its origin."""

    def content(self) -> bytes:
        """Return the raw content."""
        ...

    def filename(self) -> str:
        """Return a name identifying the source."""
        ...


class _FileSystem(Protocol):
    def stat(self, path: str) -> Any: ...

    def read_file(self, path: str) -> bytes: ...


class OSFileSystem:
    """Filesystem access backed by the operating system."""

    def stat(self, path: str) -> os.stat_result:
        """Return the status of ``path``."""
        return os.stat(path)

    def read_file(self, path: str) -> bytes:
        """Return the whole content of ``path``."""
        with open(path, "rb") as handle:
            return handle.read()


@dataclass
class FileSource:
    """Source reading from a file on a filesystem."""

    path: str
    fs: _FileSystem = field(default_factory=OSFileSystem)

    def content(self) -> bytes:
        """Read the file, refusing files larger than ``MAX_FILE_SIZE``."""
        try:
            info = self.fs.stat(self.path)
        except Exception as err:
            raise ReadFileSourceError(f"{self.path} (stat): {err}") from err
        if info.st_size > MAX_FILE_SIZE:
            raise ReadFileSourceError(
                f"{self.path} exceeds maximum allowed size of {MAX_FILE_SIZE} bytes"
            )
        try:
            data = self.fs.read_file(self.path)
        except Exception as err:
            raise ReadFileSourceError(f"{self.path}: {err}") from err
        return bytes(data)

    def filename(self) -> str:
        """Return the path of the file."""
        return self.path


@dataclass
class ReaderSource:
    """Source reading everything from a file-like object.

    Reading consumes the stream, so content can be taken only once.
    """

    reader: Any

    def content(self) -> bytes:
        """Read the stream to its end and return the bytes."""
        try:
            data = self.reader.read()
        except Exception as err:
            raise ReadSourceError(str(err)) from err
        if isinstance(data, str):
            return data.encode("utf-8")
        return bytes(data)

    def filename(self) -> str:
        """Return the fixed identifier ``"reader"``."""
        return "reader"


def from_file(path: str) -> FileSource:
    """Create a source for a file on the local filesystem."""
    return from_file_system(OSFileSystem(), path)


def from_file_system(fs: _FileSystem, path: str) -> FileSource:
    """Create a source for a file on the given filesystem."""
    return FileSource(path=path, fs=fs)


def from_reader(reader: Any) -> ReaderSource:
    """Create a source reading from a file-like object."""
    return ReaderSource(reader=reader)