"""
@meta
name: paths_filesystem
type: utility
domain: paths
responsibility:
  - Define the host filesystem interface used by path resolution
  - Implement it for the local operating system
inputs:
  - Path strings
outputs:
  - Existence flags, timestamps, file kinds
  - Combined and canonical path strings
tags:
  - utility
  - paths
  - filesystem
  - adapter_pattern
lifecycle:
  status: active
"""

"""Host filesystem interface and local implementation.

Path resolution only manipulates strings; everything that touches the disk or
depends on the host's path syntax goes through a :class:`FileSystem`, so the
resolver can run against the local OS or against a fixed path flavour
(``posixpath`` / ``ntpath``) in tests.
"""

import os
import stat
from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path


@dataclass(frozen=True)
class FileAttributes:
    """Kind of an existing filesystem entry."""

    is_directory: bool
    is_regular_file: bool


class FileSystem(ABC):
    """Abstract interface for host filesystem operations."""

    @property
    @abstractmethod
    def separator(self) -> str:
        """Directory separator character."""
        pass

    @abstractmethod
    def combine(self, base: str, relative: str) -> str:
        """Join two paths; a rooted `relative` replaces `base`."""
        pass

    @abstractmethod
    def canonicalize(self, path: str) -> str:
        """Make a path absolute and resolve `.` and `..` segments."""
        pass

    @abstractmethod
    def extension(self, path: str) -> str:
        """Extension of the last path segment (empty if none)."""
        pass

    @abstractmethod
    def parent(self, path: str) -> str:
        """Containing directory of a path."""
        pass

    @abstractmethod
    def exists(self, path: str) -> bool:
        """Check if a filesystem entry exists."""
        pass

    @abstractmethod
    def attributes_of(self, path: str) -> FileAttributes:
        """Get the kind of an entry. Raises if the entry is missing."""
        pass

    @abstractmethod
    def last_write_time(self, path: str) -> datetime:
        """Get the local last-write time of an entry. Raises if missing."""
        pass

    @abstractmethod
    def create_directory(self, path: str) -> bool:
        """Create a single directory level; return False if it already existed."""
        pass


class LocalFileSystem(FileSystem):
    """Filesystem of the running operating system."""

    def __init__(self, path_module=os.path):
        """
        Initialize the local filesystem.

        Args:
            path_module: Module providing path syntax (``os.path`` by default;
                ``posixpath`` or ``ntpath`` to pin a flavour).
        """
        self._path = path_module

    @property
    def separator(self) -> str:
        return self._path.sep

    def combine(self, base: str, relative: str) -> str:
        return self._path.join(base, relative)

    def canonicalize(self, path: str) -> str:
        return self._path.abspath(path)

    def extension(self, path: str) -> str:
        return self._path.splitext(path)[1]

    def parent(self, path: str) -> str:
        return self._path.dirname(path)

    def exists(self, path: str) -> bool:
        return os.path.exists(path)

    def attributes_of(self, path: str) -> FileAttributes:
        mode = os.stat(path).st_mode
        return FileAttributes(
            is_directory=stat.S_ISDIR(mode),
            is_regular_file=stat.S_ISREG(mode),
        )

    def last_write_time(self, path: str) -> datetime:
        return datetime.fromtimestamp(os.stat(path).st_mtime)

    def create_directory(self, path: str) -> bool:
        directory = Path(path)
        if directory.is_dir():
            return False
        try:
            directory.mkdir()
        except FileExistsError:
            # Created concurrently by another caller; a file in the way still fails
            if not directory.is_dir():
                raise
            return False
        return True
