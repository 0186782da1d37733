"""
@meta
name: paths_resolve
type: utility
domain: paths
responsibility:
  - Resolve token-parametrized path expressions to absolute paths
  - Resolve file paths with [Auto] / [FileName] expansion
  - Prepare directories and check file existence and modification times
inputs:
  - Path expressions
  - Process base directory
outputs:
  - Resolved path strings
tags:
  - utility
  - paths
  - filesystem
lifecycle:
  status: active
"""

"""Resolve path expressions (single authority for token expansion)."""

import os
from datetime import datetime
from pathlib import Path
from typing import Optional, Union

from file_monitor.core.substitution import (
    FILE_PATH,
    POST_COMBINE,
    PRE_COMBINE,
    SubstitutionContext,
    SubstitutionTable,
    substitute_tokens,
)
from file_monitor.core.tokens import AUTO, CURRENT, FILE_NAME, SEPARATOR
from file_monitor.exceptions import ResolvedFileNotFoundError
from file_monitor.shared.logging_utils import get_logger
from file_monitor.shared.platform_detection import detect_base_directory
from .config import load_resolver_config
from .filesystem import FileSystem, LocalFileSystem
from .validation import require_path, split_segments, strip_trailing_separators

logger = get_logger(__name__)

PathLike = Union[str, os.PathLike]


def _as_str(path: Optional[PathLike]) -> Optional[str]:
    return None if path is None else os.fspath(path)


class PathResolver:
    """
    Resolve path expressions written with placeholder tokens.

    Supported tokens:
    - ``[Auto]``: the base directory; as the whole expression of
      :meth:`resolve_file_path` it also appends the requested file name.
    - ``[RutaActual]``: the current reference directory.
    - ``[DS]``: the host directory separator.
    - ``[FileName]``: the requested file name.

    The base directory is fixed at construction; nothing else is kept between
    calls.
    """

    def __init__(self, base_dir: PathLike, filesystem: Optional[FileSystem] = None):
        """
        Initialize the resolver.

        Args:
            base_dir: Process base directory (absolute).
            filesystem: Host filesystem (default: LocalFileSystem()).
        """
        self._base_dir = require_path(_as_str(base_dir), context="base directory")
        self._fs = filesystem or LocalFileSystem()

    @property
    def base_dir(self) -> str:
        return self._base_dir

    @property
    def separator(self) -> str:
        return self._fs.separator

    @property
    def auto_marker(self) -> str:
        return AUTO.marker

    @property
    def current_marker(self) -> str:
        return CURRENT.marker

    @property
    def separator_marker(self) -> str:
        return SEPARATOR.marker

    @property
    def file_name_marker(self) -> str:
        return FILE_NAME.marker

    def _substitute(
        self, text: str, table: SubstitutionTable, file_name: Optional[str] = None
    ) -> str:
        context = SubstitutionContext(
            base_dir=self._base_dir,
            separator=self._fs.separator,
            file_name=file_name,
        )
        return substitute_tokens(text, table, context)

    def resolve_absolute_from(
        self, reference: Optional[PathLike], path: Optional[PathLike]
    ) -> Optional[str]:
        """
        Resolve a path expression against a reference path.

        Only the case where both arguments contribute is combined and
        canonicalized; a single contributor is returned with token
        substitution only.

        Args:
            reference: Reference path (usually a directory). A reference with
                a file extension is replaced by its containing directory.
            path: Relative, token-parametrized or absolute path expression.

        Returns:
            Resolved path, or None if both arguments are None.

        Examples:
            resolve_absolute_from("/a/b/c", "../archivo.txt")
            # -> /a/b/archivo.txt

            resolve_absolute_from("/a/b/c", "[RutaActual][DS]A")
            # -> /a/b/c/A

            resolve_absolute_from(None, "[RutaActual][DS]A")
            # -> <base_dir>/A
        """
        return self._resolve(_as_str(reference), _as_str(path), reference_is_directory=False)

    def _resolve(
        self, reference: Optional[str], path: Optional[str], reference_is_directory: bool
    ) -> Optional[str]:
        if reference is not None and path is not None:
            if not reference_is_directory and self._fs.extension(reference):
                reference = self._fs.parent(reference)
            if CURRENT.occurs_in(path):
                path = self._substitute(path, PRE_COMBINE)

        if reference is None and path is not None and not CURRENT.occurs_in(path):
            reference = self._base_dir

        if reference is not None and path is not None:
            combined = self._fs.combine(reference, path)
            combined = self._substitute(combined, POST_COMBINE)
            return self._fs.canonicalize(combined)

        result = reference if path is None else path
        if result is not None:
            result = self._substitute(result, POST_COMBINE)
        return result

    def resolve_absolute(self, path: Optional[PathLike]) -> Optional[str]:
        """
        Resolve a path expression against the base directory.

        The base directory is always a directory, even when its last segment
        contains a dot, so it is never replaced by its parent.
        """
        return self._resolve(self._base_dir, _as_str(path), reference_is_directory=True)

    def resolve_file_path(
        self, path: Optional[PathLike], file_name: Optional[str]
    ) -> Optional[str]:
        """
        Resolve the path of a file, expanding [Auto] and [FileName].

        When the whole (trimmed) expression is [Auto], the result is the base
        directory with file_name appended. Trailing separators are removed
        from the result.

        Args:
            path: Path expression.
            file_name: Requested file name.

        Returns:
            Resolved file path (the base directory when path is None).

        Raises:
            ValueError: If the resolved path is empty or only separators, or
                if [FileName] is used without a file name.
        """
        path = _as_str(path)
        separator = self._fs.separator

        append_file_name = path is not None and AUTO.is_sole_content(path)
        resolved = self._base_dir if append_file_name else self.resolve_absolute(path)

        if resolved is None:
            return None

        resolved = self._substitute(resolved, FILE_PATH, file_name=file_name)
        if append_file_name:
            if file_name is None:
                raise ValueError(f"{AUTO.marker} requires a file name to append")
            if not resolved.endswith(separator):
                resolved += separator
            resolved += file_name

        return strip_trailing_separators(resolved, separator)

    def resolve_existing_file_path(
        self, path: Optional[PathLike], file_name: Optional[str]
    ) -> str:
        """
        Resolve a file path and require that it is an existing regular file.

        Raises:
            ResolvedFileNotFoundError: If no file exists at the resolved path.
        """
        resolved = self.resolve_file_path(path, file_name)
        if resolved is None or not self.exists(resolved):
            raise ResolvedFileNotFoundError(
                f"Requested file was not found at {resolved}", resolved
            )
        return resolved

    def exists(self, path: Optional[PathLike]) -> bool:
        """Check if the resolved path is an existing regular file."""
        resolved = self.resolve_absolute(path)
        if resolved is None or not self._fs.exists(resolved):
            return False
        try:
            return self._fs.attributes_of(resolved).is_regular_file
        except FileNotFoundError:
            # Removed between the two queries
            return False

    def ensure_file_exists(self, path: Optional[PathLike]) -> None:
        """
        Raises:
            ResolvedFileNotFoundError: If no file exists at the resolved path.
        """
        resolved = self._require_existing(path)
        logger.debug(f"File exists: {resolved}")

    def _require_existing(self, path: Optional[PathLike]) -> str:
        resolved = self.resolve_absolute(path)
        if resolved is None or not self.exists(resolved):
            raise ResolvedFileNotFoundError(
                f"File {resolved} does not exist", resolved
            )
        return resolved

    def is_directory(self, path: Optional[PathLike]) -> bool:
        """
        Check if the resolved path is a directory.

        Raises:
            FileNotFoundError: If nothing exists at the resolved path.
        """
        resolved = require_path(self.resolve_absolute(path))
        return self._fs.attributes_of(resolved).is_directory

    def is_file(self, path: Optional[PathLike]) -> bool:
        """
        Check if the resolved path is a regular file.

        Raises:
            FileNotFoundError: If nothing exists at the resolved path.
        """
        resolved = require_path(self.resolve_absolute(path))
        return self._fs.attributes_of(resolved).is_regular_file

    def last_modified_time(self, path: Optional[PathLike]) -> datetime:
        """
        Get the local last-write time of a file.

        Raises:
            ResolvedFileNotFoundError: If the file does not exist.
        """
        resolved = self._require_existing(path)
        return self._fs.last_write_time(resolved)

    def was_modified_since(self, since: datetime, path: Optional[PathLike]) -> bool:
        """
        Check if a file was written after the given moment.

        Args:
            since: Reference time. Naive values are local time.
            path: Path expression of the file.

        Returns:
            True if the file's last-write time is later than since.

        Raises:
            ResolvedFileNotFoundError: If the file does not exist.
        """
        modified = self.last_modified_time(path)
        if since.tzinfo is not None:
            modified = modified.astimezone(since.tzinfo)
        return since < modified

    def prepare_directory(self, path: Optional[PathLike]) -> None:
        """
        Create every missing directory level of a resolved path.

        Segments are walked from the root; creation stops at the first segment
        containing a dot, which is taken to be a file name. Segments that
        belong to the base directory are always directories, dotted or not.
        Existing directories are left alone, so repeated or concurrent calls
        are safe.

        Raises:
            ValueError: If the resolved path has no segments to create.
            FileExistsError: If a file blocks one of the directory levels.
        """
        resolved = self.resolve_absolute(path)
        separator = self._fs.separator
        segments = split_segments(resolved, separator)

        base_segments = self._base_dir.rstrip(separator).split(separator)
        if segments[: len(base_segments)] == base_segments:
            directory_segments = len(base_segments)
        else:
            directory_segments = 1

        prefix = segments[0]
        for index, segment in enumerate(segments[1:], start=1):
            prefix += separator + segment
            if index >= directory_segments and "." in segment:
                break
            if self._fs.create_directory(prefix):
                logger.debug(f"Created directory: {prefix}")


def get_path_resolver(
    config_dir: Optional[PathLike] = None,
    environment: Optional[str] = None,
    base_dir: Optional[PathLike] = None,
    filesystem: Optional[FileSystem] = None,
) -> PathResolver:
    """
    Build a PathResolver for the running process.

    Args:
        config_dir: Directory holding file_monitor.yaml (optional).
        environment: Key into the config's env_overrides.
        base_dir: Explicit base directory; takes precedence over config.
        filesystem: Host filesystem (default: LocalFileSystem()).

    Returns:
        PathResolver instance.
    """
    if base_dir is None:
        if config_dir is not None:
            base_dir = load_resolver_config(Path(config_dir), environment).base_dir
        else:
            base_dir = detect_base_directory()
    return PathResolver(base_dir, filesystem=filesystem)
