"""
@meta
name: paths_validation
type: utility
domain: paths
responsibility:
  - Enforce preconditions on resolved path strings
  - Strip trailing separators and split paths into segments safely
inputs:
  - Resolved path strings
outputs:
  - Validated path strings and segments
tags:
  - utility
  - paths
  - validation
lifecycle:
  status: active
"""

"""Precondition checks for resolved path strings."""

from typing import List, Optional


def require_path(path: Optional[str], context: str = "path") -> str:
    """
    Ensure a resolved path is present and non-empty.

    Args:
        path: Resolved path string.
        context: Context string for error messages.

    Returns:
        The path, unchanged.

    Raises:
        ValueError: If path is None or empty.
    """
    if path is None or not path.strip():
        raise ValueError(f"Invalid {context}: {path!r}")
    return path


def strip_trailing_separators(path: str, separator: str) -> str:
    """
    Remove every trailing separator from a path.

    Args:
        path: Path string.
        separator: Directory separator to strip.

    Returns:
        Path without trailing separators.

    Raises:
        ValueError: If path is empty or consists only of separators.
    """
    if not path:
        raise ValueError("Cannot strip trailing separators from an empty path")
    stripped = path.rstrip(separator)
    if not stripped:
        raise ValueError(f"Path consists only of separators: {path!r}")
    return stripped


def split_segments(path: str, separator: str) -> List[str]:
    """
    Split a resolved path into separator-delimited segments.

    The first segment is the root marker ("" on POSIX, the drive on Windows).

    Raises:
        ValueError: If the path has no segment beyond its root.
    """
    require_path(path, context="directory path")
    segments = path.split(separator)
    if len(segments) < 2:
        raise ValueError(f"Invalid directory path (no segments to create): {path}")
    return segments
