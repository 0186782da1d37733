"""Resolve token-parametrized path expressions and check the files they name."""

from .exceptions import FileMonitorError, ResolvedFileNotFoundError
from .paths import (
    FileAttributes,
    FileSystem,
    LocalFileSystem,
    PathResolver,
    ResolverConfig,
    get_path_resolver,
    load_resolver_config,
)

__version__ = "1.0.0"

__all__ = [
    "PathResolver",
    "get_path_resolver",
    "ResolverConfig",
    "load_resolver_config",
    "FileSystem",
    "LocalFileSystem",
    "FileAttributes",
    "FileMonitorError",
    "ResolvedFileNotFoundError",
]
