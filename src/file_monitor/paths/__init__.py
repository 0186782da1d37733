"""Path expression resolution (single authority)."""

from .config import (
    ResolverConfig,
    apply_env_overrides,
    load_resolver_config,
    validate_resolver_config,
)
from .filesystem import (
    FileAttributes,
    FileSystem,
    LocalFileSystem,
)
from .resolve import (
    PathResolver,
    get_path_resolver,
)
from .validation import (
    require_path,
    split_segments,
    strip_trailing_separators,
)

__all__ = [
    # Config
    "ResolverConfig",
    "load_resolver_config",
    "apply_env_overrides",
    "validate_resolver_config",
    # Filesystem
    "FileAttributes",
    "FileSystem",
    "LocalFileSystem",
    # Resolve
    "PathResolver",
    "get_path_resolver",
    # Validation
    "require_path",
    "split_segments",
    "strip_trailing_separators",
]
