"""Shared pytest fixtures for all tests."""

import ntpath
import posixpath
import tempfile
from pathlib import Path

import pytest

from file_monitor.paths import config as paths_config
from file_monitor.paths.filesystem import LocalFileSystem
from file_monitor.paths.resolve import PathResolver

POSIX_BASE_DIR = "/srv/app/bin"
WINDOWS_BASE_DIR = "D:\\app\\bin\\Debug"
DOTTED_POSIX_BASE_DIR = "/opt/app-1.2"


@pytest.fixture
def temp_dir():
    """Create a temporary directory for test files."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture(autouse=True)
def clear_config_cache():
    """Keep the resolver config cache from leaking between tests."""
    paths_config._config_cache.clear()
    yield
    paths_config._config_cache.clear()


@pytest.fixture
def posix_resolver() -> PathResolver:
    """Resolver with POSIX path syntax and a fixed base directory (no disk access)."""
    return PathResolver(POSIX_BASE_DIR, filesystem=LocalFileSystem(posixpath))


@pytest.fixture
def windows_resolver() -> PathResolver:
    """Resolver with Windows path syntax and a fixed base directory (no disk access)."""
    return PathResolver(WINDOWS_BASE_DIR, filesystem=LocalFileSystem(ntpath))


@pytest.fixture
def disk_resolver(tmp_path) -> PathResolver:
    """Resolver on the local filesystem rooted at a temporary base directory."""
    return PathResolver(str(tmp_path))


@pytest.fixture
def dotted_posix_resolver() -> PathResolver:
    """Resolver whose base directory name contains a dot (no disk access)."""
    return PathResolver(DOTTED_POSIX_BASE_DIR, filesystem=LocalFileSystem(posixpath))


@pytest.fixture
def dotted_base_dir(tmp_path) -> Path:
    """Existing base directory whose name contains a dot."""
    base_dir = tmp_path / "proj.v2"
    base_dir.mkdir()
    return base_dir


@pytest.fixture
def dotted_disk_resolver(dotted_base_dir) -> PathResolver:
    """Resolver on the local filesystem rooted at a dotted base directory."""
    return PathResolver(str(dotted_base_dir))
