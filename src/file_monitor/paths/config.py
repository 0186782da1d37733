"""Load and manage file_monitor.yaml configuration with caching."""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional, Union

from file_monitor.shared.platform_detection import detect_base_directory
from file_monitor.shared.yaml_utils import load_yaml

logger = logging.getLogger(__name__)

CONFIG_FILENAME = "file_monitor.yaml"
SUPPORTED_SCHEMA_VERSION = 1

# Cache for loaded configs: (config_dir, environment) -> (mtime, config)
_config_cache: Dict[tuple, tuple] = {}


@dataclass(frozen=True)
class ResolverConfig:
    """
    Resolved configuration for a :class:`~file_monitor.paths.resolve.PathResolver`.

    Attributes:
        base_dir: Absolute process base directory used for relative
            expressions and for the [Auto] / [RutaActual] tokens.
    """

    base_dir: str


def _get_config_mtime(config_path: Path) -> float:
    """Get modification time of config file, or 0 if doesn't exist."""
    try:
        return config_path.stat().st_mtime
    except OSError:
        return 0.0


def load_resolver_config(
    config_dir: Union[str, Path], environment: Optional[str] = None
) -> ResolverConfig:
    """
    Load resolver configuration from <config_dir>/file_monitor.yaml with caching.

    Cache is invalidated when the file modification time changes. When the
    file does not exist, the detected process base directory is used.

    Args:
        config_dir: Configuration directory.
        environment: Optional key into ``env_overrides``.

    Returns:
        ResolverConfig instance.

    Raises:
        RuntimeError: If the file exists but fails validation.
    """
    config_dir = Path(config_dir)
    config_path = config_dir / CONFIG_FILENAME
    mtime = _get_config_mtime(config_path)
    cache_key = (str(config_dir), environment or "")

    if cache_key in _config_cache:
        cached_mtime, cached_config = _config_cache[cache_key]
        if cached_mtime == mtime:
            return cached_config
        del _config_cache[cache_key]

    if config_path.exists():
        raw = load_yaml(config_path)
        try:
            validate_resolver_config(raw, config_path)
            raw = apply_env_overrides(raw, environment)
        except ValueError as e:
            raise RuntimeError(
                f"Invalid resolver configuration in {config_path}: {e}"
            ) from e
        config = ResolverConfig(
            base_dir=_resolve_base_dir(raw["base"]["directory"], config_dir)
        )
    else:
        logger.debug(
            f"No {CONFIG_FILENAME} in {config_dir}, using detected base directory"
        )
        config = ResolverConfig(base_dir=detect_base_directory())

    _config_cache[cache_key] = (mtime, config)
    return config


def _resolve_base_dir(directory: str, config_dir: Path) -> str:
    """Relative base directories are anchored at the config dir's parent."""
    base = Path(directory).expanduser()
    if not base.is_absolute():
        base = config_dir.parent / base
    return str(base.resolve())


def apply_env_overrides(
    raw_config: Dict[str, Any], environment: Optional[str]
) -> Dict[str, Any]:
    """
    Apply shallow env overrides (keyed by environment) to a raw config.

    Only the ``base`` section is merged. Does not mutate the original config;
    returns a merged copy.
    """
    if not environment:
        return raw_config

    overrides = (raw_config.get("env_overrides") or {}).get(environment)
    if not overrides:
        return raw_config
    if not isinstance(overrides, dict):
        raise ValueError(f"env_overrides.{environment} must be a mapping")

    merged = dict(raw_config)
    if isinstance(overrides.get("base"), dict):
        merged_base = dict(raw_config.get("base", {}))
        merged_base.update(overrides["base"])
        merged["base"] = merged_base
        if not merged_base.get("directory") or not isinstance(
            merged_base["directory"], str
        ):
            raise ValueError(
                f"env_overrides.{environment}.base.directory must be a non-empty string"
            )
    return merged


def validate_resolver_config(
    config: Dict[str, Any], config_path: Optional[Path] = None
) -> None:
    """
    Basic schema validation for file_monitor.yaml.

    Raises:
        ValueError: If a required key is missing or has the wrong type.
    """
    location = f" ({config_path})" if config_path is not None else ""
    schema_version_raw = config.get("schema_version", SUPPORTED_SCHEMA_VERSION)

    try:
        schema_version = int(schema_version_raw)
    except (TypeError, ValueError):
        raise ValueError(
            f"schema_version must be an integer, got {schema_version_raw!r}{location}"
        )

    if schema_version != SUPPORTED_SCHEMA_VERSION:
        logger.warning(
            f"[{CONFIG_FILENAME}] Unsupported schema_version={schema_version}{location}, "
            f"reading it as v{SUPPORTED_SCHEMA_VERSION}."
        )

    base = config.get("base")
    if not isinstance(base, dict):
        raise ValueError(f"[{CONFIG_FILENAME}] 'base' section must be a mapping{location}")
    directory = base.get("directory")
    if not directory or not isinstance(directory, str):
        raise ValueError(
            f"[{CONFIG_FILENAME}] 'base.directory' must be a non-empty string{location}"
        )

    env_overrides = config.get("env_overrides")
    if env_overrides is not None and not isinstance(env_overrides, dict):
        raise ValueError(
            f"[{CONFIG_FILENAME}] 'env_overrides' section must be a mapping{location}"
        )
