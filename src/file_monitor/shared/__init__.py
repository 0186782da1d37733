"""Shared utilities (logging, YAML, process environment)."""

from .logging_utils import get_logger
from .platform_detection import BASE_DIR_ENV_VAR, detect_base_directory
from .yaml_utils import load_yaml

__all__ = [
    "get_logger",
    "load_yaml",
    "BASE_DIR_ENV_VAR",
    "detect_base_directory",
]
