"""Base directory detection for the running process."""

import os
import sys
from pathlib import Path
from typing import Optional

BASE_DIR_ENV_VAR = "FILE_MONITOR_BASE_DIR"


def _main_script_dir() -> Optional[Path]:
    """Directory of the running __main__ script, if it was started from a file."""
    main_module = sys.modules.get("__main__")
    main_file = getattr(main_module, "__file__", None)
    if not main_file:
        # Interactive sessions and `python -c` have no script file
        return None
    return Path(main_file).resolve().parent


def detect_base_directory() -> str:
    """
    Detect the process base directory used to anchor relative path expressions.

    Resolution order:
    1. FILE_MONITOR_BASE_DIR environment variable
    2. Directory of the running __main__ script
    3. Current working directory

    Returns:
        Absolute base directory path as a string.
    """
    from_env = os.environ.get(BASE_DIR_ENV_VAR)
    if from_env:
        return str(Path(from_env).expanduser().resolve())

    script_dir = _main_script_dir()
    if script_dir is not None:
        return str(script_dir)

    return str(Path.cwd())
