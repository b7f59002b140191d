"""Package root resolution, interpreter environment and CLI context."""

from __future__ import annotations

import logging
import os
import sys
from collections.abc import Mapping
from pathlib import Path
from typing import Dict, Optional

import click

from .errors import PackageDirNotFound

_LOGGER = logging.getLogger(__name__)

MANIFEST_NAME = "package.json"
USER_BASE_DIRNAME = "python_modules"

USER_BASE_VAR = "PYTHONUSERBASE"
NO_USER_SITE_VAR = "PYTHONNOUSERSITE"
PYTHON_VAR = "PYSHIM_PYTHON"


def _search_start(search_path: str) -> Path:
    """Return the directory the manifest search starts from."""
    path = Path(os.path.abspath(search_path))
    if path.is_dir():
        return path
    return path.parent


def find_package_dir(
    *, package_dir: Optional[str] = None, search_path: Optional[str] = None
) -> str:
    """Find the package root for an invocation.

    Args:
        package_dir: Known package root, returned as-is without touching
            the filesystem.
        search_path: File or directory to search upward from.

    Returns:
        Absolute path of the nearest directory (starting with search_path
        itself, or its parent if it is not a directory) containing
        package.json, or package_dir unchanged.

    Raises:
        PackageDirNotFound: If the filesystem root is reached without
            finding a manifest.
        ValueError: If neither argument is given.
    """
    if package_dir is not None:
        return package_dir
    if search_path is None:
        raise ValueError("Either package_dir or search_path is required")

    current = _search_start(search_path)

    while True:
        if (current / MANIFEST_NAME).exists():
            _LOGGER.debug("Found %s in %s", MANIFEST_NAME, current)
            return str(current)

        # Stop at root directory
        parent = current.parent
        if parent == current:
            break
        current = parent

    _LOGGER.debug("No %s above %s", MANIFEST_NAME, search_path)
    raise PackageDirNotFound(search_path)


def python_env(
    package_dir: str, base_env: Optional[Mapping[str, str]] = None
) -> Dict[str, str]:
    """Build the environment for an interpreter rooted at package_dir.

    User-site installs are pinned to ``<package_dir>/python_modules`` and
    PYTHONNOUSERSITE is dropped so the user site stays enabled. Every other
    variable of base_env (default: os.environ) is passed through.

    Returns:
        A new dictionary; base_env is left untouched.
    """
    source = os.environ if base_env is None else base_env
    env = {key: value for key, value in source.items() if key != NO_USER_SITE_VAR}
    env[USER_BASE_VAR] = os.path.join(package_dir, USER_BASE_DIRNAME)
    _LOGGER.debug("%s=%s", USER_BASE_VAR, env[USER_BASE_VAR])
    return env


def get_python_executable(python: Optional[str] = None) -> str:
    """Resolve the interpreter to spawn.

    Resolution order:
    1. explicit python argument
    2. $PYSHIM_PYTHON environment variable
    3. the running interpreter (sys.executable)

    Reads fresh from the environment each time.
    """
    if python:
        return python
    env_python = os.environ.get(PYTHON_VAR)
    if env_python:
        return env_python
    return sys.executable


class ShimContext:
    def __init__(self):
        self.package_dir = None
        self.python = None


pass_context = click.make_pass_decorator(ShimContext, ensure=True)


__all__ = [
    "ShimContext",
    "pass_context",
    "MANIFEST_NAME",
    "USER_BASE_DIRNAME",
    "find_package_dir",
    "get_python_executable",
    "python_env",
]
