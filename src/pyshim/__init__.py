"""pyshim: run a Python interpreter against a per-package user site."""

from .args import find_source_arg
from .context import find_package_dir, python_env
from .errors import InvalidInteropMode, NonZeroExit, PackageDirNotFound, PyshimError
from .launcher import launch_python, resolve_launch
from .models import LaunchPlan, ProcessResult, SpawnOptions
from .process_utils import run_python, spawn_python

__all__ = [
    "__version__",
    "InvalidInteropMode",
    "LaunchPlan",
    "NonZeroExit",
    "PackageDirNotFound",
    "ProcessResult",
    "PyshimError",
    "SpawnOptions",
    "find_package_dir",
    "find_source_arg",
    "launch_python",
    "python_env",
    "resolve_launch",
    "run_python",
    "spawn_python",
]

__version__ = "0.1.0"
