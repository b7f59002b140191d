"""Chain source detection, package root lookup and environment building."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Mapping, Sequence
from typing import Any, Optional, Union

from .args import find_source_arg
from .context import find_package_dir, python_env
from .models import LaunchPlan, ProcessResult
from .process_utils import spawn_python

_LOGGER = logging.getLogger(__name__)


def resolve_launch(
    args: Sequence[str],
    *,
    package_dir: Optional[str] = None,
    base_env: Optional[Mapping[str, str]] = None,
) -> LaunchPlan:
    """Work out where and with which environment args should run.

    The package root is searched from the source-file argument, or from
    the current directory when args run a module, a command or stdin.
    """
    source_arg = find_source_arg(args)
    root = find_package_dir(
        package_dir=package_dir,
        search_path=source_arg if source_arg is not None else ".",
    )
    _LOGGER.debug("Source %r resolved to package root %s", source_arg, root)
    return LaunchPlan(
        source_arg=source_arg,
        package_dir=root,
        env=python_env(root, base_env),
    )


async def launch_python(
    args: Sequence[str],
    *,
    package_dir: Optional[str] = None,
    base_env: Optional[Mapping[str, str]] = None,
    **spawn_options: Any,
) -> Union[int, ProcessResult]:
    """Resolve the launch plan for args and spawn the interpreter with it.

    The package root search runs in a worker thread so its filesystem
    checks do not block the event loop.
    """
    plan = await asyncio.to_thread(
        resolve_launch, args, package_dir=package_dir, base_env=base_env
    )
    return await spawn_python(args, env=plan.env, **spawn_options)


__all__ = ["launch_python", "resolve_launch"]
