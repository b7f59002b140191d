"""Spawn a Python interpreter and wait for it.

Output is either passed straight through to the parent's streams or
captured in memory, selected by the ``interop`` option.
"""

from __future__ import annotations

import asyncio
import logging
import os
from collections.abc import Mapping, Sequence
from typing import Any, Optional, Union

from .context import get_python_executable
from .errors import InvalidInteropMode, NonZeroExit
from .models import BUFFER_INTEROP, ProcessResult, SpawnOptions

_LOGGER = logging.getLogger(__name__)

CommandArg = str | os.PathLike[str]


def _normalize_command(cmd: Sequence[CommandArg]) -> list[str]:
    """Validate and normalize subprocess command arguments."""
    if not cmd:
        msg = "Command must include at least one argument"
        raise ValueError(msg)

    normalized: list[str] = []
    for arg in cmd:
        if isinstance(arg, os.PathLike):
            value = os.fspath(arg)
        elif isinstance(arg, str):
            value = arg
        else:
            msg = "Command arguments must be strings or os.PathLike"
            raise TypeError(msg)
        normalized.append(value)

    if not normalized[0].strip():
        msg = "Interpreter path cannot be empty or whitespace"
        raise ValueError(msg)

    return normalized


class _Streaming:
    """Child inherits the parent's stdout and stderr."""

    stdio = None

    async def collect(self, process: asyncio.subprocess.Process) -> ProcessResult:
        code = await process.wait()
        return ProcessResult(code=code)


class _Capturing:
    """Child stdout and stderr are accumulated and decoded at exit."""

    stdio = asyncio.subprocess.PIPE

    async def collect(self, process: asyncio.subprocess.Process) -> ProcessResult:
        stdout, stderr = await process.communicate()
        return ProcessResult(
            code=process.returncode,
            stdout=stdout.decode("utf-8", errors="replace"),
            stderr=stderr.decode("utf-8", errors="replace"),
        )


def _output_strategy(interop: Optional[str]) -> Union[_Streaming, _Capturing]:
    if interop is None:
        return _Streaming()
    if interop == BUFFER_INTEROP:
        return _Capturing()
    raise InvalidInteropMode(interop)


async def spawn_python(
    args: Sequence[CommandArg],
    *,
    env: Optional[Mapping[str, str]] = None,
    interop: Optional[str] = None,
    throw_non_zero_status: bool = True,
    python: Optional[str] = None,
    cwd: Optional[str] = None,
) -> Union[int, ProcessResult]:
    """Run the interpreter with args and wait for it to exit.

    Args:
        args: Interpreter arguments (script, flags, script arguments)
        env: Child environment (default: inherit)
        interop: None to stream output to this process's stdout/stderr,
            "buffer" to capture it
        throw_non_zero_status: Raise NonZeroExit on a non-zero exit code
        python: Interpreter executable (default: $PYSHIM_PYTHON or
            sys.executable)
        cwd: Child working directory (default: inherit)

    Returns:
        The exit code, or a ProcessResult with captured output under
        buffer interop.

    Raises:
        InvalidInteropMode: If interop is neither None nor "buffer".
        NonZeroExit: If the child fails and throw_non_zero_status is set.
        OSError: If the interpreter cannot be started.
    """
    strategy = _output_strategy(interop)
    options = SpawnOptions(
        env=dict(env) if env is not None else None,
        interop=interop,
        throw_non_zero_status=throw_non_zero_status,
        python=python,
        cwd=cwd,
    )
    return await _spawn(args, options, strategy)


async def _spawn(
    args: Sequence[CommandArg],
    options: SpawnOptions,
    strategy: Union[_Streaming, _Capturing],
) -> Union[int, ProcessResult]:
    argv = _normalize_command([get_python_executable(options.python), *args])
    _LOGGER.debug("Spawning %s", argv)

    process = await asyncio.create_subprocess_exec(
        *argv,
        stdout=strategy.stdio,
        stderr=strategy.stdio,
        env=options.env,
        cwd=options.cwd,
    )
    result = await strategy.collect(process)
    _LOGGER.debug("Process %s exited with code %s", process.pid, result.code)

    if result.code != 0 and options.throw_non_zero_status:
        raise NonZeroExit(result.code, stdout=result.stdout, stderr=result.stderr)

    if options.buffered:
        return result
    return result.code


def run_python(args: Sequence[CommandArg], **kwargs: Any) -> Union[int, ProcessResult]:
    """Blocking variant of spawn_python for synchronous callers."""
    return asyncio.run(spawn_python(args, **kwargs))


__all__ = ["run_python", "spawn_python"]
