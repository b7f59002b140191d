"""Exceptions raised by pyshim."""

from __future__ import annotations

from typing import Optional


class PyshimError(Exception):
    """Base class for pyshim errors."""


class InvalidInteropMode(PyshimError, ValueError):
    """Unrecognized output interop mode."""

    def __init__(self, interop: object):
        self.interop = interop
        super().__init__(f"Unexpected interop mode: {interop!r}")


class PackageDirNotFound(PyshimError, FileNotFoundError):
    """No ancestor directory contains a package manifest."""

    message = "Could not find directory containing package.json"

    def __init__(self, search_path: Optional[str] = None):
        self.search_path = search_path
        super().__init__(self.message)

    def __str__(self) -> str:
        return self.message


class NonZeroExit(PyshimError):
    """Child interpreter exited with a non-zero status."""

    def __init__(
        self,
        code: int,
        stdout: Optional[str] = None,
        stderr: Optional[str] = None,
    ):
        self.code = code
        self.stdout = stdout
        self.stderr = stderr
        message = f"Exited with code {code}"
        if stderr is not None:
            message = f"{message}\n{stderr}"
        super().__init__(message)


__all__ = [
    "InvalidInteropMode",
    "NonZeroExit",
    "PackageDirNotFound",
    "PyshimError",
]
