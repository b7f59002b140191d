"""Result and option models for spawning the interpreter."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Literal, Optional

from pydantic import BaseModel, ConfigDict

BUFFER_INTEROP = "buffer"


class ProcessResult(BaseModel):
    """Result of an interpreter run.

    ``stdout`` and ``stderr`` are only populated under buffer interop.
    """

    model_config = ConfigDict(frozen=True)

    code: int
    stdout: Optional[str] = None
    stderr: Optional[str] = None


class SpawnOptions(BaseModel):
    """Options accepted by ``spawn_python``."""

    model_config = ConfigDict(frozen=True)

    env: Optional[Dict[str, str]] = None
    interop: Optional[Literal["buffer"]] = None
    throw_non_zero_status: bool = True
    python: Optional[str] = None
    cwd: Optional[str] = None

    @property
    def buffered(self) -> bool:
        return self.interop == BUFFER_INTEROP


@dataclass(frozen=True)
class LaunchPlan:
    """Resolved source argument, package root and child environment."""

    source_arg: Optional[str]
    package_dir: str
    env: Dict[str, str]


__all__ = ["BUFFER_INTEROP", "LaunchPlan", "ProcessResult", "SpawnOptions"]
