"""Records produced by filesystem probing and the shapes of the records keyed by callers."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from pathlib import Path

_DC_KW = {"frozen": True, "slots": True} if sys.version_info >= (3, 10) else {"frozen": True}


@dataclass(**_DC_KW)
class PythonEnv:
    """A Python interpreter found on disk."""

    executable_path: Path
    root_path: Path | None = None
    version: str | None = None


@dataclass(**_DC_KW)
class PyEnvCfg:
    """Version read from a ``pyvenv.cfg`` file."""

    version: str


@runtime_checkable
class EnvironmentLike(Protocol):
    """An environment record that can be keyed, only one of the two locations has to be known."""

    @property
    def executable_path(self) -> Path | None: ...

    @property
    def root_path(self) -> Path | None: ...


@runtime_checkable
class ManagerLike(Protocol):
    """An environment manager (conda, pyenv, ...) record, always located by its executable."""

    @property
    def executable_path(self) -> Path: ...


__all__ = [
    "EnvironmentLike",
    "ManagerLike",
    "PyEnvCfg",
    "PythonEnv",
]
