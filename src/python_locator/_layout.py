"""Locate the interpreter inside an environment root."""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING, Final

if TYPE_CHECKING:
    from pathlib import Path

_LOGGER: Final[logging.Logger] = logging.getLogger(__name__)
IS_WIN: Final[bool] = sys.platform == "win32"
PYTHON_EXE: Final[str] = "python.exe" if IS_WIN else "python"
# POSIX venv, Windows venv, interpreter at the root (conda on Windows, embeddable builds)
_BIN_DIRS: Final[tuple[tuple[str, ...], ...]] = (("bin",), ("Scripts",), ())


def find_python_binary_path(env_path: Path, exe_name: str = PYTHON_EXE) -> Path | None:
    """
    Return the first existing ``bin/``, ``Scripts/`` or top level interpreter of *env_path*.

    Both layouts are probed on every platform, the executable name is not.
    """
    for parts in _BIN_DIRS:
        candidate = env_path.joinpath(*parts, exe_name)
        if candidate.is_file():
            _LOGGER.debug("found interpreter %s", candidate)
            return candidate
    return None


__all__ = [
    "IS_WIN",
    "PYTHON_EXE",
    "find_python_binary_path",
]
