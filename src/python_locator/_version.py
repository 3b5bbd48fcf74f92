"""Resolve an interpreter's version, from ``pyvenv.cfg`` when possible, by running it otherwise."""

from __future__ import annotations

import logging
import os
import subprocess  # noqa: S404
from shlex import quote
from subprocess import Popen  # noqa: S404
from typing import TYPE_CHECKING, Final

from ._pyvenv_cfg import find_and_parse_pyvenv_cfg, parent_of

if TYPE_CHECKING:
    from collections.abc import Callable, Mapping
    from pathlib import Path

_LOGGER: Final[logging.Logger] = logging.getLogger(__name__)
VERSION_SCRIPT: Final[str] = "import sys; print(sys.version)"


def version_from_pyvenv_cfg(python_executable: Path, env: Mapping[str, str] | None = None) -> str | None:  # noqa: ARG001
    if (folder := parent_of(python_executable)) is None:
        return None
    if (cfg := find_and_parse_pyvenv_cfg(folder)) is None:
        return None
    return cfg.version


def version_from_subprocess(python_executable: Path, env: Mapping[str, str] | None = None) -> str | None:
    cmd = [str(python_executable), "-c", VERSION_SCRIPT]
    env = dict(os.environ if env is None else env)
    env.pop("__PYVENV_LAUNCHER__", None)
    env["PYTHONUTF8"] = "1"
    _LOGGER.debug("get interpreter version via cmd: %s", LogCmd(cmd))
    try:
        process = Popen(  # noqa: S603
            cmd,
            stdin=subprocess.DEVNULL,
            stderr=subprocess.DEVNULL,
            stdout=subprocess.PIPE,
            env=env,
        )
        out, _ = process.communicate()
    except OSError:
        _LOGGER.debug("failed to run %s", python_executable, exc_info=True)
        return None
    try:
        text = out.decode("utf-8")
    except UnicodeDecodeError:
        _LOGGER.debug("%s printed non utf-8 output %r", python_executable, out[:200])
        return None
    # sys.version is followed by build information, e.g. 3.12.1 (main, Dec  8 2023, 05:40:51) [GCC 11.4.0]
    tokens = text.split()
    if not tokens:
        _LOGGER.debug("%s printed no version (exit code %d)", python_executable, process.returncode)
        return None
    return tokens[0]


VERSION_STRATEGIES: Final[tuple[Callable[[Path, Mapping[str, str] | None], str | None], ...]] = (
    version_from_pyvenv_cfg,
    version_from_subprocess,
)


def get_version(python_executable: Path, env: Mapping[str, str] | None = None) -> str | None:
    """
    Get the version of the interpreter at *python_executable*.

    The strategies in :data:`VERSION_STRATEGIES` are tried in order and the first version found wins, so when a
    ``pyvenv.cfg`` can be read the interpreter is never started.

    :param python_executable: the interpreter to inspect
    :param env: environment variables for the interpreter subprocess, defaults to :data:`os.environ`
    :return: the version string, ``None`` if it could not be determined
    """
    for strategy in VERSION_STRATEGIES:
        if (version := strategy(python_executable, env)) is not None:
            return version
    return None


class LogCmd:
    """Shell-quote a command only when the log record is rendered."""

    def __init__(self, cmd: list[str]) -> None:
        self.cmd = cmd

    def __repr__(self) -> str:
        return " ".join(quote(c) for c in self.cmd)


__all__ = [
    "VERSION_SCRIPT",
    "VERSION_STRATEGIES",
    "LogCmd",
    "get_version",
    "version_from_pyvenv_cfg",
    "version_from_subprocess",
]
