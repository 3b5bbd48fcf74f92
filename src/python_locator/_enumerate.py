from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import TYPE_CHECKING, Final

from ._layout import PYTHON_EXE, find_python_binary_path
from ._models import PythonEnv
from ._version import get_version

if TYPE_CHECKING:
    from collections.abc import Mapping

_LOGGER: Final[logging.Logger] = logging.getLogger(__name__)


def list_python_environments(
    path: Path,
    exe_name: str = PYTHON_EXE,
    env: Mapping[str, str] | None = None,
) -> list[PythonEnv] | None:
    """
    List the environments found in the immediate sub-folders of *path*.

    Results follow the order the filesystem lists the folders in, sort them if you need a stable order.

    :param path: the folder holding environments, e.g. ``~/.virtualenvs``
    :param exe_name: name of the interpreter binary to look for
    :param env: environment variables for interpreter subprocesses, see :func:`python_locator.get_version`
    :return: the environments found, ``None`` if *path* could not be listed
    """
    try:
        entries = os.scandir(path)
    except OSError:
        _LOGGER.debug("cannot list %s", path, exc_info=True)
        return None
    python_envs: list[PythonEnv] = []
    with entries:
        while True:
            try:
                entry = next(entries, None)
            except OSError:
                # keep what was found before the listing broke off
                _LOGGER.debug("stopped listing %s", path, exc_info=True)
                break
            if entry is None:
                break
            try:
                if not entry.is_dir():
                    continue
            except OSError:
                _LOGGER.debug("skip unreadable %s", entry.path, exc_info=True)
                continue
            venv_dir = Path(entry.path).absolute()
            if (executable := find_python_binary_path(venv_dir, exe_name)) is None:
                continue
            python_envs.append(PythonEnv(executable, venv_dir, get_version(executable, env)))
    _LOGGER.info("found %d environment(s) in %s", len(python_envs), path)
    return python_envs


__all__ = [
    "list_python_environments",
]
