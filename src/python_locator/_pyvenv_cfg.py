"""Read the interpreter version out of a ``pyvenv.cfg`` without running the interpreter."""

from __future__ import annotations

import logging
import os
import re
from typing import TYPE_CHECKING, Final

from ._models import PyEnvCfg

if TYPE_CHECKING:
    from pathlib import Path

_LOGGER: Final[logging.Logger] = logging.getLogger(__name__)
PYVENV_CONFIG_FILE: Final[str] = "pyvenv.cfg"
_VERSION_RE: Final[re.Pattern[str]] = re.compile(r"^version\s*=\s*(\d+\.\d+\.\d+)$")
# virtualenv writes the full version info, e.g. 3.12.1.final.0
_VERSION_INFO_RE: Final[re.Pattern[str]] = re.compile(r"^version_info\s*=\s*(\d+\.\d+\.\d+.*)$")


def parent_of(path: Path) -> Path | None:
    """Return the parent of *path*, ``None`` for a filesystem root or a bare name."""
    parent = path.parent
    if parent == path or not parent.parts:
        return None
    return parent


def find_pyvenv_config_path(python_executable: Path) -> Path | None:
    """Look for ``pyvenv.cfg`` in the parent of *python_executable*, then in its grandparent."""
    folder = python_executable
    for _ in range(2):
        folder = parent_of(folder)
        if folder is None:
            return None
        cfg = folder / PYVENV_CONFIG_FILE
        try:
            os.stat(cfg)
        except OSError:
            continue
        return cfg
    return None


def parse_pyvenv_cfg(cfg: Path) -> PyEnvCfg | None:
    try:
        content = cfg.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError):
        _LOGGER.debug("failed to read %s", cfg, exc_info=True)
        return None
    for line in content.splitlines():
        if "version" not in line:
            continue
        match = _VERSION_RE.match(line) or _VERSION_INFO_RE.match(line)
        if match:
            _LOGGER.debug("got version %s from %s", match[1], cfg)
            return PyEnvCfg(version=match[1])
    return None


def find_and_parse_pyvenv_cfg(python_executable: Path) -> PyEnvCfg | None:
    if (cfg := find_pyvenv_config_path(python_executable)) is None:
        return None
    return parse_pyvenv_cfg(cfg)


__all__ = [
    "PYVENV_CONFIG_FILE",
    "find_and_parse_pyvenv_cfg",
    "find_pyvenv_config_path",
    "parent_of",
    "parse_pyvenv_cfg",
]
