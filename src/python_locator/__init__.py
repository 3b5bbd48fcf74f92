"""Filesystem probing primitives for locating Python interpreters and virtual environments."""

from __future__ import annotations

from importlib.metadata import version

from ._enumerate import list_python_environments
from ._keys import get_environment_key, get_environment_manager_key
from ._layout import IS_WIN, PYTHON_EXE, find_python_binary_path
from ._models import EnvironmentLike, ManagerLike, PyEnvCfg, PythonEnv
from ._pyvenv_cfg import find_and_parse_pyvenv_cfg, find_pyvenv_config_path, parse_pyvenv_cfg
from ._version import VERSION_STRATEGIES, LogCmd, get_version, version_from_pyvenv_cfg, version_from_subprocess

__version__ = version("python-locator")

__all__ = [
    "IS_WIN",
    "PYTHON_EXE",
    "VERSION_STRATEGIES",
    "EnvironmentLike",
    "LogCmd",
    "ManagerLike",
    "PyEnvCfg",
    "PythonEnv",
    "__version__",
    "find_and_parse_pyvenv_cfg",
    "find_pyvenv_config_path",
    "find_python_binary_path",
    "get_environment_key",
    "get_environment_manager_key",
    "get_version",
    "list_python_environments",
    "parse_pyvenv_cfg",
    "version_from_pyvenv_cfg",
    "version_from_subprocess",
]
