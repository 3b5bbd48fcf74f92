"""Identity keys used by callers to de-duplicate environments and managers reported by several locators."""

from __future__ import annotations

import os
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ._models import EnvironmentLike, ManagerLike


def get_environment_key(env: EnvironmentLike) -> str | None:
    """Key an environment by its executable, falling back to its root folder."""
    if env.executable_path is not None:
        return os.fspath(env.executable_path)
    if env.root_path is not None:
        return os.fspath(env.root_path)
    return None


def get_environment_manager_key(manager: ManagerLike) -> str:
    return os.fspath(manager.executable_path)


__all__ = [
    "get_environment_key",
    "get_environment_manager_key",
]
