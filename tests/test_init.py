from __future__ import annotations

import python_locator
from python_locator import _layout, _version


def test_version() -> None:
    assert python_locator.__version__


def test_probing_api_exported() -> None:
    assert python_locator.IS_WIN is _layout.IS_WIN
    assert python_locator.VERSION_STRATEGIES is _version.VERSION_STRATEGIES
    assert python_locator.LogCmd is _version.LogCmd
    assert python_locator.version_from_pyvenv_cfg is _version.version_from_pyvenv_cfg
    assert python_locator.version_from_subprocess is _version.version_from_subprocess


def test_all_resolves() -> None:
    for name in python_locator.__all__:
        assert hasattr(python_locator, name), name
