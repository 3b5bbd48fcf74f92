from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

if TYPE_CHECKING:
    from collections.abc import Callable
    from pathlib import Path

    VenvFactory = Callable[..., Path]


@pytest.fixture
def make_venv(tmp_path: Path) -> VenvFactory:
    """Lay out a fake environment, the interpreter is an empty file."""

    def _make(
        name: str,
        bin_dir: str | None = "bin",
        exe_name: str = "python",
        cfg: str | None = "home = /usr/bin\nversion = 3.11.4\n",
    ) -> Path:
        root = tmp_path / name
        folder = root if bin_dir is None else root / bin_dir
        folder.mkdir(parents=True)
        exe = folder / exe_name
        exe.write_text("", encoding="utf-8")
        if cfg is not None:
            (root / "pyvenv.cfg").write_text(cfg, encoding="utf-8")
        return exe

    return _make
