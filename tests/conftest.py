from __future__ import annotations

from pathlib import Path

import pytest
from utils import touch_file, write_text_file


@pytest.fixture
def assets_root(tmp_path: Path) -> Path:
    """An empty `linkyoo` directory standing in for the checkout's asset tree."""
    root = tmp_path / "linkyoo"
    root.mkdir()
    return root


@pytest.fixture
def meta_folder(assets_root: Path) -> Path:
    """A `meta` folder with files of distinct ages plus entries that must never be listed.

    Visible files, oldest to newest: old.webp, middle.png, new.jpg.
    Also present: a hidden file, a nested directory with its own file, and a symlink to that directory.
    """
    meta = assets_root / "meta"
    touch_file(meta / "old.webp", mtime=1_700_000_000)
    touch_file(meta / "middle.png", mtime=1_700_000_100)
    touch_file(meta / "new.jpg", mtime=1_700_000_200)

    touch_file(meta / ".DS_Store", mtime=1_700_000_300)
    write_text_file(meta / "drafts" / "wip.webp", "draft\n")
    (meta / "drafts-link").symlink_to(meta / "drafts", target_is_directory=True)
    return meta
