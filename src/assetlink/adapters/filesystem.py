from __future__ import annotations

import os
from pathlib import Path, PurePosixPath
from typing import Iterable

from ..core import Entry, NodeKind, SourceAdapter
from ..defaults import DEFAULT_ASSETS_ROOT
from ..types import TFolder


def _to_posix(path: Path) -> PurePosixPath:
    # Normalize to POSIX-like logical paths for cross-source formatting
    return PurePosixPath(str(path.as_posix()))


class FileSystemSource(SourceAdapter):
    def __init__(self, root: Path | None = None) -> None:
        self._root = DEFAULT_ASSETS_ROOT if root is None else Path(root)

    def resolve_folder(self, folder: TFolder) -> PurePosixPath:
        return _to_posix((self._root / folder).resolve())

    def exists(self, dir_path: PurePosixPath) -> bool:
        return Path(str(dir_path)).is_dir()

    def list_dir(self, dir_path: PurePosixPath) -> Iterable[Entry]:
        p = Path(str(dir_path))
        entries: list[Entry] = []
        with os.scandir(p) as it:
            for e in it:
                # Follow symlinks: a link to a file is listed, a link to a directory is not.
                if e.is_file():
                    kind = NodeKind.FILE
                elif e.is_dir():
                    kind = NodeKind.DIRECTORY
                else:
                    kind = NodeKind.OTHER
                entries.append(
                    Entry(
                        path=_to_posix(Path(e.path)),
                        name=e.name,
                        kind=kind,
                    )
                )
        return entries

    def modified_time(self, file_path: PurePosixPath) -> int:
        return Path(str(file_path)).stat().st_mtime_ns
