from __future__ import annotations

import os
from pathlib import Path

from assetlink.adapters.filesystem import FileSystemSource
from assetlink.core import SourceAdapter, StringWriter
from assetlink.generate_link import main


def write_text_file(path: Path, content: str) -> None:
    """Create parents and write UTF-8 text to a file path."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")


def touch_file(path: Path, *, mtime: int | None = None) -> None:
    """Create parents as needed, touch a file path, and optionally pin its mtime (seconds)."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.touch()
    if mtime is not None:
        os.utime(path, (mtime, mtime))


def run_cli(
    argv: list[str], *, root: Path | None = None, source: SourceAdapter | None = None
) -> tuple[int, str, str]:
    """Run the program entry point against an isolated assets root; return (exit code, stdout, stderr)."""
    out, err = StringWriter(), StringWriter()
    if source is None and root is not None:
        source = FileSystemSource(root=root)
    code = main(argv=argv, writer=out, err_writer=err, source=source)
    return code, out.text(), err.text()
