from __future__ import annotations

import logging
import sys
from dataclasses import dataclass
from enum import Enum, auto
from pathlib import PurePosixPath
from typing import Iterable, Protocol

from typeguard import typechecked

from .defaults import (
    DEFAULT_BRANCH,
    DEFAULT_PROJECT_PATH,
    DEFAULT_REPO_NAME,
    DEFAULT_REPO_OWNER,
    HIDDEN_FILE_PREFIX,
    RAW_CONTENT_BASE,
)
from .types import TFolder

logger = logging.getLogger(__name__)


class NodeKind(Enum):
    DIRECTORY = auto()
    FILE = auto()
    OTHER = auto()


@dataclass(frozen=True)
class Entry:
    path: PurePosixPath
    name: str
    kind: NodeKind


@dataclass(frozen=True)
class FileEntry:
    name: str
    modified: int


@dataclass(frozen=True)
class AssetRepo:
    owner: str = DEFAULT_REPO_OWNER
    repo: str = DEFAULT_REPO_NAME
    branch: str = DEFAULT_BRANCH
    project_path: str = DEFAULT_PROJECT_PATH

    def raw_url(self, folder: str, filename: str) -> str:
        return (
            f"{RAW_CONTENT_BASE}/{self.owner}/{self.repo}/refs/heads/{self.branch}"
            f"/{self.project_path}/{folder}/{filename}"
        )


DEFAULT_REPO = AssetRepo()


@typechecked
def generate_link(folder: TFolder, filename: str) -> str:
    """
    Return the raw-content URL of `filename` inside `folder`.

    The folder is expected to be validated by the caller, and the filename is used verbatim (no escaping).
    """
    return DEFAULT_REPO.raw_url(folder, filename)


class Writer(Protocol):
    def write(self, text: str) -> None: ...


class SourceAdapter(Protocol):
    def resolve_folder(self, folder: TFolder) -> PurePosixPath: ...
    def exists(self, dir_path: PurePosixPath) -> bool: ...
    def list_dir(self, dir_path: PurePosixPath) -> Iterable[Entry]: ...
    def modified_time(self, file_path: PurePosixPath) -> int: ...


class Formatter(Protocol):
    def link(self, link: str) -> str: ...
    def listing_header(self, folder: str, count: int) -> str: ...
    def listing_entry(self, index: int, name: str, link: str) -> str: ...
    def no_files(self, folder: str) -> str: ...
    def error(self, message: str) -> str: ...


class StdoutWriter(Writer):
    def write(self, text: str) -> None:
        sys.stdout.write(text)


class StderrWriter(Writer):
    def write(self, text: str) -> None:
        sys.stderr.write(text)


class StringWriter(Writer):
    """
    Collects written text into an internal buffer for tests and callers.

    Provides a lightweight Writer implementation that accumulates text and
    exposes it via the `text()` accessor.
    """

    def __init__(self) -> None:
        self._parts: list[str] = []

    def write(self, text: str) -> None:  # Writer protocol
        self._parts.append(text)

    def text(self) -> str:
        return "".join(self._parts)


class FolderLister:
    """
    Lists the visible regular files of one asset folder, newest first.

    Filesystem failures never escape: they are logged and degrade to an empty listing.
    """

    def __init__(self, source: SourceAdapter) -> None:
        self.source = source

    def list_files(self, folder: TFolder) -> list[str]:
        dir_path = self.source.resolve_folder(folder)
        try:
            if not self.source.exists(dir_path):
                logger.error("Folder %r not found at %s", folder, dir_path)
                return []
            entries = self._scan(dir_path)
        except OSError as e:
            logger.error("Could not read folder %r at %s: %s", folder, dir_path, e)
            return []

        # Stable sort: files sharing a timestamp keep their scan order
        entries.sort(key=lambda e: e.modified, reverse=True)
        logger.debug("Found %d file(s) in %s", len(entries), dir_path)
        return [e.name for e in entries]

    def _scan(self, dir_path: PurePosixPath) -> list[FileEntry]:
        files: list[FileEntry] = []
        for entry in self.source.list_dir(dir_path):
            if entry.name.startswith(HIDDEN_FILE_PREFIX):
                continue
            if entry.kind is not NodeKind.FILE:
                continue
            files.append(
                FileEntry(name=entry.name, modified=self.source.modified_time(entry.path))
            )
        return files
