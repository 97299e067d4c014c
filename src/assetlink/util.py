from __future__ import annotations

from dataclasses import dataclass

from typeguard import typechecked

from .defaults import DEFAULT_FOLDERS, PATH_SEPARATOR
from .types import TFolder, _is_known_folder


@dataclass(frozen=True)
class ParsedPath:
    folder: TFolder
    filename: str | None = None

    @property
    def is_folder_only(self) -> bool:
        return self.filename is None


@dataclass(frozen=True)
class PathError:
    message: str
    value: str


def is_known_folder(name: str) -> bool:
    return _is_known_folder(name)


def describe_folders() -> str:
    return ", ".join(DEFAULT_FOLDERS)


@typechecked
def parse_asset_path(path: str) -> ParsedPath | PathError:
    """
    Split a `folder/filename` or bare `folder` argument and validate the folder.

    Examples:
    - "meta/cover.webp" -> ParsedPath(folder="meta", filename="cover.webp")
    - "blog"            -> ParsedPath(folder="blog", filename=None)
    - "meta/a/b.webp"   -> PathError (too many segments)
    - "videos/a.mp4"    -> PathError (unknown folder)

    Rules:
    - The path is split on every '/', so a trailing slash yields an empty filename ("meta/" -> "").
    - The segment count is checked before the folder, so "videos/a/b" reports the shape, not the folder.
    - Nothing touches the filesystem here.
    """
    segments = path.split(PATH_SEPARATOR)
    if len(segments) > 2:
        return PathError(
            message="Path must be in the format: folder/filename or just folder",
            value=path,
        )

    folder = segments[0]
    if not is_known_folder(folder):
        return PathError(
            message=f'Invalid folder "{folder}". Must be one of: {describe_folders()}',
            value=folder,
        )

    if len(segments) == 1:
        return ParsedPath(folder=folder)
    return ParsedPath(folder=folder, filename=segments[1])
