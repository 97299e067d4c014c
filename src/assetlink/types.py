from typing import Annotated, NewType

from annotated_types import Predicate

from assetlink.defaults import DEFAULT_FOLDERS


def _is_known_folder(name) -> bool:
    if not isinstance(name, str):
        return False
    return name in DEFAULT_FOLDERS


TFolder = Annotated[NewType("TFolder", str), Predicate(_is_known_folder)]
"""
TFolder is a folder name that has already been checked against DEFAULT_FOLDERS.
Only a validated TFolder may be turned into a link or resolved on disk.
"""
