"""
Fixed coordinates of the remote asset repository, plus the local layout the folder listing reads from.
"""

from pathlib import Path

# region ---[ Remote Repository ]---

RAW_CONTENT_BASE = "https://raw.githubusercontent.com"
DEFAULT_REPO_OWNER = "xephas-official"
DEFAULT_REPO_NAME = "AppAssets"
DEFAULT_BRANCH = "main"
DEFAULT_PROJECT_PATH = "linkyoo"

DEFAULT_FOLDERS: tuple[str, ...] = (
    "meta",
    "placeholders",
    "blog",
)

# endregion ---[ Remote Repository ]---
# region ---[ Local Layout ]---

# src/assetlink/defaults.py -> checkout root, where the asset folders live under `linkyoo/`.
DEFAULT_ASSETS_ROOT: Path = Path(__file__).resolve().parents[2] / DEFAULT_PROJECT_PATH

HIDDEN_FILE_PREFIX = "."

# endregion ---[ Local Layout ]---
# region ---[ Default CLI Options ]---

PROG_NAME = "generate-link"
PATH_SEPARATOR = "/"
HELP_FLAGS: tuple[str, ...] = ("-h", "--help")

EXAMPLE_PATHS: tuple[str, ...] = (
    "meta/Linkyoo-Editor-Cover.webp",
    "blog/Linkyoo-Editor-Blog.webp",
    "placeholders/kalya-placeholder.webp",
    "meta",
)

# endregion ---[ Default CLI Options ]---
