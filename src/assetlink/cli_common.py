from __future__ import annotations

import argparse
import textwrap
from dataclasses import dataclass, field

from assetlink.defaults import (
    DEFAULT_ASSETS_ROOT,
    DEFAULT_FOLDERS,
    DEFAULT_PROJECT_PATH,
    DEFAULT_REPO_NAME,
    DEFAULT_REPO_OWNER,
    EXAMPLE_PATHS,
    HELP_FLAGS,
    PROG_NAME,
)


@dataclass(slots=True)
class Context:
    paths: list[str] = field(default_factory=list)
    show_help: bool = False


def build_parser() -> argparse.ArgumentParser:
    examples = "\n".join(f"  {PROG_NAME} {example}" for example in EXAMPLE_PATHS)
    epilog = textwrap.dedent(
        """
        EXAMPLES
        {examples}

        AVAILABLE FOLDERS
          {folders}

        NOTE ABOUT FOLDER LISTING
        A bare folder prints a link for every file in the local '{project}/<folder>' directory, newest first.
        Folders are read from {root}
        Hidden files and subdirectories are skipped.
        """
    ).format(
        examples=examples,
        folders=", ".join(DEFAULT_FOLDERS),
        project=DEFAULT_PROJECT_PATH,
        root=DEFAULT_ASSETS_ROOT,
    )

    # The parser only renders usage; parse_cli_args classifies tokens itself.
    parser = argparse.ArgumentParser(
        prog=PROG_NAME,
        usage="%(prog)s [-h] <path>",
        description=f"Generates raw GitHub content URLs for assets in the {DEFAULT_REPO_OWNER}/{DEFAULT_REPO_NAME} repository",
        add_help=False,
        allow_abbrev=False,
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=epilog,
    )

    parser.add_argument(
        "paths",
        type=str,
        nargs="*",
        metavar="path",
        default=[],
        help="The path to the asset (folder/filename), or just a folder to list all of its files.",
    )
    parser.add_argument(
        "-h",
        "--help",
        action="store_true",
        dest="show_help",
        help="Show this help message and exit.",
    )
    return parser


def format_usage() -> str:
    return build_parser().format_help()


def parse_cli_args(argv: list[str]) -> Context:
    # Exact token match: argparse would exit on "-hx" or "--help=meta" and would swallow "--".
    return Context(
        paths=[tok for tok in argv if tok not in HELP_FLAGS],
        show_help=any(tok in HELP_FLAGS for tok in argv),
    )
