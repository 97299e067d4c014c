from __future__ import annotations

import logging
import sys

from .adapters.filesystem import FileSystemSource
from .cli_common import Context, format_usage, parse_cli_args
from .core import (
    Formatter,
    FolderLister,
    SourceAdapter,
    StderrWriter,
    StdoutWriter,
    Writer,
    generate_link,
)
from .formatters import TextFormatter
from .types import TFolder
from .util import PathError, parse_asset_path

EXIT_OK = 0
EXIT_USAGE = 1


def main(
    *,
    argv: list[str] | None = None,
    writer: Writer | None = None,
    err_writer: Writer | None = None,
    source: SourceAdapter | None = None,
) -> int:
    if argv is None:
        argv = sys.argv[1:]
    out_writer = writer or StdoutWriter()
    err_out = err_writer or StderrWriter()
    formatter = TextFormatter()

    ctx: Context = parse_cli_args(argv)
    if ctx.show_help or not ctx.paths:
        out_writer.write(format_usage())
        return EXIT_OK

    if len(ctx.paths) != 1:
        err_out.write(
            formatter.error("Please provide a single path in the format: folder/filename or just folder")
        )
        out_writer.write(format_usage())
        return EXIT_USAGE

    parsed = parse_asset_path(ctx.paths[0])
    if isinstance(parsed, PathError):
        err_out.write(formatter.error(parsed.message))
        out_writer.write(format_usage())
        return EXIT_USAGE

    if parsed.is_folder_only:
        _print_folder(parsed.folder, FolderLister(source or FileSystemSource()), formatter, out_writer)
    else:
        out_writer.write(formatter.link(generate_link(parsed.folder, parsed.filename)))
    return EXIT_OK


def _print_folder(folder: TFolder, lister: FolderLister, formatter: Formatter, writer: Writer) -> None:
    files = lister.list_files(folder)
    if not files:
        writer.write(formatter.no_files(folder))
        return
    writer.write(formatter.listing_header(folder, len(files)))
    for index, name in enumerate(files, start=1):
        writer.write(formatter.listing_entry(index, name, generate_link(folder, name)))


def cli() -> None:
    # Handler lives only for this run so it writes to the sys.stderr current at call time.
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter("Error: %(message)s"))
    handler.setLevel(logging.WARNING)
    package_logger = logging.getLogger("assetlink")
    package_logger.addHandler(handler)
    try:
        code = main()
    finally:
        package_logger.removeHandler(handler)
    sys.exit(code)


if __name__ == "__main__":
    cli()
