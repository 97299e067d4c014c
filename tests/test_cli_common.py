from __future__ import annotations

import sys

import pytest

import assetlink.adapters.filesystem as filesystem
from assetlink.cli_common import format_usage, parse_cli_args
from assetlink.defaults import DEFAULT_ASSETS_ROOT
from assetlink.generate_link import cli


def test_parse_single_path():
    ctx = parse_cli_args(["meta/cover.webp"])
    assert ctx.paths == ["meta/cover.webp"]
    assert ctx.show_help is False


def test_parse_no_arguments():
    ctx = parse_cli_args([])
    assert ctx.paths == []
    assert ctx.show_help is False


def test_help_flag_is_detected_after_paths():
    ctx = parse_cli_args(["meta/cover.webp", "blog", "--help"])
    assert ctx.show_help is True
    assert ctx.paths == ["meta/cover.webp", "blog"]


def test_unknown_options_count_as_paths():
    ctx = parse_cli_args(["--he"])
    assert ctx.show_help is False
    assert ctx.paths == ["--he"]


def test_usage_lists_examples_and_folders():
    usage = format_usage()
    assert usage.startswith("usage: generate-link [-h] <path>")
    assert "  generate-link meta/Linkyoo-Editor-Cover.webp" in usage
    assert "  generate-link placeholders/kalya-placeholder.webp" in usage
    assert "meta, placeholders, blog" in usage


def test_console_entry_exits_with_main_status(monkeypatch, capsys):
    monkeypatch.setattr(sys, "argv", ["generate-link", "blog/post.webp"])
    with pytest.raises(SystemExit) as exc_info:
        cli()
    assert exc_info.value.code == 0
    assert capsys.readouterr().out.strip().endswith("/linkyoo/blog/post.webp")


def test_console_entry_fails_on_bad_folder(monkeypatch, capsys):
    monkeypatch.setattr(sys, "argv", ["generate-link", "videos/intro.mp4"])
    with pytest.raises(SystemExit) as exc_info:
        cli()
    assert exc_info.value.code == 1
    assert 'Invalid folder "videos"' in capsys.readouterr().err


@pytest.mark.parametrize("argv", [["-hx"], ["--help=meta"], ["--"]])
def test_help_lookalikes_and_double_dash_are_paths(argv: list[str]):
    ctx = parse_cli_args(argv)
    assert ctx.show_help is False
    assert ctx.paths == argv


def test_usage_names_the_assets_root():
    assert f"Folders are read from {DEFAULT_ASSETS_ROOT}" in format_usage()


def test_console_entry_reports_missing_folder_on_stderr(monkeypatch, capsys, tmp_path):
    monkeypatch.setattr(filesystem, "DEFAULT_ASSETS_ROOT", tmp_path)
    monkeypatch.setattr(sys, "argv", ["generate-link", "blog"])
    with pytest.raises(SystemExit) as exc_info:
        cli()
    captured = capsys.readouterr()
    assert exc_info.value.code == 0
    assert 'No files found in "blog" folder.' in captured.out
    assert "Error: Folder 'blog' not found" in captured.err
