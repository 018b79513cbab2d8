"""Tests for name sources."""
from __future__ import annotations

import io
import logging
from pathlib import Path

import pytest

from natcmp.config import SortConfig
from natcmp.listing import collect_names, discover_names, parse_names_file, read_names
from natcmp.utils.validators import ValidationError


@pytest.fixture
def logger() -> logging.Logger:
    return logging.getLogger("listing-test")


@pytest.fixture
def listing_dir(tmp_path: Path) -> Path:
    for name in ["ep10.mkv", "ep2.mkv", ".hidden"]:
        (tmp_path / name).write_text("")
    (tmp_path / "extras").mkdir()
    return tmp_path


def test_discover_names_skips_hidden(listing_dir: Path) -> None:
    assert sorted(discover_names(listing_dir)) == ["ep10.mkv", "ep2.mkv", "extras"]


def test_discover_names_include_hidden_files_only(listing_dir: Path) -> None:
    names = discover_names(listing_dir, include_hidden=True, files_only=True)
    assert sorted(names) == [".hidden", "ep10.mkv", "ep2.mkv"]


def test_read_names_skips_comments_and_blanks() -> None:
    stream = io.StringIO("# header\n\n  b10.txt  \nb2.txt\n# trailing\n")
    assert read_names(stream) == ["b10.txt", "b2.txt"]


def test_read_names_keeps_inner_spaces_and_duplicates() -> None:
    stream = io.StringIO("my file 2.txt\nmy file 2.txt\n")
    assert read_names(stream) == ["my file 2.txt", "my file 2.txt"]


def test_read_names_rejects_paths_with_line_number() -> None:
    stream = io.StringIO("ok.txt\n# comment\nsub/bad.txt\n")
    with pytest.raises(ValidationError, match="line 3"):
        read_names(stream, "names.txt")


def test_parse_names_file_from_stdin(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr("sys.stdin", io.StringIO("x10\nx9\n"))
    assert parse_names_file(Path("-")) == ["x10", "x9"]


def test_collect_names_merges_sources(
    tmp_path: Path, listing_dir: Path, logger: logging.Logger
) -> None:
    names_file = tmp_path / "names.txt"
    names_file.write_text("from_file1\n")

    config = SortConfig(
        names=["arg1"],
        names_file=names_file,
        input_dir=listing_dir,
        files_only=True,
    )
    names = collect_names(config, logger)

    assert names[:2] == ["arg1", "from_file1"]
    assert sorted(names[2:]) == ["ep10.mkv", "ep2.mkv", "names.txt"]


def test_collect_names_requires_a_name(tmp_path: Path, logger: logging.Logger) -> None:
    with pytest.raises(ValidationError, match="No names"):
        collect_names(SortConfig(input_dir=tmp_path), logger)


def test_collect_names_validates_arguments(logger: logging.Logger) -> None:
    with pytest.raises(ValidationError, match="argument"):
        collect_names(SortConfig(names=["a/b"]), logger)
