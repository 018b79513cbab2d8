"""Name sources: command line, names file and directory listing."""

import logging
import sys
from pathlib import Path
from typing import TextIO

from natcmp.config import SortConfig
from natcmp.utils.validators import (
    ValidationError,
    validate_filename,
    validate_input_directory,
    validate_names_file,
)


def discover_names(
    input_dir: Path,
    include_hidden: bool = False,
    files_only: bool = False
) -> list[str]:
    """List entry names in a directory (top-level only).

    Args:
        input_dir: Directory to scan
        include_hidden: Keep names starting with "."
        files_only: Skip subdirectories and other non-files

    Returns:
        Entry names, in directory order
    """
    names = []

    for entry in input_dir.iterdir():
        if not include_hidden and entry.name.startswith("."):
            continue
        if files_only and not entry.is_file():
            continue
        names.append(entry.name)

    return names


def read_names(stream: TextIO, source: str = "names file") -> list[str]:
    """Parse names from a text stream.

    Args:
        stream: Open text stream
        source: Label used in error messages

    Returns:
        List of names (may include duplicates)

    Format:
        - One filename per line
        - Lines starting with # are ignored (comments)
        - Blank lines are ignored
        - Surrounding whitespace is stripped

    Raises:
        ValidationError: If a line holds a path instead of a filename
    """
    names = []

    for line_num, line in enumerate(stream, start=1):
        line = line.strip()

        if not line or line.startswith("#"):
            continue

        validate_filename(line, f"{source} line {line_num}")
        names.append(line)

    return names


def parse_names_file(names_file: Path) -> list[str]:
    """Parse a names file, or stdin when ``names_file`` is "-"."""
    if str(names_file) == "-":
        return read_names(sys.stdin, "stdin")

    with open(names_file, "r", encoding="utf-8", errors="surrogateescape") as f:
        return read_names(f, names_file.name)


def collect_names(config: SortConfig, logger: logging.Logger) -> list[str]:
    """Gather names from every source configured.

    Args:
        config: Run configuration
        logger: Logger for progress messages

    Returns:
        Names in source order: command line, names file, directory

    Raises:
        ValidationError: If a source is invalid or no names were found
    """
    names = []

    for name in config.names:
        validate_filename(name, "argument")
        names.append(name)
    if config.names:
        logger.debug(f"{len(config.names)} name(s) from arguments")

    if config.names_file is not None:
        validate_names_file(config.names_file)
        from_file = parse_names_file(config.names_file)
        logger.debug(f"{len(from_file)} name(s) from {config.names_file}")
        names.extend(from_file)

    if config.input_dir is not None:
        validate_input_directory(config.input_dir)
        from_dir = discover_names(
            config.input_dir,
            include_hidden=config.include_hidden,
            files_only=config.files_only
        )
        logger.debug(f"{len(from_dir)} name(s) from {config.input_dir}")
        names.extend(from_dir)

    if not names:
        raise ValidationError("No names to sort")

    return names
