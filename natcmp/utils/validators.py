"""Input validation for the command-line front end."""

import sys
from pathlib import Path


class ValidationError(Exception):
    """Raised when validation fails (exit code 1)."""
    pass


def validate_python_version() -> None:
    """Check that Python version is >= 3.10.

    Raises:
        ValidationError: If Python version is too old
    """
    version_info = sys.version_info
    if version_info < (3, 10):
        raise ValidationError(
            f"Python 3.10+ required, but running {version_info.major}.{version_info.minor}"
        )


def validate_input_directory(input_dir: Path) -> None:
    """Check that input directory exists and is readable.

    Args:
        input_dir: Path to input directory

    Raises:
        ValidationError: If directory doesn't exist or isn't readable
    """
    if not input_dir.exists():
        raise ValidationError(f"Input directory not found: {input_dir}")

    if not input_dir.is_dir():
        raise ValidationError(f"Input path is not a directory: {input_dir}")

    # Try to list directory to check readability
    try:
        next(input_dir.iterdir(), None)
    except PermissionError:
        raise ValidationError(f"Input directory not readable: {input_dir}")


def validate_names_file(names_file: Path) -> None:
    """Check that a names file exists ("-" means stdin and always passes).

    Raises:
        ValidationError: If path doesn't exist or isn't a file
    """
    if str(names_file) == "-":
        return

    if not names_file.exists():
        raise ValidationError(f"Names file not found: {names_file}")

    if not names_file.is_file():
        raise ValidationError(f"Names path is not a file: {names_file}")


def validate_filename(name: str, source: str) -> None:
    """Check that ``name`` is a bare filename, not a path.

    Args:
        name: Candidate filename
        source: Where the name came from, for error messages

    Raises:
        ValidationError: If the name contains a path separator
    """
    if "/" in name or "\\" in name:
        raise ValidationError(
            f"{source}: Paths not allowed, only filenames (got: {name})"
        )
