"""CLI argument parsing and entry point."""

import argparse
import sys
from pathlib import Path

from natcmp.compare import filename_compare
from natcmp.config import SortConfig
from natcmp.listing import collect_names
from natcmp.logging.logger import setup_logger
from natcmp.utils.natural_sort import natural_sort
from natcmp.utils.validators import (
    ValidationError,
    validate_filename,
    validate_python_version,
)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command-line arguments.

    Args:
        argv: Argument list (defaults to sys.argv[1:])

    Returns:
        Parsed arguments
    """
    parser = argparse.ArgumentParser(
        prog="natcmp",
        description="Sort filenames in natural order (file2 before file10)",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Sort names given on the command line
  python -m natcmp file10.txt file2.txt file1.txt

  # Sort a directory listing, newest episode first
  python -m natcmp --dir episodes --files-only --reverse

  # Sort names piped on stdin
  ls | python -m natcmp --from-file -

  # Compare two names (prints -1, 0 or 1)
  python -m natcmp --compare file007.txt file7.txt
        """
    )

    parser.add_argument(
        "names",
        nargs="*",
        help="Filenames to sort"
    )

    # Other name sources
    parser.add_argument(
        "--dir",
        type=Path,
        help="Sort the entries of this directory"
    )
    parser.add_argument(
        "--from-file",
        type=Path,
        help="Read names from a file, one per line ('-' for stdin)"
    )

    # Ordering
    parser.add_argument(
        "-r", "--reverse",
        action="store_true",
        help="Sort in descending order"
    )
    parser.add_argument(
        "-a", "--all",
        action="store_true",
        help="Include names starting with '.' when listing --dir"
    )
    parser.add_argument(
        "--files-only",
        action="store_true",
        help="Skip subdirectories when listing --dir"
    )
    parser.add_argument(
        "--compare",
        nargs=2,
        metavar=("A", "B"),
        help="Print the ordering of A relative to B as -1, 0 or 1"
    )

    # Logging
    parser.add_argument(
        "--log-file",
        type=Path,
        help="Also write a DEBUG log to this file"
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Show debug messages"
    )

    return parser.parse_args(argv)


def build_config(args: argparse.Namespace) -> SortConfig:
    """Build SortConfig from parsed arguments.

    Args:
        args: Parsed command-line arguments

    Returns:
        SortConfig instance
    """
    return SortConfig(
        names=list(args.names),
        input_dir=args.dir,
        names_file=args.from_file,
        reverse=args.reverse,
        include_hidden=args.all,
        files_only=args.files_only,
        log_file=args.log_file,
        verbose=args.verbose,
    )


def run_compare(a: str, b: str) -> int:
    """Print the sign of compare(a, b)."""
    validate_filename(a, "argument")
    validate_filename(b, "argument")

    result = filename_compare(a, b)
    print((result > 0) - (result < 0))
    return 0


def run_sort(config: SortConfig) -> int:
    """Collect names, sort them and print one per line."""
    logger = setup_logger(config.log_file, config.verbose)
    logger.debug(f"Run ID: {config.run_id}")
    logger.debug(f"Timestamp: {config.timestamp}")

    names = collect_names(config, logger)
    ordered = natural_sort(names, reverse=config.reverse)
    logger.debug(f"Sorted {len(ordered)} name(s)")

    for name in ordered:
        print(name)

    return 0


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point.

    Returns:
        Exit code (0=success, 1=validation error, 2=unexpected error)
    """
    try:
        args = parse_args(argv)
        validate_python_version()

        if args.compare:
            return run_compare(*args.compare)

        config = build_config(args)
        return run_sort(config)

    except ValidationError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        print("\nInterrupted by user", file=sys.stderr)
        return 1
    except Exception as e:
        print(f"UNEXPECTED ERROR: {e}", file=sys.stderr)
        import traceback
        traceback.print_exc()
        return 2
