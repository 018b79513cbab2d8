"""Natural sorting for filenames (e.g., track2 before track10)."""

from functools import cmp_to_key
from typing import Iterable

from natcmp.compare import filename_compare


# Key for sorted()/list.sort(): sorted(files, key=natural_sort_key)
natural_sort_key = cmp_to_key(filename_compare)


def natural_sort(items: Iterable[str], reverse: bool = False) -> list[str]:
    """Sort filenames using natural (human-friendly) ordering.

    Args:
        items: Filenames to sort
        reverse: Sort in descending order

    Returns:
        New sorted list. Names that compare equal keep their input order.

    Example:
        >>> natural_sort(["track10.mp3", "track2.mp3", "track1.mp3"])
        ['track1.mp3', 'track2.mp3', 'track10.mp3']
    """
    return sorted(items, key=natural_sort_key, reverse=reverse)
