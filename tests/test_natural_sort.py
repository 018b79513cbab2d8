"""Tests for the sort adapters."""
from __future__ import annotations

from natcmp import natural_sort, natural_sort_key


def test_natural_sort_orders_numbers_by_value() -> None:
    files = ["track10.mp3", "track2.mp3", "track1.mp3"]
    assert natural_sort(files) == ["track1.mp3", "track2.mp3", "track10.mp3"]


def test_natural_sort_reverse() -> None:
    files = ["track1.mp3", "track10.mp3", "track2.mp3"]
    assert natural_sort(files, reverse=True) == ["track10.mp3", "track2.mp3", "track1.mp3"]


def test_natural_sort_mixed_case_and_extensions() -> None:
    files = ["b10.png", "B2.png", "a.png", "a.PNG", "a1.png"]
    assert natural_sort(files) == ["a.PNG", "a.png", "a1.png", "B2.png", "b10.png"]


def test_equal_names_keep_input_order() -> None:
    """file007 and file7 compare equal, so the sort leaves them as given."""

    assert natural_sort(["file7.txt", "file007.txt"]) == ["file7.txt", "file007.txt"]
    assert natural_sort(["file007.txt", "file7.txt"]) == ["file007.txt", "file7.txt"]


def test_natural_sort_accepts_any_iterable() -> None:
    assert natural_sort(iter({"x2", "x1"})) == ["x1", "x2"]


def test_natural_sort_key_with_list_sort() -> None:
    files = ["img12.jpg", "img2.jpg", "IMG1.jpg"]
    files.sort(key=natural_sort_key)
    assert files == ["IMG1.jpg", "img2.jpg", "img12.jpg"]
