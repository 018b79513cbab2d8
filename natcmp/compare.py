"""Natural-order filename comparison (e.g., file2.txt before file10.txt)."""

import sys
from dataclasses import dataclass
from enum import Enum
from typing import Iterator


# Longest filename component the text comparison looks at (bytes)
NAME_MAX = 255


class PartKind(Enum):
    """Character class of a run inside a filename stem."""

    DIGIT = "digit"
    NONDIGIT = "nondigit"
    EMPTY = "empty"


@dataclass(frozen=True)
class Part:
    """A maximal run of same-class characters."""

    kind: PartKind
    text: str = ""


EMPTY_PART = Part(PartKind.EMPTY)


def _is_digit(char: str) -> bool:
    # ASCII only; str.isdigit() would accept "٣" or "²"
    return "0" <= char <= "9"


def _kind_of(char: str) -> PartKind:
    return PartKind.DIGIT if _is_digit(char) else PartKind.NONDIGIT


def next_part(text: str, pos: int = 0) -> tuple[Part, int]:
    """Read the run of digits or non-digits starting at ``pos``.

    Args:
        text: String being scanned
        pos: Cursor into ``text``

    Returns:
        Tuple of (part, new cursor). At end of input the part is
        ``EMPTY_PART`` and the cursor is returned unchanged.

    Example:
        >>> next_part("track10.mp3")
        (Part(kind=<PartKind.NONDIGIT: 'nondigit'>, text='track'), 5)
    """
    if pos >= len(text):
        return EMPTY_PART, pos

    kind = _kind_of(text[pos])
    end = pos + 1
    while end < len(text) and _kind_of(text[end]) is kind:
        end += 1

    return Part(kind, text[pos:end]), end


def iter_parts(text: str) -> Iterator[Part]:
    """Lazily yield the digit/non-digit runs of ``text`` (EMPTY excluded)."""
    pos = 0
    while True:
        part, pos = next_part(text, pos)
        if part.kind is PartKind.EMPTY:
            return
        yield part


def last_index_of(text: str, needle: str) -> int:
    """Return the index of the last ``needle`` in ``text``, or -1.

    The -1 sentinel is what :func:`split_extension` checks to keep a
    dotless name whole as both stem and extension.
    """
    return text.rfind(needle)


def split_extension(name: str) -> tuple[str, str]:
    """Split a filename into (stem, extension) at the last dot.

    Args:
        name: Filename (no directories)

    Returns:
        Tuple of (stem, extension), neither including the dot

    Names without a dot are not split: both stem and extension are the
    whole name. This keeps ``compare("abc", "abc.")`` non-zero, since the
    extensions "abc" and "" still differ.

    Example:
        >>> split_extension("archive.tar.gz")
        ('archive.tar', 'gz')
        >>> split_extension("README")
        ('README', 'README')
    """
    dot = last_index_of(name, ".")
    if dot < 0:
        return name, name
    return name[:dot], name[dot + 1:]


def _encode(text: str) -> bytes:
    # Undecodable OS filenames arrive as lone surrogates (os.fsdecode)
    return text.encode("utf-8", "surrogateescape")


def _sign(a: bytes, b: bytes) -> int:
    return (a > b) - (a < b)


def compare_text(a: str, b: str) -> int:
    """Compare two runs ignoring ASCII case, over at most NAME_MAX bytes.

    Returns:
        -1, 0 or 1
    """
    # bytes.lower() folds A-Z only
    return _sign(_encode(a)[:NAME_MAX].lower(), _encode(b)[:NAME_MAX].lower())


def _int_max_str_digits() -> int:
    # 0 means unlimited; the limit only exists on 3.10.7+
    getter = getattr(sys, "get_int_max_str_digits", None)
    return getter() if getter is not None else 0


def compare_numbers(a: str, b: str) -> int:
    """Compare two ASCII digit runs by numeric value.

    Returns the signed difference while both values fit the interpreter's
    int string-conversion limit. Longer runs are ordered by digit count,
    then digit by digit, and only the sign is returned.
    """
    digits_a = a.lstrip("0")
    digits_b = b.lstrip("0")

    limit = _int_max_str_digits()
    if not limit or max(len(digits_a), len(digits_b)) <= limit:
        return int(digits_a or "0") - int(digits_b or "0")

    if len(digits_a) != len(digits_b):
        return (len(digits_a) > len(digits_b)) - (len(digits_a) < len(digits_b))
    return (digits_a > digits_b) - (digits_a < digits_b)


def compare_parts(a: Part, b: Part) -> int:
    """Compare two non-empty parts.

    Two digit runs compare by numeric value (leading zeros ignored) and
    the signed difference is returned. Any other pairing, including a
    digit run against a letter run, compares as case-insensitive text.
    """
    if a.kind is PartKind.DIGIT and b.kind is PartKind.DIGIT:
        return compare_numbers(a.text, b.text)
    return compare_text(a.text, b.text)


def filename_compare(a: str, b: str) -> int:
    """Compare two filenames in natural order.

    The stems are walked run by run. The first unequal pair of runs
    decides; a stem that runs out of runs first sorts first. Only when
    every run compares equal are the extensions compared, byte-wise and
    case-sensitively.

    Args:
        a: First filename
        b: Second filename

    Returns:
        Negative if ``a`` sorts before ``b``, zero if they are equal,
        positive otherwise

    Example:
        >>> filename_compare("file2.txt", "file10.txt") < 0
        True
        >>> filename_compare("file007.txt", "file7.txt")
        0
    """
    stem_a, ext_a = split_extension(a)
    stem_b, ext_b = split_extension(b)

    pos_a = pos_b = 0
    while True:
        part_a, pos_a = next_part(stem_a, pos_a)
        part_b, pos_b = next_part(stem_b, pos_b)

        if part_a.kind is PartKind.EMPTY:
            if part_b.kind is PartKind.EMPTY:
                break
            return -1
        if part_b.kind is PartKind.EMPTY:
            return 1

        result = compare_parts(part_a, part_b)
        if result != 0:
            return result

    return _sign(_encode(ext_a), _encode(ext_b))


compare = filename_compare
