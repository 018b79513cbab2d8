"""Natural-order filename comparison."""

from natcmp.compare import (
    NAME_MAX,
    Part,
    PartKind,
    compare,
    filename_compare,
    iter_parts,
    next_part,
    split_extension,
)
from natcmp.utils.natural_sort import natural_sort, natural_sort_key

__all__ = [
    "NAME_MAX",
    "Part",
    "PartKind",
    "compare",
    "filename_compare",
    "iter_parts",
    "natural_sort",
    "natural_sort_key",
    "next_part",
    "split_extension",
]
