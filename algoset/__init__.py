"""Classic algorithm and data-structure exercises, grouped by theme."""

__version__ = "0.1.0"

__all__ = [
    "designs",
    "grids",
    "linkedlist",
    "numbers",
    "ordering",
    "sequences",
    "substrings",
    "sums",
    "text",
    "trees",
]