"""Classic data-structure and algorithm routines on plain Python values."""

__version__ = "0.1.0"
__all__ = [
    "combinatorics",
    "linked_list",
    "matrix",
    "recursion",
    "searching",
    "sorting",
    "strings",
]