"""Classic data structures, searching and sorting algorithms, array puzzle solvers and a singleton."""

__version__ = "0.1.0"

__all__ = [
    "binary_tree",
    "bst",
    "linked_list",
    "problems",
    "searching",
    "singleton",
    "sorting",
    "stack",
]