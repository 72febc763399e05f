"""Classic data-structure and algorithm exercises: arrays, sorting, linked lists, stacks and strings."""

__version__ = "0.1.0"
__all__ = [
    "arrays",
    "sorting",
    "linked",
    "list_problems",
    "circular",
    "doubly",
    "stack",
    "strings",
]