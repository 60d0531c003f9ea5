"""Classic data structures and algorithms for teaching."""

__version__ = "1.0.0"

__all__ = [
    "avl",
    "bst",
    "image",
    "labyrinth",
    "linked_list",
    "maze",
    "misc",
    "parenthesis",
    "rbtree",
    "sorting",
    "textfile",
    "tree",
]