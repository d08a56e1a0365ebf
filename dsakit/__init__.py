"""Classic data structures and algorithms: stacks, queues, linked lists,
graphs, binary trees, searching, sorting, and array and string problems."""

__version__ = "0.1.0"

__all__ = [
    "arrays",
    "boundedqueue",
    "graph",
    "linked_list",
    "searching",
    "sorting",
    "stack",
    "strings",
    "tree",
]