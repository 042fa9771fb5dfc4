"""Classic data structures and algorithms: linked lists, stacks, queues, searching, dynamic programming, backtracking and bit tricks."""

__version__ = "0.1.0"

__all__ = [
    "backtracking",
    "bits",
    "bst",
    "circular_list",
    "doubly_linked_list",
    "dynamic",
    "expressions",
    "linked_list",
    "list_merge",
    "pattern_search",
    "queues",
    "sequences",
    "sorting",
    "stacks",
    "unrolled_list",
]