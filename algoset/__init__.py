"""Classic algorithms on arrays, strings, bits, linked lists, binary trees and intervals."""

__version__ = "0.1.0"

__all__ = [
    "arrays",
    "bits",
    "counting",
    "greedy",
    "intervals",
    "linked_list",
    "numeric",
    "text",
    "tree",
]