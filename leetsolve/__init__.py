"""Solutions to classic algorithm problems on arrays, strings, subsets, linked lists, trees and heaps."""

__version__ = "0.1.0"
__all__ = ["arrays", "strings", "subsets", "linked_list", "tree", "heaps"]