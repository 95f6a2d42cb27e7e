"""A doubly linked list with index-based operations and optional element destructors."""

__version__ = "1.0.0"
__all__ = ["linked_list"]