"""Classic data structures and algorithms: searching, expressions, stacks, linked lists and trees."""

__version__ = "0.1.0"