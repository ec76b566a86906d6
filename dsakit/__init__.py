"""Classic data structures and algorithms: searching, string editing, binary trees, heaps and graphs."""

__version__ = "0.1.0"