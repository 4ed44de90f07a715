"""Classic algorithms for integer arrays and graphs."""

__version__ = "0.1.0"
__all__ = [
    "adjacency",
    "arrays",
    "bridges",
    "cycles",
    "grid",
    "mst",
    "shortest",
    "subarrays",
    "toposort",
    "traversal",
]