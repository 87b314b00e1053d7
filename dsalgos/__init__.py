"""Arrays, matrices, expressions, linked lists, polynomials, graphs and trees."""

__version__ = "0.1.0"

__all__ = [
    "arrays",
    "doubly",
    "expressions",
    "graphs",
    "matrix",
    "polynomial",
    "singly",
    "sparse",
    "trees",
]