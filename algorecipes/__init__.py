"""Array, matrix, backtracking and hashing algorithm recipes."""

__version__ = "0.1.0"
__all__ = ["arrays", "matrix", "backtracking", "hashing"]