"""Classic searching, sorting, array and dynamic-programming algorithms."""

__version__ = "0.1.0"

__all__ = [
    "arrays",
    "chains",
    "knapsack",
    "palindromes",
    "searching",
    "sorting",
    "subsequences",
]