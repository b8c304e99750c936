"""Embedding clustering, column search and near-duplicate detection."""

__version__ = "0.1.0"
__all__ = ["vectors", "clustering", "query", "index", "same_search"]