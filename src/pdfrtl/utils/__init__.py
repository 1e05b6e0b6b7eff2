"""Utility modules."""

from pdfrtl.utils.text import swap_parentheses

__all__ = [
    "swap_parentheses",
]
