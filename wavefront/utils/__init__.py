"""Utility exports."""

from .ascii import ascii_gradient

__all__ = ["ascii_gradient"]
