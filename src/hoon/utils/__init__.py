"""Utility functions for hoon."""

from .validation import ValidationUtils

__all__ = ["ValidationUtils"]
