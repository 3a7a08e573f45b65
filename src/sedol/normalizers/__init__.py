"""Normalization and validation functions for SEDOL codes."""

from .identifiers import calc_check_digit, is_valid, normalize_sedol, parse_sedol, validate
from .text import clean

__all__ = [
    # Identifiers
    "calc_check_digit",
    "validate",
    "is_valid",
    "parse_sedol",
    "normalize_sedol",
    # Text
    "clean",
]
