"""Text cleanup for raw SEDOL strings (separators, whitespace, case)."""

from ..models import SEDOL_ALPHABET

_ALLOWED = frozenset(SEDOL_ALPHABET)


def clean(value: str) -> str:
    """
    Strip everything that cannot appear in a SEDOL.

    ASCII letters are upper-cased first, then any character outside the SEDOL
    alphabet is dropped (whitespace, punctuation, vowels, non-ASCII). Nothing
    is ever substituted, so the result is never longer than the input.

    Args:
        value: Raw string, e.g. " BD9-MZ-Z7?"

    Returns:
        Cleaned string, e.g. "BD9MZZ7" (possibly empty)
    """
    # Non-ASCII is dropped before upper-casing: 'ſ'.upper() == 'S'
    return "".join(char.upper() for char in value if char.isascii() and char.upper() in _ALLOWED)
