"""Data models and constants for SEDOL codes."""

import re
import string
from enum import Enum

# Letters permitted in a SEDOL: uppercase Latin minus the vowels
SEDOL_LETTERS = "BCDFGHJKLMNPQRSTVWXYZ"
SEDOL_DIGITS = string.digits
SEDOL_ALPHABET = SEDOL_DIGITS + SEDOL_LETTERS

# Old-format (pre-2004) SEDOLs are all digits
OLD_FORMAT_PATTERN = re.compile(r"^[0-9]{7}$")

# Weight applied to each body position
WEIGHTS = (1, 3, 1, 7, 3, 9)

# Character -> checksum value. Letters keep their base-36 value (B=11 ... Z=35),
# so the excluded vowels leave gaps in the sequence.
CHAR_VALUES = {char: int(char, 36) for char in SEDOL_ALPHABET}


class ErrorKind(str, Enum):
    """Reasons a SEDOL can be rejected."""

    LENGTH = "length"
    INVALID_CHARACTER = "invalid_character"
    OLD_FORMAT = "old_format"  # first char is a digit but the rest are not
    CHECKSUM = "checksum"


def is_old_format(sedol: str) -> bool:
    """Check if a SEDOL uses the all-digit pre-2004 format."""
    return bool(OLD_FORMAT_PATTERN.match(sedol))
