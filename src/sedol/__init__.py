"""
SEDOL

Validation and normalization of SEDOL security identifiers.

Public API:
- Normalizers: clean(), calc_check_digit(), validate(), is_valid(), parse_sedol(), normalize_sedol()
- Errors: SedolError, FormatError, ChecksumError
- Models: SEDOL_ALPHABET, WEIGHTS, ErrorKind
- Metrics: ValidationMetrics

Example:
    >>> import sedol
    >>> sedol.validate("BD9MZZ7")
    'BD9MZZ7'
    >>> sedol.validate(sedol.clean(" BD9-MZ-Z7?"))
    'BD9MZZ7'
    >>> sedol.calc_check_digit("BD9MZZ")
    '7'
"""

__version__ = "0.1.0"

# Export errors
from .errors import ChecksumError, FormatError, SedolError

# Export metrics
from .metrics import ValidationMetrics

# Export models and constants
from .models import SEDOL_ALPHABET, WEIGHTS, ErrorKind, is_old_format

# Export all normalizers
from .normalizers import calc_check_digit, clean, is_valid, normalize_sedol, parse_sedol, validate

__all__ = [
    # Version
    "__version__",
    # Models and constants
    "SEDOL_ALPHABET",
    "WEIGHTS",
    "ErrorKind",
    "is_old_format",
    # Errors
    "SedolError",
    "FormatError",
    "ChecksumError",
    # Normalizers
    "clean",
    "calc_check_digit",
    "validate",
    "is_valid",
    "parse_sedol",
    "normalize_sedol",
    # Metrics
    "ValidationMetrics",
]
