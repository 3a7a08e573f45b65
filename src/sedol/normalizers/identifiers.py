"""SEDOL check digit calculation, validation and normalization."""

import logging
from typing import Optional

from .. import config
from ..errors import ChecksumError, FormatError, SedolError
from ..metrics import ValidationMetrics
from ..models import CHAR_VALUES, SEDOL_DIGITS, WEIGHTS, is_old_format
from .text import clean

logger = logging.getLogger(__name__)


def _check_body(body: str) -> None:
    """Raise FormatError for the first body character outside the SEDOL alphabet."""
    for position, char in enumerate(body, start=1):
        if char not in CHAR_VALUES:
            raise FormatError.invalid_character(char, position)


def calc_check_digit(body: str) -> str:
    """
    Calculate the check digit for a 6-character SEDOL body.

    The check digit is calculated as:
    (10 - (sum of (value * weight) mod 10)) mod 10
    where weights are 1,3,1,7,3,9 for positions 1-6, digits are worth their
    face value and letters their base-36 value (B=11 ... Z=35).

    Args:
        body: The first 6 characters of a SEDOL, e.g. "BD9MZZ"

    Returns:
        The check digit as a single character, e.g. "7"

    Raises:
        FormatError: If body is not 6 characters from the SEDOL alphabet
    """
    if len(body) != config.BODY_LENGTH:
        raise FormatError.length(len(body), config.BODY_LENGTH)
    _check_body(body)

    total = sum(CHAR_VALUES[char] * weight for char, weight in zip(body, WEIGHTS))
    return str((10 - total % 10) % 10)


def _check_shape(candidate: str, enforce_old_format: bool) -> None:
    if len(candidate) != config.SEDOL_LENGTH:
        raise FormatError.length(len(candidate), config.SEDOL_LENGTH)
    _check_body(candidate[: config.BODY_LENGTH])

    check_char = candidate[config.BODY_LENGTH]
    if check_char not in SEDOL_DIGITS:
        raise FormatError.invalid_check_character(check_char, config.SEDOL_LENGTH)

    if enforce_old_format and candidate[0] in SEDOL_DIGITS and not is_old_format(candidate):
        raise FormatError.old_format()


def validate(candidate: str, enforce_old_format: bool = False) -> str:
    """
    Check that a string is a well-formed SEDOL with a correct check digit.

    Checks are made in this order:
    1. the length is 7
    2. the first 6 characters belong to the SEDOL alphabet
    3. the 7th character is a digit
    4. (optional) all characters are digits when the first one is
    5. the 7th character equals the computed check digit

    No cleaning is done: lowercase or padded input is rejected. Run clean()
    first for raw data.

    Args:
        candidate: The string to validate
        enforce_old_format: Reject SEDOLs that start with a digit but are not all digits

    Returns:
        The candidate, unchanged

    Raises:
        FormatError: If the length, characters or format are wrong
        ChecksumError: If the check digit does not match
    """
    _check_shape(candidate, enforce_old_format)

    expected = calc_check_digit(candidate[: config.BODY_LENGTH])
    actual = candidate[config.BODY_LENGTH]
    if actual != expected:
        raise ChecksumError(expected, actual)
    return candidate


def is_valid(candidate: str, enforce_old_format: bool = False) -> bool:
    """Check if a string is a valid SEDOL."""
    try:
        validate(candidate, enforce_old_format=enforce_old_format)
    except SedolError:
        return False
    return True


def parse_sedol(value: str, validate_checksum: bool = True) -> str:
    """
    Clean a raw SEDOL and validate it, raising on failure.

    Honours config.SKIP_CHECKSUM_VALIDATION and config.ENFORCE_OLD_FORMAT.

    Args:
        value: Raw SEDOL string (separators, whitespace and lowercase are tolerated)
        validate_checksum: If True, validate the check digit

    Returns:
        The canonical 7-character SEDOL

    Raises:
        FormatError: If the cleaned value does not have the shape of a SEDOL
        ChecksumError: If the check digit does not match
    """
    sedol = clean(value)
    if validate_checksum and not config.SKIP_CHECKSUM_VALIDATION:
        return validate(sedol, enforce_old_format=config.ENFORCE_OLD_FORMAT)
    _check_shape(sedol, config.ENFORCE_OLD_FORMAT)
    return sedol


def normalize_sedol(
    value: Optional[str],
    validate_checksum: bool = True,
    metrics: Optional[ValidationMetrics] = None,
) -> Optional[str]:
    """
    Normalize a raw SEDOL to its canonical 7-character form.

    Args:
        value: Raw SEDOL string (separators, whitespace and lowercase are tolerated)
        validate_checksum: If True, validate the check digit (unless SKIP_CHECKSUM_VALIDATION is set)
        metrics: Optional collector the outcome is recorded in

    Returns:
        Normalized SEDOL or None if invalid
    """
    if not value:
        return None

    try:
        sedol = parse_sedol(str(value), validate_checksum=validate_checksum)
    except SedolError as e:
        logger.debug(f"Invalid SEDOL {value!r}: {e}")
        if metrics is not None:
            metrics.record(str(value), e)
        return None

    if metrics is not None:
        metrics.record(sedol)
    return sedol
