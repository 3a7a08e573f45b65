"""Exceptions raised when a SEDOL fails validation."""

from typing import Optional

from .models import ErrorKind


class SedolError(ValueError):
    """Base class for SEDOL validation failures.

    Every subclass renders a message that can be shown to a user as-is.
    """

    kind: ErrorKind

    def __init__(self, kind: ErrorKind, message: str):
        super().__init__(message)
        self.kind = kind
        self.message = message

    def __str__(self) -> str:
        return self.message

    def __reduce__(self):
        return type(self), (self.kind, self.message)


class FormatError(SedolError):
    """Input does not have the shape of a SEDOL (length or characters).

    Attributes:
        kind: LENGTH, INVALID_CHARACTER or OLD_FORMAT
        character: Offending character, for INVALID_CHARACTER
        position: 1-based position of the offending character
        expected_length: Required length, for LENGTH
        actual_length: Length received, for LENGTH
    """

    def __init__(
        self,
        kind: ErrorKind,
        message: str,
        character: Optional[str] = None,
        position: Optional[int] = None,
        expected_length: Optional[int] = None,
        actual_length: Optional[int] = None,
    ):
        super().__init__(kind, message)
        self.character = character
        self.position = position
        self.expected_length = expected_length
        self.actual_length = actual_length

    def __reduce__(self):
        return type(self), (
            self.kind,
            self.message,
            self.character,
            self.position,
            self.expected_length,
            self.actual_length,
        )

    @classmethod
    def length(cls, actual: int, expected: int) -> "FormatError":
        return cls(
            ErrorKind.LENGTH,
            f"invalid length {actual}, expected {expected}",
            expected_length=expected,
            actual_length=actual,
        )

    @classmethod
    def invalid_character(cls, character: str, position: int) -> "FormatError":
        return cls(
            ErrorKind.INVALID_CHARACTER,
            f"invalid character {character!r} at position {position}",
            character=character,
            position=position,
        )

    @classmethod
    def invalid_check_character(cls, character: str, position: int) -> "FormatError":
        return cls(
            ErrorKind.INVALID_CHARACTER,
            f"invalid check digit character {character!r} at position {position}, expected a digit",
            character=character,
            position=position,
        )

    @classmethod
    def old_format(cls) -> "FormatError":
        return cls(
            ErrorKind.OLD_FORMAT,
            "invalid format, expected all digits when first character is a digit",
        )


class ChecksumError(SedolError):
    """Check digit does not match the one computed from the body."""

    def __init__(self, expected: str, actual: str):
        super().__init__(ErrorKind.CHECKSUM, f"expected check digit {expected!r}, got {actual!r}")
        self.expected = expected
        self.actual = actual

    def __reduce__(self):
        return type(self), (self.expected, self.actual)
