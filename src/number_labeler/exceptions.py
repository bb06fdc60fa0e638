"""
Exception classes for the number labeler.

This module defines all custom exceptions used throughout the package,
organized in a hierarchy for easy handling.
"""

from typing import List, Optional


class LabelerError(Exception):
    """Base exception for all number labeler errors."""

    pass


class InvalidDivisorError(LabelerError, ValueError):
    """Divisor in a replacement mapping is not a positive integer.

    A zero divisor would fault on the modulo test, and negative or
    non-integer divisors have no meaning for positions starting at 1.

    Attributes:
        divisor: The rejected divisor
        reason: Why it was rejected
    """

    def __init__(self, divisor: object, reason: Optional[str] = None):
        self.divisor = divisor
        self.reason = reason or "divisor must be a positive integer"
        super().__init__(f"Invalid divisor {divisor!r}: {self.reason}")


class ReplacementParseError(LabelerError, ValueError):
    """A DIVISOR=LABEL token could not be parsed.

    Attributes:
        text: The token as given
        reason: Description of the problem
    """

    def __init__(self, text: str, reason: str):
        self.text = text
        self.reason = reason
        super().__init__(f"Cannot parse replacement '{text}': {reason}")


class ConfigError(LabelerError):
    """Configuration error.

    Raised when a configuration fails validation.

    Attributes:
        errors: Validation messages
    """

    def __init__(self, errors: List[str]):
        self.errors = list(errors)
        super().__init__("; ".join(self.errors) or "invalid configuration")
