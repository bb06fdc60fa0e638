"""
Replacement Rules - Divisor to label mappings for the sequence generator.

This module handles:
- Normalizing caller mappings into an immutable, divisor-ordered form
- Rejecting divisors that are not positive integers
- Parsing DIVISOR=LABEL tokens from the command line
- Built-in presets (FizzBuzz)
"""

from enum import Enum
from typing import Dict, Mapping, Optional, Tuple

from number_labeler.exceptions import InvalidDivisorError, ReplacementParseError
from number_labeler.logging_config import get_logger

logger = get_logger("replacements")

# Normalized form: ((divisor, label), ...) sorted by divisor
Rules = Tuple[Tuple[int, str], ...]

REPLACEMENT_SEPARATOR = "="


class ReplacementPreset(str, Enum):
    """Built-in replacement mappings."""
    NONE = "none"
    FIZZBUZZ = "fizzbuzz"


PRESET_REPLACEMENTS: Dict[ReplacementPreset, Dict[int, str]] = {
    ReplacementPreset.NONE: {},
    ReplacementPreset.FIZZBUZZ: {3: "Fizz", 5: "Buzz"},
}


def validate_divisor(divisor: object) -> int:
    """
    Check that a divisor can be used for the modulo test.

    Args:
        divisor: Candidate divisor

    Returns:
        The divisor as an int

    Raises:
        InvalidDivisorError: If the divisor is not a positive integer
    """
    # bool is an int subclass but True/False are not meant as divisors
    if isinstance(divisor, bool) or not isinstance(divisor, int):
        raise InvalidDivisorError(divisor, "divisor must be an integer")
    if divisor == 0:
        raise InvalidDivisorError(divisor, "division by zero")
    if divisor < 0:
        raise InvalidDivisorError(divisor, "divisor must be positive")
    return divisor


def normalize_replacements(replacements: Optional[Mapping[int, str]]) -> Rules:
    """
    Build the ordered rule set used by the generator.

    The result is a snapshot: changing the caller's mapping afterwards has
    no effect on it.

    Args:
        replacements: Divisor to label mapping, or None

    Returns:
        Tuple of (divisor, label) pairs in ascending divisor order

    Raises:
        InvalidDivisorError: If any divisor is not a positive integer
    """
    if not replacements:
        return ()

    rules = tuple(
        sorted((validate_divisor(divisor), str(label)) for divisor, label in replacements.items())
    )
    logger.debug("Normalized %d replacement rule(s)", len(rules))
    return rules


def parse_replacement(text: str) -> Tuple[int, str]:
    """
    Parse a DIVISOR=LABEL token.

    Only the first '=' separates divisor and label, so labels may contain
    '=' themselves.

    Args:
        text: Token such as "3=Fizz"

    Returns:
        (divisor, label) tuple

    Raises:
        ReplacementParseError: If the token is malformed
        InvalidDivisorError: If the divisor is not positive
    """
    divisor_text, separator, label = text.partition(REPLACEMENT_SEPARATOR)
    if not separator:
        raise ReplacementParseError(text, "expected DIVISOR=LABEL")

    divisor_text = divisor_text.strip()
    try:
        divisor = int(divisor_text)
    except ValueError:
        raise ReplacementParseError(text, f"'{divisor_text}' is not an integer") from None

    if not label:
        raise ReplacementParseError(text, "label is empty")

    return validate_divisor(divisor), label


def get_preset_replacements(preset: ReplacementPreset) -> Dict[int, str]:
    """Return a fresh copy of a preset's mapping."""
    return dict(PRESET_REPLACEMENTS[ReplacementPreset(preset)])


def merge_replacements(*mappings: Optional[Mapping[int, str]]) -> Dict[int, str]:
    """
    Merge mappings left to right; later mappings win on duplicate divisors.

    None entries are skipped.
    """
    merged: Dict[int, str] = {}
    for mapping in mappings:
        if mapping:
            merged.update(mapping)
    return merged
