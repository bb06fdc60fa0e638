"""
Core modules for the number labeler.

This package contains the generation logic:
- generator: Lazy labeled sequence generation
- replacements: Divisor to label rule handling
"""

from number_labeler.core.generator import (
    DEFAULT_UPPER_BOUND,
    LabeledSequence,
    SequenceGenerator,
    generate,
    label_for,
)
from number_labeler.core.replacements import (
    ReplacementPreset,
    get_preset_replacements,
    merge_replacements,
    normalize_replacements,
    parse_replacement,
)

__all__ = [
    "DEFAULT_UPPER_BOUND",
    "LabeledSequence",
    "SequenceGenerator",
    "generate",
    "label_for",
    "ReplacementPreset",
    "get_preset_replacements",
    "merge_replacements",
    "normalize_replacements",
    "parse_replacement",
]
