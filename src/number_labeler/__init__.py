"""
Number Labeler - Label the numbers 1..N by their divisors.

Each number from 1 to an upper bound is replaced by the labels of every
divisor that divides it (ascending divisor order, space separated), or
printed as-is when no divisor matches. Sequences are produced lazily.

Basic Usage:
    from number_labeler import generate

    list(generate(10, {3: "Fizz", 5: "Buzz"}))
    # ['1', '2', 'Fizz', '4', 'Buzz', 'Fizz', '7', '8', 'Fizz', 'Buzz']

    # Reusable generator
    generator = SequenceGenerator({4: "A", 7: "B"})
    generator.generate(28)[-1]
    # 'A B'

Command-Line Usage:
    number-labeler 100 --preset fizzbuzz
    number-labeler 30 --replace 4=A --replace 7=B
"""

__version__ = "1.0.0"

from number_labeler.exceptions import (
    LabelerError,
    InvalidDivisorError,
    ReplacementParseError,
    ConfigError,
)

from number_labeler.config import Config, create_default_config
from number_labeler.core.generator import (
    DEFAULT_UPPER_BOUND,
    LabeledSequence,
    SequenceGenerator,
    generate,
    label_for,
)
from number_labeler.core.replacements import ReplacementPreset, normalize_replacements
from number_labeler.main import GenerationResult, LabelingPipeline, write_sequence

__all__ = [
    # Version
    "__version__",
    # Main API
    "generate",
    "label_for",
    "write_sequence",
    "SequenceGenerator",
    "LabelingPipeline",
    # Configuration
    "Config",
    "create_default_config",
    "ReplacementPreset",
    # Data Types
    "DEFAULT_UPPER_BOUND",
    "LabeledSequence",
    "GenerationResult",
    "normalize_replacements",
    # Exceptions
    "LabelerError",
    "InvalidDivisorError",
    "ReplacementParseError",
    "ConfigError",
]
