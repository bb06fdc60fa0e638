"""
Sequence Generator - Produces labeled numbers from 1 to an upper bound.

Each position n becomes the space-joined labels of every divisor that
divides n (ascending divisor order), or str(n) when none does. The
sequence is lazy: nothing is computed until an element is requested, so
bounds up to sys.maxsize cost no more memory than a bound of 10.

Usage:
    from number_labeler import generate

    for line in generate(15, {3: "Fizz", 5: "Buzz"}):
        print(line)
"""

from collections.abc import Iterator, Sequence
from typing import Mapping, Optional, Union

from number_labeler.core.replacements import Rules, normalize_replacements
from number_labeler.logging_config import get_logger

logger = get_logger("generator")

DEFAULT_UPPER_BOUND = 100
LABEL_SEPARATOR = " "


def label_for(number: int, rules: Rules) -> str:
    """
    Compute the element for a single position.

    Args:
        number: The position (1-based)
        rules: Normalized (divisor, label) pairs in ascending divisor order

    Returns:
        Matching labels joined by single spaces, or the decimal number
    """
    value = "".join(LABEL_SEPARATOR + label for divisor, label in rules if number % divisor == 0)
    return value.strip() or str(number)


class LabeledSequence(Sequence):
    """
    Lazy, immutable sequence of labels over a range of positions.

    Elements are computed on access. Slicing returns another lazy
    LabeledSequence over the sliced positions.
    """

    def __init__(self, positions: range, rules: Rules = ()):
        self._positions = positions
        self._rules = tuple(rules)

    @property
    def positions(self) -> range:
        """The positions this sequence labels."""
        return self._positions

    @property
    def rules(self) -> Rules:
        """The normalized rules used for labeling."""
        return self._rules

    def __iter__(self) -> Iterator[str]:
        rules = self._rules
        for number in self._positions:
            yield label_for(number, rules)

    def __reversed__(self) -> Iterator[str]:
        rules = self._rules
        for number in reversed(self._positions):
            yield label_for(number, rules)

    def __len__(self) -> int:
        # range raises OverflowError past sys.maxsize
        return len(self._positions)

    def __bool__(self) -> bool:
        return bool(self._positions)

    def __getitem__(self, index: Union[int, slice]) -> Union[str, "LabeledSequence"]:
        if isinstance(index, slice):
            return LabeledSequence(self._positions[index], self._rules)
        return label_for(self._positions[index], self._rules)

    def __repr__(self) -> str:
        return f"LabeledSequence({self._positions!r}, rules={self._rules!r})"


def generate(
    upper_bound: int = DEFAULT_UPPER_BOUND,
    replacements: Optional[Mapping[int, str]] = None,
) -> LabeledSequence:
    """
    Generate the labeled sequence for positions 1..upper_bound.

    The mapping is copied and validated immediately, so invalid divisors
    fail here rather than on first iteration, and later changes to the
    caller's mapping are not seen by the returned sequence.

    Args:
        upper_bound: Last position to label. Negative values give an
            empty sequence.
        replacements: Divisor to label mapping. None means no replacements.

    Returns:
        LabeledSequence of exactly max(0, upper_bound) elements

    Raises:
        InvalidDivisorError: If a divisor is not a positive integer
    """
    rules = normalize_replacements(replacements)

    if upper_bound < 0:
        upper_bound = 0

    logger.debug("Generating %d position(s) with %d rule(s)", upper_bound, len(rules))
    return LabeledSequence(range(1, upper_bound + 1), rules)


class SequenceGenerator:
    """
    Reusable generator with a default mapping and upper bound.

    Holds no mutable state between calls; the stored rules are normalized
    once and are immutable, so one instance can serve several threads.

    Usage:
        generator = SequenceGenerator({3: "Fizz", 5: "Buzz"})
        lines = list(generator.generate(15))
    """

    def __init__(
        self,
        replacements: Optional[Mapping[int, str]] = None,
        upper_bound: int = DEFAULT_UPPER_BOUND,
    ):
        self._rules = normalize_replacements(replacements)
        self.upper_bound = upper_bound

    @property
    def rules(self) -> Rules:
        return self._rules

    def generate(
        self,
        upper_bound: Optional[int] = None,
        replacements: Optional[Mapping[int, str]] = None,
    ) -> LabeledSequence:
        """
        Generate a sequence, falling back to the instance defaults.

        Args:
            upper_bound: Overrides the default upper bound when given
            replacements: Overrides the default mapping when given

        Returns:
            LabeledSequence for positions 1..upper_bound
        """
        if upper_bound is None:
            upper_bound = self.upper_bound
        if replacements is None:
            return generate(upper_bound, dict(self._rules))
        return generate(upper_bound, replacements)
