"""
Main entry point for the number labeler.

This module ties generation and output together and provides a
programmatic API for writing a labeled sequence to a stream.
"""

import time
from dataclasses import dataclass, field
from typing import Callable, List, Mapping, Optional, TextIO

from number_labeler.config import Config, create_default_config
from number_labeler.core.generator import DEFAULT_UPPER_BOUND, generate
from number_labeler.exceptions import ConfigError, LabelerError
from number_labeler.logging_config import get_logger
from number_labeler.output.writer import SequenceWriter, WriterConfig

logger = get_logger("pipeline")

OnCompleteCallback = Callable[["GenerationResult"], None]


@dataclass
class GenerationResult:
    """Result of running the labeling pipeline."""
    success: bool
    lines_written: int = 0
    interrupted: bool = False
    errors: List[str] = field(default_factory=list)
    processing_time: float = 0.0


class LabelingPipeline:
    """
    Generates the configured sequence and writes it to a stream.

    Usage:
        pipeline = LabelingPipeline(Config(upper_bound=15, preset=ReplacementPreset.FIZZBUZZ))
        result = pipeline.run(sys.stdout)
    """

    def __init__(self, config: Optional[Config] = None):
        self.config = config or create_default_config()

    def run(
        self,
        stream: TextIO,
        on_complete: Optional[OnCompleteCallback] = None,
    ) -> GenerationResult:
        """
        Run generation and output.

        Args:
            stream: Text stream receiving one element per line
            on_complete: Callback invoked with the result once writing ends

        Returns:
            GenerationResult with counts and any errors
        """
        start_time = time.time()
        result = GenerationResult(success=True)

        try:
            config_errors = self.config.validate()
            if config_errors:
                raise ConfigError(config_errors)

            sequence = generate(self.config.upper_bound, self.config.effective_replacements())
            logger.info(
                "Writing positions 1..%d with %d rule(s)",
                max(0, self.config.upper_bound),
                len(sequence.rules),
            )

            writer = SequenceWriter(stream, WriterConfig(line_ending=self.config.line_ending))
            write_result = writer.write(sequence, limit=self.config.limit)

            result.lines_written = write_result.lines_written
            result.interrupted = write_result.interrupted

        except ConfigError as e:
            result.success = False
            result.errors.extend(e.errors)
        except LabelerError as e:
            result.success = False
            result.errors.append(str(e))

        result.processing_time = time.time() - start_time
        if result.success:
            logger.info(
                "Wrote %d line(s) in %.2f seconds", result.lines_written, result.processing_time
            )

        if on_complete:
            on_complete(result)

        return result


def write_sequence(
    stream: TextIO,
    upper_bound: int = DEFAULT_UPPER_BOUND,
    replacements: Optional[Mapping[int, str]] = None,
    **kwargs,
) -> GenerationResult:
    """
    Convenience function to write a labeled sequence to a stream.

    Args:
        stream: Destination stream
        upper_bound: Last position to write
        replacements: Divisor to label mapping
        **kwargs: Additional configuration options

    Returns:
        GenerationResult with details
    """
    config = Config(
        upper_bound=upper_bound,
        replacements=dict(replacements or {}),
        **kwargs,
    )
    return LabelingPipeline(config).run(stream)
