"""
Output Writer - Writes a labeled sequence to a text stream, one line per element.

This module handles:
- Pulling elements lazily from the sequence as they are written
- Optional line limit and periodic flushing
- Stopping cleanly when the reader closes the pipe
"""

from dataclasses import dataclass
from itertools import islice
from typing import Iterable, Optional, TextIO

from number_labeler.logging_config import get_logger

logger = get_logger("writer")

SUPPORTED_LINE_ENDINGS = ("\n", "\r\n")


@dataclass
class WriterConfig:
    """Configuration for the sequence writer.

    Attributes:
        line_ending: Terminator written after every element
        flush_every: Flush the stream after this many lines (0 = only at the end)
    """
    line_ending: str = "\n"
    flush_every: int = 0


@dataclass
class WriteResult:
    """Result of writing a sequence."""
    lines_written: int = 0
    interrupted: bool = False


class SequenceWriter:
    """
    Writes sequence elements to a stream.

    Usage:
        writer = SequenceWriter(sys.stdout)
        result = writer.write(generate(100))
    """

    def __init__(self, stream: TextIO, config: Optional[WriterConfig] = None):
        self.stream = stream
        self.config = config or WriterConfig()

    def write(self, lines: Iterable[str], limit: Optional[int] = None) -> WriteResult:
        """
        Write each element followed by the configured line ending.

        Args:
            lines: Elements to write; consumed lazily
            limit: Stop after this many lines when given

        Returns:
            WriteResult with the number of lines written
        """
        result = WriteResult()
        ending = self.config.line_ending
        flush_every = self.config.flush_every

        if limit is not None:
            lines = islice(lines, limit)

        try:
            for line in lines:
                self.stream.write(line + ending)
                result.lines_written += 1
                if flush_every and result.lines_written % flush_every == 0:
                    self.stream.flush()
            self.stream.flush()
        except BrokenPipeError:
            result.interrupted = True
            logger.warning("Output closed after %d line(s)", result.lines_written)

        return result
