"""
Configuration - Handles generation options.

This module handles:
- Configuration dataclass with all options
- Dictionary conversion for command-line overrides
- Configuration validation

Configuration lives in memory only; there is no configuration file.
"""

import sys
from dataclasses import asdict, dataclass, field
from enum import Enum
from typing import Any, Optional

from number_labeler.core.replacements import (
    ReplacementPreset,
    get_preset_replacements,
    merge_replacements,
)
from number_labeler.output.writer import SUPPORTED_LINE_ENDINGS

VALID_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


@dataclass
class Config:
    """
    Configuration for sequence generation.

    Attributes:
        upper_bound: Last position to generate (default: sys.maxsize)
        replacements: Explicit divisor to label mapping
        preset: Built-in mapping applied underneath the explicit one
        limit: Stop writing after this many lines
        line_ending: Terminator written after each element
        verbose: Enable verbose output
        quiet: Suppress log output below ERROR
        log_level: Logging level
    """

    upper_bound: int = sys.maxsize
    replacements: dict[int, str] = field(default_factory=dict)
    preset: ReplacementPreset = ReplacementPreset.NONE
    limit: Optional[int] = None

    # Output options
    line_ending: str = "\n"
    verbose: bool = False
    quiet: bool = False
    log_level: str = "WARNING"

    def to_dict(self) -> dict[str, Any]:
        """Convert config to dictionary."""
        data = {}
        for key, value in asdict(self).items():
            if isinstance(value, Enum):
                data[key] = value.value
            else:
                data[key] = value
        return data

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Config":
        """Create config from dictionary."""
        data = dict(data)

        # Mapping keys arrive as strings from JSON-like sources
        if "replacements" in data and data["replacements"]:
            data["replacements"] = {
                int(divisor): label for divisor, label in data["replacements"].items()
            }

        if "preset" in data and isinstance(data["preset"], str):
            data["preset"] = ReplacementPreset(data["preset"])

        # Filter only known fields
        known_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered_data = {k: v for k, v in data.items() if k in known_fields}

        return cls(**filtered_data)

    def effective_replacements(self) -> dict[int, str]:
        """Preset mapping with explicit replacements layered on top."""
        return merge_replacements(get_preset_replacements(self.preset), self.replacements)

    def validate(self) -> list[str]:
        """
        Validate configuration.

        Returns:
            List of validation error messages (empty if valid)
        """
        errors = []

        for divisor in self.replacements:
            if isinstance(divisor, bool) or not isinstance(divisor, int) or divisor <= 0:
                errors.append(f"Divisor must be a positive integer: {divisor!r}")

        if self.limit is not None and self.limit < 0:
            errors.append(f"Limit must not be negative: {self.limit}")

        if self.line_ending not in SUPPORTED_LINE_ENDINGS:
            errors.append(f"Unsupported line ending: {self.line_ending!r}")

        if self.log_level.upper() not in VALID_LOG_LEVELS:
            errors.append(f"Invalid log level: {self.log_level}")

        return errors

    def is_valid(self) -> bool:
        """Check if configuration is valid."""
        return len(self.validate()) == 0


def create_default_config() -> Config:
    """Create a configuration with default values."""
    return Config()
