"""
Pytest configuration and fixtures for number labeler tests.
"""

import io
import logging
import uuid

import pytest


@pytest.fixture
def label_a():
    """A random label that cannot collide with a decimal number."""
    return f"a-{uuid.uuid4()}"


@pytest.fixture
def label_b():
    """A second random label."""
    return f"b-{uuid.uuid4()}"


@pytest.fixture
def fizzbuzz_replacements():
    """The classic FizzBuzz mapping."""
    return {3: "Fizz", 5: "Buzz"}


@pytest.fixture
def output_stream():
    """In-memory text stream for writer and pipeline output."""
    return io.StringIO()


@pytest.fixture(autouse=True)
def reset_logging():
    """Drop handlers installed by setup_logging so tests stay independent."""
    yield
    logger = logging.getLogger("number_labeler")
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)
    logger.propagate = True
