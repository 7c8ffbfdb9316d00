"""
errors.py
~~~~~~~~~

Exceptions raised while loading a model or evaluating a test set.
Every one of them is fatal for the run.
"""

from typing import Optional


class EvaluationError(Exception):
    """Base class for all evaluation failures."""


class ModelOpenError(EvaluationError):
    """The coefficient file could not be opened or read."""


class ModelFormatError(EvaluationError):
    """The coefficient file does not hold exactly one full model."""


class TestFileOpenError(EvaluationError):
    """The test CSV file could not be opened or read."""

    # Keep pytest from trying to collect this as a test class
    __test__ = False


class MalformedRowError(EvaluationError):
    """
    A CSV line did not match ``label,pixel_0,...,pixel_783``.

    The parser does not know where the line came from, so
    ``sample_index`` stays None until the evaluation driver fills in
    the 1-based position of the sample.
    """

    def __init__(self, reason: str, sample_index: Optional[int] = None):
        super().__init__(reason)
        self.reason = reason
        self.sample_index = sample_index

    def __str__(self) -> str:
        if self.sample_index is None:
            return f"Malformed CSV line: {self.reason}"
        return (
            f"Malformed CSV line at sample {self.sample_index}: "
            f"{self.reason}"
        )


class EmptyDatasetError(EvaluationError):
    """The test file contained no samples."""
