"""
evaluator.py
~~~~~~~~~~~~

Evaluation driver: loads the model once, streams the test CSV through
the parser and predictor, and tallies the accuracy.

The phases run strictly in order (load, stream, finalize) and the first
error ends the run; no partial result is produced.
"""

import logging
from typing import Iterator

import numpy as np

from logreg_eval.config import NUM_PIXELS, ACCURACY_DECIMALS
from logreg_eval.csv_parser import parse_csv_line
from logreg_eval.errors import (
    EmptyDatasetError,
    MalformedRowError,
    TestFileOpenError
)
from logreg_eval.model_loader import load_weights
from logreg_eval.predictor import predict_class

# Configure module logger
logger = logging.getLogger(__name__)


class AccuracyTally:
    """Running count of samples seen and samples predicted correctly."""

    def __init__(self):
        self.total = 0
        self.correct = 0

    def record(self, predicted: int, label: int) -> None:
        """Count one sample."""
        if predicted == label:
            self.correct += 1
        self.total += 1

    @property
    def accuracy(self) -> float:
        """
        Fraction of samples predicted correctly.

        Raises:
            EmptyDatasetError: If no samples were recorded
        """
        if self.total == 0:
            raise EmptyDatasetError("Test file does not contain any samples")
        return self.correct / self.total

    def __repr__(self) -> str:
        return f"AccuracyTally(correct={self.correct}, total={self.total})"


def format_accuracy(accuracy: float) -> str:
    """Render an accuracy ratio with a fixed number of decimals."""
    return f"{accuracy:.{ACCURACY_DECIMALS}f}"


def _read_lines(test_path: str) -> Iterator[str]:
    """
    Yield the lines of the test file without their newline.

    Only ``\\n`` ends a line; a carriage return stays part of the line.
    """
    try:
        f = open(test_path, 'r', encoding='latin-1', newline='\n')
    except OSError as e:
        raise TestFileOpenError(
            f"Failed to open test data file: {test_path}"
        ) from e

    with f:
        try:
            for line in f:
                yield line[:-1] if line.endswith('\n') else line
        except OSError as e:
            raise TestFileOpenError(
                f"Failed to read test data file: {test_path}"
            ) from e


def evaluate_weights(weights: np.ndarray, test_path: str) -> AccuracyTally:
    """
    Stream a test CSV through an already loaded model.

    Args:
        weights: Weight matrix from ``load_weights``
        test_path: Path to the test CSV

    Returns:
        AccuracyTally: The final tally, with at least one sample

    Raises:
        TestFileOpenError: If the test file cannot be opened or read
        MalformedRowError: If a line cannot be parsed; ``sample_index``
            holds its 1-based sample number
        EmptyDatasetError: If the file has no non-empty lines
    """
    tally = AccuracyTally()
    features = np.zeros(NUM_PIXELS, dtype=np.float64)

    for line in _read_lines(test_path):
        if not line:
            continue

        try:
            label = parse_csv_line(line, features)
        except MalformedRowError as e:
            e.sample_index = tally.total + 1
            raise

        tally.record(predict_class(weights, features), label)

    # Raises EmptyDatasetError for an empty stream
    accuracy = tally.accuracy
    logger.info(
        f"Evaluated {tally.total} samples from {test_path}: "
        f"{tally.correct} correct, accuracy {accuracy:.2%}"
    )
    return tally


def evaluate(test_path: str, model_path: str) -> AccuracyTally:
    """
    Evaluate the model in ``model_path`` against ``test_path``.

    Args:
        test_path: Path to the test CSV
        model_path: Path to the coefficient text file

    Returns:
        AccuracyTally: The final tally

    Raises:
        ModelOpenError: If the model file cannot be opened
        ModelFormatError: If the model file has the wrong coefficient count
        TestFileOpenError: If the test file cannot be opened
        MalformedRowError: If a test line is malformed
        EmptyDatasetError: If the test file has no samples

    Example:
        >>> tally = evaluate("mnist_test.csv", "logreg_coef.txt")
        >>> print(format_accuracy(tally.accuracy))
        0.917
    """
    logger.info(f"Loading model from {model_path}")
    weights = load_weights(model_path)

    logger.info(f"Evaluating test data from {test_path}")
    return evaluate_weights(weights, test_path)
