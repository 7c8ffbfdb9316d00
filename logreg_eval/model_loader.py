"""
model_loader.py
~~~~~~~~~~~~~~~

Loads the coefficient matrix of a linear classifier from a plain text
file of whitespace-separated real numbers.

The file is read row-major: ``NUM_CLASSES`` rows of ``MODEL_ROW_SIZE``
values, where column 0 of each row is the class bias and the remaining
columns are the per-pixel weights.
"""

import re
import math
import logging
from typing import List

import numpy as np

from logreg_eval.config import NUM_CLASSES, MODEL_ROW_SIZE, NUM_COEFFICIENTS
from logreg_eval.errors import ModelOpenError, ModelFormatError

# Configure module logger
logger = logging.getLogger(__name__)

# Optional leading whitespace, then a decimal or scientific-notation real
_REAL_TOKEN = re.compile(
    r'\s*([+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?)',
    re.ASCII
)


def read_coefficients(text: str) -> List[float]:
    """
    Scan real numbers from text in order.

    Scanning stops at the end of the text or at the first position that
    does not start a number; anything from there on is ignored. A number
    whose exponent has no digits (``1e``) or that overflows a double
    (``1e400``) also ends the scan and is not included.

    Args:
        text: Contents of a coefficient file

    Returns:
        list: Parsed values in file order

    Example:
        >>> read_coefficients("0.5 -1e-3\\n2 junk 7")
        [0.5, -0.001, 2.0]
    """
    values = []
    pos = 0
    while True:
        match = _REAL_TOKEN.match(text, pos)
        if match is None:
            break
        # A dangling exponent marker fails the whole token
        token = match.group(1)
        following = text[match.end():match.end() + 1]
        if following in ('e', 'E') and 'e' not in token.lower():
            break
        value = float(token)
        if not math.isfinite(value):
            break
        values.append(value)
        pos = match.end()

    if text[pos:].strip():
        logger.debug(f"Stopped reading coefficients at offset {pos}")

    return values


def load_weights(path: str) -> np.ndarray:
    """
    Load the weight matrix of a linear classifier.

    Args:
        path: Path to the coefficient text file

    Returns:
        np.ndarray: Read-only float64 array of shape
            (NUM_CLASSES, MODEL_ROW_SIZE)

    Raises:
        ModelOpenError: If the file cannot be opened or read
        ModelFormatError: If the file does not hold exactly
            NUM_CLASSES * MODEL_ROW_SIZE coefficients
    """
    try:
        with open(path, 'r', encoding='latin-1') as f:
            text = f.read()
    except OSError as e:
        raise ModelOpenError(f"Failed to open model file: {path}") from e

    values = read_coefficients(text)
    logger.info(f"Read {len(values)} coefficients from {path}")

    if len(values) != NUM_COEFFICIENTS:
        raise ModelFormatError(
            f"Unexpected number of coefficients in model file: {path} "
            f"(expected {NUM_COEFFICIENTS}, got {len(values)})"
        )

    weights = np.array(values, dtype=np.float64).reshape(
        NUM_CLASSES, MODEL_ROW_SIZE
    )
    weights.flags.writeable = False
    return weights
