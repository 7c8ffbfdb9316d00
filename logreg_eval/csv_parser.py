"""
csv_parser.py
~~~~~~~~~~~~~

Parser for one line of the test CSV: ``label,pixel_0,...,pixel_783``.

Tokens are signed base-10 integers. Leading whitespace before a token is
skipped, the way ``strtol`` does it. Pixels are not range-checked and
anything after the last pixel is ignored.
"""

import re

import numpy as np

from logreg_eval.config import NUM_PIXELS, PIXEL_SCALE
from logreg_eval.errors import MalformedRowError

_INT_TOKEN = re.compile(r'\s*[+-]?[0-9]+', re.ASCII)

# Out-of-range tokens saturate at the limits of a 64-bit long
_LONG_MIN = -2 ** 63
_LONG_MAX = 2 ** 63 - 1

# Labels are then narrowed to a 32-bit int, wrapping around
_INT_RANGE = 2 ** 32
_INT_MIN = -2 ** 31


def _scan_int(line: str, pos: int, what: str):
    """Return (value, end) for the integer starting at pos."""
    match = _INT_TOKEN.match(line, pos)
    if match is None:
        raise MalformedRowError(f"expected integer {what} at column {pos + 1}")
    value = min(max(int(match.group()), _LONG_MIN), _LONG_MAX)
    return value, match.end()


def parse_csv_line(line: str, features: np.ndarray) -> int:
    """
    Parse a CSV line into ``features`` and return its label.

    Args:
        line: One line of the test file, without its newline
        features: Pre-sized buffer of NUM_PIXELS floats, overwritten with
            the normalized pixel values

    Returns:
        int: The label, wrapped to 32 bits (not range-checked)

    Raises:
        MalformedRowError: If a token is missing or not an integer, or a
            separator is missing
    """
    label, pos = _scan_int(line, 0, "label")
    label = (label - _INT_MIN) % _INT_RANGE + _INT_MIN

    if pos < len(line):
        if line[pos] != ',':
            raise MalformedRowError(
                f"expected ',' after label at column {pos + 1}"
            )
        pos += 1

    last = NUM_PIXELS - 1
    for i in range(NUM_PIXELS):
        value, pos = _scan_int(line, pos, f"pixel {i}")
        features[i] = value / PIXEL_SCALE

        if i < last:
            if pos >= len(line) or line[pos] != ',':
                raise MalformedRowError(
                    f"expected ',' after pixel {i} at column {pos + 1}"
                )
            pos += 1

    return label
