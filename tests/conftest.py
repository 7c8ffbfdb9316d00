"""
conftest.py
~~~~~~~~~~~

Shared fixtures for writing coefficient files and test CSVs.
"""

import os
import sys

import numpy as np
import pytest

# Add repository root to path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from logreg_eval.config import NUM_CLASSES, NUM_PIXELS, MODEL_ROW_SIZE


@pytest.fixture
def make_row():
    """Build a CSV line from a label and optional pixel overrides."""
    def _make_row(label, pixels=None, count=NUM_PIXELS):
        values = [0] * count
        for index, value in (pixels or {}).items():
            values[index] = value
        return ",".join(str(v) for v in [label] + values)
    return _make_row


@pytest.fixture
def write_model(tmp_path):
    """Write coefficients to a text file, one class row per line."""
    def _write_model(values, name="logreg_coef.txt"):
        flat = [float(v) for v in np.asarray(values, dtype=np.float64).ravel()]
        lines = [
            " ".join(repr(v) for v in flat[start:start + MODEL_ROW_SIZE])
            for start in range(0, len(flat), MODEL_ROW_SIZE)
        ]
        path = tmp_path / name
        path.write_text("\n".join(lines) + "\n")
        return str(path)
    return _write_model


@pytest.fixture
def write_csv(tmp_path):
    """Write raw lines to a CSV file, each terminated by a newline."""
    def _write_csv(lines, name="test.csv"):
        path = tmp_path / name
        path.write_bytes("".join(line + "\n" for line in lines).encode())
        return str(path)
    return _write_csv


@pytest.fixture
def zero_model(write_model):
    """Path to a model file holding only zeros."""
    return write_model(np.zeros((NUM_CLASSES, MODEL_ROW_SIZE)))


@pytest.fixture
def pixel_model(write_model):
    """
    Path to a model where class k scores the intensity of pixel k.

    A sample whose only lit pixel is k is predicted as class k.
    """
    weights = np.zeros((NUM_CLASSES, MODEL_ROW_SIZE))
    for cls in range(NUM_CLASSES):
        weights[cls, cls + 1] = 1.0
    return write_model(weights)
