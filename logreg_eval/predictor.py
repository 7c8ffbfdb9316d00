"""
predictor.py
~~~~~~~~~~~~

Linear scoring and class selection.

Scores are accumulated bias first and then pixel by pixel in index
order. ``np.cumsum`` is a strictly sequential reduction, unlike
``np.dot`` or ``np.sum``, so results are reproducible bit for bit
against any other left-to-right implementation.
"""

import numpy as np

from logreg_eval.config import NUM_CLASSES


def class_scores(weights: np.ndarray, features: np.ndarray) -> np.ndarray:
    """
    Compute the linear score of every class.

    Args:
        weights: Array of shape (NUM_CLASSES, MODEL_ROW_SIZE), bias in column 0
        features: Array of NUM_PIXELS normalized pixel values

    Returns:
        np.ndarray: NUM_CLASSES float64 scores
    """
    terms = np.empty_like(weights, dtype=np.float64)
    terms[:, 0] = weights[:, 0]
    np.multiply(weights[:, 1:], features, out=terms[:, 1:])
    return np.cumsum(terms, axis=1)[:, -1]


def predict_class(weights: np.ndarray, features: np.ndarray) -> int:
    """
    Return the index of the highest scoring class.

    Classes are scanned in increasing order and only a strictly greater
    score replaces the current best, so the lowest index wins a tie.

    Example:
        >>> predict_class(np.zeros((10, 785)), np.zeros(784))
        0
    """
    scores = class_scores(weights, features)

    best_score = -np.inf
    best_class = 0
    for cls in range(NUM_CLASSES):
        if scores[cls] > best_score:
            best_score = scores[cls]
            best_class = cls

    return best_class
