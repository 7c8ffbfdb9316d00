"""
config.py
~~~~~~~~~

Model shape constants and environment-driven logging setup.
"""

import os
import logging

# Model shape: one row per class, bias followed by one weight per pixel
NUM_CLASSES = 10
NUM_PIXELS = 784
MODEL_ROW_SIZE = NUM_PIXELS + 1
NUM_COEFFICIENTS = NUM_CLASSES * MODEL_ROW_SIZE

# Raw pixel values are divided by this to get features
PIXEL_SCALE = 255.0

ACCURACY_DECIMALS = 3

DEFAULT_LOG_LEVEL = 'WARNING'
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def configure_logging(default_level: str = DEFAULT_LOG_LEVEL) -> None:
    """
    Set up logging from the environment.

    The level is read from ``LOG_LEVEL``. The command-line tool defaults
    to WARNING so that only the accuracy line reaches stdout and only
    error messages reach stderr; set ``LOG_LEVEL=INFO`` or ``DEBUG`` to
    follow the evaluation phases.

    Args:
        default_level: Level name used when ``LOG_LEVEL`` is unset or unknown
    """
    fallback = getattr(logging, default_level.upper(), logging.WARNING)
    log_level_str = os.getenv('LOG_LEVEL', default_level).upper()
    log_level = getattr(logging, log_level_str, fallback)
    if not isinstance(log_level, int):
        log_level = fallback

    logging.basicConfig(level=log_level, format=LOG_FORMAT)
    logging.getLogger('logreg_eval').setLevel(log_level)
