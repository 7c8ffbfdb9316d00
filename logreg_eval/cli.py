"""
cli.py
~~~~~~

Command-line entry point.

Usage:
    logreg-eval <test.csv> <logreg_coef.txt>

Prints the accuracy with three decimals on success and exits with 0.
Any error is reported on stderr and exits with 1.
"""

import os
import sys
import logging
from typing import List, Optional

from logreg_eval.config import configure_logging
from logreg_eval.errors import EvaluationError
from logreg_eval.evaluator import evaluate, format_accuracy

logger = logging.getLogger(__name__)


def main(argv: Optional[List[str]] = None) -> int:
    """
    Run the evaluator.

    Args:
        argv: Full argument vector including the program name;
            defaults to ``sys.argv``

    Returns:
        int: Process exit status
    """
    if argv is None:
        argv = sys.argv

    if len(argv) != 3:
        prog = os.path.basename(argv[0]) if argv else 'logreg-eval'
        print(f"Usage: {prog} <test.csv> <logreg_coef.txt>", file=sys.stderr)
        return 1

    configure_logging()
    test_path, model_path = argv[1], argv[2]

    try:
        tally = evaluate(test_path, model_path)
    except EvaluationError as e:
        logger.debug(f"Evaluation failed: {e!r}", exc_info=True)
        print(e, file=sys.stderr)
        return 1

    print(format_accuracy(tally.accuracy))
    return 0


def run() -> None:
    """Console script entry point."""
    sys.exit(main())
