#!/usr/bin/env python3
"""
Generate a synthetic model file and test CSV for smoke runs.

The coefficient file holds 10 x 785 random reals in row-major order and
the CSV holds labeled rows of 784 random pixel values in [0, 255], so the
evaluator can be exercised end to end without the real MNIST data.

Usage:
    python scripts/generate_sample_data.py --out-dir data --samples 100

The script will:
1. Write logreg_coef.txt with random coefficients
2. Write test.csv with random labeled samples
3. Verify both files load through the evaluator
"""

import os
import sys
import argparse

import numpy as np

# Add repository root to path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from logreg_eval.config import NUM_CLASSES, NUM_PIXELS, MODEL_ROW_SIZE
from logreg_eval.errors import EvaluationError
from logreg_eval.evaluator import evaluate, format_accuracy


def write_model(filepath: str, rng: np.random.Generator) -> np.ndarray:
    """
    Write random coefficients as a whitespace-separated text file.

    Parameters:
    -----------
    filepath : str
        Output path for the coefficient file
    rng : np.random.Generator
        Source of randomness

    Returns:
    --------
    np.ndarray
        The (NUM_CLASSES, MODEL_ROW_SIZE) coefficients that were written
    """
    print(f"💾 Writing model coefficients: {filepath}")

    weights = rng.normal(0.0, 0.01, size=(NUM_CLASSES, MODEL_ROW_SIZE))
    # One class row per line, full precision so values round-trip
    np.savetxt(filepath, weights, fmt='%.17g', delimiter=' ')

    print(f"✅ Wrote {weights.size} coefficients")
    return weights


def write_test_csv(filepath: str, samples: int, rng: np.random.Generator) -> None:
    """
    Write random labeled samples in ``label,pixel_0,...,pixel_783`` form.

    Parameters:
    -----------
    filepath : str
        Output path for the CSV file
    samples : int
        Number of rows to write
    rng : np.random.Generator
        Source of randomness
    """
    print(f"💾 Writing {samples} test samples: {filepath}")

    labels = rng.integers(0, NUM_CLASSES, size=(samples, 1))
    pixels = rng.integers(0, 256, size=(samples, NUM_PIXELS))
    np.savetxt(filepath, np.hstack([labels, pixels]), fmt='%d', delimiter=',')

    print(f"✅ Wrote {samples} rows")


def main():
    """Main generation function."""
    ap = argparse.ArgumentParser(description=__doc__.strip().splitlines()[0])
    ap.add_argument("--out-dir", type=str, default="data")
    ap.add_argument("--samples", type=int, default=100)
    ap.add_argument("--seed", type=int, default=0)
    args = ap.parse_args()

    if args.samples < 1:
        print("❌ Error: --samples must be a positive integer")
        sys.exit(1)

    os.makedirs(args.out_dir, exist_ok=True)
    model_path = os.path.join(args.out_dir, 'logreg_coef.txt')
    test_path = os.path.join(args.out_dir, 'test.csv')
    rng = np.random.default_rng(args.seed)

    write_model(model_path, rng)
    write_test_csv(test_path, args.samples, rng)

    print(f"\n🔍 Verifying generated files...")
    try:
        tally = evaluate(test_path, model_path)
    except EvaluationError as e:
        print(f"❌ Error during verification: {e}")
        sys.exit(1)

    print(f"✅ Accuracy on random data: {format_accuracy(tally.accuracy)}")
    print(f"\n📝 Run: python -m logreg_eval {test_path} {model_path}")


if __name__ == '__main__':
    main()
