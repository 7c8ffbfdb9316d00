"""
logreg_eval package
~~~~~~~~~~~~~~~~~~~

Accuracy evaluation for a pre-trained linear classifier on MNIST-style
CSV test data. Contains the coefficient loader, CSV row parser,
predictor, and the evaluation driver behind the command-line tool.
"""

__version__ = "1.0.0"
