"""phpmnd-hook — run the PHP Magic Number Detector as a git pre-commit hook."""

__version__ = "0.1.0"
