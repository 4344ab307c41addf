"""AI-assisted labeling of unlabeled GitHub issues."""

__version__ = "0.1.0"
