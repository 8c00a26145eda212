"""GDPR sanitizer: rewrite PII in user profiles and comments with synthetic data."""

__version__ = "0.1.0"
