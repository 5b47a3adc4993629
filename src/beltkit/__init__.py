"""beltkit — reusable helpers for command-line scripts."""

__version__ = "0.3.0"
