"""Iterative and phase-walk bubble sorts, array generators and self-checking test suites."""

__version__ = "0.1.0"