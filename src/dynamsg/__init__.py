"""Timing and run information extraction for LS-DYNA message files."""

__version__ = "0.1.0"
