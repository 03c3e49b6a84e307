"""Gross dividend calculator: USD dividends and share lots valued in EUR."""

__version__ = "0.1.0"
