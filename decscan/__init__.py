"""Scanning of decimal numbers and fixed-width integers from text."""

__version__ = "0.1.0"
__all__ = ["ascii_number", "integers", "options", "swar"]