"""Morse code encoding and decoding for alphanumeric text, with a console menu."""

__version__ = "0.1.0"
__all__ = ["__version__"]