"""
wsclean: Normalise whitespace in text files.

Trims trailing spaces and tabs from every line and optionally converts
leading indentation between tabs and spaces, rewriting files in place.
"""

from ._version import __version__

from .main import main  # noqa: F401

__all__ = ["__version__", "main"]
