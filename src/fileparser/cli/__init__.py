"""
Command line interface for the file parser.
"""

from .manage import app

__all__ = ["app"]
