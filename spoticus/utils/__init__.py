"""
Utility functions and helpers.
"""

from spoticus.utils.logging import configure_logging

__all__ = ["configure_logging"]
