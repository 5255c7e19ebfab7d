"""
Utilities: logging setup.
"""

from ripsgrid.utils.logging import setup_logging

__all__ = ["setup_logging"]
