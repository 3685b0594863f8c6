"""
Shared utilities for typstgen.

Common functionality used across contexts:
- Logger configuration
"""

from typstgen.utils.logger import setup_logger

__all__ = ["setup_logger"]
