"""
Shared utilities for gridpaper.

Common functionality used across contexts:
- Logger setup with provenance tracking
"""

from gridpaper.utils.logger import add_file_handler, detach_handler, setup_logger

__all__ = ["add_file_handler", "detach_handler", "setup_logger"]
