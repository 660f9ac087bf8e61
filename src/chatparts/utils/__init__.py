"""Utility modules for chatparts.

Provides:
- logger: get_logger for logging
"""

from chatparts.utils.logger import get_logger

__all__ = ["get_logger"]
