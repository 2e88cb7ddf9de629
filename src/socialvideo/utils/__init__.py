"""
Utility functions for socialvideo.
"""

from socialvideo.utils.logging import log_timed

__all__ = [
    "log_timed",
]
