"""
Logging utilities for socialvideo.

Everything logs under the ``socialvideo`` logger namespace. The library
never attaches handlers; the CLI configures output to stderr.
"""

import logging
import time

logger = logging.getLogger("socialvideo")


def log_timed(msg: str, start_time: float | None = None) -> None:
    """Log an INFO message prefixed with the elapsed time.

    Used around the Vimeo metadata request, the only blocking call.

    Args:
        msg: Message to log
        start_time: Start time from time.time(), or None to tag the line [START]
    """
    elapsed = f"[{time.time() - start_time:.2f}s]" if start_time else "[START]"
    logger.info(f"{elapsed} {msg}")
