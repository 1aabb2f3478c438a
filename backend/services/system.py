import logging
import os

import psutil

logger = logging.getLogger(__name__)


def log_mem(msg: str):
    """Log RSS memory usage in MB with a short message.

    Args:
        msg: Context string to prefix the memory log.
    """
    process = psutil.Process(os.getpid())
    mem_mb = process.memory_info().rss / 1024**2
    logger.info("%s - Memory usage: %.2f MB", msg, mem_mb)
