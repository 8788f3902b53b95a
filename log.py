import logging
import os
import sys
from typing import Optional

_FILE_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def configure_logger(name: Optional[str] = None, log_file: Optional[str] = None, verbose: bool = False) -> logging.Logger:
    """Configure a logger to print to stderr and optionally save to a file.

    With no name the root logger is configured, which also picks up the
    records of every module logger. Handlers left by an earlier call are
    replaced.
    """
    logger = logging.getLogger(name)
    logger.setLevel(logging.DEBUG if verbose else logging.INFO)
    for handler in [h for h in logger.handlers if getattr(h, '_hull_handler', False)]:
        logger.removeHandler(handler)
        handler.close()

    # Console handler
    stream_handler = logging.StreamHandler(sys.stderr)
    stream_handler.setFormatter(logging.Formatter('%(message)s'))
    handlers = [stream_handler]

    # File handler
    if log_file:
        log_dir = os.path.dirname(log_file)
        if log_dir and not os.path.exists(log_dir):
            os.makedirs(log_dir)
        file_handler = logging.FileHandler(log_file)
        file_handler.setFormatter(logging.Formatter(_FILE_FORMAT))
        handlers.append(file_handler)

    for handler in handlers:
        handler._hull_handler = True
        logger.addHandler(handler)

    return logger
