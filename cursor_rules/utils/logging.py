from loguru import logger
import os
import sys
import time
from functools import wraps

LOG_FORMAT = "<green>{time:HH:mm:ss.SSS}</green> | <level>{level: <8}</level> | <cyan>{name}</cyan>:<cyan>{function}</cyan> - <level>{message}</level>"
VALID_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def _stderr_sink(message):
    sys.stderr.write(message)


def configure_logging(verbose: bool = False) -> str:
    """
    Route loguru output to stderr at the level the environment asks for.

    Library modules log file-level detail at DEBUG; by default only
    warnings and errors reach the terminal. ``verbose`` or
    ``CURSOR_RULES_DEBUG`` lowers the level to DEBUG, otherwise
    ``CURSOR_RULES_LOG_LEVEL`` is used when it names a valid level.

    Returns:
        str: The level that was applied
    """
    debug_mode = os.getenv("CURSOR_RULES_DEBUG", "").lower() in ["true", "1", "yes"]
    log_level = os.getenv("CURSOR_RULES_LOG_LEVEL", "WARNING").upper()
    if log_level not in VALID_LEVELS:
        log_level = "WARNING"
    if verbose or debug_mode:
        log_level = "DEBUG"

    logger.remove()
    logger.add(_stderr_sink, level=log_level, format=LOG_FORMAT, colorize=False)
    return log_level


def timeit(func):
    """
    Decorator that logs the execution time of the decorated function.
    """
    @wraps(func)
    def wrapper(*args, **kwargs):
        start = time.perf_counter()
        result = func(*args, **kwargs)
        elapsed = time.perf_counter() - start
        logger.debug(f"{func.__qualname__} executed in {elapsed:.6f}s")
        return result
    return wrapper
