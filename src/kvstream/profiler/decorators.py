"""Time and memory profiling for terminal stream operations."""

import functools
import logging
import time
from typing import Any, Callable, Optional

import psutil

from kvstream.config import config

logger = logging.getLogger(__name__)


def _rss() -> int:
    return psutil.Process().memory_info().rss


def profile_terminal(func: Callable) -> Callable:
    """
    Decorator profiling a terminal operation when profiling is enabled.

    Measurements land on the wrapper as ``last_duration`` (seconds) and
    ``last_memory_mb`` (RSS delta). With ``config.enable_profiling`` off the
    wrapped function runs untouched.

    Example:
        @profile_terminal
        def collect(self):
            ...
    """
    @functools.wraps(func)
    def wrapper(*args, **kwargs) -> Any:
        if not config.enable_profiling:
            return func(*args, **kwargs)

        start_memory = _rss()
        start_time = time.time()

        try:
            return func(*args, **kwargs)
        finally:
            duration = time.time() - start_time
            memory_used = (_rss() - start_memory) / (1024 * 1024)

            wrapper.last_duration = duration
            wrapper.last_memory_mb = memory_used

            logger.info("%s: %.4fs, %.1fMB", func.__qualname__, duration, memory_used)

            if duration > config.profile_time_threshold_seconds:
                logger.warning("Time alert: %s took %.2fs (threshold: %ss)",
                               func.__qualname__, duration,
                               config.profile_time_threshold_seconds)
            if memory_used > config.profile_memory_threshold_mb:
                logger.warning("Memory alert: %s used %.1fMB (threshold: %sMB)",
                               func.__qualname__, memory_used,
                               config.profile_memory_threshold_mb)

    wrapper.last_duration = None
    wrapper.last_memory_mb = None
    return wrapper


class ProfileContext:
    """Context manager for profiling a block of stream work."""

    def __init__(self, name: str = "block", log: Optional[logging.Logger] = None):
        self.name = name
        self.logger = log or logger
        self.duration: Optional[float] = None
        self.memory_mb: Optional[float] = None

    def __enter__(self):
        self._start_memory = _rss()
        self._start_time = time.time()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.duration = time.time() - self._start_time
        self.memory_mb = (_rss() - self._start_memory) / (1024 * 1024)
        self.logger.info("Profile %s: %.4fs, %.1fMB", self.name, self.duration, self.memory_mb)
