"""
Configuration management for stream operations.
"""

from typing import Optional
from dataclasses import dataclass


@dataclass
class StreamConfig:
    """Global configuration for stream operations."""

    # Uniqueness tracking
    weak_unique_tokens: bool = False  # Hold weak-referenceable tokens weakly

    # Terminal results
    read_only_results: bool = False

    # Diagnostics
    trace_pulls: bool = False
    enable_profiling: bool = False
    profile_memory_threshold_mb: float = 100.0
    profile_time_threshold_seconds: float = 1.0

    # Errors
    error_source: str = "kvstream"

    _instance: Optional['StreamConfig'] = None

    @classmethod
    def get_instance(cls) -> 'StreamConfig':
        """Get singleton instance."""
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    @classmethod
    def set_defaults(cls, **kwargs) -> None:
        """Set default configuration values."""
        instance = cls.get_instance()
        for key, value in kwargs.items():
            if hasattr(instance, key):
                setattr(instance, key, value)

    def resolve_read_only(self, read_only: Optional[bool]) -> bool:
        """Explicit ``read_only`` argument, or the configured default."""
        if read_only is None:
            return self.read_only_results
        return read_only


# Global configuration instance
config = StreamConfig.get_instance()
