"""Profiling helpers for stream pipelines."""

from kvstream.profiler.decorators import (
    profile_terminal,
    ProfileContext,
)

__all__ = [
    "profile_terminal",
    "ProfileContext",
]
