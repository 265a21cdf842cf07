"""Core components for main thread task analysis."""

from .analyzer import MainThreadTaskAnalyzer
from .errors import (
    TaskTreeError,
    MissingAnchorError,
    UnbalancedTraceError,
    MismatchedEventError,
    InvalidTimingError,
)
from .types import TaskConfig, TaskForest, TaskNode, TraceEvent

__all__ = [
    "MainThreadTaskAnalyzer",
    "TaskTreeError",
    "MissingAnchorError",
    "UnbalancedTraceError",
    "MismatchedEventError",
    "InvalidTimingError",
    "TaskConfig",
    "TaskForest",
    "TaskNode",
    "TraceEvent",
]
