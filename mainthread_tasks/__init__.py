"""
Main Thread Tasks - Chrome trace main thread task reconstruction
"""

__version__ = "1.0.0"

from .core.analyzer import MainThreadTaskAnalyzer
from .core.errors import (
    TaskTreeError,
    MissingAnchorError,
    UnbalancedTraceError,
    MismatchedEventError,
    InvalidTimingError,
)
from .core.types import TaskConfig, TaskForest, TaskNode
from .taxonomy import DEFAULT_TAXONOMY, TaskGroup, TaskTaxonomy


def get_main_thread_tasks(trace_events, config=None, taxonomy=DEFAULT_TAXONOMY):
    """Reconstruct the main thread task forest of one trace."""
    return MainThreadTaskAnalyzer(config=config, taxonomy=taxonomy).get_main_thread_tasks(trace_events)


__all__ = [
    "MainThreadTaskAnalyzer",
    "get_main_thread_tasks",
    "TaskConfig",
    "TaskForest",
    "TaskNode",
    "TaskGroup",
    "TaskTaxonomy",
    "DEFAULT_TAXONOMY",
    "TaskTreeError",
    "MissingAnchorError",
    "UnbalancedTraceError",
    "MismatchedEventError",
    "InvalidTimingError",
]
