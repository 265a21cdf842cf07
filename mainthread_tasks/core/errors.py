"""
Errors raised while reconstructing main thread tasks.

Every error is fatal to the trace being analyzed. The trace is recorded
data, so retrying with the same input always fails the same way.
"""


class TaskTreeError(Exception):
    """Base class for all task reconstruction failures."""


class MissingAnchorError(TaskTreeError):
    """No tracing-started marker event, so the main thread is unknown."""


class UnbalancedTraceError(TaskTreeError):
    """An End event arrived while no task was open."""


class MismatchedEventError(TaskTreeError):
    """An End event arrived while the open task was not started by a Begin."""


class InvalidTimingError(TaskTreeError):
    """A task ended up with a non-finite self-time after normalization."""
