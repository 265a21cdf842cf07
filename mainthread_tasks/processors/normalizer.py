"""
Time normalizer for task nodes.
"""

import math
from typing import List

from ..core.errors import InvalidTimingError
from ..core.types import TaskNode


MICROSECONDS_PER_MS = 1000


class TimeNormalizer:
    """Rebases task times onto the first root task and converts them to milliseconds."""

    @staticmethod
    def _to_ms(value, first_ts):
        if value is None:
            return None
        return (value - first_ts) / MICROSECONDS_PER_MS

    def normalize_forest(self, roots: List[TaskNode], tasks: List[TaskNode]) -> None:
        """
        Convert every task's timings from trace microseconds to milliseconds
        relative to the first root task's start, then check that every
        self-time is finite.

        Args:
            roots: Root task nodes in opening order
            tasks: Every task node (modified in-place)

        Raises:
            InvalidTimingError: If any task has a non-finite self-time
        """
        first_ts = roots[0].start_time if roots else 0

        for task in tasks:
            task.start_time = self._to_ms(task.start_time, first_ts)
            task.end_time = self._to_ms(task.end_time, first_ts)
            task.duration /= MICROSECONDS_PER_MS
            task.self_time /= MICROSECONDS_PER_MS

        # self_time depends on every other timing field, so checking it is enough
        for task in tasks:
            if not math.isfinite(task.self_time):
                raise InvalidTimingError(
                    f"Invalid task timing data: '{task.name}' starting at "
                    f"{task.start_time} ms has self-time {task.self_time}"
                )
