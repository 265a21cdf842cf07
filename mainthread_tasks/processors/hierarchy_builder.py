"""
Hierarchy builder for main thread trace events.
"""

from typing import List, Optional, Tuple

from ..core.errors import MismatchedEventError, UnbalancedTraceError
from ..core.types import PHASE_BEGIN, PHASE_COMPLETE, PHASE_END, TaskNode, TraceEvent


class HierarchyBuilder:
    """Builds a task forest from a flat, time-ordered list of events."""

    def build_task_forest(self, events: List[TraceEvent]) -> Tuple[List[TaskNode], List[TaskNode]]:
        """
        Rebuild task nesting from Begin/End/Complete events in a single pass.

        The current task is the top of the open-task stack; the stack itself
        is the chain of parent pointers. Before each event, tasks that have
        already ended by the event's timestamp are popped. Events with equal
        timestamps are nested in input order.

        Args:
            events: Main thread events sorted by timestamp

        Returns:
            Tuple of (root_tasks, all_tasks)
            - root_tasks: Parentless tasks in the order they were opened
            - all_tasks: Every task in creation order

        Raises:
            UnbalancedTraceError: On an End event with no open task
            MismatchedEventError: On an End event whose open task was not a Begin
        """
        roots: List[TaskNode] = []
        tasks: List[TaskNode] = []
        current_task: Optional[TaskNode] = None

        for event in events:
            phase = event.get('ph')
            timestamp = event.get('ts', 0)

            # The next event may start after the current task has already ended
            while (current_task is not None
                   and current_task.end_time is not None
                   and current_task.end_time <= timestamp):
                current_task = current_task.parent

            if current_task is None:
                if phase == PHASE_END:
                    raise UnbalancedTraceError(
                        f"End event '{event.get('name')}' at ts={timestamp} has no open task"
                    )
                current_task = TaskNode(event)
                roots.append(current_task)
                tasks.append(current_task)
                continue

            if phase in (PHASE_BEGIN, PHASE_COMPLETE):
                current_task = TaskNode(event, parent=current_task)
                tasks.append(current_task)
            else:
                if current_task.event.get('ph') != PHASE_BEGIN:
                    raise MismatchedEventError(
                        f"End event '{event.get('name')}' at ts={timestamp} closes "
                        f"'{current_task.name}', which was not opened by a Begin event"
                    )
                current_task.end_time = timestamp
                current_task = current_task.parent

        return roots, tasks
