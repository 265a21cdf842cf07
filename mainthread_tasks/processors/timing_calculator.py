"""
Timing calculator for task nodes.
"""

from typing import List

from ..core.types import TaskNode


class TimingCalculator:
    """Calculates duration and self-time for every task in a forest."""

    @staticmethod
    def task_duration(task: TaskNode) -> float:
        """
        Duration of a task in trace units. A task that was never closed
        has no end time and gets a NaN duration.
        """
        if task.end_time is None:
            return float('nan')
        return task.end_time - task.start_time

    def calculate_hierarchy_timings(self, root: TaskNode) -> float:
        """
        Compute duration and self-time for a root task and its descendants.
        This works bottom-up with an explicit stack, so deeply nested traces
        do not hit the interpreter's recursion limit.

        Args:
            root: Root task node (modified in-place)

        Returns:
            Duration of the root task
        """
        stack = [(root, False)]
        while stack:
            task, children_done = stack.pop()
            if not children_done:
                stack.append((task, True))
                for child in reversed(task.children):
                    stack.append((child, False))
                continue

            # Every child has its duration by now
            child_time = sum(child.duration for child in task.children)
            task.duration = self.task_duration(task)
            task.self_time = task.duration - child_time

        return root.duration

    def calculate_forest_timings(self, roots: List[TaskNode]) -> None:
        """
        Compute timings for every tree in the forest.
        Only roots start a traversal, so each task is computed exactly once.

        Args:
            roots: Root task nodes (modified in-place)
        """
        for root in roots:
            if root.parent is not None:
                continue
            self.calculate_hierarchy_timings(root)
