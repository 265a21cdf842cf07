"""
Category classification for task nodes.
"""

from typing import List, Optional

from ..core.types import TaskNode
from ..taxonomy import TaskGroup


class TaskClassifier:
    """
    Assigns a task group to every task using the taxonomy.
    The Other fallback never propagates to descendants; only real groups do.
    """

    def __init__(self, taxonomy):
        """
        Initialize with the category taxonomy.

        Args:
            taxonomy: TaskTaxonomy instance (read only)
        """
        self.taxonomy = taxonomy

    def classify_hierarchy(self, root: TaskNode) -> None:
        """
        Resolve task groups top-down for one tree.

        A group resolved by an ancestor is inherited by all of its
        descendants. Below an unresolved ancestor a task uses the group of
        its own event name, and falls back to Other when the name is unknown.

        Args:
            root: Root task node (modified in-place)
        """
        stack: List[tuple] = [(root, None)]
        while stack:
            task, parent_group = stack.pop()
            resolved: Optional[TaskGroup] = parent_group or self.taxonomy.group_for(task.name)
            task.group = resolved or self.taxonomy.other
            for child in reversed(task.children):
                stack.append((child, resolved))

    def classify_forest(self, roots: List[TaskNode]) -> None:
        """
        Resolve task groups for every tree in the forest.

        Args:
            roots: Root task nodes (modified in-place)
        """
        for root in roots:
            self.classify_hierarchy(root)
