"""
URL attribution for task nodes.
"""

from typing import List

from ..core.types import TaskNode


class UrlAttributor:
    """Charges every task to the script/resource URL responsible for it."""

    def __init__(self, url_extractor):
        """
        Initialize with URL extractor.

        Args:
            url_extractor: UrlExtractor instance
        """
        self.url_extractor = url_extractor

    def attribute_hierarchy(self, root: TaskNode) -> None:
        """
        Resolve attributable URLs top-down for one tree.

        The nearest ancestor with a URL wins over the task's own URL; a task
        only uses its own URL when none of its ancestors resolved one.

        Args:
            root: Root task node (modified in-place)
        """
        stack = [(root, None)]
        while stack:
            task, parent_url = stack.pop()
            task.attributable_url = parent_url or self.url_extractor.extract_task_url(task.event)
            for child in reversed(task.children):
                stack.append((child, task.attributable_url))

    def attribute_forest(self, roots: List[TaskNode]) -> None:
        """
        Resolve attributable URLs for every tree in the forest.

        Args:
            roots: Root task nodes (modified in-place)
        """
        for root in roots:
            self.attribute_hierarchy(root)
