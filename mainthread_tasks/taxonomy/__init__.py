"""Task category taxonomy."""

from .task_groups import TaskGroup, TaskTaxonomy, TASK_GROUPS, DEFAULT_TAXONOMY, OTHER_GROUP_ID

__all__ = ["TaskGroup", "TaskTaxonomy", "TASK_GROUPS", "DEFAULT_TAXONOMY", "OTHER_GROUP_ID"]
