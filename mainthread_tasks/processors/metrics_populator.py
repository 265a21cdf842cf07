"""
Metrics populator for execution timing breakdowns.
"""

from collections import defaultdict
from typing import Dict, Iterable, List

from ..core.types import TaskForest, TaskNode, TraceEvent


SCHEDULEABLE_TASK_NAMES = frozenset([
    'TaskQueueManager::ProcessTaskFromWorkQueue',
    'ThreadControllerImpl::DoWork',
    'ThreadControllerImpl::RunTask',
    'MessageLoop::RunTask',
])

IGNORED_URLS = frozenset(['about:blank'])


class MetricsPopulator:
    """Sums self-time of a finished forest by URL and by task group."""

    def __init__(self, config):
        """
        Initialize with configuration.

        Args:
            config: TaskConfig instance
        """
        self.config = config

    @staticmethod
    def is_scheduleable_task(event: TraceEvent) -> bool:
        """True for the scheduler task events that wrap each top-level unit of work."""
        return event.get('name') in SCHEDULEABLE_TASK_NAMES

    @staticmethod
    def top_level_duration(forest: TaskForest) -> float:
        """
        Sum the durations of scheduleable tasks across the forest.

        Args:
            forest: Finished task forest

        Returns:
            Total top-level duration in milliseconds
        """
        return sum(
            task.duration for task in forest.iter_tasks()
            if MetricsPopulator.is_scheduleable_task(task.event)
        )

    @staticmethod
    def execution_timings_by_url(tasks: Iterable[TaskNode], multiplier: float = 1.0) -> Dict[str, Dict[str, float]]:
        """
        Group self-time by attributable URL, then by task group.
        Unattributed tasks and about:blank are skipped.

        Args:
            tasks: Task nodes of a finished forest
            multiplier: CPU slowdown multiplier applied to each self-time

        Returns:
            Dictionary mapping url -> {group_id: self_time_ms}
        """
        result: Dict[str, Dict[str, float]] = {}
        for task in tasks:
            url = task.attributable_url
            if not url or url in IGNORED_URLS:
                continue
            timing_by_group = result.setdefault(url, defaultdict(float))
            timing_by_group[task.group.id] += task.self_time * multiplier

        return {url: dict(timings) for url, timings in result.items()}

    @staticmethod
    def execution_timings_by_group(tasks: Iterable[TaskNode], multiplier: float = 1.0) -> Dict[str, float]:
        """
        Sum self-time per task group over every task.

        Args:
            tasks: Task nodes of a finished forest
            multiplier: CPU slowdown multiplier applied to each self-time

        Returns:
            Dictionary mapping group_id -> self_time_ms
        """
        result: Dict[str, float] = defaultdict(float)
        for task in tasks:
            result[task.group.id] += task.self_time * multiplier
        return dict(result)

    @staticmethod
    def bootup_rows(timings_by_url: Dict[str, Dict[str, float]], threshold_ms: float = 0.0) -> List[Dict]:
        """
        Build per-URL boot-up rows, highlighting the JavaScript costs.

        Args:
            timings_by_url: Output of execution_timings_by_url
            threshold_ms: Rows whose total is below this are dropped

        Returns:
            List of row dictionaries sorted by total time descending
        """
        rows = []
        for url, timing_by_group in timings_by_url.items():
            total = sum(timing_by_group.values())
            if total < threshold_ms:
                continue
            rows.append({
                'url': url,
                'total': total,
                'scripting': timing_by_group.get('ScriptEvaluation', 0.0),
                'script_parse_compile': timing_by_group.get('ScriptParseCompile', 0.0),
            })

        rows.sort(key=lambda row: -row['total'])
        return rows

    def populate_metrics(self, forest: TaskForest) -> tuple:
        """
        Build both breakdowns for a forest using the configured multiplier.

        Args:
            forest: Finished task forest

        Returns:
            Tuple of (timings_by_url, timings_by_group)
        """
        multiplier = self.config.cpu_slowdown_multiplier
        return (
            self.execution_timings_by_url(forest.tasks, multiplier),
            self.execution_timings_by_group(forest.tasks, multiplier),
        )
