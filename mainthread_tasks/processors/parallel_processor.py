"""
Parallel task processor for analyzing many traces at once.
"""

import os
from multiprocessing import Pool
from typing import Callable, Dict, List, Optional, Tuple

from ..core.errors import TaskTreeError
from ..core.types import TaskConfig, TaskForest, TaskNode, TraceEvent
from ..taxonomy import DEFAULT_TAXONOMY


def flatten_forest(forest: TaskForest) -> List[tuple]:
    """
    Flatten a forest into one record per task, in creation order.

    Each record holds the parent's index instead of a reference, so the
    result pickles without recursing once per tree level.

    Args:
        forest: Finished task forest

    Returns:
        List of (event, parent_index, start_time, end_time, duration,
        self_time, attributable_url, group) tuples
    """
    index_of = {id(task): i for i, task in enumerate(forest.tasks)}
    return [
        (
            task.event,
            index_of[id(task.parent)] if task.parent is not None else None,
            task.start_time,
            task.end_time,
            task.duration,
            task.self_time,
            task.attributable_url,
            task.group,
        )
        for task in forest.tasks
    ]


def rebuild_forest(records: List[tuple]) -> TaskForest:
    """
    Rebuild a forest from flatten_forest records.
    Parents always precede their children, so one pass restores the links
    and the original child and root order.

    Args:
        records: Output of flatten_forest

    Returns:
        TaskForest equal in structure and timings to the flattened one
    """
    roots: List[TaskNode] = []
    tasks: List[TaskNode] = []
    for event, parent_index, start, end, duration, self_time, url, group in records:
        parent = tasks[parent_index] if parent_index is not None else None
        task = TaskNode(event, parent=parent)
        task.start_time = start
        task.end_time = end
        task.duration = duration
        task.self_time = self_time
        task.attributable_url = url
        task.group = group
        tasks.append(task)
        if parent is None:
            roots.append(task)
    return TaskForest(roots, tasks)


def _process_single_trace(args: Tuple[str, List[TraceEvent], TaskConfig, object]) -> Tuple[str, Optional[List[tuple]], Optional[TaskTreeError]]:
    """
    Analyze a single trace independently. Designed to run in a worker process.

    Args:
        args: Tuple of (trace_id, events, config, taxonomy)

    Returns:
        Tuple of (trace_id, flattened_forest, error); exactly one of the last two is None
    """
    from ..core.analyzer import MainThreadTaskAnalyzer

    trace_id, events, config, taxonomy = args
    analyzer = MainThreadTaskAnalyzer(config=config, taxonomy=taxonomy)
    try:
        return trace_id, flatten_forest(analyzer.get_main_thread_tasks(events)), None
    except TaskTreeError as e:
        return trace_id, None, e


class ParallelTaskProcessor:
    """Process traces in parallel using multiprocessing."""

    def __init__(self, config: TaskConfig, taxonomy=DEFAULT_TAXONOMY, num_workers: Optional[int] = None):
        """
        Initialize parallel processor.

        Args:
            config: TaskConfig instance
            taxonomy: TaskTaxonomy shared by every worker
            num_workers: Number of worker processes (default: config.num_workers, then CPU count)
        """
        self.config = config
        self.taxonomy = taxonomy
        self.num_workers = num_workers or config.num_workers or os.cpu_count() or 4

    def process_traces(
        self,
        traces: Dict[str, List[TraceEvent]],
        progress_callback: Optional[Callable[[int, int], None]] = None
    ) -> Tuple[Dict[str, TaskForest], Dict[str, TaskTreeError]]:
        """
        Analyze multiple traces in parallel.

        A malformed trace fails on its own; the remaining traces are still analyzed.

        Args:
            traces: Dictionary mapping trace_id -> list of raw events
            progress_callback: Optional callback(completed, total) for progress updates

        Returns:
            Tuple of (forests, failures)
            - forests: trace_id -> TaskForest for every trace that succeeded
            - failures: trace_id -> TaskTreeError for every trace that failed
        """
        trace_count = len(traces)
        work_items = [
            (trace_id, events, self.config, self.taxonomy)
            for trace_id, events in traces.items()
        ]

        if trace_count <= 1 or self.num_workers <= 1:
            results = map(_process_single_trace, work_items)
            return self._collect(results, trace_count, progress_callback)

        effective_workers = min(self.num_workers, trace_count)
        with Pool(processes=effective_workers) as pool:
            results = pool.imap_unordered(_process_single_trace, work_items, chunksize=1)
            return self._collect(results, trace_count, progress_callback)

    @staticmethod
    def _collect(results, total, progress_callback) -> Tuple[Dict[str, TaskForest], Dict[str, TaskTreeError]]:
        forests = {}
        failures = {}
        completed = 0

        for trace_id, records, error in results:
            if error is not None:
                print(f"  Skipping trace {trace_id}: {error}")
                failures[trace_id] = error
            else:
                forests[trace_id] = rebuild_forest(records)

            completed += 1
            if progress_callback:
                progress_callback(completed, total)

        return forests, failures
