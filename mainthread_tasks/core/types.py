"""
Type definitions for main thread task reconstruction.
"""

from typing import Any, Dict, Iterator, List, Optional, Sequence, TypedDict


PHASE_BEGIN = 'B'
PHASE_END = 'E'
PHASE_COMPLETE = 'X'

TASK_PHASES = (PHASE_BEGIN, PHASE_END, PHASE_COMPLETE)


class StackFrame(TypedDict, total=False):
    """A single call-stack frame from an event payload."""
    url: str
    functionName: str
    lineNumber: int
    columnNumber: int


class TraceEvent(TypedDict, total=False):
    """A raw Chrome trace event as found in the traceEvents array."""
    ph: str
    name: str
    cat: str
    ts: int
    dur: int
    pid: int
    tid: int
    args: Dict[str, Any]


class TaskConfig:
    """Configuration for main thread task analysis."""

    def __init__(
        self,
        tracing_started_event_names: Sequence[str] = ('TracingStartedInPage',),
        cpu_slowdown_multiplier: float = 1.0,
        threshold_ms: float = 50.0,
        num_workers: Optional[int] = None
    ):
        """
        Initialize task analysis configuration.

        Args:
            tracing_started_event_names: Marker event names that identify the page's
                                         main thread. The first matching event in the
                                         trace wins.
                                         Default: ('TracingStartedInPage',)

            cpu_slowdown_multiplier: Multiplier applied to self-time when building
                                     execution timing breakdowns, for simulated
                                     CPU throttling.
                                     Default: 1.0 (observed timings)

            threshold_ms: Minimum total time for a URL to be listed in the
                          boot-up breakdown.
                          Default: 50.0

            num_workers: Worker processes used when analyzing several traces.
                         Default: None (CPU count)
        """
        if not tracing_started_event_names:
            raise ValueError('At least one tracing-started event name is required')
        if cpu_slowdown_multiplier <= 0:
            raise ValueError(f'cpu_slowdown_multiplier must be positive, got {cpu_slowdown_multiplier}')
        if threshold_ms < 0:
            raise ValueError(f'threshold_ms must not be negative, got {threshold_ms}')

        self.tracing_started_event_names = tuple(tracing_started_event_names)
        self.cpu_slowdown_multiplier = cpu_slowdown_multiplier
        self.threshold_ms = threshold_ms
        self.num_workers = num_workers


class TaskNode:
    """
    A unit of main thread work rebuilt from one trace event.

    Children are owned by the node; ``parent`` is a back-reference and is
    None for root tasks. ``end_time`` stays None until the task is closed.
    """

    def __init__(self, event: TraceEvent, parent: Optional['TaskNode'] = None):
        self.event = event
        self.start_time = event.get('ts', 0)
        if event.get('ph') == PHASE_COMPLETE:
            self.end_time = self.start_time + (event.get('dur') or 0)
        else:
            self.end_time = None
        self.parent = parent
        self.children: List['TaskNode'] = []

        # Filled in by the later passes
        self.duration = float('nan')
        self.self_time = float('nan')
        self.attributable_url: Optional[str] = None
        self.group = None

        if parent is not None:
            parent.children.append(self)

    @property
    def name(self) -> str:
        return self.event.get('name', '')

    @property
    def is_open(self) -> bool:
        return self.end_time is None

    @property
    def is_root(self) -> bool:
        return self.parent is None

    @property
    def depth(self) -> int:
        depth = 0
        node = self.parent
        while node is not None:
            depth += 1
            node = node.parent
        return depth

    def __repr__(self) -> str:
        return (f"TaskNode(name={self.name!r}, start_time={self.start_time!r}, "
                f"end_time={self.end_time!r}, children={len(self.children)})")


class TaskForest:
    """The ordered root tasks of one trace plus every task in creation order."""

    def __init__(self, roots: List[TaskNode], tasks: List[TaskNode]):
        """
        Args:
            roots: Parentless tasks, in the order they were opened
            tasks: Every task, in the order it was created
        """
        self.roots = roots
        self.tasks = tasks

    def __len__(self) -> int:
        return len(self.tasks)

    def iter_tasks(self) -> Iterator[TaskNode]:
        """Walk every root and its descendants in pre-order."""
        stack = list(reversed(self.roots))
        while stack:
            task = stack.pop()
            yield task
            stack.extend(reversed(task.children))

    def find(self, name: str) -> Optional[TaskNode]:
        """Return the first task created from an event with this name."""
        for task in self.tasks:
            if task.name == name:
                return task
        return None
