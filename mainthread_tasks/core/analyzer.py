"""
Main thread task analyzer orchestrator.
"""

from typing import Dict, List, Optional, Sequence

from ..core.types import TaskConfig, TaskForest, TraceEvent
from ..extractors import UrlExtractor
from ..filters import MainThreadFilter
from ..formatters import format_time
from ..processors import (
    TraceFileProcessor,
    HierarchyBuilder,
    TimingCalculator,
    UrlAttributor,
    TaskClassifier,
    TimeNormalizer,
    MetricsPopulator
)
from ..taxonomy import DEFAULT_TAXONOMY


class MainThreadTaskAnalyzer:
    """Main orchestrator for main thread task analysis."""

    def __init__(
        self,
        tracing_started_event_names: Sequence[str] = ('TracingStartedInPage',),
        cpu_slowdown_multiplier: float = 1.0,
        threshold_ms: float = 50.0,
        taxonomy=DEFAULT_TAXONOMY,
        config: Optional[TaskConfig] = None
    ):
        """
        Initialize the MainThreadTaskAnalyzer.

        Args:
            tracing_started_event_names: Marker event names that anchor the main thread
            cpu_slowdown_multiplier: Multiplier applied to self-time in breakdowns
            threshold_ms: Minimum per-URL total for the boot-up breakdown
            taxonomy: TaskTaxonomy used for classification (shared, read only)
            config: Ready-made TaskConfig; overrides the individual options
        """
        self.config = config or TaskConfig(
            tracing_started_event_names=tracing_started_event_names,
            cpu_slowdown_multiplier=cpu_slowdown_multiplier,
            threshold_ms=threshold_ms
        )
        self.taxonomy = taxonomy

        # Results of the last processed trace
        self.forest: Optional[TaskForest] = None
        self.timings_by_url: Dict[str, Dict[str, float]] = {}
        self.timings_by_group: Dict[str, float] = {}

        # Initialize components
        self.url_extractor = UrlExtractor()
        self.main_thread_filter = MainThreadFilter(self.config)
        self.file_processor = TraceFileProcessor()
        self.hierarchy_builder = HierarchyBuilder()
        self.timing_calculator = TimingCalculator()
        self.url_attributor = UrlAttributor(self.url_extractor)
        self.task_classifier = TaskClassifier(self.taxonomy)
        self.time_normalizer = TimeNormalizer()
        self.metrics_populator = MetricsPopulator(self.config)

    def get_main_thread_tasks(self, trace_events: List[TraceEvent]) -> TaskForest:
        """
        Turn the raw events of one trace into a finished task forest.

        The forest is only returned once every pass has run; any failure
        raises a TaskTreeError and no partial forest escapes.

        Args:
            trace_events: Raw trace events for one trace

        Returns:
            TaskForest with timings in milliseconds relative to the first root task
        """
        # Pass 1: Keep only the main thread's Begin/End/Complete events
        events = self.main_thread_filter.filter_events(trace_events)

        # Pass 2: Rebuild nesting from the flat event stream
        roots, tasks = self.hierarchy_builder.build_task_forest(events)

        # Passes 3-5: Compute the recursive properties, starting at the toplevel tasks
        self.timing_calculator.calculate_forest_timings(roots)
        self.url_attributor.attribute_forest(roots)
        self.task_classifier.classify_forest(roots)

        # Pass 6: Rebase onto the first task and convert to milliseconds
        self.time_normalizer.normalize_forest(roots, tasks)

        return TaskForest(roots, tasks)

    def process_trace_events(self, trace_events: List[TraceEvent]) -> TaskForest:
        """
        Analyze one trace and keep the forest and breakdowns on the analyzer.

        Args:
            trace_events: Raw trace events for one trace

        Returns:
            The finished TaskForest
        """
        forest = self.get_main_thread_tasks(trace_events)
        self.forest = forest
        self.timings_by_url, self.timings_by_group = self.metrics_populator.populate_metrics(forest)
        return forest

    def process_trace_file(self, file_path: str) -> TaskForest:
        """
        Read a trace file and analyze its main thread.

        Args:
            file_path: Path to the trace JSON file

        Returns:
            The finished TaskForest
        """
        trace_events = self.file_processor.process_file(file_path)
        forest = self.process_trace_events(trace_events)

        print(f"\nFound {len(forest)} main thread tasks ({len(forest.roots)} top-level)")
        total_self_time = sum(self.timings_by_group.values())
        print(f"Total main thread time: {format_time(total_self_time)}")

        return forest

    def format_time(self, ms: float) -> str:
        """
        Format time in milliseconds to a human-readable string.

        Args:
            ms: Time in milliseconds

        Returns:
            Formatted time string
        """
        return format_time(ms)
