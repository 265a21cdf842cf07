"""
Main thread filtering for trace events.
"""

from typing import Iterable, List

from ..core.errors import MissingAnchorError
from ..core.types import TASK_PHASES, TaskConfig, TraceEvent


class MainThreadFilter:
    """Keeps only the structural events of the page's main thread."""

    def __init__(self, config: TaskConfig):
        """
        Initialize with task configuration.

        Args:
            config: TaskConfig instance
        """
        self.config = config

    def find_tracing_started_event(self, events: Iterable[TraceEvent]) -> TraceEvent:
        """
        Locate the marker event that starts page tracking.

        Args:
            events: Raw trace events in input order

        Returns:
            The first marker event

        Raises:
            MissingAnchorError: If the trace has no marker event
        """
        marker_names = self.config.tracing_started_event_names
        for event in events:
            if event.get('name') in marker_names:
                return event
        raise MissingAnchorError(
            f"No {' / '.join(marker_names)} event found in trace; cannot identify the main thread"
        )

    def filter_events(self, events: List[TraceEvent]) -> List[TraceEvent]:
        """
        Select the Begin, End and Complete events of the main thread.

        The main thread is the (pid, tid) of the tracing-started marker.
        Input order is preserved.

        Args:
            events: Raw trace events for one trace

        Returns:
            Filtered events in input order
        """
        started_event = self.find_tracing_started_event(events)
        pid = started_event.get('pid')
        tid = started_event.get('tid')

        return [
            event for event in events
            if event.get('pid') == pid
            and event.get('tid') == tid
            and event.get('ph') in TASK_PHASES
        ]
