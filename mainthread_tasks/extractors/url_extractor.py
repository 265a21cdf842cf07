"""
URL extraction from trace event payloads.
"""

from typing import Optional

from ..core.types import TraceEvent


class UrlExtractor:
    """Extracts the script/resource URL a trace event points at."""

    @staticmethod
    def extract_payload(event: TraceEvent) -> dict:
        """
        Return the event's ``args.data`` payload, or an empty dict.

        Args:
            event: Raw trace event

        Returns:
            Payload dictionary
        """
        args = event.get('args') or {}
        return args.get('data') or {}

    @staticmethod
    def extract_stack_url(event: TraceEvent) -> Optional[str]:
        """
        Extract the URL of the first frame of the event's call stack.

        Args:
            event: Raw trace event

        Returns:
            URL string or None if there is no stack or the top frame has no URL
        """
        stack_trace = UrlExtractor.extract_payload(event).get('stackTrace') or []
        if not stack_trace:
            return None
        return stack_trace[0].get('url') or None

    @staticmethod
    def extract_task_url(event: TraceEvent) -> Optional[str]:
        """
        Extract the task's own candidate URL.
        An explicit payload URL takes precedence over the call stack.

        Args:
            event: Raw trace event

        Returns:
            URL string or None if the event does not name one
        """
        url = UrlExtractor.extract_payload(event).get('url')
        if url:
            return url
        return UrlExtractor.extract_stack_url(event)
