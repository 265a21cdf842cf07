"""
Chrome trace file processing using streaming parser.
"""

import gzip
from typing import Dict, Iterable, List

import ijson

from ..core.types import TraceEvent


class TraceFileProcessor:
    """Reads Chrome trace JSON files using streaming parser."""

    @staticmethod
    def _open(file_path: str):
        if file_path.endswith('.gz'):
            return gzip.open(file_path, 'rb')
        return open(file_path, 'rb')

    @staticmethod
    def _detect_prefix(f) -> str:
        """
        Pick the ijson prefix for the file's layout: a bare array of events,
        or an object holding a ``traceEvents`` array.
        """
        while True:
            char = f.read(1)
            if not char:
                return 'item'
            if not char.isspace():
                break
        f.seek(0)
        return 'item' if char == b'[' else 'traceEvents.item'

    @staticmethod
    def process_file(file_path: str) -> List[TraceEvent]:
        """
        Read every trace event from a trace JSON file.

        Args:
            file_path: Path to the trace JSON file (optionally gzipped)

        Returns:
            List of raw trace events in file order
        """
        events: List[TraceEvent] = []

        print(f"Processing {file_path}...")

        with TraceFileProcessor._open(file_path) as f:
            prefix = TraceFileProcessor._detect_prefix(f)
            for event in ijson.items(f, prefix, use_float=True):
                events.append(event)
                if len(events) % 100000 == 0:
                    print(f"  Read {len(events)} events...")

        print(f"Completed reading file: {len(events)} events found.")

        return events

    @staticmethod
    def process_files(file_paths: Iterable[str]) -> Dict[str, List[TraceEvent]]:
        """
        Read several trace files, keyed by path.

        Args:
            file_paths: Paths to trace JSON files

        Returns:
            Dictionary mapping file_path -> list of events
        """
        return {path: TraceFileProcessor.process_file(path) for path in file_paths}
