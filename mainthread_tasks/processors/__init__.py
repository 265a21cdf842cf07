"""Processors for trace event transformation and analysis."""

from .file_processor import TraceFileProcessor
from .hierarchy_builder import HierarchyBuilder
from .timing_calculator import TimingCalculator
from .url_attributor import UrlAttributor
from .task_classifier import TaskClassifier
from .normalizer import TimeNormalizer
from .metrics_populator import MetricsPopulator
from .parallel_processor import ParallelTaskProcessor

__all__ = [
    "TraceFileProcessor",
    "HierarchyBuilder",
    "TimingCalculator",
    "UrlAttributor",
    "TaskClassifier",
    "TimeNormalizer",
    "MetricsPopulator",
    "ParallelTaskProcessor",
]
