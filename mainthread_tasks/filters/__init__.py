"""Event filters for trace events."""

from .main_thread_filter import MainThreadFilter

__all__ = ["MainThreadFilter"]
