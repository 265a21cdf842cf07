"""Result formatting for the web API and JSON output."""

from .result_builder import prepare_results, task_to_dict

__all__ = ["prepare_results", "task_to_dict"]
