"""Data extraction utilities for trace events."""

from .url_extractor import UrlExtractor

__all__ = ["UrlExtractor"]
