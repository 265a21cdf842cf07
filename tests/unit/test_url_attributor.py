"""
Unit tests for URL extraction and attribution.
"""
import pytest
from conftest import make_event
from mainthread_tasks.extractors.url_extractor import UrlExtractor
from mainthread_tasks.processors.hierarchy_builder import HierarchyBuilder
from mainthread_tasks.processors.url_attributor import UrlAttributor


def attribute(events):
    roots, tasks = HierarchyBuilder().build_task_forest(events)
    UrlAttributor(UrlExtractor()).attribute_forest(roots)
    return tasks


class TestUrlExtractor:
    """Tests for the UrlExtractor class."""

    def test_explicit_url(self):
        event = make_event('X', 'EvaluateScript', 0, url='https://example.com/a.js')
        assert UrlExtractor.extract_task_url(event) == 'https://example.com/a.js'

    def test_explicit_url_beats_stack(self):
        event = make_event('X', 'EvaluateScript', 0, url='https://example.com/a.js',
                           stack_urls=['https://example.com/b.js'])
        assert UrlExtractor.extract_task_url(event) == 'https://example.com/a.js'

    def test_first_stack_frame(self):
        event = make_event('X', 'FunctionCall', 0,
                           stack_urls=['https://example.com/top.js', 'https://example.com/caller.js'])
        assert UrlExtractor.extract_task_url(event) == 'https://example.com/top.js'

    def test_first_frame_without_url(self):
        event = make_event('X', 'FunctionCall', 0)
        event['args']['data']['stackTrace'] = [{'functionName': 'anon'}, {'url': 'https://example.com/x.js'}]
        assert UrlExtractor.extract_task_url(event) is None

    def test_empty_stack(self):
        assert UrlExtractor.extract_task_url(make_event('X', 'F', 0, stack_urls=[])) is None

    def test_missing_args(self):
        assert UrlExtractor.extract_task_url({'ph': 'X', 'name': 'Bare', 'ts': 0}) is None
        assert UrlExtractor.extract_task_url({'ph': 'X', 'name': 'Bare', 'ts': 0, 'args': {}}) is None

    def test_empty_url_falls_back_to_stack(self):
        event = make_event('X', 'F', 0, url='', stack_urls=['https://example.com/s.js'])
        assert UrlExtractor.extract_task_url(event) == 'https://example.com/s.js'


class TestUrlAttributor:
    """Tests for ancestor-wins URL propagation."""

    def test_parent_url_wins_over_child_stack(self):
        tasks = attribute([
            make_event('X', 'EvaluateScript', 0, dur=100, url='https://example.com/a.js'),
            make_event('X', 'FunctionCall', 10, dur=20, stack_urls=['https://example.com/other.js']),
        ])
        assert tasks[0].attributable_url == 'https://example.com/a.js'
        assert tasks[1].attributable_url == 'https://example.com/a.js'

    def test_child_uses_own_url_below_unattributed_parent(self):
        tasks = attribute([
            make_event('X', 'RunTask', 0, dur=100),
            make_event('X', 'FunctionCall', 10, dur=20, stack_urls=['https://example.com/own.js']),
            make_event('X', 'GC', 12, dur=2),
        ])
        assert tasks[0].attributable_url is None
        assert tasks[1].attributable_url == 'https://example.com/own.js'
        assert tasks[2].attributable_url == 'https://example.com/own.js'

    def test_unattributed_root_and_children(self):
        tasks = attribute([
            make_event('X', 'RunTask', 0, dur=100),
            make_event('X', 'Layout', 10, dur=20),
        ])
        assert [t.attributable_url for t in tasks] == [None, None]

    def test_url_propagates_through_deep_descendants(self):
        tasks = attribute([
            make_event('B', 'EvaluateScript', 0, url='https://example.com/a.js'),
            make_event('B', 'FunctionCall', 1, stack_urls=['https://example.com/b.js']),
            make_event('X', 'V8.Execute', 2, dur=1, url='https://example.com/c.js'),
            make_event('E', 'FunctionCall', 5),
            make_event('E', 'EvaluateScript', 6),
        ])
        assert {t.attributable_url for t in tasks} == {'https://example.com/a.js'}

    def test_each_root_resolved_independently(self):
        tasks = attribute([
            make_event('X', 'EvaluateScript', 0, dur=10, url='https://example.com/a.js'),
            make_event('X', 'EvaluateScript', 20, dur=10, url='https://example.com/b.js'),
        ])
        assert [t.attributable_url for t in tasks] == ['https://example.com/a.js', 'https://example.com/b.js']
