"""
Unit tests for mainthread_tasks.processors.metrics_populator module.
"""
import pytest
from conftest import make_event, tracing_started
from mainthread_tasks import get_main_thread_tasks
from mainthread_tasks.core.types import TaskConfig
from mainthread_tasks.processors.metrics_populator import MetricsPopulator


@pytest.fixture
def forest():
    """
    Two top-level tasks:
      RunTask 0-10ms (self 2)
        EvaluateScript a.js 1-9ms (self 4)
          v8.compile 2-4ms  -> inherits ScriptEvaluation
          MinorGC 5-7ms     -> inherits ScriptEvaluation
      RunTask 20-30ms (self 4)
        Layout about:blank 21-27ms (self 6)
    """
    return get_main_thread_tasks([
        tracing_started(ts=0),
        make_event('X', 'ThreadControllerImpl::RunTask', 0, dur=10_000),
        make_event('X', 'EvaluateScript', 1_000, dur=8_000, url='https://example.com/a.js'),
        make_event('X', 'v8.compile', 2_000, dur=2_000),
        make_event('X', 'MinorGC', 5_000, dur=2_000),
        make_event('X', 'ThreadControllerImpl::RunTask', 20_000, dur=10_000),
        make_event('X', 'Layout', 21_000, dur=6_000, url='about:blank'),
    ])


class TestExecutionTimings:
    """Tests for the per-URL and per-group breakdowns."""

    def test_by_url_skips_unattributed_and_blank(self, forest):
        timings = MetricsPopulator.execution_timings_by_url(forest.tasks)
        assert set(timings) == {'https://example.com/a.js'}
        assert timings['https://example.com/a.js'] == pytest.approx({'ScriptEvaluation': 8.0})

    def test_by_url_multiplier(self, forest):
        timings = MetricsPopulator.execution_timings_by_url(forest.tasks, multiplier=3)
        assert timings['https://example.com/a.js']['ScriptEvaluation'] == pytest.approx(24.0)

    def test_by_group(self, forest):
        timings = MetricsPopulator.execution_timings_by_group(forest.tasks)
        assert timings == pytest.approx({'Other': 6.0, 'ScriptEvaluation': 8.0, 'StyleLayout': 6.0})

    def test_group_total_matches_top_level_duration(self, forest):
        total = sum(MetricsPopulator.execution_timings_by_group(forest.tasks).values())
        assert total == pytest.approx(MetricsPopulator.top_level_duration(forest))
        assert total == pytest.approx(20.0)

    def test_populate_metrics_uses_config_multiplier(self, forest):
        populator = MetricsPopulator(TaskConfig(cpu_slowdown_multiplier=2))
        by_url, by_group = populator.populate_metrics(forest)
        assert by_group['StyleLayout'] == pytest.approx(12.0)
        assert by_url['https://example.com/a.js']['ScriptEvaluation'] == pytest.approx(16.0)


class TestBootupRows:
    """Tests for the boot-up row builder."""

    def test_rows_sorted_and_thresholded(self):
        timings = {
            'https://example.com/small.js': {'ScriptEvaluation': 10.0},
            'https://example.com/big.js': {'ScriptEvaluation': 300.0, 'ScriptParseCompile': 40.0, 'StyleLayout': 5.0},
            'https://example.com/mid.js': {'GarbageCollection': 60.0},
        }
        rows = MetricsPopulator.bootup_rows(timings, threshold_ms=50)
        assert [r['url'] for r in rows] == ['https://example.com/big.js', 'https://example.com/mid.js']
        assert rows[0]['total'] == pytest.approx(345.0)
        assert rows[0]['scripting'] == 300.0
        assert rows[0]['script_parse_compile'] == 40.0
        assert rows[1]['scripting'] == 0.0

    def test_no_rows(self):
        assert MetricsPopulator.bootup_rows({}, threshold_ms=0) == []


class TestScheduleableTasks:

    @pytest.mark.parametrize('name', [
        'TaskQueueManager::ProcessTaskFromWorkQueue',
        'ThreadControllerImpl::DoWork',
        'ThreadControllerImpl::RunTask',
        'MessageLoop::RunTask',
    ])
    def test_scheduler_names(self, name):
        assert MetricsPopulator.is_scheduleable_task({'name': name})

    def test_other_names(self):
        assert not MetricsPopulator.is_scheduleable_task({'name': 'EvaluateScript'})
        assert not MetricsPopulator.is_scheduleable_task({})
