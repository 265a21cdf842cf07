"""
Pytest configuration and shared fixtures for main thread task tests.
"""
import json
import pytest


MAIN_PID = 1
MAIN_TID = 11
BASE_TS = 1241250325


def make_event(ph, name, ts, dur=None, pid=MAIN_PID, tid=MAIN_TID, url=None, stack_urls=None):
    """Build a raw Chrome trace event."""
    data = {}
    if url is not None:
        data['url'] = url
    if stack_urls is not None:
        data['stackTrace'] = [{'url': u, 'functionName': 'fn'} for u in stack_urls]

    event = {'ph': ph, 'name': name, 'ts': ts, 'pid': pid, 'tid': tid, 'cat': 'devtools.timeline',
             'args': {'data': data}}
    if dur is not None:
        event['dur'] = dur
    return event


def tracing_started(ts=BASE_TS, pid=MAIN_PID, tid=MAIN_TID):
    return make_event('I', 'TracingStartedInPage', ts, pid=pid, tid=tid)


@pytest.fixture
def event_factory():
    """Expose make_event to tests."""
    return make_event


@pytest.fixture
def nested_trace():
    """
    TaskA: Complete, 0-100ms
      TaskB: Begin at 5ms, End at 55ms
        TaskC: Complete, 10-40ms
    """
    return [
        tracing_started(),
        make_event('X', 'TaskA', BASE_TS, dur=100e3),
        make_event('B', 'TaskB', BASE_TS + 5e3),
        make_event('X', 'TaskC', BASE_TS + 10e3, dur=30e3),
        make_event('E', 'TaskB', BASE_TS + 55e3),
    ]


def build_large_trace(root_count=500):
    """
    Generate a realistic-looking trace with noise from other threads.

    Each top-level task lasts 1000us and contains:
      TaskQueueManager::ProcessTaskFromWorkQueue   0-1000   self 200
        EvaluateScript (B/E, url)                100-700   self 300
          FunctionCall (stack url)               200-500   self 250
            MinorGC                              250-300   self 50
        Layout (stack url)                       750-950   self 200
    """
    events = [
        make_event('M', 'thread_name', 0, pid=MAIN_PID, tid=MAIN_TID),
        tracing_started(ts=1000),
    ]
    for i in range(root_count):
        t = 1000 + i * 1500
        script_url = f'https://example.com/script{i % 3}.js'
        events.extend([
            make_event('X', 'TaskQueueManager::ProcessTaskFromWorkQueue', t, dur=1000),
            make_event('B', 'EvaluateScript', t + 100, url=script_url),
            make_event('X', 'ParseHTML', t + 150, dur=10, pid=2, tid=22),
            make_event('X', 'FunctionCall', t + 200, dur=300, stack_urls=['https://cdn.example.com/lib.js']),
            make_event('X', 'MinorGC', t + 250, dur=50),
            make_event('I', 'InstantMarker', t + 260),
            make_event('E', 'EvaluateScript', t + 700),
            make_event('X', 'Layout', t + 750, dur=200, stack_urls=['https://example.com/layout.js']),
            make_event('X', 'RasterTask', t + 800, dur=100, tid=99),
        ])
    return events


@pytest.fixture
def large_trace():
    return build_large_trace()


@pytest.fixture
def trace_file_factory(tmp_path):
    """Write trace events to a temporary JSON file and return its path."""
    def _create_file(events, wrapped=True, name='trace.json'):
        file_path = tmp_path / name
        payload = {'traceEvents': events, 'metadata': {}} if wrapped else events
        with open(file_path, 'w') as f:
            json.dump(payload, f)
        return str(file_path)

    return _create_file
