"""
Result builder for JSON/web output.
"""

from typing import Dict, List

from ..core.types import TaskNode


def task_to_dict(task: TaskNode) -> Dict:
    """
    Serialize a task and its descendants to nested dictionaries.
    Parent pointers are dropped; nesting carries the structure.

    Args:
        task: Task node of a finished forest

    Returns:
        JSON-safe dictionary
    """
    def _node(t: TaskNode) -> Dict:
        return {
            'name': t.name,
            'phase': t.event.get('ph'),
            'start_time_ms': t.start_time,
            'end_time_ms': t.end_time,
            'duration_ms': t.duration,
            'self_time_ms': t.self_time,
            'attributable_url': t.attributable_url,
            'group': t.group.id,
            'group_label': t.group.label,
            'children': [],
        }

    root = _node(task)
    stack = [(task, root)]
    while stack:
        current, current_dict = stack.pop()
        for child in current.children:
            child_dict = _node(child)
            current_dict['children'].append(child_dict)
            stack.append((child, child_dict))
    return root


def prepare_results(analyzer) -> Dict:
    """
    Convert analyzer results to a structured format for JSON output.

    Args:
        analyzer: MainThreadTaskAnalyzer instance with a processed trace

    Returns:
        Dictionary with structured results
    """
    forest = analyzer.forest
    if forest is None:
        raise ValueError('No trace has been processed yet')

    groups: List[Dict] = []
    for group in analyzer.taxonomy.groups:
        time_ms = analyzer.timings_by_group.get(group.id)
        if time_ms is None:
            continue
        groups.append({
            'id': group.id,
            'label': group.label,
            'time_ms': time_ms,
            'time_formatted': analyzer.format_time(time_ms),
        })
    groups.sort(key=lambda g: -g['time_ms'])

    bootup = analyzer.metrics_populator.bootup_rows(
        analyzer.timings_by_url, analyzer.config.threshold_ms
    )
    for row in bootup:
        row['total_formatted'] = analyzer.format_time(row['total'])

    total_self_time = sum(analyzer.timings_by_group.values())
    total_bootup_time = sum(
        sum(timings.values()) for timings in analyzer.timings_by_url.values()
    )
    top_level_duration = analyzer.metrics_populator.top_level_duration(forest)

    return {
        'summary': {
            'total_tasks': len(forest),
            'toplevel_tasks': len(forest.roots),
            'total_time_ms': total_self_time,
            'total_time_formatted': analyzer.format_time(total_self_time),
            'toplevel_duration_ms': top_level_duration,
            'toplevel_duration_formatted': analyzer.format_time(top_level_duration),
            'bootup_time_ms': total_bootup_time,
            'bootup_time_formatted': analyzer.format_time(total_bootup_time),
            'cpu_slowdown_multiplier': analyzer.config.cpu_slowdown_multiplier,
        },
        'groups': groups,
        'bootup': bootup,
        'tasks': [task_to_dict(root) for root in forest.roots],
    }
