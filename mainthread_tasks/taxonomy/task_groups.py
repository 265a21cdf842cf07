"""
Category taxonomy for main thread trace events.

Keep the event names in step with the DevTools timeline model:
https://cs.chromium.org/chromium/src/third_party/blink/renderer/devtools/front_end/timeline_model/TimelineModel.js
"""

from types import MappingProxyType
from typing import Dict, FrozenSet, Iterable, Mapping, NamedTuple, Optional, Tuple


class TaskGroup(NamedTuple):
    """A functional category of main thread work."""
    id: str
    label: str
    trace_event_names: FrozenSet[str]


OTHER_GROUP_ID = 'Other'

TASK_GROUPS: Tuple[TaskGroup, ...] = (
    TaskGroup('ParseHTML', 'Parse HTML & CSS', frozenset([
        'ParseHTML',
        'ParseAuthorStyleSheet',
    ])),
    TaskGroup('StyleLayout', 'Style & Layout', frozenset([
        'ScheduleStyleRecalculation',
        'RecalculateStyles',
        'UpdateLayoutTree',
        'InvalidateLayout',
        'Layout',
        'UpdateLayer',
        'UpdateLayerTree',
    ])),
    TaskGroup('PaintCompositeRender', 'Rendering', frozenset([
        'Animation',
        'RequestMainThreadFrame',
        'ActivateLayerTree',
        'DrawFrame',
        'HitTest',
        'PaintSetup',
        'Paint',
        'PaintImage',
        'Rasterize',
        'RasterTask',
        'ScrollLayer',
        'CompositeLayers',
    ])),
    TaskGroup('ScriptParseCompile', 'Script Parsing & Compilation', frozenset([
        'v8.compile',
        'v8.compileModule',
        'v8.parseOnBackground',
    ])),
    TaskGroup('ScriptEvaluation', 'Script Evaluation', frozenset([
        'EventDispatch',
        'EvaluateScript',
        'EvaluateModule',
        'FunctionCall',
        'TimerFire',
        'FireIdleCallback',
        'FireAnimationFrame',
        'RunMicrotasks',
        'V8.Execute',
    ])),
    TaskGroup('GarbageCollection', 'Garbage Collection', frozenset([
        'GCEvent',
        'MinorGC',
        'MajorGC',
        'ThreadState::performIdleLazySweep',
        'ThreadState::completeSweep',
        'BlinkGCMarking',
    ])),
)


class TaskTaxonomy:
    """
    Read-only registry mapping trace event names to task groups.

    The reverse lookup and the combined name set are built once here and
    never change afterwards, so one instance can be shared by any number
    of analyses, including across worker processes.
    """

    def __init__(self, groups: Iterable[TaskGroup], other_label: str = 'Other'):
        """
        Args:
            groups: Task groups in display order. The fallback group is added
                    automatically and must not be listed.
            other_label: Label of the fallback group
        """
        self._groups = tuple(groups)
        self._other = TaskGroup(OTHER_GROUP_ID, other_label, frozenset())

        name_to_group: Dict[str, TaskGroup] = {}
        for group in self._groups:
            if group.id == OTHER_GROUP_ID:
                raise ValueError(f"'{OTHER_GROUP_ID}' is the fallback group and cannot be declared")
            for event_name in group.trace_event_names:
                if event_name in name_to_group:
                    raise ValueError(
                        f"Event '{event_name}' is claimed by both "
                        f"'{name_to_group[event_name].id}' and '{group.id}'"
                    )
                name_to_group[event_name] = group

        self._name_to_group = MappingProxyType(name_to_group)
        self._trace_event_names = frozenset(name_to_group)
        self._by_id = MappingProxyType({g.id: g for g in self.groups})

    @property
    def groups(self) -> Tuple[TaskGroup, ...]:
        """All groups, the fallback group last."""
        return self._groups + (self._other,)

    @property
    def other(self) -> TaskGroup:
        return self._other

    @property
    def name_to_group(self) -> Mapping[str, TaskGroup]:
        return self._name_to_group

    @property
    def trace_event_names(self) -> FrozenSet[str]:
        return self._trace_event_names

    def group_for(self, event_name: str) -> Optional[TaskGroup]:
        """Return the group that recognizes this event name, or None."""
        return self._name_to_group.get(event_name)

    def __getitem__(self, group_id: str) -> TaskGroup:
        return self._by_id[group_id]

    def __contains__(self, group_id: str) -> bool:
        return group_id in self._by_id

    def __getstate__(self):
        return {'groups': self._groups, 'other_label': self._other.label}

    def __setstate__(self, state):
        self.__init__(state['groups'], state['other_label'])


DEFAULT_TAXONOMY = TaskTaxonomy(TASK_GROUPS)
