from .contracts import (
    ChipSelectionState,
    ConditionDefinition,
    MetricDefinition,
    ParseContext,
    PlatformDefinition,
    QueryFilter,
    QueryPlan,
    QuerySort,
    Shortcut,
    Suggestion,
    SuggestionPatch,
    SuggestionResult,
    TimePresetDefinition,
)
from .selection import apply_suggestion, clear_selection
from .time_windows import resolve_time_window

__all__ = [
    "ChipSelectionState",
    "ConditionDefinition",
    "MetricDefinition",
    "ParseContext",
    "PlatformDefinition",
    "QueryFilter",
    "QueryPlan",
    "QuerySort",
    "Shortcut",
    "Suggestion",
    "SuggestionPatch",
    "SuggestionResult",
    "TimePresetDefinition",
    "apply_suggestion",
    "clear_selection",
    "resolve_time_window",
]
