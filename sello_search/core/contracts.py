from dataclasses import dataclass, field
from typing import Any, Dict, FrozenSet, Iterable, List, Literal, Optional, Tuple


Priority = Literal["RISK", "DECLINE", "INVENTORY", "OPPORTUNITY", "HYGIENE"]
SuggestionKind = Literal["metric", "condition", "shortcut", "platform", "time", "sku"]
FilterOp = Literal["GT", "LT", "GTE", "LTE", "EQ", "CONTAINS"]
SortDirection = Literal["ASC", "DESC"]
GroupBy = Literal["PLATFORM", "SKU", "DATE"]
ViewHint = Literal["SUMMARY_CARDS", "TABLE", "RANKED_LIST"]


# =====================================================
# VOCABULARY RECORDS
# =====================================================

@dataclass(frozen=True)
class MetricDefinition:
    id: str
    label: str
    group: str
    default_priority: Priority
    description: str


@dataclass(frozen=True)
class ConditionDefinition:
    """
    A diagnosable condition.

    Condition ids double as canonical diagnosis identifiers for the
    diagnostics pages, so they must never be renamed.
    """
    id: str
    label: str
    group: str
    default_priority: Priority
    description: str


@dataclass(frozen=True)
class PlatformDefinition:
    id: str
    label: str


@dataclass(frozen=True)
class TimePresetDefinition:
    id: str
    label: str


@dataclass(frozen=True)
class SuggestionPatch:
    """
    Chips to add when a suggestion is accepted.
    """
    metrics: Tuple[str, ...] = ()
    conditions: Tuple[str, ...] = ()
    platforms: Tuple[str, ...] = ()
    time_preset: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        payload: Dict[str, Any] = {}
        if self.metrics:
            payload["metrics"] = list(self.metrics)
        if self.conditions:
            payload["conditions"] = list(self.conditions)
        if self.platforms:
            payload["platforms"] = list(self.platforms)
        if self.time_preset:
            payload["timePreset"] = self.time_preset
        return payload


@dataclass(frozen=True)
class Shortcut:
    label: str
    priority: Priority
    applies: SuggestionPatch


# =====================================================
# SELECTION STATE
# =====================================================

@dataclass(frozen=True)
class ChipSelectionState:
    """
    The chips currently selected in the search box.

    Frozen and hashable: the engine only reads it, and callers may
    memoize suggestion results keyed on it.
    """
    metrics: FrozenSet[str] = frozenset()
    conditions: FrozenSet[str] = frozenset()
    platforms: FrozenSet[str] = frozenset()
    time_preset: Optional[str] = None
    search_text: str = ""

    @classmethod
    def create(
        cls,
        metrics: Iterable[str] = (),
        conditions: Iterable[str] = (),
        platforms: Iterable[str] = (),
        time_preset: Optional[str] = None,
        search_text: Optional[str] = "",
    ) -> "ChipSelectionState":
        return cls(
            metrics=frozenset(metrics or ()),
            conditions=frozenset(conditions or ()),
            platforms=frozenset(platforms or ()),
            time_preset=time_preset or None,
            search_text=search_text or "",
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "metrics": sorted(self.metrics),
            "conditions": sorted(self.conditions),
            "platforms": sorted(self.platforms),
            "timePreset": self.time_preset,
            "searchText": self.search_text,
        }


# =====================================================
# SUGGESTIONS
# =====================================================

@dataclass(frozen=True)
class Suggestion:
    id: str
    label: str
    kind: SuggestionKind
    priority: Priority
    score: float
    applies: SuggestionPatch = field(default_factory=SuggestionPatch)
    description: Optional[str] = None
    group: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "label": self.label,
            "kind": self.kind,
            "priority": self.priority,
            "score": self.score,
            "description": self.description,
            "groupLabel": self.group,
            "applies": self.applies.to_dict(),
        }


@dataclass
class SuggestionResult:
    metric_suggestions: List[Suggestion] = field(default_factory=list)
    condition_suggestions: List[Suggestion] = field(default_factory=list)
    shortcut_suggestions: List[Suggestion] = field(default_factory=list)
    platform_suggestions: List[Suggestion] = field(default_factory=list)
    time_suggestions: List[Suggestion] = field(default_factory=list)
    sku_suggestions: List[Suggestion] = field(default_factory=list)
    sku_mode: bool = False

    def to_dict(self) -> Dict[str, Any]:
        return {
            "metricSuggestions": [s.to_dict() for s in self.metric_suggestions],
            "conditionSuggestions": [s.to_dict() for s in self.condition_suggestions],
            "shortcutSuggestions": [s.to_dict() for s in self.shortcut_suggestions],
            "platformSuggestions": [s.to_dict() for s in self.platform_suggestions],
            "timeSuggestions": [s.to_dict() for s in self.time_suggestions],
            "skuSuggestions": [s.to_dict() for s in self.sku_suggestions],
            "skuMode": self.sku_mode,
        }


# =====================================================
# QUERY PLAN
# =====================================================

@dataclass(frozen=True)
class QueryFilter:
    field: str
    op: FilterOp
    value: Any


@dataclass(frozen=True)
class QuerySort:
    field: str
    direction: SortDirection


@dataclass
class QueryPlan:
    """
    Declarative description of what to compute, filter, sort and show.

    Handed as-is to the query executor. `platforms` holds the resolved
    sales-log tags, not the UI platform ids.
    """
    metrics: List[str]
    primary_metric: str
    group_by: GroupBy
    time_preset: str
    sort: QuerySort
    limit: int
    view_hint: ViewHint
    explain: str
    filters: List[QueryFilter] = field(default_factory=list)
    platforms: Optional[List[str]] = None

    def to_dict(self) -> Dict[str, Any]:
        payload = {
            "metrics": list(self.metrics),
            "primaryMetric": self.primary_metric,
            "groupBy": self.group_by,
            "timePreset": self.time_preset,
            "filters": [
                {"field": f.field, "op": f.op, "value": f.value}
                for f in self.filters
            ],
            "sort": {"field": self.sort.field, "direction": self.sort.direction},
            "limit": self.limit,
            "viewHint": self.view_hint,
            "explain": self.explain,
        }
        if self.platforms is not None:
            payload["platforms"] = list(self.platforms)
        return payload


@dataclass(frozen=True)
class ParseContext:
    selected_platforms: Tuple[str, ...] = ()
    time_preset: Optional[str] = None

    @classmethod
    def from_state(cls, state: ChipSelectionState) -> "ParseContext":
        return cls(
            selected_platforms=tuple(sorted(state.platforms)),
            time_preset=state.time_preset,
        )
