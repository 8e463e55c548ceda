from dataclasses import dataclass, field
from functools import lru_cache
from types import MappingProxyType
from typing import Any, Dict, Iterable, Mapping, Optional, Tuple

from sello_search.core.contracts import (
    ConditionDefinition,
    MetricDefinition,
    PlatformDefinition,
    Shortcut,
    SuggestionPatch,
    TimePresetDefinition,
)
from sello_search.vocabulary import defaults


def _freeze_table(table: Optional[Mapping[str, Iterable[str]]]) -> Mapping[str, Tuple[str, ...]]:
    return MappingProxyType({k: tuple(v) for k, v in (table or {}).items()})


# =====================================================
# VOCABULARY
# =====================================================

@dataclass(frozen=True)
class Vocabulary:
    """
    Closed, read-only catalog the parser and engine work against.

    Build it once and pass it in. Tables are copied into tuples and
    read-only mappings on construction, so a Vocabulary cannot be
    changed after it is handed out.
    """

    metrics: Tuple[MetricDefinition, ...]
    conditions: Tuple[ConditionDefinition, ...]
    platforms: Tuple[PlatformDefinition, ...]
    time_presets: Tuple[TimePresetDefinition, ...]
    platform_mapping: Mapping[str, str] = field(default_factory=dict)
    smart_pairings: Mapping[str, Tuple[str, ...]] = field(default_factory=dict)
    platform_boosts: Mapping[str, Tuple[str, ...]] = field(default_factory=dict)
    shortcuts: Tuple[Shortcut, ...] = ()
    ad_capable_platforms: Tuple[str, ...] = ()

    def __post_init__(self):
        # frozen: go through object.__setattr__
        object.__setattr__(self, "metrics", tuple(self.metrics))
        object.__setattr__(self, "conditions", tuple(self.conditions))
        object.__setattr__(self, "platforms", tuple(self.platforms))
        object.__setattr__(self, "time_presets", tuple(self.time_presets))
        object.__setattr__(self, "shortcuts", tuple(self.shortcuts))
        object.__setattr__(self, "ad_capable_platforms", tuple(self.ad_capable_platforms))
        object.__setattr__(self, "platform_mapping", MappingProxyType(dict(self.platform_mapping)))
        object.__setattr__(self, "smart_pairings", _freeze_table(self.smart_pairings))
        object.__setattr__(self, "platform_boosts", _freeze_table(self.platform_boosts))

    # -----------------------------
    # LOOKUPS
    # -----------------------------
    def metric(self, metric_id: str) -> Optional[MetricDefinition]:
        return next((m for m in self.metrics if m.id == metric_id), None)

    def condition(self, condition_id: str) -> Optional[ConditionDefinition]:
        return next((c for c in self.conditions if c.id == condition_id), None)

    def pairings_for(self, metric_id: str) -> Tuple[str, ...]:
        return self.smart_pairings.get(metric_id, ())

    def boosts_for(self, platform_id: str) -> Tuple[str, ...]:
        return self.platform_boosts.get(platform_id, ())

    def resolve_platform(self, platform_id: str) -> str:
        """
        Sales-log tag for a platform id. Unknown ids pass through unchanged.
        """
        return self.platform_mapping.get(platform_id, platform_id)

    def is_ad_capable(self, platform_id: str) -> bool:
        return platform_id in self.ad_capable_platforms

    @property
    def metric_ids(self) -> Tuple[str, ...]:
        return tuple(m.id for m in self.metrics)

    @property
    def condition_ids(self) -> Tuple[str, ...]:
        return tuple(c.id for c in self.conditions)

    @property
    def platform_ids(self) -> Tuple[str, ...]:
        return tuple(p.id for p in self.platforms)

    @property
    def time_preset_ids(self) -> Tuple[str, ...]:
        return tuple(t.id for t in self.time_presets)

    # -----------------------------
    # CONSTRUCTION
    # -----------------------------
    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Vocabulary":
        """
        Build a vocabulary from plain data (e.g. a parsed YAML file).

        Expected keys mirror the attribute names. Definitions are given
        as mappings; shortcut patches use the keys metrics, conditions,
        platforms and time_preset.
        """
        return cls(
            metrics=[MetricDefinition(**m) for m in data.get("metrics", [])],
            conditions=[ConditionDefinition(**c) for c in data.get("conditions", [])],
            platforms=[PlatformDefinition(**p) for p in data.get("platforms", [])],
            time_presets=[TimePresetDefinition(**t) for t in data.get("time_presets", [])],
            platform_mapping=data.get("platform_mapping", {}),
            smart_pairings=data.get("smart_pairings", {}),
            platform_boosts=data.get("platform_boosts", {}),
            shortcuts=[
                Shortcut(
                    label=s["label"],
                    priority=s["priority"],
                    applies=SuggestionPatch(
                        metrics=tuple(s.get("applies", {}).get("metrics", ())),
                        conditions=tuple(s.get("applies", {}).get("conditions", ())),
                        platforms=tuple(s.get("applies", {}).get("platforms", ())),
                        time_preset=s.get("applies", {}).get("time_preset"),
                    ),
                )
                for s in data.get("shortcuts", [])
            ],
            ad_capable_platforms=data.get("ad_capable_platforms", ()),
        )


@lru_cache(maxsize=1)
def default_vocabulary() -> Vocabulary:
    return Vocabulary(
        metrics=defaults.METRICS,
        conditions=defaults.CONDITIONS,
        platforms=defaults.PLATFORMS,
        time_presets=defaults.TIME_PRESETS,
        platform_mapping=defaults.PLATFORM_MAPPING,
        smart_pairings=defaults.SMART_PAIRINGS,
        platform_boosts=defaults.PLATFORM_BOOSTS,
        shortcuts=defaults.SHORTCUTS,
        ad_capable_platforms=defaults.AD_CAPABLE_PLATFORMS,
    )
