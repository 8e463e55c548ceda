from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Dict, Mapping, Tuple


def _default_priority_weights() -> Dict[str, int]:
    return {
        "RISK": 100,
        "DECLINE": 80,
        "INVENTORY": 60,
        "OPPORTUNITY": 40,
        "HYGIENE": 20,
    }


# -------------------------------------------------
# SCORING
# -------------------------------------------------
@dataclass(frozen=True)
class ScoringConfig:
    """
    Additive scoring constants for suggestion ranking.

    Text boosts are an order of magnitude above the context boosts,
    which in turn exceed the spread of the priority weights: a typed
    match always outranks context, and context always outranks the
    base priority order.

    `priority_weights` is copied into a read-only mapping and left out
    of the hash; equality still compares it.
    """
    priority_weights: Mapping[str, int] = field(default_factory=_default_priority_weights, hash=False)

    exact_match_boost: int = 3000
    prefix_match_boost: int = 2000
    partial_match_boost: int = 1000
    description_match_boost: int = 500

    pairing_boost: int = 200
    platform_boost: int = 100
    time_boost: int = 50

    platform_base_score: int = 30
    time_base_score: int = 35

    metric_limit: int = 8
    condition_limit: int = 10
    shortcut_limit: int = 6

    def __post_init__(self):
        # frozen: go through object.__setattr__
        object.__setattr__(self, "priority_weights", MappingProxyType(dict(self.priority_weights)))

    def weight(self, priority: str) -> int:
        return self.priority_weights.get(priority, 0)


# -------------------------------------------------
# PARSER
# -------------------------------------------------
@dataclass(frozen=True)
class ParserConfig:
    default_limit: int = 50
    default_time_preset: str = "LAST_30_DAYS"


# -------------------------------------------------
# SKU DIRECT MATCH
# -------------------------------------------------
@dataclass(frozen=True)
class SkuConfig:
    markers: Tuple[str, ...] = ("sku:", "sku ")
    min_query_length: int = 2
    max_results: int = 20


# -------------------------------------------------
# ENGINE CONFIG
# -------------------------------------------------
@dataclass(frozen=True)
class EngineConfig:
    """
    Typed view of the runtime configuration.

    Rules:
    - every section always exists (no None sections)
    - no shared mutable defaults
    """
    scoring: ScoringConfig = field(default_factory=ScoringConfig)
    parser: ParserConfig = field(default_factory=ParserConfig)
    sku: SkuConfig = field(default_factory=SkuConfig)
