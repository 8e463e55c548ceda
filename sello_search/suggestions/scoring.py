"""
Scoring signals for suggestion ranking.

Every signal is additive and computed independently per candidate.
`text_relevance` is the only signal that can exclude a candidate:
while the user is typing, a candidate that does not match the text
is dropped instead of down-ranked.
"""

import re
from typing import AbstractSet, Optional

from sello_search.config.engine_config import ScoringConfig
from sello_search.core.contracts import ConditionDefinition, Shortcut


ADVERTISING = re.compile(r"\bads?\b|advertis", re.IGNORECASE)

RECENT_WINDOW_PRESETS = ("LAST_7_DAYS",)
PERIOD_WINDOW_PRESETS = ("LAST_30_DAYS", "THIS_MONTH")


def normalize_query(search_text: Optional[str]) -> str:
    return (search_text or "").strip().lower()


# -------------------------------------------------
# TEXT
# -------------------------------------------------
def text_relevance(
    query: str,
    label: str,
    scoring: ScoringConfig,
    description: Optional[str] = None,
) -> Optional[int]:
    """
    Tiered text match, first tier wins:
    exact label > label prefix > label substring > description substring.

    Returns 0 when there is no query, None when the candidate must be
    excluded. Pass `description` only for metrics and conditions.
    """
    if not query:
        return 0

    label_lower = label.lower()

    if label_lower == query:
        return scoring.exact_match_boost
    if label_lower.startswith(query):
        return scoring.prefix_match_boost
    if query in label_lower:
        return scoring.partial_match_boost
    if description and query in description.lower():
        return scoring.description_match_boost

    return None


# -------------------------------------------------
# CONDITION CONTEXT
# -------------------------------------------------
def pairing_boost(condition_id: str, selected_metrics: AbstractSet[str], vocab, scoring: ScoringConfig) -> int:
    hits = sum(1 for m in selected_metrics if condition_id in vocab.pairings_for(m))
    return hits * scoring.pairing_boost


def platform_boost(condition_id: str, selected_platforms: AbstractSet[str], vocab, scoring: ScoringConfig) -> int:
    hits = sum(1 for p in selected_platforms if condition_id in vocab.boosts_for(p))
    return hits * scoring.platform_boost


def time_boost(condition: ConditionDefinition, time_preset: Optional[str], scoring: ScoringConfig) -> int:
    if time_preset in RECENT_WINDOW_PRESETS:
        if condition.default_priority == "DECLINE" or condition.id == "STOCKOUT_RISK":
            return scoring.time_boost
    elif time_preset in PERIOD_WINDOW_PRESETS:
        if condition.default_priority in ("INVENTORY", "HYGIENE"):
            return scoring.time_boost
    return 0


# -------------------------------------------------
# SHORTCUT CONTEXT
# -------------------------------------------------
def mentions_advertising(label: str) -> bool:
    return bool(ADVERTISING.search(label))


def shortcut_context_boost(shortcut: Shortcut, state, vocab, scoring: ScoringConfig) -> int:
    patch = shortcut.applies
    boost = 0

    # shortcut reuses a focused metric
    if state.metrics and any(m in state.metrics for m in patch.metrics):
        boost += scoring.pairing_boost

    # shortcut targets conditions paired with a focused metric
    if patch.conditions:
        for metric_id in state.metrics:
            paired = vocab.pairings_for(metric_id)
            if any(c in paired for c in patch.conditions):
                boost += scoring.pairing_boost

    if mentions_advertising(shortcut.label) and any(
        vocab.is_ad_capable(p) for p in state.platforms
    ):
        boost += scoring.platform_boost

    return boost
