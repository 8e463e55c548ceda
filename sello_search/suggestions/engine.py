"""
Suggestion engine for the chip search box.

Given the current chip selection, ranks what to add next: metrics,
conditions, shortcut bundles, a platform and a time preset. Each
list is scored independently with the additive model in
`sello_search.suggestions.scoring`, then filtered to positive
scores, sorted best first and capped.

The engine never modifies the selection. Already-selected chips are
removed from the candidate pool before scoring, so no boost can bring
them back.
"""

import logging
from functools import lru_cache
from typing import Any, List, Mapping, Optional, Union

from sello_search.config.engine_config import EngineConfig
from sello_search.core.contracts import (
    ChipSelectionState,
    Suggestion,
    SuggestionPatch,
    SuggestionResult,
)
from sello_search.suggestions.scoring import (
    normalize_query,
    pairing_boost,
    platform_boost,
    shortcut_context_boost,
    text_relevance,
    time_boost,
)
from sello_search.suggestions.sku import SkuMatcher
from sello_search.vocabulary import Vocabulary, default_vocabulary

logger = logging.getLogger(__name__)

StateLike = Union[ChipSelectionState, Mapping[str, Any]]


def _coerce_state(state: Optional[StateLike]) -> ChipSelectionState:
    if state is None:
        return ChipSelectionState()
    if isinstance(state, ChipSelectionState):
        return state

    return ChipSelectionState.create(
        metrics=state.get("metrics") or (),
        conditions=state.get("conditions") or (),
        platforms=state.get("platforms") or (),
        time_preset=state.get("time_preset", state.get("timePreset")),
        search_text=state.get("search_text", state.get("searchText")),
    )


def _rank(candidates: List[Suggestion], limit: Optional[int] = None) -> List[Suggestion]:
    # stable sort: equal scores keep vocabulary order
    ranked = sorted((s for s in candidates if s.score > 0), key=lambda s: -s.score)
    return ranked[:limit] if limit else ranked


class SuggestionEngine:

    def __init__(
        self,
        vocabulary: Optional[Vocabulary] = None,
        config: Optional[EngineConfig] = None,
    ):
        self.vocabulary = vocabulary or default_vocabulary()
        self.config = config or EngineConfig()
        self.scoring = self.config.scoring
        self.sku_matcher = SkuMatcher(self.config.sku)

    def suggest(self, state: Optional[StateLike], catalog=None) -> SuggestionResult:
        """
        Rank next-step suggestions for a selection.

        `catalog` is an optional product list (ProductCatalog,
        DataFrame or list of dicts with sku / name). When the text is
        a SKU lookup, only SKU matches are returned.
        """
        state = _coerce_state(state)

        sku_suggestions = self.sku_matcher.suggest(state.search_text, catalog)
        if sku_suggestions is not None:
            return SuggestionResult(sku_suggestions=sku_suggestions, sku_mode=True)

        query = normalize_query(state.search_text)

        result = SuggestionResult(
            metric_suggestions=self.metric_suggestions(state, query),
            condition_suggestions=self.condition_suggestions(state, query),
            shortcut_suggestions=self.shortcut_suggestions(state, query),
            platform_suggestions=self.platform_suggestions(state, query),
            time_suggestions=self.time_suggestions(state, query),
        )

        logger.debug(
            "Suggestions for %r: metrics=%d conditions=%d shortcuts=%d platforms=%d times=%d",
            query,
            len(result.metric_suggestions),
            len(result.condition_suggestions),
            len(result.shortcut_suggestions),
            len(result.platform_suggestions),
            len(result.time_suggestions),
        )
        return result

    # -----------------------------
    # METRICS
    # -----------------------------
    def metric_suggestions(self, state: ChipSelectionState, query: str) -> List[Suggestion]:
        candidates = []
        for metric in self.vocabulary.metrics:
            if metric.id in state.metrics:
                continue

            text_score = text_relevance(query, metric.label, self.scoring, metric.description)
            if text_score is None:
                continue

            candidates.append(Suggestion(
                id=metric.id,
                label=metric.label,
                kind="metric",
                priority=metric.default_priority,
                score=self.scoring.weight(metric.default_priority) + text_score,
                description=metric.description,
                group=metric.group,
                applies=SuggestionPatch(metrics=(metric.id,)),
            ))

        return _rank(candidates, self.scoring.metric_limit)

    # -----------------------------
    # CONDITIONS
    # -----------------------------
    def condition_suggestions(self, state: ChipSelectionState, query: str) -> List[Suggestion]:
        candidates = []
        for condition in self.vocabulary.conditions:
            if condition.id in state.conditions:
                continue

            text_score = text_relevance(query, condition.label, self.scoring, condition.description)
            if text_score is None:
                continue

            score = (
                self.scoring.weight(condition.default_priority)
                + text_score
                + pairing_boost(condition.id, state.metrics, self.vocabulary, self.scoring)
                + platform_boost(condition.id, state.platforms, self.vocabulary, self.scoring)
                + time_boost(condition, state.time_preset, self.scoring)
            )

            candidates.append(Suggestion(
                id=condition.id,
                label=condition.label,
                kind="condition",
                priority=condition.default_priority,
                score=score,
                description=condition.description,
                group=condition.group,
                applies=SuggestionPatch(conditions=(condition.id,)),
            ))

        return _rank(candidates, self.scoring.condition_limit)

    # -----------------------------
    # SHORTCUTS
    # -----------------------------
    def shortcut_suggestions(self, state: ChipSelectionState, query: str) -> List[Suggestion]:
        candidates = []
        for index, shortcut in enumerate(self.vocabulary.shortcuts):
            text_score = text_relevance(query, shortcut.label, self.scoring)
            if text_score is None:
                continue

            score = (
                self.scoring.weight(shortcut.priority)
                + text_score
                + shortcut_context_boost(shortcut, state, self.vocabulary, self.scoring)
                - index
            )

            candidates.append(Suggestion(
                id=f"shortcut-{index}",
                label=shortcut.label,
                kind="shortcut",
                priority=shortcut.priority,
                score=score,
                applies=shortcut.applies,
            ))

        return _rank(candidates, self.scoring.shortcut_limit)

    # -----------------------------
    # SINGLE-SELECT LISTS
    # -----------------------------
    def platform_suggestions(self, state: ChipSelectionState, query: str) -> List[Suggestion]:
        if state.platforms:
            return []

        candidates = []
        for platform in self.vocabulary.platforms:
            text_score = text_relevance(query, platform.label, self.scoring)
            if text_score is None:
                continue

            candidates.append(Suggestion(
                id=platform.id,
                label=platform.label,
                kind="platform",
                priority="INVENTORY",
                score=self.scoring.platform_base_score + text_score,
                applies=SuggestionPatch(platforms=(platform.id,)),
            ))

        return _rank(candidates)

    def time_suggestions(self, state: ChipSelectionState, query: str) -> List[Suggestion]:
        if state.time_preset:
            return []

        candidates = []
        for preset in self.vocabulary.time_presets:
            text_score = text_relevance(query, preset.label, self.scoring)
            if text_score is None:
                continue

            candidates.append(Suggestion(
                id=preset.id,
                label=preset.label,
                kind="time",
                priority="OPPORTUNITY",
                score=self.scoring.time_base_score + text_score,
                applies=SuggestionPatch(time_preset=preset.id),
            ))

        return _rank(candidates)


# =====================================================
# MODULE-LEVEL ENTRY
# =====================================================

@lru_cache(maxsize=1)
def _default_engine() -> SuggestionEngine:
    return SuggestionEngine()


def suggest(state: Optional[StateLike], catalog=None) -> SuggestionResult:
    """Suggest with the built-in vocabulary and default scoring."""
    return _default_engine().suggest(state, catalog)
