"""
Rule-based intent parser.

Turns search box text into a QueryPlan for the query executor. This
is a fixed, auditable rule table, not a language model: the same
text and context always produce the same plan, and no text makes it
raise.
"""

import logging
import re
from functools import lru_cache
from typing import Any, List, Mapping, Optional, Sequence, Tuple, Union

from sello_search.config.engine_config import ParserConfig
from sello_search.core.contracts import ParseContext, QueryPlan, QuerySort
from sello_search.core.decision import IntentDecision
from sello_search.intent.rules import (
    INTENT_RULES,
    OVERVIEW_METRICS,
    REVENUE,
    IntentRule,
    mentions,
)
from sello_search.observability.hooks import DecisionObserver
from sello_search.vocabulary import Vocabulary, default_vocabulary

logger = logging.getLogger(__name__)


# Checked in this order; the first phrase found wins.
TIME_PHRASES = (
    ("last 7", "LAST_7_DAYS"),
    ("last 30", "LAST_30_DAYS"),
    ("this month", "THIS_MONTH"),
    ("last month", "LAST_MONTH"),
)

GROUPING_TERMS = ("sku", "product", "item")
TABLE_TERMS = ("table", "list")

EXPLICIT_LIMIT = re.compile(r"\b(?:top|limit|show)\s+(\d+)\b")

ContextLike = Union[ParseContext, Mapping[str, Any], None]


def normalize_text(text: Optional[str]) -> str:
    return " ".join((text or "").lower().split())


def _coerce_context(context: ContextLike) -> ParseContext:
    if context is None:
        return ParseContext()
    if isinstance(context, ParseContext):
        return context

    platforms = context.get("selected_platforms", context.get("selectedPlatforms")) or ()
    preset = context.get("time_preset", context.get("timePreset"))
    return ParseContext(selected_platforms=tuple(platforms), time_preset=preset or None)


# =====================================================
# PARSER
# =====================================================

class IntentParser:
    """
    Parses free text into a QueryPlan.

    Order of operations:
    1. time preset (context, then text phrases, then default)
    2. platform resolution through the vocabulary mapping
    3. default overview plan
    4. SKU grouping hint
    5. first matching intent rule
    6. explicit row limit ("top 20")
    7. "table" / "list" forces a table view
    """

    def __init__(
        self,
        vocabulary: Optional[Vocabulary] = None,
        config: Optional[ParserConfig] = None,
        rules: Optional[Sequence[IntentRule]] = None,
        observers: Optional[List[DecisionObserver]] = None,
    ):
        self.vocabulary = vocabulary or default_vocabulary()
        self.config = config or ParserConfig()
        self.rules = tuple(rules if rules is not None else INTENT_RULES)
        self._observers: List[DecisionObserver] = list(observers or [])

    def register_observer(self, observer: DecisionObserver):
        """
        Observers receive every IntentDecision. They must not raise;
        a failing observer is logged and skipped.
        """
        self._observers.append(observer)

    # -----------------------------
    # PUBLIC API
    # -----------------------------
    def parse(self, text: Optional[str], context: ContextLike = None) -> QueryPlan:
        plan, _ = self.resolve(text, context)
        return plan

    def resolve(
        self,
        text: Optional[str],
        context: ContextLike = None,
    ) -> Tuple[QueryPlan, IntentDecision]:
        lower = normalize_text(text)
        ctx = _coerce_context(context)
        rules_applied = []

        time_preset, time_source = self.resolve_time(lower, ctx)
        rules_applied.append(f"time:{time_source}")

        platforms = self.resolve_platforms(ctx)

        plan = self.default_plan(time_preset, platforms)

        if mentions(lower, *GROUPING_TERMS):
            plan.group_by = "SKU"
            plan.view_hint = "TABLE"
            rules_applied.append("grouping:sku")

        selected_intent = "overview"
        for rule in self.rules:
            if rule.matches(lower):
                rule.build(plan, lower)
                selected_intent = rule.name
                rules_applied.append(f"intent:{rule.name}")
                break

        limit_override = self.resolve_limit(lower)
        if limit_override is not None:
            plan.limit = limit_override
            rules_applied.append("limit:explicit")

        if mentions(lower, *TABLE_TERMS):
            plan.view_hint = "TABLE"
            rules_applied.append("view:table_override")

        logger.debug("Parsed %r as %s (%s)", lower, selected_intent, ", ".join(rules_applied))

        decision = IntentDecision(
            decision_type="intent_resolution",
            text=lower,
            selected_intent=selected_intent,
            rules_applied=rules_applied,
            signals={
                "time_source": time_source,
                "platforms": list(ctx.selected_platforms),
                "limit_override": limit_override,
            },
            plan=plan.to_dict(),
        )
        self._notify(decision)

        return plan, decision

    # -----------------------------
    # STEPS
    # -----------------------------
    def resolve_time(self, lower: str, ctx: ParseContext) -> Tuple[str, str]:
        if ctx.time_preset:
            return ctx.time_preset, "context"

        for phrase, preset in TIME_PHRASES:
            if phrase in lower:
                return preset, "text"

        return self.config.default_time_preset, "default"

    def resolve_platforms(self, ctx: ParseContext) -> Optional[List[str]]:
        if not ctx.selected_platforms:
            return None
        return [self.vocabulary.resolve_platform(p) for p in ctx.selected_platforms]

    def default_plan(self, time_preset: str, platforms: Optional[List[str]]) -> QueryPlan:
        return QueryPlan(
            metrics=list(OVERVIEW_METRICS),
            primary_metric=REVENUE,
            group_by="PLATFORM",
            time_preset=time_preset,
            platforms=platforms,
            filters=[],
            sort=QuerySort(REVENUE, "DESC"),
            limit=self.config.default_limit,
            view_hint="SUMMARY_CARDS",
            explain="Showing overview based on revenue.",
        )

    @staticmethod
    def resolve_limit(lower: str) -> Optional[int]:
        match = EXPLICIT_LIMIT.search(lower)
        if not match:
            return None
        limit = int(match.group(1))
        return limit if limit > 0 else None

    def _notify(self, decision: IntentDecision):
        for observer in self._observers:
            try:
                observer.record(decision)
            except Exception:
                # Observers must never break parsing
                logger.exception("Decision observer %s failed", type(observer).__name__)


# =====================================================
# MODULE-LEVEL ENTRY
# =====================================================

@lru_cache(maxsize=1)
def _default_parser() -> IntentParser:
    return IntentParser()


def parse(text: Optional[str], context: ContextLike = None) -> QueryPlan:
    """Parse with the built-in vocabulary and default settings."""
    return _default_parser().parse(text, context)
