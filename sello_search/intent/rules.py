"""
Intent rules for the search box parser.

Rules are evaluated in list order and the first match wins, even when
the text also mentions keywords of a later rule. The order is part of
the contract: ad cost before profit, profit before inventory,
inventory before opportunity, opportunity before returns.
"""

from dataclasses import dataclass
from typing import Callable, List

from sello_search.core.contracts import QueryFilter, QueryPlan, QuerySort


# =====================================================
# EXECUTOR FIELDS
# =====================================================
# Field names understood by the query executor. These are data
# columns, not chip metric ids.

REVENUE = "REVENUE"
UNITS = "UNITS"
PROFIT = "PROFIT"
NET_MARGIN_PCT = "NET_MARGIN_PCT"
TACOS_PCT = "TACOS_PCT"
ADS_SPEND = "ADS_SPEND"
MER = "MER"
STOCK_COVER_DAYS = "STOCK_COVER_DAYS"
STOCK_LEVEL = "STOCK_LEVEL"
DAILY_VELOCITY = "DAILY_VELOCITY"

OVERVIEW_METRICS = (REVENUE, UNITS, NET_MARGIN_PCT, PROFIT)

# Stock thresholds (days of cover)
STOCKOUT_COVER_DAYS = 14
OVERSTOCK_COVER_DAYS = 120

# TACoS thresholds (%)
HIGH_TACOS_PCT = 15
VERY_HIGH_TACOS_PCT = 25

LOW_MARGIN_PCT = 5


# =====================================================
# TEXT SIGNALS
# =====================================================

def mentions(text: str, *phrases: str) -> bool:
    """
    Plain substring match on any phrase.

    Modifiers match inside words too: "below target" and "slow
    moving" both carry a "low" signal.
    """
    return any(p in text for p in phrases)


# =====================================================
# RULE CONTRACT
# =====================================================

@dataclass(frozen=True)
class IntentRule:
    name: str
    predicate: Callable[[str], bool]
    build: Callable[[QueryPlan, str], None]

    def matches(self, text: str) -> bool:
        return self.predicate(text)


# -------------------------------------------------
# A) Ad dependency / TACoS
# -------------------------------------------------

def is_ad_dependency(text: str) -> bool:
    return mentions(text, "tacos", "ad dependency", "advertising", "ad spend")


def build_ad_dependency(plan: QueryPlan, text: str) -> None:
    plan.primary_metric = TACOS_PCT
    plan.metrics = [TACOS_PCT, ADS_SPEND, REVENUE, MER]
    plan.sort = QuerySort(TACOS_PCT, "DESC")
    plan.view_hint = "RANKED_LIST"
    plan.explain = "Analyzing Total Advertising Cost of Sales (TACoS)."

    # Only items with ad activity
    plan.filters.append(QueryFilter(ADS_SPEND, "GT", 0))

    if mentions(text, "high", "dependency"):
        threshold = VERY_HIGH_TACOS_PCT if mentions(text, "very high") else HIGH_TACOS_PCT
        plan.filters.append(QueryFilter(TACOS_PCT, "GTE", threshold))
        plan.explain = f"Showing items with high ad dependency (TACoS >= {threshold}%)."


# -------------------------------------------------
# B) Profit / margin
# -------------------------------------------------

def is_profitability(text: str) -> bool:
    return mentions(text, "profit", "margin", "loss")


def build_profitability(plan: QueryPlan, text: str) -> None:
    plan.primary_metric = NET_MARGIN_PCT
    plan.metrics = [NET_MARGIN_PCT, PROFIT, REVENUE, UNITS]
    plan.sort = QuerySort(PROFIT, "DESC")
    plan.explain = "Analyzing profitability."

    if mentions(text, "low", "negative", "loss"):
        # worst first
        plan.filters.append(QueryFilter(NET_MARGIN_PCT, "LT", LOW_MARGIN_PCT))
        plan.sort = QuerySort(NET_MARGIN_PCT, "ASC")
        plan.view_hint = "RANKED_LIST"
        plan.explain = f"Highlighting profitability issues (net margin < {LOW_MARGIN_PCT}%)."


# -------------------------------------------------
# C) Inventory / stock cover
# -------------------------------------------------

def is_inventory(text: str) -> bool:
    return mentions(text, "stock", "inventory", "runway", "cover")


def is_out_of_stock(text: str) -> bool:
    return mentions(text, "out of stock") or (
        mentions(text, "stockout") and not mentions(text, "risk")
    )


def is_overstock(text: str) -> bool:
    return mentions(text, "overstock", "excess", "high")


def is_stock_risk(text: str) -> bool:
    # "overstock risk" is an overstock question, not a stockout one
    return (
        mentions(text, "stockout")
        or mentions(text, "low")
        or (mentions(text, "risk") and not is_overstock(text))
    )


def build_inventory(plan: QueryPlan, text: str) -> None:
    plan.primary_metric = STOCK_COVER_DAYS
    plan.metrics = [STOCK_COVER_DAYS, STOCK_LEVEL, DAILY_VELOCITY, REVENUE]
    plan.group_by = "SKU"
    plan.view_hint = "TABLE"

    if is_out_of_stock(text):
        plan.filters.append(QueryFilter(STOCK_LEVEL, "LTE", 0))
        plan.sort = QuerySort(DAILY_VELOCITY, "DESC")
        plan.explain = "Showing items currently out of stock, fastest sellers first."
    elif is_stock_risk(text):
        plan.filters.append(QueryFilter(STOCK_COVER_DAYS, "LT", STOCKOUT_COVER_DAYS))
        plan.filters.append(QueryFilter(STOCK_LEVEL, "GT", 0))
        plan.sort = QuerySort(STOCK_COVER_DAYS, "ASC")
        plan.explain = (
            f"Highlighting items at risk of stocking out (< {STOCKOUT_COVER_DAYS} days cover)."
        )
    elif is_overstock(text):
        plan.filters.append(QueryFilter(STOCK_COVER_DAYS, "GT", OVERSTOCK_COVER_DAYS))
        plan.sort = QuerySort(STOCK_COVER_DAYS, "DESC")
        plan.explain = (
            f"Highlighting potential overstock (> {OVERSTOCK_COVER_DAYS} days cover)."
        )
    else:
        plan.sort = QuerySort(STOCK_COVER_DAYS, "ASC")
        plan.explain = "Inventory health overview."


# -------------------------------------------------
# D) Opportunity / scale
# -------------------------------------------------

def is_opportunity(text: str) -> bool:
    return mentions(text, "scale", "winning", "best", "top")


def build_opportunity(plan: QueryPlan, text: str) -> None:
    plan.primary_metric = PROFIT
    plan.metrics = [PROFIT, REVENUE, UNITS, NET_MARGIN_PCT]
    plan.sort = QuerySort(PROFIT, "DESC")
    plan.view_hint = "RANKED_LIST"
    plan.explain = "Highlighting top performing products."


# -------------------------------------------------
# E) Returns
# -------------------------------------------------

def is_returns(text: str) -> bool:
    return mentions(text, "return", "refund")


def build_returns(plan: QueryPlan, text: str) -> None:
    # TODO: add a return-rate filter once the executor exposes a RETURN_RATE_PCT field
    plan.view_hint = "TABLE"
    plan.explain = "Returns overview."


# =====================================================
# RULE TABLE (ORDER IS PRECEDENCE)
# =====================================================

INTENT_RULES: List[IntentRule] = [
    IntentRule("ad_dependency", is_ad_dependency, build_ad_dependency),
    IntentRule("profitability", is_profitability, build_profitability),
    IntentRule("inventory", is_inventory, build_inventory),
    IntentRule("opportunity", is_opportunity, build_opportunity),
    IntentRule("returns", is_returns, build_returns),
]
