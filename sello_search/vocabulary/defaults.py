"""
Default search vocabulary.

Metrics, conditions, platforms and time presets offered as chips,
plus the cross-reference tables the suggestion engine ranks with.

NOTE:
- Condition ids are shared with the diagnostics registry. Do not rename.
- PLATFORM_MAPPING values must match the platform tags written by the
  sales-log import EXACTLY (case-sensitive), or platform filters
  silently return nothing.
"""

from sello_search.core.contracts import (
    ConditionDefinition,
    MetricDefinition,
    PlatformDefinition,
    Shortcut,
    SuggestionPatch,
    TimePresetDefinition,
)


# =====================================================
# METRICS
# =====================================================

METRICS = (
    # Profit & value
    MetricDefinition("CMA_PCT", "Contribution Margin %", "Profit", "RISK", "Net margin after Ad Spend"),
    MetricDefinition("NET_PROFIT", "Net Profit (£)", "Profit", "RISK", "True bottom line profit"),
    MetricDefinition("PROFIT_PER_UNIT", "Profit Per Unit", "Profit", "DECLINE", "Unit economics health"),

    # Demand
    MetricDefinition("SALES_QTY", "Sales Qty", "Demand", "OPPORTUNITY", "Total units sold"),
    MetricDefinition("REVENUE", "Revenue", "Demand", "OPPORTUNITY", "Gross Sales"),
    MetricDefinition("DAILY_VELOCITY", "Daily Velocity", "Demand", "INVENTORY", "Avg units sold per day"),

    # Inventory
    MetricDefinition("STOCK_LEVEL", "Stock Level", "Inventory", "INVENTORY", "Units on hand"),
    MetricDefinition("STOCK_COVER_DAYS", "Stock Cover (Days)", "Inventory", "RISK", "Days until stockout"),
    MetricDefinition("AGED_STOCK_PCT", "Aged Stock %", "Inventory", "RISK", "% of stock older than 90 days"),
    MetricDefinition("INBOUND_QTY_30D", "Inbound (30d)", "Inventory", "INVENTORY", "Stock arriving soon"),

    # Health
    MetricDefinition("ADS_SPEND_PCT", "TACoS %", "Health", "RISK", "Total Ad Cost of Sales"),
    MetricDefinition("RETURN_RATE_PCT", "Return Rate %", "Health", "RISK", "Refunds / Sales"),
    MetricDefinition("ORGANIC_SHARE_PCT", "Organic Share %", "Health", "OPPORTUNITY", "100% - TACoS%"),

    # Trends
    MetricDefinition("MARGIN_CHANGE_PCT", "Margin Trend %", "Trend", "DECLINE", "Change in margin vs previous period"),
    MetricDefinition("VELOCITY_CHANGE", "Velocity Trend %", "Trend", "DECLINE", "Change in sales qty vs previous period"),
)


# =====================================================
# CONDITIONS
# =====================================================

CONDITIONS = (
    # Loss & risk
    ConditionDefinition("NEGATIVE_LOSS", "Negative / Loss", "Risk", "RISK", "Products losing money"),
    ConditionDefinition("BELOW_TARGET", "Below Target", "Risk", "RISK", "Underperforming KPIs"),
    ConditionDefinition("HIGH_AD_DEPENDENCY", "High Ad Dependency", "Risk", "RISK", "Sales driven mostly by ads"),
    ConditionDefinition("HIGH_RETURN_RATE", "High Returns", "Risk", "RISK", "Return rate > 5%"),

    # Inventory risk
    ConditionDefinition("STOCKOUT_RISK", "Stockout Risk", "Inventory", "RISK", "Less than 14 days cover"),
    ConditionDefinition("OVERSTOCK_RISK", "Overstock Risk", "Inventory", "INVENTORY", "More than 120 days cover"),

    # Performance decline
    ConditionDefinition("VOLUME_DROP_WOW", "Volume Change (PoP)", "Decline", "DECLINE", "Sales qty change vs previous period"),
    ConditionDefinition("REVENUE_DROP_WOW", "Revenue Change (PoP)", "Decline", "DECLINE", "Revenue change vs previous period"),
    ConditionDefinition("VELOCITY_DROP_WOW", "Velocity Change (PoP)", "Decline", "DECLINE", "Daily velocity change vs previous period"),
    ConditionDefinition("MARGIN_DROP_WOW", "Margin Change (PoP)", "Decline", "DECLINE", "Profitability decreasing"),

    # Opportunity
    ConditionDefinition("SCALE_CANDIDATE", "Scale Candidate", "Opportunity", "OPPORTUNITY", "High margin, high velocity"),
    ConditionDefinition("STRONG_ORGANIC", "Strong Organic", "Opportunity", "OPPORTUNITY", "Low ad dependency"),

    # Hygiene
    ConditionDefinition("DORMANT_NO_SALES", "Dormant / No Sales", "Hygiene", "HYGIENE", "Zero sales in period"),
)


# =====================================================
# PLATFORMS & TIME
# =====================================================

PLATFORMS = (
    PlatformDefinition("AMAZON_UK_FBA", "Amazon FBA"),
    PlatformDefinition("AMAZON_UK_FBM", "Amazon FBM"),
    PlatformDefinition("EBAY", "eBay"),
    PlatformDefinition("THE_RANGE", "The Range"),
    PlatformDefinition("MANOMANO", "ManoMano"),
    PlatformDefinition("WAYFAIR", "Wayfair"),
    PlatformDefinition("ONBUY", "OnBuy"),
    PlatformDefinition("GROUPON_UK", "Groupon"),
)

# UI platform id -> platform tag in the sales logs
PLATFORM_MAPPING = {
    "AMAZON_UK_FBA": "Amazon(UK) FBA",
    "AMAZON_UK_FBM": "Amazon(UK) FBM",
    "EBAY": "eBay",
    "THE_RANGE": "The Range",
    "MANOMANO": "ManoMano",
    "WAYFAIR": "Wayfair",
    "ONBUY": "Onbuy",
    "GROUPON_UK": "Groupon(UK)",
}

# Platforms where sponsored listings exist
AD_CAPABLE_PLATFORMS = ("AMAZON_UK_FBA", "AMAZON_UK_FBM")

TIME_PRESETS = (
    TimePresetDefinition("LAST_7_DAYS", "Last 7 Days"),
    TimePresetDefinition("LAST_30_DAYS", "Last 30 Days"),
    TimePresetDefinition("LAST_90_DAYS", "Last 90 Days"),
    TimePresetDefinition("LAST_180_DAYS", "Last 180 Days"),
    TimePresetDefinition("THIS_MONTH", "This Month"),
    TimePresetDefinition("LAST_MONTH", "Last Month"),
    TimePresetDefinition("THIS_YEAR", "This Year (YTD)"),
    TimePresetDefinition("ALL_TIME", "All Time"),
)


# =====================================================
# SMART PAIRINGS (focused metric -> relevant conditions)
# =====================================================

SMART_PAIRINGS = {
    "CMA_PCT": ("NEGATIVE_LOSS", "BELOW_TARGET", "HIGH_AD_DEPENDENCY", "MARGIN_DROP_WOW"),
    "NET_PROFIT": ("NEGATIVE_LOSS", "MARGIN_DROP_WOW", "BELOW_TARGET"),
    "PROFIT_PER_UNIT": ("BELOW_TARGET", "NEGATIVE_LOSS"),
    "SALES_QTY": ("VOLUME_DROP_WOW", "DORMANT_NO_SALES", "SCALE_CANDIDATE"),
    "REVENUE": ("REVENUE_DROP_WOW", "SCALE_CANDIDATE", "BELOW_TARGET"),
    "DAILY_VELOCITY": ("VELOCITY_DROP_WOW", "SCALE_CANDIDATE", "DORMANT_NO_SALES"),
    "STOCK_LEVEL": ("STOCKOUT_RISK", "OVERSTOCK_RISK", "DORMANT_NO_SALES"),
    "STOCK_COVER_DAYS": ("STOCKOUT_RISK", "OVERSTOCK_RISK"),
    "AGED_STOCK_PCT": ("OVERSTOCK_RISK", "DORMANT_NO_SALES"),
    "INBOUND_QTY_30D": ("STOCKOUT_RISK",),
    "ADS_SPEND_PCT": ("HIGH_AD_DEPENDENCY", "NEGATIVE_LOSS", "BELOW_TARGET", "MARGIN_DROP_WOW"),
    "RETURN_RATE_PCT": ("HIGH_RETURN_RATE", "NEGATIVE_LOSS"),
    "ORGANIC_SHARE_PCT": ("STRONG_ORGANIC", "HIGH_AD_DEPENDENCY"),
    "MARGIN_CHANGE_PCT": ("MARGIN_DROP_WOW",),
    "VELOCITY_CHANGE": ("VELOCITY_DROP_WOW", "SCALE_CANDIDATE"),
}


# =====================================================
# PLATFORM BOOSTS (selected platform -> relevant conditions)
# =====================================================

PLATFORM_BOOSTS = {
    "AMAZON_UK_FBA": ("HIGH_AD_DEPENDENCY", "BELOW_TARGET", "MARGIN_DROP_WOW", "STOCKOUT_RISK"),
    "AMAZON_UK_FBM": ("HIGH_AD_DEPENDENCY", "BELOW_TARGET"),
    "EBAY": ("VOLUME_DROP_WOW", "MARGIN_DROP_WOW"),
    "THE_RANGE": ("OVERSTOCK_RISK", "DORMANT_NO_SALES"),
    "MANOMANO": ("BELOW_TARGET", "HIGH_RETURN_RATE"),
    "WAYFAIR": ("OVERSTOCK_RISK",),
    "ONBUY": ("DORMANT_NO_SALES",),
    "GROUPON_UK": ("DORMANT_NO_SALES",),
}


# =====================================================
# SHORTCUT LIBRARY
# =====================================================
# Order matters: list position is the tie-break between equal scores.

SHORTCUTS = (
    # Profit protection
    Shortcut("Negative Contribution Margin", "RISK", SuggestionPatch(
        metrics=("CMA_PCT",), conditions=("NEGATIVE_LOSS",))),
    Shortcut("Profit Bleeders (High Sales, Low Profit)", "RISK", SuggestionPatch(
        metrics=("NET_PROFIT", "SALES_QTY"), conditions=("NEGATIVE_LOSS",))),
    Shortcut("High Ad Spend, Low Margin", "RISK", SuggestionPatch(
        metrics=("ADS_SPEND_PCT", "CMA_PCT"), conditions=("HIGH_AD_DEPENDENCY", "BELOW_TARGET"))),

    # Inventory
    Shortcut("Stockout Risk (< 14 Days)", "RISK", SuggestionPatch(
        metrics=("STOCK_COVER_DAYS",), conditions=("STOCKOUT_RISK",))),
    Shortcut("Overstock (> 120 Days) with Inbound", "INVENTORY", SuggestionPatch(
        metrics=("STOCK_COVER_DAYS", "INBOUND_QTY_30D"), conditions=("OVERSTOCK_RISK",))),

    # Scale
    Shortcut("Winning Products (High Margin & Vel)", "OPPORTUNITY", SuggestionPatch(
        metrics=("CMA_PCT", "DAILY_VELOCITY"), conditions=("SCALE_CANDIDATE",))),

    # Cleanup
    Shortcut("Dormant (0 Sales This Month)", "HYGIENE", SuggestionPatch(
        metrics=("SALES_QTY",), conditions=("DORMANT_NO_SALES",), time_preset="THIS_MONTH")),
    Shortcut("High Returns (> 5%)", "HYGIENE", SuggestionPatch(
        metrics=("RETURN_RATE_PCT",), conditions=("HIGH_RETURN_RATE",))),
)
