DEFAULT_CONFIG = {
    # -----------------------------
    # SUGGESTION SCORING
    # -----------------------------
    "scoring": {
        "priority_weights": {
            "RISK": 100,
            "DECLINE": 80,
            "INVENTORY": 60,
            "OPPORTUNITY": 40,
            "HYGIENE": 20,
        },
        "exact_match_boost": 3000,
        "prefix_match_boost": 2000,
        "partial_match_boost": 1000,
        "description_match_boost": 500,
        "pairing_boost": 200,
        "platform_boost": 100,
        "time_boost": 50,
        "platform_base_score": 30,
        "time_base_score": 35,
        "metric_limit": 8,
        "condition_limit": 10,
        "shortcut_limit": 6,
    },

    # -----------------------------
    # INTENT PARSER
    # -----------------------------
    "parser": {
        "default_limit": 50,
        "default_time_preset": "LAST_30_DAYS",
    },

    # -----------------------------
    # SKU DIRECT MATCH
    # -----------------------------
    "sku": {
        "markers": ["sku:", "sku "],
        "min_query_length": 2,
        "max_results": 20,
    },

    # -----------------------------
    # VOCABULARY (OPTIONAL)
    # -----------------------------
    # path: YAML file with an alternate vocabulary; None = built-in tables
    "vocabulary": {
        "path": None,
    },

    # -----------------------------
    # DECISION OBSERVERS (OPTIONAL)
    # -----------------------------
    "observers": [],
}
