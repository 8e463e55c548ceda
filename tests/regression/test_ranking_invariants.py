import itertools

import pytest

from sello_search import (
    ChipSelectionState,
    ParseContext,
    QueryFilter,
    QuerySort,
    SuggestionEngine,
    apply_suggestion,
    default_vocabulary,
    parse,
)


# -------------------------------------------------
# Fixtures
# -------------------------------------------------

@pytest.fixture(scope="module")
def engine():
    return SuggestionEngine(vocabulary=default_vocabulary())


def sample_states():
    """
    A spread of selections: every single metric and condition, pairs
    of conditions, each platform and time preset, plus typed text.
    """
    vocab = default_vocabulary()
    states = [ChipSelectionState()]

    states += [ChipSelectionState.create(metrics=[m]) for m in vocab.metric_ids]
    states += [ChipSelectionState.create(conditions=[c]) for c in vocab.condition_ids]
    states += [
        ChipSelectionState.create(conditions=pair)
        for pair in itertools.combinations(vocab.condition_ids, 2)
    ]
    states += [
        ChipSelectionState.create(metrics=["CMA_PCT"], platforms=[p], time_preset=t)
        for p in vocab.platform_ids
        for t in vocab.time_preset_ids
    ]
    states += [
        ChipSelectionState.create(metrics=["STOCK_COVER_DAYS"], search_text=text)
        for text in ["", "risk", "stock", "high", "margin", "loss", "%"]
    ]
    return states


# -------------------------------------------------
# Engine invariants
# -------------------------------------------------

def test_engine_is_idempotent(engine):
    for state in sample_states():
        assert engine.suggest(state) == engine.suggest(state)


def test_selected_chips_never_come_back(engine):
    for state in sample_states():
        result = engine.suggest(state)

        assert not {s.id for s in result.metric_suggestions} & state.metrics
        assert not {s.id for s in result.condition_suggestions} & state.conditions


def test_lists_are_sorted_positive_and_capped(engine):
    for state in sample_states():
        result = engine.suggest(state)

        for suggestions, cap in [
            (result.metric_suggestions, 8),
            (result.condition_suggestions, 10),
            (result.shortcut_suggestions, 6),
        ]:
            assert len(suggestions) <= cap
            assert all(s.score > 0 for s in suggestions)
            assert [s.score for s in suggestions] == sorted((s.score for s in suggestions), reverse=True)


def test_label_match_outranks_unrelated_candidate_of_same_priority(engine):
    # both RISK; only one mentions "returns"
    result = engine.suggest(ChipSelectionState.create(search_text="returns"))
    ranked = [s.id for s in result.condition_suggestions]

    assert ranked[0] == "HIGH_RETURN_RATE"
    assert "NEGATIVE_LOSS" not in ranked


def test_unknown_ids_in_selection_are_ignored(engine):
    state = ChipSelectionState.create(
        metrics=["NOT_A_METRIC"],
        conditions=["NOT_A_CONDITION"],
        platforms=["NOT_A_PLATFORM"],
        time_preset="NOT_A_PRESET",
    )
    result = engine.suggest(state)

    assert [s.id for s in result.condition_suggestions][:5] == [
        "NEGATIVE_LOSS",
        "BELOW_TARGET",
        "HIGH_AD_DEPENDENCY",
        "HIGH_RETURN_RATE",
        "STOCKOUT_RISK",
    ]


def test_accepting_suggestions_walks_to_a_fixed_point(engine):
    state = ChipSelectionState()

    for _ in range(40):
        result = engine.suggest(state)
        if not result.condition_suggestions:
            break
        state = apply_suggestion(state, result.condition_suggestions[0].applies)

    assert state.conditions == set(default_vocabulary().condition_ids)
    assert engine.suggest(state).condition_suggestions == []


# -------------------------------------------------
# Parser invariants
# -------------------------------------------------

PARSER_TEXTS = [
    "",
    "high ad dependency",
    "low margin last 7 days",
    "stockout risk this month",
    "top 10 products table",
    "refunds",
    "!!!",
]


@pytest.mark.parametrize("text", PARSER_TEXTS)
def test_parser_is_deterministic(text):
    ctx = ParseContext(selected_platforms=("EBAY",), time_preset=None)
    assert parse(text, ctx) == parse(text, ctx)


@pytest.mark.parametrize("text", PARSER_TEXTS)
def test_parse_returns_fresh_plans(text):
    first = parse(text)
    first.filters.append(QueryFilter("X", "EQ", 1))

    assert QueryFilter("X", "EQ", 1) not in parse(text).filters


# -------------------------------------------------
# Worked examples
# -------------------------------------------------

def test_example_a_high_ad_dependency():
    plan = parse("high ad dependency")

    assert plan.primary_metric == "TACOS_PCT"
    assert QueryFilter("ADS_SPEND", "GT", 0) in plan.filters
    assert QueryFilter("TACOS_PCT", "GTE", 15) in plan.filters


def test_example_b_very_high_ad_dependency():
    plan = parse("very high ad dependency")

    assert plan.primary_metric == "TACOS_PCT"
    assert QueryFilter("TACOS_PCT", "GTE", 25) in plan.filters


def test_example_c_stockout():
    plan = parse("stockout")

    assert plan.group_by == "SKU"
    assert plan.filters == [QueryFilter("STOCK_LEVEL", "LTE", 0)]
    assert plan.sort == QuerySort("DAILY_VELOCITY", "DESC")


def test_example_d_low_stock():
    plan = parse("low stock")

    assert plan.filters == [
        QueryFilter("STOCK_COVER_DAYS", "LT", 14),
        QueryFilter("STOCK_LEVEL", "GT", 0),
    ]
    assert plan.sort == QuerySort("STOCK_COVER_DAYS", "ASC")


def test_example_e_paired_conditions_lead(engine):
    result = engine.suggest(ChipSelectionState.create(metrics=["CMA_PCT"]))
    by_id = {s.id: s.score for s in result.condition_suggestions}

    for paired in ("NEGATIVE_LOSS", "BELOW_TARGET", "HIGH_AD_DEPENDENCY"):
        for unpaired in ("HIGH_RETURN_RATE", "STOCKOUT_RISK"):
            assert by_id[paired] - by_id[unpaired] >= 200


def test_example_f_selected_condition_stays_hidden(engine):
    states = [
        ChipSelectionState.create(conditions=["STOCKOUT_RISK"]),
        ChipSelectionState.create(
            conditions=["STOCKOUT_RISK"],
            metrics=["STOCK_COVER_DAYS", "STOCK_LEVEL", "INBOUND_QTY_30D"],
            platforms=["AMAZON_UK_FBA"],
            time_preset="LAST_7_DAYS",
            search_text="stockout risk",
        ),
    ]

    for state in states:
        ids = [s.id for s in engine.suggest(state).condition_suggestions]
        assert "STOCKOUT_RISK" not in ids
