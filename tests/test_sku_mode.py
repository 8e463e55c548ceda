import pytest

from sello_search import ChipSelectionState, ProductCatalog
from sello_search.config.engine_config import SkuConfig
from sello_search.suggestions import SkuMatcher


def typed(text):
    return ChipSelectionState.create(search_text=text)


# -------------------------------------------------
# Marker handling
# -------------------------------------------------

@pytest.mark.parametrize("text, expected", [
    ("sku:AB-100", (True, "AB-100")),
    ("SKU: ab-100", (True, "ab-100")),
    ("sku ab", (True, "ab")),
    ("  Sku:", (True, "")),
    ("skull", (False, "skull")),
    ("margin", (False, "margin")),
    (None, (False, "")),
])
def test_split_marker(text, expected):
    assert SkuMatcher().split_marker(text) == expected


# -------------------------------------------------
# Activation
# -------------------------------------------------

def test_catalog_hit_enters_sku_mode(engine, product_df):
    result = engine.suggest(typed("ab-100"), product_df)

    assert result.sku_mode
    assert [s.label for s in result.sku_suggestions] == ["AB-100", "AB-1001"]
    assert result.metric_suggestions == []
    assert result.condition_suggestions == []
    assert result.shortcut_suggestions == []
    assert result.platform_suggestions == []
    assert result.time_suggestions == []


def test_no_catalog_hit_keeps_standard_lists(engine, product_df):
    result = engine.suggest(typed("margin"), product_df)

    assert not result.sku_mode
    assert result.metric_suggestions


def test_single_character_does_not_probe_catalog(engine, product_df):
    result = engine.suggest(typed("a"), product_df)
    assert not result.sku_mode


def test_marker_enters_sku_mode_without_catalog(engine):
    result = engine.suggest(typed("sku: AB-100"))

    assert result.sku_mode
    assert result.sku_suggestions == []
    assert result.metric_suggestions == []


def test_bare_marker_gives_empty_sku_list(engine, product_df):
    result = engine.suggest(typed("sku:"), product_df)

    assert result.sku_mode
    assert result.sku_suggestions == []


def test_marker_allows_single_character_query(engine, product_df):
    result = engine.suggest(typed("sku:g"), product_df)
    assert [s.label for s in result.sku_suggestions] == ["GH-7", "AB-100", "AB-1001"]


# -------------------------------------------------
# Ranking
# -------------------------------------------------

def test_exact_then_prefix_then_substring(engine, product_df):
    result = engine.suggest(typed("sku: ab-1"), product_df)

    assert [(s.label, s.group) for s in result.sku_suggestions] == [
        ("AB-100", "sku_prefix"),
        ("AB-1001", "sku_prefix"),
        ("XAB-1", "sku_contains"),
    ]


def test_name_matches_rank_last(engine, product_df):
    result = engine.suggest(typed("garden"), product_df)

    assert [s.label for s in result.sku_suggestions] == ["AB-100", "AB-1001", "GH-7"]
    assert {s.group for s in result.sku_suggestions} == {"name_contains"}
    assert result.sku_suggestions[2].description == "Garden Hose Reel"


def test_sku_suggestions_are_deduplicated_case_insensitively(engine, product_df):
    result = engine.suggest(typed("sku:AB-100"), product_df)
    labels = [s.label for s in result.sku_suggestions]

    assert labels.count("AB-100") == 1
    assert "ab-100" not in labels


def test_sku_suggestion_shape(engine, product_df):
    first = engine.suggest(typed("gh-7"), product_df).sku_suggestions[0]

    assert first.id == "sku:GH-7"
    assert first.kind == "sku"
    assert first.group == "sku_exact"
    assert first.score == 4.0
    assert first.applies.to_dict() == {}


def test_sku_results_are_capped(engine):
    catalog = ProductCatalog.from_records(
        {"sku": f"BULK-{i:03d}", "name": "Bulk item"} for i in range(50)
    )
    result = engine.suggest(typed("bulk"), catalog)

    assert len(result.sku_suggestions) == 20


def test_custom_markers():
    matcher = SkuMatcher(SkuConfig(markers=("#",)))

    assert matcher.split_marker("#AB") == (True, "AB")
    assert matcher.split_marker("sku:AB") == (False, "sku:AB")


def test_catalog_may_be_a_list_of_records(engine):
    result = engine.suggest(typed("zx-9"), [{"sku": "ZX-9", "name": "Widget"}])
    assert [s.label for s in result.sku_suggestions] == ["ZX-9"]
