import logging

import pandas as pd

from sello_search.catalog import ProductCatalog
from sello_search.catalog.column_resolver import normalize_header, resolve_column


def test_columns_resolve_through_synonyms(product_df):
    assert resolve_column(product_df, "sku") == "SKU"
    assert resolve_column(product_df, "name") == "Title"


def test_seller_export_column_names():
    df = pd.DataFrame({"seller_sku": ["A1"], "product_name": ["Chair"]})
    assert resolve_column(df, "sku") == "seller_sku"
    assert resolve_column(df, "name") == "product_name"


def test_headers_are_normalized_before_matching():
    df = pd.DataFrame({"Seller SKU": ["A1"], " Product-Title ": ["Chair"]})

    assert normalize_header("Seller SKU") == "seller_sku"
    assert resolve_column(df, "sku") == "Seller SKU"
    assert resolve_column(df, "name") == " Product-Title "


def test_misspelt_header_resolves_by_fuzzy_match():
    df = pd.DataFrame({"prodcut_name": ["Chair"], "sku": ["A1"]})
    assert resolve_column(df, "name") == "prodcut_name"


def test_only_catalog_keys_resolve():
    df = pd.DataFrame({"sku": ["A1"], "price": [9.99]})

    assert resolve_column(df, "price") is None
    assert resolve_column(df, "stock") is None


def test_rows_without_sku_are_dropped(product_df):
    catalog = ProductCatalog(product_df)
    assert len(catalog) == 5


def test_blank_skus_are_dropped():
    catalog = ProductCatalog.from_records([
        {"sku": "  ", "name": "Blank"},
        {"sku": " K-1 ", "name": "Kettle"},
    ])

    assert len(catalog) == 1
    assert catalog.match("k-1")[0].sku == "K-1"


def test_missing_sku_column_gives_empty_catalog(caplog):
    with caplog.at_level(logging.WARNING):
        catalog = ProductCatalog(pd.DataFrame({"colour": ["red"], "weight": [2]}))

    assert len(catalog) == 0
    assert catalog.match("red") == []
    assert "no SKU column" in caplog.text


def test_missing_name_column_still_matches_skus():
    catalog = ProductCatalog.from_records([{"sku": "LAMP-1"}])
    match = catalog.match("lamp")[0]

    assert match.sku == "LAMP-1"
    assert match.name == ""
    assert match.match_kind == "sku_prefix"


def test_match_is_literal_not_regex():
    catalog = ProductCatalog.from_records([
        {"sku": "A.B", "name": "Dotted"},
        {"sku": "AXB", "name": "Plain"},
    ])
    assert [m.sku for m in catalog.match("a.b")] == ["A.B"]


def test_empty_query_matches_nothing(product_df):
    catalog = ProductCatalog(product_df)
    assert catalog.match("") == []
    assert catalog.match("   ") == []


def test_match_limit(product_df):
    catalog = ProductCatalog(product_df)
    assert len(catalog.match("oak", limit=1)) == 1


def test_catalog_order_breaks_ties(product_df):
    catalog = ProductCatalog(product_df)
    assert [m.sku for m in catalog.match("oak")] == ["AB-100", "AB-1001"]


def test_from_csv_keeps_leading_zeros(tmp_path):
    path = tmp_path / "products.csv"
    path.write_text("sku,name\n00123,Mug\n", encoding="utf-8")

    catalog = ProductCatalog.from_csv(path)

    assert catalog.match("00123")[0].match_kind == "sku_exact"


def test_coerce():
    catalog = ProductCatalog.from_records([{"sku": "Q-1"}])

    assert ProductCatalog.coerce(None) is None
    assert ProductCatalog.coerce(catalog) is catalog
    assert len(ProductCatalog.coerce(pd.DataFrame({"sku": ["Q-2"]}))) == 1
