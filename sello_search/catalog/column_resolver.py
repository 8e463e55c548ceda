import re
from difflib import get_close_matches
from typing import Dict, List, Optional

import pandas as pd


# =====================================================
# CATALOG COLUMN SYNONYMS
# =====================================================
# Product exports name the same columns differently per source.
# Only these two keys are ever resolved.

CATALOG_COLUMN_MAP: Dict[str, List[str]] = {
    "sku": ["sku", "seller_sku", "item_sku", "product_sku", "msku", "product_code"],
    "name": ["name", "product_name", "title", "product_title", "item_name"],
}

_SEPARATORS = re.compile(r"[\s\-./]+")


def normalize_header(column: str) -> str:
    """
    "Seller SKU" -> "seller_sku", " Product-Title " -> "product_title".
    """
    return _SEPARATORS.sub("_", column.strip().lower()).strip("_")


def resolve_column(
    df: pd.DataFrame,
    catalog_key: str,
    cutoff: float = 0.8
) -> Optional[str]:
    """
    Find the dataframe column holding a catalog field ("sku" or "name").

    Headers are normalized first, then:
    1. the key itself or one of its synonyms, in synonym order
    2. fuzzy match against the synonyms (typos like "prodcut_name")

    Keys outside CATALOG_COLUMN_MAP resolve to None. The first
    matching column wins when several headers normalize the same way.
    """
    synonyms = CATALOG_COLUMN_MAP.get(catalog_key)
    if df is None or not synonyms:
        return None

    headers: Dict[str, str] = {}
    for column in df.columns:
        if isinstance(column, str):
            headers.setdefault(normalize_header(column), column)

    # -----------------------------
    # 1. Synonyms (key first)
    # -----------------------------
    for synonym in synonyms:
        if synonym in headers:
            return headers[synonym]

    # -----------------------------
    # 2. Fuzzy, against synonyms only
    # -----------------------------
    for header, column in headers.items():
        if get_close_matches(header, synonyms, n=1, cutoff=cutoff):
            return column

    return None
