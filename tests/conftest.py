import pandas as pd
import pytest

from sello_search import (
    ChipSelectionState,
    IntentParser,
    SuggestionEngine,
    default_vocabulary,
)


@pytest.fixture
def vocabulary():
    return default_vocabulary()


@pytest.fixture
def parser(vocabulary):
    return IntentParser(vocabulary=vocabulary)


@pytest.fixture
def engine(vocabulary):
    return SuggestionEngine(vocabulary=vocabulary)


@pytest.fixture
def empty_state():
    return ChipSelectionState()


@pytest.fixture
def product_df():
    """
    Small product export. Column names differ from the canonical
    sku / name on purpose.
    """
    return pd.DataFrame({
        "SKU": ["AB-100", "AB-1001", "XAB-1", "GH-7", "ab-100", None],
        "Title": [
            "Oak Garden Bench",
            "Oak Garden Bench XL",
            "Planter Box",
            "Garden Hose Reel",
            "Oak Garden Bench (duplicate row)",
            "Orphan row",
        ],
        "stockLevel": [12, 0, 40, 5, 12, 1],
    })
