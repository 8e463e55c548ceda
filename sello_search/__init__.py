"""
sello-search

Intent resolution and suggestion ranking for the chip-driven
analytics search box.

Two entry points:
- parse(text, context) -> QueryPlan for the query executor
- suggest(state, catalog) -> ranked next-step chip suggestions
"""

from .__version__ import __version__

from .core import (
    ChipSelectionState,
    ParseContext,
    QueryFilter,
    QueryPlan,
    QuerySort,
    Suggestion,
    SuggestionPatch,
    SuggestionResult,
    apply_suggestion,
    clear_selection,
    resolve_time_window,
)
from .vocabulary import Vocabulary, check_vocabulary, default_vocabulary
from .intent import IntentParser, parse
from .suggestions import SuggestionEngine, suggest
from .catalog import ProductCatalog

__all__ = [
    "__version__",
    "ChipSelectionState",
    "ParseContext",
    "QueryFilter",
    "QueryPlan",
    "QuerySort",
    "Suggestion",
    "SuggestionPatch",
    "SuggestionResult",
    "apply_suggestion",
    "clear_selection",
    "resolve_time_window",
    "Vocabulary",
    "check_vocabulary",
    "default_vocabulary",
    "IntentParser",
    "parse",
    "SuggestionEngine",
    "suggest",
    "ProductCatalog",
]
