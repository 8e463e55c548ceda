from .engine import SuggestionEngine, suggest
from .sku import SkuMatcher

__all__ = ["SuggestionEngine", "SkuMatcher", "suggest"]
