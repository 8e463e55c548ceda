from .parser import IntentParser, parse
from .rules import INTENT_RULES, IntentRule

__all__ = [
    "IntentParser",
    "IntentRule",
    "INTENT_RULES",
    "parse",
]
