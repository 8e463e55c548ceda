from .hooks import DecisionObserver, LoggingDecisionObserver, MemoryDecisionObserver
from .factory import build_observers

__all__ = [
    "DecisionObserver",
    "LoggingDecisionObserver",
    "MemoryDecisionObserver",
    "build_observers",
]
