import logging
from abc import ABC, abstractmethod
from typing import List

from sello_search.core.decision import IntentDecision, decision_to_dict


class DecisionObserver(ABC):
    @abstractmethod
    def record(self, decision: IntentDecision):
        pass


class LoggingDecisionObserver(DecisionObserver):
    def __init__(self, logger_name: str = "sello_search.decisions", level: int = logging.INFO):
        self.logger = logging.getLogger(logger_name)
        self.level = level

    def record(self, decision: IntentDecision):
        self.logger.log(
            self.level,
            "intent=%s rules=%s text=%r",
            decision.selected_intent,
            ",".join(decision.rules_applied),
            decision.text,
        )


class MemoryDecisionObserver(DecisionObserver):
    """
    Keeps decisions in memory, most recent last. Bounded by `max_size`.
    """

    def __init__(self, max_size: int = 100):
        self.max_size = max_size
        self.decisions: List[dict] = []

    def record(self, decision: IntentDecision):
        self.decisions.append(decision_to_dict(decision))
        if len(self.decisions) > self.max_size:
            del self.decisions[: len(self.decisions) - self.max_size]
