import logging

import pytest

from sello_search.core.decision import IntentDecision
from sello_search.observability import (
    LoggingDecisionObserver,
    MemoryDecisionObserver,
    build_observers,
)


def make_decision(intent="inventory"):
    return IntentDecision(
        decision_type="intent_resolution",
        text="low stock",
        selected_intent=intent,
        rules_applied=["time:default", f"intent:{intent}"],
        signals={},
    )


def test_memory_observer_keeps_most_recent():
    observer = MemoryDecisionObserver(max_size=2)

    for intent in ["a", "b", "c"]:
        observer.record(make_decision(intent))

    assert [d["selected_intent"] for d in observer.decisions] == ["b", "c"]


def test_memory_observer_stores_plain_dicts():
    observer = MemoryDecisionObserver()
    observer.record(make_decision())

    stored = observer.decisions[0]
    assert stored["rules_applied"] == ["time:default", "intent:inventory"]
    assert stored["timestamp"]


def test_logging_observer(caplog):
    observer = LoggingDecisionObserver()

    with caplog.at_level(logging.INFO, logger="sello_search.decisions"):
        observer.record(make_decision())

    assert "intent=inventory" in caplog.text
    assert "low stock" in caplog.text


def test_build_observers_from_config():
    observers = build_observers({
        "observers": [
            {"type": "logging", "logger": "audit"},
            {"type": "memory", "max_size": 5},
        ]
    })

    assert isinstance(observers[0], LoggingDecisionObserver)
    assert observers[0].logger.name == "audit"
    assert isinstance(observers[1], MemoryDecisionObserver)
    assert observers[1].max_size == 5


def test_no_observers_configured():
    assert build_observers({}) == []


def test_unknown_observer_type_raises():
    with pytest.raises(ValueError, match="file"):
        build_observers({"observers": [{"type": "file"}]})
