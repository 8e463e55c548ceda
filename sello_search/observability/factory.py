from sello_search.observability.hooks import (
    DecisionObserver,
    LoggingDecisionObserver,
    MemoryDecisionObserver,
)


def build_observers(config: dict) -> list[DecisionObserver]:
    observers = []

    for obs in config.get("observers", []):
        if obs["type"] == "logging":
            observers.append(
                LoggingDecisionObserver(logger_name=obs.get("logger", "sello_search.decisions"))
            )

        elif obs["type"] == "memory":
            observers.append(MemoryDecisionObserver(max_size=obs.get("max_size", 100)))

        else:
            raise ValueError(f"Unknown observer type: {obs['type']}")

    return observers
