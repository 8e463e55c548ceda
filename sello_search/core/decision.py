from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional


@dataclass
class IntentDecision:
    """
    Why the parser produced the plan it did.

    `selected_intent` is the name of the intent rule that fired, or
    "overview" when none did.
    """
    decision_type: str
    text: str
    selected_intent: str
    rules_applied: List[str]
    signals: Dict[str, Any]

    plan: Optional[Dict[str, Any]] = None

    timestamp: str = field(
        default_factory=lambda: datetime.now(timezone.utc).isoformat()
    )


def decision_to_dict(decision: IntentDecision) -> dict:
    return {
        "decision_type": decision.decision_type,
        "text": decision.text,
        "selected_intent": decision.selected_intent,
        "rules_applied": decision.rules_applied,
        "signals": decision.signals,
        "plan": decision.plan,
        "timestamp": decision.timestamp,
    }
