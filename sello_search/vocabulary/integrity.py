"""
Vocabulary integrity rules.

Each rule returns a list of human-readable problems (empty when the
rule holds). Integrity is checked when a vocabulary is built or
loaded and in tests, never while ranking.
"""

from collections import Counter
from dataclasses import dataclass
from typing import List


@dataclass
class VocabularyReport:
    status: str  # ok | broken
    reasons: List[str]

    @property
    def ok(self) -> bool:
        return self.status == "ok"


# -------------------------------------------------
# RULES
# -------------------------------------------------

def check_unique_ids(vocab) -> List[str]:
    problems = []
    for kind, ids in (
        ("metric", vocab.metric_ids),
        ("condition", vocab.condition_ids),
        ("platform", vocab.platform_ids),
        ("time preset", vocab.time_preset_ids),
    ):
        for item_id, count in Counter(ids).items():
            if count > 1:
                problems.append(f"duplicate_{kind.replace(' ', '_')}_id:{item_id}")
    return problems


def check_pairings_reference_known_ids(vocab) -> List[str]:
    problems = []
    metrics = set(vocab.metric_ids)
    conditions = set(vocab.condition_ids)
    for metric_id, paired in vocab.smart_pairings.items():
        if metric_id not in metrics:
            problems.append(f"pairing_for_unknown_metric:{metric_id}")
        for condition_id in paired:
            if condition_id not in conditions:
                problems.append(f"pairing_to_unknown_condition:{metric_id}->{condition_id}")
    return problems


def check_boosts_reference_known_ids(vocab) -> List[str]:
    problems = []
    platforms = set(vocab.platform_ids)
    conditions = set(vocab.condition_ids)
    for platform_id, boosted in vocab.platform_boosts.items():
        if platform_id not in platforms:
            problems.append(f"boost_for_unknown_platform:{platform_id}")
        for condition_id in boosted:
            if condition_id not in conditions:
                problems.append(f"boost_to_unknown_condition:{platform_id}->{condition_id}")
    return problems


def check_platform_mapping_complete(vocab) -> List[str]:
    problems = []
    platforms = set(vocab.platform_ids)
    for platform_id in vocab.platform_ids:
        if not vocab.platform_mapping.get(platform_id):
            problems.append(f"platform_without_mapping:{platform_id}")
    for platform_id in vocab.platform_mapping:
        if platform_id not in platforms:
            problems.append(f"mapping_for_unknown_platform:{platform_id}")
    for platform_id in vocab.ad_capable_platforms:
        if platform_id not in platforms:
            problems.append(f"unknown_ad_capable_platform:{platform_id}")
    return problems


def check_shortcuts_reference_known_ids(vocab) -> List[str]:
    problems = []
    metrics = set(vocab.metric_ids)
    conditions = set(vocab.condition_ids)
    platforms = set(vocab.platform_ids)
    presets = set(vocab.time_preset_ids)
    for shortcut in vocab.shortcuts:
        patch = shortcut.applies
        unknown = (
            [m for m in patch.metrics if m not in metrics]
            + [c for c in patch.conditions if c not in conditions]
            + [p for p in patch.platforms if p not in platforms]
        )
        if patch.time_preset and patch.time_preset not in presets:
            unknown.append(patch.time_preset)
        for item_id in unknown:
            problems.append(f"shortcut_references_unknown_id:{shortcut.label}->{item_id}")
    return problems


RULES = [
    check_unique_ids,
    check_pairings_reference_known_ids,
    check_boosts_reference_known_ids,
    check_platform_mapping_complete,
    check_shortcuts_reference_known_ids,
]


def check_vocabulary(vocab) -> VocabularyReport:
    reasons = []
    for rule in RULES:
        reasons.extend(rule(vocab))

    return VocabularyReport(
        status="broken" if reasons else "ok",
        reasons=reasons,
    )
