"""
Chip selection transitions.

The presentation layer owns the selection; these helpers are the
only ways it changes: accept a suggestion, or clear everything.
"""

from typing import Optional

from .contracts import ChipSelectionState, SuggestionPatch


def apply_suggestion(
    state: ChipSelectionState,
    applies: Optional[SuggestionPatch],
) -> ChipSelectionState:
    """
    Merge a suggestion's patch into the selection.

    Sets are unioned, a patch time preset replaces the current one,
    and the search text is carried over untouched.
    """
    if applies is None:
        return state

    return ChipSelectionState(
        metrics=state.metrics | frozenset(applies.metrics),
        conditions=state.conditions | frozenset(applies.conditions),
        platforms=state.platforms | frozenset(applies.platforms),
        time_preset=applies.time_preset or state.time_preset,
        search_text=state.search_text,
    )


def clear_selection() -> ChipSelectionState:
    return ChipSelectionState()
