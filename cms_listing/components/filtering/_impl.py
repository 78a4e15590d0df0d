"""
Filter state machine.

The emitted browser script implements exactly these rules; keep both in
step when changing either.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import replace

from .models import (
    INITIAL_STATE,
    FilterCandidate,
    FilterEvent,
    FilterOutcome,
    FilterState,
    FiltersCleared,
    GradeSelected,
    SearchChanged,
    TopicSelected,
)


def apply_event(state: FilterState, event: FilterEvent) -> FilterState:
    """Return the state after one user event."""
    if isinstance(event, GradeSelected):
        return replace(state, selected_grade=event.value)
    if isinstance(event, TopicSelected):
        return replace(state, selected_topic=event.value)
    if isinstance(event, SearchChanged):
        return replace(state, search_query=event.value)
    if isinstance(event, FiltersCleared):
        return INITIAL_STATE
    raise TypeError(f"Unknown filter event: {type(event)}")


def normalize_query(query: str) -> str:
    return query.lower()


def is_visible(state: FilterState, candidate: FilterCandidate) -> bool:
    """Conjunction of the grade, topic and search predicates."""
    if state.selected_grade and candidate.grade != state.selected_grade:
        return False
    if state.selected_topic and candidate.topic != state.selected_topic:
        return False
    query = normalize_query(state.search_query)
    if query and query not in f"{candidate.title} {candidate.description}":
        return False
    return True


def evaluate(state: FilterState, candidates: Iterable[FilterCandidate]) -> FilterOutcome:
    """Visibility of every candidate plus the resulting count."""
    visible = tuple(is_visible(state, candidate) for candidate in candidates)
    return FilterOutcome(visible=visible, results_count=sum(visible))
