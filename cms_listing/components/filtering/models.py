"""
Filtering component models.

FilterState is immutable: every event produces a new state, and the
evaluation is a pure function of (state, candidates).
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass

from cms_listing.components.binding import FragmentAttributes

# --- State ---


@dataclass(frozen=True)
class FilterState:
    """Client-side filter state; all empty means "show everything"."""

    selected_grade: str = ""
    selected_topic: str = ""
    search_query: str = ""


INITIAL_STATE = FilterState()


# --- Events ---


@dataclass(frozen=True)
class GradeSelected:
    value: str


@dataclass(frozen=True)
class TopicSelected:
    value: str


@dataclass(frozen=True)
class SearchChanged:
    value: str


@dataclass(frozen=True)
class FiltersCleared:
    pass


FilterEvent = GradeSelected | TopicSelected | SearchChanged | FiltersCleared


# --- Candidates ---


@dataclass(frozen=True)
class FilterCandidate:
    """Filter-relevant attributes of one rendered post fragment."""

    grade: str = ""
    topic: str = ""
    title: str = ""
    description: str = ""

    @classmethod
    def from_attributes(
        cls,
        values: Mapping[str, str],
        attributes: FragmentAttributes,
    ) -> FilterCandidate:
        return cls(
            grade=values.get(attributes.grade) or "",
            topic=values.get(attributes.topic) or "",
            title=values.get(attributes.title) or "",
            description=values.get(attributes.description) or "",
        )


# --- Output ---


@dataclass(frozen=True)
class FilterOutcome:
    """Result of one evaluation pass."""

    visible: tuple[bool, ...]
    results_count: int

    @property
    def show_empty(self) -> bool:
        return self.results_count == 0


# --- Script configuration ---


@dataclass(frozen=True)
class FilterSelectors:
    """Selectors the emitted script binds to."""

    item: str = '[role="listitem"]'
    grade_input: str = '.grades-collection-list input[type="radio"]'
    topic_input: str = '.topics-collection-list input[type="radio"]'
    search_input: str = '[fs-cmsfilter-search], input[type="search"]'
    clear_button: str = '[fs-cmsfilter-element="clear"]'
    results_count: str = '[fs-cmsfilter-element="results-count"]'
    empty_results: str = '[fs-cmsfilter-element="empty"]'


DEFAULT_FILTER_SELECTORS = FilterSelectors()

DEFAULT_SCROLL_DELAY_MS = 100
